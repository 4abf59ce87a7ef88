"""Command line interface for locid."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict

import click

from locid.core import (
    InvalidInput,
    build_identifier,
    build_locator_props,
    find_duplicates,
    load_manifest,
    resolve_manifest,
)
from locid.utils import save_json


def _configure_logging(log_level: str) -> None:
    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.WARNING))


def _log_level_option(func: Callable[..., Any]) -> Callable[..., Any]:
    return click.option(
        "--log-level",
        type=click.Choice(["warning", "info", "debug"], case_sensitive=False),
        default="warning",
        help="Set logging verbosity (warning/info/debug).",
    )(func)


def _naming_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the segment options shared by ``build`` and ``props``."""

    options = [
        click.option("--parent-id", type=str, default=None, help="Identifier of the enclosing component."),
        click.option("--base-id", type=str, required=True, help="Stable name of the component type."),
        click.option("--index", type=int, default=None, help="Position among homogeneous siblings."),
        click.option("--id", "sub_id", type=str, default=None, help="Element within the component."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _naming_from_options(
    parent_id: str | None, base_id: str, index: int | None, sub_id: str | None
) -> Dict[str, Any]:
    return {"parent_id": parent_id, "base_id": base_id, "index": index, "id": sub_id}


@click.group()
def app() -> None:
    """Deterministic kebab-case identifiers for UI test locators."""


@app.command()
@_naming_options
@_log_level_option
def build(parent_id: str | None, base_id: str, index: int | None, sub_id: str | None, log_level: str) -> None:
    """Print the identifier for the given segments."""
    _configure_logging(log_level)
    try:
        identifier = build_identifier(_naming_from_options(parent_id, base_id, index, sub_id))
    except InvalidInput as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(identifier)


@app.command()
@_naming_options
@_log_level_option
def props(parent_id: str | None, base_id: str, index: int | None, sub_id: str | None, log_level: str) -> None:
    """Print the locator props (testID/accessibilityLabel) as JSON."""
    _configure_logging(log_level)
    try:
        locator_props = build_locator_props(_naming_from_options(parent_id, base_id, index, sub_id))
    except InvalidInput as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(json.dumps(locator_props.as_props(), indent=2))


@app.command()
@click.argument("manifest", type=click.Path(path_type=Path, exists=True, dir_okay=False))
@click.option(
    "--output",
    type=click.Path(path_type=Path, dir_okay=False, writable=True),
    default=None,
    help="Write resolved locators to this JSON file instead of stdout.",
)
@click.option(
    "--strict/--no-strict",
    default=False,
    help="Fail when two locators resolve to the same identifier.",
)
@_log_level_option
def batch(manifest: Path, output: Path | None, strict: bool, log_level: str) -> None:
    """Resolve every locator described in a YAML manifest."""
    _configure_logging(log_level)
    try:
        resolved = resolve_manifest(load_manifest(manifest))
    except InvalidInput as exc:
        raise click.ClickException(str(exc)) from exc

    duplicates = find_duplicates(resolved)
    for identifier, count in sorted(duplicates.items()):
        logging.warning("Identifier '%s' is used by %d locators.", identifier, count)
    if duplicates and strict:
        raise click.ClickException(
            f"Duplicate identifiers in {manifest}: {', '.join(sorted(duplicates))}"
        )

    payload = [entry.to_dict() for entry in resolved]
    if output is not None:
        save_json(payload, output)
        click.echo(f"Wrote {len(payload)} locator(s) to {output}")
    else:
        click.echo(json.dumps(payload, indent=2))


@app.command()
def version() -> None:
    """Print locid version."""
    from locid import __version__

    click.echo(__version__)


if __name__ == "__main__":
    app(prog_name="locid")
