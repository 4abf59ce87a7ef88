"""Batch resolution of locator manifests."""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import yaml
from pydantic import ValidationError

from locid.config import LocatorManifest, LocatorNode, LocatorProps
from locid.core.errors import InvalidInput
from locid.core.props import build_locator_props
from locid.utils import load_yaml_mapping


@dataclass
class ResolvedLocator:
    """A manifest entry after its identifier has been built."""

    identifier: str
    props: LocatorProps
    depth: int = 0
    parent: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "identifier": self.identifier,
            "parent": self.parent,
            "depth": self.depth,
            "props": self.props.as_props(),
        }


def load_manifest(path: Path) -> LocatorManifest:
    """Load and validate a YAML locator manifest."""
    try:
        raw = load_yaml_mapping(path)
    except yaml.YAMLError as exc:
        raise InvalidInput(f"Manifest {path} is not valid YAML: {exc}") from exc
    except ValueError as exc:
        raise InvalidInput(str(exc)) from exc
    if not raw:
        logging.info("Manifest %s is empty.", path)
    try:
        return LocatorManifest.model_validate(raw)
    except ValidationError as exc:
        raise InvalidInput(f"Invalid manifest {path}: {exc}") from exc


def _walk(
    nodes: Iterable[LocatorNode],
    *,
    parent: Optional[str],
    depth: int,
    resolved: List[ResolvedLocator],
) -> None:
    for node in nodes:
        naming = node
        if parent is not None and node.parent_id is None:
            naming = node.model_copy(update={"parent_id": parent})
        props = build_locator_props(naming)
        logging.debug("Resolved locator %s (depth %d)", props.test_id, depth)
        resolved.append(
            ResolvedLocator(
                identifier=props.test_id,
                props=props,
                depth=depth,
                parent=naming.parent_id,
            )
        )
        _walk(node.children, parent=props.test_id, depth=depth + 1, resolved=resolved)


def resolve_manifest(manifest: LocatorManifest) -> List[ResolvedLocator]:
    """Resolve every locator in the manifest, depth-first in document order.

    Children without an explicit ``parentId`` inherit the identifier of the
    node they are nested under.
    """
    resolved: List[ResolvedLocator] = []
    _walk(manifest.locators, parent=None, depth=0, resolved=resolved)
    logging.info(
        "Resolved %d locator(s) from manifest %s",
        len(resolved),
        manifest.name or "<unnamed>",
    )
    return resolved


def find_duplicates(resolved: Iterable[ResolvedLocator]) -> Dict[str, int]:
    """Return identifiers that occur more than once, with their counts."""
    counts = Counter(entry.identifier for entry in resolved)
    return {identifier: count for identifier, count in counts.items() if count > 1}


__all__ = ["ResolvedLocator", "find_duplicates", "load_manifest", "resolve_manifest"]
