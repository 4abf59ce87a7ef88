"""Tests for the click command line interface."""

from __future__ import annotations

import json
import textwrap
from pathlib import Path

from click.testing import CliRunner

from locid import __version__
from locid.cli import app


def test_build_prints_identifier():
    runner = CliRunner()
    result = runner.invoke(
        app, ["build", "--parent-id", "parent", "--base-id", "base", "--index", "0", "--id", "id"]
    )
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "parent-base-0-id"


def test_build_rejects_empty_base():
    runner = CliRunner()
    result = runner.invoke(app, ["build", "--base-id", ""])
    assert result.exit_code == 1
    assert "base_id" in result.output


def test_build_requires_base():
    runner = CliRunner()
    result = runner.invoke(app, ["build", "--index", "2"])
    assert result.exit_code == 2


def test_props_prints_json():
    runner = CliRunner()
    result = runner.invoke(app, ["props", "--base-id", "Market Screen", "--index", "2"])
    assert result.exit_code == 0, result.output
    assert json.loads(result.output) == {
        "testID": "market-screen-2",
        "accessibilityLabel": "market-screen-2",
    }


def _manifest(tmp_path: Path, body: str) -> Path:
    path = tmp_path / "locators.yaml"
    path.write_text(textwrap.dedent(body), encoding="utf-8")
    return path


def test_batch_writes_output_file(tmp_path: Path):
    manifest = _manifest(
        tmp_path,
        """\
        locators:
          - baseId: market-screen
            children:
              - baseId: stock-item
                index: 0
        """,
    )
    output = tmp_path / "out" / "locators.json"
    runner = CliRunner()
    result = runner.invoke(app, ["batch", str(manifest), "--output", str(output)])
    assert result.exit_code == 0, result.output
    assert "Wrote 2 locator(s)" in result.output

    payload = json.loads(output.read_text(encoding="utf-8"))
    assert [entry["identifier"] for entry in payload] == [
        "market-screen",
        "market-screen-stock-item-0",
    ]


def test_batch_strict_fails_on_duplicates(tmp_path: Path):
    manifest = _manifest(
        tmp_path,
        """\
        locators:
          - baseId: row
          - baseId: Row
        """,
    )
    runner = CliRunner()
    lenient = runner.invoke(app, ["batch", str(manifest)])
    assert lenient.exit_code == 0, lenient.output

    strict = runner.invoke(app, ["batch", str(manifest), "--strict"])
    assert strict.exit_code == 1
    assert "Duplicate identifiers" in strict.output


def test_batch_reports_invalid_manifest(tmp_path: Path):
    manifest = _manifest(
        tmp_path,
        """\
        locators:
          - baseId: ""
        """,
    )
    runner = CliRunner()
    result = runner.invoke(app, ["batch", str(manifest)])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_version():
    runner = CliRunner()
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert result.output.strip() == __version__
