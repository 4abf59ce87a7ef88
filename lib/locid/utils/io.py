"""Serialization helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import yaml


def load_yaml_mapping(path: Path) -> Dict[str, Any]:
    """Load a YAML document whose top level is a mapping.

    An empty document yields an empty dict; any other top-level type is a
    ``ValueError``.
    """
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping at the top level, got {type(data).__name__}.")
    return data


def save_json(obj: Any, path: Path, *, indent: int = 2) -> None:
    """Persist an object as formatted JSON."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(obj, handle, indent=indent, sort_keys=False)
        handle.write("\n")
