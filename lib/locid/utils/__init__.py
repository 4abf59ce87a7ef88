"""Utility helpers."""

from __future__ import annotations

from .io import load_yaml_mapping, save_json
from .naming import kebab_case, segment_text

__all__ = [
    "load_yaml_mapping",
    "save_json",
    "kebab_case",
    "segment_text",
]
