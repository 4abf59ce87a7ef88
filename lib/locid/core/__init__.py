"""Core identifier construction for locid."""

from __future__ import annotations

from .errors import InvalidInput
from .identifier import build_identifier, coerce_naming_input, naming_segments
from .manifest import ResolvedLocator, find_duplicates, load_manifest, resolve_manifest
from .props import build_locator_props
from .scope import child_naming

__all__ = [
    "InvalidInput",
    "ResolvedLocator",
    "build_identifier",
    "build_locator_props",
    "child_naming",
    "coerce_naming_input",
    "find_duplicates",
    "load_manifest",
    "naming_segments",
    "resolve_manifest",
]
