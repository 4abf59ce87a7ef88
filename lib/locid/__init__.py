"""Deterministic kebab-case identifiers for UI test locators."""

from __future__ import annotations

from locid.config import LocatorManifest, LocatorNode, LocatorProps, NamingInput
from locid.core import (
    InvalidInput,
    ResolvedLocator,
    build_identifier,
    build_locator_props,
    child_naming,
    find_duplicates,
    load_manifest,
    resolve_manifest,
)
from locid.utils import kebab_case

__version__ = "0.1.0"

__all__ = [
    "InvalidInput",
    "LocatorManifest",
    "LocatorNode",
    "LocatorProps",
    "NamingInput",
    "ResolvedLocator",
    "build_identifier",
    "build_locator_props",
    "child_naming",
    "find_duplicates",
    "kebab_case",
    "load_manifest",
    "resolve_manifest",
]
