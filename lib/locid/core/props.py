"""Packaging of identifiers into locator props."""

from __future__ import annotations

from locid.config import LocatorProps
from locid.core.identifier import NamingLike, build_identifier


def build_locator_props(naming: NamingLike) -> LocatorProps:
    identifier = build_identifier(naming)
    return LocatorProps(test_id=identifier, accessibility_label=identifier)


__all__ = ["build_locator_props"]
