"""Configuration models for locid."""

from __future__ import annotations

from .manifest import LocatorManifest, LocatorNode
from .naming import NamingInput
from .props import LocatorProps

__all__ = [
    "LocatorManifest",
    "LocatorNode",
    "LocatorProps",
    "NamingInput",
]
