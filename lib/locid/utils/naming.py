"""Naming utilities for kebab-case locator segments."""

from __future__ import annotations

import re

_SEPARATOR_RUN = re.compile(r"[^a-z0-9]+")


def kebab_case(text: str) -> str:
    """Lowercase text and collapse every run of non-alphanumeric characters into a single hyphen."""

    return _SEPARATOR_RUN.sub("-", text.strip().lower()).strip("-")


def segment_text(value: str | int) -> str:
    """Render a raw segment (text or integer) as a normalized kebab-case segment."""

    return kebab_case(str(value))


__all__ = ["kebab_case", "segment_text"]
