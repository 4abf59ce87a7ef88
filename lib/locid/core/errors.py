"""Error types raised by locid."""

from __future__ import annotations

from typing import Optional


class InvalidInput(ValueError):
    """Naming input that cannot produce a valid identifier.

    This signals a static usage mistake (missing base, empty segment) rather
    than a transient condition, so callers should not retry.
    """

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
