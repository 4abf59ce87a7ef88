"""Helpers for threading parent identifiers through nested components."""

from __future__ import annotations

from typing import Optional, Union

from locid.config import NamingInput
from locid.core.identifier import NamingLike, build_identifier, coerce_naming_input


def child_naming(
    parent: NamingLike,
    base_id: str,
    *,
    index: Optional[int] = None,
    id: Optional[Union[str, int]] = None,
) -> NamingInput:
    """Return naming input for a component nested inside parent.

    The parent's full identifier becomes the child's parent segment, so
    identifiers grow one level per composition step.
    """

    return coerce_naming_input(
        {
            "parent_id": build_identifier(parent),
            "base_id": base_id,
            "index": index,
            "id": id,
        }
    )


__all__ = ["child_naming"]
