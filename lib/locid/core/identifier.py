"""Identifier construction from hierarchical naming segments."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional, Tuple, Union

from pydantic import ValidationError

from locid.config import NamingInput
from locid.core.errors import InvalidInput
from locid.utils.naming import segment_text

SEPARATOR = "-"

# Output order of the segments; absent fields are skipped entirely.
SEGMENT_FIELDS: Tuple[str, ...] = ("parent_id", "base_id", "index", "id")

NamingLike = Union[NamingInput, Mapping[str, Any]]

_FIELD_BY_ALIAS = {
    field.alias: name for name, field in NamingInput.model_fields.items() if field.alias
}


def _describe_errors(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "<input>"
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts)


def _first_field(exc: ValidationError) -> Optional[str]:
    for error in exc.errors():
        location = error.get("loc", ())
        if location:
            return _FIELD_BY_ALIAS.get(str(location[0]), str(location[0]))
    return None


def coerce_naming_input(naming: NamingLike) -> NamingInput:
    """Return naming as a NamingInput, validating mappings on the way."""

    if isinstance(naming, NamingInput):
        return naming
    if not isinstance(naming, Mapping):
        raise InvalidInput(f"Expected a NamingInput or mapping, got {type(naming).__name__}.")
    try:
        return NamingInput.model_validate(dict(naming))
    except ValidationError as exc:
        raise InvalidInput(f"Invalid naming input: {_describe_errors(exc)}", field=_first_field(exc)) from exc


def naming_segments(naming: NamingInput) -> List[str]:
    """Collect the present segments of naming in output order, normalized."""

    segments: List[str] = []
    for field_name in SEGMENT_FIELDS:
        value = getattr(naming, field_name)
        if value is None:
            continue
        segment = segment_text(value)
        if not segment:
            raise InvalidInput(
                f"Segment '{field_name}' is empty after normalization (got {value!r}).",
                field=field_name,
            )
        segments.append(segment)
    return segments


def build_identifier(naming: NamingLike) -> str:
    """Build the kebab-case locator identifier for naming.

    Segments are joined in the order parent, base, index, sub id. An index of
    ``0`` counts as present. Raises :class:`InvalidInput` when the base is
    missing or any present segment normalizes to an empty string.
    """

    return SEPARATOR.join(naming_segments(coerce_naming_input(naming)))


__all__ = [
    "NamingLike",
    "SEGMENT_FIELDS",
    "SEPARATOR",
    "build_identifier",
    "coerce_naming_input",
    "naming_segments",
]
