"""Naming input model."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import Field

from .base import FrozenModel


class NamingInput(FrozenModel):
    """Hierarchical pieces of a locator identifier, in output order."""

    parent_id: Optional[str] = Field(
        default=None,
        alias="parentId",
        description="Identifier of the enclosing component, threaded down through composition.",
    )
    base_id: str = Field(..., alias="baseId", description="Stable name of the component type.")
    index: Optional[int] = Field(
        default=None,
        ge=0,
        description="Position within a homogeneous collection of siblings.",
    )
    id: Optional[Union[str, int]] = Field(
        default=None,
        description="Disambiguates multiple locatable elements within one component.",
    )
