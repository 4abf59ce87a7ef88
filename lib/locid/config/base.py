"""Base configuration models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FrozenModel(BaseModel):
    """Immutable model that accepts both field names and their aliases."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")
