"""Locator manifest configuration."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from .naming import NamingInput


class LocatorNode(NamingInput):
    """Naming input that may nest child locators beneath it."""

    children: List["LocatorNode"] = Field(
        default_factory=list,
        description="Nested locators; they inherit this node's identifier as their parent segment.",
    )


LocatorNode.model_rebuild()


class LocatorManifest(BaseModel):
    """Top-level document listing locators to resolve in one batch."""

    model_config = ConfigDict(extra="forbid")

    name: Optional[str] = Field(default=None, description="Optional label for the manifest.")
    locators: List[LocatorNode] = Field(default_factory=list)
