"""Locator prop model."""

from __future__ import annotations

from typing import Dict

from pydantic import Field, model_validator

from .base import FrozenModel


class LocatorProps(FrozenModel):
    """Identifier published under the two keys UI test drivers look up."""

    test_id: str = Field(..., alias="testID")
    accessibility_label: str = Field(..., alias="accessibilityLabel")

    @model_validator(mode="after")
    def _labels_match(self) -> "LocatorProps":
        if self.test_id != self.accessibility_label:
            raise ValueError("testID and accessibilityLabel must be identical.")
        return self

    def as_props(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)
