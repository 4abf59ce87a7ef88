"""Tests for locator prop packaging."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from locid.config import LocatorProps
from locid.core.errors import InvalidInput
from locid.core.identifier import build_identifier
from locid.core.props import build_locator_props


def test_props_expose_identifier_under_both_keys():
    naming = {"parentId": "parent", "baseId": "base", "index": 0, "id": "id"}
    props = build_locator_props(naming)
    assert props.as_props() == {
        "testID": "parent-base-0-id",
        "accessibilityLabel": "parent-base-0-id",
    }


def test_props_match_identifier():
    naming = {"baseId": "market-screen", "index": 2}
    props = build_locator_props(naming)
    assert props.test_id == props.accessibility_label == build_identifier(naming)


def test_props_propagate_invalid_input():
    with pytest.raises(InvalidInput):
        build_locator_props({"baseId": ""})


def test_props_reject_mismatched_labels():
    with pytest.raises(ValidationError):
        LocatorProps(testID="a", accessibilityLabel="b")


def test_props_are_frozen():
    props = build_locator_props({"baseId": "base"})
    with pytest.raises(ValidationError):
        props.test_id = "other"
