"""Tests for the responsive value model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pagecraft.specs.responsive import (
    ABSENT,
    CLEARED,
    Breakpoint,
    Present,
    ResponsiveValue,
    as_responsive,
    coerce_number,
    slot_of,
    wider_breakpoint,
)


class TestBreakpoints:
    """Breakpoint ordering."""

    def test_wider_breakpoint(self):
        assert wider_breakpoint(Breakpoint.MOBILE) is Breakpoint.TABLET
        assert wider_breakpoint(Breakpoint.TABLET) is Breakpoint.DESKTOP
        assert wider_breakpoint(Breakpoint.DESKTOP) is None


class TestSlots:
    """Tri-state entries."""

    def test_missing_key_is_absent(self):
        assert slot_of({"desktop": 1}, "mobile") is ABSENT
        assert slot_of(None, "mobile") is ABSENT

    def test_null_is_cleared(self):
        assert slot_of({"mobile": None}, "mobile") is CLEARED

    def test_value_is_present(self):
        assert slot_of({"mobile": 0}, "mobile") == Present(0)


class TestResponsiveValue:
    """Parsing and copy-on-write updates."""

    def test_node_tree_shape(self, rv):
        value = rv(
            {
                "desktop": 20,
                "mobile": None,
                "unit": {"desktop": "em"},
                "top": {"tablet": 4},
            }
        )
        assert value.slot(Breakpoint.DESKTOP) == Present(20)
        assert value.slot(Breakpoint.TABLET) is ABSENT
        assert value.slot(Breakpoint.MOBILE) is CLEARED
        assert value.unit_slot(Breakpoint.DESKTOP) == Present("em")
        assert value.top is not None
        assert value.top.slot(Breakpoint.TABLET) == Present(4)
        assert value.has_sides

    def test_unknown_keys_ignored(self, rv):
        value = rv({"widescreen": 5, "desktop": 1})
        assert value.values == {Breakpoint.DESKTOP: 1}

    def test_frozen(self, rv):
        value = rv({"desktop": 1})
        with pytest.raises(ValidationError):
            value.values = {}  # type: ignore[misc]

    def test_with_entry_leaves_original(self, rv):
        original = rv({"desktop": 10})
        updated = original.with_entry(Breakpoint.MOBILE, Present(4))
        assert original.slot(Breakpoint.MOBILE) is ABSENT
        assert updated.slot(Breakpoint.MOBILE) == Present(4)
        assert updated.slot(Breakpoint.DESKTOP) == Present(10)

    def test_with_entry_absent_removes_key(self, rv):
        value = rv({"desktop": 10, "mobile": 4}).with_entry(Breakpoint.MOBILE, ABSENT)
        assert Breakpoint.MOBILE not in value.values

    def test_with_entry_cleared_stores_null(self, rv):
        value = rv({}).with_entry(Breakpoint.TABLET, CLEARED)
        assert value.to_raw() == {"tablet": None}

    def test_with_side_rejects_unknown_side(self, rv):
        with pytest.raises(ValueError, match="Unknown side"):
            rv({}).with_side("middle", None)

    def test_to_raw(self, rv):
        raw = {"desktop": 20, "mobile": None, "unit": {"desktop": "px"}, "left": {"tablet": 3}}
        assert rv(raw).to_raw() == raw

    def test_cleared_everywhere(self, rv):
        assert rv({"desktop": None, "tablet": None, "mobile": None}).is_cleared_everywhere()
        assert not rv({"desktop": None, "tablet": None}).is_cleared_everywhere()

    def test_is_empty(self, rv):
        assert rv({}).is_empty()
        assert not rv({"unit": {"desktop": "em"}}).is_empty()

    def test_as_responsive_accepts_both_shapes(self, rv):
        value = rv({"desktop": 1})
        assert as_responsive(value) is value
        assert as_responsive({"desktop": 1}) == value
        assert as_responsive(None) is None


class TestCoerceNumber:
    """Form input coercion."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            (12, 12),
            ("12", 12),
            (" 1.5 ", 1.5),
            (20.0, 20),
            (float("nan"), None),
            (float("inf"), None),
            (True, None),
            ("", None),
            ("wide", None),
            (None, None),
        ],
    )
    def test_coerce(self, raw, expected):
        assert coerce_number(raw) == expected

    def test_integral_float_becomes_int(self):
        assert isinstance(coerce_number(20.0), int)
