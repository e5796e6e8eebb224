"""Tests for four-sided property expansion."""

from __future__ import annotations

from pagecraft.specs.responsive import Breakpoint
from pagecraft.styles.box import (
    FourSideFallback,
    SideValues,
    cascade_four_side,
    expand_four_side,
    radius_longhand,
    side_longhand,
)

D, T, M = Breakpoint.DESKTOP, Breakpoint.TABLET, Breakpoint.MOBILE


class TestExpandFourSide:
    """Single-breakpoint expansion."""

    def test_uniform_value(self, rv):
        sides = expand_four_side(rv({"desktop": 10}), D)
        assert (sides.top, sides.right, sides.bottom, sides.left) == (10, 10, 10, 10)
        assert sides.to_css() == "10px"

    def test_side_override(self, rv):
        sides = expand_four_side(rv({"desktop": 10, "top": {"desktop": 20}}), D)
        assert sides.top == 20
        assert sides.right == 10
        assert sides.to_css() == "20px 10px 10px 10px"

    def test_cleared_side_is_zero(self, rv):
        sides = expand_four_side(rv({"desktop": 10, "left": {"desktop": None}}), D)
        assert sides.left == 0
        assert sides.top == 10

    def test_cleared_uniform_is_zero(self, rv):
        sides = expand_four_side(rv({"mobile": None}), M, FourSideFallback(default=10))
        assert sides.to_css() == "0px"

    def test_static_props_fallback(self):
        fallback = FourSideFallback(uniform=5, top=8, default=1)
        sides = expand_four_side(None, D, fallback)
        assert sides.top == 8
        assert sides.right == 5

    def test_default_only(self):
        sides = expand_four_side(None, T, FourSideFallback(default=10))
        assert sides.to_css() == "10px"

    def test_does_not_read_other_breakpoints(self, rv):
        sides = expand_four_side(rv({"desktop": 30}), M, FourSideFallback(default=0))
        assert sides.top == 0

    def test_incomplete_sides_have_no_shorthand(self, rv):
        sides = expand_four_side(rv({"top": {"desktop": 4}}), D)
        assert sides.top == 4
        assert sides.right is None
        assert not sides.is_complete
        assert sides.to_css() is None

    def test_unit(self, rv):
        assert expand_four_side(rv({"desktop": 2, "unit": {"desktop": "em"}}), D).unit == "em"
        assert expand_four_side(rv({"desktop": 2, "unit": {"desktop": "xx"}}), D).unit == "px"
        assert expand_four_side(None, D, FourSideFallback(default=1, unit="rem")).unit == "rem"


class TestCascadeFourSide:
    """Cross-breakpoint expansion."""

    def test_mobile_cleared(self, rv):
        sides = cascade_four_side(rv({"desktop": 20, "mobile": None}), FourSideFallback(default=10))
        assert sides[D].to_css() == "20px"
        assert sides[T].to_css() == "20px"
        assert sides[M].to_css() == "0px"

    def test_side_inherits_independently(self, rv):
        sides = cascade_four_side(rv({"desktop": 10, "top": {"tablet": 2}}))
        assert sides[T].top == 2
        assert sides[M].top == 2
        assert sides[M].bottom == 10

    def test_unit_inherits(self, rv):
        sides = cascade_four_side(rv({"desktop": 1, "unit": {"desktop": "em"}}))
        assert sides[M].unit == "em"


class TestSideValues:
    """Rendering helpers."""

    def test_side_css(self):
        sides = SideValues(top=1, right=None, bottom=0, left=None, unit="px")
        assert sides.side_css("top") == "1px"
        assert sides.side_css("right") is None

    def test_empty(self):
        assert SideValues(top=None, right=None, bottom=None, left=None, unit="px").is_empty

    def test_longhands(self):
        assert side_longhand("padding-{side}")("left") == "padding-left"
        assert radius_longhand("top") == "border-top-left-radius"
        assert radius_longhand("right") == "border-top-right-radius"
        assert radius_longhand("bottom") == "border-bottom-right-radius"
