"""Tests for the live editing read/write helpers."""

from __future__ import annotations

from pagecraft.editing import (
    LiveResolver,
    apply_responsive_edit,
    collapse_to_legacy,
    get_responsive_value,
    set_responsive_value,
)
from pagecraft.editing.live import get_four_side, get_responsive_unit, set_side_value
from pagecraft.specs.props import TextProps
from pagecraft.specs.responsive import CLEARED, Breakpoint
from pagecraft.styles.box import FourSideFallback


class TestReading:
    """Reads only look at the requested breakpoint."""

    def test_value_at_breakpoint(self):
        assert get_responsive_value({"desktop": 20}, "desktop", 5) == 20

    def test_no_search_across_breakpoints(self):
        assert get_responsive_value({"desktop": 20}, "mobile", 5) == 5

    def test_cleared_returns_none(self):
        assert get_responsive_value({"mobile": None}, "mobile", 5) is None

    def test_unit(self):
        assert get_responsive_unit({"unit": {"tablet": "em"}}, "tablet", "px") == "em"
        assert get_responsive_unit(None, "tablet", "px") == "px"

    def test_four_side(self):
        sides = get_four_side(
            {"desktop": 10, "top": {"mobile": 2}}, "mobile", FourSideFallback(default=0)
        )
        assert sides.top == 2
        assert sides.right == 0


class TestWriting:
    """Copy-on-write updates."""

    def test_round_trip(self):
        value = set_responsive_value(None, "tablet", 14)
        assert get_responsive_value(value, "tablet") == 14
        assert value.to_raw() == {"tablet": 14}

    def test_other_breakpoints_untouched(self):
        value = set_responsive_value({"desktop": 20, "mobile": 8}, "tablet", 14)
        assert value.to_raw() == {"desktop": 20, "mobile": 8, "tablet": 14}

    def test_none_removes_entry(self):
        value = set_responsive_value({"tablet": 14}, "tablet", None)
        assert value.values == {}
        assert get_responsive_value(value, "tablet", 10) == 10

    def test_cleared_is_stored(self):
        value = set_responsive_value({"desktop": 20}, "mobile", CLEARED)
        assert value.to_raw() == {"desktop": 20, "mobile": None}
        assert get_responsive_value(value, "mobile", 10) is None

    def test_unit_written_alongside(self):
        value = set_responsive_value(None, "desktop", 2, unit="em")
        assert value.to_raw() == {"desktop": 2, "unit": {"desktop": "em"}}

    def test_unit_left_alone_when_omitted(self):
        value = set_responsive_value({"desktop": 2, "unit": {"desktop": "em"}}, "desktop", 3)
        assert value.to_raw() == {"desktop": 3, "unit": {"desktop": "em"}}

    def test_side_value(self):
        value = set_side_value(None, "top", "desktop", 5)
        assert value.to_raw() == {"top": {"desktop": 5}}
        assert set_side_value(value, "top", "desktop", None).top is None


class TestCollapseToLegacy:
    """Legacy scalar mirror."""

    def test_current_breakpoint_first(self):
        assert collapse_to_legacy({"tablet": 14, "mobile": 12}, "mobile") == 12

    def test_desktop_before_tablet(self):
        assert collapse_to_legacy({"desktop": 20, "tablet": 14}, "mobile") == 20

    def test_narrower_when_desktop_missing(self):
        assert collapse_to_legacy({"tablet": 14}, "desktop") == 14

    def test_cleared_is_skipped(self):
        assert collapse_to_legacy({"desktop": None, "tablet": 5}, "desktop") == 5

    def test_default(self):
        assert collapse_to_legacy({}, "desktop", 16) == 16
        assert collapse_to_legacy(None, "desktop", 16) == 16


class TestApplyResponsiveEdit:
    """Editing a prop bag keeps the legacy mirror in sync."""

    def test_raw_props(self):
        updated = apply_responsive_edit({"padding": 10}, "padding", "mobile", 4)
        assert updated == {"padding": 4, "paddingResponsive": {"mobile": 4}}

    def test_raw_props_not_mutated(self):
        props = {"padding": 10}
        apply_responsive_edit(props, "padding", "mobile", 4)
        assert props == {"padding": 10}

    def test_removing_last_entry(self):
        props = {"padding": 4, "paddingResponsive": {"mobile": 4}}
        updated = apply_responsive_edit(props, "padding", "mobile", None)
        assert updated["paddingResponsive"] is None
        assert updated["padding"] is None

    def test_prop_model_with_unit(self):
        updated = apply_responsive_edit(TextProps(), "font_size", "tablet", 20, unit="em")
        assert isinstance(updated, TextProps)
        assert updated.font_size == 20
        assert updated.font_size_unit == "em"
        assert updated.font_size_responsive is not None
        assert updated.font_size_responsive.values == {Breakpoint.TABLET: 20}


class TestLiveResolver:
    """Façade bound to the active breakpoint."""

    def test_clear_and_reset(self):
        live = LiveResolver("mobile")
        cleared = live.clear({"desktop": 10})
        assert cleared.to_raw() == {"desktop": 10, "mobile": None}
        assert live.reset(cleared).to_raw() == {"desktop": 10}

    def test_get_and_set(self):
        live = LiveResolver(Breakpoint.TABLET)
        value = live.set(None, 12, unit="rem")
        assert live.get(value) == 12
        assert live.get_unit(value) == "rem"
        assert live.get(value.to_raw(), 0) == 12

    def test_edit(self):
        live = LiveResolver("desktop")
        assert live.edit({}, "margin", 8) == {"margin": 8, "marginResponsive": {"desktop": 8}}

    def test_four_side(self):
        live = LiveResolver("desktop")
        assert live.get_four_side({"desktop": 3}).to_css() == "3px"
