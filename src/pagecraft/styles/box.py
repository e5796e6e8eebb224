"""
Box Expander: four-sided properties.

Padding, margin, border width and border radius are stored as one
responsive value whose top-level map is the uniform value and whose
``top``/``right``/``bottom``/``left`` maps are per-side overrides.
The unit map is shared by all four sides.

Per side, the first of these wins:

1. the per-side map entry at the breakpoint
2. the uniform map entry at the breakpoint
3. the static per-side prop, then the static uniform prop, then the default

A cleared entry at either map resolves that side to zero.
"""

from __future__ import annotations

from collections.abc import Callable, Collection
from dataclasses import dataclass
from typing import Any

from pagecraft.specs.responsive import (
    ABSENT,
    BREAKPOINT_ORDER,
    CLEARED,
    SIDES,
    Breakpoint,
    Present,
    ResponsiveValue,
    Slot,
    coerce_number,
)
from pagecraft.styles.resolver import (
    LENGTH_UNITS,
    cascade_units,
    format_length,
    normalize_unit,
    resolve_slot,
    resolve_unit,
)


@dataclass(frozen=True)
class FourSideFallback:
    """Static props and default for a four-sided property."""

    uniform: Any = None
    top: Any = None
    right: Any = None
    bottom: Any = None
    left: Any = None
    default: Any = None
    unit: str | None = None

    def for_side(self, side: str) -> int | float | None:
        for candidate in (getattr(self, side), self.uniform, self.default):
            number = coerce_number(candidate)
            if number is not None:
                return number
        return None


NO_FALLBACK = FourSideFallback()


@dataclass(frozen=True)
class SideValues:
    """Resolved sides at one breakpoint. None means no value anywhere."""

    top: int | float | None
    right: int | float | None
    bottom: int | float | None
    left: int | float | None
    unit: str

    def get(self, side: str) -> int | float | None:
        return getattr(self, side)

    @property
    def is_complete(self) -> bool:
        return all(self.get(side) is not None for side in SIDES)

    @property
    def is_empty(self) -> bool:
        return all(self.get(side) is None for side in SIDES)

    @property
    def is_uniform(self) -> bool:
        return len({self.get(side) for side in SIDES}) == 1

    def side_css(self, side: str) -> str | None:
        value = self.get(side)
        if value is None:
            return None
        return format_length(value, self.unit)

    def to_css(self) -> str | None:
        """Shorthand value, collapsed to one length when all sides agree."""
        if not self.is_complete:
            return None
        if self.is_uniform:
            return format_length(self.top, self.unit)
        return " ".join(format_length(self.get(side), self.unit) for side in SIDES)


def _side_slot(responsive: ResponsiveValue | None, side: str, breakpoint: Breakpoint) -> Slot:
    if responsive is None:
        return ABSENT
    slot = resolve_slot(responsive.side(side), breakpoint, numeric=True)
    if slot is ABSENT:
        slot = resolve_slot(responsive, breakpoint, numeric=True)
    return slot


def _slot_number(slot: Slot) -> int | float | None:
    if isinstance(slot, Present):
        return slot.value
    if slot is CLEARED:
        return 0
    return None


def expand_four_side(
    responsive: ResponsiveValue | None,
    breakpoint: Breakpoint,
    fallback: FourSideFallback = NO_FALLBACK,
    default_unit: str = "px",
    *,
    allowed_units: Collection[str] | None = LENGTH_UNITS,
) -> SideValues:
    """Resolve all four sides at one breakpoint, without consulting other breakpoints."""
    values: dict[str, int | float | None] = {}
    for side in SIDES:
        slot = _side_slot(responsive, side, breakpoint)
        values[side] = fallback.for_side(side) if slot is ABSENT else _slot_number(slot)

    base_unit = normalize_unit(fallback.unit, default_unit, allowed_units)
    unit = resolve_unit(responsive, breakpoint, base_unit)
    unit = normalize_unit(unit, default_unit, allowed_units)
    return SideValues(unit=unit, **values)


def cascade_four_side(
    responsive: ResponsiveValue | None,
    fallback: FourSideFallback = NO_FALLBACK,
    default_unit: str = "px",
    *,
    allowed_units: Collection[str] | None = LENGTH_UNITS,
) -> dict[Breakpoint, SideValues]:
    """Resolve all four sides at every breakpoint, inheriting from wider breakpoints."""
    units = cascade_units(
        responsive, default_unit, base_unit=fallback.unit, allowed=allowed_units
    )
    result: dict[Breakpoint, SideValues] = {}
    previous: dict[str, int | float | None] = {}
    for breakpoint in BREAKPOINT_ORDER:
        values: dict[str, int | float | None] = {}
        for side in SIDES:
            slot = _side_slot(responsive, side, breakpoint)
            if slot is not ABSENT:
                values[side] = _slot_number(slot)
            elif breakpoint is Breakpoint.DESKTOP:
                values[side] = fallback.for_side(side)
            else:
                values[side] = previous[side]
        result[breakpoint] = SideValues(unit=units[breakpoint], **values)
        previous = values
    return result


def side_longhand(template: str) -> Callable[[str], str]:
    """Build a side -> property-name mapper, e.g. ``side_longhand("padding-{side}")``."""
    return lambda side: template.format(side=side)


RADIUS_CORNERS = {
    "top": "top-left",
    "right": "top-right",
    "bottom": "bottom-right",
    "left": "bottom-left",
}


def radius_longhand(side: str) -> str:
    return f"border-{RADIUS_CORNERS[side]}-radius"
