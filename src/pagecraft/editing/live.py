"""
Live Resolution Façade.

Read/write helpers for the editing surface. Reads resolve the active
breakpoint only; there is no search across breakpoints, because each
breakpoint is edited independently. Writes replace a property's responsive
value wholesale (copy-on-write) and touch one breakpoint entry.

Writing ``None`` removes the entry, so the control falls back to its
default again. Writing :data:`CLEARED` stores an explicit clear, which stops
the fallback chain at that breakpoint.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from pagecraft.specs.responsive import (
    ABSENT,
    BREAKPOINT_ORDER,
    CLEARED,
    Breakpoint,
    Present,
    ResponsiveValue,
    Slot,
    SlotState,
    as_responsive,
)
from pagecraft.styles.box import NO_FALLBACK, FourSideFallback, SideValues, expand_four_side
from pagecraft.styles.resolver import resolve, resolve_unit

RawResponsive = ResponsiveValue | Mapping[str, Any] | None
M = TypeVar("M", bound=BaseModel)


def _slot_for_write(value: Any) -> Slot:
    if isinstance(value, SlotState | Present):
        return value
    if value is None:
        return ABSENT
    return Present(value)


# =============================================================================
# Reading
# =============================================================================


def get_responsive_value(
    responsive: RawResponsive, breakpoint: Breakpoint | str, default: Any = None
) -> Any:
    """Value at ``breakpoint``; ``default`` when nothing is stored there."""
    return resolve(as_responsive(responsive), Breakpoint(breakpoint), default)


def get_responsive_unit(
    responsive: RawResponsive, breakpoint: Breakpoint | str, default: str | None = None
) -> str | None:
    return resolve_unit(as_responsive(responsive), Breakpoint(breakpoint), default)


def get_four_side(
    responsive: RawResponsive,
    breakpoint: Breakpoint | str,
    fallback: FourSideFallback = NO_FALLBACK,
    default_unit: str = "px",
) -> SideValues:
    return expand_four_side(
        as_responsive(responsive), Breakpoint(breakpoint), fallback, default_unit
    )


# =============================================================================
# Writing
# =============================================================================


def set_responsive_value(
    responsive: RawResponsive,
    breakpoint: Breakpoint | str,
    value: Any,
    *,
    unit: Any = ABSENT,
) -> ResponsiveValue:
    """Return a new responsive value with one breakpoint entry replaced.

    ``value=None`` deletes the entry; :data:`CLEARED` stores an explicit
    clear. ``unit`` follows the same rules and is left alone when omitted.
    Other breakpoints are never touched.
    """
    breakpoint = Breakpoint(breakpoint)
    current = as_responsive(responsive) or ResponsiveValue()
    updated = current.with_entry(breakpoint, _slot_for_write(value))
    if unit is not ABSENT:
        updated = updated.with_unit(breakpoint, _slot_for_write(unit))
    return updated


def set_side_value(
    responsive: RawResponsive, side: str, breakpoint: Breakpoint | str, value: Any
) -> ResponsiveValue:
    """Write one per-side override of a four-sided value."""
    current = as_responsive(responsive) or ResponsiveValue()
    side_value = set_responsive_value(current.side(side), breakpoint, value)
    return current.with_side(side, None if side_value.is_empty() else side_value)


def collapse_to_legacy(
    responsive: RawResponsive, current: Breakpoint | str, default: Any = None
) -> Any:
    """Single scalar for the legacy static prop mirror.

    Searches the edited breakpoint first, then desktop, tablet and mobile,
    and returns the first concrete value.
    """
    value = as_responsive(responsive)
    if value is None:
        return default
    current = Breakpoint(current)
    order = (current, *(bp for bp in BREAKPOINT_ORDER if bp is not current))
    for breakpoint in order:
        slot = value.slot(breakpoint)
        if isinstance(slot, Present):
            return slot.value
    return default


def _collapse_unit(responsive: ResponsiveValue, current: Breakpoint) -> Any:
    units = ResponsiveValue(values={bp: unit for bp, unit in responsive.unit.items()})
    return collapse_to_legacy(units, current)


def apply_responsive_edit(
    props: M | Mapping[str, Any],
    name: str,
    breakpoint: Breakpoint | str,
    value: Any,
    *,
    unit: Any = ABSENT,
) -> M | dict[str, Any]:
    """Apply one control edit to a prop bag and keep the legacy mirror in sync.

    ``name`` is the snake_case base name (``"padding"``). Writes
    ``{name}_responsive`` and sets ``{name}`` (and ``{name}_unit`` when a
    unit was written) to the collapsed legacy value. Pydantic props come
    back as a copy; raw camelCase mappings as a new dict.
    """
    breakpoint = Breakpoint(breakpoint)
    responsive_key = f"{name}_responsive"

    if isinstance(props, BaseModel):
        existing = getattr(props, responsive_key, None)
    else:
        existing = props.get(to_camel(responsive_key))
    updated = set_responsive_value(existing, breakpoint, value, unit=unit)

    changes: dict[str, Any] = {
        responsive_key: None if updated.is_empty() else updated,
        name: collapse_to_legacy(updated, breakpoint),
    }
    if unit is not ABSENT:
        changes[f"{name}_unit"] = _collapse_unit(updated, breakpoint)

    if isinstance(props, BaseModel):
        fields = type(props).model_fields
        return props.model_copy(update={k: v for k, v in changes.items() if k in fields})

    result = dict(props)
    for key, change in changes.items():
        if isinstance(change, ResponsiveValue):
            change = change.to_raw()
        result[to_camel(key)] = change
    return result


# =============================================================================
# Active-breakpoint wrapper
# =============================================================================


class LiveResolver:
    """The façade bound to the breakpoint currently selected in the editor."""

    def __init__(self, breakpoint: Breakpoint | str = Breakpoint.DESKTOP):
        self.breakpoint = Breakpoint(breakpoint)

    def get(self, responsive: RawResponsive, default: Any = None) -> Any:
        return get_responsive_value(responsive, self.breakpoint, default)

    def get_unit(self, responsive: RawResponsive, default: str | None = None) -> str | None:
        return get_responsive_unit(responsive, self.breakpoint, default)

    def get_four_side(
        self,
        responsive: RawResponsive,
        fallback: FourSideFallback = NO_FALLBACK,
        default_unit: str = "px",
    ) -> SideValues:
        return get_four_side(responsive, self.breakpoint, fallback, default_unit)

    def set(self, responsive: RawResponsive, value: Any, *, unit: Any = ABSENT) -> ResponsiveValue:
        return set_responsive_value(responsive, self.breakpoint, value, unit=unit)

    def clear(self, responsive: RawResponsive) -> ResponsiveValue:
        """Explicitly clear the active breakpoint (stops fallback)."""
        return set_responsive_value(responsive, self.breakpoint, CLEARED)

    def reset(self, responsive: RawResponsive) -> ResponsiveValue:
        """Remove the active breakpoint's override (back to the default)."""
        return set_responsive_value(responsive, self.breakpoint, None)

    def edit(
        self, props: M | Mapping[str, Any], name: str, value: Any, *, unit: Any = ABSENT
    ) -> M | dict[str, Any]:
        return apply_responsive_edit(props, name, self.breakpoint, value, unit=unit)
