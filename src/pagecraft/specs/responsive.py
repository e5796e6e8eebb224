"""
Responsive value model.

A responsive value maps each breakpoint to an optional value, plus a sibling
map of units keyed the same way. Every breakpoint entry is in one of three
states:

- absent: the key is missing; resolution keeps looking (wider breakpoint,
  static prop, theme default, engine default)
- cleared: the key is present with ``None``; resolution stops here
- present: a concrete value, authoritative for that breakpoint

Four-sided properties (padding, margin, border width/radius) reuse the same
model: the top-level map is the shared "uniform" value and the optional
``top``/``right``/``bottom``/``left`` maps hold per-side overrides.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

T = TypeVar("T")

# =============================================================================
# Breakpoints
# =============================================================================


class Breakpoint(StrEnum):
    """Device breakpoints, widest first."""

    DESKTOP = "desktop"
    TABLET = "tablet"
    MOBILE = "mobile"


# Widest first: the order media-query overrides cascade in
BREAKPOINT_ORDER: tuple[Breakpoint, ...] = (
    Breakpoint.DESKTOP,
    Breakpoint.TABLET,
    Breakpoint.MOBILE,
)


@dataclass(frozen=True)
class BreakpointRange:
    """Pixel range a breakpoint covers (bounds inclusive)."""

    label: str
    min_width: int | None = None
    max_width: int | None = None


BREAKPOINTS: dict[Breakpoint, BreakpointRange] = {
    Breakpoint.DESKTOP: BreakpointRange(label="Desktop", min_width=1024),
    Breakpoint.TABLET: BreakpointRange(label="Tablet", min_width=768, max_width=1023),
    Breakpoint.MOBILE: BreakpointRange(label="Mobile", max_width=767),
}


def wider_breakpoint(breakpoint: Breakpoint) -> Breakpoint | None:
    """Return the next wider breakpoint, or None for desktop."""
    index = BREAKPOINT_ORDER.index(breakpoint)
    return BREAKPOINT_ORDER[index - 1] if index > 0 else None


# =============================================================================
# Tri-state slot
# =============================================================================


@dataclass(frozen=True)
class Present(Generic[T]):
    """A concrete value stored at a breakpoint."""

    value: T


class SlotState(Enum):
    """The two empty states of a breakpoint entry."""

    CLEARED = "cleared"
    ABSENT = "absent"


CLEARED = SlotState.CLEARED
ABSENT = SlotState.ABSENT

Slot = Present[Any] | SlotState


def slot_of(mapping: Mapping[Any, Any] | None, key: Any) -> Slot:
    """Read one entry of a raw mapping as a tri-state slot."""
    if not mapping or key not in mapping:
        return ABSENT
    value = mapping[key]
    if value is None:
        return CLEARED
    return Present(value)


# =============================================================================
# Numbers
# =============================================================================


def coerce_number(value: Any) -> int | float | None:
    """Coerce form input to a number.

    Returns None for anything that is not a finite number (NaN, infinities,
    booleans, empty or unparseable strings). Integral floats come back as int
    so they render as ``20`` rather than ``20.0``.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            value = float(text)
        except ValueError:
            return None
    if not isinstance(value, float):
        return None
    if not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value


# =============================================================================
# Responsive value
# =============================================================================

SIDES: tuple[str, ...] = ("top", "right", "bottom", "left")

_BREAKPOINT_KEYS = {bp.value for bp in Breakpoint}


def _breakpoint_entries(raw: Any) -> dict[str, Any]:
    if not isinstance(raw, Mapping):
        return {}
    return {key: value for key, value in raw.items() if key in _BREAKPOINT_KEYS}


class ResponsiveValue(BaseModel):
    """
    Per-breakpoint values with an independent per-breakpoint unit map.

    Accepts the node-tree shape directly::

        ResponsiveValue.model_validate(
            {"desktop": 20, "mobile": None, "unit": {"desktop": "px"}, "top": {"tablet": 4}}
        )
    """

    model_config = ConfigDict(frozen=True)

    values: dict[Breakpoint, Any] = Field(
        default_factory=dict, description="Breakpoint -> value (None = cleared)"
    )
    unit: dict[Breakpoint, str | None] = Field(
        default_factory=dict, description="Breakpoint -> unit (None = cleared)"
    )
    top: ResponsiveValue | None = Field(default=None, description="Per-side override (top)")
    right: ResponsiveValue | None = Field(default=None, description="Per-side override (right)")
    bottom: ResponsiveValue | None = Field(default=None, description="Per-side override (bottom)")
    left: ResponsiveValue | None = Field(default=None, description="Per-side override (left)")

    @model_validator(mode="before")
    @classmethod
    def _from_node_tree(cls, data: Any) -> Any:
        """Convert the flat node-tree mapping into the structured form."""
        if not isinstance(data, Mapping) or "values" in data:
            return data
        structured: dict[str, Any] = {
            "values": _breakpoint_entries(data),
            "unit": _breakpoint_entries(data.get("unit")),
        }
        for side in SIDES:
            if isinstance(data.get(side), Mapping | ResponsiveValue):
                structured[side] = data[side]
        return structured

    # -------------------------------------------------------------------------
    # Reading
    # -------------------------------------------------------------------------

    def slot(self, breakpoint: Breakpoint) -> Slot:
        """Tri-state value entry at a breakpoint."""
        return slot_of(self.values, Breakpoint(breakpoint))

    def unit_slot(self, breakpoint: Breakpoint) -> Slot:
        """Tri-state unit entry at a breakpoint."""
        return slot_of(self.unit, Breakpoint(breakpoint))

    def side(self, name: str) -> ResponsiveValue | None:
        """Per-side override map, if any."""
        return getattr(self, name) if name in SIDES else None

    @property
    def has_sides(self) -> bool:
        return any(getattr(self, side) is not None for side in SIDES)

    def is_cleared_everywhere(self) -> bool:
        """True when every breakpoint is explicitly cleared (a full reset)."""
        return all(self.slot(bp) is CLEARED for bp in BREAKPOINT_ORDER)

    def is_empty(self) -> bool:
        return not self.values and not self.unit and not self.has_sides

    # -------------------------------------------------------------------------
    # Writing (copy-on-write)
    # -------------------------------------------------------------------------

    def with_entry(self, breakpoint: Breakpoint, slot: Slot) -> ResponsiveValue:
        """Return a copy with one value entry replaced."""
        return self.model_copy(update={"values": _replace(self.values, breakpoint, slot)})

    def with_unit(self, breakpoint: Breakpoint, slot: Slot) -> ResponsiveValue:
        """Return a copy with one unit entry replaced."""
        return self.model_copy(update={"unit": _replace(self.unit, breakpoint, slot)})

    def with_side(self, name: str, side: ResponsiveValue | None) -> ResponsiveValue:
        """Return a copy with one per-side map replaced."""
        if name not in SIDES:
            raise ValueError(f"Unknown side: {name}")
        return self.model_copy(update={name: side})

    def to_raw(self) -> dict[str, Any]:
        """Serialise back to the node-tree shape."""
        raw: dict[str, Any] = {bp.value: value for bp, value in self.values.items()}
        if self.unit:
            raw["unit"] = {bp.value: unit for bp, unit in self.unit.items()}
        for side in SIDES:
            side_value = getattr(self, side)
            if side_value is not None:
                raw[side] = side_value.to_raw()
        return raw


def _replace(mapping: Mapping[Breakpoint, Any], breakpoint: Breakpoint, slot: Slot) -> dict:
    updated = dict(mapping)
    breakpoint = Breakpoint(breakpoint)
    if isinstance(slot, Present):
        updated[breakpoint] = slot.value
    elif slot is CLEARED:
        updated[breakpoint] = None
    else:
        updated.pop(breakpoint, None)
    return updated


def as_responsive(value: ResponsiveValue | Mapping[str, Any] | None) -> ResponsiveValue | None:
    """Accept either a ResponsiveValue or its raw node-tree mapping."""
    if value is None or isinstance(value, ResponsiveValue):
        return value
    return ResponsiveValue.model_validate(value)
