"""
Resolver: effective value and unit of a responsive property.

Two ways of reading a responsive value live here:

- :func:`resolve` / :func:`resolve_unit` read one breakpoint in isolation.
  An absent entry falls through to the caller's fallback; a cleared entry
  returns None and never falls back.
- :func:`cascade` / :func:`cascade_units` compute the effective entry at
  every breakpoint the way the emitted stylesheet behaves: desktop is the
  base (falling back to the static/theme/engine default chain), and a
  narrower breakpoint without its own entry inherits the wider one.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from typing import Any

from pagecraft.specs.responsive import (
    ABSENT,
    BREAKPOINT_ORDER,
    CLEARED,
    Breakpoint,
    Present,
    ResponsiveValue,
    Slot,
    coerce_number,
)

LENGTH_UNITS: frozenset[str] = frozenset({"px", "em", "rem", "%", "vh", "vw"})
LINE_HEIGHT_UNITS: frozenset[str] = frozenset({"normal", "number", "px", "em", "rem", "%"})


# =============================================================================
# Single breakpoint
# =============================================================================


def clean_slot(slot: Slot, *, numeric: bool = False) -> Slot:
    """Treat malformed input as absent.

    Numeric properties drop NaN/unparseable values; every property drops
    empty strings (an emptied text input means "no value supplied").
    """
    if not isinstance(slot, Present):
        return slot
    value = slot.value
    if numeric:
        number = coerce_number(value)
        return ABSENT if number is None else Present(number)
    if isinstance(value, str):
        value = value.strip()
        return Present(value) if value else ABSENT
    return slot


def resolve_slot(
    responsive: ResponsiveValue | None, breakpoint: Breakpoint, *, numeric: bool = False
) -> Slot:
    """Tri-state entry at one breakpoint, after input cleaning."""
    if responsive is None:
        return ABSENT
    return clean_slot(responsive.slot(breakpoint), numeric=numeric)


def resolve(
    responsive: ResponsiveValue | None,
    breakpoint: Breakpoint,
    fallback: Any = None,
    *,
    numeric: bool = False,
) -> Any:
    """Effective value at one breakpoint.

    Present -> the value; cleared -> None; absent -> ``fallback``. No other
    breakpoint is consulted.
    """
    slot = resolve_slot(responsive, breakpoint, numeric=numeric)
    if isinstance(slot, Present):
        return slot.value
    if slot is CLEARED:
        return None
    return fallback


def resolve_number(
    responsive: ResponsiveValue | None, breakpoint: Breakpoint, fallback: Any = None
) -> int | float | None:
    return resolve(responsive, breakpoint, coerce_number(fallback), numeric=True)


def resolve_unit(
    responsive: ResponsiveValue | None, breakpoint: Breakpoint, fallback: str | None = None
) -> str | None:
    """Effective unit at one breakpoint, read from the unit map alone."""
    if responsive is None:
        return fallback
    slot = clean_slot(responsive.unit_slot(breakpoint))
    if isinstance(slot, Present):
        return slot.value
    if slot is CLEARED:
        return None
    return fallback


def normalize_unit(
    unit: Any, default_unit: str, allowed: Collection[str] | None = LENGTH_UNITS
) -> str:
    """Return ``unit`` if it is usable, else the property's default unit."""
    if not isinstance(unit, str) or not unit.strip():
        return default_unit
    unit = unit.strip()
    if allowed is not None and unit not in allowed:
        return default_unit
    return unit


def is_cleared_everywhere(responsive: ResponsiveValue | Mapping[str, Any] | None) -> bool:
    """True when the value is explicitly cleared at every breakpoint."""
    if responsive is None:
        return False
    if not isinstance(responsive, ResponsiveValue):
        responsive = ResponsiveValue.model_validate(responsive)
    return responsive.is_cleared_everywhere()


# =============================================================================
# Cascade across breakpoints
# =============================================================================


def cascade(
    responsive: ResponsiveValue | None,
    fallback: Any = None,
    *,
    numeric: bool = False,
) -> dict[Breakpoint, Slot]:
    """Effective entry at every breakpoint, widest first.

    Desktop falls back to ``fallback`` (absent when it is None). Narrower
    breakpoints inherit the wider effective entry unless they carry their
    own value or an explicit clear.
    """
    if numeric:
        fallback = coerce_number(fallback)
    elif isinstance(fallback, str) and not fallback.strip():
        fallback = None

    effective: dict[Breakpoint, Slot] = {}
    previous: Slot = ABSENT
    for breakpoint in BREAKPOINT_ORDER:
        slot = resolve_slot(responsive, breakpoint, numeric=numeric)
        if slot is ABSENT:
            if breakpoint is Breakpoint.DESKTOP:
                slot = Present(fallback) if fallback is not None else ABSENT
            else:
                slot = previous
        effective[breakpoint] = slot
        previous = slot
    return effective


def cascade_units(
    responsive: ResponsiveValue | None,
    default_unit: str,
    *,
    base_unit: Any = None,
    allowed: Collection[str] | None = LENGTH_UNITS,
) -> dict[Breakpoint, str]:
    """Effective unit at every breakpoint.

    Desktop uses its own unit entry, then ``base_unit`` (the static unit
    prop), then ``default_unit``. A cleared or unknown unit reverts to
    ``default_unit``; an absent one inherits the wider breakpoint's unit.
    """
    units: dict[Breakpoint, str] = {}
    previous = normalize_unit(base_unit, default_unit, allowed)
    for breakpoint in BREAKPOINT_ORDER:
        slot = clean_slot(responsive.unit_slot(breakpoint)) if responsive is not None else ABSENT
        if isinstance(slot, Present):
            unit = normalize_unit(slot.value, default_unit, allowed)
        elif slot is CLEARED:
            unit = default_unit
        else:
            unit = previous
        units[breakpoint] = unit
        previous = unit
    return units


# =============================================================================
# Formatting
# =============================================================================


def format_number(value: int | float) -> str:
    """Render a number without a trailing ``.0`` or exponent."""
    if isinstance(value, int) or float(value).is_integer():
        return str(int(value))
    return f"{value:f}".rstrip("0").rstrip(".")


def format_length(value: Any, unit: str) -> str:
    number = coerce_number(value)
    if number is None:
        return str(value)
    return f"{format_number(number)}{unit}"
