"""
Rule Emitter.

Turns per-breakpoint effective values into CSS text. Rules are written one
per line so the export pipeline can deduplicate them line by line::

    .text.text-abc { padding: 20px; }
    @media (max-width: 767px) { .text.text-abc { padding: 0px !important; } }

Behaviour by render mode:

- EXPORT / PREVIEW: the desktop value is the unscoped base rule. Tablet and
  mobile only get an ``@media`` override when their effective value differs
  from the next wider breakpoint's, so equal values never produce a
  duplicate block.
- EDIT: no stylesheet text. Declarations for the active breakpoint go to
  :attr:`RuleEmitter.inline`; declarations that cannot be inlined (hover
  states, pseudo-elements) become one unscoped rule for the active
  breakpoint.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Mapping
from enum import StrEnum
from typing import Any

from pagecraft.specs.responsive import (
    BREAKPOINT_ORDER,
    CLEARED,
    Breakpoint,
    Present,
    ResponsiveValue,
)
from pagecraft.styles.box import SideValues
from pagecraft.styles.resolver import (
    LENGTH_UNITS,
    cascade,
    cascade_units,
    format_length,
    format_number,
)
from pagecraft.styles.selectors import media_query

Declarations = Mapping[str, str]
ValueRenderer = Callable[[Any, str | None], str | None]


class RenderMode(StrEnum):
    """Where the generated styles are going."""

    EDIT = "edit"
    PREVIEW = "preview"
    EXPORT = "export"


# =============================================================================
# Formatting
# =============================================================================


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int | float):
        return format_number(value)
    return str(value).strip()


def format_rule(
    selector: str,
    declarations: Declarations,
    *,
    important: bool = False,
    media: str | None = None,
) -> str:
    """One rule on one line, optionally wrapped in a media block."""
    suffix = " !important" if important else ""
    body = " ".join(f"{prop}: {value}{suffix};" for prop, value in declarations.items())
    rule = f"{selector} {{ {body} }}"
    if media:
        rule = f"@media {media} {{ {rule} }}"
    return rule + "\n"


def responsive_texts(
    responsive: ResponsiveValue | None,
    fallback: Any = None,
    *,
    unit: str | None = None,
    default_unit: str | None = None,
    allowed_units: Collection[str] | None = LENGTH_UNITS,
    numeric: bool | None = None,
    cleared: str | None = None,
    render: ValueRenderer | None = None,
) -> dict[Breakpoint, str | None]:
    """Rendered CSS value at every breakpoint (None where nothing applies).

    Passing ``default_unit`` makes the property a length: values are numbers
    and the unit map is cascaded alongside them. A cleared entry renders as
    ``cleared`` (zero in the effective unit for lengths, ``initial``
    otherwise), but only once a wider breakpoint has emitted something to
    undo.
    """
    is_length = default_unit is not None
    if numeric is None:
        numeric = is_length
    slots = cascade(responsive, fallback, numeric=numeric)
    units: dict[Breakpoint, str | None] = dict.fromkeys(BREAKPOINT_ORDER)
    if is_length:
        units.update(
            cascade_units(responsive, default_unit, base_unit=unit, allowed=allowed_units)
        )

    def _render(value: Any, bp_unit: str | None) -> str | None:
        if render is not None:
            return render(value, bp_unit)
        if is_length and bp_unit is not None:
            return format_length(value, bp_unit)
        return format_value(value)

    texts: dict[Breakpoint, str | None] = {}
    previous: str | None = None
    for breakpoint in BREAKPOINT_ORDER:
        slot = slots[breakpoint]
        bp_unit = units[breakpoint]
        if isinstance(slot, Present):
            text = _render(slot.value, bp_unit)
        elif slot is CLEARED and previous is not None:
            if cleared is not None:
                text = cleared
            elif is_length:
                text = _render(0, bp_unit)
            else:
                text = "initial"
        else:
            text = previous if slot is not CLEARED else None
        texts[breakpoint] = text
        previous = text
    return texts


def hover_texts(
    responsive: ResponsiveValue | None,
    fallback: Any,
    normal: Mapping[Breakpoint, str | None],
    *,
    cleared: str,
) -> dict[Breakpoint, str | None]:
    """Hover value at every breakpoint.

    A cleared hover entry switches the hover effect off from that breakpoint
    down, so the hover rule repeats the normal-state text there. Without a
    normal-state text the element shows its initial or inherited value,
    which is what ``cleared`` names.
    """
    slots = cascade(responsive, fallback)
    texts = responsive_texts(responsive, fallback, cleared=cleared)
    for breakpoint in BREAKPOINT_ORDER:
        if slots[breakpoint] is CLEARED and texts[breakpoint] is not None:
            texts[breakpoint] = normal.get(breakpoint) or cleared
    return texts


def four_side_declarations(
    prop: str | None,
    sides: SideValues,
    longhand: Callable[[str], str],
) -> dict[str, str]:
    """Shorthand when every side has a value, else one longhand per set side."""
    if prop is not None:
        shorthand = sides.to_css()
        if shorthand is not None:
            return {prop: shorthand}
    declarations: dict[str, str] = {}
    for side in ("top", "right", "bottom", "left"):
        text = sides.side_css(side)
        if text is not None:
            declarations[longhand(side)] = text
    return declarations


# =============================================================================
# Emitter
# =============================================================================


class RuleEmitter:
    """Renders per-breakpoint declarations for one component instance."""

    def __init__(
        self,
        mode: RenderMode | str = RenderMode.EXPORT,
        breakpoint: Breakpoint | str = Breakpoint.DESKTOP,
    ):
        self.mode = RenderMode(mode)
        self.breakpoint = Breakpoint(breakpoint)
        self.inline: dict[str, dict[str, str]] = {}

    @property
    def editing(self) -> bool:
        return self.mode is RenderMode.EDIT

    def emit_declarations(
        self,
        selector: str,
        per_breakpoint: Mapping[Breakpoint, Declarations],
        *,
        important: bool = False,
        inline: bool = True,
    ) -> str:
        """Core emission: one declaration set per breakpoint."""
        if self.editing:
            active = dict(per_breakpoint.get(self.breakpoint) or {})
            if not active:
                return ""
            if inline:
                self.inline.setdefault(selector, {}).update(active)
                return ""
            return format_rule(selector, active, important=important)

        parts: list[str] = []
        previous: dict[str, str] = {}
        for breakpoint in BREAKPOINT_ORDER:
            declarations = dict(per_breakpoint.get(breakpoint) or {})
            if breakpoint is Breakpoint.DESKTOP:
                if declarations:
                    parts.append(format_rule(selector, declarations, important=important))
            else:
                changed = {
                    prop: value
                    for prop, value in declarations.items()
                    if previous.get(prop) != value
                }
                if changed:
                    parts.append(
                        format_rule(
                            selector, changed, important=True, media=media_query(breakpoint)
                        )
                    )
            previous.update(declarations)
        return "".join(parts)

    def emit_values(
        self,
        selector: str,
        prop: str,
        texts: Mapping[Breakpoint, str | None],
        *,
        important: bool = False,
        inline: bool = True,
    ) -> str:
        per_breakpoint = {
            breakpoint: ({prop: text} if text is not None else {})
            for breakpoint, text in texts.items()
        }
        return self.emit_declarations(
            selector, per_breakpoint, important=important, inline=inline
        )

    def emit_static(
        self,
        selector: str,
        declarations: Declarations,
        *,
        important: bool = False,
        inline: bool = True,
    ) -> str:
        """Declarations that do not vary by breakpoint."""
        if not declarations:
            return ""
        per_breakpoint = {breakpoint: declarations for breakpoint in BREAKPOINT_ORDER}
        return self.emit_declarations(
            selector, per_breakpoint, important=important, inline=inline
        )

    def emit(
        self,
        selector: str,
        prop: str,
        responsive: ResponsiveValue | None,
        fallback: Any = None,
        unit: str | None = None,
        *,
        default_unit: str | None = None,
        allowed_units: Collection[str] | None = LENGTH_UNITS,
        numeric: bool | None = None,
        cleared: str | None = None,
        render: ValueRenderer | None = None,
        important: bool = False,
        inline: bool = True,
    ) -> str:
        """Resolve one responsive property and render it.

        With ``unit`` given and no ``default_unit``, ``unit`` is also the
        declared default unit.
        """
        if unit is not None and default_unit is None:
            default_unit = unit
        texts = responsive_texts(
            responsive,
            fallback,
            unit=unit,
            default_unit=default_unit,
            allowed_units=allowed_units,
            numeric=numeric,
            cleared=cleared,
            render=render,
        )
        return self.emit_values(selector, prop, texts, important=important, inline=inline)

    def emit_hover(
        self,
        selector: str,
        prop: str,
        texts: Mapping[Breakpoint, str | None],
    ) -> str:
        """Hover state rule. Never inlined; always ``!important``."""
        return self.emit_values(selector, prop, texts, important=True, inline=False)

    def emit_four_side(
        self,
        selector: str,
        prop: str | None,
        sides: Mapping[Breakpoint, SideValues],
        longhand: Callable[[str], str],
        *,
        important: bool = False,
        inline: bool = True,
    ) -> str:
        """Four-sided property; ``prop=None`` always writes longhands."""
        per_breakpoint = {
            breakpoint: four_side_declarations(prop, values, longhand)
            for breakpoint, values in sides.items()
        }
        return self.emit_declarations(
            selector, per_breakpoint, important=important, inline=inline
        )
