"""
Position offsets and z-index.

Positioning takes an element out of flow, which would make it impossible to
select on the canvas, so nothing here is applied while editing. The editor
shows :data:`POSITION_EDITING_NOTICE` next to the controls instead.

Each offset is its own responsive value with its own unit map, so
``top: 50%`` and ``left: 20px`` can sit side by side.
"""

from __future__ import annotations

from pagecraft.specs.props import StyleProps
from pagecraft.specs.responsive import BREAKPOINT_ORDER, SIDES, Breakpoint
from pagecraft.styles.bundle import Bucket, StyleContext, prop, responsive_prop
from pagecraft.styles.emitter import responsive_texts

POSITION_KEYWORDS = frozenset({"relative", "absolute", "fixed", "sticky"})

POSITION_EDITING_NOTICE = (
    "Position and z-index changes are applied in preview and export, not while editing."
)

OFFSET_UNITS = frozenset({"px", "%", "em", "rem", "vh", "vw"})


def offset_unit(props: StyleProps, side: str) -> str | None:
    """Static unit for one offset, falling back to the shared ``position_unit``."""
    return prop(props, f"position_{side}_unit") or prop(props, "position_unit")


def offset_texts(props: StyleProps) -> dict[Breakpoint, dict[str, str]]:
    """Offset declarations per breakpoint, each side in its own unit."""
    per_breakpoint: dict[Breakpoint, dict[str, str]] = {bp: {} for bp in BREAKPOINT_ORDER}
    for side in SIDES:
        texts = responsive_texts(
            responsive_prop(props, f"position_{side}"),
            prop(props, f"position_{side}"),
            unit=offset_unit(props, side),
            default_unit="px",
            allowed_units=OFFSET_UNITS,
        )
        for breakpoint, text in texts.items():
            if text is not None:
                per_breakpoint[breakpoint][side] = text
    return per_breakpoint


def compile_position(ctx: StyleContext, props: StyleProps) -> None:
    if ctx.editing:
        return
    emitter = ctx.emitter

    position = prop(props, "position")
    if position in POSITION_KEYWORDS:
        ctx.add(Bucket.RESPONSIVE, emitter.emit_static(ctx.selector, {"position": position}))
        ctx.add(Bucket.RESPONSIVE, emitter.emit_declarations(ctx.selector, offset_texts(props)))

    ctx.add(
        Bucket.RESPONSIVE,
        emitter.emit(
            ctx.selector,
            "z-index",
            responsive_prop(props, "z_index"),
            prop(props, "z_index"),
            numeric=True,
            cleared="auto",
        ),
    )
