"""Container layout: display mode and flex alignment."""

from __future__ import annotations

from pagecraft.specs.props import StyleProps
from pagecraft.styles.bundle import Bucket, StyleContext, prop, responsive_prop

LAYOUT_DISPLAY = {"flex": "flex", "grid": "grid", "block": "block"}

FLEX_PROPERTIES: tuple[tuple[str, str, str], ...] = (
    ("flex_direction", "flex-direction", "row"),
    ("justify_content", "justify-content", "flex-start"),
    ("align_items", "align-items", "stretch"),
    ("flex_wrap", "flex-wrap", "nowrap"),
)


def compile_layout(ctx: StyleContext, props: StyleProps) -> None:
    layout = prop(props, "layout")
    display = LAYOUT_DISPLAY.get(layout) if isinstance(layout, str) else None
    if display is None:
        return
    ctx.add(Bucket.RESPONSIVE, ctx.emitter.emit_static(ctx.selector, {"display": display}))

    if layout != "flex":
        return
    for name, css_prop, default in FLEX_PROPERTIES:
        ctx.add(
            Bucket.RESPONSIVE,
            ctx.emitter.emit(
                ctx.selector,
                css_prop,
                responsive_prop(props, name),
                prop(props, name, default),
            ),
        )
