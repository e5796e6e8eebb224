"""Padding, margin and flex gaps."""

from __future__ import annotations

from pagecraft.specs.props import StyleProps
from pagecraft.styles.box import FourSideFallback, cascade_four_side, side_longhand
from pagecraft.styles.bundle import Bucket, StyleContext, prop, responsive_prop

GAP_DEFAULT = 20


def _box_fallback(props: StyleProps, name: str, default: object) -> FourSideFallback:
    return FourSideFallback(
        uniform=prop(props, name),
        top=prop(props, f"{name}_top"),
        right=prop(props, f"{name}_right"),
        bottom=prop(props, f"{name}_bottom"),
        left=prop(props, f"{name}_left"),
        default=default,
        unit=prop(props, f"{name}_unit"),
    )


def compile_spacing(ctx: StyleContext, props: StyleProps) -> None:
    for name in ("padding", "margin"):
        sides = cascade_four_side(
            responsive_prop(props, name), _box_fallback(props, name, ctx.default(name)), "px"
        )
        ctx.add(
            Bucket.RESPONSIVE,
            ctx.emitter.emit_four_side(
                ctx.selector, name, sides, side_longhand(f"{name}-{{side}}")
            ),
        )

    if prop(props, "layout") != "flex":
        return
    for name, css_prop in (("row_gap", "row-gap"), ("column_gap", "column-gap")):
        ctx.add(
            Bucket.RESPONSIVE,
            ctx.emitter.emit(
                ctx.selector,
                css_prop,
                responsive_prop(props, name),
                prop(props, name, GAP_DEFAULT),
                prop(props, f"{name}_unit"),
                default_unit="px",
            ),
        )
