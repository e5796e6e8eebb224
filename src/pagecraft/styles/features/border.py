"""Border style, width, color (with hover) and radius."""

from __future__ import annotations

from pagecraft.specs.props import StyleProps
from pagecraft.specs.responsive import Breakpoint, ResponsiveValue
from pagecraft.styles.box import (
    FourSideFallback,
    cascade_four_side,
    radius_longhand,
    side_longhand,
)
from pagecraft.styles.bundle import Bucket, StyleContext, prop, responsive_prop
from pagecraft.styles.emitter import hover_texts, responsive_texts
from pagecraft.styles.resolver import is_cleared_everywhere
from pagecraft.styles.selectors import hover

BORDER_STYLES = frozenset(
    {"solid", "dashed", "dotted", "double", "groove", "ridge", "inset", "outset"}
)
BORDER_WIDTH_DEFAULT = 1


def has_border(props: StyleProps) -> bool:
    """Width and color only exist while a visible style is selected."""
    return prop(props, "border_style") in BORDER_STYLES


def compile_border(ctx: StyleContext, props: StyleProps) -> None:
    emitter = ctx.emitter

    if has_border(props):
        ctx.add(
            Bucket.RESPONSIVE,
            emitter.emit_static(ctx.selector, {"border-style": prop(props, "border_style")}),
        )

        width_fallback = FourSideFallback(
            uniform=prop(props, "border_width"),
            top=prop(props, "border_top_width"),
            right=prop(props, "border_right_width"),
            bottom=prop(props, "border_bottom_width"),
            left=prop(props, "border_left_width"),
            default=BORDER_WIDTH_DEFAULT,
        )
        widths = cascade_four_side(responsive_prop(props, "border_width"), width_fallback, "px")
        ctx.add(
            Bucket.RESPONSIVE,
            emitter.emit_four_side(
                ctx.selector, "border-width", widths, side_longhand("border-{side}-width")
            ),
        )

        color_map = responsive_prop(props, "border_color")
        normal: dict[Breakpoint, str | None] = {}
        if not is_cleared_everywhere(color_map):
            normal = responsive_texts(
                color_map,
                prop(props, "border_color", ctx.globals.border.color),
                cleared="currentcolor",
            )
            ctx.add(
                Bucket.RESPONSIVE, emitter.emit_values(ctx.selector, "border-color", normal)
            )

        hover_map = responsive_prop(props, "border_color_hover")
        if prop(props, "enable_border_color_hover") and not is_cleared_everywhere(hover_map):
            texts = hover_texts(
                hover_map,
                prop(props, "border_color_hover", ctx.globals.border.color_hover),
                normal,
                cleared="currentcolor",
            )
            ctx.add(
                Bucket.HOVER, emitter.emit_hover(hover(ctx.selector), "border-color", texts)
            )

    radius_map = responsive_prop(props, "border_radius")
    radius_fallback = FourSideFallback(
        uniform=prop(props, "border_radius"),
        top=prop(props, "border_top_left_radius"),
        right=prop(props, "border_top_right_radius"),
        bottom=prop(props, "border_bottom_right_radius"),
        left=prop(props, "border_bottom_left_radius"),
        unit=prop(props, "border_radius_unit"),
    )
    if not _has_radius(radius_map, radius_fallback):
        return
    radii = cascade_four_side(radius_map, radius_fallback, "px")
    ctx.add(
        Bucket.RESPONSIVE,
        emitter.emit_four_side(ctx.selector, "border-radius", radii, radius_longhand),
    )


def _has_radius(radius_map: ResponsiveValue | None, fallback: FourSideFallback) -> bool:
    """A zero radius with no responsive input adds nothing."""
    if radius_map is not None and not radius_map.is_empty():
        return True
    statics = (fallback.uniform, fallback.top, fallback.right, fallback.bottom, fallback.left)
    return any(value not in (None, 0) for value in statics)
