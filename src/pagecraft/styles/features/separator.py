"""Heading separator line."""

from __future__ import annotations

from pagecraft.specs.props import StyleProps
from pagecraft.styles.bundle import Bucket, StyleContext, prop, responsive_prop
from pagecraft.styles.features.border import BORDER_STYLES
from pagecraft.styles.resolver import format_length
from pagecraft.styles.selectors import descendant

SEPARATOR_CLASS = ".heading-separator"
SEPARATOR_THICKNESS = 2
SEPARATOR_WIDTH = 12
SEPARATOR_SPACING = 16


def compile_separator(ctx: StyleContext, props: StyleProps) -> None:
    """Hidden entirely while the style is ``none``."""
    style = prop(props, "separator_style")
    if style not in BORDER_STYLES:
        return
    emitter = ctx.emitter
    selector = descendant(ctx.selector, SEPARATOR_CLASS)

    thickness = format_length(prop(props, "separator_thickness", SEPARATOR_THICKNESS), "px")
    color = prop(props, "separator_color", ctx.globals.color_palette.primary)
    ctx.add(
        Bucket.RESPONSIVE,
        emitter.emit_static(selector, {"border-top": f"{thickness} {style} {color}"}),
    )
    ctx.add(
        Bucket.RESPONSIVE,
        emitter.emit(
            selector,
            "width",
            responsive_prop(props, "separator_width"),
            prop(props, "separator_width", SEPARATOR_WIDTH),
            prop(props, "separator_width_unit"),
            default_unit="%",
        ),
    )
    ctx.add(
        Bucket.RESPONSIVE,
        emitter.emit(
            selector,
            "margin-bottom",
            responsive_prop(props, "separator_bottom_spacing"),
            prop(props, "separator_bottom_spacing", SEPARATOR_SPACING),
            prop(props, "separator_bottom_spacing_unit"),
            default_unit="px",
        ),
    )
