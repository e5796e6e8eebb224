"""
Background and background overlay.

The background has three mutually exclusive sub-modes picked by
``background_type`` (color, gradient, image), each with its own hover
behaviour. The overlay is a ``::before`` layer composed on top of the
background and never replaces it.
"""

from __future__ import annotations

import logging
from typing import Any

from pagecraft.specs.props import StyleProps
from pagecraft.specs.responsive import Breakpoint, coerce_number
from pagecraft.styles.bundle import Bucket, StyleContext, prop, responsive_prop
from pagecraft.styles.emitter import format_value, hover_texts, responsive_texts
from pagecraft.styles.features.position import POSITION_KEYWORDS
from pagecraft.styles.resolver import is_cleared_everywhere
from pagecraft.styles.selectors import hover

logger = logging.getLogger(__name__)

BACKGROUND_TYPES = ("color", "gradient", "image")

OVERLAY_BASE = {
    "content": '""',
    "position": "absolute",
    "inset": "0",
    "pointer-events": "none",
    "border-radius": "inherit",
}

# (prop name, css property)
OVERLAY_IMAGE_PROPERTIES: tuple[tuple[str, str], ...] = (
    ("overlay_position", "background-position"),
    ("overlay_attachment", "background-attachment"),
    ("overlay_repeat", "background-repeat"),
    ("overlay_size", "background-size"),
)


def css_url(url: str) -> str:
    escaped = url.strip().replace('"', '\\"')
    return f'url("{escaped}")'


def render_opacity(value: Any, unit: str | None) -> str | None:
    """Opacity as 0..1; values above 1 are read as percentages."""
    number = coerce_number(value)
    if number is None:
        return None
    if number > 1:
        number = number / 100
    return format_value(min(max(number, 0), 1))


def _background_type(props: StyleProps) -> str | None:
    background_type = prop(props, "background_type")
    if background_type is None:
        # Older instances only stored a color
        color_map = responsive_prop(props, "background_color")
        if prop(props, "background_color") is not None or color_map is not None:
            return "color"
        return None
    if background_type not in BACKGROUND_TYPES:
        logger.debug("Ignoring unknown background type %r", background_type)
        return None
    return background_type


def compile_background(ctx: StyleContext, props: StyleProps) -> None:
    emitter = ctx.emitter
    selector = ctx.selector
    hover_selector = hover(selector)
    background_type = _background_type(props)

    if background_type == "color":
        color_map = responsive_prop(props, "background_color")
        normal: dict[Breakpoint, str | None] = {}
        if not is_cleared_everywhere(color_map):
            normal = responsive_texts(
                color_map, prop(props, "background_color"), cleared="transparent"
            )
            ctx.add(Bucket.RESPONSIVE, emitter.emit_values(selector, "background-color", normal))
        hover_map = responsive_prop(props, "background_color_hover")
        if prop(props, "enable_background_color_hover") and not is_cleared_everywhere(hover_map):
            texts = hover_texts(
                hover_map, prop(props, "background_color_hover"), normal, cleared="transparent"
            )
            ctx.add(Bucket.HOVER, emitter.emit_hover(hover_selector, "background-color", texts))

    elif background_type == "gradient":
        gradient = prop(props, "background_gradient")
        if gradient:
            ctx.add(
                Bucket.RESPONSIVE,
                emitter.emit_static(selector, {"background": format_value(gradient)}),
            )
        gradient_hover = prop(props, "background_gradient_hover")
        if gradient_hover:
            texts = responsive_texts(None, gradient_hover)
            ctx.add(Bucket.HOVER, emitter.emit_hover(hover_selector, "background", texts))

    elif background_type == "image":
        image = prop(props, "background_image")
        if image:
            ctx.add(
                Bucket.RESPONSIVE,
                emitter.emit_static(
                    selector,
                    {
                        "background-image": css_url(image),
                        "background-size": "cover",
                        "background-position": "center",
                        "background-repeat": "no-repeat",
                    },
                ),
            )


def compile_overlay(ctx: StyleContext, props: StyleProps) -> None:
    """``::before`` overlay layer. Pseudo-elements cannot be inlined."""
    if not prop(props, "enable_background_overlay"):
        return
    emitter = ctx.emitter
    layer = f"{ctx.selector}::before"

    def add(css: str) -> None:
        ctx.add(Bucket.OVERLAY, css)

    # The layer is positioned against the host
    if prop(props, "position") not in POSITION_KEYWORDS:
        add(emitter.emit_static(ctx.selector, {"position": "relative"}, inline=False))
    add(emitter.emit_static(layer, OVERLAY_BASE, inline=False))

    overlay_type = prop(props, "overlay_type", "color")
    if overlay_type == "image":
        image = prop(props, "overlay_image")
        if image:
            add(emitter.emit_static(layer, {"background-image": css_url(image)}, inline=False))
        for name, css_prop in OVERLAY_IMAGE_PROPERTIES:
            add(
                emitter.emit(
                    layer, css_prop, responsive_prop(props, name), prop(props, name), inline=False
                )
            )
    else:
        color_map = responsive_prop(props, "overlay_color")
        if not is_cleared_everywhere(color_map):
            add(
                emitter.emit(
                    layer,
                    "background-color",
                    color_map,
                    prop(props, "overlay_color"),
                    cleared="transparent",
                    inline=False,
                )
            )

    add(
        emitter.emit(
            layer,
            "mix-blend-mode",
            responsive_prop(props, "overlay_blend_mode"),
            prop(props, "overlay_blend_mode"),
            inline=False,
        )
    )
    add(
        emitter.emit(
            layer,
            "opacity",
            responsive_prop(props, "overlay_opacity"),
            prop(props, "overlay_opacity"),
            numeric=True,
            render=render_opacity,
            cleared="1",
            inline=False,
        )
    )
