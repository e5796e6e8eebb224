"""
Typography: text color, font settings, spacing between lines and letters,
alignment, hover color and link colors.

Each :class:`TypographyBlock` on the context is compiled independently, so a
heading's title and sub-heading get their own rules.
"""

from __future__ import annotations

from typing import Any

from pagecraft.specs.props import StyleProps
from pagecraft.specs.responsive import Breakpoint, ResponsiveValue
from pagecraft.styles.bundle import Bucket, StyleContext, TypographyBlock, prop, responsive_prop
from pagecraft.styles.emitter import hover_texts, responsive_texts
from pagecraft.styles.resolver import (
    LINE_HEIGHT_UNITS,
    format_length,
    format_number,
    is_cleared_everywhere,
)
from pagecraft.styles.selectors import hover

# (prop name, css property, theme attribute)
KEYWORD_PROPERTIES: tuple[tuple[str, str, str | None], ...] = (
    ("font_family", "font-family", "font_family"),
    ("font_weight", "font-weight", "font_weight"),
    ("font_style", "font-style", "font_style"),
    ("text_transform", "text-transform", None),
    ("text_decoration", "text-decoration", None),
)


def render_line_height(value: Any, unit: str | None) -> str | None:
    """``normal`` keyword, bare multiplier, or a length."""
    if unit == "normal":
        return "normal"
    if unit in (None, "", "number"):
        return format_number(value)
    return format_length(value, unit)


def _first(*candidates: Any) -> Any:
    for candidate in candidates:
        if candidate is not None and candidate != "":
            return candidate
    return None


def _font_size(
    block: TypographyBlock, props: StyleProps
) -> tuple[ResponsiveValue | None, Any]:
    """Responsive map and fallback for font-size.

    With no instance input at all, the theme's per-breakpoint scale stands in
    for the responsive map so mobile and tablet get their own sizes.
    """
    name = block.prop_name("font_size")
    responsive = responsive_prop(props, name)
    static = prop(props, name)
    if static is None and (responsive is None or responsive.is_empty()):
        sizes = {bp: size for bp, size in block.theme.font_sizes.items() if size is not None}
        if sizes:
            return ResponsiveValue(values=sizes), None
    return responsive, _first(static, block.theme.font_size, block.defaults.get("font_size"))


def compile_block(ctx: StyleContext, props: StyleProps, block: TypographyBlock) -> None:
    emitter = ctx.emitter
    selector = block.selector
    theme = block.theme

    def add(css: str) -> None:
        ctx.add(Bucket.RESPONSIVE, css)

    # Color
    color_name = block.prop_name("text_color")
    color_map = responsive_prop(props, color_name)
    color_texts: dict[Breakpoint, str | None] = {}
    if not is_cleared_everywhere(color_map):
        fallback = _first(
            prop(props, color_name), theme.text_color, block.defaults.get("text_color")
        )
        color_texts = _color_texts(color_map, fallback)
        add(emitter.emit_values(selector, "color", color_texts))

    # Font size
    size_map, size_fallback = _font_size(block, props)
    add(
        emitter.emit(
            selector,
            "font-size",
            size_map,
            size_fallback,
            prop(props, block.prop_name("font_size_unit")),
            default_unit="px",
        )
    )

    # Keyword properties
    for name, css_prop, theme_attr in KEYWORD_PROPERTIES:
        full_name = block.prop_name(name)
        fallback = _first(
            prop(props, full_name),
            getattr(theme, theme_attr) if theme_attr else None,
            block.defaults.get(name),
        )
        add(emitter.emit(selector, css_prop, responsive_prop(props, full_name), fallback))

    # Letter spacing
    name = block.prop_name("letter_spacing")
    add(
        emitter.emit(
            selector,
            "letter-spacing",
            responsive_prop(props, name),
            _first(prop(props, name), theme.letter_spacing, block.defaults.get("letter_spacing")),
            prop(props, f"{name}_unit"),
            default_unit="px",
        )
    )

    # Line height
    name = block.prop_name("line_height")
    add(
        emitter.emit(
            selector,
            "line-height",
            responsive_prop(props, name),
            _first(prop(props, name), theme.line_height, block.defaults.get("line_height")),
            prop(props, f"{name}_unit"),
            default_unit="number",
            allowed_units=LINE_HEIGHT_UNITS,
            render=render_line_height,
            cleared="normal",
        )
    )

    # Bottom spacing
    name = block.prop_name("bottom_spacing")
    if "bottom_spacing" in block.defaults or prop(props, name) is not None:
        add(
            emitter.emit(
                selector,
                "margin-bottom",
                responsive_prop(props, name),
                _first(prop(props, name), block.defaults.get("bottom_spacing")),
                prop(props, f"{name}_unit"),
                default_unit="px",
            )
        )

    # Hover color
    hover_name = block.prop_name("text_color_hover")
    hover_map = responsive_prop(props, hover_name)
    if block.hover_selector and not is_cleared_everywhere(hover_map):
        texts = hover_texts(hover_map, prop(props, hover_name), color_texts, cleared="inherit")
        ctx.add(Bucket.HOVER, emitter.emit_hover(block.hover_selector, "color", texts))


def _color_texts(
    responsive: ResponsiveValue | None, fallback: Any
) -> dict[Breakpoint, str | None]:
    return responsive_texts(responsive, fallback, cleared="inherit")


def compile_alignment(ctx: StyleContext, props: StyleProps) -> None:
    """text-align is always ``!important`` so card layouts cannot override it."""
    if ctx.alignment_selector is None:
        return
    ctx.add(
        Bucket.RESPONSIVE,
        ctx.emitter.emit(
            ctx.alignment_selector,
            "text-align",
            responsive_prop(props, "text_align"),
            prop(props, "text_align", ctx.default("text_align")),
            important=True,
        ),
    )


def compile_link_colors(ctx: StyleContext, props: StyleProps) -> None:
    """Link and link-hover colors, for components with the link colors capability."""
    if ctx.link_selector is None:
        return
    links = ctx.globals.links

    link_map = responsive_prop(props, "link_color")
    link_texts: dict[Breakpoint, str | None] = {}
    if not is_cleared_everywhere(link_map):
        link_texts = _color_texts(link_map, prop(props, "link_color", links.color))
        ctx.add(
            Bucket.RESPONSIVE,
            ctx.emitter.emit_values(ctx.link_selector, "color", link_texts, inline=False),
        )

    hover_map = responsive_prop(props, "link_color_hover")
    if not is_cleared_everywhere(hover_map):
        texts = hover_texts(
            hover_map,
            prop(props, "link_color_hover", links.color_hover),
            link_texts,
            cleared="inherit",
        )
        hover_css = ctx.emitter.emit_hover(hover(ctx.link_selector), "color", texts)
        ctx.add(Bucket.HOVER, hover_css)


def compile_typography(ctx: StyleContext, props: StyleProps) -> None:
    for block in ctx.typography:
        compile_block(ctx, props, block)
    compile_alignment(ctx, props)
    compile_link_colors(ctx, props)
