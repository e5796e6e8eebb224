"""
Component Style Generators.

One entry point per component type. Each builds a :class:`StyleContext`
(reading the theme once for the instance), runs the component's feature
compilers in order and returns a :class:`ComponentStyleBundle`.

    bundle = generate_heading_css(
        ["heading", "heading-abc"],
        {"headingFontSizeResponsive": {"desktop": 48, "mobile": 28}},
        mode=RenderMode.EXPORT,
    )
    bundle.responsive_css
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from typing import Any

from pagecraft.specs.props import (
    ContainerProps,
    HeadingProps,
    StyleProps,
    TextProps,
    coerce_props,
)
from pagecraft.specs.responsive import Breakpoint
from pagecraft.specs.theme import DEFAULT_GLOBALS, GlobalDefaults, TextElement
from pagecraft.styles.bundle import Bucket, ComponentStyleBundle, StyleContext, TypographyBlock
from pagecraft.styles.emitter import RenderMode, RuleEmitter, format_rule
from pagecraft.styles.features.registry import FeatureKey, run_features
from pagecraft.styles.selectors import (
    component_selector,
    descendant,
    hover,
    normalize_selector,
)

logger = logging.getLogger(__name__)

SelectorParts = str | Sequence[str] | None
RawProps = StyleProps | Mapping[str, Any] | None

BOX_FEATURES: tuple[FeatureKey, ...] = (
    FeatureKey.SPACING,
    FeatureKey.BACKGROUND,
    FeatureKey.OVERLAY,
    FeatureKey.BORDER,
    FeatureKey.BOX_SHADOW,
    FeatureKey.POSITION,
    FeatureKey.VISIBILITY,
)

TEXT_FEATURES: tuple[FeatureKey, ...] = (FeatureKey.TYPOGRAPHY, *BOX_FEATURES)
HEADING_FEATURES: tuple[FeatureKey, ...] = (
    FeatureKey.TYPOGRAPHY,
    FeatureKey.SEPARATOR,
    *BOX_FEATURES,
)
CONTAINER_FEATURES: tuple[FeatureKey, ...] = (FeatureKey.LAYOUT, *BOX_FEATURES)

TEXT_CONTENT = ".text-content"
HEADING_TEXT = ".heading-text"
SUB_HEADING_TEXT = ".sub-heading-text"

TEXT_DEFAULTS: dict[str, Any] = {
    "font_size": 16,
    "font_weight": 400,
    "line_height": 1.6,
    "letter_spacing": 0,
}
HEADING_DEFAULTS: dict[str, Any] = {
    "text_color": "#1f2937",
    "line_height": 1.2,
    "bottom_spacing": 16,
    "text_transform": "none",
    "text_decoration": "none",
}
SUB_HEADING_DEFAULTS: dict[str, Any] = {
    "line_height": 1.5,
    "text_transform": "none",
    "text_decoration": "none",
}

LIST_RULES: tuple[tuple[str, dict[str, str]], ...] = (
    ("ul", {"list-style-type": "disc", "padding-left": "1.5em", "margin": "0.5em 0"}),
    ("ol", {"list-style-type": "decimal", "padding-left": "1.5em", "margin": "0.5em 0"}),
    ("li", {"margin": "0.25em 0"}),
)


def _context(
    component: str,
    selector_parts: SelectorParts,
    global_defaults: GlobalDefaults | None,
    mode: RenderMode | str,
    breakpoint: Breakpoint | str,
) -> StyleContext | None:
    selector = normalize_selector(selector_parts)
    if not selector:
        logger.warning("No usable selector for %s component, skipping styles", component)
        return None
    return StyleContext(
        component=component,
        selector=selector,
        emitter=RuleEmitter(mode, breakpoint),
        globals=global_defaults or DEFAULT_GLOBALS,
    )


def _finish(
    ctx: StyleContext, props: StyleProps, features: Iterable[FeatureKey | str]
) -> ComponentStyleBundle:
    ran = run_features(ctx, props, features)
    bundle = ctx.build()
    logger.debug(
        "Generated %s styles for %s (%s, %d features)",
        ctx.component,
        ctx.selector,
        ctx.mode,
        len(ran),
    )
    return bundle


def _empty(selector_parts: SelectorParts) -> ComponentStyleBundle:
    return ComponentStyleBundle(selector=normalize_selector(selector_parts))


def text_list_css(content_selector: str) -> str:
    """Default list styling inside rich text."""
    return "".join(
        format_rule(descendant(content_selector, tag), declarations)
        for tag, declarations in LIST_RULES
    )


# =============================================================================
# Generators
# =============================================================================


def generate_text_css(
    selector_parts: SelectorParts,
    props: RawProps,
    global_defaults: GlobalDefaults | None = None,
    mode: RenderMode | str = RenderMode.EXPORT,
    breakpoint: Breakpoint | str = Breakpoint.DESKTOP,
    *,
    features: Iterable[FeatureKey | str] = TEXT_FEATURES,
) -> ComponentStyleBundle:
    """Rich text block: body typography, link colors and list defaults."""
    ctx = _context("text", selector_parts, global_defaults, mode, breakpoint)
    if ctx is None:
        return _empty(selector_parts)
    text_props = coerce_props(TextProps, props)

    content = descendant(ctx.selector, TEXT_CONTENT)
    ctx.typography.append(
        TypographyBlock(
            selector=content,
            prefix="",
            theme=ctx.globals.typography_for(TextElement.BODY),
            hover_selector=f"{ctx.selector}:hover {TEXT_CONTENT}",
            defaults=TEXT_DEFAULTS,
        )
    )
    ctx.alignment_selector = content
    ctx.link_selector = descendant(content, "a")
    ctx.defaults["text_align"] = "left"
    ctx.add(Bucket.LIST, text_list_css(content))
    return _finish(ctx, text_props, features)


def heading_element(tag: Any) -> TextElement:
    """Heading tag as a typography scale element (h2 when unrecognised)."""
    try:
        element = TextElement(str(tag).lower())
    except ValueError:
        return TextElement.H2
    return TextElement.H2 if element is TextElement.BODY else element


def generate_heading_css(
    selector_parts: SelectorParts,
    props: RawProps,
    global_defaults: GlobalDefaults | None = None,
    mode: RenderMode | str = RenderMode.EXPORT,
    breakpoint: Breakpoint | str = Breakpoint.DESKTOP,
    *,
    features: Iterable[FeatureKey | str] = HEADING_FEATURES,
) -> ComponentStyleBundle:
    """Heading, optional sub-heading and separator."""
    ctx = _context("heading", selector_parts, global_defaults, mode, breakpoint)
    if ctx is None:
        return _empty(selector_parts)
    heading_props = coerce_props(HeadingProps, props)

    ctx.typography.append(
        TypographyBlock(
            selector=descendant(ctx.selector, HEADING_TEXT),
            prefix="heading_",
            theme=ctx.globals.typography_for(heading_element(heading_props.heading_tag)),
            hover_selector=hover(descendant(ctx.selector, HEADING_TEXT)),
            defaults=HEADING_DEFAULTS,
        )
    )
    if heading_props.enable_sub_heading:
        ctx.typography.append(
            TypographyBlock(
                selector=descendant(ctx.selector, SUB_HEADING_TEXT),
                prefix="sub_heading_",
                theme=ctx.globals.typography_for(TextElement.BODY),
                hover_selector=hover(descendant(ctx.selector, SUB_HEADING_TEXT)),
                defaults=SUB_HEADING_DEFAULTS,
            )
        )
    ctx.alignment_selector = ctx.selector
    return _finish(ctx, heading_props, features)


def generate_container_css(
    selector_parts: SelectorParts,
    props: RawProps,
    global_defaults: GlobalDefaults | None = None,
    mode: RenderMode | str = RenderMode.EXPORT,
    breakpoint: Breakpoint | str = Breakpoint.DESKTOP,
    *,
    features: Iterable[FeatureKey | str] = CONTAINER_FEATURES,
) -> ComponentStyleBundle:
    """Layout container. Padding and margin default to the theme's container defaults."""
    ctx = _context("container", selector_parts, global_defaults, mode, breakpoint)
    if ctx is None:
        return _empty(selector_parts)
    container_props = coerce_props(ContainerProps, props)

    container_defaults = ctx.globals.container_defaults
    ctx.defaults["padding"] = container_defaults.padding
    ctx.defaults["margin"] = container_defaults.margin
    return _finish(ctx, container_props, features)


def generate_box_css(
    selector_parts: SelectorParts,
    props: RawProps,
    global_defaults: GlobalDefaults | None = None,
    mode: RenderMode | str = RenderMode.EXPORT,
    breakpoint: Breakpoint | str = Breakpoint.DESKTOP,
    *,
    features: Iterable[FeatureKey | str] = BOX_FEATURES,
) -> ComponentStyleBundle:
    """Any other component: the shared box-level features only."""
    ctx = _context("box", selector_parts, global_defaults, mode, breakpoint)
    if ctx is None:
        return _empty(selector_parts)
    return _finish(ctx, coerce_props(StyleProps, props), features)


def _advanced(props: RawProps, name: str, alias: str) -> str | None:
    """Read ``css_id`` or ``class_name`` before the props are validated."""
    if isinstance(props, StyleProps):
        value = getattr(props, name)
    else:
        raw = props or {}
        value = raw.get(alias, raw.get(name))
    return value if isinstance(value, str) else None


Generator = Callable[..., ComponentStyleBundle]

GENERATORS: dict[str, Generator] = {
    "text": generate_text_css,
    "heading": generate_heading_css,
    "container": generate_container_css,
}


def generate_component_css(
    component_type: str,
    node_id: str,
    props: RawProps,
    global_defaults: GlobalDefaults | None = None,
    mode: RenderMode | str = RenderMode.EXPORT,
    breakpoint: Breakpoint | str = Breakpoint.DESKTOP,
) -> ComponentStyleBundle:
    """Generate styles for one placed component, deriving its selector."""
    selector = component_selector(
        component_type,
        node_id,
        _advanced(props, "css_id", "cssId"),
        extra=_advanced(props, "class_name", "className"),
    )
    generator = GENERATORS.get(component_type)
    if generator is None:
        logger.debug("No dedicated generator for %r, using box styles", component_type)
        generator = generate_box_css
    return generator(selector, props, global_defaults, mode, breakpoint)
