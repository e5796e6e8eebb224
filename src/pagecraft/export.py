"""
Static export.

Runs every component of a page through its generator and consolidates the
bundles into one stylesheet. Rules are single-line, so deduplication works
line by line: the first occurrence of a rule wins and later copies are
dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pagecraft.core.page_loader import PageDocument
from pagecraft.specs.responsive import Breakpoint
from pagecraft.specs.theme import GlobalDefaults
from pagecraft.styles.bundle import ComponentStyleBundle
from pagecraft.styles.components import generate_component_css
from pagecraft.styles.emitter import RenderMode

logger = logging.getLogger(__name__)


def compile_page(
    page: PageDocument,
    global_defaults: GlobalDefaults | None = None,
    mode: RenderMode | str = RenderMode.EXPORT,
    breakpoint: Breakpoint | str = Breakpoint.DESKTOP,
) -> list[ComponentStyleBundle]:
    """Generate one bundle per component, in document order."""
    bundles = [
        generate_component_css(
            component.type, component.id, component.props, global_defaults, mode, breakpoint
        )
        for component in page.components
    ]
    logger.debug("Compiled %d components for page %s", len(bundles), page.name)
    return bundles


def consolidate_stylesheet(
    sources: Iterable[ComponentStyleBundle | str], custom_css: str = ""
) -> str:
    """Merge bundle text into one deduplicated stylesheet.

    ``custom_css`` (the theme's global custom CSS) is appended last, as is.
    """
    seen: set[str] = set()
    lines: list[str] = []
    for source in sources:
        text = source.stylesheet() if isinstance(source, ComponentStyleBundle) else source
        for line in text.splitlines():
            rule = line.strip()
            if not rule or rule in seen:
                continue
            seen.add(rule)
            lines.append(rule)

    stylesheet = "\n".join(lines)
    if custom_css.strip():
        stylesheet = f"{stylesheet}\n{custom_css.strip()}" if stylesheet else custom_css.strip()
    return f"{stylesheet}\n" if stylesheet else ""


def render_style_block(css: str) -> str:
    """Wrap a stylesheet for embedding in exported HTML."""
    if not css.strip():
        return ""
    return f"<style>\n{css.rstrip()}\n</style>\n"
