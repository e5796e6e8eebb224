"""
Selectors and media queries.

The selector allocator hands the engine class names in whatever shape the
node tree stored them (``"heading heading-abc"``, ``".heading.heading-abc"``,
``["heading", " .heading-abc"]``). They are normalised into one compound
class selector before any rule is written.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from enum import StrEnum

from pagecraft.specs.responsive import BREAKPOINTS, Breakpoint

_SEPARATORS = re.compile(r"[\s.]+")
_INVALID_CLASS_CHARS = re.compile(r"[^A-Za-z0-9_-]+")


def normalize_selector(parts: str | Iterable[str] | None) -> str:
    """Join class names into a single compound selector.

    Leading dots, repeated separators and duplicate class names are dropped:
    ``"heading  .heading-abc"`` -> ``".heading.heading-abc"``.
    """
    if parts is None:
        return ""
    if isinstance(parts, str):
        parts = [parts]

    classes: list[str] = []
    for part in parts:
        for name in _SEPARATORS.split(part or ""):
            if name and name not in classes:
                classes.append(name)
    return "".join(f".{name}" for name in classes)


def component_class_name(component: str, node_id: str, css_id: str | None = None) -> str:
    """Instance-unique class name: ``{component}-{cssId or nodeId}``."""
    suffix = (css_id or "").strip() or node_id
    return _INVALID_CLASS_CHARS.sub("-", f"{component}-{suffix}").strip("-")


def component_selector(
    component: str, node_id: str, css_id: str | None = None, extra: str | None = None
) -> str:
    """Type class plus instance class (plus any user classes) as one selector."""
    parts = [component, component_class_name(component, node_id, css_id)]
    if extra:
        parts.append(extra)
    return normalize_selector(parts)


def descendant(selector: str, child: str) -> str:
    return f"{selector} {child}"


def hover(selector: str) -> str:
    return f"{selector}:hover"


# =============================================================================
# Media queries
# =============================================================================


def media_query(breakpoint: Breakpoint) -> str | None:
    """Desktop-first override query; desktop rules are unscoped."""
    breakpoint = Breakpoint(breakpoint)
    max_width = BREAKPOINTS[breakpoint].max_width
    if breakpoint is Breakpoint.DESKTOP or max_width is None:
        return None
    return f"(max-width: {max_width}px)"


class VisibilityTarget(StrEnum):
    """Device ranges the visibility toggles can hide an element at."""

    DESKTOP = "desktop"
    TABLET = "tablet"
    LANDSCAPE_MOBILE = "landscape_mobile"
    MOBILE = "mobile"


VISIBILITY_QUERIES: dict[VisibilityTarget, str] = {
    VisibilityTarget.DESKTOP: "(min-width: 1024px)",
    VisibilityTarget.TABLET: "(min-width: 768px) and (max-width: 1023px)",
    VisibilityTarget.LANDSCAPE_MOBILE: "(min-width: 480px) and (max-width: 767px)",
    VisibilityTarget.MOBILE: "(max-width: 479px)",
}


def visibility_query(target: VisibilityTarget | str) -> str:
    return VISIBILITY_QUERIES[VisibilityTarget(target)]
