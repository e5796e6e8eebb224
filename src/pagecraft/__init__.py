"""
pagecraft - responsive style resolution and CSS generation for page builder
components.

Resolves per-breakpoint property values through a fallback cascade and
compiles component props into inline styles (editing) or a self-contained
stylesheet with media queries and hover rules (preview/export).
"""

from __future__ import annotations

from pagecraft._version import get_version
from pagecraft.core.errors import PageLoadError, PagecraftError, ThemeLoadError
from pagecraft.editing.live import (
    LiveResolver,
    apply_responsive_edit,
    collapse_to_legacy,
    get_responsive_value,
    set_responsive_value,
)
from pagecraft.specs.responsive import (
    ABSENT,
    CLEARED,
    Breakpoint,
    Present,
    ResponsiveValue,
)
from pagecraft.specs.theme import DEFAULT_GLOBALS, GlobalDefaults
from pagecraft.styles.box import expand_four_side
from pagecraft.styles.bundle import ComponentStyleBundle
from pagecraft.styles.components import (
    generate_component_css,
    generate_container_css,
    generate_heading_css,
    generate_text_css,
)
from pagecraft.styles.emitter import RenderMode
from pagecraft.styles.features.shadow import apply_box_shadow_preset
from pagecraft.styles.resolver import resolve, resolve_unit

__version__ = get_version()

__all__ = [
    "__version__",
    # Value model
    "ABSENT",
    "CLEARED",
    "Breakpoint",
    "Present",
    "ResponsiveValue",
    # Theme
    "DEFAULT_GLOBALS",
    "GlobalDefaults",
    # Resolution
    "resolve",
    "resolve_unit",
    "expand_four_side",
    # Generation
    "ComponentStyleBundle",
    "RenderMode",
    "generate_component_css",
    "generate_container_css",
    "generate_heading_css",
    "generate_text_css",
    "apply_box_shadow_preset",
    # Editing
    "LiveResolver",
    "apply_responsive_edit",
    "collapse_to_legacy",
    "get_responsive_value",
    "set_responsive_value",
    # Errors
    "PagecraftError",
    "PageLoadError",
    "ThemeLoadError",
]
