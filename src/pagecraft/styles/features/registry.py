"""
Feature registry.

A closed set of feature keys mapped to their compilers. Component types
list the keys they use; an unknown key (from a misconfigured settings
section list, say) is logged and skipped instead of failing the render.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from enum import StrEnum

from pagecraft.specs.props import StyleProps
from pagecraft.styles.bundle import StyleContext
from pagecraft.styles.features.background import compile_background, compile_overlay
from pagecraft.styles.features.border import compile_border
from pagecraft.styles.features.layout import compile_layout
from pagecraft.styles.features.position import compile_position
from pagecraft.styles.features.separator import compile_separator
from pagecraft.styles.features.shadow import compile_box_shadow
from pagecraft.styles.features.spacing import compile_spacing
from pagecraft.styles.features.typography import compile_typography
from pagecraft.styles.features.visibility import compile_visibility

logger = logging.getLogger(__name__)

FeatureCompiler = Callable[[StyleContext, StyleProps], None]


class FeatureKey(StrEnum):
    """Styling concerns a component can opt into."""

    LAYOUT = "layout"
    SPACING = "spacing"
    TYPOGRAPHY = "typography"
    BACKGROUND = "background"
    OVERLAY = "overlay"
    BORDER = "border"
    SEPARATOR = "separator"
    BOX_SHADOW = "box_shadow"
    POSITION = "position"
    VISIBILITY = "visibility"


FEATURES: dict[FeatureKey, FeatureCompiler] = {
    FeatureKey.LAYOUT: compile_layout,
    FeatureKey.SPACING: compile_spacing,
    FeatureKey.TYPOGRAPHY: compile_typography,
    FeatureKey.BACKGROUND: compile_background,
    FeatureKey.OVERLAY: compile_overlay,
    FeatureKey.BORDER: compile_border,
    FeatureKey.SEPARATOR: compile_separator,
    FeatureKey.BOX_SHADOW: compile_box_shadow,
    FeatureKey.POSITION: compile_position,
    FeatureKey.VISIBILITY: compile_visibility,
}


def lookup_feature(key: FeatureKey | str) -> FeatureCompiler | None:
    """Return the compiler for ``key``, or None (with a warning) if there is none."""
    try:
        return FEATURES[FeatureKey(key)]
    except (ValueError, KeyError):
        logger.warning("Unknown style feature %r, skipping", key)
        return None


def run_features(
    ctx: StyleContext, props: StyleProps, keys: Iterable[FeatureKey | str]
) -> list[FeatureKey]:
    """Run each known feature in order. Returns the keys that ran."""
    ran: list[FeatureKey] = []
    for key in keys:
        compiler = lookup_feature(key)
        if compiler is None:
            continue
        compiler(ctx, props)
        ran.append(FeatureKey(key))
    return ran
