"""
Hide-at-breakpoint toggles.

Compiled into ``display: none`` inside the matching device range. Nothing
is emitted while editing so hidden elements stay selectable on the canvas.
"""

from __future__ import annotations

from pagecraft.specs.props import StyleProps
from pagecraft.styles.bundle import Bucket, StyleContext, prop
from pagecraft.styles.emitter import format_rule
from pagecraft.styles.selectors import VisibilityTarget, visibility_query

VISIBILITY_TOGGLES: tuple[tuple[str, VisibilityTarget], ...] = (
    ("hide_on_desktop", VisibilityTarget.DESKTOP),
    ("hide_on_tablet", VisibilityTarget.TABLET),
    ("hide_on_landscape_mobile", VisibilityTarget.LANDSCAPE_MOBILE),
    ("hide_on_mobile", VisibilityTarget.MOBILE),
)


def compile_visibility(ctx: StyleContext, props: StyleProps) -> None:
    if ctx.editing:
        return
    for name, target in VISIBILITY_TOGGLES:
        if prop(props, name):
            ctx.add(
                Bucket.VISIBILITY,
                format_rule(
                    ctx.selector,
                    {"display": "none"},
                    important=True,
                    media=visibility_query(target),
                ),
            )
