"""
Box shadow, with independent normal and hover states and a preset list.

Selecting a preset overwrites all eight shadow scalars (horizontal,
vertical, blur, spread for normal and hover), clears their responsive
overrides, resets both colors and then applies the preset's magnitudes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic.alias_generators import to_camel

from pagecraft.specs.props import StyleProps
from pagecraft.specs.responsive import BREAKPOINT_ORDER, Breakpoint, Present
from pagecraft.styles.bundle import Bucket, StyleContext, prop, responsive_prop
from pagecraft.styles.resolver import cascade, format_number
from pagecraft.styles.selectors import hover

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=StyleProps)

SHADOW_COMPONENTS = ("horizontal", "vertical", "blur", "spread")
SHADOW_COLOR = "rgba(0, 0, 0, 0.1)"
SHADOW_COLOR_HOVER = "rgba(0, 0, 0, 0.15)"


@dataclass(frozen=True)
class BoxShadowPreset:
    """Preset magnitudes. Horizontal offset and spread are always zero."""

    vertical: int
    blur: int
    hover_vertical: int
    hover_blur: int
    hover_alpha: float = 0.15

    @property
    def hover_color(self) -> str:
        return f"rgba(0, 0, 0, {format_number(self.hover_alpha)})"


BOX_SHADOW_PRESETS: dict[str, BoxShadowPreset] = {
    "subtle": BoxShadowPreset(vertical=1, blur=3, hover_vertical=2, hover_blur=6),
    "small": BoxShadowPreset(vertical=1, blur=3, hover_vertical=4, hover_blur=8),
    "medium": BoxShadowPreset(vertical=4, blur=6, hover_vertical=8, hover_blur=15),
    "large": BoxShadowPreset(
        vertical=10, blur=15, hover_vertical=15, hover_blur=25, hover_alpha=0.2
    ),
    "xl": BoxShadowPreset(
        vertical=20, blur=25, hover_vertical=25, hover_blur=50, hover_alpha=0.25
    ),
}

PRESET_NAMES: tuple[str, ...] = ("none", *BOX_SHADOW_PRESETS)


# =============================================================================
# Presets
# =============================================================================


def box_shadow_preset_updates(preset: str | None, *, by_alias: bool = False) -> dict[str, Any]:
    """Prop updates that apply a preset (``None``/``"none"`` turns the shadow off).

    Returns an empty dict for an unknown preset name.
    """
    name = None if preset in (None, "", "none") else preset
    if name is not None and name not in BOX_SHADOW_PRESETS:
        logger.warning("Unknown box shadow preset %r, ignoring", preset)
        return {}

    updates: dict[str, Any] = {}
    for suffix in ("", "_hover"):
        for component in SHADOW_COMPONENTS:
            updates[f"box_shadow_{component}{suffix}"] = 0
            updates[f"box_shadow_{component}{suffix}_responsive"] = None
    updates["box_shadow_color"] = SHADOW_COLOR
    updates["box_shadow_color_hover"] = SHADOW_COLOR_HOVER
    updates["box_shadow_preset"] = name
    updates["enable_box_shadow"] = name is not None
    updates["enable_box_shadow_hover"] = name is not None

    if name is not None:
        values = BOX_SHADOW_PRESETS[name]
        updates["box_shadow_vertical"] = values.vertical
        updates["box_shadow_blur"] = values.blur
        updates["box_shadow_vertical_hover"] = values.hover_vertical
        updates["box_shadow_blur_hover"] = values.hover_blur
        updates["box_shadow_color_hover"] = values.hover_color

    if by_alias:
        return {to_camel(key): value for key, value in updates.items()}
    return updates


def apply_box_shadow_preset(props: P, preset: str | None) -> P:
    """Return a copy of ``props`` with the preset applied."""
    updates = box_shadow_preset_updates(preset)
    if not updates:
        return props
    return props.model_copy(update=updates)


# =============================================================================
# Rendering
# =============================================================================


def shadow_texts(props: StyleProps, *, hover: bool = False) -> dict[Breakpoint, str | None]:
    """Rendered ``box-shadow`` value per breakpoint for one state."""
    suffix = "_hover" if hover else ""
    components = {
        component: cascade(
            responsive_prop(props, f"box_shadow_{component}{suffix}"),
            prop(props, f"box_shadow_{component}{suffix}", 0),
            numeric=True,
        )
        for component in SHADOW_COMPONENTS
    }
    default_color = SHADOW_COLOR_HOVER if hover else SHADOW_COLOR
    color = prop(props, f"box_shadow_color{suffix}", default_color)
    inset = "inset " if prop(props, f"box_shadow_position{suffix}") == "inset" else ""
    has_preset = prop(props, "box_shadow_preset") not in (None, "", "none")

    texts: dict[Breakpoint, str | None] = {}
    previous: str | None = None
    for breakpoint in BREAKPOINT_ORDER:
        values = {}
        for component, slots in components.items():
            slot = slots[breakpoint]
            values[component] = slot.value if isinstance(slot, Present) else 0
        if not has_preset and not any(values[c] for c in ("horizontal", "vertical", "blur")):
            text = "none" if previous is not None else None
        else:
            lengths = " ".join(f"{format_number(values[c])}px" for c in SHADOW_COMPONENTS)
            text = f"{inset}{lengths} {color}"
        texts[breakpoint] = text
        previous = text
    return texts


def compile_box_shadow(ctx: StyleContext, props: StyleProps) -> None:
    if prop(props, "enable_box_shadow"):
        ctx.add(
            Bucket.RESPONSIVE,
            ctx.emitter.emit_values(ctx.selector, "box-shadow", shadow_texts(props)),
        )
    if prop(props, "enable_box_shadow_hover"):
        ctx.add(
            Bucket.HOVER,
            ctx.emitter.emit_hover(
                hover(ctx.selector), "box-shadow", shadow_texts(props, hover=True)
            ),
        )
