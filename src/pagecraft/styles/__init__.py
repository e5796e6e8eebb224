"""
Style resolution and CSS generation.

Resolver -> Box Expander -> Rule Emitter -> Feature Compilers -> Component
Style Generators, leaves first.
"""

from pagecraft.styles.box import FourSideFallback, SideValues, cascade_four_side, expand_four_side
from pagecraft.styles.bundle import ComponentStyleBundle
from pagecraft.styles.components import (
    GENERATORS,
    generate_component_css,
    generate_container_css,
    generate_heading_css,
    generate_text_css,
)
from pagecraft.styles.emitter import RenderMode, RuleEmitter
from pagecraft.styles.resolver import cascade, resolve, resolve_unit

__all__ = [
    "GENERATORS",
    "ComponentStyleBundle",
    "FourSideFallback",
    "RenderMode",
    "RuleEmitter",
    "SideValues",
    "cascade",
    "cascade_four_side",
    "expand_four_side",
    "generate_component_css",
    "generate_container_css",
    "generate_heading_css",
    "generate_text_css",
    "resolve",
    "resolve_unit",
]
