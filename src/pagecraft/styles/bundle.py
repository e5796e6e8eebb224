"""
Component Style Bundle and the per-instance generation context.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pagecraft.specs.props import StyleProps
from pagecraft.specs.responsive import Breakpoint, ResponsiveValue
from pagecraft.specs.theme import GlobalDefaults, TypographyDefaults
from pagecraft.styles.emitter import RenderMode, RuleEmitter


class Bucket(StrEnum):
    """Output buckets, in stylesheet order."""

    RESPONSIVE = "responsive"
    OVERLAY = "overlay"
    LIST = "list"
    HOVER = "hover"
    VISIBILITY = "visibility"


class ComponentStyleBundle(BaseModel):
    """CSS generated for one component instance. Recomputed on every render."""

    model_config = ConfigDict(frozen=True)

    selector: str = Field(..., description="Normalised instance selector")
    responsive_css: str = Field(default="", description="Base rules and media-query overrides")
    hover_css: str = Field(default="", description=":hover-scoped rules")
    list_css: str = Field(default="", description="List default styles")
    overlay_css: str = Field(default="", description="Background overlay rules")
    visibility_css: str = Field(default="", description="Hide-at-breakpoint rules")
    inline_styles: dict[str, dict[str, str]] = Field(
        default_factory=dict, description="Edit mode: selector -> property -> value"
    )

    def bucket(self, name: Bucket | str) -> str:
        return getattr(self, f"{Bucket(name).value}_css")

    def stylesheet(self) -> str:
        """All buckets concatenated in cascade order."""
        return "".join(self.bucket(name) for name in Bucket)

    @property
    def is_empty(self) -> bool:
        return not self.stylesheet() and not self.inline_styles


@dataclass(frozen=True)
class TypographyBlock:
    """One text element of a component that carries its own typography props.

    ``prefix`` selects the prop family (``""`` for text, ``"heading_"``,
    ``"sub_heading_"``). ``defaults`` holds the engine's hard-coded values,
    consulted after the instance props and the theme.
    """

    selector: str
    prefix: str
    theme: TypographyDefaults
    hover_selector: str | None = None
    defaults: dict[str, Any] = field(default_factory=dict)

    def prop_name(self, name: str) -> str:
        return f"{self.prefix}{name}"


@dataclass
class StyleContext:
    """Everything a feature compiler needs for one instance render."""

    component: str
    selector: str
    emitter: RuleEmitter
    globals: GlobalDefaults
    defaults: dict[str, Any] = field(default_factory=dict)
    typography: list[TypographyBlock] = field(default_factory=list)
    alignment_selector: str | None = None
    link_selector: str | None = None
    _parts: dict[Bucket, list[str]] = field(
        default_factory=lambda: {bucket: [] for bucket in Bucket}
    )

    @property
    def mode(self) -> RenderMode:
        return self.emitter.mode

    @property
    def breakpoint(self) -> Breakpoint:
        return self.emitter.breakpoint

    @property
    def editing(self) -> bool:
        return self.emitter.editing

    def default(self, name: str, fallback: Any = None) -> Any:
        return self.defaults.get(name, fallback)

    def add(self, bucket: Bucket, css: str) -> None:
        if css:
            self._parts[bucket].append(css)

    def build(self) -> ComponentStyleBundle:
        text = {bucket: "".join(parts) for bucket, parts in self._parts.items()}
        return ComponentStyleBundle(
            selector=self.selector,
            responsive_css=text[Bucket.RESPONSIVE],
            hover_css=text[Bucket.HOVER],
            list_css=text[Bucket.LIST],
            overlay_css=text[Bucket.OVERLAY],
            visibility_css=text[Bucket.VISIBILITY],
            inline_styles={sel: dict(decls) for sel, decls in self.emitter.inline.items()},
        )


def prop(props: StyleProps, name: str, default: Any = None) -> Any:
    """Read a prop that not every component model declares."""
    value = getattr(props, name, None)
    return default if value is None else value


def responsive_prop(props: StyleProps, name: str) -> ResponsiveValue | None:
    value = getattr(props, f"{name}_responsive", None)
    return value if isinstance(value, ResponsiveValue) else None
