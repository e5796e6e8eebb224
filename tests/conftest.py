"""Shared pytest fixtures for pagecraft tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from pagecraft.core.theme_loader import THEME_ENV_VAR
from pagecraft.specs.responsive import ResponsiveValue


@pytest.fixture(autouse=True)
def isolated_theme(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep theme lookup away from the developer's environment and working directory."""
    monkeypatch.delenv(THEME_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def rv():
    """Build a ResponsiveValue from the node-tree mapping shape."""

    def _build(raw: dict) -> ResponsiveValue:
        return ResponsiveValue.model_validate(raw)

    return _build


@pytest.fixture
def theme_file(tmp_path: Path) -> Path:
    """A small theme settings file using the editor's camelCase keys."""
    path = tmp_path / "custom-theme.yaml"
    path.write_text(
        """
colorPalette:
  primary: "#ff0000"
containerDefaults:
  padding: 24
links:
  color: "#0000ff"
customCss: ".site-footer { color: gray; }"
"""
    )
    return path


@pytest.fixture
def page_file(tmp_path: Path) -> Path:
    """A page document with one heading and one text block."""
    path = tmp_path / "landing.yaml"
    path.write_text(
        """
name: Landing
components:
  - type: heading
    id: h1
    props:
      headingTag: h1
      headingFontSizeResponsive: {desktop: 48, mobile: 28}
  - type: text
    id: intro
    props:
      paddingResponsive: {desktop: 20, mobile: null}
      hideOnMobile: true
"""
    )
    return path
