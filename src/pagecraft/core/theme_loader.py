"""
Theme settings loader.

Reads the editor's global settings (color palette, typography scale,
spacing scale, container/border/link defaults) from a YAML file into
:class:`GlobalDefaults`.

Lookup order for the settings file:
1. An explicit path passed by the caller
2. The ``PAGECRAFT_THEME`` environment variable
3. ``theme.yaml`` in the working directory

When nothing is found, the built-in defaults are used.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from pagecraft.core.errors import ThemeLoadError
from pagecraft.specs.theme import DEFAULT_GLOBALS, GlobalDefaults

logger = logging.getLogger(__name__)

THEME_FILE = "theme.yaml"
THEME_ENV_VAR = "PAGECRAFT_THEME"


# =============================================================================
# Path helpers
# =============================================================================


def resolve_theme_path(explicit: Path | None = None, cwd: Path | None = None) -> Path | None:
    """Find the theme settings file to use, or None for built-in defaults."""
    if explicit is not None:
        return explicit

    env_path = os.environ.get(THEME_ENV_VAR)
    if env_path:
        return Path(env_path)

    candidate = (cwd or Path.cwd()) / THEME_FILE
    if candidate.exists():
        return candidate
    return None


# =============================================================================
# Loading
# =============================================================================


def parse_theme_data(data: dict[str, Any], source: Path | None = None) -> GlobalDefaults:
    """Validate raw settings data (snake_case or camelCase keys)."""
    try:
        return GlobalDefaults.model_validate(data)
    except ValidationError as e:
        raise ThemeLoadError(f"Invalid theme settings: {e}", path=source) from e


def load_theme(path: Path | None = None, *, use_defaults: bool = True) -> GlobalDefaults:
    """Load global theme defaults.

    Args:
        path: Settings file. When omitted, :func:`resolve_theme_path` decides.
        use_defaults: If True, return built-in defaults when no file is found.

    Returns:
        GlobalDefaults instance.

    Raises:
        ThemeLoadError: If the file is missing (when explicit or use_defaults=False),
            is not valid YAML, or fails validation.
    """
    theme_path = resolve_theme_path(path)

    if theme_path is None:
        if use_defaults:
            logger.debug("No theme settings found, using defaults")
            return DEFAULT_GLOBALS
        raise ThemeLoadError("No theme settings file found")

    if not theme_path.exists():
        raise ThemeLoadError("Theme settings file not found", path=theme_path)

    try:
        data = yaml.safe_load(theme_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ThemeLoadError(f"Invalid YAML: {e}", path=theme_path) from e

    if not data:
        logger.warning("Empty theme settings at %s, using defaults", theme_path)
        return DEFAULT_GLOBALS
    if not isinstance(data, dict):
        raise ThemeLoadError("Theme settings must be a mapping", path=theme_path)

    theme = parse_theme_data(data, source=theme_path)
    logger.debug("Loaded theme settings from %s", theme_path)
    return theme


def save_theme(path: Path, theme: GlobalDefaults) -> Path:
    """Write theme settings as YAML (camelCase keys, as the editor stores them)."""
    data = theme.model_dump(mode="json", by_alias=True)
    path.write_text(
        yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True),
        encoding="utf-8",
    )
    logger.info("Saved theme settings to %s", path)
    return path
