"""
Page document loader.

A page document is the flattened node tree the exporter works from: a list
of component instances, each with its type, node id and raw prop bag.

    name: Landing
    components:
      - type: heading
        id: abc123
        props:
          headingFontSizeResponsive: {desktop: 48, mobile: 28}

Both YAML and JSON files are accepted.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pagecraft.core.errors import PageLoadError

logger = logging.getLogger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}
JSON_SUFFIXES = {".json"}


class ComponentInstance(BaseModel):
    """One placed component."""

    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Component type (text, heading, container, ...)")
    id: str = Field(..., description="Node id, used for the instance class name")
    props: dict[str, Any] = Field(default_factory=dict, description="Raw camelCase props")


class PageDocument(BaseModel):
    """A page's component instances in document order."""

    model_config = ConfigDict(frozen=True)

    name: str = "page"
    components: list[ComponentInstance] = Field(default_factory=list)


def _read_data(path: Path) -> Any:
    suffix = path.suffix.lower()
    content = path.read_text(encoding="utf-8")
    if suffix in JSON_SUFFIXES:
        try:
            return json.loads(content)
        except json.JSONDecodeError as e:
            raise PageLoadError(f"Invalid JSON: {e}", path=path) from e
    if suffix in YAML_SUFFIXES:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise PageLoadError(f"Invalid YAML: {e}", path=path) from e
    raise PageLoadError(f"Unsupported page format '{suffix}'", path=path)


def load_page(path: Path) -> PageDocument:
    """Load a page document from YAML or JSON.

    Raises:
        PageLoadError: If the file is missing, unparseable or malformed.
    """
    if not path.exists():
        raise PageLoadError("Page document not found", path=path)

    data = _read_data(path)
    if data is None:
        logger.warning("Empty page document at %s", path)
        return PageDocument(name=path.stem)
    if isinstance(data, list):
        data = {"name": path.stem, "components": data}
    if not isinstance(data, dict):
        raise PageLoadError("Page document must be a mapping or a list", path=path)

    try:
        page = PageDocument.model_validate(data)
    except ValidationError as e:
        raise PageLoadError(f"Invalid page document: {e}", path=path) from e

    logger.debug("Loaded page %s with %d components", page.name, len(page.components))
    return page
