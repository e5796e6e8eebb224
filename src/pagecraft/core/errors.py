"""
Error types for pagecraft loaders.

The style engine itself never raises on bad prop data; these exceptions are
only used where files are read from disk.
"""

from __future__ import annotations

from pathlib import Path


class PagecraftError(Exception):
    """Base exception for all pagecraft errors."""

    def __init__(self, message: str, path: Path | None = None):
        self.message = message
        self.path = path
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class ThemeLoadError(PagecraftError):
    """
    Raised when a theme settings file cannot be loaded.

    Examples:
    - Missing file passed explicitly
    - Invalid YAML
    - Values that fail schema validation
    """

    pass


class PageLoadError(PagecraftError):
    """
    Raised when a page document cannot be loaded.

    Examples:
    - Unsupported file extension
    - Invalid YAML or JSON
    - Component entries without a type
    """

    pass
