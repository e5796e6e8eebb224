"""Package version, read from the source checkout or the installed metadata."""

import re
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

DIST_NAME = "pagecraft"
UNKNOWN_VERSION = "0.0.0"

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"

_NAME_RE = re.compile(r'^name\s*=\s*["\']([^"\']+)["\']', re.MULTILINE)
_VERSION_RE = re.compile(r'^version\s*=\s*["\']([^"\']+)["\']', re.MULTILINE)


def version_from_pyproject(content: str) -> str | None:
    """Version declared by a pagecraft pyproject, None for any other project."""
    name = _NAME_RE.search(content)
    if name is None or name.group(1) != DIST_NAME:
        return None
    match = _VERSION_RE.search(content)
    return match.group(1) if match else None


def get_version() -> str:
    if PYPROJECT.is_file():
        found = version_from_pyproject(PYPROJECT.read_text())
        if found:
            return found
    try:
        return _metadata_version(DIST_NAME)
    except PackageNotFoundError:
        return UNKNOWN_VERSION
