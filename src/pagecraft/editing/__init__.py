"""Read/write helpers for the live editing surface."""

from pagecraft.editing.live import (
    LiveResolver,
    apply_responsive_edit,
    collapse_to_legacy,
    get_responsive_value,
    set_responsive_value,
)

__all__ = [
    "LiveResolver",
    "apply_responsive_edit",
    "collapse_to_legacy",
    "get_responsive_value",
    "set_responsive_value",
]
