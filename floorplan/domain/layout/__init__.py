"""Pure grid functions: coordinates, selection and shape."""

from .coordinates import cell_at, to_coord, to_index, validate_index
from .selection import add, clear, position_of, remove, select_all, toggle
from .shape import classify_shape, preview_layout

__all__ = [
    "to_coord",
    "to_index",
    "validate_index",
    "cell_at",
    "toggle",
    "add",
    "remove",
    "clear",
    "select_all",
    "position_of",
    "classify_shape",
    "preview_layout",
]
