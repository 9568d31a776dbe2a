"""Application services."""

from .exporter import LayoutExporter
from .floor_editor import FloorEditorState
from .overlay import resolve_display, summarize_property
from .serializer import parse_markup, render_markup, serialize
from .unit_builder import build_units, merge_units, unit_name_for

__all__ = [
    "serialize",
    "render_markup",
    "parse_markup",
    "build_units",
    "merge_units",
    "unit_name_for",
    "resolve_display",
    "summarize_property",
    "FloorEditorState",
    "LayoutExporter",
]
