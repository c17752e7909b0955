"""Qt utilities and helpers."""

from gc_gui.utils.qt import set_table_headers, clear_layout
from gc_gui.utils.formatters import action_label, format_cell, format_optional
from gc_gui.utils.templates import TemplateRenderer

__all__ = [
    "set_table_headers",
    "clear_layout",
    "action_label",
    "format_cell",
    "format_optional",
    "TemplateRenderer",
]
