"""Reusable Qt widgets."""

from gc_gui.widgets.actions_cell import ActionsCell
from gc_gui.widgets.grid_table import GridTable

__all__ = ["ActionsCell", "GridTable"]
