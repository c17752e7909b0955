"""Top-level windows."""

from gc_gui.windows.grid_window import GridWindow

__all__ = ["GridWindow"]
