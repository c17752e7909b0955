"""ViewModels exposing Qt signals for views."""

from gc_gui.viewmodels.actions_column_vm import ActionsColumnViewModel

__all__ = ["ActionsColumnViewModel"]
