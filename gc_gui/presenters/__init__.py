"""Presenters turning view model state into printable tables."""

from gc_gui.presenters.actions import actions_payload, build_actions_table

__all__ = ["actions_payload", "build_actions_table"]
