"""Presenter for resolved row actions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.table import Table

from gc_gui.utils import action_label, format_optional

if TYPE_CHECKING:
    from gc_gui.viewmodels import ActionsColumnViewModel

COLUMNS = ["Row", "Record", "Action", "Label", "Href", "Flags"]


def _flags(action: dict[str, Any], visible: bool) -> str:
    flags = []
    if not visible:
        flags.append("hidden")
    if action.get("confirm"):
        flags.append("confirm")
    callback = action.get("callback")
    if isinstance(callback, dict):
        flags.append(f"-> {callback.get('provider')}.{callback.get('target')}")
    elif callable(callback):
        flags.append("callback")
    return ", ".join(flags)


def _row_indexes(column: "ActionsColumnViewModel", row: int | None) -> list[int]:
    if row is None:
        return list(range(len(column.actions)))
    return [row] if column.get_action(row) is not None else []


def build_actions_table(column: "ActionsColumnViewModel", row: int | None = None) -> Table:
    """Tabulate resolved actions for every row, or a single row."""
    table = Table(title="Row Actions")
    for name in COLUMNS:
        table.add_column(name)

    for row_index in _row_indexes(column, row):
        for action in (column.get_action(row_index) or {}).values():
            table.add_row(
                str(row_index),
                format_optional(action.get("recordId")),
                str(action.get("index")),
                action_label(action),
                format_optional(action.get("href")),
                _flags(action, column.is_action_visible(action)),
            )
    return table


def actions_payload(
    column: "ActionsColumnViewModel", row: int | None = None
) -> list[dict[str, Any]]:
    """JSON-friendly list of resolved actions; callables become their names."""
    payload = []
    for row_index in _row_indexes(column, row):
        actions = {}
        for index, action in (column.get_action(row_index) or {}).items():
            entry = dict(action)
            if callable(entry.get("callback")):
                entry["callback"] = getattr(entry["callback"], "__name__", "callback")
            actions[index] = entry
        payload.append({"row": row_index, "actions": actions})
    return payload
