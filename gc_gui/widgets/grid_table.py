"""Grid table with a trailing actions column."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from PySide6.QtWidgets import QHeaderView, QTableWidget, QTableWidgetItem, QWidget

from gc_gui.utils import format_cell, set_table_headers
from gc_gui.widgets.actions_cell import ActionsCell

if TYPE_CHECKING:
    from gc_gui.viewmodels import ActionsColumnViewModel


class GridTable(QTableWidget):
    """Read-only table of rows; the last column hosts the row actions."""

    ACTIONS_HEADER = "Actions"

    def __init__(
        self,
        view_model: "ActionsColumnViewModel",
        fields: Sequence[str],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._vm = view_model
        self._fields = list(fields)

        set_table_headers(self, [*self._fields, self.ACTIONS_HEADER])
        self.horizontalHeader().setSectionResizeMode(
            QHeaderView.ResizeMode.ResizeToContents
        )
        self.horizontalHeader().setStretchLastSection(True)
        self.verticalHeader().setVisible(False)
        self.setAlternatingRowColors(True)
        self.setShowGrid(False)
        self.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)

        self._vm.actions_changed.connect(self._on_actions_changed)
        self.sync()

    @property
    def actions_column(self) -> int:
        return len(self._fields)

    def cell_for_row(self, row_index: int) -> ActionsCell | None:
        widget = self.cellWidget(row_index, self.actions_column)
        return widget if isinstance(widget, ActionsCell) else None

    def sync(self) -> None:
        """Replace the table contents with the view model's rows."""
        rows = self._vm.rows
        self.setRowCount(len(rows))
        for i, row in enumerate(rows):
            for j, name in enumerate(self._fields):
                self.setItem(i, j, QTableWidgetItem(format_cell(row.get(name))))
            self.setCellWidget(i, self.actions_column, ActionsCell(self._vm, i, self))

    def _on_actions_changed(self, _actions: object) -> None:
        self.sync()
