"""Main window showing a grid with its actions column."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from PySide6.QtWidgets import QLabel, QMainWindow, QMessageBox, QVBoxLayout, QWidget

from gc_gui.widgets import GridTable

if TYPE_CHECKING:
    from gc_gui.app import ServiceContainer
    from gc_gui.models import RowsModel
    from gc_gui.viewmodels import ActionsColumnViewModel


class GridWindow(QMainWindow):
    """Window hosting one grid table."""

    STATUS_TIMEOUT_MS = 5000

    def __init__(
        self,
        services: "ServiceContainer",
        column: "ActionsColumnViewModel",
        rows: "RowsModel",
        fields: Sequence[str],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.services = services
        self._column = column
        self._rows = rows

        self._setup_ui(fields)
        self._connect_signals()

    @property
    def table(self) -> GridTable:
        return self._table

    def _setup_ui(self, fields: Sequence[str]) -> None:
        self.setWindowTitle("Grid")
        self.setMinimumSize(800, 500)

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        self._summary = QLabel()
        layout.addWidget(self._summary)

        self._table = GridTable(self._column, fields, central)
        layout.addWidget(self._table, 1)
        self._update_summary()

    def _connect_signals(self) -> None:
        self._column.actions_changed.connect(lambda _actions: self._update_summary())
        self._column.action_triggered.connect(self._on_action_triggered)
        self._column.error_occurred.connect(self._on_error)
        self.services.navigator.navigation_requested.connect(self._on_navigation)

    def _update_summary(self) -> None:
        self._summary.setText(f"{len(self._column.rows)} row(s)")

    def _on_action_triggered(self, action_index: str, record_id: object) -> None:
        self.statusBar().showMessage(
            f"Applied '{action_index}' to record {record_id}", self.STATUS_TIMEOUT_MS
        )

    def _on_navigation(self, href: str) -> None:
        self.statusBar().showMessage(f"Navigate to {href}", self.STATUS_TIMEOUT_MS)

    def _on_error(self, message: str) -> None:
        self.statusBar().showMessage(message, self.STATUS_TIMEOUT_MS)
        QMessageBox.warning(self, "Action Failed", message)
