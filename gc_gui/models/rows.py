"""Observable row source for grid columns."""

from __future__ import annotations

from typing import Any, Iterable, Mapping

from PySide6.QtCore import QObject, Signal


class RowsModel(QObject):
    """Ordered sequence of row records observed by grid columns.

    Rows are stored as a fresh list on every update; the row mappings
    themselves are never modified here.
    """

    # Signals
    rows_changed = Signal(object)  # list of row mappings

    def __init__(
        self,
        rows: Iterable[Mapping[str, Any]] | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._rows: list[Mapping[str, Any]] = list(rows or [])

    @property
    def rows(self) -> list[Mapping[str, Any]]:
        """Current rows in display order."""
        return self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def set_rows(self, rows: Iterable[Mapping[str, Any]]) -> None:
        """Replace all rows and notify observers."""
        self._rows = list(rows)
        self.rows_changed.emit(self._rows)

    def append_row(self, row: Mapping[str, Any]) -> None:
        """Add a row at the end and notify observers."""
        self.set_rows([*self._rows, row])

    def clear(self) -> None:
        self.set_rows([])
