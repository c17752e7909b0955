"""Observable collection derived from a rows model."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

from PySide6.QtCore import QObject, Signal

from gc_gui.models.rows import RowsModel

RowMapper = Callable[[Mapping[str, Any], int], Any]


class DerivedCollection(QObject):
    """One item per row, produced by a mapping function.

    The collection is rebuilt in full on every rows change and swapped in
    with a single assignment, so readers see either the previous list or
    the new one.
    """

    # Signals
    changed = Signal(object)  # list of derived items

    def __init__(self, mapper: RowMapper, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._mapper = mapper
        self._items: list[Any] = []
        self._rows: list[Mapping[str, Any]] = []
        self._source: RowsModel | None = None

    @property
    def items(self) -> list[Any]:
        return self._items

    @property
    def rows(self) -> list[Mapping[str, Any]]:
        return self._rows

    @property
    def source(self) -> RowsModel | None:
        return self._source

    def __len__(self) -> int:
        return len(self._items)

    def bind(self, source: RowsModel) -> None:
        """Observe ``source`` and rebuild from its current rows."""
        if self._source is source:
            return
        if self._source is not None:
            self._source.rows_changed.disconnect(self.rebuild)
        self._source = source
        source.rows_changed.connect(self.rebuild)
        self.rebuild(source.rows)

    def rebuild(self, rows: Sequence[Mapping[str, Any]] | None = None) -> None:
        """Recompute every item; ``None`` reuses the last seen rows."""
        new_rows = list(rows) if rows is not None else self._rows
        items = [self._mapper(row, index) for index, row in enumerate(new_rows)]
        self._rows, self._items = new_rows, items
        self.changed.emit(items)
