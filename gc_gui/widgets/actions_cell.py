"""Cell widget rendering the actions of one grid row."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from PySide6.QtCore import QPoint
from PySide6.QtGui import QAction
from PySide6.QtWidgets import QHBoxLayout, QMenu, QPushButton, QWidget

from gc_gui.utils import action_label, clear_layout

if TYPE_CHECKING:
    from gc_gui.viewmodels import ActionsColumnViewModel


class ActionsCell(QWidget):
    """A single button when the row has one visible action, a menu otherwise."""

    SELECT_LABEL = "Select"

    def __init__(
        self,
        view_model: "ActionsColumnViewModel",
        row_index: int,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self._vm = view_model
        self._row_index = row_index
        self._button: QPushButton | None = None
        self._menu: QMenu | None = None

        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(2, 0, 2, 0)

        self._vm.opened_changed.connect(self._on_opened_changed)
        self.refresh()

    @property
    def row_index(self) -> int:
        return self._row_index

    @property
    def button(self) -> QPushButton | None:
        return self._button

    @property
    def menu(self) -> QMenu | None:
        return self._menu

    def refresh(self) -> None:
        """Rebuild the cell from the row's visible actions."""
        clear_layout(self._layout)
        self._button = None
        self._menu = None

        visible = self._vm.get_visible_actions(self._row_index)
        if not visible:
            return

        if self._vm.is_single(self._row_index):
            action = visible[0]
            self._button = QPushButton(action_label(action), self)
            self._button.setFlat(True)
            self._button.clicked.connect(lambda: self._apply(action))
        else:
            self._button = QPushButton(self.SELECT_LABEL, self)
            self._button.clicked.connect(lambda: self._vm.toggle_list(self._row_index))
            self._menu = QMenu(self)
            for action in visible:
                item = QAction(action_label(action), self._menu)
                item.triggered.connect(lambda _checked=False, a=action: self._apply(a))
                self._menu.addAction(item)
            self._menu.aboutToHide.connect(lambda: self._vm.close_list(self._row_index))
        self._layout.addWidget(self._button)

    def _apply(self, action: dict[str, Any]) -> None:
        self._vm.close_list(self._row_index)
        self._vm.apply_action(str(action.get("index")), self._row_index)

    def _on_opened_changed(self, opened: object) -> None:
        if self._menu is None or self._button is None:
            return
        if opened == self._row_index:
            self._menu.popup(self._button.mapToGlobal(QPoint(0, self._button.height())))
        elif self._menu.isVisible():
            self._menu.hide()
