"""Confirmation prompts gating destructive actions."""

from __future__ import annotations

from typing import Callable, Protocol

from PySide6.QtWidgets import QMessageBox, QWidget


class ConfirmationService(Protocol):
    """Presents a prompt and runs ``on_confirm`` only if the user accepts."""

    def confirm(self, title: str, content: str, on_confirm: Callable[[], None]) -> None:
        ...


class MessageBoxConfirmation:
    """Confirmation backed by a modal ``QMessageBox``."""

    def __init__(self, parent: QWidget | None = None) -> None:
        self._parent = parent

    def set_parent(self, parent: QWidget | None) -> None:
        self._parent = parent

    def confirm(self, title: str, content: str, on_confirm: Callable[[], None]) -> None:
        answer = QMessageBox.question(
            self._parent,
            title,
            content,
            QMessageBox.StandardButton.Ok | QMessageBox.StandardButton.Cancel,
            QMessageBox.StandardButton.Cancel,
        )
        if answer == QMessageBox.StandardButton.Ok:
            on_confirm()
