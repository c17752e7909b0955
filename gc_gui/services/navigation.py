"""Navigation targets for actions that only carry an ``href``."""

from __future__ import annotations

import logging
from typing import Protocol

from PySide6.QtCore import QObject, QUrl, Signal
from PySide6.QtGui import QDesktopServices

logger = logging.getLogger(__name__)


class Navigator(Protocol):
    def navigate(self, href: str) -> None:
        ...


class DesktopNavigator:
    """Open links with the desktop's default handler."""

    def navigate(self, href: str) -> None:
        url = QUrl.fromUserInput(href)
        if not QDesktopServices.openUrl(url):
            logger.warning("No handler accepted %s", href)


class SignalNavigator(QObject):
    """Route navigation requests to in-app listeners."""

    # Signals
    navigation_requested = Signal(str)  # href

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._history: list[str] = []

    @property
    def history(self) -> list[str]:
        """Hrefs requested so far, oldest first."""
        return self._history

    def navigate(self, href: str) -> None:
        self._history.append(href)
        self.navigation_requested.emit(href)
