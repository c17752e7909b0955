"""Shared pytest configuration."""

from __future__ import annotations

import os
import time
from typing import Callable

import pytest

from tests.helpers.optional_imports import qt_available

# Qt must pick the platform plugin before the first QApplication exists.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Process-wide QApplication for tests needing an event loop or widgets."""
    if not qt_available():
        pytest.skip("PySide6 not installed")
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def process_events(qapp) -> Callable[[Callable[[], bool], float], bool]:
    """Pump the Qt event loop until ``condition()`` holds or ``timeout`` passes."""

    def pump(condition: Callable[[], bool], timeout: float = 2.0) -> bool:
        deadline = time.monotonic() + timeout
        while not condition():
            if time.monotonic() > deadline:
                return False
            qapp.processEvents()
            time.sleep(0.005)
        return True

    return pump
