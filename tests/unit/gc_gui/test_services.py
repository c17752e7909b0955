"""Tests for navigation and confirmation services."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest
from PySide6.QtGui import QDesktopServices
from PySide6.QtWidgets import QMessageBox

from gc_gui.app import ServiceContainer
from gc_gui.services import DesktopNavigator, MessageBoxConfirmation, SignalNavigator
from tests.helpers.signals import SignalRecorder


pytestmark = pytest.mark.unit_ui


class TestNavigators:
    """Tests for SignalNavigator and DesktopNavigator."""

    def test_signal_navigator_records_and_emits(self) -> None:
        navigator = SignalNavigator()
        requested = SignalRecorder(navigator.navigation_requested)

        navigator.navigate("/cms/page/edit/1")

        assert navigator.history == ["/cms/page/edit/1"]
        assert requested.calls == [("/cms/page/edit/1",)]

    def test_desktop_navigator_opens_url(self) -> None:
        with patch.object(QDesktopServices, "openUrl", return_value=True) as open_url:
            DesktopNavigator().navigate("https://example.com/admin")

        assert open_url.call_args[0][0].toString() == "https://example.com/admin"

    def test_desktop_navigator_logs_refusal(self, caplog: pytest.LogCaptureFixture) -> None:
        with patch.object(QDesktopServices, "openUrl", return_value=False):
            with caplog.at_level(logging.WARNING, logger="gc_gui.services.navigation"):
                DesktopNavigator().navigate("https://example.com/admin")

        assert "No handler accepted" in caplog.text


class TestMessageBoxConfirmation:
    """Tests for MessageBoxConfirmation."""

    def test_accept_runs_continuation(self) -> None:
        on_confirm = MagicMock()
        with patch.object(
            QMessageBox, "question", return_value=QMessageBox.StandardButton.Ok
        ) as question:
            MessageBoxConfirmation().confirm("Sure?", "Delete page", on_confirm)

        on_confirm.assert_called_once_with()
        assert question.call_args[0][1:3] == ("Sure?", "Delete page")

    def test_cancel_skips_continuation(self) -> None:
        on_confirm = MagicMock()
        with patch.object(
            QMessageBox, "question", return_value=QMessageBox.StandardButton.Cancel
        ):
            MessageBoxConfirmation().confirm("Sure?", "Delete page", on_confirm)

        on_confirm.assert_not_called()


class TestServiceContainer:
    """Tests for ServiceContainer."""

    def test_services_are_lazy_singletons(self) -> None:
        services = ServiceContainer(default_timeout=2.0)

        assert services.registry is services.registry
        assert services.registry.default_timeout == 2.0
        assert services.navigator is services.navigator
        assert services.confirmation is services.confirmation
        assert services.desktop_navigator is services.desktop_navigator
