"""Collaborators injected into grid view models."""

from gc_gui.services.confirmation import ConfirmationService, MessageBoxConfirmation
from gc_gui.services.navigation import DesktopNavigator, Navigator, SignalNavigator
from gc_gui.services.registry import ComponentRegistry

__all__ = [
    "ComponentRegistry",
    "ConfirmationService",
    "MessageBoxConfirmation",
    "DesktopNavigator",
    "Navigator",
    "SignalNavigator",
]
