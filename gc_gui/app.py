"""Application setup and global services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gc_gui.models import ActionsColumnConfig, GridDocument, RowsModel
from gc_gui.services import (
    ComponentRegistry,
    DesktopNavigator,
    MessageBoxConfirmation,
    SignalNavigator,
)
from gc_gui.viewmodels import ActionsColumnViewModel

if TYPE_CHECKING:
    from gc_gui.windows.grid_window import GridWindow


class ServiceContainer:
    """Container for all GUI services (dependency injection)."""

    def __init__(self, default_timeout: float | None = 5.0) -> None:
        self._default_timeout = default_timeout
        self._registry: ComponentRegistry | None = None
        self._navigator: SignalNavigator | None = None
        self._desktop_navigator: DesktopNavigator | None = None
        self._confirmation: MessageBoxConfirmation | None = None

    @property
    def registry(self) -> ComponentRegistry:
        if self._registry is None:
            self._registry = ComponentRegistry(self._default_timeout)
        return self._registry

    @property
    def navigator(self) -> SignalNavigator:
        if self._navigator is None:
            self._navigator = SignalNavigator()
        return self._navigator

    @property
    def desktop_navigator(self) -> DesktopNavigator:
        if self._desktop_navigator is None:
            self._desktop_navigator = DesktopNavigator()
        return self._desktop_navigator

    @property
    def confirmation(self) -> MessageBoxConfirmation:
        if self._confirmation is None:
            self._confirmation = MessageBoxConfirmation()
        return self._confirmation


def rows_provider_name(config: ActionsColumnConfig) -> str:
    """Registry name of the rows model feeding ``config``'s column."""
    return config.rows_provider or f"{config.name}.rows"


def create_column(
    services: ServiceContainer, document: GridDocument
) -> tuple[ActionsColumnViewModel, RowsModel]:
    """Build and register the rows model and actions column of a document.

    The column resolves its rows through the registry by name. Rows are
    registered first so the lookup completes without waiting.
    """
    config = document.column.model_copy(
        update={
            "actions": document.catalog,
            "rows_provider": rows_provider_name(document.column),
        }
    )
    rows = RowsModel(document.rows)
    column = ActionsColumnViewModel(
        config,
        services.registry,
        services.confirmation,
        services.navigator,
    )
    services.registry.register(config.rows_provider, rows)
    column.register()
    column.bind_rows_provider()
    return column, rows


def create_app(document: GridDocument, open_links: bool = False) -> "GridWindow":
    """Create and wire up the grid window."""
    from gc_gui.windows.grid_window import GridWindow

    services = ServiceContainer(document.column.provider_timeout_seconds)
    column, rows = create_column(services, document)
    if open_links:
        services.navigator.navigation_requested.connect(
            services.desktop_navigator.navigate
        )
    window = GridWindow(services, column, rows, document.field_names)
    services.confirmation.set_parent(window)
    return window
