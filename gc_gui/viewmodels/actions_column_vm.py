"""ViewModel for the grid row-actions column."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, Mapping

from pydantic import ValidationError
from PySide6.QtCore import QObject, Signal

from gc_common.errors import ConfigurationError, ProviderResolutionError
from gc_gui.models.config import (
    ActionsColumnConfig,
    CallbackReference,
    ConfirmSpec,
    validate_action_template,
)
from gc_gui.models.derived import DerivedCollection
from gc_gui.utils.templates import TemplateRenderer

if TYPE_CHECKING:
    from gc_gui.models.rows import RowsModel
    from gc_gui.services import ComponentRegistry, ConfirmationService, Navigator

logger = logging.getLogger(__name__)

Action = dict[str, Any]
RowActions = dict[str, Action]


class ActionsColumnViewModel(QObject):
    """ViewModel for an actions column.

    Keeps one mapping of resolved actions per row. Actions come from the
    row's own action map and from a catalog shared by every row; catalog
    actions replace row actions with the same index. String values in both
    are resolved as templates against the row.

    At most one row has its action list open at a time.
    """

    # Signals
    actions_changed = Signal(object)  # list of per-row action mappings
    opened_changed = Signal(object)  # row index or None
    action_triggered = Signal(str, object)  # action index, record id
    error_occurred = Signal(str)  # error message

    def __init__(
        self,
        config: ActionsColumnConfig,
        registry: "ComponentRegistry",
        confirmation: "ConfirmationService",
        navigator: "Navigator",
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._config = config
        self._registry = registry
        self._confirmation = confirmation
        self._navigator = navigator
        self._renderer = TemplateRenderer(strict=config.strict_templates)

        # State
        self._templates: dict[str, Action] = dict(config.actions)
        self._opened: int | None = None
        self._collection = DerivedCollection(self._format_actions, self)
        self._collection.changed.connect(self.actions_changed.emit)

    @property
    def config(self) -> ActionsColumnConfig:
        return self._config

    @property
    def index(self) -> str:
        """Row field holding the embedded action map."""
        return self._config.index

    @property
    def index_field(self) -> str:
        """Row field holding the record id."""
        return self._config.index_field

    @property
    def rows(self) -> list[Mapping[str, Any]]:
        """Rows the actions were last computed from."""
        return self._collection.rows

    @property
    def templates(self) -> dict[str, Action]:
        """Catalog actions applied to every row."""
        return self._templates

    @property
    def actions(self) -> list[RowActions]:
        """Resolved actions, one mapping per row."""
        return self._collection.items

    @property
    def opened(self) -> int | None:
        """Row whose action list is open, or None."""
        return self._opened

    def register(self) -> "ActionsColumnViewModel":
        """Publish this column in the registry under its configured name."""
        self._registry.register(self._config.name, self)
        return self

    def bind_rows(self, rows_model: "RowsModel") -> "ActionsColumnViewModel":
        """Recompute actions from ``rows_model`` now and on every change."""
        self._collection.bind(rows_model)
        return self

    def bind_rows_provider(self) -> "ActionsColumnViewModel":
        """Bind to the rows model registered under ``rows_provider``."""
        name = self._config.rows_provider
        if not name:
            raise ConfigurationError(
                "Column has no rows_provider configured",
                context={"column": self._config.name},
            )
        self._registry.when_ready(
            name,
            self.bind_rows,
            on_error=self._on_resolution_failed,
            timeout=self._config.provider_timeout_seconds,
        )
        return self

    def get_action(
        self, row_index: int, action_index: str | None = None
    ) -> RowActions | Action | None:
        """Return one action of a row, or all of its actions.

        Returns None when the row or the action does not exist.
        """
        actions = self._collection.items
        if row_index < 0 or row_index >= len(actions):
            return None
        row_actions = actions[row_index]
        if action_index is None:
            return row_actions
        return row_actions.get(action_index)

    def get_visible_actions(self, row_index: int) -> list[Action]:
        """Actions of a row that are not explicitly hidden."""
        row_actions = self.get_action(row_index)
        if not row_actions:
            return []
        return [action for action in row_actions.values() if self.is_action_visible(action)]

    def add_action(self, index: str, action: Mapping[str, Any]) -> "ActionsColumnViewModel":
        """Add a catalog action, replacing any action with the same index.

        The catalog is left unchanged when the recompute fails.
        """
        previous = self._templates.get(index)
        self._templates[index] = validate_action_template(index, action)
        try:
            self.update_actions()
        except Exception:
            if previous is None:
                self._templates.pop(index, None)
            else:
                self._templates[index] = previous
            raise
        return self

    def update_actions(self) -> "ActionsColumnViewModel":
        """Recreate actions for every row."""
        self._collection.rebuild()
        return self

    def _format_actions(self, row: Mapping[str, Any], row_index: int) -> RowActions:
        row_actions = row.get(self.index) or {}
        if not isinstance(row_actions, Mapping):
            logger.debug("Row %d has a non-mapping %r field", row_index, self.index)
            row_actions = {}
        record_id = row.get(self.index_field)

        def iterate(action: Any, index: str) -> Action:
            merged: Action = {"index": index, "rowIndex": row_index, "recordId": record_id}
            if isinstance(action, Mapping):
                merged.update(action)
            return self._renderer.render(merged, row)

        resolved = {index: iterate(action, index) for index, action in row_actions.items()}
        for index, template in self._templates.items():
            action = iterate(template, index)
            resolved[action.get("index", index)] = action
        return resolved

    def apply_action(self, action_index: str, row_index: int) -> "ActionsColumnViewModel":
        """Run an action, asking for confirmation first when it has one.

        Actions with no ``href``, no ``callback`` and no ``confirm`` are
        ignored. A confirm-only action still prompts; accepting it only
        emits ``action_triggered``.
        """
        action = self.get_action(row_index, action_index)
        if not action:
            return self
        if not action.get("href") and not action.get("callback") and not action.get("confirm"):
            return self

        try:
            callback = self._get_callback(action)
        except ValidationError as exc:
            logger.warning("Action %s has an invalid callback: %s", action_index, exc)
            self.error_occurred.emit(f"Invalid callback for action '{action_index}'")
            return self

        if not action.get("confirm"):
            callback()
            return self
        try:
            self._confirm(action, callback)
        except ValidationError as exc:
            logger.warning("Action %s has an invalid confirmation: %s", action_index, exc)
            self.error_occurred.emit(f"Invalid confirmation for action '{action_index}'")
        return self

    def _get_callback(self, action: Action) -> Callable[[], None]:
        args = (action.get("index"), action.get("recordId"), action)
        callback = action.get("callback")

        if isinstance(callback, Mapping):
            ref = CallbackReference.model_validate(callback)

            def run() -> None:
                self._registry.invoke_async(
                    ref.provider,
                    ref.target,
                    *args,
                    on_error=self._on_resolution_failed,
                    timeout=self._config.provider_timeout_seconds,
                )

        elif callable(callback):

            def run() -> None:
                callback(*args)

        else:

            def run() -> None:
                self.default_callback(*args)

        def invoke() -> None:
            logger.debug("Applying action %s to record %s", args[0], args[1])
            run()
            self.action_triggered.emit(str(args[0]), args[1])

        return invoke

    def default_callback(self, action_index: str, record_id: Any, action: Action) -> None:
        """Navigate to the action's ``href``."""
        href = action.get("href")
        if not href:
            logger.debug("Action %s has no href to navigate to", action_index)
            return
        self._navigator.navigate(str(href))

    def _confirm(self, action: Action, callback: Callable[[], None]) -> None:
        data = action.get("confirm")
        spec = ConfirmSpec.model_validate(data) if isinstance(data, Mapping) else ConfirmSpec()
        self._confirmation.confirm(
            title=spec.title,
            content=spec.message,
            on_confirm=callback,
        )

    def is_single(self, row_index: int) -> bool:
        """Whether a row has exactly one visible action."""
        return len(self.get_visible_actions(row_index)) == 1

    def is_multiple(self, row_index: int) -> bool:
        """Whether a row has more than one visible action."""
        return len(self.get_visible_actions(row_index)) > 1

    def is_action_visible(self, action: Mapping[str, Any]) -> bool:
        return action.get("hidden") is not True

    def toggle_list(self, row_index: int) -> "ActionsColumnViewModel":
        """Open the action list of a row, or close it if it is already open."""
        state = None if row_index == self._opened else row_index
        self._set_opened(state)
        return self

    def close_list(self, row_index: int) -> "ActionsColumnViewModel":
        """Close the action list of a row if that row is the open one."""
        if self._opened == row_index:
            self._set_opened(None)
        return self

    def _set_opened(self, state: int | None) -> None:
        if state == self._opened:
            return
        self._opened = state
        self.opened_changed.emit(state)

    def _on_resolution_failed(self, error: ProviderResolutionError) -> None:
        self.error_occurred.emit(str(error))
    # Long-form names used by grid integrations
    add_or_replace_custom_action = add_action
    recompute_actions = update_actions
    invoke_action = apply_action
    is_single_visible = is_single
    is_multiple_visible = is_multiple
    toggle_row_action_list = toggle_list
    close_row_action_list = close_list
