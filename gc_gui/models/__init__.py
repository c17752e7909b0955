"""Observable models and configuration for grid columns."""

from gc_gui.models.config import (
    ActionsColumnConfig,
    CallbackReference,
    ConfirmSpec,
    GridDocument,
    validate_action_template,
)
from gc_gui.models.derived import DerivedCollection
from gc_gui.models.rows import RowsModel

__all__ = [
    "ActionsColumnConfig",
    "CallbackReference",
    "ConfirmSpec",
    "GridDocument",
    "validate_action_template",
    "DerivedCollection",
    "RowsModel",
]
