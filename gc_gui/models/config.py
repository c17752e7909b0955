"""Configuration models for the actions column and grid documents."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from gc_common.config.env import column_env_overrides
from gc_common.errors import ConfigurationError


class ConfirmSpec(BaseModel):
    """Confirmation prompt attached to an action."""

    model_config = {"extra": "ignore"}

    title: str = Field(default="", description="Dialog title")
    message: str = Field(default="", description="Dialog body text")

    @field_validator("title", "message", mode="before")
    @classmethod
    def _as_text(cls, value: Any) -> Any:
        # Resolved placeholders may carry raw row values
        if value is None:
            return ""
        if isinstance(value, (int, float)):
            return str(value)
        return value


class CallbackReference(BaseModel):
    """Structured callback targeting a method of a registered component."""

    model_config = {"extra": "ignore"}

    target: str = Field(min_length=1, description="Method name on the provider")
    provider: str = Field(min_length=1, description="Registry name of the provider")


def validate_action_template(index: str, template: Any) -> dict[str, Any]:
    """Check the shape of an action template and return a mutable copy.

    Only the structured parts are checked; values are left untouched so
    placeholders survive until row resolution.
    """
    if not isinstance(template, Mapping):
        raise ConfigurationError(
            f"Action '{index}' must be a mapping",
            context={"index": index, "type": type(template).__name__},
        )
    data = dict(template)
    try:
        if data.get("confirm") is not None:
            ConfirmSpec.model_validate(data["confirm"])
        callback = data.get("callback")
        if isinstance(callback, Mapping):
            CallbackReference.model_validate(callback)
    except ValidationError as exc:
        raise ConfigurationError(
            f"Invalid action template '{index}'",
            context={"index": index, "errors": exc.errors(include_url=False)},
            cause=exc,
        ) from exc
    return data


def _validate_catalog(value: Any) -> Any:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError("actions must be a mapping of index to template")
    return {
        str(index): validate_action_template(str(index), template)
        for index, template in value.items()
    }


class ActionsColumnConfig(BaseModel):
    """Settings for one actions column."""

    model_config = {"extra": "ignore"}

    name: str = Field(default="actions", min_length=1, description="Registry name of the column")
    index: str = Field(
        default="actions",
        min_length=1,
        description="Row field holding the embedded per-row action map",
    )
    index_field: str = Field(default="id", min_length=1, description="Row field holding the record id")
    rows_provider: str | None = Field(
        default=None, description="Registry name of the rows model to observe"
    )
    provider_timeout_seconds: float | None = Field(
        default=5.0,
        description="Bound on registry resolution; None or <= 0 waits forever",
    )
    strict_templates: bool = Field(
        default=False, description="Raise on unresolvable placeholders"
    )
    actions: dict[str, dict[str, Any]] = Field(
        default_factory=dict, description="Catalog actions applied to every row"
    )

    @field_validator("actions", mode="before")
    @classmethod
    def _validate_actions(cls, value: Any) -> Any:
        return _validate_catalog(value)

    @classmethod
    def from_env(cls, **values: Any) -> "ActionsColumnConfig":
        """Build a config where GC_* environment variables override values."""
        merged = dict(values)
        merged.update(column_env_overrides())
        return cls(**merged)


class GridDocument(BaseModel):
    """A grid loaded from disk: column settings, rows and catalog actions."""

    model_config = {"extra": "ignore"}

    column: ActionsColumnConfig = Field(default_factory=ActionsColumnConfig)
    rows: list[dict[str, Any]] = Field(default_factory=list)
    actions: dict[str, dict[str, Any]] = Field(default_factory=dict)

    @field_validator("actions", mode="before")
    @classmethod
    def _validate_actions(cls, value: Any) -> Any:
        return _validate_catalog(value)

    @property
    def catalog(self) -> dict[str, dict[str, Any]]:
        """Column catalog merged with document-level actions."""
        merged = dict(self.column.actions)
        merged.update(self.actions)
        return merged

    @property
    def field_names(self) -> list[str]:
        """Row fields in first-seen order, excluding the action map field."""
        names: list[str] = []
        for row in self.rows:
            for key in row:
                if key != self.column.index and key not in names:
                    names.append(key)
        return names

    @classmethod
    def load(cls, path: Path) -> "GridDocument":
        """Load a grid document from a YAML file."""
        if not path.exists():
            raise ConfigurationError(
                f"Grid file not found: {path}", context={"path": path}
            )
        try:
            data = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as exc:
            raise ConfigurationError(
                f"Grid file is not valid YAML: {path}", context={"path": path}, cause=exc
            ) from exc
        if not isinstance(data, dict):
            raise ConfigurationError(
                "Grid file must contain a mapping at the top level.",
                context={"path": path},
            )
        column = dict(data.get("column") or {})
        column.update(column_env_overrides())
        data["column"] = column
        try:
            return cls.model_validate(data)
        except ValidationError as exc:
            raise ConfigurationError(
                f"Invalid grid file: {path}",
                context={"path": path, "errors": exc.errors(include_url=False)},
                cause=exc,
            ) from exc
