"""Error taxonomy for grid column components."""

from __future__ import annotations

from typing import Any, Mapping


def _normalize_context_value(value: Any) -> Any:
    if isinstance(value, Mapping):
        return normalize_context(value)
    if isinstance(value, (list, tuple)):
        return [_normalize_context_value(item) for item in value]
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def normalize_context(context: Mapping[str, Any]) -> dict[str, Any]:
    """Return a JSON-friendly copy of an error context mapping."""
    return {key: _normalize_context_value(val) for key, val in context.items()}


class GCError(Exception):
    """Base error type for grid column failures."""

    def __init__(
        self,
        message: str,
        *,
        context: Mapping[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.context = normalize_context(context or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def error_type(self) -> str:
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.error_type, "message": str(self), "context": self.context}


class ConfigurationError(GCError):
    """Invalid column configuration, action template or grid document."""


class TemplateResolutionError(GCError):
    """A placeholder could not be resolved against a row in strict mode."""


class ProviderResolutionError(GCError):
    """A named component, or a method on it, could not be resolved."""


def error_to_payload(error: GCError) -> dict[str, Any]:
    """Flatten an error into the payload shape used by log events."""
    return {
        "error_type": error.error_type,
        "error": str(error),
        "error_context": error.context,
    }
