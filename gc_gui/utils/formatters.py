"""Formatting helpers for grid display."""

from __future__ import annotations

from typing import Any, Mapping


def format_optional(value: object | None, fallback: str = "-") -> str:
    """Format optional values with a fallback string."""
    if value is None:
        return fallback
    return str(value)


def format_cell(value: Any) -> str:
    """Render a row field for a table cell."""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (list, tuple)):
        return ", ".join(format_optional(item) for item in value) or "-"
    if isinstance(value, Mapping):
        return f"{len(value)} item(s)"
    return format_optional(value)


def action_label(action: Mapping[str, Any]) -> str:
    """Label shown for an action, falling back to its index."""
    label = action.get("label")
    if label:
        return str(label)
    return str(action.get("index", "?"))
