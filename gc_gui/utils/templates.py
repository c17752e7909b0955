"""Placeholder resolution for action templates.

Action descriptors may embed ``${ ... }`` placeholders in any string value.
An expression is a dotted path into the row, optionally prefixed with
``$.`` (``${ $.id }``, ``${ $.customer.email }`` and ``${ id }`` are
equivalent forms). Resolution walks nested mappings and lists; callables
and non-string scalars are returned untouched.

A string that consists of a single placeholder resolves to the raw field
value, so ``"${ $.is_locked }"`` yields a real ``bool`` rather than the text
``"True"``.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Sequence

from gc_common.errors import TemplateResolutionError

logger = logging.getLogger(__name__)

PLACEHOLDER_RE = re.compile(r"\$\{\s*(?P<expr>[^{}]*?)\s*\}")

_MISSING = object()


def _split_expression(expr: str) -> list[str]:
    if expr.startswith("$."):
        expr = expr[2:]
    elif expr == "$":
        return []
    return [part for part in expr.split(".") if part]


def lookup(data: Any, expr: str) -> Any:
    """Return the value at ``expr`` inside ``data`` or a missing sentinel."""
    current = data
    for part in _split_expression(expr):
        if isinstance(current, Mapping):
            if part not in current:
                return _MISSING
            current = current[part]
        elif isinstance(current, Sequence) and not isinstance(current, str):
            try:
                current = current[int(part)]
            except (ValueError, IndexError):
                return _MISSING
        else:
            return _MISSING
    return current


def has_placeholders(value: str) -> bool:
    return PLACEHOLDER_RE.search(value) is not None


class TemplateRenderer:
    """Resolve placeholders in nested action descriptors against a row."""

    def __init__(self, strict: bool = False) -> None:
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    def render(self, template: Any, row: Mapping[str, Any]) -> Any:
        """Return a copy of ``template`` with every placeholder resolved."""
        if isinstance(template, str):
            return self._render_string(template, row)
        if isinstance(template, Mapping):
            return {key: self.render(value, row) for key, value in template.items()}
        if isinstance(template, list):
            return [self.render(item, row) for item in template]
        return template

    def _render_string(self, text: str, row: Mapping[str, Any]) -> Any:
        if not has_placeholders(text):
            return text
        match = PLACEHOLDER_RE.fullmatch(text.strip())
        if match is not None:
            value = self._resolve(match.group("expr"), text, row)
            return None if value is _MISSING else value

        def substitute(m: re.Match[str]) -> str:
            value = self._resolve(m.group("expr"), text, row)
            if value is _MISSING or value is None:
                return ""
            return str(value)

        return PLACEHOLDER_RE.sub(substitute, text)

    def _resolve(self, expr: str, text: str, row: Mapping[str, Any]) -> Any:
        value = lookup(row, expr)
        if value is _MISSING:
            if self._strict:
                raise TemplateResolutionError(
                    f"Unresolvable placeholder '{expr}'",
                    context={"template": text, "fields": sorted(row.keys())},
                )
            logger.debug("Placeholder %r not found in row; rendering empty", expr)
        return value
