"""Environment variable parsing for grid column settings."""

from __future__ import annotations

import os
from typing import Any, Mapping

ENV_PROVIDER_TIMEOUT = "GC_PROVIDER_TIMEOUT"
ENV_STRICT_TEMPLATES = "GC_STRICT_TEMPLATES"


def parse_bool_env(value: str | None) -> bool | None:
    """Parse a boolean from an environment variable string.

    Returns True for "1", "true", "yes", "on" (case-insensitive).
    Returns None if value is None.
    """
    if value is None:
        return None
    return value.strip().lower() in {"1", "true", "yes", "on"}


def parse_float_env(value: str | None) -> float | None:
    """Parse a float, returning None when missing or malformed."""
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def column_env_overrides(environ: Mapping[str, str] | None = None) -> dict[str, Any]:
    """Collect column settings overridden through the environment.

    Only variables that are set and parse cleanly are returned, keyed by
    the matching ``ActionsColumnConfig`` field name.
    """
    env = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}

    timeout = parse_float_env(env.get(ENV_PROVIDER_TIMEOUT))
    if timeout is not None:
        overrides["provider_timeout_seconds"] = timeout

    strict = parse_bool_env(env.get(ENV_STRICT_TEMPLATES))
    if strict is not None:
        overrides["strict_templates"] = strict

    return overrides
