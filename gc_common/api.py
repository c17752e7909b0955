"""Public API for gc_common."""

from gc_common.config.env import column_env_overrides, parse_bool_env, parse_float_env
from gc_common.errors import (
    ConfigurationError,
    GCError,
    ProviderResolutionError,
    TemplateResolutionError,
    error_to_payload,
)
from gc_common.logging import configure_logging

__all__ = [
    "configure_logging",
    "column_env_overrides",
    "parse_bool_env",
    "parse_float_env",
    "GCError",
    "ConfigurationError",
    "TemplateResolutionError",
    "ProviderResolutionError",
    "error_to_payload",
]
