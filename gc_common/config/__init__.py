"""Configuration helpers shared across packages."""

from gc_common.config.env import (
    ENV_PROVIDER_TIMEOUT,
    ENV_STRICT_TEMPLATES,
    column_env_overrides,
    parse_bool_env,
    parse_float_env,
)

__all__ = [
    "ENV_PROVIDER_TIMEOUT",
    "ENV_STRICT_TEMPLATES",
    "column_env_overrides",
    "parse_bool_env",
    "parse_float_env",
]
