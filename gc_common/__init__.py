"""Shared helpers for grid column packages."""

from gc_common.api import GCError, configure_logging

__all__ = ["configure_logging", "GCError"]
