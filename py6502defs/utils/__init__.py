"""Utility helpers for the definition generator."""

from .debug import DEBUG_ENV_VAR, debug_enabled, debug_log

__all__ = [
    "DEBUG_ENV_VAR",
    "debug_enabled",
    "debug_log",
]
