"""Lightweight debug logging helpers for the definition generator."""

from __future__ import annotations

import os
import sys
from typing import Iterable

DEBUG_ENV_VAR = "PY6502DEFS_DEBUG"

_CATEGORIES: set[str] | None = None


def _load_categories() -> set[str]:
    global _CATEGORIES
    if _CATEGORIES is not None:
        return _CATEGORIES
    value = os.environ.get(DEBUG_ENV_VAR, "")
    if not value:
        _CATEGORIES = set()
        return _CATEGORIES
    parts: Iterable[str] = (part.strip().lower() for part in value.split(","))
    _CATEGORIES = {part for part in parts if part}
    return _CATEGORIES


def debug_enabled(category: str | None = None) -> bool:
    categories = _load_categories()
    if not categories:
        return False
    if "all" in categories:
        return True
    if category is None:
        return True
    return category.lower() in categories


def debug_log(category: str, message: str, *args) -> None:
    """Print ``message`` to stderr when ``category`` is enabled.

    Output goes to stderr because stdout carries the generated declarations.
    """
    if not debug_enabled(category):
        return
    prefix = f"[6502DEFS][{category}]"
    if args:
        try:
            message = message % args
        except (TypeError, ValueError):
            message = f"{message} {args!r}"
    print(f"{prefix} {message}", file=sys.stderr)
