"""Logging utilities for hslconv."""

from .log import (
    YELLOW, PURPLE,
    RESET_COLOR,
    debug, warning,
    is_debug_enabled,
)

__all__ = [
    "YELLOW", "PURPLE",
    "RESET_COLOR",
    "debug", "warning",
    "is_debug_enabled",
]
