"""Configuration for hslconv."""

from .settings import (
    ConversionSettings,
    load_settings,
    get_settings,
    reset_settings,
    ENV_PREPEND_POUND,
    ENV_DEBUG,
)

__all__ = [
    "ConversionSettings",
    "load_settings",
    "get_settings",
    "reset_settings",
    "ENV_PREPEND_POUND",
    "ENV_DEBUG",
]
