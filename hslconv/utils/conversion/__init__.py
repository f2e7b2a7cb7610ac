"""Typed value parsing helpers."""

from .types import string_to_boolean, boolean_from_environ

__all__ = ["string_to_boolean", "boolean_from_environ"]
