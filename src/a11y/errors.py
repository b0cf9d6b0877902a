"""Structured errors for color parsing and contrast checks."""

from __future__ import annotations
from typing import Any


class ColorError(ValueError):
    """Base class for color related issues."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None):
        super().__init__(message)
        self.context = context or {}


class MalformedColorError(ColorError):
    """Raised when a color matches a known notation but is not well formed."""


class UnsupportedColorNotationError(ColorError):
    """Raised when no registered parser understands the color notation."""


class MissingStylePropertyError(ColorError):
    """Raised when an element-like object has no value for a style property."""
