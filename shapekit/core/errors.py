from __future__ import annotations


class ShapekitError(Exception):
    """Base exception for this project."""


class ConfigError(ShapekitError):
    """Raised when configuration is invalid or incomplete."""

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.message = message
        self.path = path


class ShapeSpecError(ShapekitError):
    """Raised when a plain-data shape description cannot be turned into a shape."""

    def __init__(self, message: str, *, path: str | None = None):
        super().__init__(f"{path}: {message}" if path else message)
        self.message = message
        self.path = path


class UnknownShapeError(ShapeSpecError):
    """Raised for a shape kind that is not registered."""
