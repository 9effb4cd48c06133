"""Project core.

Stable, non-geometric building blocks shared by the rest of the package.
"""

from __future__ import annotations

from .errors import ConfigError, ShapekitError, ShapeSpecError, UnknownShapeError

__all__ = ["ConfigError", "ShapeSpecError", "ShapekitError", "UnknownShapeError"]
