"""shapekit: immutable geometric shape values.

Concrete shapes live in :mod:`shapekit.shapes`; YAML-driven catalogs are loaded by
:mod:`shapekit.config`.
"""

from __future__ import annotations

from shapekit.core.errors import ConfigError, ShapekitError, ShapeSpecError, UnknownShapeError
from shapekit.shapes import (
    Circle,
    Rectangle,
    SemiCircle,
    Shape,
    Square,
    Triangle,
    build_shape,
    build_shapes,
    rectangle_area,
    square_area,
    total_area,
    triangle_area,
)

__all__ = [
    "Circle",
    "ConfigError",
    "Rectangle",
    "SemiCircle",
    "Shape",
    "ShapeSpecError",
    "ShapekitError",
    "Square",
    "Triangle",
    "UnknownShapeError",
    "__version__",
    "build_shape",
    "build_shapes",
    "rectangle_area",
    "square_area",
    "total_area",
    "triangle_area",
]

__version__ = "0.1.0"
