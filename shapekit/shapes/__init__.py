from __future__ import annotations

from .base import Shape
from .circle import Circle, SemiCircle
from .quadrilateral import Rectangle, Square, rectangle_area, square_area
from .registry import SHAPE_TYPES, build_shape, build_shapes, list_shapes, total_area
from .triangle import Triangle, triangle_area

__all__ = [
    "Circle",
    "Rectangle",
    "SHAPE_TYPES",
    "SemiCircle",
    "Shape",
    "Square",
    "Triangle",
    "build_shape",
    "build_shapes",
    "list_shapes",
    "rectangle_area",
    "square_area",
    "total_area",
    "triangle_area",
]
