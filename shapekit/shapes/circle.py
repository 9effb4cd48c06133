"""Round shapes.

`SemiCircle` is its own variant rather than a `Circle` subclass: it keeps the
same radius and diameter but redefines area (half the disc) and circumference
(half the arc plus the straight edge).
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from .base import format_fixed, format_number, or_default


@dataclass(frozen=True, slots=True)
class Circle:
    radius: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius", or_default(self.radius))

    def get_area(self) -> float:
        return math.pi * self.radius**2

    def get_circumference(self) -> float:
        return 2 * math.pi * self.radius

    def get_diameter(self) -> float:
        return 2 * self.radius

    def to_string(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return (
            f"Circle[radius={format_number(self.radius)},"
            f"diameter={format_number(self.get_diameter())},"
            f"circumference={format_fixed(self.get_circumference())}]"
        )


@dataclass(frozen=True, slots=True)
class SemiCircle:
    radius: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "radius", or_default(self.radius))

    def get_area(self) -> float:
        return (math.pi * self.radius**2) / 2

    def get_circumference(self) -> float:
        # Arc length plus the diameter closing the shape.
        return math.pi * self.radius + 2 * self.radius

    def get_diameter(self) -> float:
        return 2 * self.radius

    def to_string(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return (
            f"SemiCircle[radius={format_number(self.radius)},"
            f"diameter={format_number(self.get_diameter())},"
            f"circumference={format_fixed(self.get_circumference())}]"
        )
