from __future__ import annotations

from dataclasses import dataclass

from .base import format_number, or_default


def triangle_area(base: float, height: float) -> float:
    """Half of `base * height`, with no defaulting of missing operands."""

    return 0.5 * base * height


@dataclass(frozen=True, slots=True)
class Triangle:
    base: float | None = None
    height: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "base", or_default(self.base))
        object.__setattr__(self, "height", or_default(self.height))

    def get_area(self) -> float:
        return 0.5 * self.base * self.height

    def to_string(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"Triangle[base={format_number(self.base)},height={format_number(self.height)}]"
