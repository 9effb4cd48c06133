from __future__ import annotations

from dataclasses import dataclass

from .base import format_number, or_default


def rectangle_area(width: float, height: float) -> float:
    """Area of a `width` x `height` rectangle without building one.

    No defaulting is applied: `None` operands fail in the multiplication itself.
    """

    return width * height


def square_area(side: float) -> float:
    return side * side


@dataclass(frozen=True, slots=True)
class Rectangle:
    """Axis-free rectangle; omitted sides default to 1 independently."""

    width: float | None = None
    height: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", or_default(self.width))
        object.__setattr__(self, "height", or_default(self.height))

    def get_area(self) -> float:
        return self.height * self.width

    def to_string(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return (
            f"Rectangle[width={format_number(self.width)},"
            f"height={format_number(self.height)},"
            f"area={format_number(self.get_area())}]"
        )


@dataclass(frozen=True, slots=True)
class Square:
    """Square stored by its side length only.

    `height` mirrors `width`, so a Square behaves like `Rectangle(side, side)`.
    """

    width: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "width", or_default(self.width))

    @property
    def height(self) -> float:
        return self.width

    def get_area(self) -> float:
        return self.height * self.width

    def to_string(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return f"Square[width={format_number(self.width)},area={format_number(self.get_area())}]"
