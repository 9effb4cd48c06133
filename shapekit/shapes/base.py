"""Shape capability and the rendering helpers shared by every variant."""

from __future__ import annotations

import math
from typing import Protocol, runtime_checkable

DEFAULT_DIMENSION = 1

# Digits after the decimal point for derived lengths such as circumference.
FIXED_DIGITS = 3


@runtime_checkable
class Shape(Protocol):
    """Contract satisfied by every concrete shape.

    `get_area()` is a pure function of the stored dimensions and never raises for a
    value the shape was constructed with. `to_string()` (and `str()`) returns a
    deterministic `ClassName[field=value,...]` rendering.
    """

    def get_area(self) -> float: ...

    def to_string(self) -> str: ...


def or_default(value: float | None) -> float:
    """Substitute the default dimension for an omitted (`None`) argument."""

    return DEFAULT_DIMENSION if value is None else value


def format_number(value: float) -> str:
    """Render a number the way shape strings expect it.

    Integral floats drop their fractional part (`30.0` -> `30`); other values use
    the shortest round-tripping repr.
    """

    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    return str(value)


def format_fixed(value: float, digits: int = FIXED_DIGITS) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return f"{value:.{digits}f}"
