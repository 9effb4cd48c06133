from __future__ import annotations

import math

import pytest

from shapekit.core.errors import ShapeSpecError, UnknownShapeError
from shapekit.shapes import (
    Circle,
    Rectangle,
    SemiCircle,
    Square,
    Triangle,
    build_shape,
    build_shapes,
    list_shapes,
    total_area,
)


def test_list_shapes_sorted() -> None:
    assert list_shapes() == ["circle", "rectangle", "semi_circle", "square", "triangle"]


def test_build_shape_each_kind() -> None:
    assert build_shape("rectangle", {"width": 5, "height": 6}) == Rectangle(5, 6)
    assert build_shape("square", {"width": 9}) == Square(9)
    assert build_shape("triangle", {"base": 15, "height": 20}) == Triangle(15, 20)
    assert build_shape("circle", {"radius": 15}) == Circle(15)
    assert build_shape("semi_circle", {"radius": 15}) == SemiCircle(15)


def test_build_shape_missing_params_default_to_one() -> None:
    assert build_shape("rectangle") == Rectangle(1, 1)
    assert build_shape("triangle", {"base": None, "height": 4}) == Triangle(1, 4)


def test_build_shape_accepts_numeric_strings() -> None:
    sq = build_shape("square", {"width": "3"})
    assert sq.get_area() == 9
    assert str(sq) == "Square[width=3,area=9]"


def test_build_shape_unknown_kind() -> None:
    with pytest.raises(UnknownShapeError) as ei:
        build_shape("hexagon")
    assert "hexagon" in str(ei.value)
    assert "semi_circle" in str(ei.value)


def test_build_shape_unknown_parameter() -> None:
    with pytest.raises(ShapeSpecError) as ei:
        build_shape("circle", {"diameter": 4})
    assert ei.value.path == "diameter"
    assert "radius" in str(ei.value)


@pytest.mark.parametrize("bad", [True, "wide", [1, 2], {"x": 1}])
def test_build_shape_rejects_non_numeric(bad: object) -> None:
    with pytest.raises(ShapeSpecError):
        build_shape("square", {"width": bad})


def test_build_shapes_reports_entry_path() -> None:
    specs = [
        {"kind": "square", "width": 2},
        {"kind": "circle", "radius": "big"},
    ]
    with pytest.raises(ShapeSpecError) as ei:
        build_shapes(specs)
    assert ei.value.path == "shapes[1].radius"


def test_build_shapes_requires_kind() -> None:
    with pytest.raises(ShapeSpecError) as ei:
        build_shapes([{"width": 2}])
    assert ei.value.path == "shapes[0].kind"

    with pytest.raises(UnknownShapeError) as ei2:
        build_shapes([{"kind": "blob"}])
    assert ei2.value.path == "shapes[0].kind"


def test_build_shapes_does_not_mutate_specs() -> None:
    spec = {"kind": "triangle", "base": 2, "height": 3}
    shapes = build_shapes([spec])
    assert spec["kind"] == "triangle"
    assert shapes == [Triangle(2, 3)]


def test_total_area() -> None:
    shapes = [Rectangle(5, 6), Square(9), Triangle(15, 20), SemiCircle(2)]
    assert total_area(shapes) == pytest.approx(30 + 81 + 150 + 2 * math.pi)
    assert total_area([]) == 0


@pytest.mark.parametrize("bad", [[("width", 2)], "width=2", 3])
def test_build_shape_rejects_non_mapping_params(bad: object) -> None:
    with pytest.raises(ShapeSpecError) as ei:
        build_shape("square", bad)  # type: ignore[arg-type]
    assert "mapping" in str(ei.value)
