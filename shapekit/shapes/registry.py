"""Build shapes from plain data (e.g. YAML catalogs).

Kinds are snake_case names; parameters are the dataclass field names of the
variant (`rectangle: width/height`, `circle: radius`, ...).
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Iterable, Mapping, Sequence

from shapekit.core.errors import ShapeSpecError, UnknownShapeError

from .base import Shape
from .circle import Circle, SemiCircle
from .quadrilateral import Rectangle, Square
from .triangle import Triangle

logger = logging.getLogger(__name__)


SHAPE_TYPES: Mapping[str, type] = {
    "rectangle": Rectangle,
    "square": Square,
    "triangle": Triangle,
    "circle": Circle,
    "semi_circle": SemiCircle,
}


def list_shapes() -> list[str]:
    """Registered shape kinds, sorted."""

    return sorted(SHAPE_TYPES)


def _coerce_dimension(value: Any, *, path: str) -> float | None:
    if value is None:
        return None
    # bool is an int subclass; `width: true` is a typo, not a length.
    if isinstance(value, bool):
        raise ShapeSpecError("must be a number, got bool", path=path)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        # ${ENV_VAR} expansion always yields strings.
        try:
            return float(value)
        except ValueError as e:
            raise ShapeSpecError(f"must be a number, got {value!r}", path=path) from e
    raise ShapeSpecError(f"must be a number, got {type(value).__name__}", path=path)


def build_shape(kind: str, params: Mapping[str, Any] | None = None, *, path: str = "") -> Shape:
    """Construct the variant registered under `kind`.

    Raises:
        UnknownShapeError: `kind` is not registered.
        ShapeSpecError: a parameter is unknown or not numeric.
    """

    cls = SHAPE_TYPES.get(kind)
    if cls is None:
        raise UnknownShapeError(
            f"unknown shape kind {kind!r} (expected one of: {', '.join(list_shapes())})",
            path=f"{path}.kind" if path else None,
        )

    if params is not None and not isinstance(params, Mapping):
        raise ShapeSpecError(
            f"parameters must be a mapping, got {type(params).__name__}",
            path=path or None,
        )

    allowed = {f.name for f in dataclasses.fields(cls)}
    kwargs: dict[str, float | None] = {}
    for name, value in (params or {}).items():
        param_path = f"{path}.{name}" if path else str(name)
        if name not in allowed:
            raise ShapeSpecError(
                f"unknown parameter for {kind} (expected: {', '.join(sorted(allowed))})",
                path=param_path,
            )
        kwargs[name] = _coerce_dimension(value, path=param_path)

    shape = cls(**kwargs)
    logger.debug("shape_built", extra={"kind": kind, "params": sorted(kwargs), "shape": shape})
    return shape


def build_shapes(specs: Sequence[Mapping[str, Any]], *, path: str = "shapes") -> list[Shape]:
    """Build every entry of a catalog; each entry is `{"kind": ..., **params}`."""

    out: list[Shape] = []
    for i, spec in enumerate(specs):
        item_path = f"{path}[{i}]"
        if not isinstance(spec, Mapping):
            raise ShapeSpecError("must be a mapping with a 'kind' key", path=item_path)
        params = dict(spec)
        kind = params.pop("kind", None)
        if not isinstance(kind, str) or not kind:
            raise ShapeSpecError("missing or empty 'kind'", path=f"{item_path}.kind")
        out.append(build_shape(kind, params, path=item_path))

    logger.debug("shapes_built", extra={"count": len(out)})
    return out


def total_area(shapes: Iterable[Shape]) -> float:
    return sum(s.get_area() for s in shapes)
