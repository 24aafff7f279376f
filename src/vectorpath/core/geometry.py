"""Measurements over primitive sequences.

This module provides:
- primitive_bounds: Tight bounding box, computed with a fontTools BoundsPen
- flatten_primitives: Polyline approximation of every subpath

All functions are pure and safe to call from worker processes.
"""

from collections.abc import Iterable

from fontTools.pens.boundsPen import BoundsPen

from vectorpath.core._bezier import flatten_cubic as _flatten_cubic
from vectorpath.core._bezier import flatten_quadratic as _flatten_quadratic
from vectorpath.domain import (
    Close,
    CubicBezier,
    GeometricPrimitive,
    LineTo,
    MoveTo,
    Point,
    QuadraticBezier,
)
from vectorpath.render.surface import PenSurface, draw_primitives


def primitive_bounds(
    primitives: Iterable[GeometricPrimitive],
) -> tuple[float, float, float, float] | None:
    """Calculate the bounding box of the drawn geometry.

    Curve extrema are included; off-curve control points are not.

    Args:
        primitives: Primitive sequence

    Returns:
        Tuple of (min_x, min_y, max_x, max_y), or None if nothing is drawn
    """
    pen = BoundsPen(glyphSet=None)
    surface = PenSurface(pen)
    draw_primitives(primitives, surface)
    surface.finish()
    return pen.bounds


def flatten_primitives(
    primitives: Iterable[GeometricPrimitive],
    tolerance: float = 0.5,
) -> list[list[Point]]:
    """Approximate every subpath with a polyline.

    Closed subpaths end with a copy of their start point.

    Args:
        primitives: Primitive sequence
        tolerance: Maximum distance between curve and polyline

    Returns:
        One list of points per subpath
    """
    polylines: list[list[Point]] = []
    current: list[Point] = []
    start: Point | None = None

    for primitive in primitives:
        if isinstance(primitive, MoveTo):
            if len(current) > 1:
                polylines.append(current)
            current = [primitive.point]
            start = primitive.point
            continue

        if not current and start is not None:
            # Drawing resumed after a close without a new move
            current = [start]

        if isinstance(primitive, LineTo):
            current.append(primitive.point)
        elif isinstance(primitive, CubicBezier):
            points = [current[-1], primitive.control1, primitive.control2, primitive.end]
            current.extend(_flatten_cubic(points, tolerance)[1:])
        elif isinstance(primitive, QuadraticBezier):
            points = [current[-1], primitive.control, primitive.end]
            current.extend(_flatten_quadratic(points, tolerance)[1:])
        elif isinstance(primitive, Close):
            if start is not None and current and current[-1] != start:
                current.append(start)
            if len(current) > 1:
                polylines.append(current)
            current = []

    if len(current) > 1:
        polylines.append(current)

    return polylines
