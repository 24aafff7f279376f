"""Internal Bezier curve flattening algorithms.

This is an internal module containing helper functions for
flatten_primitives. Not intended for public use.
"""

import math

from vectorpath.domain import Point


def _midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def flatten_quadratic(points: list[Point], tolerance: float) -> list[Point]:
    """Flatten a quadratic Bezier curve using recursive subdivision.

    Args:
        points: List of 3 control points [p0, p1, p2]
        tolerance: Maximum distance from true curve

    Returns:
        List of points approximating the curve
    """
    p0, p1, p2 = points

    # Curve point at t=0.5 against the chord midpoint
    curve_mid = Point(
        0.25 * p0.x + 0.5 * p1.x + 0.25 * p2.x,
        0.25 * p0.y + 0.5 * p1.y + 0.25 * p2.y,
    )
    chord_mid = _midpoint(p0, p2)

    if math.hypot(curve_mid.x - chord_mid.x, curve_mid.y - chord_mid.y) <= tolerance:
        return [p0, p2]

    left = flatten_quadratic([p0, _midpoint(p0, p1), curve_mid], tolerance)
    right = flatten_quadratic([curve_mid, _midpoint(p1, p2), p2], tolerance)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def flatten_cubic(points: list[Point], tolerance: float) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm for subdivision.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve

    Returns:
        List of points approximating the curve
    """
    p0, p1, p2, p3 = points

    q1 = _midpoint(p0, p1)
    q2 = _midpoint(p1, p2)
    q3 = _midpoint(p2, p3)
    r1 = _midpoint(q1, q2)
    r2 = _midpoint(q2, q3)
    mid = _midpoint(r1, r2)

    # Flat when the midpoint and both control points are near the chord
    chord_mid = _midpoint(p0, p3)
    distance = max(
        math.hypot(mid.x - chord_mid.x, mid.y - chord_mid.y),
        _distance_to_chord(p1, p0, p3),
        _distance_to_chord(p2, p0, p3),
    )

    if distance <= tolerance:
        return [p0, p3]

    left = flatten_cubic([p0, q1, r1, mid], tolerance)
    right = flatten_cubic([mid, r2, q3, p3], tolerance)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def _distance_to_chord(point: Point, a: Point, b: Point) -> float:
    dx, dy = b.x - a.x, b.y - a.y
    length = math.hypot(dx, dy)
    if length == 0:
        return math.hypot(point.x - a.x, point.y - a.y)
    return abs(dx * (a.y - point.y) - dy * (a.x - point.x)) / length
