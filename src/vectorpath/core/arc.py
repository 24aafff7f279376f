"""Elliptical arc to cubic Bezier conversion.

Arcs in path data use endpoint parameterization: radii, rotation, two
flags and an endpoint. Drawing backends generally lack arcs, so each arc
is handed to fontTools' ``EllipticalArc``, which converts it to center
parameterization and draws quarter-turn cubics onto a pen. Segment angles
below a quarter turn are split again from the same parameterization.
"""

import math

from fontTools.misc.transform import Identity
from fontTools.pens.recordingPen import RecordingPen
from fontTools.svgLib.path.arc import EllipticalArc

from vectorpath.domain.point import Point
from vectorpath.exceptions import GeometryError

CubicSegment = tuple[Point, Point, Point]

# EllipticalArc never draws a cubic wider than this
_NATIVE_SEGMENT_ANGLE = 90.0


def _corrected_radii(
    start: Point, rx: float, ry: float, rotation: float, end: Point
) -> tuple[float, float]:
    """Absolute radii, scaled up if they cannot span the chord.

    The scale is taken as a ratio of chord to radius so that tiny radii do
    not underflow when squared.
    """
    rx, ry = abs(rx), abs(ry)
    phi = math.radians(rotation)
    dx = (start.x - end.x) / 2.0
    dy = (start.y - end.y) / 2.0
    x1 = math.cos(phi) * dx + math.sin(phi) * dy
    y1 = -math.sin(phi) * dx + math.cos(phi) * dy

    factor = math.hypot(x1 / rx, y1 / ry)
    if not math.isfinite(factor):
        raise GeometryError(f"arc from {start} to {end} is out of numeric range")
    if factor > 1.0:
        rx *= factor
        ry *= factor
    return rx, ry


def _parameterized_arc(
    start: Point,
    rx: float,
    ry: float,
    rotation: float,
    large_arc: bool,
    sweep: bool,
    end: Point,
    pen: RecordingPen,
) -> EllipticalArc:
    rx, ry = _corrected_radii(start, rx, ry, rotation, end)
    arc = EllipticalArc(
        complex(start.x, start.y), rx, ry, rotation, large_arc, sweep, complex(end.x, end.y)
    )
    try:
        arc.draw(pen)
    except (ArithmeticError, ValueError) as e:
        raise GeometryError(f"arc from {start} to {end} cannot be approximated: {e}") from e
    if arc.center_point is None:
        raise GeometryError(f"arc from {start} to {end} has no extent")
    return arc


def arc_to_center(
    start: Point,
    rx: float,
    ry: float,
    rotation: float,
    large_arc: bool,
    sweep: bool,
    end: Point,
) -> tuple[Point, float, float, float, float, float]:
    """Convert an endpoint-parameterized arc to center parameterization.

    Radii that are too small to span the chord are scaled up by the
    smallest factor that makes the endpoints reachable.

    Args:
        start: Absolute start point
        rx: X radius (sign ignored, must be non-zero)
        ry: Y radius (sign ignored, must be non-zero)
        rotation: Ellipse x-axis rotation in degrees
        large_arc: Large-arc flag
        sweep: Sweep flag
        end: Absolute end point

    Returns:
        Tuple of (center, rx, ry, phi, theta, delta) where ``phi`` is the
        rotation in radians, ``theta`` the start angle and ``delta`` the
        signed sweep, both in radians

    Raises:
        GeometryError: If the arc cannot be represented in floating point
    """
    arc = _parameterized_arc(start, rx, ry, rotation, large_arc, sweep, end, RecordingPen())
    # EllipticalArc keeps its center on the unit circle's frame
    to_user = Identity.rotate(arc.angle).scale(arc.rx, arc.ry)
    center = Point(*to_user.transformPoint((arc.center_point.real, arc.center_point.imag)))
    return center, arc.rx, arc.ry, arc.angle, arc.theta1, arc.theta_arc


def _split(arc: EllipticalArc, max_segment_angle: float) -> list[CubicSegment]:
    to_user = Identity.rotate(arc.angle).scale(arc.rx, arc.ry)

    def mapped(z: complex) -> Point:
        return Point(*to_user.transformPoint((z.real, z.imag)))

    count = max(1, math.ceil(abs(arc.theta_arc) / math.radians(max_segment_angle) - 1e-9))
    step = arc.theta_arc / count
    handle = 4.0 / 3.0 * math.tan(step / 4.0)

    segments: list[CubicSegment] = []
    for i in range(count):
        a0 = arc.theta1 + i * step
        a1 = a0 + step
        u0 = complex(math.cos(a0), math.sin(a0))
        u1 = complex(math.cos(a1), math.sin(a1))
        segments.append(
            (
                mapped(arc.center_point + u0 + handle * 1j * u0),
                mapped(arc.center_point + u1 - handle * 1j * u1),
                mapped(arc.center_point + u1),
            )
        )
    return segments


def arc_to_cubics(
    start: Point,
    rx: float,
    ry: float,
    rotation: float,
    large_arc: bool,
    sweep: bool,
    end: Point,
    max_segment_angle: float = 90.0,
) -> list[CubicSegment]:
    """Approximate an elliptical arc with cubic Bezier segments.

    The caller handles the degenerate cases (zero radius, coincident
    endpoints) before calling this function. Limits of 90 degrees or more
    use the quarter-turn cubics fontTools draws.

    Args:
        start: Absolute start point
        rx: X radius
        ry: Y radius
        rotation: Ellipse x-axis rotation in degrees
        large_arc: Large-arc flag
        sweep: Sweep flag
        end: Absolute end point
        max_segment_angle: Largest sweep in degrees covered by one cubic

    Returns:
        List of (control1, control2, end) tuples; the last end point is
        exactly ``end``

    Raises:
        GeometryError: If the arc cannot be represented in floating point
    """
    pen = RecordingPen()
    arc = _parameterized_arc(start, rx, ry, rotation, large_arc, sweep, end, pen)

    if max_segment_angle >= _NATIVE_SEGMENT_ANGLE:
        segments = [
            (Point(*points[0]), Point(*points[1]), Point(*points[2]))
            for operator, points in pen.value
            if operator == "curveTo"
        ]
    else:
        segments = _split(arc, max_segment_angle)

    coordinates = [value for segment in segments for p in segment for value in (p.x, p.y)]
    if not segments or not all(math.isfinite(value) for value in coordinates):
        raise GeometryError(f"arc from {start} to {end} cannot be approximated")

    c1, c2, _ = segments[-1]
    segments[-1] = (c1, c2, end)
    return segments
