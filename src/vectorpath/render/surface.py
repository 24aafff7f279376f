"""Rendering surfaces that consume drawing primitives.

A surface is anything with the six drawing calls of RenderSurface. Two
implementations are provided:

- RecordingSurface: Keeps every call, for inspection and tests
- PenSurface: Forwards to a fontTools pen (RecordingPen, BoundsPen,
  TTGlyphPen, SVGPathPen, ...)
"""

from collections.abc import Iterable
from typing import Any, Protocol

from fontTools.pens.basePen import AbstractPen

from vectorpath.domain.point import Point
from vectorpath.domain.primitives import (
    Close,
    CubicBezier,
    GeometricPrimitive,
    LineTo,
    MoveTo,
    QuadraticBezier,
)
from vectorpath.exceptions import GeometryError


class RenderSurface(Protocol):
    """Drawing target for primitives."""

    def begin_at(self, point: Point) -> None: ...

    def line_to(self, point: Point) -> None: ...

    def cubic_to(self, control1: Point, control2: Point, end: Point) -> None: ...

    def quadratic_to(self, control: Point, end: Point) -> None: ...

    def close(self) -> None: ...

    def paint(self, fill: str | None, stroke: str | None, stroke_width: float) -> None: ...


def draw_primitives(primitives: Iterable[GeometricPrimitive], surface: RenderSurface) -> None:
    """Replay primitives onto a surface in order.

    Args:
        primitives: Primitives produced by the geometry builder
        surface: Target surface
    """
    for primitive in primitives:
        if isinstance(primitive, MoveTo):
            surface.begin_at(primitive.point)
        elif isinstance(primitive, LineTo):
            surface.line_to(primitive.point)
        elif isinstance(primitive, CubicBezier):
            surface.cubic_to(primitive.control1, primitive.control2, primitive.end)
        elif isinstance(primitive, QuadraticBezier):
            surface.quadratic_to(primitive.control, primitive.end)
        elif isinstance(primitive, Close):
            surface.close()
        else:
            raise TypeError(f"Unsupported primitive: {primitive!r}")


class RecordingSurface:
    """Surface that records calls as ``(name, args)`` tuples.

    Example:
        surface = RecordingSurface()
        draw_primitives(outline.primitives, surface)
        surface.calls[0]  # ("begin_at", (Point(0.0, 0.0),))
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[Any, ...]]] = []

    def begin_at(self, point: Point) -> None:
        self.calls.append(("begin_at", (point,)))

    def line_to(self, point: Point) -> None:
        self.calls.append(("line_to", (point,)))

    def cubic_to(self, control1: Point, control2: Point, end: Point) -> None:
        self.calls.append(("cubic_to", (control1, control2, end)))

    def quadratic_to(self, control: Point, end: Point) -> None:
        self.calls.append(("quadratic_to", (control, end)))

    def close(self) -> None:
        self.calls.append(("close", ()))

    def paint(self, fill: str | None, stroke: str | None, stroke_width: float) -> None:
        self.calls.append(("paint", (fill, stroke, stroke_width)))

    def clear(self) -> None:
        """Forget all recorded calls."""
        self.calls.clear()


class PenSurface:
    """Adapter from RenderSurface calls to the fontTools pen protocol.

    fontTools pens require every contour to start with ``moveTo`` and end
    with ``closePath`` or ``endPath``. Path data is looser: drawing may
    continue after a close without a new move, in which case the next
    contour starts at the closed subpath's start point. This adapter fills
    in the missing pen calls.

    Example:
        pen = RecordingPen()
        surface = PenSurface(pen)
        draw_primitives(outline.primitives, surface)
        surface.finish()
    """

    def __init__(self, pen: AbstractPen) -> None:
        """Initialize the adapter.

        Args:
            pen: Any fontTools pen
        """
        self.pen = pen
        self._open = False
        self._subpath_start: Point | None = None

    def _ensure_open(self) -> None:
        if self._open:
            return
        if self._subpath_start is None:
            raise GeometryError("Drawing call before the first begin_at")
        self.pen.moveTo(self._subpath_start.to_tuple())
        self._open = True

    def begin_at(self, point: Point) -> None:
        self.finish()
        self.pen.moveTo(point.to_tuple())
        self._subpath_start = point
        self._open = True

    def line_to(self, point: Point) -> None:
        self._ensure_open()
        self.pen.lineTo(point.to_tuple())

    def cubic_to(self, control1: Point, control2: Point, end: Point) -> None:
        self._ensure_open()
        self.pen.curveTo(control1.to_tuple(), control2.to_tuple(), end.to_tuple())

    def quadratic_to(self, control: Point, end: Point) -> None:
        self._ensure_open()
        self.pen.qCurveTo(control.to_tuple(), end.to_tuple())

    def close(self) -> None:
        if self._open:
            self.pen.closePath()
            self._open = False

    def paint(self, fill: str | None, stroke: str | None, stroke_width: float) -> None:  # noqa: ARG002
        # Pens carry geometry only
        self.finish()

    def finish(self) -> None:
        """End an open contour with ``endPath``."""
        if self._open:
            self.pen.endPath()
            self._open = False
