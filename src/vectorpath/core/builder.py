"""Turn decoded commands into drawing primitives.

The GeometryBuilder walks a command sequence with a single CursorState and
emits MoveTo, LineTo, CubicBezier, QuadraticBezier and Close primitives in
command order. Relative coordinates, shorthand curves and arcs are all
resolved here, so consumers of the output need no knowledge of the path
language.
"""

import logging

from vectorpath.core.arc import arc_to_cubics
from vectorpath.core.cursor import CursorState
from vectorpath.domain.commands import (
    ClosePathCommand,
    Command,
    CubicCurveToCommand,
    EllipticalArcToCommand,
    HorizontalLineToCommand,
    LineToCommand,
    MoveToCommand,
    QuadraticCurveToCommand,
    SmoothCubicCurveToCommand,
    SmoothQuadraticCurveToCommand,
    VerticalLineToCommand,
)
from vectorpath.domain.point import ORIGIN, Point
from vectorpath.domain.primitives import (
    Close,
    CubicBezier,
    GeometricPrimitive,
    LineTo,
    MoveTo,
    QuadraticBezier,
)

logger = logging.getLogger(__name__)


class GeometryBuilder:
    """Builds primitives from commands.

    A builder holds only configuration; every call to ``build`` starts from
    a fresh cursor, so one builder can serve any number of paths.

    Example:
        builder = GeometryBuilder()
        primitives = builder.build(decode("M0,0 L10,10"))
    """

    def __init__(self, origin: Point = ORIGIN, arc_segment_max_angle: float = 90.0) -> None:
        """Initialize the builder.

        Args:
            origin: Cursor position before the first command
            arc_segment_max_angle: Largest arc sweep in degrees per cubic
        """
        self.origin = origin
        self.arc_segment_max_angle = arc_segment_max_angle

    def build(self, commands: tuple[Command, ...] | list[Command]) -> list[GeometricPrimitive]:
        """Build the primitive sequence for one path.

        Args:
            commands: Decoded commands in path order

        Returns:
            Primitives in command order

        Raises:
            GeometryError: If a drawing command precedes the first move
        """
        cursor = CursorState(origin=self.origin)
        primitives: list[GeometricPrimitive] = []

        for command in commands:
            self.apply(command, cursor, primitives)

        logger.debug(
            "Built %d primitives from %d commands", len(primitives), len(commands)
        )
        return primitives

    def apply(
        self,
        command: Command,
        cursor: CursorState,
        out: list[GeometricPrimitive],
    ) -> None:
        """Process one command, appending its primitives to ``out``.

        Args:
            command: Command to process
            cursor: Cursor for the path being built; updated in place
            out: Primitive list to extend
        """
        if isinstance(command, MoveToCommand):
            (point,) = cursor.resolve(command)
            out.append(MoveTo(point))
            cursor.advance(command, point)

        elif isinstance(
            command, (LineToCommand, HorizontalLineToCommand, VerticalLineToCommand)
        ):
            (point,) = cursor.resolve(command)
            out.append(LineTo(point))
            cursor.advance(command, point)

        elif isinstance(command, CubicCurveToCommand):
            c1, c2, end = cursor.resolve(command)
            out.append(CubicBezier(c1, c2, end))
            cursor.advance(command, end, (c1, c2))

        elif isinstance(command, SmoothCubicCurveToCommand):
            c2, end = cursor.resolve(command)
            c1 = cursor.reflect(command.kind)
            out.append(CubicBezier(c1, c2, end))
            cursor.advance(command, end, (c1, c2))

        elif isinstance(command, QuadraticCurveToCommand):
            control, end = cursor.resolve(command)
            out.append(QuadraticBezier(control, end))
            cursor.advance(command, end, (control,))

        elif isinstance(command, SmoothQuadraticCurveToCommand):
            (end,) = cursor.resolve(command)
            control = cursor.reflect(command.kind)
            out.append(QuadraticBezier(control, end))
            cursor.advance(command, end, (control,))

        elif isinstance(command, EllipticalArcToCommand):
            (end,) = cursor.resolve(command)
            out.extend(self._arc_primitives(cursor.current, command, end))
            cursor.advance(command, end)

        elif isinstance(command, ClosePathCommand):
            (start,) = cursor.resolve(command)
            out.append(Close())
            cursor.advance(command, start)

        else:
            raise TypeError(f"Unsupported command: {command!r}")

    def _arc_primitives(
        self,
        start: Point,
        command: EllipticalArcToCommand,
        end: Point,
    ) -> list[GeometricPrimitive]:
        """Primitives for one arc.

        Coincident endpoints draw nothing; a zero radius draws a straight line.
        """
        if start.is_close(end):
            return []

        if command.rx == 0 or command.ry == 0:
            return [LineTo(end)]

        segments = arc_to_cubics(
            start,
            command.rx,
            command.ry,
            command.rotation,
            command.large_arc,
            command.sweep,
            end,
            max_segment_angle=self.arc_segment_max_angle,
        )
        return [CubicBezier(c1, c2, p) for c1, c2, p in segments]


def build_primitives(
    commands: tuple[Command, ...] | list[Command],
    origin: Point = ORIGIN,
    arc_segment_max_angle: float = 90.0,
) -> list[GeometricPrimitive]:
    """Build primitives with a one-off GeometryBuilder.

    Args:
        commands: Decoded commands
        origin: Cursor position before the first command
        arc_segment_max_angle: Largest arc sweep in degrees per cubic

    Returns:
        Primitives in command order
    """
    return GeometryBuilder(origin, arc_segment_max_angle).build(commands)
