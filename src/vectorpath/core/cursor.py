"""Cursor state threaded through primitive construction.

The cursor knows where the pen is, where the current subpath started, and
which control point the previous curve ended with. That last piece is what
shorthand curves (S, T) reflect to find their implied control point.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

from vectorpath.domain.commands import (
    ClosePathCommand,
    Command,
    CommandKind,
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
from vectorpath.exceptions import GeometryError


class CurveKind(Enum):
    """Family of the most recent command, as far as reflection cares."""

    NONE = auto()
    CUBIC = auto()
    QUADRATIC = auto()


@dataclass
class CursorState:
    """Mutable pen state for one path.

    One instance belongs to one path and is only ever touched by the
    builder processing that path.

    Attributes:
        origin: Position before any command has run
        current: Current absolute point
        subpath_start: Where the current subpath began (None before any MoveTo)
        last_curve: Family of the previous command
        last_control: Trailing control point of the previous curve command
    """

    origin: Point = ORIGIN
    current: Point = field(init=False)
    subpath_start: Point | None = field(default=None, init=False)
    last_curve: CurveKind = field(default=CurveKind.NONE, init=False)
    last_control: Point | None = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.current = self.origin

    @property
    def has_current_point(self) -> bool:
        """True once a MoveTo has established a current point."""
        return self.subpath_start is not None

    def _absolute(self, point: Point, relative: bool) -> Point:
        return self.current + point if relative else point

    def resolve(self, command: Command) -> tuple[Point, ...]:
        """Resolve a command's coordinates to absolute points.

        Relative offsets are taken from the current point at the start of
        the command. For horizontal and vertical lines only the varying axis
        changes; the other is kept from the current point.

        Args:
            command: Decoded command

        Returns:
            Control points (if any) followed by the end point. Arcs resolve
            to their end point only; ClosePath resolves to the subpath start.

        Raises:
            GeometryError: If anything but a MoveTo arrives before a
                current point exists
        """
        if not isinstance(command, MoveToCommand) and not self.has_current_point:
            raise GeometryError(
                f"'{command.letter}' command has no current point; path data must start with a move"
            )

        rel = command.relative

        if isinstance(command, (MoveToCommand, LineToCommand, SmoothQuadraticCurveToCommand)):
            return (self._absolute(command.end, rel),)

        elif isinstance(command, HorizontalLineToCommand):
            x = self.current.x + command.x if rel else command.x
            return (Point(x, self.current.y),)

        elif isinstance(command, VerticalLineToCommand):
            y = self.current.y + command.y if rel else command.y
            return (Point(self.current.x, y),)

        elif isinstance(command, CubicCurveToCommand):
            return (
                self._absolute(command.control1, rel),
                self._absolute(command.control2, rel),
                self._absolute(command.end, rel),
            )

        elif isinstance(command, SmoothCubicCurveToCommand):
            return (
                self._absolute(command.control2, rel),
                self._absolute(command.end, rel),
            )

        elif isinstance(command, QuadraticCurveToCommand):
            return (
                self._absolute(command.control, rel),
                self._absolute(command.end, rel),
            )

        elif isinstance(command, EllipticalArcToCommand):
            return (self._absolute(command.end, rel),)

        elif isinstance(command, ClosePathCommand):
            return (self.subpath_start,)

        raise TypeError(f"Unsupported command: {command!r}")

    def reflect(self, kind: CommandKind) -> Point:
        """Implied first control point for a shorthand curve.

        If the previous command belongs to the same curve family as ``kind``,
        its trailing control point is reflected through the current point.
        Otherwise the implied control point is the current point itself.

        Args:
            kind: SMOOTH_CUBIC_CURVE_TO or SMOOTH_QUADRATIC_CURVE_TO

        Returns:
            Absolute control point

        Raises:
            GeometryError: If no current point exists yet
            ValueError: If ``kind`` is not a shorthand curve kind
        """
        if not self.has_current_point:
            raise GeometryError("Cannot reflect a control point before the first move")

        if kind is CommandKind.SMOOTH_CUBIC_CURVE_TO:
            wanted = CurveKind.CUBIC
        elif kind is CommandKind.SMOOTH_QUADRATIC_CURVE_TO:
            wanted = CurveKind.QUADRATIC
        else:
            raise ValueError(f"{kind.name} has no implied control point")

        if self.last_curve is wanted and self.last_control is not None:
            return self.last_control.reflect_through(self.current)
        return self.current

    def advance(
        self,
        command: Command,
        end: Point,
        controls: tuple[Point, ...] = (),
    ) -> None:
        """Move the cursor past a command.

        Args:
            command: The command just processed
            end: Its absolute terminal point
            controls: Its absolute control points; the last one is kept for
                reflection by a following shorthand curve
        """
        if isinstance(command, MoveToCommand):
            self.subpath_start = end

        self.current = end

        kind = command.kind
        if controls and kind.is_cubic:
            self.last_curve = CurveKind.CUBIC
            self.last_control = controls[-1]
        elif controls and kind.is_quadratic:
            self.last_curve = CurveKind.QUADRATIC
            self.last_control = controls[-1]
        else:
            self.last_curve = CurveKind.NONE
            self.last_control = None
