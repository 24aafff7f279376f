"""Typed path-data commands.

Each command letter of the path mini-language decodes into one of the
frozen dataclasses below. Coordinates are stored exactly as written, so a
relative command still holds offsets; the cursor resolves them later.

- CommandKind: Enum of command families with their letter and argument arity
- MoveToCommand ... ClosePathCommand: One dataclass per command kind
- Command: Union of all command dataclasses
- PathData: Immutable sequence of commands for one path
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from vectorpath.domain.point import Point


class CommandKind(Enum):
    """Command families of the path mini-language.

    Each member carries its absolute (upper case) letter and the number of
    numeric fields consumed per repetition.
    """

    MOVE_TO = ("M", 2)
    LINE_TO = ("L", 2)
    HORIZONTAL_LINE_TO = ("H", 1)
    VERTICAL_LINE_TO = ("V", 1)
    CUBIC_CURVE_TO = ("C", 6)
    SMOOTH_CUBIC_CURVE_TO = ("S", 4)
    QUADRATIC_CURVE_TO = ("Q", 4)
    SMOOTH_QUADRATIC_CURVE_TO = ("T", 2)
    ELLIPTICAL_ARC_TO = ("A", 7)
    CLOSE_PATH = ("Z", 0)

    def __init__(self, letter: str, group_size: int) -> None:
        self.letter = letter
        self.group_size = group_size

    @classmethod
    def from_letter(cls, letter: str) -> "CommandKind | None":
        """Look up a command kind by its letter, ignoring case.

        Args:
            letter: Single command character

        Returns:
            Matching kind, or None for an unknown letter
        """
        return _KINDS_BY_LETTER.get(letter.upper())

    @property
    def is_cubic(self) -> bool:
        """True for C and S."""
        return self in (CommandKind.CUBIC_CURVE_TO, CommandKind.SMOOTH_CUBIC_CURVE_TO)

    @property
    def is_quadratic(self) -> bool:
        """True for Q and T."""
        return self in (
            CommandKind.QUADRATIC_CURVE_TO,
            CommandKind.SMOOTH_QUADRATIC_CURVE_TO,
        )


_KINDS_BY_LETTER: dict[str, CommandKind] = {kind.letter: kind for kind in CommandKind}


class _CommandMixin:
    """Shared helpers for command dataclasses."""

    __slots__ = ()

    kind: ClassVar[CommandKind]
    relative: bool

    @property
    def letter(self) -> str:
        """Command letter as it would appear in path data."""
        return self.kind.letter.lower() if self.relative else self.kind.letter


@dataclass(frozen=True, slots=True)
class MoveToCommand(_CommandMixin):
    """Start a new subpath at ``end``."""

    kind: ClassVar[CommandKind] = CommandKind.MOVE_TO

    end: Point
    relative: bool = False


@dataclass(frozen=True, slots=True)
class LineToCommand(_CommandMixin):
    """Straight line to ``end``."""

    kind: ClassVar[CommandKind] = CommandKind.LINE_TO

    end: Point
    relative: bool = False


@dataclass(frozen=True, slots=True)
class HorizontalLineToCommand(_CommandMixin):
    """Horizontal line; only the x coordinate changes."""

    kind: ClassVar[CommandKind] = CommandKind.HORIZONTAL_LINE_TO

    x: float
    relative: bool = False


@dataclass(frozen=True, slots=True)
class VerticalLineToCommand(_CommandMixin):
    """Vertical line; only the y coordinate changes."""

    kind: ClassVar[CommandKind] = CommandKind.VERTICAL_LINE_TO

    y: float
    relative: bool = False


@dataclass(frozen=True, slots=True)
class CubicCurveToCommand(_CommandMixin):
    """Cubic Bezier with two explicit control points."""

    kind: ClassVar[CommandKind] = CommandKind.CUBIC_CURVE_TO

    control1: Point
    control2: Point
    end: Point
    relative: bool = False


@dataclass(frozen=True, slots=True)
class SmoothCubicCurveToCommand(_CommandMixin):
    """Cubic Bezier whose first control point is implied by reflection."""

    kind: ClassVar[CommandKind] = CommandKind.SMOOTH_CUBIC_CURVE_TO

    control2: Point
    end: Point
    relative: bool = False


@dataclass(frozen=True, slots=True)
class QuadraticCurveToCommand(_CommandMixin):
    """Quadratic Bezier with an explicit control point."""

    kind: ClassVar[CommandKind] = CommandKind.QUADRATIC_CURVE_TO

    control: Point
    end: Point
    relative: bool = False


@dataclass(frozen=True, slots=True)
class SmoothQuadraticCurveToCommand(_CommandMixin):
    """Quadratic Bezier whose control point is implied by reflection."""

    kind: ClassVar[CommandKind] = CommandKind.SMOOTH_QUADRATIC_CURVE_TO

    end: Point
    relative: bool = False


@dataclass(frozen=True, slots=True)
class EllipticalArcToCommand(_CommandMixin):
    """Elliptical arc in endpoint parameterization.

    Attributes:
        rx: X radius as written (sign is ignored when drawing)
        ry: Y radius as written
        rotation: Rotation of the ellipse x axis, in degrees
        large_arc: Pick the arc spanning more than 180 degrees
        sweep: Draw in the positive-angle direction
        end: Arc endpoint
        relative: Whether ``end`` is an offset from the current point
    """

    kind: ClassVar[CommandKind] = CommandKind.ELLIPTICAL_ARC_TO

    rx: float
    ry: float
    rotation: float
    large_arc: bool
    sweep: bool
    end: Point
    relative: bool = False


@dataclass(frozen=True, slots=True)
class ClosePathCommand(_CommandMixin):
    """Close the current subpath."""

    kind: ClassVar[CommandKind] = CommandKind.CLOSE_PATH

    relative: bool = False


Command = Union[
    MoveToCommand,
    LineToCommand,
    HorizontalLineToCommand,
    VerticalLineToCommand,
    CubicCurveToCommand,
    SmoothCubicCurveToCommand,
    QuadraticCurveToCommand,
    SmoothQuadraticCurveToCommand,
    EllipticalArcToCommand,
    ClosePathCommand,
]

PathData = tuple[Command, ...]
