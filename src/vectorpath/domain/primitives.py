"""Backend-agnostic drawing primitives.

The geometry builder turns path-data commands into these values. All
coordinates are absolute; nothing here knows about relative commands,
shorthand curves or arcs.
"""

from dataclasses import dataclass
from typing import Any, ClassVar, Union

from vectorpath.domain.point import Point


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Begin a new subpath at ``point``."""

    name: ClassVar[str] = "move"

    point: Point

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.name, "point": self.point.to_dict()}


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight segment from the current point to ``point``."""

    name: ClassVar[str] = "line"

    point: Point

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.name, "point": self.point.to_dict()}


@dataclass(frozen=True, slots=True)
class CubicBezier:
    """Cubic Bezier segment from the current point.

    Attributes:
        control1: First control point
        control2: Second control point
        end: End point
    """

    name: ClassVar[str] = "cubic"

    control1: Point
    control2: Point
    end: Point

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.name,
            "control1": self.control1.to_dict(),
            "control2": self.control2.to_dict(),
            "end": self.end.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class QuadraticBezier:
    """Quadratic Bezier segment from the current point.

    Attributes:
        control: Control point
        end: End point
    """

    name: ClassVar[str] = "quadratic"

    control: Point
    end: Point

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.name,
            "control": self.control.to_dict(),
            "end": self.end.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class Close:
    """Close the current subpath with a line back to its start."""

    name: ClassVar[str] = "close"

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.name}


GeometricPrimitive = Union[MoveTo, LineTo, CubicBezier, QuadraticBezier, Close]


def primitive_from_dict(data: dict[str, Any]) -> GeometricPrimitive:
    """Deserialize a primitive produced by ``to_dict``.

    Args:
        data: Dictionary with a ``type`` field and the primitive's points

    Returns:
        Primitive instance

    Raises:
        ValueError: If the type field is unknown
    """
    kind = data["type"]

    if kind == MoveTo.name:
        return MoveTo(Point.from_dict(data["point"]))
    elif kind == LineTo.name:
        return LineTo(Point.from_dict(data["point"]))
    elif kind == CubicBezier.name:
        return CubicBezier(
            control1=Point.from_dict(data["control1"]),
            control2=Point.from_dict(data["control2"]),
            end=Point.from_dict(data["end"]),
        )
    elif kind == QuadraticBezier.name:
        return QuadraticBezier(
            control=Point.from_dict(data["control"]),
            end=Point.from_dict(data["end"]),
        )
    elif kind == Close.name:
        return Close()

    raise ValueError(f"Unknown primitive type: {kind!r}")
