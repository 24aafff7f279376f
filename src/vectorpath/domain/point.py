"""Two-dimensional point type shared by commands, cursor and primitives."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """An immutable point (or vector) in user space.

    Supports the small amount of vector arithmetic the path builder needs:
    addition, subtraction and scaling by a number.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)

    __rmul__ = __mul__

    def reflect_through(self, center: "Point") -> "Point":
        """Reflect this point through ``center``.

        Args:
            center: Point of symmetry

        Returns:
            The point ``2 * center - self``
        """
        return Point(2 * center.x - self.x, 2 * center.y - self.y)

    def is_close(self, other: "Point", tolerance: float = 1e-9) -> bool:
        """Check whether two points coincide within ``tolerance`` on each axis."""
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) <= tolerance

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


ORIGIN = Point(0.0, 0.0)
