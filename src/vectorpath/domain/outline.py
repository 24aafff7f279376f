"""Parsed path representation.

An Outline bundles everything known about one path element once it has
been parsed: the decoded commands, the resulting primitives, and the paint
used to draw them.
"""

from dataclasses import dataclass, field
from typing import Any

from vectorpath.domain.commands import PathData
from vectorpath.domain.paint import Paint
from vectorpath.domain.primitives import (
    GeometricPrimitive,
    MoveTo,
    primitive_from_dict,
)


@dataclass(frozen=True)
class Outline:
    """A parsed path.

    Attributes:
        source: Raw path-data string the outline was parsed from
        primitives: Absolute drawing primitives in command order
        commands: Decoded commands (empty when rebuilt from a dict)
        paint: Fill and stroke settings
        element_id: ``id`` attribute of the source element, if any
    """

    source: str
    primitives: tuple[GeometricPrimitive, ...]
    commands: PathData = field(default=(), repr=False)
    paint: Paint = field(default_factory=Paint)
    element_id: str | None = None

    def is_empty(self) -> bool:
        """Check if the outline draws nothing.

        Returns:
            True if there are no primitives
        """
        return len(self.primitives) == 0

    @property
    def subpath_count(self) -> int:
        """Number of explicit subpaths (MoveTo primitives)."""
        return sum(1 for p in self.primitives if isinstance(p, MoveTo))

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC.

        Commands are not serialized; they can be re-derived from ``source``.

        Returns:
            Dictionary representation of the outline
        """
        return {
            "source": self.source,
            "primitives": [p.to_dict() for p in self.primitives],
            "paint": self.paint.to_dict(),
            "element_id": self.element_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Outline":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of an outline

        Returns:
            Outline instance
        """
        return cls(
            source=data["source"],
            primitives=tuple(primitive_from_dict(p) for p in data["primitives"]),
            paint=Paint.from_dict(data["paint"]),
            element_id=data.get("element_id"),
        )
