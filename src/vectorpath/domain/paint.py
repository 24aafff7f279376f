"""Paint parameters taken from a path element's style values."""

import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from vectorpath.exceptions import StyleError

_HEX_COLOR_RE = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")
_WIDTH_RE = re.compile(r"[+]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

DEFAULT_STROKE = "black"


@dataclass(frozen=True)
class Paint:
    """Fill and stroke settings for one path.

    Colors are kept as written (``"#ff0000"``, ``"red"``); resolving color
    names is left to the rendering backend.

    Attributes:
        fill: Fill color, or None for no fill
        stroke: Stroke color, or None for no stroke
        stroke_width: Stroke width in user units
    """

    fill: str | None = None
    stroke: str | None = DEFAULT_STROKE
    stroke_width: float = 1.0

    @classmethod
    def from_styles(cls, styles: Mapping[str, str]) -> "Paint":
        """Build paint from style key/value pairs.

        Missing ``fill`` means no fill; missing ``stroke`` means black;
        missing ``stroke-width`` means 1. The value ``none`` disables
        fill or stroke.

        Args:
            styles: Mapping such as ``{"fill": "#fff", "stroke-width": "2"}``

        Returns:
            Paint instance

        Raises:
            StyleError: If stroke-width is not a plain non-negative number
        """
        fill = _color_or_none(styles.get("fill"))
        stroke = _color_or_none(styles.get("stroke", DEFAULT_STROKE))

        width = 1.0
        raw_width = styles.get("stroke-width")
        if raw_width is not None:
            text = raw_width.strip()
            if not _WIDTH_RE.fullmatch(text):
                raise StyleError("stroke-width", raw_width, "expected a non-negative number")
            width = float(text)

        return cls(fill=fill, stroke=stroke, stroke_width=width)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {"fill": self.fill, "stroke": self.stroke, "stroke_width": self.stroke_width}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Paint":
        """Deserialize from dictionary."""
        return cls(
            fill=data["fill"],
            stroke=data["stroke"],
            stroke_width=data["stroke_width"],
        )


def _color_or_none(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    if not value or value == "none":
        return None
    return value


def hex_to_rgb(color: str) -> tuple[int, int, int] | None:
    """Convert a ``#rgb`` or ``#rrggbb`` color to an RGB tuple.

    Args:
        color: Color string

    Returns:
        (red, green, blue) in 0-255, or None if the string is not a hex color
    """
    if not _HEX_COLOR_RE.fullmatch(color):
        return None

    digits = color[1:]
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)

    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))
