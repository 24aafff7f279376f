"""Domain models for vectorpath.

This module contains the value types that flow through the path pipeline.
All models are designed to be:

- Immutable (frozen dataclasses)
- Serializable for inter-process communication (parallel processing)
- Independent of any rendering backend

Key classes:
- Point: A 2D point with vector arithmetic
- CommandKind and the *Command dataclasses: Decoded path-data commands
- MoveTo, LineTo, CubicBezier, QuadraticBezier, Close: Output primitives
- Paint: Fill and stroke settings
- Outline: A fully parsed path
"""

from vectorpath.domain.commands import (
    ClosePathCommand,
    Command,
    CommandKind,
    CubicCurveToCommand,
    EllipticalArcToCommand,
    HorizontalLineToCommand,
    LineToCommand,
    MoveToCommand,
    PathData,
    QuadraticCurveToCommand,
    SmoothCubicCurveToCommand,
    SmoothQuadraticCurveToCommand,
    VerticalLineToCommand,
)
from vectorpath.domain.outline import Outline
from vectorpath.domain.paint import Paint, hex_to_rgb
from vectorpath.domain.point import ORIGIN, Point
from vectorpath.domain.primitives import (
    Close,
    CubicBezier,
    GeometricPrimitive,
    LineTo,
    MoveTo,
    QuadraticBezier,
    primitive_from_dict,
)

__all__: list[str] = [
    # Enums
    "CommandKind",
    # Core types
    "ORIGIN",
    "Point",
    "Paint",
    "Outline",
    "hex_to_rgb",
    # Commands
    "Command",
    "PathData",
    "MoveToCommand",
    "LineToCommand",
    "HorizontalLineToCommand",
    "VerticalLineToCommand",
    "CubicCurveToCommand",
    "SmoothCubicCurveToCommand",
    "QuadraticCurveToCommand",
    "SmoothQuadraticCurveToCommand",
    "EllipticalArcToCommand",
    "ClosePathCommand",
    # Primitives
    "GeometricPrimitive",
    "MoveTo",
    "LineTo",
    "CubicBezier",
    "QuadraticBezier",
    "Close",
    "primitive_from_dict",
]
