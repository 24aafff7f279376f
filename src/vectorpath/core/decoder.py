"""Decode tokenizer segments into typed commands.

Each segment is classified by its leading letter, its argument text is
split on commas and whitespace, and the numbers are grouped according to
the command's arity. A run such as ``L 1 2 3 4`` becomes two
LineToCommand values; a MoveTo run turns every pair after the first into
an implicit LineTo.
"""

import logging
import math
import re

from vectorpath.core.tokenizer import Segment, tokenize
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
from vectorpath.domain.point import Point
from vectorpath.exceptions import DecodeError

logger = logging.getLogger(__name__)

_SEPARATOR_RE = re.compile(r"[\s,]+")
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _split_fields(arguments: str) -> list[str]:
    return [field for field in _SEPARATOR_RE.split(arguments) if field]


def _to_float(field: str, segment: Segment) -> float:
    if not _NUMBER_RE.fullmatch(field):
        raise DecodeError(segment.text, segment.position, f"malformed number {field!r}")
    value = float(field)
    if not math.isfinite(value):
        raise DecodeError(segment.text, segment.position, f"number out of range {field!r}")
    return value


def _to_flag(field: str, segment: Segment) -> bool:
    if field == "0":
        return False
    if field == "1":
        return True
    raise DecodeError(segment.text, segment.position, f"arc flag must be 0 or 1, got {field!r}")


def _group(values: list[str], size: int, segment: Segment) -> list[list[str]]:
    if not values:
        raise DecodeError(segment.text, segment.position, "missing arguments")
    if len(values) % size != 0:
        raise DecodeError(
            segment.text,
            segment.position,
            f"expected a multiple of {size} numbers, got {len(values)}",
        )
    return [values[i : i + size] for i in range(0, len(values), size)]


def decode_segment(segment: Segment) -> list[Command]:
    """Decode one segment into commands.

    Args:
        segment: Segment produced by the tokenizer

    Returns:
        One command per argument group, in order

    Raises:
        DecodeError: On an unknown letter, a malformed number or arc flag,
            or an argument count that does not fit the command
    """
    kind = CommandKind.from_letter(segment.letter)
    if kind is None:
        raise DecodeError(
            segment.text, segment.position, f"unknown command letter {segment.letter!r}"
        )

    relative = segment.letter.islower()
    fields = _split_fields(segment.arguments)

    if kind is CommandKind.CLOSE_PATH:
        if fields:
            raise DecodeError(segment.text, segment.position, "close path takes no arguments")
        return [ClosePathCommand(relative=relative)]

    if kind is CommandKind.ELLIPTICAL_ARC_TO:
        commands: list[Command] = []
        for rx, ry, rotation, large_arc, sweep, x, y in _group(fields, kind.group_size, segment):
            commands.append(
                EllipticalArcToCommand(
                    rx=_to_float(rx, segment),
                    ry=_to_float(ry, segment),
                    rotation=_to_float(rotation, segment),
                    large_arc=_to_flag(large_arc, segment),
                    sweep=_to_flag(sweep, segment),
                    end=Point(_to_float(x, segment), _to_float(y, segment)),
                    relative=relative,
                )
            )
        return commands

    groups = [
        [_to_float(field, segment) for field in group]
        for group in _group(fields, kind.group_size, segment)
    ]

    if kind is CommandKind.HORIZONTAL_LINE_TO:
        return [HorizontalLineToCommand(x=x, relative=relative) for (x,) in groups]

    if kind is CommandKind.VERTICAL_LINE_TO:
        return [VerticalLineToCommand(y=y, relative=relative) for (y,) in groups]

    if kind is CommandKind.MOVE_TO:
        first, *rest = groups
        commands = [MoveToCommand(end=Point(*first), relative=relative)]
        commands.extend(LineToCommand(end=Point(*pair), relative=relative) for pair in rest)
        return commands

    if kind is CommandKind.LINE_TO:
        return [LineToCommand(end=Point(x, y), relative=relative) for x, y in groups]

    if kind is CommandKind.CUBIC_CURVE_TO:
        return [
            CubicCurveToCommand(
                control1=Point(x1, y1),
                control2=Point(x2, y2),
                end=Point(x, y),
                relative=relative,
            )
            for x1, y1, x2, y2, x, y in groups
        ]

    if kind is CommandKind.SMOOTH_CUBIC_CURVE_TO:
        return [
            SmoothCubicCurveToCommand(control2=Point(x2, y2), end=Point(x, y), relative=relative)
            for x2, y2, x, y in groups
        ]

    if kind is CommandKind.QUADRATIC_CURVE_TO:
        return [
            QuadraticCurveToCommand(control=Point(x1, y1), end=Point(x, y), relative=relative)
            for x1, y1, x, y in groups
        ]

    return [SmoothQuadraticCurveToCommand(end=Point(x, y), relative=relative) for x, y in groups]


def decode(path_data: str) -> PathData:
    """Decode a whole path-data string.

    Decoding stops at the first bad segment; no partial result is returned.

    Args:
        path_data: Value of a path ``d`` attribute

    Returns:
        Tuple of commands in input order

    Raises:
        DecodeError: If any segment cannot be decoded
    """
    commands: list[Command] = []
    for segment in tokenize(path_data):
        commands.extend(decode_segment(segment))

    logger.debug("Decoded path data: %d commands", len(commands))
    return tuple(commands)
