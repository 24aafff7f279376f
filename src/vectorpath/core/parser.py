"""One-call entry point for the path pipeline.

Runs tokenize, decode and build on a single path-data string and wraps the
result in an Outline together with its paint.
"""

from collections.abc import Mapping

from vectorpath.config import GeometryConfig
from vectorpath.core.builder import GeometryBuilder
from vectorpath.core.decoder import decode
from vectorpath.domain.outline import Outline
from vectorpath.domain.paint import Paint


def parse_path(
    path_data: str,
    styles: Mapping[str, str] | None = None,
    element_id: str | None = None,
    config: GeometryConfig | None = None,
) -> Outline:
    """Parse path data into an Outline.

    Args:
        path_data: Value of a path ``d`` attribute
        styles: Style key/value pairs of the path element
        element_id: ``id`` of the element, for diagnostics
        config: Geometry settings (defaults if None)

    Returns:
        Parsed outline

    Raises:
        DecodeError: If the path data is malformed
        GeometryError: If a drawing command precedes the first move
        StyleError: If a style value cannot be interpreted
    """
    if config is None:
        config = GeometryConfig()

    commands = decode(path_data)
    builder = GeometryBuilder(
        origin=config.origin,
        arc_segment_max_angle=config.arc_segment_max_angle,
    )
    primitives = builder.build(commands)
    paint = Paint.from_styles(styles or {})

    return Outline(
        source=path_data,
        primitives=tuple(primitives),
        commands=commands,
        paint=paint,
        element_id=element_id,
    )
