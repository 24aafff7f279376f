"""Rendering surfaces for vectorpath primitives.

Key classes:
- RenderSurface: Protocol every drawing target implements
- RecordingSurface: Records calls for inspection
- PenSurface: Drives any fontTools pen

Key functions:
- draw_primitives: Replay a primitive sequence onto a surface
"""

from vectorpath.render.surface import (
    PenSurface,
    RecordingSurface,
    RenderSurface,
    draw_primitives,
)

__all__ = [
    "PenSurface",
    "RecordingSurface",
    "RenderSurface",
    "draw_primitives",
]
