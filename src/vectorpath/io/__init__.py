"""Document I/O layer for vectorpath.

This module handles reading SVG files and turning their path elements
into outlines. It is a thin layer: only ``<path>`` elements are read,
and groups, transforms and viewports are ignored.

Key classes:
- SvgReader: Load a document and extract path elements
- PathSource: Raw data string and styles of one path element
- SvgDocument: Lazily parsed outlines that can be drawn to a surface
"""

from vectorpath.io.document import SvgDocument
from vectorpath.io.reader import PathSource, SvgReader, parse_inline_style

__all__ = [
    "PathSource",
    "SvgDocument",
    "SvgReader",
    "parse_inline_style",
]
