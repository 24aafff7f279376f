"""Core processing algorithms for vectorpath.

This module contains the path pipeline:

- Tokenizing path data into command segments
- Decoding segments into typed commands
- Tracking the cursor (current point, subpath start, curve reflection)
- Building drawing primitives, including arc conversion
- Measuring primitive sequences (bounds, flattening)
- Parsing whole documents in parallel

Key functions:
- tokenize: Split path data into segments
- decode: Decode path data into commands
- build_primitives: Commands to primitives
- parse_path: Full pipeline for one path
- arc_to_cubics: Elliptical arc to cubic Bezier segments
- primitive_bounds / flatten_primitives: Measurements

Key classes:
- CursorState: Mutable per-path pen state
- GeometryBuilder: Command to primitive conversion
- DocumentProcessor: Parallel document parsing
"""

from vectorpath.core.arc import arc_to_center, arc_to_cubics
from vectorpath.core.builder import GeometryBuilder, build_primitives
from vectorpath.core.cursor import CursorState, CurveKind
from vectorpath.core.decoder import decode, decode_segment
from vectorpath.core.geometry import flatten_primitives, primitive_bounds
from vectorpath.core.parser import parse_path
from vectorpath.core.processor import DocumentProcessor, process_path
from vectorpath.core.tokenizer import Segment, SegmentSequence, tokenize

__all__ = [
    # Cursor
    "CursorState",
    "CurveKind",
    # Builder
    "GeometryBuilder",
    # Processor
    "DocumentProcessor",
    # Tokenizer
    "Segment",
    "SegmentSequence",
    # Functions
    "arc_to_center",
    "arc_to_cubics",
    "build_primitives",
    "decode",
    "decode_segment",
    "flatten_primitives",
    "parse_path",
    "primitive_bounds",
    "process_path",
    "tokenize",
]
