"""vectorpath - Decode SVG path data into drawing primitives.

vectorpath turns the compact path mini-language found in an SVG ``d``
attribute into an ordered list of absolute moves, lines, cubic and
quadratic Bezier curves and closes that any rendering backend can replay.
Relative coordinates, shorthand curves and elliptical arcs are resolved
along the way.

Example:
    >>> from vectorpath import parse_path
    >>> outline = parse_path("M0,0 C10,0 10,10 0,10 S-10,20 0,20")
    >>> outline.primitives[2].control1
    Point(x=-10.0, y=10.0)
"""

from vectorpath.core.builder import build_primitives
from vectorpath.core.decoder import decode
from vectorpath.core.parser import parse_path
from vectorpath.core.tokenizer import tokenize

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "build_primitives",
    "decode",
    "parse_path",
    "tokenize",
]
