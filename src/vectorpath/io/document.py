"""Whole-document parsing and drawing.

SvgDocument ties the reader, the path pipeline and a rendering surface
together. Paths are parsed on first use and cached until the document is
marked dirty.
"""

import logging
from pathlib import Path

from vectorpath.config import GeometryConfig
from vectorpath.core.geometry import flatten_primitives
from vectorpath.core.parser import parse_path
from vectorpath.domain.outline import Outline
from vectorpath.domain.point import Point
from vectorpath.io.reader import PathSource, SvgReader
from vectorpath.render.surface import RenderSurface, draw_primitives

logger = logging.getLogger(__name__)


class SvgDocument:
    """Parsed view of the path elements of one SVG document.

    Example:
        document = SvgDocument.from_file(Path("drawing.svg"))
        document.draw(surface)
    """

    def __init__(
        self,
        sources: list[PathSource],
        config: GeometryConfig | None = None,
    ) -> None:
        """Initialize the document.

        Args:
            sources: Path elements in document order
            config: Geometry settings (defaults if None)
        """
        self._sources = sources
        self._config = config or GeometryConfig()
        self._outlines: list[Outline] = []
        self._ready = False

    @classmethod
    def from_file(cls, svg_path: Path, config: GeometryConfig | None = None) -> "SvgDocument":
        """Load the path elements of an SVG file.

        Args:
            svg_path: Path to the SVG file
            config: Geometry settings (defaults if None)

        Returns:
            Unparsed document

        Raises:
            FileNotFoundError: If the file does not exist
            DocumentLoadError: If the file is not well-formed XML
        """
        with SvgReader(svg_path) as reader:
            sources = list(reader.iter_sources())

        logger.debug("Loaded %s: %d path elements", svg_path, len(sources))
        return cls(sources, config=config)

    @property
    def sources(self) -> list[PathSource]:
        """Raw path elements in document order."""
        return list(self._sources)

    @property
    def is_ready(self) -> bool:
        """True when outlines are parsed and up to date."""
        return self._ready

    @property
    def outlines(self) -> list[Outline]:
        """Parsed outlines, parsing first if needed."""
        if not self._ready:
            self.parse()
        return list(self._outlines)

    def set_dirty(self) -> None:
        """Force the next access to parse again."""
        self._ready = False

    def parse(self) -> None:
        """Parse every path element.

        Raises:
            DecodeError: If any path data is malformed; no outlines are kept
            GeometryError: If a path draws before its first move
            StyleError: If a style value cannot be interpreted
        """
        outlines = [
            parse_path(
                source.d,
                styles=source.styles,
                element_id=source.element_id,
                config=self._config,
            )
            for source in self._sources
        ]
        self._outlines = outlines
        self._ready = True

        logger.debug("Parsed %d outlines", len(outlines))

    def draw(self, surface: RenderSurface) -> None:
        """Draw every outline onto a surface.

        Each outline's primitives are replayed, followed by one ``paint``
        call with that outline's fill, stroke and stroke width.

        Args:
            surface: Drawing target
        """
        for outline in self.outlines:
            draw_primitives(outline.primitives, surface)
            paint = outline.paint
            surface.paint(paint.fill, paint.stroke, paint.stroke_width)

    def polylines(self) -> list[list[list[Point]]]:
        """Flatten every outline with the configured tolerance.

        Returns:
            One list of polylines per outline, in document order
        """
        tolerance = self._config.flatten_tolerance
        return [flatten_primitives(outline.primitives, tolerance) for outline in self.outlines]
