"""Unit tests for the document I/O layer.

Tests for SvgReader, PathSource and SvgDocument.
"""

from pathlib import Path

import pytest

from vectorpath.config import GeometryConfig
from vectorpath.domain import Close, LineTo, MoveTo, Point
from vectorpath.exceptions import DecodeError, DocumentLoadError
from vectorpath.io import PathSource, SvgDocument, SvgReader, parse_inline_style
from vectorpath.render import RecordingSurface

SVG = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <!-- comment -->
  <path id="square" d="M0,0 L10,0 L10,10 Z" fill="#ff0000" stroke="blue"/>
  <g>
    <path d="M20,20 l5,5" style="stroke: none; stroke-width: 3" stroke="green"/>
  </g>
  <rect x="0" y="0" width="5" height="5"/>
</svg>
"""


@pytest.fixture
def svg_file(tmp_path: Path) -> Path:
    """Write a small SVG document."""
    path = tmp_path / "drawing.svg"
    path.write_text(SVG, encoding="utf-8")
    return path


class TestParseInlineStyle:
    """Tests for parse_inline_style()."""

    def test_declarations(self):
        """Test splitting declarations."""
        assert parse_inline_style("fill: red; stroke-width:2 ;") == {
            "fill": "red",
            "stroke-width": "2",
        }

    def test_malformed_declarations_ignored(self):
        """Test declarations without a colon or key."""
        assert parse_inline_style("garbage; :x; fill:blue") == {"fill": "blue"}


class TestPathSource:
    """Tests for PathSource."""

    def test_label(self):
        """Test label falls back to the index."""
        assert PathSource(d="", element_id="a").label == "a"
        assert PathSource(d="", index=3).label == "path[3]"

    def test_serialization(self):
        """Test source serialization and deserialization."""
        source = PathSource(d="M0,0", styles={"fill": "red"}, element_id="x", index=2)
        assert PathSource.from_dict(source.to_dict()) == source


class TestSvgReader:
    """Tests for SvgReader class."""

    def test_load_nonexistent_file(self, tmp_path):
        """Test loading a nonexistent file raises FileNotFoundError."""
        reader = SvgReader(tmp_path / "missing.svg")
        with pytest.raises(FileNotFoundError):
            reader.load()

    def test_load_malformed_file(self, tmp_path):
        """Test loading broken XML raises DocumentLoadError."""
        path = tmp_path / "broken.svg"
        path.write_text("<svg><path d='M0,0'></svg", encoding="utf-8")
        with pytest.raises(DocumentLoadError):
            SvgReader(path).load()

    def test_access_before_load(self, svg_file):
        """Test accessing paths before loading raises RuntimeError."""
        reader = SvgReader(svg_file)
        with pytest.raises(RuntimeError, match="Document not loaded"):
            _ = reader.path_count
        with pytest.raises(RuntimeError, match="Document not loaded"):
            list(reader.iter_sources())

    def test_iter_sources(self, svg_file):
        """Test every path element is found in document order."""
        with SvgReader(svg_file) as reader:
            assert reader.path_count == 2
            first, second = reader.iter_sources()

        assert first == PathSource(
            d="M0,0 L10,0 L10,10 Z",
            styles={"id": "square", "fill": "#ff0000", "stroke": "blue"},
            element_id="square",
            index=0,
        )
        assert second.d == "M20,20 l5,5"
        assert second.index == 1
        assert second.element_id is None

    def test_inline_style_wins(self, svg_file):
        """Test inline style overrides presentation attributes."""
        with SvgReader(svg_file) as reader:
            _, second = reader.iter_sources()
        assert second.styles["stroke"] == "none"
        assert second.styles["stroke-width"] == "3"

    def test_get_source(self, svg_file):
        """Test looking up a path by id."""
        with SvgReader(svg_file) as reader:
            assert reader.get_source("square").index == 0
            assert reader.get_source("nope") is None

    def test_close(self, svg_file):
        """Test closing drops the document."""
        reader = SvgReader(svg_file)
        reader.load()
        reader.close()
        with pytest.raises(RuntimeError):
            _ = reader.path_count


class TestSvgDocument:
    """Tests for SvgDocument class."""

    def test_lazy_parse(self, svg_file):
        """Test outlines are parsed on first access."""
        document = SvgDocument.from_file(svg_file)
        assert not document.is_ready
        assert len(document.sources) == 2

        outlines = document.outlines
        assert document.is_ready
        assert outlines[0].element_id == "square"
        assert outlines[1].primitives == (MoveTo(Point(20, 20)), LineTo(Point(25, 25)))

    def test_set_dirty(self, svg_file):
        """Test marking the document dirty forces a re-parse."""
        document = SvgDocument.from_file(svg_file)
        document.parse()
        document.set_dirty()
        assert not document.is_ready
        _ = document.outlines
        assert document.is_ready

    def test_paint(self, svg_file):
        """Test paint values from attributes and inline style."""
        first, second = SvgDocument.from_file(svg_file).outlines
        assert (first.paint.fill, first.paint.stroke) == ("#ff0000", "blue")
        assert second.paint.stroke is None
        assert second.paint.stroke_width == 3.0

    def test_draw(self, svg_file):
        """Test drawing replays primitives then paints each outline."""
        surface = RecordingSurface()
        SvgDocument.from_file(svg_file).draw(surface)

        names = [name for name, _ in surface.calls]
        assert names == [
            "begin_at",
            "line_to",
            "line_to",
            "close",
            "paint",
            "begin_at",
            "line_to",
            "paint",
        ]
        assert surface.calls[4] == ("paint", ("#ff0000", "blue", 1.0))
        assert surface.calls[-1] == ("paint", (None, None, 3.0))

    def test_parse_is_all_or_nothing(self):
        """Test a bad path leaves the document unparsed."""
        document = SvgDocument([PathSource(d="M0,0 L1,1"), PathSource(d="M0,0 C1", index=1)])
        with pytest.raises(DecodeError):
            document.parse()
        assert not document.is_ready

    def test_polylines(self):
        """Test flattening every outline."""
        document = SvgDocument(
            [PathSource(d="M0,0 L10,0 Z")],
            config=GeometryConfig(flatten_tolerance=1.0),
        )
        assert document.polylines() == [[[Point(0, 0), Point(10, 0), Point(0, 0)]]]

    def test_outline_primitives(self):
        """Test a document built from sources directly."""
        document = SvgDocument([PathSource(d="M1,1 h2 Z")])
        assert document.outlines[0].primitives == (
            MoveTo(Point(1, 1)),
            LineTo(Point(3, 1)),
            Close(),
        )
