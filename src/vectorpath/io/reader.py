"""SVG reader for locating path elements.

This module provides the SvgReader class for loading SVG files and
extracting each ``<path>`` element's data string and style values. It
does not interpret groups, transforms or viewports.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from fontTools.misc import etree

from vectorpath.exceptions import DocumentLoadError


@dataclass(frozen=True)
class PathSource:
    """Raw data of one path element.

    Attributes:
        d: Path-data string (empty if the attribute is missing)
        styles: Style key/value pairs (attributes plus inline ``style``)
        element_id: ``id`` attribute, if present
        index: Position of the element among all path elements
    """

    d: str
    styles: dict[str, str] = field(default_factory=dict)
    element_id: str | None = None
    index: int = 0

    @property
    def label(self) -> str:
        """Human-readable name for logs and error messages."""
        return self.element_id or f"path[{self.index}]"

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for IPC."""
        return {
            "d": self.d,
            "styles": dict(self.styles),
            "element_id": self.element_id,
            "index": self.index,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PathSource":
        """Deserialize from dictionary."""
        return cls(
            d=data["d"],
            styles=dict(data["styles"]),
            element_id=data.get("element_id"),
            index=data.get("index", 0),
        )


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1]


def parse_inline_style(style: str) -> dict[str, str]:
    """Split an inline ``style`` attribute into key/value pairs.

    Args:
        style: Text such as ``"fill: red; stroke-width: 2"``

    Returns:
        Dictionary of declarations; malformed declarations are ignored
    """
    declarations: dict[str, str] = {}
    for declaration in style.split(";"):
        key, sep, value = declaration.partition(":")
        if sep and key.strip():
            declarations[key.strip()] = value.strip()
    return declarations


def element_to_source(element: Any, index: int) -> PathSource:
    """Extract path data and styles from a ``<path>`` element.

    Inline ``style`` declarations take precedence over presentation
    attributes of the same name.

    Args:
        element: ElementTree or lxml element
        index: Position among path elements

    Returns:
        PathSource for the element
    """
    d = ""
    styles: dict[str, str] = {}
    inline = ""

    for name, value in element.attrib.items():
        key = _local_name(name)
        if key == "d":
            d = value
        elif key == "style":
            inline = value
        else:
            styles[key] = value

    styles.update(parse_inline_style(inline))

    return PathSource(d=d, styles=styles, element_id=element.get("id"), index=index)


class SvgReader:
    """Loads SVG files and extracts path elements.

    Example:
        with SvgReader(Path("drawing.svg")) as reader:
            for source in reader.iter_sources():
                print(source.label, source.d)
    """

    def __init__(self, svg_path: Path) -> None:
        """Initialize the reader.

        Args:
            svg_path: Path to the SVG file
        """
        self._svg_path = svg_path
        self._root: Any | None = None

    def load(self) -> None:
        """Load and parse the SVG file.

        Raises:
            FileNotFoundError: If the file does not exist
            DocumentLoadError: If the file is not well-formed XML
        """
        if not self._svg_path.exists():
            raise FileNotFoundError(f"SVG file not found: {self._svg_path}")

        try:
            tree = etree.parse(str(self._svg_path))
        except (etree.ParseError, OSError) as e:
            raise DocumentLoadError(str(self._svg_path), str(e)) from e

        self._root = tree.getroot()

    def _require_root(self) -> Any:
        if self._root is None:
            raise RuntimeError("Document not loaded. Call load() first.")
        return self._root

    @property
    def path_count(self) -> int:
        """Return the number of path elements in the document.

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        return sum(1 for _ in self._iter_path_elements())

    def _iter_path_elements(self) -> Iterator[Any]:
        root = self._require_root()
        for element in root.iter():
            # lxml yields comments and processing instructions with non-str tags
            if isinstance(element.tag, str) and _local_name(element.tag) == "path":
                yield element

    def iter_sources(self) -> Iterator[PathSource]:
        """Iterate over path elements in document order.

        Yields:
            PathSource for each ``<path>`` element

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        for index, element in enumerate(self._iter_path_elements()):
            yield element_to_source(element, index)

    def get_source(self, element_id: str) -> PathSource | None:
        """Get a path element by its ``id``.

        Args:
            element_id: Value of the id attribute

        Returns:
            PathSource, or None if no path has that id

        Raises:
            RuntimeError: If the document has not been loaded yet
        """
        for source in self.iter_sources():
            if source.element_id == element_id:
                return source
        return None

    def close(self) -> None:
        """Drop the parsed document."""
        self._root = None

    def __enter__(self) -> "SvgReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
