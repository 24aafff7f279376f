"""Exception hierarchy for vectorpath."""


class VectorPathError(Exception):
    """Base exception for all vectorpath errors."""

    pass


class PathDataError(VectorPathError):
    """Errors related to path-data text."""

    pass


class LexError(PathDataError):
    """Error splitting path data into command segments.

    The tokenizer only looks for command letters, so it never fails. The
    class exists so callers can catch every path-data stage uniformly.
    """

    def __init__(self, position: int, reason: str) -> None:
        self.position = position
        self.reason = reason
        super().__init__(f"Cannot tokenize path data at offset {position}: {reason}")


class DecodeError(PathDataError):
    """A command segment could not be decoded."""

    def __init__(self, segment: str, position: int, reason: str) -> None:
        self.segment = segment
        self.position = position
        self.reason = reason
        super().__init__(
            f"Invalid path command '{segment.strip()}' at offset {position}: {reason}"
        )


class GeometryError(VectorPathError):
    """Errors in geometric construction."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class StyleError(VectorPathError):
    """A style value could not be turned into paint parameters."""

    def __init__(self, key: str, value: str, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid style '{key}: {value}': {reason}")


class DocumentError(VectorPathError):
    """Errors related to SVG document loading."""

    pass


class DocumentLoadError(DocumentError):
    """Error loading an SVG document."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load document '{path}': {reason}")
