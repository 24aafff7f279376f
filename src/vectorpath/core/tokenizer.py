"""Split path-data strings into per-command segments.

This stage only finds command boundaries. A segment starts at a letter
and runs up to the next letter or the end of the input; the numbers
inside are left untouched for the decoder.
"""

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Segment:
    """Raw text of one command run.

    Attributes:
        text: Command letter followed by its unparsed argument text
        position: Offset of the command letter in the original string
    """

    text: str
    position: int

    @property
    def letter(self) -> str:
        """The leading command character."""
        return self.text[0]

    @property
    def arguments(self) -> str:
        """Everything after the command letter."""
        return self.text[1:]


def _is_boundary(path_data: str, index: int) -> bool:
    """Check whether the character at ``index`` starts a new segment.

    An ``e``/``E`` between a digit (or decimal point) and a digit or sign is
    an exponent marker, not a command letter.
    """
    char = path_data[index]
    if not (char.isascii() and char.isalpha()):
        return False

    if char in "eE" and 0 < index < len(path_data) - 1:
        before = path_data[index - 1]
        after = path_data[index + 1]
        if (before.isdigit() or before == ".") and (after.isdigit() or after in "+-"):
            return False

    return True


class SegmentSequence:
    """Lazy, restartable view of the segments of a path-data string.

    Each call to ``iter()`` rescans the string from the start, so the same
    sequence can be consumed any number of times.

    Example:
        >>> [s.text for s in SegmentSequence("M0,0 L10,10")]
        ['M0,0 ', 'L10,10']
    """

    def __init__(self, path_data: str) -> None:
        self._path_data = path_data

    def __iter__(self) -> Iterator[Segment]:
        data = self._path_data
        start: int | None = None

        for index in range(len(data)):
            if not _is_boundary(data, index):
                continue
            if start is not None:
                yield Segment(data[start:index], start)
            start = index

        if start is not None:
            yield Segment(data[start:], start)

    def __repr__(self) -> str:
        return f"SegmentSequence({self._path_data!r})"


def tokenize(path_data: str) -> SegmentSequence:
    """Split path data into command segments.

    Characters before the first command letter are skipped. Empty or blank
    input yields no segments.

    Args:
        path_data: Value of a path ``d`` attribute

    Returns:
        Restartable sequence of segments
    """
    return SegmentSequence(path_data)
