"""Unit tests for decoding path data into commands."""

import pytest

from vectorpath.core.decoder import decode, decode_segment
from vectorpath.core.tokenizer import Segment
from vectorpath.domain import (
    ClosePathCommand,
    CubicCurveToCommand,
    EllipticalArcToCommand,
    HorizontalLineToCommand,
    LineToCommand,
    MoveToCommand,
    Point,
    QuadraticCurveToCommand,
    SmoothCubicCurveToCommand,
    SmoothQuadraticCurveToCommand,
    VerticalLineToCommand,
)
from vectorpath.exceptions import DecodeError, PathDataError


class TestDecodeSegment:
    """Tests for decode_segment()."""

    def test_move_to(self):
        """Test a single absolute move."""
        assert decode_segment(Segment("M1,2", 0)) == [MoveToCommand(Point(1, 2))]

    def test_relative_flag_from_case(self):
        """Test lower case letters decode as relative."""
        (command,) = decode_segment(Segment("l3 4", 0))
        assert command == LineToCommand(Point(3, 4), relative=True)

    def test_repeated_groups(self):
        """Test one command per argument group."""
        commands = decode_segment(Segment("L1 2 3 4", 0))
        assert commands == [LineToCommand(Point(1, 2)), LineToCommand(Point(3, 4))]

    def test_move_run_becomes_lines(self):
        """Test extra pairs of a move run decode as line commands."""
        commands = decode_segment(Segment("m1,1 2,2 3,3", 0))
        assert commands == [
            MoveToCommand(Point(1, 1), relative=True),
            LineToCommand(Point(2, 2), relative=True),
            LineToCommand(Point(3, 3), relative=True),
        ]

    def test_horizontal_and_vertical(self):
        """Test single-axis commands."""
        assert decode_segment(Segment("H5 6", 0)) == [
            HorizontalLineToCommand(5),
            HorizontalLineToCommand(6),
        ]
        assert decode_segment(Segment("v-2", 0)) == [VerticalLineToCommand(-2, relative=True)]

    def test_curves(self):
        """Test curve argument shapes."""
        assert decode_segment(Segment("C1,2 3,4 5,6", 0)) == [
            CubicCurveToCommand(Point(1, 2), Point(3, 4), Point(5, 6))
        ]
        assert decode_segment(Segment("S3,4 5,6", 0)) == [
            SmoothCubicCurveToCommand(Point(3, 4), Point(5, 6))
        ]
        assert decode_segment(Segment("Q1,2 3,4", 0)) == [
            QuadraticCurveToCommand(Point(1, 2), Point(3, 4))
        ]
        assert decode_segment(Segment("t3,4", 0)) == [
            SmoothQuadraticCurveToCommand(Point(3, 4), relative=True)
        ]

    def test_arc(self):
        """Test arc parameters and flags."""
        (arc,) = decode_segment(Segment("A25,26 -30 1,0 50,-25", 0))
        assert arc == EllipticalArcToCommand(
            rx=25,
            ry=26,
            rotation=-30,
            large_arc=True,
            sweep=False,
            end=Point(50, -25),
        )

    def test_close(self):
        """Test close path in both cases."""
        assert decode_segment(Segment("Z", 0)) == [ClosePathCommand()]
        assert decode_segment(Segment("z  ", 0)) == [ClosePathCommand(relative=True)]

    def test_number_forms(self):
        """Test signs, decimals and exponents."""
        (command,) = decode_segment(Segment("L-.5,+1e2", 0))
        assert command.end == Point(-0.5, 100.0)

    def test_separators(self):
        """Test commas and any whitespace between fields."""
        (command,) = decode_segment(Segment("L 1 ,\t2\n", 0))
        assert command.end == Point(1, 2)


class TestDecodeErrors:
    """Tests for malformed path data."""

    def test_unknown_letter(self):
        """Test a letter that is not a command."""
        with pytest.raises(DecodeError, match="unknown command letter"):
            decode_segment(Segment("X1,2", 3))

    def test_incomplete_group(self):
        """Test an argument count that does not fit the command."""
        with pytest.raises(DecodeError, match="multiple of 6"):
            decode("M0,0 C1,1 2,2")

    def test_missing_arguments(self):
        """Test a command with no arguments."""
        with pytest.raises(DecodeError, match="missing arguments"):
            decode("M0,0 L")

    def test_close_with_arguments(self):
        """Test numbers after a close."""
        with pytest.raises(DecodeError, match="close path takes no arguments"):
            decode("M0,0 L1,1 Z 5")

    @pytest.mark.parametrize("field", ["1..2", "nan", "inf", "0x10", "1-2"])
    def test_malformed_number(self, field):
        """Test fields that are not decimal numbers."""
        with pytest.raises(DecodeError, match="malformed number"):
            decode_segment(Segment(f"L{field} 0", 0))

    @pytest.mark.parametrize("path_data", ["M0,0 L1e400,0", "M0,0 A5,5 0 0 1 -1e999,0"])
    def test_number_out_of_range(self, path_data):
        """Test literals that overflow to infinity."""
        with pytest.raises(DecodeError, match="number out of range") as exc_info:
            decode(path_data)
        assert exc_info.value.position == 5

    @pytest.mark.parametrize("flag", ["2", "0.0", "-1"])
    def test_bad_arc_flag(self, flag):
        """Test arc flags other than 0 and 1."""
        with pytest.raises(DecodeError, match="arc flag"):
            decode_segment(Segment(f"A10 10 0 {flag} 1 5 5", 0))

    def test_error_carries_segment_and_position(self):
        """Test diagnostic fields of DecodeError."""
        with pytest.raises(DecodeError) as exc_info:
            decode("M0,0 L1,1 Q2,2")

        error = exc_info.value
        assert error.segment == "Q2,2"
        assert error.position == 10
        assert "Q2,2" in str(error)
        assert isinstance(error, PathDataError)


class TestDecode:
    """Tests for decode()."""

    def test_full_path(self):
        """Test decoding a complete path."""
        commands = decode("M0,0 L10,0 l0,10 Z")
        assert commands == (
            MoveToCommand(Point(0, 0)),
            LineToCommand(Point(10, 0)),
            LineToCommand(Point(0, 10), relative=True),
            ClosePathCommand(),
        )

    def test_empty(self):
        """Test decoding empty path data."""
        assert decode("") == ()

    def test_returns_tuple(self):
        """Test that decoded path data is immutable."""
        assert isinstance(decode("M0,0"), tuple)
