"""Unit tests for arc conversion."""

import math

import pytest

from fontTools.pens.recordingPen import RecordingPen
from fontTools.svgLib.path.arc import EllipticalArc

from vectorpath.core.arc import arc_to_center, arc_to_cubics
from vectorpath.domain import Point
from vectorpath.exceptions import GeometryError


def _cubic_point(p0: Point, c1: Point, c2: Point, p3: Point, t: float) -> Point:
    mt = 1 - t
    return (
        p0 * (mt * mt * mt)
        + c1 * (3 * mt * mt * t)
        + c2 * (3 * mt * t * t)
        + p3 * (t * t * t)
    )


class TestArcToCenter:
    """Tests for endpoint to center conversion."""

    def test_half_circle_center(self):
        """Test center and sweep of a half circle."""
        center, rx, ry, _phi, _theta, delta = arc_to_center(
            Point(0, 0), 10, 10, 0, False, True, Point(20, 0)
        )
        assert center.is_close(Point(10, 0), 1e-9)
        assert (rx, ry) == (10, 10)
        assert delta == pytest.approx(math.pi)

    def test_sweep_direction(self):
        """Test the sweep flag sets the sign of the sweep."""
        *_, positive = arc_to_center(Point(0, 0), 10, 10, 0, False, True, Point(10, 10))
        *_, negative = arc_to_center(Point(0, 0), 10, 10, 0, False, False, Point(10, 10))
        assert positive > 0
        assert negative < 0

    def test_large_arc(self):
        """Test the large-arc flag picks the longer way round."""
        *_, small = arc_to_center(Point(0, 0), 10, 10, 0, False, True, Point(10, 10))
        *_, large = arc_to_center(Point(0, 0), 10, 10, 0, True, True, Point(10, 10))
        assert abs(small) == pytest.approx(math.pi / 2)
        assert abs(large) == pytest.approx(3 * math.pi / 2)

    def test_radius_correction(self):
        """Test radii too small for the chord are scaled up."""
        center, rx, ry, *_ = arc_to_center(Point(0, 0), 1, 1, 0, False, True, Point(20, 0))
        assert rx == pytest.approx(10)
        assert ry == pytest.approx(10)
        assert center.is_close(Point(10, 0), 1e-9)

    def test_negative_radii(self):
        """Test that radius signs are ignored."""
        _, rx, ry, *_ = arc_to_center(Point(0, 0), -10, -10, 0, False, True, Point(20, 0))
        assert (rx, ry) == (10, 10)


class TestArcToCubics:
    """Tests for arc approximation."""

    def test_segment_count(self):
        """Test segments never exceed the maximum angle."""
        assert len(arc_to_cubics(Point(0, 0), 10, 10, 0, False, True, Point(20, 0))) == 2
        assert len(arc_to_cubics(Point(0, 0), 10, 10, 0, False, True, Point(10, 10))) == 1
        assert len(arc_to_cubics(Point(0, 0), 10, 10, 0, True, True, Point(10, 10))) == 3
        assert (
            len(arc_to_cubics(Point(0, 0), 10, 10, 0, False, True, Point(20, 0), 30.0)) == 6
        )

    def test_last_end_is_exact(self):
        """Test the final segment ends exactly on the arc end point."""
        end = Point(13.7, -4.2)
        segments = arc_to_cubics(Point(1, 1), 9, 6, 30, True, False, end)
        assert segments[-1][2] == end

    def test_quarter_circle_handles(self):
        """Test the standard quarter-circle control points."""
        # Quarter circle around (0, 10) from (0, 0) to (10, 10)
        ((c1, c2, p3),) = arc_to_cubics(Point(0, 0), 10, 10, 0, False, True, Point(10, 10))
        k = 4 / 3 * math.tan(math.pi / 8) * 10
        assert c1.is_close(Point(k, 0), 1e-9)
        assert c2.is_close(Point(10, 10 - k), 1e-9)
        assert p3 == Point(10, 10)

    @pytest.mark.parametrize("rotation", [0.0, 30.0, 90.0])
    def test_points_stay_on_ellipse(self, rotation):
        """Test segment midpoints lie close to the true ellipse."""
        start, end = Point(0, 0), Point(20, 0)
        center, rx, ry, phi, *_ = arc_to_center(start, 12, 8, rotation, False, True, end)
        segments = arc_to_cubics(start, 12, 8, rotation, False, True, end)

        cos_phi, sin_phi = math.cos(phi), math.sin(phi)
        p0 = start
        for c1, c2, p3 in segments:
            mid = _cubic_point(p0, c1, c2, p3, 0.5)
            dx, dy = mid.x - center.x, mid.y - center.y
            ex = cos_phi * dx + sin_phi * dy
            ey = -sin_phi * dx + cos_phi * dy
            assert (ex / rx) ** 2 + (ey / ry) ** 2 == pytest.approx(1.0, abs=1e-3)
            p0 = p3

    def test_matches_fonttools_arc(self):
        """Test quarter-turn segments are the ones EllipticalArc draws."""
        pen = RecordingPen()
        EllipticalArc(complex(1, 1), 9, 6, 30, True, False, complex(13.7, -4.2)).draw(pen)
        segments = arc_to_cubics(Point(1, 1), 9, 6, 30, True, False, Point(13.7, -4.2))

        assert len(segments) == len(pen.value)
        for (c1, c2, _), (operator, points) in zip(segments, pen.value):
            assert operator == "curveTo"
            assert c1.is_close(Point(*points[0]), 1e-9)
            assert c2.is_close(Point(*points[1]), 1e-9)

    def test_wide_limit_keeps_quarter_turns(self):
        """Test limits above 90 degrees still give quarter-turn segments."""
        segments = arc_to_cubics(Point(0, 0), 10, 10, 0, False, True, Point(20, 0), 180.0)
        assert len(segments) == 2


class TestNumericRange:
    """Tests for arcs at the edges of floating point."""

    def test_tiny_radius_scaled_up(self):
        """Test a radius too small to square is still corrected."""
        center, rx, ry, *_ = arc_to_center(
            Point(0, 0), 1e-200, 1e-200, 0, False, True, Point(10, 0)
        )
        assert rx == pytest.approx(5)
        assert ry == pytest.approx(5)
        assert center.is_close(Point(5, 0), 1e-6)

        segments = arc_to_cubics(Point(0, 0), 1e-200, 1e-200, 0, False, True, Point(10, 0))
        assert len(segments) == 2
        assert segments[-1][2] == Point(10, 0)

    def test_chord_overflow(self):
        """Test endpoints whose distance overflows."""
        with pytest.raises(GeometryError, match="out of numeric range"):
            arc_to_cubics(Point(1e308, 0), 5, 5, 0, False, True, Point(-1e308, 0))
