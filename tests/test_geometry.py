"""Tests for polar conversion, bearings and annular sector outlines."""
import math

import pytest

from relining import geometry

CENTER = (0.0, 0.0)


# --- angle_to_point ---

@pytest.mark.parametrize("angle,expected", [
    (0.0, (0.0, -100.0)),
    (90.0, (100.0, 0.0)),
    (180.0, (0.0, 100.0)),
    (270.0, (-100.0, 0.0)),
])
def test_angle_to_point_zero_is_up_and_clockwise(angle, expected):
    assert geometry.angle_to_point(100.0, angle, CENTER) == pytest.approx(expected, abs=1e-9)


def test_angle_to_point_offsets_by_center():
    p = geometry.angle_to_point(10.0, 90.0, (50.0, 60.0))
    assert p == pytest.approx((60.0, 60.0))


# --- bearing ---

@pytest.mark.parametrize("angle", [0.0, 30.0, 90.0, 135.0, 200.0, 315.0, 359.0])
def test_bearing_inverts_angle_to_point(angle):
    center = (512.0, 384.0)
    point = geometry.angle_to_point(80.0, angle, center)
    assert geometry.bearing(point, center) == pytest.approx(angle, abs=1e-9)


def test_bearing_straight_up_is_zero_not_360():
    assert geometry.bearing((0.0, -5.0), CENTER) == 0.0


def test_bearing_is_always_in_range():
    for i in range(72):
        theta = math.radians(i * 5)
        b = geometry.bearing((math.cos(theta), math.sin(theta)), CENTER)
        assert 0.0 <= b < 360.0


# --- vector helpers ---

def test_vector_helpers():
    assert geometry.add((1.0, 2.0), (3.0, 4.0)) == (4.0, 6.0)
    assert geometry.sub((1.0, 2.0), (3.0, 4.0)) == (-2.0, -2.0)
    assert geometry.scale((1.0, -2.0), 3.0) == (3.0, -6.0)
    assert geometry.magnitude((3.0, 4.0)) == 5.0
    assert geometry.distance((1.0, 1.0), (4.0, 5.0)) == 5.0


def test_normalize_unit_length_and_zero_passthrough():
    assert geometry.magnitude(geometry.normalize((3.0, 4.0))) == pytest.approx(1.0)
    assert geometry.normalize((0.0, 0.0)) == (0.0, 0.0)


# --- describe_annular_sector ---

class TestDescribeAnnularSector:
    """Test cases for describe_annular_sector outlines."""

    def test_wedge_is_single_closed_outline(self):
        """A partial span yields one closed outline."""
        path = geometry.describe_annular_sector(100.0, 200.0, 0.0, 90.0, CENTER)
        assert not path.full_ring
        assert len(path.outlines) == 1
        outline = path.outlines[0]
        # Outer arc first, starting at the start angle.
        assert outline[0] == pytest.approx((0.0, -200.0), abs=1e-9)
        # Inner arc reversed, ending back at the start angle.
        assert outline[-1] == pytest.approx((0.0, -100.0), abs=1e-9)

    def test_wedge_points_stay_inside_band(self):
        """Every outline point lies between the inner and outer radius."""
        path = geometry.describe_annular_sector(100.0, 200.0, 90.0, 180.0, CENTER)
        for p in path.outlines[0]:
            r = geometry.distance(p, CENTER)
            assert 100.0 - 1e-9 <= r <= 200.0 + 1e-9
            assert 90.0 - 1e-9 <= geometry.bearing(p, CENTER) <= 180.0 + 1e-9

    def test_full_circle_emits_outer_and_inner_loops(self):
        """A full circle yields an outer loop and an inner loop."""
        path = geometry.describe_annular_sector(100.0, 200.0, 0.0, 360.0, CENTER)
        assert path.full_ring
        outer, inner = path.outlines
        assert all(geometry.distance(p, CENTER) == pytest.approx(200.0) for p in outer)
        assert all(geometry.distance(p, CENTER) == pytest.approx(100.0) for p in inner)
        # No duplicated closing point; a zero-length sweep would produce one.
        assert outer[0] != pytest.approx(outer[-1])

    def test_near_full_span_counts_as_ring(self):
        """A span within tolerance of 360 degrees is drawn as a ring."""
        path = geometry.describe_annular_sector(10.0, 20.0, 0.0, 359.95, CENTER)
        assert path.full_ring

    def test_step_count_controls_resolution(self):
        """The step count sets the number of arc points."""
        coarse = geometry.describe_annular_sector(10.0, 20.0, 0.0, 360.0, CENTER, steps=8)
        fine = geometry.describe_annular_sector(10.0, 20.0, 0.0, 360.0, CENTER, steps=64)
        assert len(coarse.outlines[0]) == 8
        assert len(fine.outlines[0]) == 64
