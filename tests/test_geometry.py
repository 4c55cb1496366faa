"""Tests for the geometric primitives."""

import math

import pytest

from inkerase.geometry.primitives import (
    capsule_boundary_segments, classify, closest_point_on_segment,
    distance, inside_box, inside_circle, line_segment_intersection,
)
from inkerase.models import LocationIndex, Point


def P(x, y):
    return Point(x=x, y=y)


class TestDistance:
    """Tests for distance and circle containment."""

    def test_distance(self):
        """Test Euclidean distance on a 3-4-5 triangle."""
        assert distance(P(0, 0), P(3, 4)) == 5.0

    def test_inside_circle_strict(self):
        """Test that a point on the circle counts as outside."""
        assert inside_circle(P(9.99, 0), P(0, 0), 10)
        assert not inside_circle(P(10, 0), P(0, 0), 10)
        assert not inside_circle(P(0, 11), P(0, 0), 10)


class TestInsideBox:
    """Tests for box containment."""

    def test_point_inside_box(self):
        """Test a point well inside the box."""
        assert inside_box(P(1, 1), P(-5, 0), P(5, 0), 5)

    def test_side_boundary_is_outside(self):
        """Test that the long sides of the box are outside."""
        assert not inside_box(P(1, 5), P(-5, 0), P(5, 0), 5)
        assert not inside_box(P(1, -5), P(-5, 0), P(5, 0), 5)

    def test_end_boundary_is_outside(self):
        """Test that points level with the segment ends are outside."""
        assert not inside_box(P(-5, 0), P(-5, 0), P(5, 0), 5)
        assert not inside_box(P(5, 1), P(-5, 0), P(5, 0), 5)
        assert not inside_box(P(6, 0), P(-5, 0), P(5, 0), 5)

    def test_zero_length_segment_has_empty_box(self):
        """Test that a degenerate segment contains nothing."""
        assert not inside_box(P(0, 0), P(0, 0), P(0, 0), 5)


class TestClassify:
    """Tests for capsule location indices."""

    def test_start_circle_only(self):
        """Test a point at the start of the capsule."""
        location = classify(P(0, 0), P(0, 0), P(10, 0), 2)
        assert location == LocationIndex(in_start_circle=True)
        assert location.inside

    def test_box_only(self):
        """Test a point in the middle of the capsule."""
        location = classify(P(5, 1), P(0, 0), P(10, 0), 2)
        assert location == LocationIndex(in_box=True)

    def test_all_flags(self):
        """Test a short capsule where circles and box overlap."""
        location = classify(P(1, 0), P(0, 0), P(2, 0), 5)
        assert location == LocationIndex(in_start_circle=True, in_end_circle=True, in_box=True)

    def test_outside(self):
        """Test a point outside every part of the capsule."""
        location = classify(P(5, 3), P(0, 0), P(10, 0), 2)
        assert location == LocationIndex()
        assert not location.inside


class TestClosestPoint:
    """Tests for closest point on a segment."""

    def test_projection_inside_segment(self):
        assert closest_point_on_segment(P(0, 0), P(10, 0), P(5, 5)) == P(5, 0)

    def test_clamped_to_endpoints(self):
        """Test that projections beyond the ends clamp to the endpoints."""
        assert closest_point_on_segment(P(0, 0), P(10, 0), P(-3, 2)) == P(0, 0)
        assert closest_point_on_segment(P(0, 0), P(10, 0), P(15, 1)) == P(10, 0)

    def test_degenerate_segment(self):
        """Test that a zero-length segment collapses to its start."""
        assert closest_point_on_segment(P(2, 2), P(2, 2), P(7, 7)) == P(2, 2)


class TestLineSegmentIntersection:
    """Tests for segment-segment intersection."""

    def test_crossing_segments(self):
        result = line_segment_intersection(P(0, 0), P(10, 10), P(0, 10), P(10, 0))
        assert result.x == pytest.approx(5)
        assert result.y == pytest.approx(5)

    def test_parallel_segments(self):
        """Test that parallel segments never intersect."""
        assert line_segment_intersection(P(0, 0), P(10, 0), P(0, 1), P(10, 1)) is None

    def test_intersection_beyond_segment(self):
        """Test that crossing lines with disjoint segments give None."""
        assert line_segment_intersection(P(0, 0), P(1, 1), P(0, 10), P(10, 0)) is None


class TestCapsuleBoundary:
    """Tests for the capsule box corners."""

    def test_horizontal_capsule(self):
        b0, b1, b2, b3 = capsule_boundary_segments(P(0, 0), P(10, 0), 2)
        assert (b0.x, b0.y) == (0, 2)
        assert (b1.x, b1.y) == (0, -2)
        assert (b2.x, b2.y) == (10, -2)
        assert (b3.x, b3.y) == (10, 2)

    def test_side_width(self):
        """Test that opposite corners are 2r apart."""
        b0, b1, b2, b3 = capsule_boundary_segments(P(0, 0), P(3, 4), 1.5)
        assert distance(b0, b1) == pytest.approx(3.0)
        assert distance(b2, b3) == pytest.approx(3.0)
        assert math.isclose(distance(b0, b3), 5.0)
