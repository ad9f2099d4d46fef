"""Unit tests for the geometry primitives."""
import math

import numpy as np
import pytest

from navdecomp.core.geometry import (
    as_polygon, edges_match, find_shared_edge, is_convex, point_in_polygon,
    points_equal, polygon_area, polygon_edges, polygon_signed_area, share_edge,
)

SQUARE_CW = [(0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0)]
SQUARE_CCW = list(reversed(SQUARE_CW))
ARROWHEAD = [(0.0, 0.0), (2.0, 1.0), (0.0, 2.0), (1.0, 1.0)]


class TestPointsEqual:

    def test_reflexive(self):
        for p in [(0.0, 0.0), (1e9, -1e9), (0.1 + 0.2, 0.3)]:
            assert points_equal(p, p)

    def test_symmetric(self):
        pairs = [((0.0, 0.0), (5e-7, -5e-7)), ((1.0, 1.0), (1.0, 1.1)), ((3.0, 4.0), (3.0 + 2e-6, 4.0))]
        for a, b in pairs:
            assert points_equal(a, b) == points_equal(b, a)

    def test_within_tolerance(self):
        assert points_equal((1.0, 2.0), (1.0 + 9e-7, 2.0 - 9e-7))
        assert points_equal((0.1 + 0.2, 0.0), (0.3, 0.0))

    def test_outside_tolerance(self):
        assert not points_equal((1.0, 2.0), (1.0 + 2e-6, 2.0))
        assert not points_equal((1.0, 2.0), (1.0, 2.0 - 2e-6))

    def test_custom_tolerance(self):
        assert points_equal((0.0, 0.0), (0.01, 0.01), tol=0.1)
        assert not points_equal((0.0, 0.0), (0.01, 0.01), tol=0.001)


class TestIsConvex:

    def test_square_both_windings(self):
        assert is_convex(SQUARE_CW)
        assert is_convex(SQUARE_CCW)

    def test_triangle(self):
        assert is_convex([(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)])

    def test_arrowhead_is_concave(self):
        assert not is_convex(ARROWHEAD)

    def test_collinear_vertices_are_skipped(self):
        # square with a straight-through vertex on every side
        poly = [(0.0, 0.0), (5.0, 0.0), (10.0, 0.0), (10.0, 5.0), (10.0, 10.0),
                (5.0, 10.0), (0.0, 10.0), (0.0, 5.0)]
        assert is_convex(poly)

    def test_fewer_than_three_points(self):
        assert not is_convex([])
        assert not is_convex([(0.0, 0.0)])
        assert not is_convex([(0.0, 0.0), (1.0, 1.0)])

    def test_regular_hexagon(self):
        hexagon = [(math.cos(k * math.pi / 3), math.sin(k * math.pi / 3)) for k in range(6)]
        assert is_convex(hexagon)


def test_polygon_edges_wrap():
    edges = polygon_edges([(0, 0), (1, 0), (0, 1)])
    assert edges == [((0, 0), (1, 0)), ((1, 0), (0, 1)), ((0, 1), (0, 0))]


def test_edges_match_is_undirected():
    e = ((0.0, 0.0), (1.0, 1.0))
    assert edges_match(e, ((0.0, 0.0), (1.0, 1.0)))
    assert edges_match(e, ((1.0, 1.0), (0.0, 0.0)))
    assert edges_match(e, ((1.0 + 1e-7, 1.0), (0.0, -1e-7)))
    assert not edges_match(e, ((0.0, 0.0), (1.0, 0.0)))


def test_find_shared_edge_uses_first_polygon_direction():
    t1 = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0)]
    t2 = [(0.0, 0.0), (10.0, 10.0), (0.0, 10.0)]
    assert find_shared_edge(t1, t2) == ((10.0, 10.0), (0.0, 0.0))
    assert find_shared_edge(t2, t1) == ((0.0, 0.0), (10.0, 10.0))
    assert share_edge(t1, t2)


def test_vertex_contact_is_not_a_shared_edge():
    t1 = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]
    t2 = [(1.0, 0.0), (2.0, 0.0), (2.0, 1.0)]
    assert find_shared_edge(t1, t2) is None
    assert not share_edge(t1, t2)


def test_signed_area_orientation():
    assert polygon_signed_area(SQUARE_CCW) == pytest.approx(100.0)
    assert polygon_signed_area(SQUARE_CW) == pytest.approx(-100.0)
    assert polygon_area(SQUARE_CW) == pytest.approx(100.0)
    assert polygon_signed_area([(0, 0), (1, 1)]) == 0.0


def test_point_in_polygon():
    assert point_in_polygon(5.0, 5.0, SQUARE_CW)
    assert not point_in_polygon(11.0, 5.0, SQUARE_CW)
    assert not point_in_polygon(-0.5, -0.5, SQUARE_CCW)


class TestAsPolygon:

    def test_accepts_numpy_and_tuples(self):
        arr = np.array([[0, 0], [1, 0], [0, 1]])
        assert as_polygon(arr) == [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]
        assert all(isinstance(c, float) for p in as_polygon(arr) for c in p)

    def test_rejects_non_2d(self):
        with pytest.raises(ValueError):
            as_polygon([(0, 0, 0), (1, 0, 0), (0, 1, 0)])

    def test_rejects_non_finite(self):
        with pytest.raises(ValueError):
            as_polygon([(0, 0), (float('nan'), 0), (0, 1)])
