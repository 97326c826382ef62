"""Tests for barycentric conversion and point containment"""

import warnings

import hypothesis as hyp
from hypothesis import strategies as st
import numpy as np
import pytest

from trigeom import Point, Triangle, orient2d
from tests.utilities import gen_point


def test_concrete_round_trip():
    tri = Triangle(Point(10.153, 20.21, 0.0), Point(1.21, -2.531, 0.0), Point(-42.332, 0.0, 0.0))
    p = Point(-0.09823, 0.2131, 0.0)
    back = tri.barycentric_to_cartesian(tri.cartesian_to_barycentric(p))
    assert p.distance_to(back) <= 0.0001


def test_vertices_and_centroid_weights():
    tri = Triangle(Point(0, 0, 0), Point(4, 0, 1), Point(0, 4, 2))
    assert tuple(tri.cartesian_to_barycentric(tri.a)) == pytest.approx((1, 0, 0))
    assert tuple(tri.cartesian_to_barycentric(tri.b)) == pytest.approx((0, 1, 0))
    assert tuple(tri.cartesian_to_barycentric(tri.c)) == pytest.approx((0, 0, 1))
    assert tuple(tri.cartesian_to_barycentric(tri.centroid())) == pytest.approx((1 / 3,) * 3)


def test_weights_sum_to_one():
    tri = Triangle(Point(0, 0, 0), Point(4, 0, 1), Point(0, 4, 2))
    u, v, w = tri.cartesian_to_barycentric(Point(7, -3, 0))
    assert u + v + w == pytest.approx(1.0)


def test_unit_weights_give_vertices_exactly():
    tri = Triangle(Point(1.5, -2, 3), Point(4, 0.25, 1), Point(0, 4, -2))
    assert tri.barycentric_to_cartesian(Point(1, 0, 0)) == tri.a
    assert tri.barycentric_to_cartesian((0, 1, 0)) == tri.b
    assert tri.barycentric_to_cartesian([0, 0, 1]) == tri.c


@hyp.given(
    a=gen_point(100), b=gen_point(100), c=gen_point(100),
    u=st.floats(min_value=0, max_value=1), v=st.floats(min_value=0, max_value=1),
)
def test_round_trip_for_points_in_plane(a, b, c, u, v):
    hyp.assume(abs(orient2d(a, b, c)) > 1.0)
    tri = Triangle(a, b, c)
    p = tri.barycentric_to_cartesian(Point(u, v, 1 - u - v))
    back = tri.barycentric_to_cartesian(tri.cartesian_to_barycentric(p))
    assert p.distance_to(back) <= 1e-4


def test_triangle_perpendicular_to_xy_plane_gives_non_finite_weights():
    tri = Triangle(Point(0, 0, 0), Point(1, 0, 0), Point(0, 0, 1))
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        weights = tri.cartesian_to_barycentric(Point(0.2, 0, 0.2))
    assert not np.all(np.isfinite(weights.to_array()))


@pytest.fixture
def xy_triangle():
    return Triangle(Point(0, 0, 0), Point(4, 0, 0), Point(0, 4, 0))


@pytest.mark.parametrize("pt, expected", [
    (Point(1, 1, 0), True),
    (Point(3, 3, 0), False),
    (Point(-1, 1, 0), False),
    (Point(2, 0, 0), True),     # on an edge
    (Point(2, 2, 0), True),     # on the hypotenuse
    (Point(4, 0, 0), True),     # vertex
    (Point(1, 1, 100), True),   # z is ignored
])
def test_has_point(xy_triangle, pt, expected):
    assert xy_triangle.has_point(pt) is expected


@pytest.mark.parametrize("pt", [Point(1, 1, 0), Point(3, 3, 0), Point(2, 0, 0)])
def test_has_point_ignores_winding(xy_triangle, pt):
    a, b, c = xy_triangle.vertices()
    assert Triangle(a, c, b).has_point(pt) == xy_triangle.has_point(pt)


def test_has_point_accepts_tuples(xy_triangle):
    assert xy_triangle.has_point((0.5, 0.5, 0))
