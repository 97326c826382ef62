"""Utilities for tests"""

from hypothesis import strategies as st
from hypothesis.strategies import SearchStrategy

from trigeom import Point, Triangle


def gen_coordinate(bound: float = 1e3) -> SearchStrategy[float]:
    return st.floats(min_value=-bound, max_value=bound, allow_nan=False, allow_infinity=False)


def gen_point(bound: float = 1e3) -> SearchStrategy[Point]:
    return st.builds(Point, gen_coordinate(bound), gen_coordinate(bound), gen_coordinate(bound))


def gen_triangle(bound: float = 1e3) -> SearchStrategy[Triangle]:
    return st.builds(Triangle, gen_point(bound), gen_point(bound), gen_point(bound))


def well_shaped(tri: Triangle, min_ratio: float = 1e-3) -> bool:
    """Area large relative to the squared perimeter, so Heron and acos stay well-conditioned."""
    p = tri.perimeter()
    return bool(p > 1e-3 and tri.area_cross() > min_ratio * p * p)


def permutations_of(tri: Triangle) -> list[Triangle]:
    a, b, c = tri.vertices()
    return [
        Triangle(a, b, c), Triangle(b, c, a), Triangle(c, a, b),
        Triangle(a, c, b), Triangle(c, b, a), Triangle(b, a, c),
    ]
