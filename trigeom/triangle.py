# trigeom/triangle.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Sequence, Tuple

import numpy as np

from .geom import Point, sub, cross, normalized, centroid
from .predicates import orient2d, signs_agree, cross_area
from .intersect import RayHit, moller_trumbore
from .convert import to_point
from .logging_utils import get_logger
from . import scalar

log = get_logger(__name__)

Sides = Tuple[np.floating, np.floating, np.floating]

_AXES = {"x": 0, "y": 1, "z": 2, "0": 0, "1": 1, "2": 2}


def _axis_name(axis: Any) -> str:
    """'x'/'y'/'z' (будь-який регістр) або 0/1/2 -> ім'я атрибута координати."""
    if isinstance(axis, (int, np.integer)) and not isinstance(axis, bool):
        key = str(int(axis))
    else:
        key = str(axis).lower()
    if key not in _AXES:
        raise ValueError(f"Unknown axis: {axis!r}")
    return "xyz"[_AXES[key]]


@dataclass(frozen=True, order=True)
class Triangle:
    """
    Трикутник з упорядкованими вершинами a, b, c.

    Порядок вершин важливий лише для normal() та знаків у has_point();
    сторони, площа, периметр і кути від нього не залежать.
    Сторона i лежить навпроти вершини i: sides() = (|b-c|, |c-a|, |a-b|).

    Колінеарний (вироджений) трикутник — area() == 0 рівно, без епсилона.
    Для нього angles/heights/inradius/circumradius/normal повертають None.
    """
    a: Point
    b: Point
    c: Point

    def __post_init__(self):
        for name in ("a", "b", "c"):
            value = getattr(self, name)
            if not isinstance(value, Point):
                object.__setattr__(self, name, to_point(value))

    @classmethod
    def from_points(cls, points: Sequence[Any]) -> Triangle:
        pts = list(points)
        if len(pts) != 3:
            raise ValueError(f"Triangle needs exactly 3 points, got {len(pts)}")
        return cls(*pts)

    def vertices(self) -> Tuple[Point, Point, Point]:
        return (self.a, self.b, self.c)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices())

    def to_array(self) -> np.ndarray:
        dt = np.result_type(self.a.dtype, self.b.dtype, self.c.dtype)
        return np.array([list(p) for p in self.vertices()], dtype=dt)

    # ---------- базові метрики ----------
    def sides(self) -> Sides:
        return (
            self.b.distance_to(self.c),
            self.c.distance_to(self.a),
            self.a.distance_to(self.b),
        )

    def perimeter(self) -> np.floating:
        la, lb, lc = self.sides()
        with scalar.quiet():
            return la + lb + lc

    def semiperimeter(self) -> np.floating:
        p = self.perimeter()
        with scalar.quiet():
            return p / scalar.const(2, p)

    def area(self) -> np.floating:
        """
        Формула Герона. Для перевірки є area_cross().
        Від'ємне через округлення підкореневе значення обрізаємо до 0:
        такий трикутник колінеарний, а не NaN.
        """
        s = self.semiperimeter()
        la, lb, lc = self.sides()
        with scalar.quiet():
            r = s * (s - la) * (s - lb) * (s - lc)
        return scalar.sqrt(max(r, scalar.const(0, r)))

    def area_cross(self) -> np.floating:
        """Та сама площа через |(b-a) x (c-a)| / 2."""
        return cross_area(self.a, self.b, self.c)

    def is_collinear(self) -> bool:
        return bool(self.area() == 0)

    def centroid(self) -> Point:
        return centroid(self.vertices())

    def aabb(self) -> Tuple[Point, Point]:
        """Кути AABB (min, max); кожна вісь сортується окремо."""
        xs = sorted((self.a.x, self.b.x, self.c.x))
        ys = sorted((self.a.y, self.b.y, self.c.y))
        zs = sorted((self.a.z, self.b.z, self.c.z))
        return Point(xs[0], ys[0], zs[0]), Point(xs[2], ys[2], zs[2])

    # ---------- метрики, не визначені для виродженого трикутника ----------
    def angles(self) -> Optional[Sides]:
        """
        Кути при вершинах a, b, c (радіани), теорема косинусів.
        Третій кут — pi - alpha - beta, тож сума рівно pi.
        """
        if self.is_collinear():
            log.debug("angles: collinear triangle %s", self)
            return None
        la, lb, lc = self.sides()
        two = scalar.const(2, la)
        with scalar.quiet():
            alpha = scalar.acos((lb**2 + lc**2 - la**2) / (two * lb * lc))
            beta = scalar.acos((la**2 + lc**2 - lb**2) / (two * la * lc))
            gamma = scalar.pi(alpha) - alpha - beta
        return (alpha, beta, gamma)

    def heights(self) -> Optional[Sides]:
        if self.is_collinear():
            log.debug("heights: collinear triangle %s", self)
            return None
        la, lb, lc = self.sides()
        with scalar.quiet():
            double_area = scalar.const(2, la) * self.area()
            return (double_area / la, double_area / lb, double_area / lc)

    def medians(self) -> Sides:
        # формула довжини медіани; визначена і для виродженого трикутника
        la, lb, lc = self.sides()
        two = scalar.const(2, la)
        with scalar.quiet():
            ma = scalar.sqrt(two * lb**2 + two * lc**2 - la**2) / two
            mb = scalar.sqrt(two * lc**2 + two * la**2 - lb**2) / two
            mc = scalar.sqrt(two * la**2 + two * lb**2 - lc**2) / two
        return (ma, mb, mc)

    def circumradius(self) -> Optional[np.floating]:
        if self.is_collinear():
            log.debug("circumradius: collinear triangle %s", self)
            return None
        la, lb, lc = self.sides()
        with scalar.quiet():
            return (la * lb * lc) / (scalar.const(4, la) * self.area())

    def inradius(self) -> Optional[np.floating]:
        if self.is_collinear():
            log.debug("inradius: collinear triangle %s", self)
            return None
        with scalar.quiet():
            return self.area() / self.semiperimeter()

    def normal(self) -> Optional[Point]:
        """Одинична нормаль (b-a) x (c-a); напрям залежить від порядку обходу."""
        if self.is_collinear():
            log.debug("normal: collinear triangle %s", self)
            return None
        return normalized(cross(sub(self.b, self.a), sub(self.c, self.a)))

    # ---------- класифікація (точна рівність) ----------
    def is_equilateral(self) -> bool:
        la, lb, lc = self.sides()
        return bool(la == lb and lb == lc)

    def is_isosceles(self) -> bool:
        la, lb, lc = self.sides()
        return bool(la == lb or lb == lc or lc == la)

    def is_right(self) -> bool:
        angles = self.angles()
        if angles is None:
            return False
        half_pi = scalar.half_pi(angles[0])
        return any(bool(x == half_pi) for x in angles)

    def is_golden(self) -> bool:
        """Золотий (піднесений) трикутник: рівнобедрений, max/min == (1 + sqrt(5)) / 2."""
        if not self.is_isosceles():
            return False
        sides = sorted(self.sides())
        lo, hi = sides[0], sides[2]
        with scalar.quiet():
            return bool(hi / lo == scalar.golden_ratio(lo))

    # ---------- системи координат ----------
    def cartesian_to_barycentric(self, pt: Any) -> Point:
        """
        Барицентричні (u, v, w) точки pt, повернуті як Point(u, v, w).

        Розв'язує систему 2x2 лише по x/y компонентах ребер: для трикутника,
        перпендикулярного площині x/y, знаменник нульовий і результат
        містить inf/nan.
        """
        pt = to_point(pt)
        v0 = sub(self.b, self.a)
        v1 = sub(self.c, self.a)
        v2 = sub(pt, self.a)
        one = scalar.const(1, v0.x)
        with scalar.quiet():
            den = one / (v0.x * v1.y - v1.x * v0.y)
            v = (v2.x * v1.y - v1.x * v2.y) * den
            w = (v0.x * v2.y - v2.x * v0.y) * den
            u = one - v - w
        return Point(u, v, w)

    def barycentric_to_cartesian(self, pt: Any) -> Point:
        """u*a + v*b + w*c; сума ваг 1 — відповідальність викликача."""
        u, v, w = to_point(pt)
        a, b, c = self.a, self.b, self.c
        with scalar.quiet():
            return Point(
                u * a.x + v * b.x + w * c.x,
                u * a.y + v * b.y + w * c.y,
                u * a.z + v * b.z + w * c.z,
            )

    def has_point(self, pt: Any) -> bool:
        """Точка всередині або на межі (тест знаків у проєкції на x/y)."""
        pt = to_point(pt)
        d1 = orient2d(pt, self.a, self.b)
        d2 = orient2d(pt, self.b, self.c)
        d3 = orient2d(pt, self.c, self.a)
        return signs_agree(d1, d2, d3)

    # ---------- промені ----------
    def ray_hit(self, origin: Any, direction: Any) -> Optional[RayHit]:
        if self.is_collinear():
            log.debug("ray_hit: collinear triangle %s", self)
            return None
        return moller_trumbore(self.a, self.b, self.c, to_point(origin), to_point(direction))

    def ray_intersection(self, origin: Any, direction: Any) -> Optional[np.floating]:
        """
        Відстань t від початку променя до перетину (Möller–Trumbore) або None.
        Від'ємне t — перетин позаду початку; знак перевіряє викликач.
        """
        hit = self.ray_hit(origin, direction)
        return None if hit is None else hit.t

    # ---------- сортування вершин ----------
    def is_sorted_by(self, axis: Any) -> bool:
        name = _axis_name(axis)
        pa, pb, pc = (getattr(p, name) for p in self.vertices())
        return bool(pa <= pb and pb <= pc)

    def sorted_by(self, axis: Any) -> Triangle:
        name = _axis_name(axis)
        return Triangle.from_points(sorted(self.vertices(), key=lambda p: getattr(p, name)))
