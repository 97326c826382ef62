from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

import numpy as np

from . import scalar


@dataclass(frozen=True, order=True, repr=False)
class Point:
    """
    Точка / вектор у 3D над числом F.
    Рівність покоординатна, порядок — лексикографічний (x, потім y, потім z).
    """
    x: np.floating
    y: np.floating
    z: np.floating

    # numpy-скаляри віддають оператори нашим __rmul__ / __radd__
    __array_ufunc__ = None

    def __post_init__(self):
        x, y, z = scalar.coerce(self.x, self.y, self.z)
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)
        object.__setattr__(self, "z", z)

    @classmethod
    def of(cls, x: Any, y: Any, z: Any, dtype: Optional[Any] = None) -> Point:
        """Точка з явною точністю: Point.of(1, 2, 3, dtype=np.float32)."""
        return cls(*scalar.coerce(x, y, z, dtype=dtype))

    @classmethod
    def zero(cls, dtype: Optional[Any] = None) -> Point:
        return cls.of(0, 0, 0, dtype=dtype)

    def __iter__(self) -> Iterator[np.floating]:
        yield self.x; yield self.y; yield self.z

    def __repr__(self) -> str:
        return f"Point({self.x}, {self.y}, {self.z})"

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(type(self.x))

    def to_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=self.dtype)

    # ---------- оператори ----------
    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return add(self, other)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return subtract(self, other)

    def __neg__(self) -> Point:
        with scalar.quiet():
            return Point(-self.x, -self.y, -self.z)

    def __mul__(self, k: Any) -> Point:
        if isinstance(k, Point):
            return NotImplemented
        return scale(self, k)

    __rmul__ = __mul__

    # ---------- векторна алгебра ----------
    def dot(self, other: Point) -> np.floating:
        return dot(self, other)

    def cross(self, other: Point) -> Point:
        return cross(self, other)

    def norm(self) -> np.floating:
        return norm(self)

    def distance_to(self, other: Point) -> np.floating:
        return distance(self, other)

    def normalized(self) -> Point:
        return normalized(self)


def add(a: Point, b: Point) -> Point:
    with scalar.quiet():
        return Point(a.x + b.x, a.y + b.y, a.z + b.z)


def subtract(a: Point, b: Point) -> Point:
    with scalar.quiet():
        return Point(a.x - b.x, a.y - b.y, a.z - b.z)


# коротке ім'я, як у решті модулів
sub = subtract


def scale(a: Point, k: Any) -> Point:
    with scalar.quiet():
        k = type(a.x)(k)
        return Point(a.x*k, a.y*k, a.z*k)


def dot(a: Point, b: Point) -> np.floating:
    with scalar.quiet():
        return a.x*b.x + a.y*b.y + a.z*b.z


def cross(a: Point, b: Point) -> Point:
    with scalar.quiet():
        return Point(a.y*b.z - a.z*b.y,
                     a.z*b.x - a.x*b.z,
                     a.x*b.y - a.y*b.x)


def norm(a: Point) -> np.floating:
    return scalar.sqrt(dot(a, a))


def distance(a: Point, b: Point) -> np.floating:
    return norm(subtract(a, b))


def normalized(a: Point) -> Point:
    """
    Одиничний вектор у напрямку `a`.
    Нульовий вектор лишається нульовим: дільник 0 замінюємо на 1.
    """
    n = norm(a)
    if n == 0:
        n = scalar.const(1, n)
    with scalar.quiet():
        return Point(a.x / n, a.y / n, a.z / n)


def centroid(points: Iterable[Point]) -> Point:
    it = iter(points)
    try:
        first = next(it)
    except StopIteration:
        raise ValueError("empty set") from None
    xs, ys, zs = first.x, first.y, first.z
    n = 1
    with scalar.quiet():
        for p in it:
            xs += p.x; ys += p.y; zs += p.z; n += 1
        k = scalar.const(n, xs)
        return Point(xs / k, ys / k, zs / k)
