# trigeom/intersect.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

import numpy as np

from .geom import Point, sub, cross, dot
from .logging_utils import get_logger
from . import scalar

log = get_logger(__name__)


@dataclass(frozen=True)
class RayHit:
    """
    Результат перетину промінь-трикутник.
    t — знакова відстань уздовж напрямку (t < 0: перетин позаду початку променя),
    u, v — барицентричні параметри точки перетину відносно вершин b та c.
    """
    t: np.floating
    u: np.floating
    v: np.floating

    def point(self, origin: Point, direction: Point) -> Point:
        return origin + direction * self.t


def moller_trumbore(a: Point, b: Point, c: Point,
                    origin: Point, direction: Point) -> Optional[RayHit]:
    """
    Перетин променя origin + t*direction з трикутником (a, b, c), алгоритм Möller–Trumbore.
    None, якщо промінь паралельний площині (|det| < tiny(F)) або точка поза трикутником.
    Колінеарність трикутника тут не перевіряється — це робить Triangle.ray_hit.
    """
    e1 = sub(b, a)
    e2 = sub(c, a)
    pvec = cross(direction, e2)
    det = dot(e1, pvec)
    if abs(det) < scalar.tiny(det):
        log.debug("ray parallel to triangle plane (det=%s)", det)
        return None

    zero, one = scalar.const(0, det), scalar.const(1, det)
    with scalar.quiet():
        inv_det = one / det
        tvec = sub(origin, a)
        u = dot(tvec, pvec) * inv_det
        if u < zero or u > one:
            log.debug("ray misses triangle (u=%s)", u)
            return None

        qvec = cross(tvec, e1)
        v = dot(direction, qvec) * inv_det
        if v < zero or u + v > one:
            log.debug("ray misses triangle (u=%s, v=%s)", u, v)
            return None

        t = dot(e2, qvec) * inv_det
    return RayHit(t, u, v)
