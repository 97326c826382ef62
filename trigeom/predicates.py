# trigeom/predicates.py
from __future__ import annotations

import numpy as np

from .geom import Point, sub, cross, norm
from . import scalar


def orient2d(p: Point, q: Point, r: Point) -> np.floating:
    """
    Подвоєна орієнтована площа (p, q, r) у проєкції на площину x/y.
    >0 — обхід проти годинникової стрілки, <0 — за, 0 — колінеарні в проєкції.
    Координата z ігнорується.
    """
    with scalar.quiet():
        return (p.x - r.x) * (q.y - r.y) - (q.x - r.x) * (p.y - r.y)


def signs_agree(*values: np.floating) -> bool:
    """False, лише якщо є і строго додатні, і строго від'ємні значення (нулі не заважають)."""
    has_neg = any(v < 0 for v in values)
    has_pos = any(v > 0 for v in values)
    return not (has_neg and has_pos)


def cross_area(a: Point, b: Point, c: Point) -> np.floating:
    """Площа трикутника як половина модуля векторного добутку ребер."""
    n = cross(sub(b, a), sub(c, a))
    with scalar.quiet():
        return norm(n) / scalar.const(2, n.x)
