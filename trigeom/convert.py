# trigeom/convert.py
"""
Перетворення між представленнями точок і трикутників.

Замість наслідування — протоколи-можливості: будь-який об'єкт з атрибутами
x, y, z є PointLike, з атрибутами a, b, c — TriangleLike. Вільні функції
to_point / to_triangle приймають будь-яке таке представлення (а також
послідовності та numpy-масиви) і повертають наші значення.
"""
from __future__ import annotations
from typing import TYPE_CHECKING, Any, Optional, Protocol, Union, runtime_checkable

import numpy as np

from .geom import Point

if TYPE_CHECKING:
    from .triangle import Triangle


@runtime_checkable
class PointLike(Protocol):
    x: Any
    y: Any
    z: Any


@runtime_checkable
class TriangleLike(Protocol):
    a: Any
    b: Any
    c: Any


def to_point(obj: Any, dtype: Optional[Any] = None) -> Point:
    if isinstance(obj, Point) and (dtype is None or obj.dtype == np.dtype(dtype)):
        return obj
    if isinstance(obj, PointLike):
        return Point.of(obj.x, obj.y, obj.z, dtype=dtype)
    if isinstance(obj, (str, bytes)):
        raise TypeError(f"Cannot convert {type(obj).__name__} to Point")
    try:
        arr = np.asarray(obj)
    except Exception as e:
        raise TypeError(f"Cannot convert {type(obj).__name__} to Point") from e
    if arr.dtype == object:
        raise TypeError(f"Cannot convert {type(obj).__name__} to Point")
    if arr.shape != (3,):
        raise ValueError(f"Point needs exactly 3 coordinates, got shape {arr.shape}")
    if dtype is None and arr.dtype.kind == "f":
        dtype = arr.dtype
    x, y, z = arr.tolist()
    return Point.of(x, y, z, dtype=dtype)


def to_triangle(obj: Any, dtype: Optional[Any] = None) -> "Triangle":
    from .triangle import Triangle

    if isinstance(obj, Triangle) and dtype is None:
        return obj
    if isinstance(obj, TriangleLike):
        return Triangle(to_point(obj.a, dtype), to_point(obj.b, dtype), to_point(obj.c, dtype))
    if isinstance(obj, np.ndarray):
        if obj.shape != (3, 3):
            raise ValueError(f"Triangle array must have shape (3, 3), got {obj.shape}")
        return Triangle.from_points([to_point(row, dtype) for row in obj])
    try:
        items = list(obj)
    except TypeError as e:
        raise TypeError(f"Cannot convert {type(obj).__name__} to Triangle") from e
    return Triangle.from_points([to_point(p, dtype) for p in items])


def as_array(shape: Union[Point, "Triangle"]) -> np.ndarray:
    """(3,) для точки, (3, 3) для трикутника (рядки — вершини a, b, c)."""
    return shape.to_array()
