# trigeom/scalar.py
"""
Скалярний шар: число F, над яким побудована вся геометрія.

F — будь-який numpy floating скаляр (np.float32, np.float64, ...).
Арифметика numpy-скалярів дає IEEE-поведінку (ділення на 0 -> inf/nan, а не
виняток), тому всі координати приводимо до numpy-типу ще при створенні Point.
"""
from __future__ import annotations
from typing import Any, Optional, Tuple

import numpy as np

DEFAULT_DTYPE = np.float64


def quiet():
    """inf/nan — допустимий результат, а не попередження."""
    return np.errstate(divide="ignore", invalid="ignore", over="ignore")


def coerce(*values: Any, dtype: Optional[Any] = None) -> Tuple[np.floating, ...]:
    """
    Привести значення до спільного F.
    Без `dtype`: numpy floating входи зберігають (промотовану) точність,
    звичайні числа Python стають DEFAULT_DTYPE.
    """
    if dtype is None:
        floats = [v for v in values if isinstance(v, np.floating)]
        dtype = np.result_type(*floats) if floats else DEFAULT_DTYPE
    dt = np.dtype(dtype)
    if dt.kind != "f":
        raise TypeError(f"Expected a floating dtype, got {dt}")
    with quiet():
        return tuple(dt.type(v) for v in values)


def const(n: int, like: np.floating) -> np.floating:
    return type(like)(n)


def sqrt(x: np.floating) -> np.floating:
    with quiet():
        return np.sqrt(x)


def acos(x: np.floating) -> np.floating:
    with quiet():
        return np.arccos(x)


def pi(like: np.floating) -> np.floating:
    return type(like)(np.pi)


def half_pi(like: np.floating) -> np.floating:
    return type(like)(np.pi / 2)


def golden_ratio(like: np.floating) -> np.floating:
    """(1 + sqrt(5)) / 2, обчислене в самому F."""
    one, two, five = const(1, like), const(2, like), const(5, like)
    return (one + sqrt(five)) / two


def tiny(like: np.floating) -> np.floating:
    """Найменше додатне нормалізоване значення типу (поріг виродження)."""
    return np.finfo(type(like)).tiny
