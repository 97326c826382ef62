"""
trigeom — примітиви обчислювальної геометрії для 3D точок і трикутників.
Узагальнено над числом F (np.float32 / np.float64): векторна алгебра,
метрики трикутника, барицентричні координати, класифікація, Möller–Trumbore.
"""
import logging as _logging

__version__ = "0.1.0"

from trigeom.geom import (
    Point, add, subtract, scale, dot, cross, norm, distance, normalized, centroid,
)
from trigeom.predicates import orient2d, cross_area
from trigeom.intersect import RayHit, moller_trumbore
from trigeom.triangle import Triangle
from trigeom.convert import PointLike, TriangleLike, to_point, to_triangle, as_array
from trigeom.logging_utils import configure_logging, get_logger

_logging.getLogger(__name__).addHandler(_logging.NullHandler())

__all__ = [
    "Point", "add", "subtract", "scale", "dot", "cross", "norm", "distance",
    "normalized", "centroid",
    "orient2d", "cross_area",
    "RayHit", "moller_trumbore",
    "Triangle",
    "PointLike", "TriangleLike", "to_point", "to_triangle", "as_array",
    "configure_logging", "get_logger",
    "__version__",
]
