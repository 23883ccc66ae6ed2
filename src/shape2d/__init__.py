# -*- coding: utf-8 -*-
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("shape2d")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"

from shape2d.errors import (
    DegenerateShapeError,
    GeometryArithmeticError,
    GeometryError,
    InvalidGeometryError,
)
from shape2d.geom import SIX_DECIMAL_TOLERANCE, epsilon, point
from shape2d.vector2 import Vector2, cross3
from shape2d.line2 import Line2, LineSide
from shape2d.ellipse import Ellipse
from shape2d.polygon import Polygon
from shape2d.triangle2 import Triangle2
from shape2d.shape import Shape

__all__ = [
    "DegenerateShapeError",
    "Ellipse",
    "GeometryArithmeticError",
    "GeometryError",
    "InvalidGeometryError",
    "Line2",
    "LineSide",
    "Polygon",
    "SIX_DECIMAL_TOLERANCE",
    "Shape",
    "Triangle2",
    "Vector2",
    "cross3",
    "epsilon",
    "point",
]
