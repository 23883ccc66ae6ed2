"""
Geometry exceptions.

- GeometryError: root of the hierarchy, a ``ValueError``
- GeometryArithmeticError: division by zero in vector algebra
- DegenerateShapeError: too few (or coincident) vertices for the request
- InvalidGeometryError: parameters that violate a geometric precondition
"""


class GeometryError(ValueError):
    """Base class for all shape2d errors."""


class GeometryArithmeticError(GeometryError, ZeroDivisionError):
    """Raised when a vector operation would divide by zero."""


class DegenerateShapeError(GeometryError):
    """Raised when a shape has too little structure for the requested value."""


class InvalidGeometryError(GeometryError):
    """Raised when construction parameters describe an impossible figure."""


__all__ = [
    "GeometryError",
    "GeometryArithmeticError",
    "DegenerateShapeError",
    "InvalidGeometryError",
]
