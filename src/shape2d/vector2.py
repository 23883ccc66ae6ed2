"""Two dimensional point/vector value type."""

from __future__ import annotations

import math
from typing import Iterator

from shape2d.errors import GeometryArithmeticError


class Vector2:
    """A 2D vector with component-wise arithmetic.

    Arithmetic methods return new vectors.  ``set()`` is the only
    method that mutates the instance.  The cross product follows the
    right-handed, y-up convention: ``a.cross(b) > 0`` when ``b`` lies
    counterclockwise of ``a``.
    """

    __slots__ = ('x', 'y')

    def __init__(self, x: float = 0.0, y: float = 0.0):
        self.x = x
        self.y = y

    def __repr__(self) -> str:
        return 'Vector2({}, {})'.format(self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    __hash__ = None  # mutable via set()

    def __add__(self, other: Vector2) -> Vector2:
        return self.add(other)

    def __sub__(self, other: Vector2) -> Vector2:
        return self.sub(other)

    def __mul__(self, s: float) -> Vector2:
        return self.scale(s)

    __rmul__ = __mul__

    def __truediv__(self, s: float) -> Vector2:
        return self.divide(s)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def set(self, x: float, y: float) -> Vector2:
        self.x = x
        self.y = y
        return self

    def clone(self) -> Vector2:
        return Vector2(self.x, self.y)

    def add(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def sub(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def scale(self, s: float) -> Vector2:
        return Vector2(self.x * s, self.y * s)

    def divide(self, s: float) -> Vector2:
        """Divide both components by ``s``; a zero divisor raises
        ``GeometryArithmeticError`` instead of producing inf/nan."""
        if s == 0:
            raise GeometryArithmeticError('division of {!r} by zero'.format(self))
        return Vector2(self.x / s, self.y / s)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        """z component of the 3D cross product of ``self`` and ``other``"""
        return self.x * other.y - self.y * other.x

    @property
    def length(self) -> float:
        return math.hypot(self.x, self.y)

    @property
    def angle(self) -> float:
        """direction in radians, measured counterclockwise from +x"""
        return math.atan2(self.y, self.x)

    def distanceTo(self, other: Vector2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def equals(self, other: Vector2, tolerance: float = 0.0) -> bool:
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) <= tolerance

    def rotate(self, angle: float) -> Vector2:
        """return this vector rotated counterclockwise by ``angle`` radians
        about the origin"""
        c = math.cos(angle)
        s = math.sin(angle)
        return Vector2(c * self.x - s * self.y, s * self.x + c * self.y)


def cross3(a: Vector2, b: Vector2, c: Vector2) -> float:
    """cross product of ``b - a`` and ``c - a``; twice the signed area of
    the triangle ``a, b, c``"""
    return (b.x - a.x) * (c.y - a.y) - (b.y - a.y) * (c.x - a.x)


__all__ = ['Vector2', 'cross3']
