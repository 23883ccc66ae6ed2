import math

import pytest

from shape2d.errors import GeometryArithmeticError, GeometryError
from shape2d.geom import close, isgoodnum, point
from shape2d.vector2 import Vector2, cross3


class TestVector2:
    """unit tests for the Vector2 value type"""

    def test_arithmetic(self):
        a = Vector2(5, 0)
        b = Vector2(0, 5)
        assert a.add(b) == Vector2(5, 5)
        assert a.sub(b) == Vector2(5, -5)
        assert a.scale(2) == Vector2(10, 0)
        assert a.divide(2) == Vector2(2.5, 0)
        assert a + b == Vector2(5, 5)
        assert a - b == Vector2(5, -5)
        assert 2 * a == Vector2(10, 0)
        assert -a == Vector2(-5, 0)

    def test_arithmetic_does_not_mutate(self):
        a = Vector2(1, 2)
        a.add(Vector2(3, 4))
        a.scale(10)
        assert a == Vector2(1, 2)

    def test_divide_by_zero(self):
        with pytest.raises(GeometryArithmeticError):
            Vector2(1, 1).divide(0)
        with pytest.raises(ZeroDivisionError):
            Vector2(1, 1) / 0
        with pytest.raises(GeometryError):
            Vector2(1, 1).divide(0.0)

    def test_metrics(self):
        assert close(Vector2(3, 4).length, 5.0)
        assert close(Vector2(0, 1).angle, math.pi / 2)
        assert close(Vector2(-1, 0).angle, math.pi)
        assert close(Vector2(1, 1).distanceTo(Vector2(4, 5)), 5.0)
        assert close(Vector2(1, 2).dot(Vector2(3, 4)), 11)

    def test_cross_sign(self):
        assert Vector2(1, 0).cross(Vector2(0, 1)) == 1
        assert Vector2(0, 1).cross(Vector2(1, 0)) == -1
        assert cross3(Vector2(0, 0), Vector2(1, 0), Vector2(0, 1)) == 1
        assert cross3(Vector2(0, 0), Vector2(0, 1), Vector2(1, 0)) == -1

    def test_set_and_clone(self):
        a = Vector2(1, 2)
        b = a.clone()
        assert a.set(7, 8) is a
        assert a == Vector2(7, 8)
        assert b == Vector2(1, 2)

    def test_rotate(self):
        r = Vector2(1, 0).rotate(math.pi / 2)
        assert r.equals(Vector2(0, 1), 1e-12)

    def test_iter_and_repr(self):
        x, y = Vector2(3, 4)
        assert (x, y) == (3, 4)
        assert repr(Vector2(3, 4)) == 'Vector2(3, 4)'


class TestPoint:
    """unit tests for point coercion"""

    def test_create(self):
        assert point(1, 2) == Vector2(1, 2)
        assert point((1, 2)) == Vector2(1, 2)
        assert point([1.5, -2]) == Vector2(1.5, -2)
        assert point({'x': 3, 'y': 4}) == Vector2(3, 4)

    def test_copies(self):
        v = Vector2(1, 2)
        p = point(v)
        assert p == v
        assert p is not v

    def test_bad_values(self):
        with pytest.raises(ValueError):
            point()
        with pytest.raises(ValueError):
            point(True, 2)
        with pytest.raises(ValueError):
            point((1,))
        with pytest.raises(ValueError):
            point({'x': 1})

    def test_isgoodnum(self):
        assert isgoodnum(1)
        assert isgoodnum(1.5)
        assert not isgoodnum(True)
        assert not isgoodnum('1')
