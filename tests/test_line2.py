import pytest

from shape2d.errors import DegenerateShapeError
from shape2d.geom import close
from shape2d.line2 import Line2, LineSide
from shape2d.vector2 import Vector2


class TestSide:
    def test_left_right(self):
        l = Line2((0, 0), (2, 0))
        assert l.getSide(Vector2(1, 1)) is LineSide.Left
        assert l.getSide(Vector2(1, -1)) is LineSide.Right
        # reversing the segment flips the side
        assert Line2((2, 0), (0, 0)).getSide(Vector2(1, 1)) is LineSide.Right

    def test_on_uses_infinite_line(self):
        l = Line2((0, 0), (2, 0))
        assert l.getSide(Vector2(1, 0)) is LineSide.On
        assert l.getSide(Vector2(5, 1e-7)) is LineSide.On
        assert l.getSide(Vector2(5, 0.01)) is LineSide.Left
        assert l.getSide(Vector2(5, 0.01), tolerance=0.1) is LineSide.On

    def test_zero_length(self):
        l = Line2((1, 1), (1, 1))
        assert l.isDegenerate()
        assert l.getSide(Vector2(1, 1)) is LineSide.On
        with pytest.raises(DegenerateShapeError):
            l.getSide(Vector2(2, 2))


class TestOnSegment:
    def test_inside_extent(self):
        l = Line2((0, 0), (2, 0))
        assert l.isPointOnSegment(Vector2(1, 0))
        assert l.isPointOnSegment(Vector2(0, 0))
        assert l.isPointOnSegment(Vector2(1, 1e-7))
        assert l.isPointOnSegment(Vector2(2 + 1e-7, 0))

    def test_outside_extent(self):
        l = Line2((0, 0), (2, 0))
        assert not l.isPointOnSegment(Vector2(3, 0))
        assert not l.isPointOnSegment(Vector2(-0.1, 0))
        assert not l.isPointOnSegment(Vector2(1, 0.1))
        assert l.isPointOnSegment(Vector2(1, 0.1), tolerance=0.2)

    def test_distances(self):
        l = Line2((0, 0), (4, 0))
        assert close(l.distanceToLine(Vector2(10, 3)), 3)
        assert close(l.distanceToPoint(Vector2(7, 4)), 5)
        assert close(l.distanceToPoint(Vector2(2, -1)), 1)
        assert close(Line2((1, 1), (1, 1)).distanceToPoint(Vector2(4, 5)), 5)


def test_endpoints_are_copied():
    p = Vector2(0, 0)
    l = Line2(p, (1, 1))
    p.set(9, 9)
    assert l.p1 == Vector2(0, 0)
    assert close(l.length, 2 ** 0.5)
