"""Directed 2D line segments with tolerance-aware side and on-segment tests."""

from __future__ import annotations

from enum import Enum

from shape2d.errors import DegenerateShapeError
from shape2d.geom import SIX_DECIMAL_TOLERANCE, point
from shape2d.vector2 import Vector2


class LineSide(Enum):
    """Side of a point relative to a directed line (y-up)."""

    Left = 'left'
    Right = 'right'
    On = 'on'


class Line2:
    """Segment from ``p1`` to ``p2``.  Both endpoints are copied."""

    def __init__(self, p1, p2):
        self.p1 = point(p1)
        self.p2 = point(p2)

    def __repr__(self):
        return 'Line2({!r}, {!r})'.format(self.p1, self.p2)

    @property
    def length(self) -> float:
        return self.p1.distanceTo(self.p2)

    def direction(self) -> Vector2:
        return self.p2.sub(self.p1)

    def isDegenerate(self, tolerance: float = SIX_DECIMAL_TOLERANCE) -> bool:
        """is this segment shorter than ``tolerance``?"""
        return self.length <= tolerance

    def distanceToLine(self, p: Vector2) -> float:
        """perpendicular distance from ``p`` to the infinite line through
        the segment.  For a zero-length segment this is the distance to
        the endpoint."""
        length = self.length
        if length == 0:
            return self.p1.distanceTo(p)
        return abs(self.direction().cross(p.sub(self.p1))) / length

    def distanceToPoint(self, p: Vector2) -> float:
        """distance from ``p`` to the closest point of the segment"""
        d = self.direction()
        lensq = d.dot(d)
        if lensq == 0:
            return self.p1.distanceTo(p)
        u = d.dot(p.sub(self.p1)) / lensq
        if u <= 0.0:
            return self.p1.distanceTo(p)
        if u >= 1.0:
            return self.p2.distanceTo(p)
        return self.distanceToLine(p)

    def getSide(self, p: Vector2, tolerance: float = SIX_DECIMAL_TOLERANCE) -> LineSide:
        """Classify ``p`` as left of, right of, or on the infinite line
        through this segment, looking from ``p1`` toward ``p2``.

        ``On`` is returned when the perpendicular distance is within
        ``tolerance``.  The side of a point relative to a zero-length
        segment is undefined, so that case raises
        ``DegenerateShapeError`` unless the point coincides with the
        segment.
        """
        length = self.length
        if length == 0:
            if self.p1.distanceTo(p) <= tolerance:
                return LineSide.On
            raise DegenerateShapeError(
                'side of {!r} relative to zero-length {!r} is undefined'.format(p, self))
        c = self.direction().cross(p.sub(self.p1))
        if abs(c) / length <= tolerance:
            return LineSide.On
        return LineSide.Left if c > 0 else LineSide.Right

    def isPointOnSegment(self, p: Vector2, tolerance: float = SIX_DECIMAL_TOLERANCE) -> bool:
        """true if ``p`` is within ``tolerance`` of the segment itself, not
        just of its infinite extension"""
        return self.distanceToPoint(p) <= tolerance


__all__ = ['Line2', 'LineSide']
