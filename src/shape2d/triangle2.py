## triangle shape for shape2d
## Copyright (c) 2026 shape2d contributors
## All rights reserved

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""
Triangle2
=========

A triangle is an ordered list of exactly three vertices.  The count is
not enforced at construction, so a triangle can be built up one
vertex at a time with ``setPoint()``; every derived value raises
``DegenerateShapeError`` until all three vertices are present.

The signed area follows the y-up convention of ``Vector2.cross``:
counterclockwise vertex order gives a positive area.

"""

import logging

from shape2d.errors import DegenerateShapeError
from shape2d.geom import SIX_DECIMAL_TOLERANCE, point, points
from shape2d.line2 import Line2, LineSide
from shape2d.vector2 import Vector2, cross3

logger = logging.getLogger(__name__)


class Triangle2:
    """Three-vertex 2D triangle"""

    def __init__(self, pts=()):
        self.points = points(pts)

    def __repr__(self):
        return 'Triangle2({!r})'.format(self.points)

    def setPoints(self, pts):
        self.points = points(pts)
        return self

    def setPoint(self, p, index):
        """set vertex ``index`` (0, 1 or 2) to a copy of ``p``"""
        if index not in (0, 1, 2):
            raise ValueError('index out of range in Triangle2.setPoint(): {}'.format(index))
        while len(self.points) <= index:
            self.points.append(None)
        self.points[index] = point(p)
        return self

    def copy(self, triangle):
        self.points = [None if p is None else p.clone() for p in triangle.points]
        return self

    def clone(self):
        return Triangle2().copy(self)

    def _vertices(self):
        pts = self.points
        if len(pts) != 3 or any(p is None for p in pts):
            raise DegenerateShapeError(
                'triangle needs exactly three vertices, got {!r}'.format(pts))
        return pts

    def getArea(self):
        """signed area; positive when the vertices run counterclockwise"""
        a, b, c = self._vertices()
        return cross3(a, b, c) / 2

    def getCentroid(self):
        a, b, c = self._vertices()
        return Vector2((a.x + b.x + c.x) / 3, (a.y + b.y + c.y) / 3)

    def getEdges(self):
        pts = self._vertices()
        return [Line2(pts[i], pts[(i + 1) % 3]) for i in range(3)]

    def isPointInsideTriangle(self, p, includeEdge=True, tolerance=SIX_DECIMAL_TOLERANCE):
        """
        Half-plane test: ``p`` is inside when it lies on the same side
        of all three directed edges.  A point within ``tolerance`` of an
        edge returns ``includeEdge``.  A point within ``tolerance`` of
        the line through an edge, but not of any edge itself, is
        outside.

        Zero-length edges have no side and are skipped once the edge
        test has run.  Short edges of nonzero length still bound a
        half-plane.  A triangle with no edge of nonzero length contains
        nothing but its own vertex.
        """
        p = point(p)
        edges = self.getEdges()
        if any(edge.isPointOnSegment(p, tolerance) for edge in edges):
            return includeEdge

        lastSide = None
        for edge in edges:
            if edge.length == 0:
                logger.debug('skipping zero-length edge %r', edge)
                continue
            side = edge.getSide(p, tolerance)
            if side is LineSide.On:
                return False
            if lastSide is None:
                lastSide = side
            elif side is not lastSide:
                return False
        return lastSide is not None

    def contains(self, p, tolerance=SIX_DECIMAL_TOLERANCE):
        return self.isPointInsideTriangle(p, True, tolerance)


__all__ = ['Triangle2']
