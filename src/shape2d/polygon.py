## polygon shape for shape2d
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
Polygon
=======

A ``Polygon`` is an ordered ring of vertices.  The ring is implicitly
closed: the last vertex connects back to the first, so callers should
not repeat the first vertex at the end.

Vertex order matters for the sign of ``getArea()`` (positive for
counterclockwise rings, y-up) but not for containment.  Polygons with
fewer than three vertices are legal; their predicates simply give
degenerate answers, while ``getCenter()`` and ``getCentroid()`` raise
``DegenerateShapeError`` when there is nothing to average.

"""

import logging

from shape2d.errors import DegenerateShapeError
from shape2d.geom import SIX_DECIMAL_TOLERANCE, epsilon, isgoodnum, point, points
from shape2d.line2 import Line2
from shape2d.vector2 import Vector2

logger = logging.getLogger(__name__)


class Polygon:
    """Implicitly closed ring of vertices"""

    def __init__(self, pts=()):
        self.points = points(pts)

    def __repr__(self):
        return 'Polygon({!r})'.format(self.points)

    def __len__(self):
        return len(self.points)

    def _ring(self):
        """yield each vertex paired with its successor, wrapping the last
        vertex to the first"""
        pts = self.points
        n = len(pts)
        for i in range(n):
            yield pts[i], pts[(i + 1) % n]

    def setPath(self, pts):
        """replace all vertices"""
        self.points = points(pts)
        return self

    def addPoint(self, p):
        """append one vertex, or each vertex of a list/tuple of vertices"""
        if isinstance(p, list) or (isinstance(p, tuple) and (not p or not isgoodnum(p[0]))):
            self.points.extend(points(p))
        else:
            self.points.append(point(p))
        return self

    def copy(self, polygon):
        self.points = points(polygon.points)
        return self

    def clone(self):
        return Polygon(self.points)

    def getEdges(self):
        return [Line2(pi, pj) for pi, pj in self._ring()]

    def getCenter(self):
        """average of all vertices"""
        n = len(self.points)
        if n == 0:
            raise DegenerateShapeError('center of an empty polygon is undefined')
        p = Vector2(0, 0)
        for v in self.points:
            p = p.add(v)
        return p.divide(n)

    def _localRing(self):
        """like _ring(), but as coordinate tuples relative to the first
        vertex, which keeps the shoelace products small for polygons far
        from the origin"""
        if not self.points:
            return
        o = self.points[0]
        for pi, pj in self._ring():
            yield pi.x - o.x, pi.y - o.y, pj.x - o.x, pj.y - o.y

    def _span(self):
        """larger side of the bounding box"""
        xs = [p.x for p in self.points]
        ys = [p.y for p in self.points]
        return max(max(xs) - min(xs), max(ys) - min(ys))

    ## shoelace sum of per-edge signed areas of the triangles formed
    ## with the first vertex
    def getArea(self):
        """signed area, positive for counterclockwise vertex order"""
        area = 0.0
        for xi, yi, xj, yj in self._localRing():
            area += (xi * yj - yi * xj) / 2
        return area

    def isClockwise(self):
        return self.getArea() < 0

    def getCentroid(self):
        """Area-weighted centroid.

        Each edge ``(p_i, p_j)`` forms a triangle with the first vertex
        whose signed area is ``(x_i*y_j - y_i*x_j)/2`` and whose centroid
        is ``(p_i + p_j)/3``, in coordinates relative to that vertex.  The
        area-weighted mean of those centroids is the centroid of the
        polygon.  Both axes get the same weighting.

        The area counts as zero when it is negligible next to the square
        of the polygon's extent, so the test does not depend on scale.
        """
        if not self.points:
            raise DegenerateShapeError('centroid of an empty polygon is undefined')
        totalArea = 0.0
        centroidX = 0.0
        centroidY = 0.0
        for xi, yi, xj, yj in self._localRing():
            area = (xi * yj - yi * xj) / 2
            centroidX += (xi + xj) / 3 * area
            centroidY += (yi + yj) / 3 * area
            totalArea += area

        if abs(totalArea) <= (epsilon * self._span()) ** 2:
            logger.debug('centroid requested for zero-area %r', self)
            raise DegenerateShapeError(
                'centroid of a polygon with zero area is undefined: {!r}'.format(self))
        o = self.points[0]
        return Vector2(o.x + centroidX / totalArea, o.y + centroidY / totalArea)

    def isPointInsidePolygon(self, p, includeEdge=True, tolerance=SIX_DECIMAL_TOLERANCE):
        """
        Even-odd ray casting test.  A ray is cast from ``p`` toward -x
        and every edge that straddles the horizontal line through ``p``
        and crosses it strictly left of ``p`` toggles the result.  A
        point within ``tolerance`` of any edge returns ``includeEdge``
        without further testing.
        """
        p = point(p)
        x, y = p.x, p.y
        inside = False
        for pi, pj in self._ring():
            if Line2(pi, pj).isPointOnSegment(p, tolerance):
                return includeEdge
            xi, yi = pi.x, pi.y
            xj, yj = pj.x, pj.y
            ## straddling guarantees yj != yi
            if (yi > y) != (yj > y) and xi + (y - yi) / (yj - yi) * (xj - xi) < x:
                inside = not inside
        return inside

    def isPointOnEdge(self, p, tolerance=SIX_DECIMAL_TOLERANCE):
        p = point(p)
        return any(e.isPointOnSegment(p, tolerance) for e in self.getEdges())

    def contains(self, p, tolerance=SIX_DECIMAL_TOLERANCE):
        return self.isPointInsidePolygon(p, True, tolerance)


__all__ = ['Polygon']
