## ellipse shape for shape2d
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
Ellipse
=======

An ellipse is a center point, two semi-axis lengths and a rotation.
``rx`` is measured along the ellipse's local x axis, ``ry`` along its
local y axis, and ``rotate`` (radians, counterclockwise) turns the
local axes relative to the global x axis.

Containment is evaluated in the local frame: the query point is
translated by ``-center``, rotated by ``-rotate``, and tested against
the implicit form ``(u/rx)**2 + (v/ry)**2 <= 1``.  An ellipse with a
zero radius collapses to a segment (or a point) and is tested by
distance instead.

"""

import logging
import math
from collections.abc import Mapping

import mpmath as mpm

from shape2d.errors import InvalidGeometryError
from shape2d.geom import SIX_DECIMAL_TOLERANCE, isgoodnum, point
from shape2d.vector2 import Vector2

logger = logging.getLogger(__name__)


def _checkRadius(name, r):
    if not isgoodnum(r) or r < 0:
        raise InvalidGeometryError('bad {} for ellipse: {}'.format(name, r))
    return r


class Ellipse:
    """Center, radii and rotation of a 2D ellipse.  Setters mutate in
    place and return the ellipse, so calls can be chained."""

    @classmethod
    def createByFoci(cls, f1, f2, distanceSum):
        """Build the ellipse whose boundary points have a distance sum of
        ``distanceSum`` to the foci ``f1`` and ``f2``.

        Raises ``InvalidGeometryError`` if ``distanceSum`` is smaller
        than the separation of the foci, since no real ellipse exists.
        """
        f1 = point(f1)
        f2 = point(f2)
        if not isgoodnum(distanceSum) or distanceSum < 0:
            raise InvalidGeometryError(
                'bad focal distance sum for ellipse: {}'.format(distanceSum))
        a = distanceSum / 2
        c = f1.distanceTo(f2) / 2
        if a * a < c * c:
            raise InvalidGeometryError(
                'focal distance sum {} is smaller than focal separation {}'.format(
                    distanceSum, 2 * c))

        ## factored as (a-c)*(a+c) and evaluated at 30 digits; a*a-c*c
        ## cancels badly when the foci sit close to the vertices
        with mpm.workdps(30):
            mpa = mpm.mpf(a)
            mpc = mpm.mpf(c)
            b = float(mpm.sqrt((mpa - mpc) * (mpa + mpc)))

        center = f1.add(f2).divide(2)
        rotate = f2.sub(f1).angle
        return cls(center, a, b, rotate)

    def __init__(self, center=None, rx=0.0, ry=0.0, rotate=0.0):
        self.center = Vector2(0, 0) if center is None else point(center)
        self.rx = _checkRadius('rx', rx)
        self.ry = _checkRadius('ry', ry)
        self.rotate = rotate

    def __repr__(self):
        return 'Ellipse({!r}, {}, {}, {})'.format(self.center, self.rx, self.ry, self.rotate)

    def setCenter(self, center=None, x=None, y=None):
        """Set the center.  ``center`` may be a full point or a mapping
        with only one of ``x``/``y``; omitted axes keep their value."""
        if isinstance(center, Vector2):
            x, y = center.x, center.y
        elif isinstance(center, Mapping):
            x = center.get('x', x)
            y = center.get('y', y)
        elif center is not None:
            p = point(center)
            x, y = p.x, p.y
        cx = self.center.x if x is None else x
        cy = self.center.y if y is None else y
        self.center.set(cx, cy)
        return self

    def setRx(self, rx):
        self.rx = _checkRadius('rx', rx)
        return self

    def setRy(self, ry):
        self.ry = _checkRadius('ry', ry)
        return self

    def setRotate(self, rotate):
        self.rotate = rotate
        return self

    def copy(self, ellipse):
        """copy the state of ``ellipse`` into this one"""
        self.center.set(ellipse.center.x, ellipse.center.y)
        self.rx = ellipse.rx
        self.ry = ellipse.ry
        self.rotate = ellipse.rotate
        return self

    def clone(self):
        return Ellipse(self.center, self.rx, self.ry, self.rotate)

    def getArea(self):
        return math.pi * self.rx * self.ry

    def getFoci(self):
        """Return the two foci, ordered along the major axis.  A circle
        returns its center twice."""
        rx, ry = self.rx, self.ry
        c = math.sqrt(abs(rx * rx - ry * ry))
        if rx >= ry:
            offset = Vector2(c, 0).rotate(self.rotate)
        else:
            offset = Vector2(0, c).rotate(self.rotate)
        return [self.center.sub(offset), self.center.add(offset)]

    def _insideLocal(self, u, v, tolerance):
        rx, ry = self.rx, self.ry
        if rx == 0 or ry == 0:
            logger.debug('testing containment against collapsed %r', self)
            if rx == 0 and ry == 0:
                return math.hypot(u, v) <= tolerance
            if rx == 0:
                return abs(u) <= tolerance and abs(v) <= ry + tolerance
            return abs(v) <= tolerance and abs(u) <= rx + tolerance
        return (u / rx) ** 2 + (v / ry) ** 2 <= 1.0 + tolerance

    def isPointInsideEllipse(self, p, tolerance=SIX_DECIMAL_TOLERANCE):
        """Is ``p`` inside or on the boundary of the (rotated) ellipse?"""
        p = point(p)
        local = p.sub(self.center)
        if self.rotate:
            local = local.rotate(-self.rotate)
        return self._insideLocal(local.x, local.y, tolerance)

    def isPointInsideAxisAligned(self, p, tolerance=SIX_DECIMAL_TOLERANCE):
        """Containment that ignores ``rotate``.  Matches
        ``isPointInsideEllipse()`` only when ``rotate == 0``; kept for
        callers that depend on the unrotated behavior."""
        p = point(p)
        return self._insideLocal(p.x - self.center.x, p.y - self.center.y, tolerance)

    def contains(self, p, tolerance=SIX_DECIMAL_TOLERANCE):
        return self.isPointInsideEllipse(p, tolerance)


__all__ = ['Ellipse']
