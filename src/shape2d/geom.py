## scalar constants and point coercion for shape2d
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

"""constants, scalar helpers and point coercion for **shape2d**

====================
OVERVIEW
====================

The shape2d.geom module holds the handful of numeric conventions that
every shape in the package shares.

constants
=========

``epsilon`` is the general closeness constant, empirically chosen at
5E-6 for double precision work.  ``SIX_DECIMAL_TOLERANCE`` (1E-6) is
the default ``tolerance`` argument of every boundary test
(point-on-edge, side classification, ellipse boundary).  Redefine
these at your peril; prefer passing an explicit ``tolerance``.

points
======

Points are ``shape2d.vector2.Vector2`` instances.  The ``point()``
convenience function will make a fresh ``Vector2`` out of just about
any plausible argument: another vector, an ``(x, y)`` tuple or list,
a mapping with ``x`` and ``y`` keys, or two scalars.  Shapes pass all
caller-supplied points through ``point()``, so a shape never aliases
a vector the caller still holds.

"""

from collections.abc import Mapping

from shape2d.vector2 import Vector2

## constants
epsilon = 0.000005
SIX_DECIMAL_TOLERANCE = 0.000001


## utility function to determine if argument is a "real" python
## number, since booleans are considered ints
def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def close(a, b, tol=epsilon):
    """ are two scalars the same within ``tol``
    """
    return abs(a - b) < tol


def point(x=None, y=None):
    """Point creation from a vector, sequence, mapping or two scalars.
    Always returns a new ``Vector2``.
    """
    if isinstance(x, Vector2):
        return x.clone()
    if isgoodnum(x) and isgoodnum(y):
        return Vector2(x, y)
    if isinstance(x, Mapping) and y is None:
        if isgoodnum(x.get('x')) and isgoodnum(x.get('y')):
            return Vector2(x['x'], x['y'])
    elif isinstance(x, (tuple, list)) and y is None:
        if len(x) >= 2 and isgoodnum(x[0]) and isgoodnum(x[1]):
            return Vector2(x[0], x[1])
    raise ValueError('bad arguments to point(): {}, {}'.format(x, y))


def points(pts):
    """ copy an iterable of point-like values into a list of new vectors"""
    return [point(p) for p in pts]
