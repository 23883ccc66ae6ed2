"""Structural type shared by every shape2d shape."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from shape2d.geom import SIX_DECIMAL_TOLERANCE


@runtime_checkable
class Shape(Protocol):
    """Anything that can answer "is this point inside, boundary included".

    ``Ellipse``, ``Polygon`` and ``Triangle2`` satisfy this protocol
    without inheriting from it.
    """

    def contains(self, p, tolerance: float = SIX_DECIMAL_TOLERANCE) -> bool:
        ...


__all__ = ['Shape']
