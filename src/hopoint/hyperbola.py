## twisted-circle hyperbola shapes for hopoint
## Copyright (c) 2026 hopoint contributors
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

"""Hyperboloid-like shapes built by twisting circles connected by lines.

A :class:`Hyperbola` has a ``height`` and a ``phase``.  Its geometry is
described in three levels, with no direct coordinate manipulation:

- edges: ``bottom()`` is the unit circle, ``top()`` the unit circle
  raised by ``height`` and rotated by ``phase`` turns
- rings: ``ring(t)`` interpolates linearly from bottom to top, so
  ``ring(0)`` is the bottom edge and ``ring(1)`` the top edge
- surface: ``surface()`` is a function of ``[s, t]`` giving the point
  at ring position ``s`` on ``ring(t)``

A :class:`HyperbolaFunc` holds ``height`` and ``phase`` as functions of
some parameter ``T`` (for instance an index into a grid of shapes and
an animation time).  Its edges and rings are point-functions of
``(T, s)`` and its surface a point-function of ``(T, [s, t])``; each
evaluation calls the HyperbolaFunc at ``T`` to get a concrete Hyperbola
and then evaluates that.
"""

from __future__ import annotations

from dataclasses import dataclass

from hopoint.algebra import line
from hopoint.call import HigherOrder
from hopoint.func import Func
from hopoint.point import PointFunc, circle
from hopoint.shape import ANY, SCALAR, ArrayShape, Shape, pair

SURFACE = ArrayShape(SCALAR, 2)


@dataclass(frozen=True)
class Hyperbola:
    """A concrete hyperbola shape."""

    height: float
    phase: float

    def __post_init__(self):
        object.__setattr__(self, 'height', float(self.height))
        object.__setattr__(self, 'phase', float(self.phase))

    def bottom(self) -> PointFunc:
        return circle()

    def top(self) -> PointFunc:
        phase = self.phase
        return (circle() + [0.0, 0.0, self.height]).map(lambda t: t + phase)

    def ring(self, t: float) -> PointFunc:
        return line(self.bottom(), self.top(), t)

    def surface(self) -> PointFunc:
        """Point-function of ``[s, t]``: ring position ``s`` on ``ring(t)``."""

        return PointFunc.from_callable(lambda p: self.ring(p[1]).call(p[0]), SURFACE)


class HyperbolaFunc(HigherOrder):
    """Hyperbola whose height and phase are functions of a parameter."""

    _fields = ('height', 'phase')
    _concrete = Hyperbola

    def __init__(self, height: Func, phase: Func, shape: Shape = ANY):
        self._init_fields({'height': height, 'phase': phase}, shape)

    def __repr__(self):
        return 'HyperbolaFunc<{}>'.format(self.shape)

    def top(self) -> PointFunc:
        return PointFunc.from_callable(lambda ab: self.call(ab[0]).top().call(ab[1]),
                                       pair(self.shape, SCALAR))

    def bottom(self) -> PointFunc:
        return PointFunc.from_callable(lambda ab: self.call(ab[0]).bottom().call(ab[1]),
                                       pair(self.shape, SCALAR))

    def ring(self, t: float) -> PointFunc:
        return line(self.bottom(), self.top(), t)

    def surface(self) -> PointFunc:
        return PointFunc.from_callable(lambda ap: self.call(ap[0]).surface().call(ap[1]),
                                       pair(self.shape, SURFACE))


__all__ = [
    'Hyperbola',
    'HyperbolaFunc',
]
