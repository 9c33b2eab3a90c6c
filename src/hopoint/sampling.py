## sampling of point-functions into concrete points
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

"""Discretize point-functions into concrete points.

Sampling is where the lazy algebra meets a consumer: a renderer, an
exporter, or a test.  Nothing here is required by the algebra itself.

:class:`Sampler` accumulates points the way a simple point renderer
does: ``sample(pf, n)`` evaluates a curve at ``i/n`` for ``i`` in
``range(n)``, ``sample2(pf, (n0, n1))`` a surface at ``[i/n0, j/n1]``.
Neither includes the far end of the unit interval, which suits closed
curves such as circles.

``polyline`` and ``grid`` include both ends and return ordered points
for line drawing.
"""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

import numpy as np

from hopoint.point import Point, PointFunc
from hopoint.shape import TupleShape

logger = logging.getLogger(__name__)

DEFAULT_SAMPLES = 50
DEFAULT_GRID = (10, 30)


def _check_count(n, name='n'):
    if isinstance(n, bool) or not isinstance(n, int) or n < 1:
        raise ValueError('{} must be an int >= 1, got {!r}'.format(name, n))


def _surface_param(pf: PointFunc, u: float, v: float):
    # pair-shaped surfaces take tuples, array-shaped ones lists
    if isinstance(pf.shape, TupleShape):
        return (u, v)
    return [u, v]


class Sampler:
    """Collects concrete points sampled from point-functions."""

    def __init__(self):
        self.points: List[Point] = []

    def __repr__(self):
        return 'Sampler({} points)'.format(len(self.points))

    def __len__(self):
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def clear(self) -> None:
        self.points = []

    def sample(self, pf: PointFunc, n: int = DEFAULT_SAMPLES) -> 'Sampler':
        """Append ``pf`` evaluated at ``i/n`` for ``i`` in ``range(n)``."""

        _check_count(n)
        for i in range(n):
            self.points.append(pf.call(i / n))
        logger.debug('sampled %d points from %r', n, pf)
        return self

    def sample2(self, pf: PointFunc, n: Sequence[int] = DEFAULT_GRID) -> 'Sampler':
        """Append ``pf`` evaluated over the ``n[0] x n[1]`` grid."""

        n0, n1 = n
        _check_count(n0, 'n[0]')
        _check_count(n1, 'n[1]')
        for i in range(n0):
            for j in range(n1):
                self.points.append(pf.call(_surface_param(pf, i / n0, j / n1)))
        logger.debug('sampled %dx%d grid from %r', n0, n1, pf)
        return self

    def bbox(self) -> List[Point]:
        """Return ``[min, max]`` corners of the sampled points."""

        if not self.points:
            raise ValueError('cannot compute the bounding box of no points')
        a = self.as_array()
        lo = a.min(axis=0)
        hi = a.max(axis=0)
        return [Point(*lo), Point(*hi)]

    def as_array(self) -> np.ndarray:
        """Return the samples as an ``(N, 3)`` float array."""

        return np.array([p.to_list() for p in self.points], dtype=float).reshape(-1, 3)


def polyline(pf: PointFunc, n: int = DEFAULT_SAMPLES, closed: bool = False) -> List[Point]:
    """Return ``n`` segments' worth of ordered points along a curve.

    Open curves are sampled at ``i/n`` for ``i`` in ``range(n + 1)``.
    Closed curves are sampled at ``range(n)`` and the first point is
    repeated at the end.
    """

    _check_count(n)
    if closed:
        pts = [pf.call(i / n) for i in range(n)]
        pts.append(pts[0])
        return pts
    return [pf.call(i / n) for i in range(n + 1)]


def grid(pf: PointFunc, n: Tuple[int, int] = (10, 10)) -> List[List[Point]]:
    """Return rows of points over a surface, both ends included."""

    n0, n1 = n
    _check_count(n0, 'n[0]')
    _check_count(n1, 'n[1]')
    return [[pf.call(_surface_param(pf, i / n0, j / n1)) for j in range(n1 + 1)]
            for i in range(n0 + 1)]


__all__ = [
    'DEFAULT_SAMPLES',
    'DEFAULT_GRID',
    'Sampler',
    'polyline',
    'grid',
]
