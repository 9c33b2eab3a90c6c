## function algebra primitives for hopoint
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

"""Primitive scalar functions and generic combinators.

constants
=========

``TAU`` is a full turn in radians.  ``epsilon`` is the tolerance used
when comparing sampled values; redefine it at your peril.

primitives
==========

``id``, ``k``, ``zero`` and ``one`` are polymorphic: their parameter
shape is ``ANY`` unless one is given, and they adopt the shape of
whatever they are combined with.  ``step``, ``floor``, ``zip`` and
``half_circle`` take a scalar parameter.

interpolation
=============

``line(a, b, t)`` is ``a + (b - a) * t`` for any operands that support
those operators: floats, :class:`~hopoint.func.Func`,
:class:`~hopoint.point.Point` and :class:`~hopoint.point.PointFunc`.
``qbez`` and ``cbez`` nest ``line``.

Note that ``id``, ``map`` and ``zip`` shadow Python builtins inside
this module.
"""

from __future__ import annotations

import math
from typing import Any, Callable, Optional

import numpy as np

from hopoint.func import Func, ieee_sqrt, isfunc
from hopoint.shape import ANY, SCALAR, Shape

TAU = 2.0 * math.pi
epsilon = 5e-9


def _floor(t: float) -> float:
    return float(np.floor(t))


def id(shape: Shape = ANY) -> Func:
    """Return the identity function."""

    return Func(lambda a: a, shape)


def k(v: float, shape: Shape = ANY) -> Func:
    """Return a function that ignores its parameter and yields *v*."""

    v = float(v)
    return Func(lambda _: v, shape)


def zero(shape: Shape = ANY) -> Func:
    return k(0.0, shape)


def one(shape: Shape = ANY) -> Func:
    return k(1.0, shape)


def step() -> Func:
    """Return the step function.

    This is zero for negative numbers and one otherwise; ``0.0`` maps
    to ``1.0``.
    """

    return Func(lambda a: 0.0 if a < 0.0 else 1.0, SCALAR)


def floor() -> Func:
    """Return the floor function."""

    return Func(_floor, SCALAR)


def _need_func(f, name):
    if not isfunc(f):
        raise ValueError('bad (non-Func) argument passed to {}: {!r}'.format(name, f))


def add(a: Func, b: Func) -> Func:
    """Add two functions of the same parameter shape."""

    _need_func(a, 'add')
    _need_func(b, 'add')
    return a + b


def sub(a: Func, b: Func) -> Func:
    """Subtract two functions of the same parameter shape."""

    _need_func(a, 'sub')
    _need_func(b, 'sub')
    return a - b


def lift_right(f: Func, shape: Shape = SCALAR) -> Func:
    """Add a new, ignored parameter of *shape* to the right."""

    _need_func(f, 'lift_right')
    return f.lift_right(shape)


def lift_left(f: Func, shape: Shape = SCALAR) -> Func:
    """Add a new, ignored parameter of *shape* to the left."""

    _need_func(f, 'lift_left')
    return f.lift_left(shape)


def zip(a: Func, b: Func) -> Func:
    """Zip two functions so that the result alternates between them.

    With ``n = floor(t)``, even ``n`` evaluates ``a`` at
    ``(t mod 1) + n/2`` and odd ``n`` evaluates ``b`` at
    ``(t mod 1) + (n-1)/2``.  Each function advances one unit for every
    two units of ``t``.  The result is continuous at the integers when,
    for every integer ``m``, the left limit of ``a`` at ``m + 1`` equals
    ``b(m)`` and the left limit of ``b`` at ``m + 1`` equals ``a(m + 1)``.
    The zig-zag constructors rely on this.
    """

    _need_func(a, 'zip')
    _need_func(b, 'zip')
    fa = a.specialize(SCALAR).fn
    fb = b.specialize(SCALAR).fn

    def zipped(t):
        n = _floor(t)
        frac = t - n
        if n % 2.0 == 0.0:
            return fa(frac + n / 2.0)
        return fb(frac + (n - 1.0) / 2.0)

    return Func(zipped, SCALAR)


def half_circle() -> Func:
    """Return the ``y`` component for ``x`` on the upper unit half circle."""

    return Func(lambda x: ieee_sqrt(1.0 - x * x), SCALAR)


def map(a: Func, f: Callable[[Any], Any], shape: Optional[Shape] = None) -> Func:
    """Map the input of *a* through *f*, i.e. ``lambda v: a(f(v))``."""

    _need_func(a, 'map')
    return a.map(f, shape)


def line(a, b, t):
    """Linear combination of two shapes: ``a + (b - a) * t``."""

    return a + (b - a) * t


def qbez(a, b, c, t):
    """Quadratic Bezier blend of three shapes via nested ``line``."""

    return line(line(a, b, t), line(b, c, t), t)


def cbez(a, b, c, d, t):
    """Bezier-style blend of four shapes.

    Computed as ``line(line(a, b, t), line(c, d, t), t)``.  This is a
    blend of two linear interpolations, not the de Casteljau cubic; it
    is kept for output compatibility with existing shape definitions.
    """

    return line(line(a, b, t), line(c, d, t), t)


def close(a: float, b: float, tol: Optional[float] = None) -> bool:
    """Return ``True`` if *a* and *b* agree within *tol* (``epsilon``)."""

    if tol is None:
        tol = epsilon
    return abs(a - b) <= tol


__all__ = [
    'TAU',
    'epsilon',
    'id',
    'k',
    'zero',
    'one',
    'step',
    'floor',
    'add',
    'sub',
    'lift_left',
    'lift_right',
    'zip',
    'half_circle',
    'map',
    'line',
    'qbez',
    'cbez',
    'close',
]
