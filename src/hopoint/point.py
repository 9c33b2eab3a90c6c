## points and point-functions for hopoint
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

"""Concrete points and point-functions.

====================
OVERVIEW
====================

A :class:`Point` is a plain value, three floats ``x``, ``y`` and
``z``.  A :class:`PointFunc` is three :class:`~hopoint.func.Func`
components sharing one parameter shape; calling it at a parameter
yields a :class:`Point`.

The scalar algebra of :mod:`hopoint.func` is lifted componentwise:

- ``+`` and ``-`` with numbers, Points, 3-element sequences, and
  PointFuncs
- ``*`` and ``/`` with numbers, scalar Funcs, Points and PointFuncs
  (componentwise products)
- ``dot``, ``cross`` and ``norm``

When a concrete Point (or a 3-sequence such as ``[0.0, 0.0, 1.0]``)
meets a PointFunc it acts as a constant function, so mixed arithmetic
always succeeds.  Two PointFuncs, or a PointFunc and a Func, must agree
on their parameter shape; if not, :class:`~hopoint.errors.ShapeError`
is raised when the expression is built.

constructors
============

``circle()`` takes its angle in full turns, ``circle_radians()`` in
radians.  ``zig_zag()`` and ``zag_zig()`` are staircase paths,
``x_axis()``, ``y_axis()`` and ``z_axis()`` unit rays, ``ground_plane()``
the z=0 plane over ``[u, v]`` and ``space()`` the identity embedding of
``[x, y, z]``.

Example: a cylinder built from two independent point-functions::

    ring = circle().lift_right()
    height = z_axis().lift_left()
    cylinder = ring + height
    cylinder.call((0.25, 2.0))   # Point(x=6.1e-17, y=1.0, z=2.0)
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Any, Callable, List, Optional

import numpy as np

from hopoint.algebra import TAU, floor, id, k, zero, zip
from hopoint.call import HigherOrder
from hopoint.errors import ShapeError
from hopoint.func import Func, ieee_div, ieee_sqrt, isreal
from hopoint.shape import (ANY, SCALAR, AnyShape, ArrayShape, ScalarShape, Shape,
                           TupleShape, unify)


def _scalar_op(op):
    if op is operator.truediv:
        return ieee_div
    return op


def _as_components(v):
    """Return the ``(x, y, z)`` of a Point or 3-sequence, else ``None``."""

    if isinstance(v, Point):
        return v.x, v.y, v.z
    if isinstance(v, np.ndarray):
        if v.shape == (3,):
            return float(v[0]), float(v[1]), float(v[2])
        return None
    if isinstance(v, (list, tuple)) and len(v) == 3 and all(isreal(c) for c in v):
        return float(v[0]), float(v[1]), float(v[2])
    return None


@dataclass(frozen=True)
class Point:
    """A concrete 3D point."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    # numpy defers to our reflected operators
    __array_ufunc__ = None

    def __post_init__(self):
        for name in ('x', 'y', 'z'):
            object.__setattr__(self, name, float(getattr(self, name)))

    @classmethod
    def from_seq(cls, seq) -> 'Point':
        """Build a Point from any 3-element sequence of numbers."""

        comps = _as_components(seq)
        if comps is None:
            raise ValueError('bad (non-3D) sequence passed to from_seq: {!r}'.format(seq))
        return cls(*comps)

    def to_list(self) -> List[float]:
        return [self.x, self.y, self.z]

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __len__(self):
        return 3

    def _op(self, other, op, reflected=False):
        if isinstance(other, PointFunc):
            return NotImplemented
        if isinstance(other, Func):
            # a scalar function turns the result into a point-function
            ox = oy = oz = other
        elif isreal(other):
            ox = oy = oz = float(other)
        else:
            comps = _as_components(other)
            if comps is None:
                return NotImplemented
            ox, oy, oz = comps
        if isinstance(other, Func):
            if reflected:
                return PointFunc(op(ox, self.x), op(oy, self.y), op(oz, self.z))
            return PointFunc(op(self.x, ox), op(self.y, oy), op(self.z, oz))
        f = _scalar_op(op)
        if reflected:
            return Point(f(ox, self.x), f(oy, self.y), f(oz, self.z))
        return Point(f(self.x, ox), f(self.y, oy), f(self.z, oz))

    def __add__(self, other):
        return self._op(other, operator.add)

    def __radd__(self, other):
        return self._op(other, operator.add, True)

    def __sub__(self, other):
        return self._op(other, operator.sub)

    def __rsub__(self, other):
        return self._op(other, operator.sub, True)

    def __mul__(self, other):
        return self._op(other, operator.mul)

    def __rmul__(self, other):
        return self._op(other, operator.mul, True)

    def __truediv__(self, other):
        return self._op(other, operator.truediv)

    def __rtruediv__(self, other):
        return self._op(other, operator.truediv, True)

    def __neg__(self):
        return Point(-self.x, -self.y, -self.z)

    def dot(self, other):
        """Dot product; a Func if *other* is a PointFunc."""

        if isinstance(other, PointFunc):
            return other.dot(self)
        comps = _as_components(other)
        if comps is None:
            raise ValueError('bad argument passed to dot: {!r}'.format(other))
        return self.x * comps[0] + self.y * comps[1] + self.z * comps[2]

    def cross(self, other):
        """Cross product; a PointFunc if *other* is a PointFunc."""

        if isinstance(other, PointFunc):
            return PointFunc.const(self, other.shape).cross(other)
        comps = _as_components(other)
        if comps is None:
            raise ValueError('bad argument passed to cross: {!r}'.format(other))
        bx, by, bz = comps
        return Point(self.y * bz - self.z * by,
                     self.z * bx - self.x * bz,
                     self.x * by - self.y * bx)

    def norm(self) -> float:
        return ieee_sqrt(self.x * self.x + self.y * self.y + self.z * self.z)


def _as_func(v, name) -> Func:
    if isinstance(v, Func):
        return v
    if isreal(v):
        return k(v)
    if callable(v):
        return Func(v)
    raise ValueError('bad {} component for PointFunc: {!r}'.format(name, v))


class PointFunc(HigherOrder):
    """A point-valued function: three Funcs over one parameter shape.

    Components may be given as Funcs, numbers (constants) or plain
    callables.  Their shapes, together with *shape*, are unified at
    construction; incompatible shapes raise
    :class:`~hopoint.errors.ShapeError`.
    """

    _fields = ('x', 'y', 'z')
    _concrete = Point
    __array_ufunc__ = None

    def __init__(self, x, y, z, shape: Shape = ANY):
        self._init_fields({'x': _as_func(x, 'x'),
                           'y': _as_func(y, 'y'),
                           'z': _as_func(z, 'z')}, shape)

    def __repr__(self):
        return 'PointFunc<{}>'.format(self.shape)

    @classmethod
    def const(cls, p, shape: Shape = ANY) -> 'PointFunc':
        """Lift a Point or 3-sequence to a constant point-function."""

        comps = _as_components(p)
        if comps is None:
            raise ValueError('bad (non-3D) value passed to const: {!r}'.format(p))
        return cls(k(comps[0], shape), k(comps[1], shape), k(comps[2], shape))

    @classmethod
    def from_callable(cls, fn: Callable[[Any], Point], shape: Shape = ANY) -> 'PointFunc':
        """Wrap a callable returning a Point (or 3-sequence).

        The callable is invoked once per component per evaluation.
        """

        def component(i):
            def f(v):
                p = fn(v)
                if isinstance(p, Point):
                    return (p.x, p.y, p.z)[i]
                return float(p[i])
            return Func(f, shape)

        return cls(component(0), component(1), component(2))

    ## parameter manipulation
    ## ----------------------

    def lift_right(self, shape: Shape = SCALAR) -> 'PointFunc':
        """Add another, ignored parameter to the right."""

        return PointFunc(self.x.lift_right(shape), self.y.lift_right(shape),
                         self.z.lift_right(shape))

    def lift_left(self, shape: Shape = SCALAR) -> 'PointFunc':
        """Add another, ignored parameter to the left."""

        return PointFunc(self.x.lift_left(shape), self.y.lift_left(shape),
                         self.z.lift_left(shape))

    def map(self, f: Callable[[Any], Any], shape: Optional[Shape] = None) -> 'PointFunc':
        """Precompose every component with *f*.

        *shape* is the parameter shape of *f*'s input.  It defaults to
        the shape of *f* when that is a Func, else to this function's
        shape.
        """

        return PointFunc(self.x.map(f, shape), self.y.map(f, shape), self.z.map(f, shape))

    def as_array(self) -> 'PointFunc':
        """Turn a function of ``(T, T)`` into a function of ``[T; 2]``."""

        shape = self.shape
        if not isinstance(shape, TupleShape) or len(shape.items) != 2:
            raise ShapeError('as_array needs a pair shape, not {}'.format(shape),
                             shape, operation='as_array')
        element = unify(shape.items[0], shape.items[1], 'as_array')
        fx, fy, fz = self.x.fn, self.y.fn, self.z.fn
        new = ArrayShape(element, 2)
        return PointFunc(Func(lambda a: fx((a[0], a[1])), new),
                         Func(lambda a: fy((a[0], a[1])), new),
                         Func(lambda a: fz((a[0], a[1])), new))

    ## calculus and vector operations
    ## ------------------------------

    def diff(self, eps: float) -> 'PointFunc':
        """Numeric derivative by forward difference with step *eps*."""

        if not isinstance(self.shape, (AnyShape, ScalarShape)):
            raise ShapeError('diff needs a scalar parameter, not {}'.format(self.shape),
                             self.shape, operation='diff')
        return PointFunc(self.x.diff(eps), self.y.diff(eps), self.z.diff(eps))

    def _other_components(self, other, name):
        if isinstance(other, PointFunc):
            return other.x, other.y, other.z
        comps = _as_components(other)
        if comps is None:
            raise ValueError('bad argument passed to {}: {!r}'.format(name, other))
        return comps

    def dot(self, other) -> Func:
        """Sum of componentwise products, as a scalar function."""

        ox, oy, oz = self._other_components(other, 'dot')
        return self.x * ox + self.y * oy + self.z * oz

    def cross(self, other) -> 'PointFunc':
        ax, ay, az = self.x, self.y, self.z
        bx, by, bz = self._other_components(other, 'cross')
        return PointFunc(ay * bz - az * by,
                         az * bx - ax * bz,
                         ax * by - ay * bx)

    def norm(self) -> Func:
        """Euclidean norm at each parameter value."""

        fx, fy, fz = self.x.fn, self.y.fn, self.z.fn

        def f(v):
            x, y, z = fx(v), fy(v), fz(v)
            return ieee_sqrt(x * x + y * y + z * z)

        return Func(f, self.shape)

    ## operators
    ## ---------

    def _combine(self, other, op, reflected=False):
        if isinstance(other, PointFunc):
            ox, oy, oz = other.x, other.y, other.z
        elif isinstance(other, Func) or isreal(other):
            ox = oy = oz = other
        else:
            comps = _as_components(other)
            if comps is None:
                return NotImplemented
            ox, oy, oz = comps
        if reflected:
            return PointFunc(op(ox, self.x), op(oy, self.y), op(oz, self.z))
        return PointFunc(op(self.x, ox), op(self.y, oy), op(self.z, oz))

    def __add__(self, other):
        return self._combine(other, operator.add)

    def __radd__(self, other):
        return self._combine(other, operator.add, True)

    def __sub__(self, other):
        return self._combine(other, operator.sub)

    def __rsub__(self, other):
        return self._combine(other, operator.sub, True)

    def __mul__(self, other):
        return self._combine(other, operator.mul)

    def __rmul__(self, other):
        return self._combine(other, operator.mul, True)

    def __truediv__(self, other):
        return self._combine(other, operator.truediv)

    def __rtruediv__(self, other):
        return self._combine(other, operator.truediv, True)

    def __neg__(self):
        return PointFunc(-self.x, -self.y, -self.z)


def ispoint(x) -> bool:
    return isinstance(x, Point)


def ispointfunc(x) -> bool:
    return isinstance(x, PointFunc)


## named constructors
## ------------------

def _cos(a: float) -> float:
    return math.cos(a) if math.isfinite(a) else math.nan


def _sin(a: float) -> float:
    return math.sin(a) if math.isfinite(a) else math.nan


def circle() -> PointFunc:
    """Unit circle in the xy-plane; the angle is in full turns."""

    return PointFunc(Func(lambda ang: _cos(ang * TAU), SCALAR),
                     Func(lambda ang: _sin(ang * TAU), SCALAR),
                     zero())


def circle_radians() -> PointFunc:
    """Unit circle in the xy-plane; the angle is in radians."""

    return PointFunc(Func(_cos, SCALAR), Func(_sin, SCALAR), zero())


def zig_zag() -> PointFunc:
    """Staircase in the xy-plane, stepping along x first."""

    return PointFunc(zip(id(), floor() + 1.0), zip(floor(), id()), zero())


def zag_zig() -> PointFunc:
    """Staircase in the xy-plane, stepping along y first."""

    return PointFunc(zip(floor(), id()), zip(id(), floor() + 1.0), zero())


def x_axis() -> PointFunc:
    """Points along the x-axis."""

    return PointFunc(id(SCALAR), zero(), zero())


def y_axis() -> PointFunc:
    """Points along the y-axis."""

    return PointFunc(zero(), id(SCALAR), zero())


def z_axis() -> PointFunc:
    """Points along the z-axis."""

    return PointFunc(zero(), zero(), id(SCALAR))


def ground_plane() -> PointFunc:
    """The z=0 plane over ``[u, v]``."""

    shape = ArrayShape(SCALAR, 2)
    return PointFunc(Func(lambda p: p[0], shape), Func(lambda p: p[1], shape), zero())


def space() -> PointFunc:
    """Plain Euclidean space over ``[x, y, z]``."""

    shape = ArrayShape(SCALAR, 3)
    return PointFunc(Func(lambda p: p[0], shape),
                     Func(lambda p: p[1], shape),
                     Func(lambda p: p[2], shape))


__all__ = [
    'Point',
    'PointFunc',
    'ispoint',
    'ispointfunc',
    'circle',
    'circle_radians',
    'zig_zag',
    'zag_zig',
    'x_axis',
    'y_axis',
    'z_axis',
    'ground_plane',
    'space',
]
