## shape-tagged scalar functions for hopoint
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

"""Scalar functions of a parameter.

A :class:`Func` wraps a plain Python callable together with the
:mod:`~hopoint.shape` of the parameter it accepts.  Funcs are immutable
and freely shared; every operator builds a new Func whose closure refers
to its operands.

``f(value)`` evaluates the raw callable with no checking, which is what
composed closures do internally.  ``f.call(value)`` is the checked entry
point for callers and validates *value* against ``f.shape`` first.
``f.partial(value)`` evaluates one parameter layer and returns a Func of
the rest.

Arithmetic follows IEEE semantics: division by zero gives ``inf`` or
``nan`` instead of raising ``ZeroDivisionError``.
"""

from __future__ import annotations

import numbers
import operator
from typing import Any, Callable, Optional

import numpy as np

from hopoint.errors import ShapeError
from hopoint.shape import ANY, SCALAR, AnyShape, ScalarShape, Shape, check, join, pair, split, unify


def ieee_div(a: float, b: float) -> float:
    """Divide with IEEE results for zero divisors."""

    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.true_divide(a, b))


def ieee_sqrt(a: float) -> float:
    """Square root, ``nan`` for negative input."""

    with np.errstate(invalid='ignore'):
        return float(np.sqrt(a))


def isreal(x) -> bool:
    return isinstance(x, numbers.Real) and not isinstance(x, bool)


class Func:
    """An immutable scalar function with a parameter shape."""

    __slots__ = ('_fn', '_shape')

    # numpy defers to our reflected operators
    __array_ufunc__ = None

    def __init__(self, fn: Callable[[Any], Any], shape: Shape = ANY):
        if not isinstance(shape, Shape):
            raise ValueError('bad parameter shape: {!r}'.format(shape))
        if isinstance(fn, Func):
            # rewrapping keeps the wrapped function's shape
            shape = unify(fn._shape, shape, 'Func')
            fn = fn._fn
        if not callable(fn):
            raise ValueError('bad (non-callable) function: {!r}'.format(fn))
        object.__setattr__(self, '_fn', fn)
        object.__setattr__(self, '_shape', shape)

    def __setattr__(self, name, value):
        raise AttributeError('Func instances are immutable')

    def __repr__(self):
        return 'Func<{}>'.format(self._shape)

    @property
    def fn(self) -> Callable[[Any], Any]:
        return self._fn

    @property
    def shape(self) -> Shape:
        return self._shape

    ## evaluation
    ## ----------

    def __call__(self, value):
        return self._fn(value)

    def call(self, value):
        """Evaluate at *value* after checking it against ``shape``."""

        check(self._shape, value)
        return self._fn(value)

    def partial(self, value) -> 'Func':
        """Fix the outermost parameter layer to *value*.

        A Func of ``(T, U)`` given a ``T`` becomes a Func of ``U``.
        """

        shape = self._shape
        outer, rest = split(shape)
        check(outer, value, operation='partial')
        fn = self._fn
        return Func(lambda r: fn(join(shape, value, r)), rest)

    ## shape manipulation
    ## ------------------

    def specialize(self, shape: Shape) -> 'Func':
        """Return this function narrowed to *shape*.

        Raises :class:`ShapeError` if the shapes are incompatible.
        """

        unified = unify(self._shape, shape, 'specialize')
        if unified == self._shape:
            return self
        return Func(self._fn, unified)

    def lift_left(self, shape: Shape = SCALAR) -> 'Func':
        """Add an ignored parameter slot of *shape* on the left."""

        fn = self._fn
        return Func(lambda p: fn(p[1]), pair(shape, self._shape))

    def lift_right(self, shape: Shape = SCALAR) -> 'Func':
        """Add an ignored parameter slot of *shape* on the right."""

        fn = self._fn
        return Func(lambda p: fn(p[0]), pair(self._shape, shape))

    def map(self, f: Callable[[Any], Any], shape: Optional[Shape] = None) -> 'Func':
        """Precompose with *f*, a function from the new parameter to ours.

        *shape* is the shape of the new parameter.  It defaults to the
        shape of *f* when that is a Func of a known shape, and otherwise to
        the current one, which suits reparametrizations such as phase
        shifts.
        """

        if isinstance(f, Func):
            if shape is None and not isinstance(f._shape, AnyShape):
                shape = f._shape
            elif shape is not None:
                shape = unify(f._shape, shape, 'map')
            f = f._fn
        if shape is None:
            shape = self._shape
        fn = self._fn
        return Func(lambda v: fn(f(v)), shape)

    ## calculus
    ## --------

    def diff(self, eps: float) -> 'Func':
        """Forward difference ``(f(t+eps) - f(t)) / eps``."""

        if not isinstance(self._shape, (AnyShape, ScalarShape)):
            raise ShapeError('diff needs a scalar parameter, not {}'.format(self._shape),
                             self._shape, operation='diff')
        fn = self._fn
        return Func(lambda t: ieee_div(fn(t + eps) - fn(t), eps), self._shape)

    def sqrt(self) -> 'Func':
        fn = self._fn
        return Func(lambda t: ieee_sqrt(fn(t)), self._shape)

    ## operators
    ## ---------

    def _binary(self, other, op, name, reflected=False):
        a = self._fn
        if isinstance(other, Func):
            shape = unify(self._shape, other._shape, name)
            b = other._fn
            if reflected:
                return Func(lambda t: op(b(t), a(t)), shape)
            return Func(lambda t: op(a(t), b(t)), shape)
        if isreal(other):
            v = float(other)
            if reflected:
                return Func(lambda t: op(v, a(t)), self._shape)
            return Func(lambda t: op(a(t), v), self._shape)
        return NotImplemented

    def __add__(self, other):
        return self._binary(other, operator.add, 'add')

    def __radd__(self, other):
        return self._binary(other, operator.add, 'add', True)

    def __sub__(self, other):
        return self._binary(other, operator.sub, 'sub')

    def __rsub__(self, other):
        return self._binary(other, operator.sub, 'sub', True)

    def __mul__(self, other):
        return self._binary(other, operator.mul, 'mul')

    def __rmul__(self, other):
        return self._binary(other, operator.mul, 'mul', True)

    def __truediv__(self, other):
        return self._binary(other, ieee_div, 'div')

    def __rtruediv__(self, other):
        return self._binary(other, ieee_div, 'div', True)

    def __neg__(self):
        fn = self._fn
        return Func(lambda t: -fn(t), self._shape)

    def __abs__(self):
        fn = self._fn
        return Func(lambda t: abs(fn(t)), self._shape)


def isfunc(x) -> bool:
    return isinstance(x, Func)


__all__ = [
    'Func',
    'isfunc',
    'isreal',
    'ieee_div',
    'ieee_sqrt',
]
