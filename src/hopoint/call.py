## higher-order call mechanism for hopoint
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

"""Evaluating function-valued entities one parameter layer at a time.

Two kinds of entity can be called:

- a :class:`~hopoint.func.Func`, which yields a number
- a :class:`HigherOrder` value such as a point-function, which is a
  fixed set of named Funcs sharing one parameter shape and yields the
  matching *concrete* value (a :class:`~hopoint.point.Point` for a
  :class:`~hopoint.point.PointFunc`)

``call(entity, value)`` evaluates at a complete parameter.
``partial(entity, value)`` evaluates only the outermost layer of a
tuple or array parameter and returns an entity of the same kind over the
remaining layers, so a function of ``(index, (u, v))`` can be peeled to a
function of ``(u, v)`` and then to a concrete result.  The recursion is
generic over nesting depth.

``hmap`` and ``hpair`` apply functions across nested lists of parameter
values while preserving their structure.  Lists are structure and
tuples are leaves, so tuple parameters pass through intact.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

from hopoint.errors import ShapeError
from hopoint.func import Func
from hopoint.shape import ANY, Shape, check, unify


class HigherOrder:
    """Base class for aggregates of Funcs over one parameter shape.

    Subclasses set ``_fields`` (attribute names holding Funcs) and
    ``_concrete`` (the class built from the evaluated fields, taking the
    same names as keyword arguments).  The constructor must accept the
    fields as keyword arguments too.
    """

    _fields: Tuple[str, ...] = ()
    _concrete: Any = None

    def _init_fields(self, funcs: Dict[str, Func], shape: Shape = ANY) -> None:
        for name in self._fields:
            f = funcs[name]
            if not isinstance(f, Func):
                raise ValueError('bad (non-Func) {} field: {!r}'.format(name, f))
            shape = unify(shape, f.shape, type(self).__name__)
        for name in self._fields:
            object.__setattr__(self, name, funcs[name].specialize(shape))
        object.__setattr__(self, '_shape', shape)

    def __setattr__(self, name, value):
        raise AttributeError('{} instances are immutable'.format(type(self).__name__))

    @property
    def shape(self) -> Shape:
        return self._shape

    def fields(self) -> Dict[str, Func]:
        return {name: getattr(self, name) for name in self._fields}

    def call(self, value):
        """Evaluate every field at *value* and build the concrete value."""

        check(self._shape, value)
        return self._concrete(**{name: getattr(self, name)(value) for name in self._fields})

    def partial(self, value):
        """Evaluate the outermost parameter layer of every field."""

        return type(self)(**{name: getattr(self, name).partial(value) for name in self._fields})


def call(entity, value):
    """Evaluate *entity* at the complete parameter *value*."""

    if isinstance(entity, (Func, HigherOrder)):
        return entity.call(value)
    raise ValueError('bad (non-callable) entity passed to call: {!r}'.format(entity))


def partial(entity, value):
    """Evaluate one parameter layer of *entity*."""

    if isinstance(entity, (Func, HigherOrder)):
        return entity.partial(value)
    raise ValueError('bad (non-callable) entity passed to partial: {!r}'.format(entity))


def hmap(values, f):
    """Apply *f* to every leaf of a nested list, keeping the nesting.

    *f* may be a Func or HigherOrder entity (evaluated with a checked
    ``call``) or any plain callable.
    """

    if isinstance(values, list):
        return [hmap(v, f) for v in values]
    if isinstance(f, (Func, HigherOrder)):
        return f.call(values)
    return f(values)


def hpair(a, b):
    """Pair the leaves of two nested lists of identical structure.

    ``hpair([0, 1], [1, 2])`` is ``[(0, 1), (1, 2)]``.
    """

    if isinstance(a, list) and isinstance(b, list):
        if len(a) != len(b):
            raise ShapeError('cannot pair lists of length {} and {}'.format(len(a), len(b)),
                             a, b, operation='hpair')
        return [hpair(x, y) for x, y in zip(a, b)]
    if isinstance(a, list) or isinstance(b, list):
        raise ShapeError('cannot pair a list with a leaf', a, b, operation='hpair')
    return (a, b)


__all__ = [
    'HigherOrder',
    'call',
    'partial',
    'hmap',
    'hpair',
]
