## parameter shapes for higher-order points
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

"""Parameter shapes for hopoint functions.

Every scalar function and point-function carries the *shape* of the
parameter it accepts.  Shapes are immutable and compare by value:

- ``UNIT``: the empty parameter ``()``; a function of ``UNIT`` is
  effectively a constant
- ``SCALAR``: a float (angles, interpolation parameters)
- ``INDEX``: an int
- ``BOOL``: a bool
- ``TupleShape(items)``: a Python tuple with one shape per slot; the
  nested chains ``(T, U)``, ``((T, U), V)`` produced by lifting are
  tuples of tuples
- ``ArrayShape(element, length)``: a fixed-size list/tuple of one
  element shape, e.g. ``[f64; 2]`` for surface parameters
- ``ANY``: a polymorphic shape for constants and the identity; it
  unifies with every other shape

Shapes are checked when functions are *combined*, so a mismatched
combination fails where it is written rather than where it is sampled.
"""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from hopoint.errors import ShapeError


@dataclass(frozen=True)
class Shape(ABC):
    """Base class for parameter shapes."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name used in error messages."""

    @abstractmethod
    def accepts(self, value: Any) -> bool:
        """Return ``True`` if *value* is a parameter of this shape."""

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class AnyShape(Shape):
    """Polymorphic shape, not yet pinned to a concrete parameter."""

    @property
    def name(self) -> str:
        return "any"

    def accepts(self, value: Any) -> bool:
        return True


@dataclass(frozen=True)
class UnitShape(Shape):
    """The empty parameter ``()``."""

    @property
    def name(self) -> str:
        return "()"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, tuple) and len(value) == 0


@dataclass(frozen=True)
class ScalarShape(Shape):
    """A real number; ints are accepted, bools are not."""

    @property
    def name(self) -> str:
        return "float"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass(frozen=True)
class IndexShape(Shape):
    """An integer index."""

    @property
    def name(self) -> str:
        return "int"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass(frozen=True)
class BoolShape(Shape):

    @property
    def name(self) -> str:
        return "bool"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, bool)


@dataclass(frozen=True)
class TupleShape(Shape):
    """A tuple parameter with one shape per slot."""

    items: Tuple[Shape, ...]

    def __post_init__(self):
        object.__setattr__(self, 'items', tuple(self.items))
        if len(self.items) < 2:
            raise ShapeError("tuple shapes need at least two slots, got {}".format(len(self.items)))
        for item in self.items:
            if not isinstance(item, Shape):
                raise ShapeError("bad tuple slot: {!r}".format(item))

    @property
    def name(self) -> str:
        return "({})".format(", ".join(item.name for item in self.items))

    def accepts(self, value: Any) -> bool:
        if not isinstance(value, tuple) or len(value) != len(self.items):
            return False
        return all(item.accepts(v) for item, v in zip(self.items, value))


@dataclass(frozen=True)
class ArrayShape(Shape):
    """A fixed-length list or tuple of parameters sharing one shape."""

    element: Shape
    length: int

    def __post_init__(self):
        if not isinstance(self.element, Shape):
            raise ShapeError("bad array element shape: {!r}".format(self.element))
        if isinstance(self.length, bool) or not isinstance(self.length, int) or self.length < 1:
            raise ShapeError("array length must be a positive int, got {!r}".format(self.length))

    @property
    def name(self) -> str:
        return "[{}; {}]".format(self.element.name, self.length)

    def accepts(self, value: Any) -> bool:
        if not isinstance(value, (list, tuple)) or len(value) != self.length:
            return False
        return all(self.element.accepts(v) for v in value)


ANY = AnyShape()
UNIT = UnitShape()
SCALAR = ScalarShape()
INDEX = IndexShape()
BOOL = BoolShape()


def pair(left: Shape, right: Shape) -> TupleShape:
    """Return the shape ``(left, right)``."""

    return TupleShape((left, right))


def array(element: Shape, length: int) -> ArrayShape:
    """Return the shape ``[element; length]``."""

    return ArrayShape(element, length)


def _unify(a: Shape, b: Shape) -> Optional[Shape]:
    if isinstance(a, AnyShape):
        return b
    if isinstance(b, AnyShape):
        return a
    if isinstance(a, TupleShape) and isinstance(b, TupleShape):
        if len(a.items) != len(b.items):
            return None
        items = []
        for x, y in zip(a.items, b.items):
            u = _unify(x, y)
            if u is None:
                return None
            items.append(u)
        return TupleShape(tuple(items))
    if isinstance(a, ArrayShape) and isinstance(b, ArrayShape):
        if a.length != b.length:
            return None
        u = _unify(a.element, b.element)
        if u is None:
            return None
        return ArrayShape(u, a.length)
    if a == b:
        return a
    return None


def unify(a: Shape, b: Shape, operation: Optional[str] = None) -> Shape:
    """Return the common shape of *a* and *b*.

    ``ANY`` gives way to the other side, tuples and arrays unify slot by
    slot, and every other disagreement raises :class:`ShapeError`.
    """

    u = _unify(a, b)
    if u is None:
        raise ShapeError("parameter shapes {} and {} do not match".format(a, b),
                         a, b, operation=operation)
    return u


def split(shape: Shape) -> Tuple[Shape, Shape]:
    """Split off the outermost (left-most) parameter layer.

    Returns ``(outer, rest)``: a function of *shape* given a value of
    ``outer`` becomes a function of ``rest``.  A two-slot tuple splits
    into its slots, a longer tuple into its head and the tuple of the
    remaining slots; arrays split the same way.
    """

    if isinstance(shape, TupleShape):
        if len(shape.items) == 2:
            return shape.items[0], shape.items[1]
        return shape.items[0], TupleShape(shape.items[1:])
    if isinstance(shape, ArrayShape) and shape.length >= 2:
        if shape.length == 2:
            return shape.element, shape.element
        return shape.element, ArrayShape(shape.element, shape.length - 1)
    raise ShapeError("shape {} has no parameter layer to split".format(shape),
                     shape, operation="partial")


def join(shape: Shape, outer: Any, rest: Any) -> Any:
    """Inverse of :func:`split` on values: rebuild a full parameter."""

    if isinstance(shape, TupleShape):
        if len(shape.items) == 2:
            return (outer, rest)
        return (outer,) + tuple(rest)
    if isinstance(shape, ArrayShape):
        if shape.length == 2:
            return [outer, rest]
        return [outer] + list(rest)
    raise ShapeError("shape {} has no parameter layer to join".format(shape),
                     shape, operation="partial")


def check(shape: Shape, value: Any, operation: str = "call") -> None:
    """Raise :class:`ShapeError` unless *value* is a parameter of *shape*."""

    if not shape.accepts(value):
        raise ShapeError("value {!r} is not a parameter of shape {}".format(value, shape),
                         shape, operation=operation)


__all__ = [
    'Shape',
    'AnyShape',
    'UnitShape',
    'ScalarShape',
    'IndexShape',
    'BoolShape',
    'TupleShape',
    'ArrayShape',
    'ANY',
    'UNIT',
    'SCALAR',
    'INDEX',
    'BOOL',
    'pair',
    'array',
    'unify',
    'split',
    'join',
    'check',
]
