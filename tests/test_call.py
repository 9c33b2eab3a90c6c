"""Tests for calling, partial application and higher-order maps."""

import math

import pytest

from hopoint.algebra import TAU, k, lift_left, id
from hopoint.call import call, hmap, hpair, partial
from hopoint.errors import ShapeError
from hopoint.func import Func
from hopoint.point import Point, PointFunc, circle, ground_plane, space, z_axis
from hopoint.shape import INDEX, SCALAR, TupleShape, array, pair


def triangle_point():
    # corners of a triangle at continuous indices 0, 1 and 2
    return PointFunc(Func(lambda i: math.cos(i / 3.0 * TAU), SCALAR),
                     Func(lambda i: math.sin(i / 3.0 * TAU), SCALAR),
                     k(0.0))


def rotate():
    return Func(lambda i: (i + 1.0) % 3.0, SCALAR)


def in_between():
    def f(ab):
        a, b = ab
        # keep the same direction of rotation for every corner
        if b < a:
            b += 3.0
        return (a + (b - a) * 0.5) % 3.0
    return Func(f, pair(SCALAR, SCALAR))


class TestCall:

    def test_call_func_and_point_function(self):
        assert call(Func(lambda t: t + 1.0, SCALAR), 2.0) == 3.0
        assert call(z_axis(), 2.0) == Point(0.0, 0.0, 2.0)

    def test_call_checks_parameter(self):
        with pytest.raises(ShapeError):
            call(z_axis(), [2.0])

    def test_bad_entity(self):
        with pytest.raises(ValueError):
            call(3.0, 1.0)
        with pytest.raises(ValueError):
            partial("circle", 1.0)

    def test_fields(self):
        fields = circle().fields()
        assert sorted(fields) == ['x', 'y', 'z']
        assert all(f.shape == SCALAR for f in fields.values())


class TestPartial:

    def test_pair(self):
        cylinder = circle().lift_right() + z_axis().lift_left()
        ring = partial(cylinder, 0.0)
        assert isinstance(ring, PointFunc)
        assert ring.shape == SCALAR
        assert call(ring, 2.0) == Point(1.0, 0.0, 2.0)

    def test_func(self):
        f = lift_left(id(SCALAR), INDEX) * 2.0
        g = partial(f, 7)
        assert g.shape == SCALAR
        assert g(1.5) == 3.0

    def test_triple(self):
        s = TupleShape((SCALAR, INDEX, SCALAR))
        p = PointFunc(Func(lambda v: v[0], s),
                      Func(lambda v: float(v[1]), s),
                      Func(lambda v: v[2], s))
        p1 = partial(p, 1.0)
        assert p1.shape == pair(INDEX, SCALAR)
        p2 = partial(p1, 3)
        assert p2.shape == SCALAR
        assert call(p2, 0.5) == Point(1.0, 3.0, 0.5)
        assert call(p, (1.0, 3, 0.5)) == call(p2, 0.5)

    def test_arrays(self):
        line = partial(ground_plane(), 1.0)
        assert line.shape == SCALAR
        assert call(line, 2.0) == Point(1.0, 2.0, 0.0)
        plane = partial(space(), 1.0)
        assert plane.shape == array(SCALAR, 2)
        assert call(plane, [2.0, 3.0]) == Point(1.0, 2.0, 3.0)
        assert call(partial(plane, 2.0), 3.0) == Point(1.0, 2.0, 3.0)

    def test_no_layer_left(self):
        with pytest.raises(ShapeError):
            partial(circle(), 0.0)

    def test_wrong_outer_value(self):
        with pytest.raises(ShapeError):
            partial(ground_plane(), (1.0,))
        with pytest.raises(ShapeError):
            partial(circle().lift_left(INDEX), 0.5)


class TestHigherOrderMaps:

    def test_triangle_indices(self):
        triangle = [0.0, 1.0, 2.0]
        assert hmap(triangle, rotate()) == [1.0, 2.0, 0.0]
        coords = hmap(triangle, triangle_point())
        assert coords[0] == Point(1.0, 0.0, 0.0)
        assert coords[1].x == pytest.approx(-0.5)
        assert coords[2].y == pytest.approx(-math.sqrt(3.0) / 2.0)

    def test_structure_is_preserved(self):
        corner = [[0.0, 1.0], [1.0, 2.0]]
        xs = hmap(corner, triangle_point().x)
        assert len(xs) == 2
        assert all(len(row) == 2 for row in xs)
        assert hmap(corner, rotate()) == [[1.0, 2.0], [2.0, 0.0]]
        coords = hmap(hmap(corner, rotate()), triangle_point())
        assert isinstance(coords[1][1], Point)
        assert coords[1][1] == Point(1.0, 0.0, 0.0)

    def test_plain_callables(self):
        assert hmap([[1, 2], [3]], lambda v: v * 2) == [[2, 4], [6]]
        assert hmap(5, lambda v: v + 1) == 6

    def test_tuples_are_leaves(self):
        f = Func(lambda p: p[0] + p[1], pair(SCALAR, SCALAR))
        assert hmap([(1.0, 2.0), (3.0, 4.0)], f) == [3.0, 7.0]

    def test_checked_leaves(self):
        with pytest.raises(ShapeError):
            hmap([(0.0, 1.0)], circle())

    def test_hpair(self):
        edge = [0.0, 1.0]
        rotated = hmap(edge, rotate())
        assert hpair(edge, rotated) == [(0.0, 1.0), (1.0, 2.0)]
        assert hmap(hpair(edge, rotated), in_between()) == [0.5, 1.5]

    def test_hpair_nested(self):
        corner = [[0.0, 1.0], [1.0, 2.0]]
        rotated = hmap(corner, rotate())
        halfway = hmap(hpair(corner, rotated), in_between())
        assert halfway == [[0.5, 1.5], [1.5, 2.5]]

    def test_hpair_mismatch(self):
        with pytest.raises(ShapeError):
            hpair([0.0, 1.0], [0.0])
        with pytest.raises(ShapeError):
            hpair([0.0, 1.0], 2.0)
