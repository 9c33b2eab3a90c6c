"""Tests for points, point-functions and their constructors."""

import dataclasses
import math

import numpy as np
import pytest

from hopoint.algebra import TAU, cbez, floor, id, k, lift_left, line, qbez, step, zero
from hopoint.errors import ShapeError
from hopoint.func import Func
from hopoint.point import (
    Point,
    PointFunc,
    circle,
    circle_radians,
    ground_plane,
    ispoint,
    ispointfunc,
    space,
    x_axis,
    y_axis,
    z_axis,
    zag_zig,
    zig_zag,
)
from hopoint.shape import BOOL, INDEX, SCALAR, UNIT, array, pair


class TestPoint:

    def test_components(self):
        p = Point(2.0, 4.0, 6.0)
        assert p.x == 2.0
        assert p.to_list() == [2.0, 4.0, 6.0]
        assert list(p) == [2.0, 4.0, 6.0]
        assert len(p) == 3
        assert isinstance(Point(1, 2, 3).x, float)

    def test_immutable(self):
        p = Point(1.0, 2.0, 3.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            p.x = 5.0

    def test_from_seq(self):
        assert Point.from_seq([1, 2, 3]) == Point(1.0, 2.0, 3.0)
        assert Point.from_seq(np.array([1.0, 2.0, 3.0])) == Point(1.0, 2.0, 3.0)
        with pytest.raises(ValueError):
            Point.from_seq([1.0, 2.0])

    def test_arithmetic(self):
        a = Point(1.0, 2.0, 3.0)
        assert a + Point(1.0, 1.0, 1.0) == Point(2.0, 3.0, 4.0)
        assert a - [1.0, 2.0, 3.0] == Point(0.0, 0.0, 0.0)
        assert a * 2.0 == Point(2.0, 4.0, 6.0)
        assert 2.0 * a == Point(2.0, 4.0, 6.0)
        assert a / 2.0 == Point(0.5, 1.0, 1.5)
        assert -a == Point(-1.0, -2.0, -3.0)

    def test_division_by_zero(self):
        p = Point(1.0, 0.0, -1.0) / 0.0
        assert p.x == math.inf
        assert math.isnan(p.y)
        assert p.z == -math.inf

    def test_vector_products(self):
        assert Point(1.0, 2.0, 3.0).dot([4.0, 5.0, 6.0]) == 32.0
        assert Point(1.0, 0.0, 0.0).cross(Point(0.0, 1.0, 0.0)) == Point(0.0, 0.0, 1.0)
        assert Point(3.0, 4.0, 0.0).norm() == 5.0

    def test_point_with_func_is_point_function(self):
        f = Point(1.0, 2.0, 3.0) + Func(lambda t: t, SCALAR)
        assert ispointfunc(f)
        assert f.shape == SCALAR
        assert f.call(1.0) == Point(2.0, 3.0, 4.0)

    def test_numpy_vector_operands(self):
        p = Point(1.0, 2.0, 3.0)
        for q in (np.array([1.0, 1.0, 1.0]) + p, p + np.array([1.0, 1.0, 1.0])):
            assert isinstance(q, Point)
            assert q == Point(2.0, 3.0, 4.0)
        assert np.array([2.0, 2.0, 2.0]) * p == Point(2.0, 4.0, 6.0)
        assert np.float64(2.0) * p == Point(2.0, 4.0, 6.0)

    def test_bad_operand(self):
        with pytest.raises(TypeError):
            Point(1.0, 2.0, 3.0) + "x"

    def test_predicates(self):
        assert ispoint(Point())
        assert not ispoint(circle())
        assert ispointfunc(circle())


class TestPointFunc:

    def test_bool_parameter(self):
        p = PointFunc(Func(lambda b: 1.0 if b else 2.0, BOOL),
                      Func(lambda b: 3.0 if b else 4.0, BOOL),
                      zero())
        assert p.shape == BOOL
        assert p.x(True) == 1.0
        assert p.y(False) == 4.0
        assert p.call(True) == Point(1.0, 3.0, 0.0)
        assert p.call(False) == Point(2.0, 4.0, 0.0)

    def test_unit_parameter(self):
        p = PointFunc(k(1.0), k(2.0), zero(), UNIT)
        assert p.call(()) == Point(1.0, 2.0, 0.0)

    def test_numbers_are_constant_components(self):
        p = PointFunc(1.0, id(SCALAR), 3.0)
        assert p.call(2.0) == Point(1.0, 2.0, 3.0)

    def test_immutable(self):
        p = circle()
        with pytest.raises(AttributeError):
            p.x = zero()

    def test_cylinder(self):
        shape = pair(SCALAR, SCALAR)
        p = PointFunc(Func(lambda ah: math.cos(ah[0]), shape),
                      Func(lambda ah: math.sin(ah[0]), shape),
                      zero())
        q = PointFunc(zero(), zero(), Func(lambda ah: ah[1], shape))
        r = p + q
        assert r.call((0.0, 0.0)) == Point(1.0, 0.0, 0.0)
        assert r.call((0.0, 1.0)) == Point(1.0, 0.0, 1.0)

    def test_lift(self):
        r = circle().lift_right() + z_axis().lift_left()
        assert r.shape == pair(SCALAR, SCALAR)
        assert r.call((0.0, 0.0)) == Point(1.0, 0.0, 0.0)
        assert r.call((0.0, 1.0)) == Point(1.0, 0.0, 1.0)

    def test_mul_scalar(self):
        q = circle() * 0.5
        assert q.x(0.0) == 0.5
        assert q.y(0.0) == 0.0
        assert abs(q.x(0.25)) < 1e-10
        assert q.y(0.25) == 0.5

    def test_disc(self):
        r = circle().lift_right() * lift_left(id())
        r1 = r.call((0.0, 1.0))
        assert r1.x == 1.0
        assert r1.y == 0.0
        r2 = r.call((0.25, 0.75))
        assert abs(r2.x) < 1e-10
        assert r2.y == 0.75

    def test_as_array(self):
        r = circle().lift_right().as_array()
        assert r.shape == array(SCALAR, 2)
        assert r.call([0.0, 0.0]) == Point(1.0, 0.0, 0.0)
        with pytest.raises(ShapeError):
            circle().as_array()

    def test_const(self):
        p = PointFunc.const([0.0, 0.0, 0.0], array(SCALAR, 2))
        assert p.shape == array(SCALAR, 2)
        assert p.call([0.3, 0.4]) == Point(0.0, 0.0, 0.0)
        with pytest.raises(ValueError):
            PointFunc.const([1.0, 2.0])

    def test_numpy_vector_is_constant_function(self):
        lifted = np.array([0.0, 0.0, 1.0]) + circle()
        assert isinstance(lifted, PointFunc)
        assert lifted.shape == SCALAR
        assert lifted.call(0.0) == Point(1.0, 0.0, 1.0)
        scaled = np.array([2.0, 2.0, 0.0]) * circle()
        assert scaled.call(0.0) == Point(2.0, 0.0, 0.0)

    def test_map_through_func(self):
        doubled = x_axis().map(Func(lambda i: i * 2.0, INDEX))
        assert doubled.shape == INDEX
        assert doubled.call(3) == Point(6.0, 0.0, 0.0)
        with pytest.raises(ShapeError):
            doubled.call(1.5)

    def test_from_callable(self):
        p = PointFunc.from_callable(lambda t: Point(t, 2.0 * t, 3.0 * t), SCALAR)
        assert p.call(1.0) == Point(1.0, 2.0, 3.0)
        q = PointFunc.from_callable(lambda t: [t, t, t], SCALAR)
        assert q.call(2.0) == Point(2.0, 2.0, 2.0)

    def test_map(self):
        p = circle().map(lambda t: t + 0.25)
        assert p.shape == SCALAR
        assert p.call(0.0).y == 1.0
        q = x_axis().map(lambda i: i * 2.0, INDEX)
        assert q.shape == INDEX
        assert q.call(3) == Point(6.0, 0.0, 0.0)


class TestShapeMismatch:

    def test_mismatched_point_functions(self):
        with pytest.raises(ShapeError):
            circle() + ground_plane()

    def test_mismatched_components(self):
        with pytest.raises(ShapeError):
            PointFunc(Func(lambda t: t, SCALAR), Func(lambda i: float(i), INDEX), zero())

    def test_call_with_wrong_parameter(self):
        with pytest.raises(ShapeError):
            circle().call((0.0, 1.0))
        with pytest.raises(ShapeError):
            ground_plane().call((0.0, 1.0, 2.0))

    def test_diff_needs_scalar_parameter(self):
        with pytest.raises(ShapeError):
            circle().lift_right().diff(1e-6)


class TestInterpolation:

    def test_line(self):
        p = circle().lift_right()
        q = Point(0.0, 0.0, 0.0)
        t = lift_left(id())
        r1 = line(p, q, t)
        r2 = line(q, p, t)
        assert r1.call((0.0, 0.0)) == Point(1.0, 0.0, 0.0)
        assert r1.call((0.0, 1.0)) == Point(0.0, 0.0, 0.0)
        assert r2.call((0.0, 0.0)) == Point(0.0, 0.0, 0.0)
        assert r2.call((0.0, 1.0)) == Point(1.0, 0.0, 0.0)

    def test_qbez(self):
        # three circles transported along a line
        a = (circle() + [0.0, 0.0, 0.0]).lift_right()
        b = (circle() + [0.5, 0.0, 0.0]).lift_right()
        c = (circle() + [1.0, 0.0, 0.0]).lift_right()
        t = lift_left(id())
        r = qbez(a, b, c, t)
        assert r.call((0.0, 0.0)) == Point(1.0, 0.0, 0.0)
        assert r.call((0.0, 0.5)) == Point(1.5, 0.0, 0.0)
        assert r.call((0.0, 1.0)) == Point(2.0, 0.0, 0.0)
        r1 = r.call((0.25, 0.0))
        assert abs(r1.x) < 1e-7
        assert r1.y == 1.0
        r2 = r.call((0.25, 0.5))
        assert r2.x == pytest.approx(0.5)
        assert r2.y == pytest.approx(1.0)

    def test_cbez(self):
        a = (circle() - [0.0, 0.0, 0.0]).lift_right()
        b = (circle() - [0.5, 0.0, 0.0]).lift_right()
        c = (circle() - [1.0, 0.0, 0.0]).lift_right()
        t = lift_left(id())
        r = cbez(a, b, b, c, t)
        assert r.shape == pair(SCALAR, SCALAR)
        assert r.call((0.0, 0.0)).x == 1.0
        assert r.call((0.0, 0.5)).x == 0.5
        assert r.call((0.0, 1.0)).x == 0.0


class TestVectorOps:

    def test_dot(self):
        a = PointFunc.const([1.0, 0.0, 0.0], SCALAR)
        b = PointFunc.const([0.5, 0.5, 0.0], SCALAR)
        assert a.dot(b)(0.0) == 0.5
        assert a.dot([2.0, 0.0, 0.0])(0.0) == 2.0
        assert Point(0.0, 2.0, 0.0).dot(circle())(0.25) == pytest.approx(2.0)

    def test_cross(self):
        a = circle()
        b = circle().map(lambda t: t + 0.25)
        c = a.cross(b)
        c1 = c.call(0.0)
        assert c1 == Point(0.0, 0.0, 1.0)
        c2 = c.call(0.25)
        assert c2.x == pytest.approx(0.0)
        assert c2.y == pytest.approx(0.0)
        assert c2.z == pytest.approx(1.0)

    def test_diff(self):
        da = circle().diff(1e-8)
        a1 = da.call(0.0)
        assert abs(a1.x) < 1e-6
        assert abs(a1.y - TAU) < 1e-5
        assert a1.z == 0.0
        a2 = da.call(0.25)
        assert abs(a2.x + TAU) < 1e-6
        assert abs(a2.y) < 1e-5
        assert a2.z == 0.0

    def test_diff_zero_step_is_nan(self):
        d = circle().diff(0.0).call(0.0)
        assert math.isnan(d.x)
        assert math.isnan(d.y)
        assert math.isnan(d.z)

    def test_norm(self):
        a = circle()
        b = a.norm()
        assert b(0.0) == 1.0
        assert b(0.25) == 1.0
        for i in range(40):
            assert b(i / 40.0) == pytest.approx(1.0)
        unit = a / b
        assert unit.call(0.0) == Point(1.0, 0.0, 0.0)
        assert (a / 2.0).call(0.0) == Point(0.5, 0.0, 0.0)

    def test_division_by_zero_function(self):
        p = (circle() / zero()).call(0.0)
        assert p.x == math.inf
        assert math.isnan(p.y)
        assert math.isnan(p.z)

    def test_step(self):
        a = circle() * step()
        assert a.call(-0.001) == Point(0.0, 0.0, 0.0)
        assert a.call(0.0) == Point(1.0, 0.0, 0.0)

    def test_floor(self):
        a = circle() * floor()
        assert a.call(-2.0).x == -2.0
        assert a.call(-1.0).x == -1.0
        assert a.call(0.0).x == 0.0
        assert a.call(1.0).x == 1.0


class TestConstructors:

    def test_circle_is_unit(self):
        c = circle()
        for i in range(24):
            p = c.call(i / 24.0)
            assert p.x * p.x + p.y * p.y == pytest.approx(1.0)
            assert p.z == 0.0

    def test_circle_non_finite_angle(self):
        p = circle().call(math.inf)
        assert math.isnan(p.x)
        assert math.isnan(p.y)

    def test_circle_radians(self):
        p = circle_radians().call(math.pi / 2.0)
        assert p.x == pytest.approx(0.0)
        assert p.y == 1.0

    def test_zig_zag(self):
        a = zig_zag()
        expected = [
            (0.0, (0.0, 0.0)),
            (0.5, (0.5, 0.0)),
            (1.0, (1.0, 0.0)),
            (1.5, (1.0, 0.5)),
            (2.0, (1.0, 1.0)),
            (2.5, (1.5, 1.0)),
            (3.0, (2.0, 1.0)),
            (3.5, (2.0, 1.5)),
            (4.0, (2.0, 2.0)),
        ]
        for t, (x, y) in expected:
            p = a.call(t)
            assert (p.x, p.y, p.z) == (x, y, 0.0), t

    def test_zag_zig_mirrors_zig_zag(self):
        for i in range(17):
            t = i / 4.0
            p = zig_zag().call(t)
            q = zag_zig().call(t)
            assert (q.x, q.y) == (p.y, p.x)

    def test_axes(self):
        assert x_axis().call(2.0) == Point(2.0, 0.0, 0.0)
        assert y_axis().call(2.0) == Point(0.0, 2.0, 0.0)
        assert z_axis().call(2.0) == Point(0.0, 0.0, 2.0)
        assert x_axis().shape == SCALAR

    def test_ground_plane_and_space(self):
        assert ground_plane().shape == array(SCALAR, 2)
        assert ground_plane().call([1.0, 2.0]) == Point(1.0, 2.0, 0.0)
        assert space().shape == array(SCALAR, 3)
        assert space().call([1.0, 2.0, 3.0]) == Point(1.0, 2.0, 3.0)
