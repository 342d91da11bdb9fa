"""Tests for geom/vector.py."""
import math
import pytest
from geom.errors import FrozenVectorError, GeometryTypeError
from geom.vector import Vector2D


def close(v: Vector2D, x: float, y: float, tol: float = 1e-10) -> bool:
    return abs(v.x - x) < tol and abs(v.y - y) < tol


class TestConstruction:
    def test_defaults_to_origin(self):
        v = Vector2D()
        assert (v.x, v.y) == (0, 0)

    def test_factories(self):
        assert Vector2D.vector(1, 2) == Vector2D(1, 2)
        assert Vector2D.from_array([3]) == Vector2D(3, 0)
        assert Vector2D.from_array((3, 4)) == Vector2D(3, 4)
        assert Vector2D.from_object({"x": 1}) == Vector2D(1, 0)
        assert Vector2D.from_object() == Vector2D(0, 0)

    def test_polar(self):
        assert close(Vector2D.polar(10, 90), 0, 10)
        assert close(Vector2D.polar(10, 180, Vector2D(5, 5)), -5, 5)
        assert Vector2D.polar() == Vector2D.ORIGIN

    def test_conversions(self):
        v = Vector2D(1, 2)
        assert v.to_array() == [1, 2]
        assert v.to_object() == {"x": 1, "y": 2}
        assert v.get() == {"x": 1, "y": 2}
        x, y = v
        assert (x, y) == (1, 2)

    def test_str(self):
        assert str(Vector2D(1.5, -2)) == "1.5,-2"
        assert str(Vector2D(100.0, -0.0)) == "100,0"


class TestArithmetic:
    def test_add_sub(self):
        a, b = Vector2D(1, 2), Vector2D(3, 5)
        assert a.add(b) == Vector2D(4, 7)
        assert a.sub(b) == Vector2D(-2, -3)
        assert a.add(1) == Vector2D(2, 3)
        assert a.add_x(b) == Vector2D(4, 2)
        assert a.sub_y(b) == Vector2D(1, -3)
        assert a.add_coord(1, 1) == Vector2D(2, 3)
        assert a.sub_scalar_x(1) == Vector2D(0, 2)
        assert a.add_scalar_y(3) == Vector2D(1, 5)

    def test_mul_div(self):
        a = Vector2D(2, 4)
        assert a.mul(Vector2D(3, 0.5)) == Vector2D(6, 2)
        assert a.mul_scalar(2) == Vector2D(4, 8)
        assert a.div(2) == Vector2D(1, 2)
        assert a.div_coord(2, 4) == Vector2D(1, 1)
        assert a.div_scalar_y(4) == Vector2D(2, 1)

    def test_div_by_zero_follows_ieee(self):
        v = Vector2D(1, 0).div_scalar(0)
        assert math.isinf(v.x) and v.x > 0
        assert math.isnan(v.y)
        assert Vector2D(-3, 1).div_x(0).x == -math.inf

    def test_operators(self):
        a, b = Vector2D(1, 2), Vector2D(3, 4)
        assert a + b == Vector2D(4, 6)
        assert b - a == Vector2D(2, 2)
        assert a * 3 == Vector2D(3, 6)
        assert 3 * a == Vector2D(3, 6)
        assert b / 2 == Vector2D(1.5, 2)
        assert -a == Vector2D(-1, -2)

    def test_operations_return_new_instances(self):
        a = Vector2D(1, 2)
        b = a.add(0)
        assert b == a and b is not a
        assert a.clone() is not a


class TestGeometry:
    def test_length_distance(self):
        assert Vector2D(3, 4).length() == 5
        assert Vector2D(1, 1).distance(Vector2D(4, 5)) == 5

    def test_normalize(self):
        assert close(Vector2D(3, 4).normalize(), 0.6, 0.8)
        assert Vector2D().normalize() == Vector2D(1, 0)
        assert close(Vector2D(0, 2).extend(5), 0, 5)

    def test_dot_cross(self):
        a, b = Vector2D(1, 2), Vector2D(3, 4)
        assert a.dot(b) == 11
        assert a.cross(b) == -2

    def test_ortho_negate_round(self):
        assert Vector2D(1, 2).ortho() == Vector2D(2, -1)
        assert Vector2D(1, 2).negate() == Vector2D(-1, -2)
        assert Vector2D(1.5, -1.5).round() == Vector2D(2, -1)

    def test_angles(self):
        assert abs(Vector2D(0, 1).angle() - 90) < 1e-10
        assert abs(Vector2D(1, 0).angle_with(Vector2D(0, -1)) - (-90)) < 1e-10

    def test_rotate(self):
        assert close(Vector2D(10, 0).rotate(90), 0, 10)
        assert close(Vector2D(0, 5).rotate_to(0), 5, 0)
        assert close(Vector2D(2, 1).rotate_around(180, Vector2D(1, 1)), 0, 1)
        assert close(Vector2D(1, 3).rotate_around_to(0, Vector2D(1, 1)), 3, 1)

    def test_project_on(self):
        assert close(Vector2D(3, 4).project_on(Vector2D(2, 0)), 3, 0)


# --- intersect ---

def test_intersect():
    p = Vector2D.intersect(Vector2D(405, 0), Vector2D(405, 10), Vector2D(324, 81), Vector2D(314, 81))
    assert p == Vector2D(405, 81)


def test_intersect_parallel_returns_none():
    assert Vector2D.intersect(Vector2D(0, 0), Vector2D(1, 0), Vector2D(0, 1), Vector2D(1, 1)) is None


# --- equality and mutation ---

def test_equality():
    assert Vector2D(1, 2) == Vector2D(1.0, 2.0)
    assert Vector2D(1, 2).equals(Vector2D(1, 2))
    assert Vector2D(1, 2) != Vector2D(2, 1)
    assert Vector2D(1, 2) != (1, 2)


def test_unhashable():
    with pytest.raises(TypeError):
        hash(Vector2D())


def test_in_place_mutators():
    v = Vector2D(1, 2)
    assert v.set(3, 4) is v
    v.set_x(5).set_y(6)
    assert v == Vector2D(5, 6)
    v.copy(Vector2D(7, 8))
    assert v == Vector2D(7, 8)
    v.copy_x(Vector2D(0, 1)).copy_y(Vector2D(1, 0))
    assert v == Vector2D(0, 0)


def test_origin_is_frozen():
    assert Vector2D.ORIGIN.frozen
    with pytest.raises(FrozenVectorError):
        Vector2D.ORIGIN.set_x(1)
    with pytest.raises(AttributeError):
        Vector2D.ORIGIN.y = 1
    assert Vector2D.ORIGIN == Vector2D(0, 0)


def test_freeze():
    v = Vector2D(1, 1)
    assert not v.frozen
    assert v.freeze() is v
    with pytest.raises(FrozenVectorError, match="frozen"):
        v.copy(Vector2D())
    assert v.add(1) == Vector2D(2, 2)


def test_validate_instance():
    Vector2D.validate_instance(Vector2D())
    with pytest.raises(GeometryTypeError, match="instance of Vector2D!"):
        Vector2D.validate_instance((1, 2))
    with pytest.raises(TypeError):
        Vector2D.validate_instance({})
