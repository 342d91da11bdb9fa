"""Tests for geom/polygon.py."""
import numpy as np
import pytest
from geom.errors import GeometryIndexError, GeometryTypeError
from geom.polygon import Polygon2D
from geom.vector import Vector2D


class TestConstruction:
    def test_empty(self):
        p = Polygon2D()
        assert len(p) == 0
        assert p.length == 0
        assert str(p) == ""

    def test_from_pairs(self, points4):
        assert len(points4) == 4
        assert points4.get(0) == Vector2D(1, 2)
        assert str(points4) == "1,2 3,4 5,6 7,8"

    def test_from_vectors_and_polygons(self, points4):
        p = Polygon2D([Vector2D(0, 0), points4, [9, 9]])
        assert len(p) == 6
        assert p.get(5) == Vector2D(9, 9)

    def test_rejects_other_values(self):
        with pytest.raises(GeometryTypeError, match="instance of Vector2D!"):
            Polygon2D([Vector2D(), "nope"])


class TestAccess:
    def test_get_out_of_range(self, points4):
        assert points4.get(4) is None
        assert points4.get(-1) is None

    def test_set(self, points4):
        assert points4.set(1, Vector2D(0, 0)) is points4
        assert points4.get(1) == Vector2D(0, 0)

    def test_set_out_of_bounds(self, points4):
        with pytest.raises(GeometryIndexError, match="out of bounds"):
            points4.set(4, Vector2D())
        with pytest.raises(IndexError):
            points4.set(-1, Vector2D())

    def test_set_validates_point(self, points4):
        with pytest.raises(GeometryTypeError):
            points4.set(0, [1, 2])
        assert points4.get(0) == Vector2D(1, 2)

    def test_iteration(self, points4):
        assert [p.x for p in points4] == [1, 3, 5, 7]
        assert list(points4.values()) == points4.to_array()


class TestMutation:
    def test_add(self):
        p = Polygon2D().add(Vector2D(1, 1), Vector2D(2, 2)).add_point(3, 3)
        assert str(p) == "1,1 2,2 3,3"

    def test_insert(self, points4):
        points4.insert(1, Vector2D(0, 0)).insert_point(0, 9, 9)
        assert str(points4) == "9,9 1,2 0,0 3,4 5,6 7,8"

    def test_insert_negative_index(self, points4):
        points4.insert(-1, Vector2D(0, 0))
        assert str(points4) == "1,2 3,4 5,6 0,0 7,8"

    def test_delete(self, points4):
        assert points4.delete(1) == 1
        assert str(points4) == "1,2 5,6 7,8"
        assert points4.delete(-1) == 1
        assert str(points4) == "1,2 5,6"

    def test_delete_clamps(self, points4):
        assert points4.delete(10) == 0
        assert points4.delete(2, 10) == 2
        assert points4.delete(0, 0) == 0
        assert str(points4) == "1,2 3,4"

    def test_clear(self, points4):
        assert points4.clear() is points4
        assert len(points4) == 0

    def test_load(self, points4):
        points4.load([Vector2D(1, 1)])
        assert str(points4) == "1,1"

    def test_load_ignores_non_iterables(self, points4):
        assert points4.load(42) is points4
        assert points4.load(None) is points4
        assert len(points4) == 4


class TestCallbacks:
    def test_for_each(self, points4):
        seen = []
        assert points4.for_each(lambda point, index, poly: seen.append((index, poly))) is points4
        assert [i for i, _ in seen] == [0, 1, 2, 3]
        assert all(poly is points4 for _, poly in seen)

    def test_map(self, points4):
        assert points4.map(lambda point, index, poly: point.x + index) == [1, 4, 7, 10]

    def test_callback_required(self, points4):
        with pytest.raises(GeometryTypeError, match="callback function is expected"):
            points4.for_each(None)
        with pytest.raises(GeometryTypeError, match="callback function is expected"):
            points4.map("x")


class TestTransforms:
    def test_translate(self, points4):
        points4.translate(Vector2D(1, -2))
        assert str(points4) == "2,0 4,2 6,4 8,6"

    def test_rotate(self, square):
        square.rotate(90)
        p = square.get(1)
        assert abs(p.x) < 1e-10 and abs(p.y - 10) < 1e-10

    def test_rotate_around(self, square):
        square.rotate_around(180, Vector2D(5, 5))
        p = square.get(0)
        assert abs(p.x - 10) < 1e-10 and abs(p.y - 10) < 1e-10

    def test_area(self, square, points4):
        assert square.area() == 100
        assert points4.area() == 0
        assert Polygon2D([[0, 0], [1, 1]]).area() == 0

    def test_to_numpy(self, points4):
        a = points4.to_numpy()
        assert a.shape == (4, 2)
        assert np.array_equal(a[:, 0], [1, 3, 5, 7])
        assert Polygon2D().to_numpy().shape == (0, 2)


# --- validation ---

def test_extract_points():
    points = Polygon2D.extract_points([Vector2D(1, 1), [2, 2]])
    assert points == [Vector2D(1, 1), Vector2D(2, 2)]
    with pytest.raises(GeometryTypeError):
        Polygon2D.extract_points(5)


def test_validate_points():
    Polygon2D.validate_points([Vector2D(), Vector2D(1, 1)])
    with pytest.raises(GeometryTypeError, match="instance of Vector2D!"):
        Polygon2D.validate_points([Vector2D(), 1])


def test_validate_instance(square):
    Polygon2D.validate_instance(square)
    with pytest.raises(GeometryTypeError, match="instance of Polygon2D!"):
        Polygon2D.validate_instance([Vector2D()])
