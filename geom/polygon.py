"""Ordered, mutable list of Vector2D points."""
from collections.abc import Callable, Iterable

import numpy as np

from .errors import GeometryIndexError, GeometryTypeError, validate_callback
from .vector import Vector2D


def _flatten(items) -> list:
    """Flatten one level of list/tuple nesting."""
    flat = []
    for item in items:
        if isinstance(item, (list, tuple)):
            flat.extend(item)
        else:
            flat.append(item)
    return flat


class Polygon2D:
    """A polygon as an ordered list of points.

    Every insertion is validated: points must be Vector2D instances, or
    [x, y] pairs and other polygons where the methods accept lists.
    """

    def __init__(self, *points):
        self.points: list[Vector2D] = []
        self.load(_flatten(points))

    @property
    def length(self) -> int:
        return len(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self):
        return iter(self.points)

    def values(self):
        return iter(self.points)

    def for_each(self, walker: Callable) -> "Polygon2D":
        """Call walker(point, index, polygon) on each point."""
        validate_callback(walker)
        for index, point in enumerate(self.points):
            walker(point, index, self)
        return self

    def map(self, mapper: Callable) -> list:
        """List of mapper(point, index, polygon) for each point."""
        validate_callback(mapper)
        return [mapper(point, index, self) for index, point in enumerate(self.points)]

    # ============================================================
    # CRUD
    # ============================================================
    def get(self, index: int) -> Vector2D | None:
        """Point at *index*, or None when out of range."""
        if 0 <= index < len(self.points):
            return self.points[index]
        return None

    def set(self, index: int, point: Vector2D) -> "Polygon2D":
        if index < 0 or index >= len(self.points):
            raise GeometryIndexError("The list index is out of bounds!")
        Vector2D.validate_instance(point)
        self.points[index] = point
        return self

    def insert(self, index: int, *points) -> "Polygon2D":
        """Insert points before *index*. Negative indexes count from the end."""
        self.points[index:index] = self.extract_points(points)
        return self

    def insert_point(self, index: int, x: float, y: float) -> "Polygon2D":
        return self.insert(index, Vector2D(x, y))

    def add(self, *points) -> "Polygon2D":
        self.points.extend(self.extract_points(points))
        return self

    def add_point(self, x: float, y: float) -> "Polygon2D":
        return self.add(Vector2D(x, y))

    def delete(self, index: int, count: int = 1) -> int:
        """Remove *count* points from *index* (list-splice semantics). Returns the number removed."""
        size = len(self.points)
        start = max(size + index, 0) if index < 0 else min(index, size)
        end = start + max(count, 0)
        removed = len(self.points[start:end])
        del self.points[start:end]
        return removed

    def clear(self) -> "Polygon2D":
        self.points = []
        return self

    def load(self, iterable) -> "Polygon2D":
        """Replace the content with the points from *iterable*. Non-iterables are ignored."""
        if not isinstance(iterable, Iterable):
            return self
        self.points = self.extract_points(iterable)
        return self

    # ============================================================
    # Transforms
    # ============================================================
    def translate(self, vector: Vector2D) -> "Polygon2D":
        self.points = [point.add(vector) for point in self.points]
        return self

    def rotate(self, angle: float) -> "Polygon2D":
        """Rotate every point around the origin by *angle* degrees."""
        self.points = [point.rotate(angle) for point in self.points]
        return self

    def rotate_around(self, angle: float, center: Vector2D) -> "Polygon2D":
        self.points = [point.rotate_around(angle, center) for point in self.points]
        return self

    def area(self) -> float:
        """Polygon area via the shoelace formula. Works for either winding order."""
        if len(self.points) < 3:
            return 0.0
        xy = self.to_numpy()
        x, y = xy[:, 0], xy[:, 1]
        return float(abs(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))) / 2)

    # ============================================================
    # Conversions
    # ============================================================
    def to_array(self) -> list[Vector2D]:
        return list(self.points)

    def to_numpy(self) -> np.ndarray:
        """Points as an (n, 2) float array."""
        return np.array([[p.x, p.y] for p in self.points], dtype=float).reshape(-1, 2)

    def __str__(self) -> str:
        return " ".join(str(point) for point in self.points)

    def __repr__(self) -> str:
        return f"Polygon2D({self.points!r})"

    # ============================================================
    # Validation
    # ============================================================
    @classmethod
    def extract_points(cls, points) -> list[Vector2D]:
        """Points from an iterable of Vector2D, [x, y] pairs and polygons (expanded).

        Raises GeometryTypeError on anything else.
        """
        if not isinstance(points, Iterable):
            raise GeometryTypeError("points is not iterable")
        extracted = []
        for p in points:
            if isinstance(p, cls):
                extracted.extend(p.points)
                continue
            if isinstance(p, (list, tuple)):
                p = Vector2D.from_array(p)
            Vector2D.validate_instance(p)
            extracted.append(p)
        return extracted

    @staticmethod
    def validate_points(points) -> None:
        """Raise GeometryTypeError on the first element that is not a Vector2D."""
        for p in points:
            Vector2D.validate_instance(p)

    @classmethod
    def validate_instance(cls, obj) -> None:
        if not isinstance(obj, cls):
            raise GeometryTypeError(f"The object must be an instance of {cls.__name__}!")
