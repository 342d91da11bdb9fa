"""Immutable-by-convention 2D vector with arithmetic, rotation and line intersection."""
import math

import numpy as np

from .angles import js_round, to_degrees, to_radians
from .errors import FrozenVectorError, GeometryTypeError
from .svg import format_number


def _div(a: float, b: float) -> float:
    """IEEE-754 division: a zero divisor yields inf or nan instead of raising."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.divide(a, b, dtype=np.float64))

def _x(value) -> float:
    return value.x if isinstance(value, Vector2D) else value

def _y(value) -> float:
    return value.y if isinstance(value, Vector2D) else value


class Vector2D:
    """A 2D point or vector.

    Every operation returns a new vector. Only ``set``, ``set_x``,
    ``set_y``, ``copy``, ``copy_x`` and ``copy_y`` change the instance in
    place, and they refuse to touch a frozen vector.

    Binary operations take either another Vector2D or a scalar. The
    ``_x``/``_y`` variants only affect one axis, the ``_coord`` variants take
    separate coordinates and the ``_scalar`` variants force a scalar operand.
    """
    __slots__ = ("x", "y", "_frozen")

    ORIGIN: "Vector2D"

    def __init__(self, x: float = 0, y: float = 0):
        object.__setattr__(self, "_frozen", False)
        self.x = x
        self.y = y

    def __setattr__(self, name, value):
        if self._frozen:
            raise FrozenVectorError(f"Cannot modify the frozen vector {self!r}")
        object.__setattr__(self, name, value)

    def freeze(self) -> "Vector2D":
        """Forbid any further in-place change. Returns the instance."""
        object.__setattr__(self, "_frozen", True)
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def clone(self) -> "Vector2D":
        return Vector2D(self.x, self.y)

    def get(self) -> dict:
        return self.to_object()

    # --------------------------------------------------------
    # In-place mutators
    # --------------------------------------------------------
    def set(self, x: float, y: float) -> "Vector2D":
        self.x = x
        self.y = y
        return self

    def set_x(self, x: float) -> "Vector2D":
        self.x = x
        return self

    def set_y(self, y: float) -> "Vector2D":
        self.y = y
        return self

    def copy(self, vector: "Vector2D") -> "Vector2D":
        """Copy the coordinates of another vector into this one."""
        return self.set(vector.x, vector.y)

    def copy_x(self, vector: "Vector2D") -> "Vector2D":
        return self.set_x(vector.x)

    def copy_y(self, vector: "Vector2D") -> "Vector2D":
        return self.set_y(vector.y)

    # --------------------------------------------------------
    # Addition
    # --------------------------------------------------------
    def add(self, other) -> "Vector2D":
        return Vector2D(self.x + _x(other), self.y + _y(other))

    def add_x(self, other) -> "Vector2D":
        return Vector2D(self.x + _x(other), self.y)

    def add_y(self, other) -> "Vector2D":
        return Vector2D(self.x, self.y + _y(other))

    def add_coord(self, x: float, y: float) -> "Vector2D":
        return Vector2D(self.x + x, self.y + y)

    def add_scalar(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x + scalar, self.y + scalar)

    def add_scalar_x(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x + scalar, self.y)

    def add_scalar_y(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x, self.y + scalar)

    # --------------------------------------------------------
    # Subtraction
    # --------------------------------------------------------
    def sub(self, other) -> "Vector2D":
        return Vector2D(self.x - _x(other), self.y - _y(other))

    def sub_x(self, other) -> "Vector2D":
        return Vector2D(self.x - _x(other), self.y)

    def sub_y(self, other) -> "Vector2D":
        return Vector2D(self.x, self.y - _y(other))

    def sub_coord(self, x: float, y: float) -> "Vector2D":
        return Vector2D(self.x - x, self.y - y)

    def sub_scalar(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x - scalar, self.y - scalar)

    def sub_scalar_x(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x - scalar, self.y)

    def sub_scalar_y(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x, self.y - scalar)

    # --------------------------------------------------------
    # Multiplication
    # --------------------------------------------------------
    def mul(self, other) -> "Vector2D":
        return Vector2D(self.x * _x(other), self.y * _y(other))

    def mul_x(self, other) -> "Vector2D":
        return Vector2D(self.x * _x(other), self.y)

    def mul_y(self, other) -> "Vector2D":
        return Vector2D(self.x, self.y * _y(other))

    def mul_coord(self, x: float, y: float) -> "Vector2D":
        return Vector2D(self.x * x, self.y * y)

    def mul_scalar(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y * scalar)

    def mul_scalar_x(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x * scalar, self.y)

    def mul_scalar_y(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x, self.y * scalar)

    # --------------------------------------------------------
    # Division (never raises on zero)
    # --------------------------------------------------------
    def div(self, other) -> "Vector2D":
        return Vector2D(_div(self.x, _x(other)), _div(self.y, _y(other)))

    def div_x(self, other) -> "Vector2D":
        return Vector2D(_div(self.x, _x(other)), self.y)

    def div_y(self, other) -> "Vector2D":
        return Vector2D(self.x, _div(self.y, _y(other)))

    def div_coord(self, x: float, y: float) -> "Vector2D":
        return Vector2D(_div(self.x, x), _div(self.y, y))

    def div_scalar(self, scalar: float) -> "Vector2D":
        return Vector2D(_div(self.x, scalar), _div(self.y, scalar))

    def div_scalar_x(self, scalar: float) -> "Vector2D":
        return Vector2D(_div(self.x, scalar), self.y)

    def div_scalar_y(self, scalar: float) -> "Vector2D":
        return Vector2D(self.x, _div(self.y, scalar))

    # --------------------------------------------------------
    # Geometry
    # --------------------------------------------------------
    def negate(self) -> "Vector2D":
        return Vector2D(-self.x, -self.y)

    def ortho(self) -> "Vector2D":
        """Perpendicular vector (x, y) -> (y, -x)."""
        return Vector2D(self.y, -self.x)

    def round(self) -> "Vector2D":
        """Round both coordinates half up."""
        return Vector2D(js_round(self.x), js_round(self.y))

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> "Vector2D":
        """Unit vector with the same direction; a null vector gives (1, 0)."""
        l = self.length()
        if l:
            return self.div_scalar(l)
        return Vector2D(1, 0)

    def extend(self, length: float) -> "Vector2D":
        """Same direction, given length."""
        return self.normalize().mul_scalar(length)

    def dot(self, vector: "Vector2D") -> float:
        return self.x * vector.x + self.y * vector.y

    def cross(self, vector: "Vector2D") -> float:
        return self.x * vector.y - self.y * vector.x

    def distance(self, vector: "Vector2D") -> float:
        return math.hypot(self.x - vector.x, self.y - vector.y)

    def angle(self) -> float:
        """Angle towards the X axis, in degrees."""
        return to_degrees(math.atan2(self.y, self.x))

    def angle_with(self, vector: "Vector2D") -> float:
        """Signed angle to another vector, in degrees."""
        return to_degrees(math.atan2(self.cross(vector), self.dot(vector)))

    def project_on(self, vector: "Vector2D") -> "Vector2D":
        normalized = vector.normalize()
        return normalized.mul_scalar(self.dot(normalized))

    def rotate(self, angle: float) -> "Vector2D":
        """Rotate around the origin by *angle* degrees."""
        rad = to_radians(angle)
        cos, sin = math.cos(rad), math.sin(rad)
        return Vector2D(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def rotate_to(self, angle: float) -> "Vector2D":
        """Rotate around the origin so the vector points at *angle* degrees."""
        return self.rotate(angle - self.angle())

    def rotate_around(self, angle: float, center: "Vector2D") -> "Vector2D":
        return self.sub(center).rotate(angle).add(center)

    def rotate_around_to(self, angle: float, center: "Vector2D") -> "Vector2D":
        v = self.sub(center)
        return v.rotate(angle - v.angle()).add(center)

    def equals(self, vector: "Vector2D") -> bool:
        """Exact coordinate equality."""
        return self.x == vector.x and self.y == vector.y

    # --------------------------------------------------------
    # Conversions
    # --------------------------------------------------------
    def to_array(self) -> list:
        return [self.x, self.y]

    def to_object(self) -> dict:
        return {"x": self.x, "y": self.y}

    def __str__(self) -> str:
        return f"{format_number(self.x)},{format_number(self.y)}"

    def __repr__(self) -> str:
        return f"Vector2D({self.x!r}, {self.y!r})"

    def __iter__(self):
        yield self.x
        yield self.y

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector2D):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __add__(self, other):
        return self.add(other)

    def __sub__(self, other):
        return self.sub(other)

    def __mul__(self, other):
        return self.mul(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        return self.div(other)

    def __neg__(self):
        return self.negate()

    # --------------------------------------------------------
    # Factories and validation
    # --------------------------------------------------------
    @classmethod
    def validate_instance(cls, obj) -> None:
        """Raise GeometryTypeError unless *obj* is an instance of the class."""
        if not isinstance(obj, cls):
            raise GeometryTypeError(f"The object must be an instance of {cls.__name__}!")

    @staticmethod
    def vector(x: float = 0, y: float = 0) -> "Vector2D":
        return Vector2D(x, y)

    @staticmethod
    def polar(radius: float = 0, angle: float = 0, center: "Vector2D | None" = None) -> "Vector2D":
        """Point at *radius* and *angle* degrees around *center* (the origin by default)."""
        if center is None:
            center = Vector2D.ORIGIN
        rad = to_radians(angle)
        return Vector2D(center.x + math.cos(rad) * radius, center.y + math.sin(rad) * radius)

    @staticmethod
    def from_array(coord=()) -> "Vector2D":
        """Vector from an [x, y] sequence; missing coordinates default to 0."""
        coord = list(coord)
        x = coord[0] if len(coord) > 0 else 0
        y = coord[1] if len(coord) > 1 else 0
        return Vector2D(x, y)

    @staticmethod
    def from_object(coord: dict | None = None) -> "Vector2D":
        coord = coord or {}
        return Vector2D(coord.get("x", 0), coord.get("y", 0))

    @staticmethod
    def intersect(a1: "Vector2D", b1: "Vector2D", a2: "Vector2D", b2: "Vector2D") -> "Vector2D | None":
        """Intersection of the line through (a1, b1) with the line through (a2, b2).

        Returns None when the direction vectors have an exactly null cross
        product (parallel or coincident lines). No tolerance is applied.
        """
        i = b1.sub(a1)
        j = b2.sub(a2)
        n = i.cross(j)
        if n:
            k = -(a1.x * j.y - a2.x * j.y - j.x * a1.y + j.x * a2.y) / n
            return Vector2D(a1.x + k * i.x, a1.y + k * i.y)
        return None


Vector2D.ORIGIN = Vector2D().freeze()
