"""Shared type definitions for the geometry primitives."""
import numbers
from typing import Any, NamedTuple

Number = int | float

class Pair(NamedTuple):
    """A single point given as separate X and Y coordinates."""
    x: Number; y: Number

class Points(NamedTuple):
    """A list of points, each expected to be a Vector2D."""
    items: tuple[Any, ...]

Coordinates = Pair | Points


def coordinates(args: tuple) -> Coordinates:
    """Classify variadic drawing arguments: a bare (x, y) pair or a list of points."""
    if len(args) == 2 and is_number(args[0]):
        return Pair(args[0], args[1])
    return Points(tuple(args))


def is_number(value) -> bool:
    """True for real numbers (numpy scalars included), bool excluded."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)
