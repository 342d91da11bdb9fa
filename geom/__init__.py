"""Geometry primitives: vectors, polygons, angle math and SVG paths."""

from .errors import GeometryTypeError, GeometryIndexError, FrozenVectorError, validate_callback
from .types import Number, Pair, Points, Coordinates, coordinates, is_number
from .angles import (
    RIGHT_ANGLE, STRAIGHT_ANGLE, CIRCLE, DEGREES_PER_RADIANS, EPSILON,
    js_round, adjust, to_radians, to_degrees, abs_degrees, degrees,
    quadrant, quadrant_angle, quadrant_range, circumference,
    get_arc_width, get_arc_angle,
    get_chord_width, get_chord_distance, get_chord_height, get_chord_angle,
    enlarge_arc, enlarge_chord,
)
from .svg import format_number, SVGPathCommand, rotate, git_describe, W, H
from .vector import Vector2D
from .polygon import Polygon2D
from .path import SVGPath
from .logging_config import setup_logging
