"""Arrow and cross outlines built from rotated polygons."""
import logging

from geom.path import SVGPath
from geom.polygon import Polygon2D
from geom.types import is_number
from geom.vector import Vector2D

logger = logging.getLogger(__name__)


def _place(points: list[Vector2D], x: float, y: float, rotation: float) -> SVGPath:
    """Closed path through *points* rotated by *rotation* then moved to (x, y)."""
    logger.debug(f"{len(points)}-point outline at {x},{y} rotated {rotation}")
    polygon = Polygon2D(points).rotate(rotation).translate(Vector2D(x, y))
    return SVGPath.from_polygon(polygon)


def straight_arrow_path(x: float = 0, y: float = 0, width: float = 0, height: float = 0,
                        thickness: float | None = None, rotation: float = 0) -> SVGPath:
    """Arrow pointing along X, *width* long, with a tip *height* long and wide."""
    if not is_number(thickness):
        thickness = height / 3

    half_h = width / 2
    half_v = height / 2
    half_b = thickness / 2
    arrow_start = half_h - height

    return _place([
        Vector2D(-half_h, half_b),
        Vector2D(arrow_start, half_b),
        Vector2D(arrow_start, half_v),
        Vector2D(half_h, 0),
        Vector2D(arrow_start, -half_v),
        Vector2D(arrow_start, -half_b),
        Vector2D(-half_h, -half_b),
    ], x, y, rotation)


def arrow_tip_path(x: float = 0, y: float = 0, width: float = 0, height: float = 0,
                   rotation: float = 0) -> SVGPath:
    """Notched arrow head pointing along X."""
    half_w = width / 2
    half_h = height / 2

    return _place([
        Vector2D(-half_w / 2, 0),
        Vector2D(-half_w, -half_h),
        Vector2D(half_w, 0),
        Vector2D(-half_w, half_h),
    ], x, y, rotation)


def cross_path(x: float = 0, y: float = 0, width: float = 0, height: float = 0,
               thickness: float | None = None, rotation: float = 0) -> SVGPath:
    if not is_number(thickness):
        thickness = height / 3

    half_w = width / 2
    half_h = height / 2
    half_t = thickness / 2

    return _place([
        Vector2D(half_t, half_t),
        Vector2D(half_t, half_h),
        Vector2D(-half_t, half_h),
        Vector2D(-half_t, half_t),
        Vector2D(-half_w, half_t),
        Vector2D(-half_w, -half_t),
        Vector2D(-half_t, -half_t),
        Vector2D(-half_t, -half_h),
        Vector2D(half_t, -half_h),
        Vector2D(half_t, -half_t),
        Vector2D(half_w, -half_t),
        Vector2D(half_w, half_t),
    ], x, y, rotation)
