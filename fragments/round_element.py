"""Full circle outline for round track elements."""
import logging

from geom.angles import STRAIGHT_ANGLE
from geom.path import SVGPath
from geom.vector import Vector2D

logger = logging.getLogger(__name__)


def round_element_path(x: float = 0, y: float = 0, radius: float = 0, addition: float = 0) -> SVGPath:
    """Circle of radius ``radius + addition`` around (x, y), drawn as two half arcs."""
    actual_radius = radius + addition
    center = Vector2D(x, y)
    start = center.add_scalar_x(actual_radius)
    end = center.sub_scalar_x(actual_radius)
    logger.debug(f"round element at {center} r={actual_radius}")

    return (SVGPath()
            .move_to(start)
            .arc_curve_to(actual_radius, STRAIGHT_ANGLE, end)
            .arc_curve_to(actual_radius, STRAIGHT_ANGLE, start)
            .close())
