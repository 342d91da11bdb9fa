"""Ring segment outline for curved track elements."""
import logging

from geom.angles import RIGHT_ANGLE, enlarge_arc
from geom.path import SVGPath
from geom.vector import Vector2D

logger = logging.getLogger(__name__)


def curved_element_path(x: float = 0, y: float = 0, width: float = 0, radius: float = 0,
                        angle: float = 0, rotation: float = 0, addition: float = 0) -> SVGPath:
    """Ring segment between ``radius`` and ``radius + width`` spanning *angle* degrees.

    Both edges grow by twice *addition* (at most *radius*) along their length and
    stay centered on the original span. A right-angle segment keeps its
    inner arc and moves its center by -addition on both axes instead.
    """
    addition = min(addition, radius)
    center = Vector2D(x, y)

    if angle == RIGHT_ANGLE:
        inner_radius = radius
        inner_angle = angle
        inner_center = center.sub_scalar(addition)
    else:
        inner_radius = radius - addition
        inner_angle = enlarge_arc(angle, inner_radius, addition * 2)
        inner_center = center

    inner_start = rotation + (angle - inner_angle) / 2
    inner_end = inner_start + inner_angle

    outer_radius = radius + width + addition
    outer_angle = enlarge_arc(angle, outer_radius, addition * 2)
    outer_start = rotation + (angle - outer_angle) / 2
    outer_end = outer_start + outer_angle
    logger.debug(f"curved element inner={inner_radius}@{inner_angle} outer={outer_radius}@{outer_angle}")

    return (SVGPath()
            .polar_move_to(inner_radius, inner_start, inner_center)
            .arc_curve_to(inner_radius, -inner_angle, Vector2D.polar(inner_radius, inner_end, inner_center))
            .polar_line_to(outer_radius, outer_end, center)
            .arc_curve_to(outer_radius, outer_angle, Vector2D.polar(outer_radius, outer_start, center))
            .close())
