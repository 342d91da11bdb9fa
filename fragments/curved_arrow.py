"""Arrow following a circular arc."""
import logging

from geom.angles import enlarge_arc, get_arc_angle
from geom.path import SVGPath
from geom.types import is_number
from geom.vector import Vector2D

logger = logging.getLogger(__name__)


def curved_arrow_path(x: float = 0, y: float = 0, width: float = 0, height: float = 0,
                      radius: float = 0, angle: float = 0, thickness: float | None = None,
                      clockwise: bool = True, rotation: float = 0) -> SVGPath:
    """Curved arrow around (x, y), its tip centered on *radius*.

    *height* is the radial size of the tip, *thickness* the one of the
    shaft (``height / 3`` when not a number). Without *angle*, the span is
    the angle of an arc of length *width*. The traversal order depends on
    *clockwise* so that both orientations wind the same way.
    """
    if not angle:
        angle = get_arc_angle(width, radius)
    if not is_number(thickness):
        thickness = height / 3

    center = Vector2D(x, y)
    tip_edge_radius = radius
    tip_inner_radius = tip_edge_radius - height / 2
    tip_outer_radius = tip_inner_radius + height
    inner_radius = tip_edge_radius - thickness / 2
    outer_radius = inner_radius + thickness
    body_angle = enlarge_arc(angle, tip_outer_radius, -height)
    logger.debug(f"curved arrow span={angle} body={body_angle} clockwise={clockwise}")

    if clockwise:
        body_start = rotation
        body_end = body_start + body_angle
        tip_start = body_end
        tip_end = body_start + angle
        return (SVGPath()
                .polar_move_to(inner_radius, body_start, center)
                .arc_curve_to(inner_radius, -body_angle, Vector2D.polar(inner_radius, body_end, center))
                .polar_line_to(tip_inner_radius, tip_start, center)
                .polar_line_to(tip_edge_radius, tip_end, center)
                .polar_line_to(tip_outer_radius, tip_start, center)
                .polar_line_to(outer_radius, body_end, center)
                .arc_curve_to(outer_radius, body_angle, Vector2D.polar(outer_radius, body_start, center))
                .close())

    body_end = rotation + angle
    body_start = body_end - body_angle
    tip_end = rotation
    tip_start = body_start
    return (SVGPath()
            .polar_move_to(tip_edge_radius, tip_end, center)
            .polar_line_to(tip_outer_radius, tip_start, center)
            .polar_line_to(outer_radius, body_start, center)
            .arc_curve_to(outer_radius, -body_angle, Vector2D.polar(outer_radius, body_end, center))
            .polar_line_to(inner_radius, body_end, center)
            .arc_curve_to(inner_radius, body_angle, Vector2D.polar(inner_radius, body_start, center))
            .polar_line_to(tip_inner_radius, tip_start, center)
            .close())
