"""Quarter ring with straight side extensions."""
from geom.path import SVGPath
from geom.vector import Vector2D


def curved_element_enlarged_path(x: float = 0, y: float = 0, width: float = 0, radius: float = 0,
                                 side: float = 0, addition: float = 0) -> SVGPath:
    addition = min(addition, radius)
    outer_radius = radius + width - side + addition
    center = Vector2D(x, y).sub_scalar(addition)

    return (SVGPath()
            .move_to(center.add_scalar_x(radius))
            .elliptical_arc_curve_to(radius, 0, 0, 1, center.add_scalar_y(radius))
            .vertical_line_by(width + addition * 2)
            .horizontal_line_by(side + addition)
            .elliptical_arc_curve_by(outer_radius, 0, 0, 0, Vector2D(outer_radius, -outer_radius))
            .vertical_line_by(-side - addition)
            .close())
