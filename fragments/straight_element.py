"""Rectangle outline for straight track elements."""
from geom.path import SVGPath


def straight_element_path(x: float = 0, y: float = 0, width: float = 0, height: float = 0,
                          addition: float = 0) -> SVGPath:
    """Rectangle with its top-left corner at (x, y), grown by *addition* on every side."""
    w = width + 2 * addition
    h = height + 2 * addition

    return (SVGPath()
            .move_to(x - addition, y - addition)
            .horizontal_line_by(w)
            .vertical_line_by(h)
            .horizontal_line_by(-w)
            .close())
