"""SVG path builder over a sequence of SVGPathCommand."""
import logging

from .errors import GeometryTypeError
from .polygon import Polygon2D
from .svg import SVGPathCommand
from .types import Pair, coordinates, is_number
from .vector import Vector2D

logger = logging.getLogger(__name__)

# Commands that overwrite the previous one when repeated
REPLACEABLE = frozenset({"M", "Z"})


class SVGPath:
    """Mutable builder for the ``d`` attribute of an SVG path element.

    Absolute (``*_to``) and relative (``*_by``) variants exist for every
    drawing command. Each call returns the instance so calls can be chained,
    including calls that end up adding nothing.

    ``current`` is the end point of the last command. ``start`` is the
    point the pen goes back to on ``close()``: it is re-derived on a move
    while the pen still sits at the subpath start.
    Stored points are frozen copies, so neither the caller nor a path that
    received them through ``add_path`` can change them afterwards.
    """

    def __init__(self):
        self._commands: list[SVGPathCommand] = []
        self._current = Vector2D().freeze()
        self._start = self._current

    # ============================================================
    # Inspection
    # ============================================================
    @property
    def commands(self) -> tuple[SVGPathCommand, ...]:
        return tuple(self._commands)

    @property
    def current(self) -> Vector2D:
        return self._current

    @property
    def start(self) -> Vector2D:
        return self._start

    @property
    def closed(self) -> bool:
        return bool(self._commands) and self._commands[-1].name == "Z"

    @property
    def length(self) -> int:
        return len(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __str__(self) -> str:
        return " ".join(str(command) for command in self._commands)

    def __repr__(self) -> str:
        return f"SVGPath({str(self)!r})"

    # ============================================================
    # Internals
    # ============================================================
    def _extract_points(self, args, filter_duplicate: bool = False,
                        relative: bool = False, group: int = 1) -> list[Vector2D]:
        """Absolute points from drawing arguments.

        Relative points are added to the running previous point, which only
        advances after each complete *group* of points. With
        *filter_duplicate*, a point equal to the previous one is dropped.
        """
        coords = coordinates(args)
        if isinstance(coords, Pair):
            points = [Vector2D(coords.x, coords.y)]
        else:
            points = coords.items

        extracted = []
        previous = self._current
        remaining = group
        for point in points:
            Vector2D.validate_instance(point)
            # stored points are frozen copies, never the caller's vectors
            point = point.add(previous) if relative else point.clone()
            point.freeze()
            if filter_duplicate and point.equals(previous):
                continue
            remaining -= 1
            if not remaining:
                previous = point
                remaining = group
            extracted.append(point)
        return extracted

    def _add_command(self, command: SVGPathCommand) -> None:
        if self._commands and command.name in REPLACEABLE and self._commands[-1].name == command.name:
            self._commands[-1] = command
        else:
            self._commands.append(command)

    def _move(self, point: Vector2D) -> None:
        at_start = self._start is self._current
        self._current = point
        if at_start:
            self._start = self._current

    def _draw(self, name: str, points: list[Vector2D]) -> "SVGPath":
        if points:
            self._current = points[-1]
            self._add_command(SVGPathCommand(name, *points))
        return self

    # ============================================================
    # Move and close
    # ============================================================
    def move_to(self, *points) -> "SVGPath":
        """Move the pen. Consecutive moves collapse into the last one."""
        points = self._extract_points(points)
        if not points:
            return self
        self._move(points[-1])
        self._add_command(SVGPathCommand("M", self._current))
        return self

    def move_by(self, *points) -> "SVGPath":
        points = self._extract_points(points, relative=True)
        if not points:
            return self
        self._move(points[-1])
        self._add_command(SVGPathCommand("M", self._current))
        return self

    def polar_move_to(self, radius: float, angle: float, center: Vector2D = Vector2D.ORIGIN) -> "SVGPath":
        Vector2D.validate_instance(center)
        return self.move_to(Vector2D.polar(radius, angle, center))

    def close(self) -> "SVGPath":
        """Close the subpath and bring the pen back to its start."""
        self._add_command(SVGPathCommand("Z"))
        self._current = self._start
        return self

    # ============================================================
    # Lines
    # ============================================================
    def line_to(self, *points) -> "SVGPath":
        """Straight lines through each point. Points equal to the previous one are dropped."""
        return self._draw("L", self._extract_points(points, filter_duplicate=True))

    def line_by(self, *points) -> "SVGPath":
        return self._draw("L", self._extract_points(points, filter_duplicate=True, relative=True))

    def polar_line_to(self, radius: float, angle: float, center: Vector2D = Vector2D.ORIGIN) -> "SVGPath":
        Vector2D.validate_instance(center)
        return self.line_to(Vector2D.polar(radius, angle, center))

    def horizontal_line_to(self, x=0) -> "SVGPath":
        """Horizontal line to the absolute *x* (a number, or the X of a vector)."""
        point = self._extract_points((x, x))[0]
        if point.x == self._current.x:
            return self
        self._current = Vector2D(point.x, self._current.y).freeze()
        self._commands.append(SVGPathCommand("H", self._current.x))
        return self

    def horizontal_line_by(self, x=0) -> "SVGPath":
        point = self._extract_points((x, x))[0]
        if not point.x:
            return self
        self._current = self._current.add_x(point).freeze()
        self._commands.append(SVGPathCommand("H", self._current.x))
        return self

    def vertical_line_to(self, y=0) -> "SVGPath":
        """Vertical line to the absolute *y* (a number, or the Y of a vector)."""
        point = self._extract_points((y, y))[0]
        if point.y == self._current.y:
            return self
        self._current = Vector2D(self._current.x, point.y).freeze()
        self._commands.append(SVGPathCommand("V", self._current.y))
        return self

    def vertical_line_by(self, y=0) -> "SVGPath":
        point = self._extract_points((y, y))[0]
        if not point.y:
            return self
        self._current = self._current.add_y(point).freeze()
        self._commands.append(SVGPathCommand("V", self._current.y))
        return self

    # ============================================================
    # Bezier curves
    # ============================================================
    def cubic_bezier_curve_to(self, *points) -> "SVGPath":
        """Cubic curves, each given as (control1, control2, end)."""
        return self._draw("C", self._extract_points(points))

    def cubic_bezier_curve_by(self, *points) -> "SVGPath":
        return self._draw("C", self._extract_points(points, relative=True, group=3))

    def smooth_bezier_curve_to(self, *points) -> "SVGPath":
        """Smooth cubic curves, each given as (control2, end)."""
        return self._draw("S", self._extract_points(points))

    def smooth_bezier_curve_by(self, *points) -> "SVGPath":
        return self._draw("S", self._extract_points(points, relative=True, group=2))

    def quadratic_bezier_curve_to(self, *points) -> "SVGPath":
        """Quadratic curves, each given as (control, end)."""
        return self._draw("Q", self._extract_points(points))

    def quadratic_bezier_curve_by(self, *points) -> "SVGPath":
        return self._draw("Q", self._extract_points(points, relative=True, group=2))

    def smooth_quadratic_bezier_curve_to(self, *points) -> "SVGPath":
        return self._draw("T", self._extract_points(points, filter_duplicate=True))

    def smooth_quadratic_bezier_curve_by(self, *points) -> "SVGPath":
        return self._draw("T", self._extract_points(points, filter_duplicate=True, relative=True))

    # ============================================================
    # Arcs
    # ============================================================
    def elliptical_arc_curve_to(self, radius, angle: float, large_arc: int, sweep: int,
                                point: Vector2D) -> "SVGPath":
        """Elliptical arc to *point*.

        *radius* is a number or a Vector2D of both radii, *angle* the
        rotation of the ellipse in degrees, *large_arc* and *sweep* the SVG
        flags (0 or 1).
        """
        if is_number(radius):
            radius = Vector2D(radius, radius)
        Vector2D.validate_instance(radius)
        Vector2D.validate_instance(point)
        radius = radius.clone().freeze()
        self._current = point.clone().freeze()
        self._commands.append(SVGPathCommand("A", radius, angle, large_arc, sweep, self._current))
        return self

    def elliptical_arc_curve_by(self, radius, angle: float, large_arc: int, sweep: int,
                                point: Vector2D) -> "SVGPath":
        if is_number(radius):
            radius = Vector2D(radius, radius)
        Vector2D.validate_instance(radius)
        Vector2D.validate_instance(point)
        radius = radius.clone().freeze()
        self._current = self._current.add(point).freeze()
        self._commands.append(SVGPathCommand("A", radius, angle, large_arc, sweep, self._current))
        return self

    def arc_curve_to(self, radius, angle: float, point: Vector2D) -> "SVGPath":
        """Circular arc spanning *angle* degrees, ending at *point*.

        A positive angle draws counterclockwise on screen (sweep flag 0).
        """
        large_arc = 1 if abs(angle) > 180 else 0
        sweep = 0 if angle > 0 else 1
        return self.elliptical_arc_curve_to(radius, 0, large_arc, sweep, point)

    def arc_curve_by(self, radius, angle: float, point: Vector2D) -> "SVGPath":
        large_arc = 1 if abs(angle) > 180 else 0
        sweep = 0 if angle > 0 else 1
        return self.elliptical_arc_curve_by(radius, 0, large_arc, sweep, point)

    def arc_around(self, angle: float, center: Vector2D) -> "SVGPath":
        """Sweep the pen around *center* by *angle* degrees."""
        Vector2D.validate_instance(center)
        end = self._current.rotate_around(angle, center)
        radius = self._current.distance(center)
        return self.arc_curve_to(radius, -angle, end)

    # ============================================================
    # Composition
    # ============================================================
    def add_path(self, path: "SVGPath") -> "SVGPath":
        """Append the commands of another path, replaying the pen bookkeeping.

        The other path is only read. A repeated M or Z at the boundary is
        merged like it would be within a single path.
        """
        SVGPath.validate_instance(path)
        if not path._commands:
            return self
        logger.debug(f"Appending {len(path._commands)} commands to a path of {len(self._commands)}")
        for command in tuple(path._commands):
            self._add_command(command)
            name = command.name
            if name == "M":
                self._move(command.parameters[-1])
            elif name == "Z":
                self._current = self._start
            elif name == "H":
                self._current = Vector2D(command.parameters[-1], self._current.y).freeze()
            elif name == "V":
                self._current = Vector2D(self._current.x, command.parameters[-1]).freeze()
            else:
                self._current = command.parameters[-1]
        return self

    def add_polygon(self, polygon: Polygon2D) -> "SVGPath":
        """Draw lines through the polygon points, moving to the first one when the path is empty."""
        Polygon2D.validate_instance(polygon)
        points = polygon.points
        if not points:
            return self
        if not self._commands:
            self.move_to(points[0])
        return self.line_to(*points)

    # ============================================================
    # Factories and validation
    # ============================================================
    @classmethod
    def from_polygon(cls, polygon: Polygon2D) -> "SVGPath":
        """Closed path through the points of *polygon*."""
        return cls().add_polygon(polygon).close()

    @classmethod
    def validate_instance(cls, obj) -> None:
        if not isinstance(obj, cls):
            raise GeometryTypeError(f"The object must be an instance of {cls.__name__}!")
