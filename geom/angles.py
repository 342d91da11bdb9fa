"""Angle normalization and arc/chord length-angle conversions.

Angles are plain numbers of degrees. Two normalization domains exist:
``abs_degrees`` maps to [0, 360) while ``degrees`` keeps the sign and only
reduces angles beyond a full turn.
"""
import math

# ============================================================
# Constants
# ============================================================
RIGHT_ANGLE = 90
STRAIGHT_ANGLE = 180
CIRCLE = 360
DEGREES_PER_RADIANS = 180 / math.pi

EPSILON = 1e-13

_LAST_QUADRANT = STRAIGHT_ANGLE + RIGHT_ANGLE
_SHIFT_ANGLE = RIGHT_ANGLE / 2


# ============================================================
# Numeric helpers
# ============================================================
def js_round(number: float) -> float:
    """Round half up, towards positive infinity (Math.round semantics)."""
    if not math.isfinite(number):
        return number
    floor = math.floor(number)
    return floor + 1 if number - floor >= 0.5 else floor

def adjust(number: float) -> float:
    """Snap *number* to its rounded value when closer than EPSILON.

    Neutralizes the drift left by trigonometric functions before comparing
    angles against quadrant edges.
    """
    rounded = js_round(number)
    if abs(rounded - number) <= EPSILON:
        return rounded
    return number


# ============================================================
# Conversions and normalization
# ============================================================
def to_radians(angle: float) -> float:
    """Degrees to radians."""
    return angle / DEGREES_PER_RADIANS

def to_degrees(angle: float) -> float:
    """Radians to degrees."""
    return angle * DEGREES_PER_RADIANS

def abs_degrees(angle: float) -> float:
    """Normalize an angle to [0, 360)."""
    return math.fmod(math.fmod(angle, CIRCLE) + CIRCLE, CIRCLE)

def degrees(angle: float) -> float:
    """Signed normalization: angles within [-360, 360] pass through, others are reduced.

    The result keeps the sign of the input, e.g. -400 gives -40.
    """
    if abs(angle) <= CIRCLE:
        return angle
    return math.fmod(angle, CIRCLE)

def quadrant(angle: float) -> int:
    """Index (0-3) of the quadrant containing the angle."""
    return math.floor(abs_degrees(angle) / RIGHT_ANGLE)

def quadrant_angle(angle: float) -> float:
    """Closest multiple of 90 to the angle.

    Angles past 270 that snap to the 0 edge report 360 instead, so the edge
    stays above the angle at the top of the circle.
    """
    edge = quadrant(adjust(angle) + _SHIFT_ANGLE) * RIGHT_ANGLE
    if not edge and angle > _LAST_QUADRANT:
        return CIRCLE
    return edge

def quadrant_range(start: float, end: float) -> float | None:
    """Quadrant angle strictly inside (start, end), or None.

    The range is expected to be at most 90 degrees wide.
    """
    start_quadrant = quadrant_angle(start)
    end_quadrant = quadrant_angle(end)

    if start < start_quadrant < end:
        return start_quadrant
    if start < end_quadrant < end:
        return end_quadrant
    return None


# ============================================================
# Arcs and chords
# ============================================================
def circumference(radius: float) -> float:
    return 2 * math.pi * radius

def get_arc_width(angle: float, radius: float) -> float:
    """Length of the arc spanned by *angle* on a circle of *radius* (unsigned)."""
    return abs(to_radians(degrees(angle)) * radius)

def get_arc_angle(width: float, radius: float) -> float:
    """Angle of the arc of length *width*; 360 once a full circle is reached, 0 for a null radius."""
    if not radius:
        return 0
    angle = width * CIRCLE / circumference(radius)
    if abs(angle) >= CIRCLE:
        return CIRCLE
    return angle

def get_chord_width(angle: float, radius: float) -> float:
    """Length of the chord subtending *angle* (unsigned)."""
    return abs(2 * radius * math.sin(to_radians(degrees(angle)) / 2))

def get_chord_distance(angle: float, radius: float) -> float:
    """Distance from the center to the chord subtending *angle*."""
    return radius * math.cos(to_radians(degrees(angle)) / 2)

def get_chord_height(angle: float, radius: float) -> float:
    """Sagitta: distance from the chord to the arc."""
    return radius - get_chord_distance(angle, radius)

def get_chord_angle(width: float, radius: float) -> float:
    """Angle subtended by a chord of length *width*; 180 when the chord reaches the diameter."""
    if not radius:
        return 0
    if abs(width) >= 2 * radius:
        return STRAIGHT_ANGLE
    return to_degrees(2 * math.asin(width / (2 * radius)))

def enlarge_arc(angle: float, radius: float, addition: float) -> float:
    """Angle of the arc whose length differs by *addition* from the one spanned by *angle*.

    The length is clamped to [0, circumference], giving 0 or 360 at the ends.
    """
    if not addition:
        return degrees(angle)
    width = get_arc_width(angle, radius) + addition
    if width <= 0:
        return 0
    if width >= circumference(radius):
        return CIRCLE
    return get_arc_angle(width, radius)

def enlarge_chord(angle: float, radius: float, addition: float) -> float:
    """Angle of the chord whose width differs by *addition* from the one subtending *angle*."""
    if not addition:
        return degrees(angle)
    if addition <= -radius:
        return 0
    if addition >= radius:
        return STRAIGHT_ANGLE
    return get_chord_angle(get_chord_width(angle, radius) + addition, radius)
