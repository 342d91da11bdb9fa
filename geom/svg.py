"""SVG path commands, number rendering and document helpers."""
import math
import numbers
import subprocess

from .types import is_number

# US Letter landscape at 72 dpi (11" x 8.5")
W, H = 792, 612


# ============================================================
# Number rendering
# ============================================================
def format_number(value) -> str:
    """Render a number the way a JavaScript engine converts it to a string.

    Integral floats drop the fractional part (100.0 -> '100'), -0 renders
    as '0', and exponent notation is only used below 1e-6 or from 1e21 on
    ('1.5e-7', '1e+21'). Booleans render as SVG flags '1'/'0'. Other values
    fall back to str().
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if not is_number(value):
        return str(value)
    return _format_float(float(value))

def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr() gives the shortest digit string that round-trips, as JS does
    mantissa, _, exponent = repr(abs(value)).partition("e")
    whole, _, fraction = mantissa.partition(".")
    raw = whole + fraction
    lead = len(raw) - len(raw.lstrip("0"))
    digits = raw.strip("0")
    k = len(digits)
    n = len(whole) + int(exponent or 0) - lead

    if k <= n <= 21:
        text = digits + "0" * (n - k)
    elif 0 < n <= 21:
        text = digits[:n] + "." + digits[n:]
    elif -6 < n <= 0:
        text = "0." + "0" * -n + digits
    else:
        e = n - 1
        exp = f"e{'+' if e >= 0 else '-'}{abs(e)}"
        text = (digits if k == 1 else digits[0] + "." + digits[1:]) + exp
    return sign + text


# ============================================================
# Path command
# ============================================================
class SVGPathCommand:
    """A single path instruction: a command code and its parameters.

    Parameters are numbers or Vector2D instances. The command is immutable
    once built.
    """
    __slots__ = ("_name", "_parameters")

    def __init__(self, command: str, *parameters):
        self._name = f"{command}"
        self._parameters = tuple(parameters)

    @property
    def name(self) -> str:
        return self._name

    @property
    def parameters(self) -> tuple:
        return self._parameters

    def __str__(self) -> str:
        if not self._parameters:
            return self._name
        return f"{self._name} " + " ".join(_render(p) for p in self._parameters)

    def __repr__(self) -> str:
        return f"SVGPathCommand({str(self)!r})"

def _render(parameter) -> str:
    if is_number(parameter) or isinstance(parameter, bool):
        return format_number(parameter)
    return str(parameter)


# ============================================================
# Document helpers
# ============================================================
def rotate(angle: float = 0, x: float = 0, y: float = 0) -> str:
    """SVG transform attribute value rotating by *angle* degrees around (x, y)."""
    return f"rotate({format_number(angle)} {format_number(x)} {format_number(y)})"

def git_describe(cwd: str | None = None) -> str:
    """Return the ``git describe`` string of the working tree, or 'unknown' outside a repository."""
    try:
        return subprocess.check_output(
            ["git", "describe", "--always", "--dirty=-DEV"],
            cwd=cwd, text=True, stderr=subprocess.DEVNULL,
        ).strip()
    except (subprocess.CalledProcessError, FileNotFoundError):
        return "unknown"
