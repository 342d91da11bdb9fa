"""Error types raised by the geometry primitives."""


class GeometryTypeError(TypeError):
    """Raised when a value is not an instance of the expected class, or not callable."""


class GeometryIndexError(IndexError):
    """Raised when a list index is out of bounds."""


class FrozenVectorError(AttributeError):
    """Raised when writing to a frozen vector such as Vector2D.ORIGIN."""


def validate_callback(callback) -> None:
    """Raise GeometryTypeError unless *callback* can be called."""
    if not callable(callback):
        raise GeometryTypeError("A callback function is expected!")
