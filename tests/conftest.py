"""Shared test fixtures for the track geometry tests."""
import logging
import pytest
from geom.logging_config import NAMESPACES
from geom.polygon import Polygon2D
from geom.vector import Vector2D


@pytest.fixture
def points4():
    """Four-point polygon from [x, y] pairs."""
    return Polygon2D([[1, 2], [3, 4], [5, 6], [7, 8]])


@pytest.fixture
def square():
    """10 x 10 square, counterclockwise."""
    return Polygon2D(Vector2D(0, 0), Vector2D(10, 0), Vector2D(10, 10), Vector2D(0, 10))


@pytest.fixture
def reset_logging():
    """Remove the handlers installed by setup_logging once the test is done."""
    yield
    for name in NAMESPACES:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
