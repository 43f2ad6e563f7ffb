import numpy
import pytest


@pytest.fixture
def rng():
    return numpy.random.default_rng(42)


@pytest.fixture
def flat_image():
    """10x10 single-channel plane of value 100."""
    return numpy.full((10, 10), 100.0, dtype=numpy.float32)


@pytest.fixture
def impulse_image():
    image = numpy.zeros((21, 21), dtype=numpy.float32)
    image[10, 10] = 1.0
    return image


@pytest.fixture
def square_image():
    """20x20 image that is 1 in the bottom-right quadrant starting at (10, 10)."""
    image = numpy.zeros((20, 20), dtype=numpy.float32)
    image[10:, 10:] = 1.0
    return image
