import math
from typing import SupportsFloat

import numpy
from numpy.typing import NDArray

from ._errors import InvalidParameter

DEFAULT_WINDOW_RATIO = 3.0


def _to_float(name, value):
    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise InvalidParameter(name, f"must be a number, got {value!r}") from e


def kernel_extent(scale: SupportsFloat, window_ratio: SupportsFloat = 0.0) -> int:
    scale = _to_float("scale", scale)
    window_ratio = _to_float("window_ratio", window_ratio)
    if not math.isfinite(scale) or scale <= 0:
        raise InvalidParameter("scale", f"must be a positive number, got {scale}")
    if not math.isfinite(window_ratio) or window_ratio < 0:
        raise InvalidParameter("window_ratio", f"must be >= 0, got {window_ratio}")
    if window_ratio == 0:
        window_ratio = DEFAULT_WINDOW_RATIO
    return int(math.ceil(window_ratio * scale))


def gaussian_kernel(
    scale: SupportsFloat, *, window_ratio: SupportsFloat = 0.0
) -> NDArray[numpy.float32]:
    """Sampled 1D Gaussian of the given standard deviation, renormalized to unit DC gain.

    The taps run from ``-extent`` to ``+extent`` where ``extent`` is
    ``ceil(3 * scale)`` unless ``window_ratio`` overrides the factor 3.
    """
    extent = kernel_extent(scale, window_ratio)
    scale = float(scale)
    t = numpy.arange(-extent, extent + 1, dtype=numpy.float64)
    taps = numpy.exp(-(t * t) / (2 * scale * scale)) / (scale * math.sqrt(2 * math.pi))
    taps /= taps.sum()
    return taps.astype(numpy.float32)
