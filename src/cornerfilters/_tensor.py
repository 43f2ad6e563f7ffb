from typing import Tuple

import numpy
from numpy.lib.stride_tricks import sliding_window_view
from numpy.typing import ArrayLike, NDArray

from ._errors import InvalidParameter
from ._plane import PaddedPlane


def _check_size(name, value):
    try:
        integral = not isinstance(value, bool) and int(value) == value
    except (TypeError, ValueError):
        integral = False
    if not integral or value < 0:
        raise InvalidParameter(name, f"must be a non-negative integer, got {value!r}")
    return int(value)


def scan_region(
    height: int, width: int, half_window: int, search_margin: int = 0
) -> Tuple[slice, slice]:
    """Rows and columns whose accumulation window plus search margin fit inside the image."""
    half_window = _check_size("half_window", half_window)
    search_margin = _check_size("search_margin", search_margin)
    margin = half_window + search_margin
    if 2 * margin >= min(height, width):
        raise InvalidParameter(
            "half_window",
            f"half_window + search_margin = {margin} leaves no pixels to scan in a "
            f"{height}x{width} image",
        )
    return slice(margin, height - margin), slice(margin, width - margin)


def _window_sums(values, rows, cols, half_window):
    # Separable box sum: each output is the (2H+1)^2 window centered on a scan pixel.
    size = 2 * half_window + 1
    block = values[
        rows.start - half_window : rows.stop + half_window,
        cols.start - half_window : cols.stop + half_window,
    ]
    block = sliding_window_view(block, size, axis=0).sum(axis=-1)
    return sliding_window_view(block, size, axis=1).sum(axis=-1)


def structure_tensor(
    data: ArrayLike, half_window: int, *, search_margin: int = 0
) -> NDArray[numpy.float32]:
    """Windowed second-moment matrix of central-difference gradients.

    Returns an array of shape ``(4, height, width)`` holding ``Sxx, Sxy, Syx,
    Syy``, each window sum divided by 4. Only the pixels selected by
    :func:`scan_region` are computed; every other pixel is NaN.
    """
    data = numpy.asarray(data, dtype=numpy.float32)
    if data.ndim != 2 or data.size == 0:
        raise InvalidParameter("data", f"expected a non-empty 2D array, got shape {data.shape}")
    height, width = data.shape
    if min(height, width) < 2:
        raise InvalidParameter(
            "data", f"central differences need at least 2x2 samples, got {height}x{width}"
        )
    rows, cols = scan_region(height, width, half_window, search_margin)
    half_window = int(half_window)

    # One sample of margin covers the central differences at the image edge.
    plane = PaddedPlane.from_array(data, border=1)
    plane.extend_borders()
    gx = plane.region(0, height, 1, width + 1) - plane.region(0, height, -1, width - 1)
    gy = plane.region(1, height + 1, 0, width) - plane.region(-1, height - 1, 0, width)
    gx = gx.astype(numpy.float64)
    gy = gy.astype(numpy.float64)

    sxx = _window_sums(gx * gx, rows, cols, half_window)
    sxy = _window_sums(gx * gy, rows, cols, half_window)
    syy = _window_sums(gy * gy, rows, cols, half_window)

    tensor = numpy.full((4, height, width), numpy.nan, dtype=numpy.float32)
    tensor[0, rows, cols] = sxx / 4
    tensor[1, rows, cols] = sxy / 4
    tensor[2, rows, cols] = sxy / 4
    tensor[3, rows, cols] = syy / 4
    return tensor
