import logging
from typing import NamedTuple, SupportsFloat, SupportsInt

import numpy
from numpy.typing import ArrayLike, NDArray

from ._convolve import convolve_horizontal, convolve_vertical
from ._errors import InvalidParameter
from ._kernel import gaussian_kernel, kernel_extent
from ._plane import PaddedPlane
from ._strength import FLAT_SCORE, feature_strength
from ._tensor import _check_size, scan_region, structure_tensor

logger = logging.getLogger(__name__)


class FeatureMaps(NamedTuple):
    smoothed: NDArray[numpy.float32]
    tensor: NDArray[numpy.float32]
    strength: NDArray[numpy.float32]


def _channels(data):
    data = numpy.asarray(data)
    if data.ndim not in (2, 3) or data.size == 0:
        raise InvalidParameter(
            "data", f"expected a non-empty 2D or channel-last 3D array, got shape {data.shape}"
        )
    if data.ndim == 2:
        return data[..., numpy.newaxis]
    return data


def _check_extent(extent, height, width):
    if extent >= min(height, width):
        raise InvalidParameter(
            "scale",
            f"kernel extent {extent} needs an image larger than {height}x{width}",
        )


def _smooth_plane(channel, kernel):
    extent = kernel.size // 2
    height, width = channel.shape

    source = PaddedPlane.from_array(channel, border=extent)
    source.extend_borders()
    intermediate = PaddedPlane(height, width, border=extent)
    convolve_vertical(source, intermediate, kernel)
    # The vertical pass only writes the interior.
    intermediate.extend_borders()
    output = PaddedPlane(height, width, border=0)
    convolve_horizontal(intermediate, output, kernel)
    return output.interior


def gaussian_smoothing(
    data: ArrayLike, scale: SupportsFloat, *, window_ratio: SupportsFloat = 0.0
) -> NDArray[numpy.float32]:
    channels = _channels(data)
    height, width = channels.shape[:2]
    extent = kernel_extent(scale, window_ratio)
    _check_extent(extent, height, width)

    kernel = gaussian_kernel(scale, window_ratio=window_ratio)
    smoothed = numpy.stack(
        [_smooth_plane(channels[..., n], kernel) for n in range(channels.shape[2])], axis=-1
    )
    logger.debug(
        "smoothed %d channel(s) of %dx%d with sigma=%s, extent=%d",
        channels.shape[2],
        height,
        width,
        scale,
        extent,
    )
    return smoothed.reshape(numpy.shape(data))


def feature_strength_map(
    data: ArrayLike,
    scale: SupportsFloat,
    half_window: SupportsInt,
    search_margin: SupportsInt = 0,
    *,
    window_ratio: SupportsFloat = 0.0,
    channel: SupportsInt = 0,
    flat_value: SupportsFloat = FLAT_SCORE,
) -> FeatureMaps:
    """Smooth every channel, then score one channel by its windowed structure tensor.

    ``strength`` and ``tensor`` are NaN outside the scan region
    ``[half_window + search_margin, dim - (half_window + search_margin))``.
    """
    channels = _channels(data)
    height, width, count = channels.shape
    # Everything is validated before the first plane is allocated.
    _check_extent(kernel_extent(scale, window_ratio), height, width)
    rows, cols = scan_region(height, width, half_window, search_margin)
    channel = _check_size("channel", channel)
    if channel >= count:
        raise InvalidParameter("channel", f"must be in [0, {count}), got {channel!r}")

    logger.debug(
        "feature strength: sigma=%s, H=%s, S=%s, scan rows [%d, %d), cols [%d, %d)",
        scale,
        half_window,
        search_margin,
        rows.start,
        rows.stop,
        cols.start,
        cols.stop,
    )
    smoothed = gaussian_smoothing(data, scale, window_ratio=window_ratio)
    target = smoothed if smoothed.ndim == 2 else smoothed[..., channel]
    tensor = structure_tensor(target, half_window, search_margin=search_margin)
    strength = feature_strength(tensor, flat_value=float(flat_value))
    return FeatureMaps(smoothed, tensor, strength)
