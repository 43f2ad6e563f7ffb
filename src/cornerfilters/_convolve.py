import enum

import numpy
from numpy.typing import ArrayLike

from ._errors import PreconditionViolation
from ._plane import PaddedPlane


class Axis(enum.Enum):
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


def _check_kernel(kernel):
    kernel = numpy.asarray(kernel, dtype=numpy.float32)
    if kernel.ndim != 1 or kernel.size % 2 != 1:
        raise PreconditionViolation(
            "convolve", f"kernel must be 1D with an odd number of taps, got shape {kernel.shape}"
        )
    return kernel


def convolve(source: PaddedPlane, target: PaddedPlane, kernel: ArrayLike, axis: Axis) -> None:
    """Filter ``source`` along ``axis`` with a centered 1D kernel, writing the interior of ``target``.

    ``source`` must already have its borders extended. ``target`` may be
    smaller than ``source`` (a crop anchored at the origin) but never larger.
    """
    kernel = _check_kernel(kernel)
    extent = kernel.size // 2
    if not isinstance(axis, Axis):
        raise PreconditionViolation("convolve", f"unknown axis {axis!r}")
    if source is target:
        raise PreconditionViolation("convolve", "source and target must be distinct planes")
    if source.border < extent:
        raise PreconditionViolation(
            "convolve", f"source border {source.border} is smaller than kernel extent {extent}"
        )
    if target.height > source.height or target.width > source.width:
        raise PreconditionViolation(
            "convolve",
            f"target {target.height}x{target.width} exceeds source {source.height}x{source.width}",
        )

    h, w = target.height, target.width
    acc = numpy.zeros((h, w), dtype=numpy.float32)
    for t, weight in zip(range(-extent, extent + 1), kernel):
        if axis is Axis.VERTICAL:
            acc += weight * source.region(t, t + h, 0, w)
        else:
            acc += weight * source.region(0, h, t, t + w)
    target.interior[...] = acc


def convolve_vertical(source: PaddedPlane, target: PaddedPlane, kernel: ArrayLike) -> None:
    convolve(source, target, kernel, Axis.VERTICAL)


def convolve_horizontal(source: PaddedPlane, target: PaddedPlane, kernel: ArrayLike) -> None:
    convolve(source, target, kernel, Axis.HORIZONTAL)
