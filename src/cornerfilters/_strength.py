import logging

import numpy
from numpy.typing import ArrayLike, NDArray

from ._errors import InvalidParameter

logger = logging.getLogger(__name__)

# Score of a window with no gradient energy at all.
FLAT_SCORE = 0.0


def feature_strength(tensor: ArrayLike, *, flat_value: float = FLAT_SCORE) -> NDArray[numpy.float32]:
    """Reduce ``(4, height, width)`` tensor planes to ``det / trace`` per pixel.

    The score is large only where both eigenvalues of the tensor are large.
    Zero-trace pixels get ``flat_value``; NaN pixels stay NaN.
    """
    tensor = numpy.asarray(tensor, dtype=numpy.float32)
    if tensor.ndim != 3 or tensor.shape[0] != 4:
        raise InvalidParameter("tensor", f"expected shape (4, height, width), got {tensor.shape}")
    sxx, sxy, syx, syy = tensor
    det = sxx * syy - sxy * syx
    trace = sxx + syy
    flat = trace == 0
    with numpy.errstate(divide="ignore", invalid="ignore"):
        score = det / trace
    score[flat] = flat_value
    if flat.any():
        logger.debug("%d flat pixels scored as %s", int(flat.sum()), flat_value)
    return score
