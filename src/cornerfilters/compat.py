import functools

import numpy

from ._core import feature_strength_map, gaussian_smoothing
from ._tensor import structure_tensor

try:
    import vigra
except ModuleNotFoundError:
    vigra = None


def _wrap(func):
    def wrapper(array, *args, **kwargs):
        if not hasattr(array, "axistags"):
            assert all(
                d > 1 for d in array.shape
            ), "Can't handle arrays with singleton dimensions (unless they are tagged VigraArrays)."
            return func(array, *args, **kwargs)

        if vigra is None:
            raise RuntimeError("array has 'axistags', but vigra is not installed")

        squeezed = array.squeeze()
        res = func(squeezed, *args, **kwargs)
        if res.shape == squeezed.shape:
            res = vigra.taggedView(res, squeezed.axistags)
        else:
            res = vigra.taggedView(res, (*squeezed.axistags, vigra.AxisInfo.c))
        return res.withAxes(array.axistags)

    return functools.update_wrapper(wrapper, func)


@_wrap
def gaussianSmoothing(array, sigma, window_size=0.0):
    return gaussian_smoothing(array, sigma, window_ratio=window_size)


@_wrap
def structureTensor(image, halfWindow, searchMargin=0):
    res = structure_tensor(image, halfWindow, search_margin=searchMargin)
    return numpy.moveaxis(res, 0, -1)


@_wrap
def featureStrength(image, sigma, halfWindow, searchMargin=0, window_size=0.0):
    return feature_strength_map(
        image, sigma, halfWindow, searchMargin, window_ratio=window_size
    ).strength
