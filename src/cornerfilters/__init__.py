from ._convolve import Axis, convolve, convolve_horizontal, convolve_vertical
from ._core import FeatureMaps, feature_strength_map, gaussian_smoothing
from ._errors import FilterError, InvalidParameter, PreconditionViolation
from ._kernel import gaussian_kernel, kernel_extent
from ._plane import PaddedPlane
from ._strength import FLAT_SCORE, feature_strength
from ._tensor import scan_region, structure_tensor

__all__ = (
    "gaussian_kernel",
    "kernel_extent",
    "PaddedPlane",
    "Axis",
    "convolve",
    "convolve_vertical",
    "convolve_horizontal",
    "gaussian_smoothing",
    "scan_region",
    "structure_tensor",
    "FLAT_SCORE",
    "feature_strength",
    "feature_strength_map",
    "FeatureMaps",
    "FilterError",
    "InvalidParameter",
    "PreconditionViolation",
)
