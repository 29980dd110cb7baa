import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import LabTuple, LchTuple, Scalar
from .to_lab import srgb_to_linear, np_srgb_to_linear

# Linear sRGB -> LMS cone response
OKLAB_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

# Non-linear LMS -> OKLab
OKLAB_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])


def _mat_vec(m: NDArray, v: tuple[float, float, float]) -> tuple[float, float, float]:
    return (
        float(m[0, 0] * v[0] + m[0, 1] * v[1] + m[0, 2] * v[2]),
        float(m[1, 0] * v[0] + m[1, 1] * v[1] + m[1, 2] * v[2]),
        float(m[2, 0] * v[0] + m[2, 1] * v[1] + m[2, 2] * v[2]),
    )


def rgb_to_oklab(r: Scalar, g: Scalar, b: Scalar) -> LabTuple:
    """
    Convert 0-255 sRGB to OKLab.

    Channels are decoded to linear light first, then run through the
    matrix -> cube root -> matrix pipeline.

    Returns:
        Tuple[float, float, float]: (L [0,1], a, b)
    """
    linear = (srgb_to_linear(r / 255), srgb_to_linear(g / 255), srgb_to_linear(b / 255))
    lms = _mat_vec(OKLAB_M1, linear)
    lms_ = tuple(math.copysign(abs(c) ** (1 / 3), c) for c in lms)
    return _mat_vec(OKLAB_M2, lms_)


def oklab_to_oklch(l: float, a: float, b: float) -> LchTuple:
    c = math.hypot(a, b)
    h = math.degrees(math.atan2(b, a))
    if h < 0:
        h += 360
    return l, c, h


def rgb_to_oklch(r: Scalar, g: Scalar, b: Scalar) -> LchTuple:
    """Convert 0-255 sRGB to OKLCH: (L [0,1], chroma, hue in [0, 360))."""
    return oklab_to_oklch(*rgb_to_oklab(r, g, b))


def np_rgb_to_oklch(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert 0-255 sRGB (..., 3) to OKLCH (..., 3).
    """
    linear = np_srgb_to_linear(np.asarray(rgb, dtype=float) / 255)
    lms_ = np.cbrt(linear @ OKLAB_M1.T)
    lab = lms_ @ OKLAB_M2.T
    a, b = lab[..., 1], lab[..., 2]
    h = np.degrees(np.arctan2(b, a))
    h = np.where(h < 0, h + 360, h)
    return np.stack([lab[..., 0], np.hypot(a, b), h], axis=-1)
