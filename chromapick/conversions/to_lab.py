import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import LabTuple, LchTuple, Scalar, XYZTuple

# sRGB (linear) -> XYZ, D65
SRGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

# D65 reference white
WHITE_D65 = (0.95047, 1.00000, 1.08883)

LAB_EPSILON = 0.008856
LAB_KAPPA = 7.787


def srgb_to_linear(c: float) -> float:
    """Convert nonlinear sRGB (0..1) to linear-light RGB."""
    if c <= 0.04045:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Vectorized: Convert nonlinear sRGB (0..1) to linear-light RGB."""
    c = np.asarray(c, dtype=float)
    return np.where(
        c <= 0.04045,
        c / 12.92,
        ((c + 0.055) / 1.055) ** 2.4
    )


def rgb_to_xyz(r: Scalar, g: Scalar, b: Scalar) -> XYZTuple:
    """
    Convert 0-255 sRGB to CIE XYZ under D65 (Y of white is 1.0).
    """
    rl = srgb_to_linear(r / 255)
    gl = srgb_to_linear(g / 255)
    bl = srgb_to_linear(b / 255)

    m = SRGB_TO_XYZ
    x = rl * m[0, 0] + gl * m[0, 1] + bl * m[0, 2]
    y = rl * m[1, 0] + gl * m[1, 1] + bl * m[1, 2]
    z = rl * m[2, 0] + gl * m[2, 1] + bl * m[2, 2]
    return float(x), float(y), float(z)


def _lab_f(t: float) -> float:
    if t > LAB_EPSILON:
        return t ** (1 / 3)
    return LAB_KAPPA * t + 16 / 116


def xyz_to_lab(x: float, y: float, z: float) -> LabTuple:
    """
    Convert XYZ (D65) to CIE L*a*b*.

    Returns:
        Tuple[float, float, float]: (L [0,100], a, b)
    """
    xn, yn, zn = WHITE_D65
    fx = _lab_f(x / xn)
    fy = _lab_f(y / yn)
    fz = _lab_f(z / zn)
    return 116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)


def lab_to_lch(l: float, a: float, b: float) -> LchTuple:
    """Polar form of the a/b plane: (L, chroma, hue in [0, 360))."""
    c = math.hypot(a, b)
    h = math.degrees(math.atan2(b, a))
    if h < 0:
        h += 360
    return l, c, h


def rgb_to_lab(r: Scalar, g: Scalar, b: Scalar) -> LabTuple:
    return xyz_to_lab(*rgb_to_xyz(r, g, b))


def rgb_to_lch(r: Scalar, g: Scalar, b: Scalar) -> LchTuple:
    return lab_to_lch(*rgb_to_lab(r, g, b))


def np_rgb_to_xyz(rgb: NDArray) -> NDArray:
    """
    Vectorized: Convert 0-255 sRGB to XYZ (D65).

    Args:
        rgb: array of shape (..., 3) in [0, 255]

    Returns:
        xyz: array of shape (..., 3)
    """
    linear = np_srgb_to_linear(np.asarray(rgb, dtype=float) / 255)
    return linear @ SRGB_TO_XYZ.T


def np_xyz_to_lab(xyz: NDArray) -> NDArray:
    """Vectorized: Convert XYZ (..., 3) to LAB (..., 3)."""
    t = np.asarray(xyz, dtype=float) / np.array(WHITE_D65)
    f = np.where(t > LAB_EPSILON, np.cbrt(t), LAB_KAPPA * t + 16 / 116)
    fx, fy, fz = f[..., 0], f[..., 1], f[..., 2]
    return np.stack([116 * fy - 16, 500 * (fx - fy), 200 * (fy - fz)], axis=-1)


def np_lab_to_lch(lab: NDArray) -> NDArray:
    """Vectorized: Convert LAB (..., 3) to LCH (..., 3), hue in [0, 360)."""
    lab = np.asarray(lab, dtype=float)
    a, b = lab[..., 1], lab[..., 2]
    h = np.degrees(np.arctan2(b, a))
    h = np.where(h < 0, h + 360, h)
    return np.stack([lab[..., 0], np.hypot(a, b), h], axis=-1)
