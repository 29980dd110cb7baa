import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSLTuple, Scalar


def unit_rgb_to_hsl(r: float, g: float, b: float) -> HSLTuple:
    """
    Convert RGB in [0, 1] to HSL.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,100], lightness [0,100])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    if delta == 0:
        return 0.0, 0.0, lightness * 100

    saturation = delta / (1 - abs(2 * lightness - 1))

    if max_c == r:
        hue = (60 * ((g - b) / delta) + 360) % 360
    elif max_c == g:
        hue = (60 * ((b - r) / delta) + 120) % 360
    else:
        hue = (60 * ((r - g) / delta) + 240) % 360

    return hue, saturation * 100, lightness * 100


def rgb_to_hsl(r: Scalar, g: Scalar, b: Scalar) -> HSLTuple:
    """Convert 0-255 RGB to (hue, saturation %, lightness %)."""
    return unit_rgb_to_hsl(r / 255, g / 255, b / 255)


def np_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert 0-255 RGB to HSL.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,100], lightness [0,100])
    """
    r = np.asarray(r, dtype=float) / 255
    g = np.asarray(g, dtype=float) / 255
    b = np.asarray(b, dtype=float) / 255

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    saturation = np.zeros_like(lightness)
    mask_delta = delta > 0
    saturation[mask_delta] = delta[mask_delta] / (1 - np.abs(2 * lightness[mask_delta] - 1))

    hue = np.zeros_like(max_c)
    mask_r = mask_delta & (max_c == r)
    mask_g = mask_delta & (max_c == g) & ~mask_r
    mask_b = mask_delta & ~mask_r & ~mask_g

    hue[mask_r] = (60 * ((g[mask_r] - b[mask_r]) / delta[mask_r]) + 360) % 360
    hue[mask_g] = (60 * ((b[mask_g] - r[mask_g]) / delta[mask_g]) + 120) % 360
    hue[mask_b] = (60 * ((r[mask_b] - g[mask_b]) / delta[mask_b]) + 240) % 360

    return np.stack([hue, saturation * 100, lightness * 100], axis=-1)


def hsv_to_hsl(h: float, s: float, v: float) -> HSLTuple:
    """
    Convert HSV to HSL without going through RGB.

    Args:
        h: Hue in degrees (returned wrapped into [0, 360))
        s: Saturation in [0, 100]
        v: Value in [0, 100]

    Returns:
        Tuple[float, float, float]: (hue, saturation [0,100], lightness [0,100])
    """
    s = s / 100
    v = v / 100
    l = v * (1 - s / 2)
    if l <= 0 or l >= 1:
        s_l = 0.0
    else:
        s_l = (v - l) / min(l, 1 - l)
    return h % 360, s_l * 100, l * 100


def np_hsv_to_hsl(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized: Convert HSV to HSL."""
    h = np.asarray(h, dtype=float) % 360
    s = np.asarray(s, dtype=float) / 100
    v = np.asarray(v, dtype=float) / 100

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    l = v * (1 - s / 2)
    interior = (l > 0) & (l < 1)
    denom = np.where(interior, np.minimum(l, 1 - l), 1.0)
    s_l = np.where(interior, (v - l) / denom, 0.0)
    return np.stack([h, s_l * 100, l * 100], axis=-1)
