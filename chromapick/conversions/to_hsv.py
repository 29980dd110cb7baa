import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import HSVTuple, Scalar


def unit_rgb_to_hsv(r: float, g: float, b: float) -> HSVTuple:
    """
    Convert RGB in [0, 1] to HSV using the 60-degree sector formula.

    Args:
        r: Red component in [0, 1]
        g: Green component in [0, 1]
        b: Blue component in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,100], value [0,100])
        Achromatic input yields hue 0 and saturation 0.
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    if delta == 0:
        return 0.0, 0.0, max_c * 100

    if max_c == r:
        hue = 60 * ((g - b) / delta)
    elif max_c == g:
        hue = 60 * ((b - r) / delta + 2)
    else:
        hue = 60 * ((r - g) / delta + 4)

    return hue % 360, delta / max_c * 100, max_c * 100


def rgb_to_hsv(r: Scalar, g: Scalar, b: Scalar) -> HSVTuple:
    """Convert 0-255 RGB to (hue, saturation %, value %)."""
    return unit_rgb_to_hsv(r / 255, g / 255, b / 255)


def np_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert 0-255 RGB to HSV.

    Args:
        r, g, b: array-like or scalar, [0, 255]

    Returns:
        hsv: array of shape (..., 3): (hue [0,360), saturation [0,100], value [0,100])
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

    chromatic = delta > 0
    safe_delta = np.where(chromatic, delta, 1.0)
    safe_max = np.where(max_c > 0, max_c, 1.0)

    hue = np.select(
        [max_c == r, max_c == g],
        [60 * ((g - b) / safe_delta), 60 * ((b - r) / safe_delta + 2)],
        default=60 * ((r - g) / safe_delta + 4),
    )
    hue = np.where(chromatic, hue % 360, 0.0)
    saturation = np.where(chromatic, delta / safe_max * 100, 0.0)

    return np.stack([hue, saturation, max_c * 100], axis=-1)


def hsl_to_hsv(h: float, s: float, l: float) -> HSVTuple:
    """
    Convert HSL to HSV without going through RGB.

    Args:
        h: Hue in degrees (returned wrapped into [0, 360))
        s: Saturation in [0, 100]
        l: Lightness in [0, 100]

    Returns:
        Tuple[float, float, float]: (hue, saturation [0,100], value [0,100])
    """
    s = s / 100
    l = l / 100
    v = l + s * min(l, 1 - l)
    s_v = 0.0 if v == 0 else 2 * (1 - l / v)
    return h % 360, s_v * 100, v * 100


def np_hsl_to_hsv(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """Vectorized: Convert HSL to HSV."""
    h = np.asarray(h, dtype=float) % 360
    s = np.asarray(s, dtype=float) / 100
    l = np.asarray(l, dtype=float) / 100

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    v = l + s * np.minimum(l, 1 - l)
    safe_v = np.where(v > 0, v, 1.0)
    s_v = np.where(v > 0, 2 * (1 - l / safe_v), 0.0)
    return np.stack([h, s_v * 100, v * 100], axis=-1)
