import math
import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGB
from ..utils.num_utils import normalize_hue, clamp_channel

## HSV to RGB conversions

def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to unrounded RGB using the hexcone sector decomposition.

    Args:
        h: Hue in degrees, any real value (wrapped into [0, 360))
        s: Saturation in [0, 100]
        v: Value in [0, 100]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    s = s / 100
    v = v / 100

    chroma = v * s
    h_prime = h / 60
    x = chroma * (1 - abs(h_prime % 2 - 1))
    m = v - chroma

    sector = int(math.floor(h_prime))
    if sector == 0:
        r, g, b = chroma, x, 0.0
    elif sector == 1:
        r, g, b = x, chroma, 0.0
    elif sector == 2:
        r, g, b = 0.0, chroma, x
    elif sector == 3:
        r, g, b = 0.0, x, chroma
    elif sector == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return r + m, g + m, b + m


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    """Convert HSV (degrees, percent, percent) to an integer RGB triple."""
    r, g, b = hsv_to_unit_rgb(h, s, v)
    return RGB(clamp_channel(r * 255), clamp_channel(g * 255), clamp_channel(b * 255))


def np_hsv_to_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """
    Vectorized: Convert HSV to integer RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 100]
        v: array-like or scalar, value in [0, 100]

    Returns:
        rgb: int array of shape (..., 3) in [0, 255]
    """
    h = np.asarray(h, dtype=float) % 360
    s = np.asarray(s, dtype=float) / 100
    v = np.asarray(v, dtype=float) / 100

    out_shape = np.broadcast(h, s, v).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    v = np.broadcast_to(v, out_shape)

    chroma = v * s
    h_prime = h / 60
    x = chroma * (1 - np.abs(h_prime % 2 - 1))
    m = v - chroma
    zero = np.zeros(out_shape)

    sector = np.floor(h_prime).astype(int)
    conditions = [sector == i for i in range(6)]
    r = np.select(conditions, [chroma, x, zero, zero, x, chroma], default=chroma)
    g = np.select(conditions, [x, chroma, chroma, x, zero, zero], default=zero)
    b = np.select(conditions, [zero, zero, x, chroma, chroma, x], default=x)

    unit = np.stack([r + m, g + m, b + m], axis=-1)
    return _np_scale_to_bytes(unit)

## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to unrounded RGB.
    Based on: https://en.wikipedia.org/wiki/HSL_and_HSV#Converting_to_RGB

    Args:
        h: Hue in degrees, any real value (wrapped into [0, 360))
        s: Saturation in [0, 100]
        l: Lightness in [0, 100]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    h = normalize_hue(h)
    s = s / 100
    l = l / 100

    m1 = l + s * (l if l < 0.5 else 1 - l)
    m2 = m1 - (m1 - l) * 2 * abs(((h / 60) % 2) - 1)
    low = 2 * l - m1

    hue_section = int(math.floor(h / 60))

    if hue_section == 0:
        r, g, b = m1, m2, low
    elif hue_section == 1:
        r, g, b = m2, m1, low
    elif hue_section == 2:
        r, g, b = low, m1, m2
    elif hue_section == 3:
        r, g, b = low, m2, m1
    elif hue_section == 4:
        r, g, b = m2, low, m1
    else:
        r, g, b = m1, low, m2

    return r, g, b


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:
    """Convert HSL (degrees, percent, percent) to an integer RGB triple."""
    r, g, b = hsl_to_unit_rgb(h, s, l)
    return RGB(clamp_channel(r * 255), clamp_channel(g * 255), clamp_channel(b * 255))


def np_hsl_to_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to integer RGB.

    Args:
        h: array-like or scalar, hue in degrees
        s: array-like or scalar, saturation in [0, 100]
        l: array-like or scalar, lightness in [0, 100]

    Returns:
        rgb: int array of shape (..., 3) in [0, 255]
    """
    h = np.asarray(h, dtype=float) % 360
    s = np.asarray(s, dtype=float) / 100
    l = np.asarray(l, dtype=float) / 100

    out_shape = np.broadcast(h, s, l).shape
    h = np.broadcast_to(h, out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    m1 = l + s * np.where(l < 0.5, l, 1 - l)
    m2 = m1 - (m1 - l) * 2 * np.abs(((h / 60) % 2) - 1)
    low = 2 * l - m1

    hue_section = np.floor(h / 60).astype(int)
    conditions = [hue_section == i for i in range(6)]
    r = np.select(conditions, [m1, m2, low, low, m2, m1], default=m1)
    g = np.select(conditions, [m2, m1, m1, m2, low, low], default=low)
    b = np.select(conditions, [low, low, m2, m1, m1, m2], default=m2)

    unit = np.stack([r, g, b], axis=-1)
    return _np_scale_to_bytes(unit)


def _np_scale_to_bytes(unit: NDArray) -> NDArray:
    """Scale [0, 1] channels to bytes with half-up rounding, matching ``clamp_channel``."""
    return np.clip(np.floor(unit * 255 + 0.5), 0, 255).astype(int)
