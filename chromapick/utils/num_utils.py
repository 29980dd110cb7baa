import math

from boundednumbers.functions import clamp as _bounded_clamp

HUE_360 = 360


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` into ``[lo, hi]`` and return it as a plain float."""
    return float(_bounded_clamp(value, lo, hi))


def clamp_percent(value: float) -> float:
    """Clamp a percentage channel into ``[0, 100]``."""
    return clamp(value, 0.0, 100.0)


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return float(h) % HUE_360


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positives (``x.5 -> x+1``)."""
    return int(math.floor(value + 0.5))


def clamp_channel(value: float) -> int:
    """Round a 0-255 channel and clamp it to the byte range."""
    return int(clamp(round_half_up(value), 0, 255))
