from typing import Callable, Dict, Tuple

from ..types.color_types import RGB, ColorSpace, is_in_gamut
from .to_hsv import rgb_to_hsv
from .to_hsl import rgb_to_hsl
from .to_lab import rgb_to_xyz, rgb_to_lab, rgb_to_lch
from .to_oklch import rgb_to_oklab, rgb_to_oklch

# Every derived space is a pure function of the integer RGB triple
CONVERT_FROM_RGB: Dict[str, Callable[[int, int, int], Tuple[float, float, float]]] = {
    "hsv": rgb_to_hsv,
    "hsl": rgb_to_hsl,
    "xyz": rgb_to_xyz,
    "lab": rgb_to_lab,
    "lch": rgb_to_lch,
    "oklab": rgb_to_oklab,
    "oklch": rgb_to_oklch,
}


def convert(rgb: RGB | Tuple[int, int, int], to_space: ColorSpace) -> Tuple[float, float, float]:
    """
    Convert an integer RGB triple into one of the derived spaces.

    Args:
        rgb: (r, g, b) in [0, 255]
        to_space: one of "hsv", "hsl", "xyz", "lab", "lch", "oklab", "oklch"

    Returns:
        The three channels of the target space.
    """
    key = to_space.lower()
    if key not in CONVERT_FROM_RGB:
        raise ValueError(f"Unknown space: {to_space}")
    if not is_in_gamut(*rgb):
        raise ValueError(f"RGB channels must lie in [0, 255], got {tuple(rgb)!r}")
    r, g, b = rgb
    return CONVERT_FROM_RGB[key](r, g, b)
