from __future__ import annotations
from typing import Literal, NamedTuple, Tuple

Scalar = int | float
HSVTuple = Tuple[float, float, float]
HSLTuple = Tuple[float, float, float]
XYZTuple = Tuple[float, float, float]
LabTuple = Tuple[float, float, float]
LchTuple = Tuple[float, float, float]
ColorSpace = Literal["hsv", "hsl", "xyz", "lab", "lch", "oklab", "oklch"]


class RGB(NamedTuple):
    """Integer sRGB triple, each channel in ``[0, 255]``."""
    r: int
    g: int
    b: int


def is_in_gamut(r: Scalar, g: Scalar, b: Scalar) -> bool:
    """Check whether every channel lies in the sRGB byte range."""
    return all(0 <= c <= 255 for c in (r, g, b))
