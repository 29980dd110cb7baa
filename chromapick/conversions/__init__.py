"""
chromapick Color Space Conversions
==================================

Pure, total conversions from the picker's canonical HSV state and from integer
sRGB into every notation the picker displays, with both scalar and vectorized
(numpy) implementations.

Units
-----
- RGB: integers in [0, 255]
- Hue: degrees, normalized into [0, 360)
- Saturation / value / lightness: percentages in [0, 100]
- XYZ: D65, Y of white = 1.0
- LAB / LCH: CIE L in [0, 100]
- OKLab / OKLCH: L in [0, 1]

Conversion Functions
--------------------

HSV / HSL -> RGB:
    hsv_to_rgb(h, s, v), np_hsv_to_rgb(h, s, v)
    hsl_to_rgb(h, s, l), np_hsl_to_rgb(h, s, l)

RGB -> HSV / HSL:
    rgb_to_hsv(r, g, b), np_rgb_to_hsv(r, g, b)
    rgb_to_hsl(r, g, b), np_rgb_to_hsl(r, g, b)

HSV <-> HSL:
    hsv_to_hsl(h, s, v), hsl_to_hsv(h, s, l) and their np_ twins

RGB -> XYZ -> LAB -> LCH:
    rgb_to_xyz, xyz_to_lab, lab_to_lch, rgb_to_lab, rgb_to_lch
    np_rgb_to_xyz, np_xyz_to_lab, np_lab_to_lch

RGB -> OKLab -> OKLCH:
    rgb_to_oklab, rgb_to_oklch, np_rgb_to_oklch

High-Level API
--------------
    convert(rgb, to_space)

Rounding
--------
Integer RGB outputs are rounded half-up and clamped to [0, 255]. Because HSL
and HSV reach RGB by different paths, ``hsl_to_rgb(*hsv_to_hsl(h, s, v))`` may
differ from ``hsv_to_rgb(h, s, v)`` by one unit per channel.

Examples
--------
>>> from chromapick.conversions import hsv_to_rgb, rgb_to_hsv
>>> hsv_to_rgb(180, 100, 100)
RGB(r=0, g=255, b=255)
>>> rgb_to_hsv(255, 0, 0)
(0.0, 100.0, 100.0)
"""

# HSV / HSL -> RGB
from .to_rgb import (
    hsv_to_rgb,
    hsv_to_unit_rgb,
    np_hsv_to_rgb,
    hsl_to_rgb,
    hsl_to_unit_rgb,
    np_hsl_to_rgb,
)

# RGB -> HSV, HSL -> HSV
from .to_hsv import rgb_to_hsv, unit_rgb_to_hsv, np_rgb_to_hsv, hsl_to_hsv, np_hsl_to_hsv

# RGB -> HSL, HSV -> HSL
from .to_hsl import rgb_to_hsl, unit_rgb_to_hsl, np_rgb_to_hsl, hsv_to_hsl, np_hsv_to_hsl

# RGB -> XYZ -> LAB -> LCH
from .to_lab import (
    srgb_to_linear,
    rgb_to_xyz,
    xyz_to_lab,
    lab_to_lch,
    rgb_to_lab,
    rgb_to_lch,
    np_rgb_to_xyz,
    np_xyz_to_lab,
    np_lab_to_lch,
)

# RGB -> OKLab -> OKLCH
from .to_oklch import rgb_to_oklab, oklab_to_oklch, rgb_to_oklch, np_rgb_to_oklch

# High-level API
from .wrapper import convert

from ..types.color_types import is_in_gamut

__all__ = [
    # HSV / HSL -> RGB
    'hsv_to_rgb',
    'hsv_to_unit_rgb',
    'np_hsv_to_rgb',
    'hsl_to_rgb',
    'hsl_to_unit_rgb',
    'np_hsl_to_rgb',

    # RGB -> HSV / HSL
    'rgb_to_hsv',
    'unit_rgb_to_hsv',
    'np_rgb_to_hsv',
    'rgb_to_hsl',
    'unit_rgb_to_hsl',
    'np_rgb_to_hsl',

    # HSV <-> HSL
    'hsv_to_hsl',
    'hsl_to_hsv',
    'np_hsv_to_hsl',
    'np_hsl_to_hsv',

    # XYZ / LAB / LCH
    'srgb_to_linear',
    'rgb_to_xyz',
    'xyz_to_lab',
    'lab_to_lch',
    'rgb_to_lab',
    'rgb_to_lch',
    'np_rgb_to_xyz',
    'np_xyz_to_lab',
    'np_lab_to_lch',

    # OKLab / OKLCH
    'rgb_to_oklab',
    'oklab_to_oklch',
    'rgb_to_oklch',
    'np_rgb_to_oklch',

    # High-level API
    'convert',
    'is_in_gamut',
]
