"""
Deterministic palette ramps over an HSL base color.

Four ramps of eleven entries each:

- ``scale``: a 50-950 lightness scale with the base at 500
- ``tints``: mixes toward white, 90% down to 0% in 9-point steps
- ``shades``: mixes toward black, 0% to 100% in 10-point steps
- ``tones``: mixes toward gray (desaturation), 0% to 100% in 10-point steps

Every stop is realized through the HSL -> RGB converter, vectorized per ramp,
except that a caller-supplied base RGB is reused for the stops equal to the base.
"""
from __future__ import annotations
from typing import NamedTuple, Optional, Sequence, Tuple

import numpy as np

from .codec.hex import rgb_to_hex
from .conversions import np_hsl_to_rgb
from .types.color_types import RGB

LIGHT_LUMA_THRESHOLD = 128

SCALE_LABELS = ("50", "100", "200", "300", "400", "500", "600", "700", "800", "900", "950")
SCALE_BASE_LABEL = "500"
SCALE_FIXED_LIGHTNESS = (98, 95, 90, 82, 70)
# (offset below base lightness, floor) for the stops darker than 500
SCALE_DARK_STEPS = ((15, 25), (25, 20), (35, 15), (45, 10), (50, 5))

TINT_MIXES = tuple(i * 9 for i in range(10, -1, -1))
SHADE_MIXES = tuple(i * 10 for i in range(11))
TONE_MIXES = SHADE_MIXES


class PaletteEntry(NamedTuple):
    label: str
    hex: str
    rgb: RGB

    @property
    def is_light(self) -> bool:
        """True when dark text reads better on this swatch than light text."""
        r, g, b = self.rgb
        return 0.2126 * r + 0.7152 * g + 0.0722 * b > LIGHT_LUMA_THRESHOLD


Palette = Tuple[PaletteEntry, ...]


class Palettes(NamedTuple):
    scale: Palette
    tints: Palette
    shades: Palette
    tones: Palette


def _realize(
    labels: Sequence[str],
    hue: float,
    saturation: np.ndarray,
    lightness: np.ndarray,
    base_rgb: Optional[Tuple[int, int, int]] = None,
    base_index: Optional[int] = None,
) -> Palette:
    rgb_rows = np_hsl_to_rgb(hue, saturation, lightness)
    entries = []
    for index, (label, row) in enumerate(zip(labels, rgb_rows)):
        if base_rgb is not None and index == base_index:
            rgb = RGB(*base_rgb)
        else:
            rgb = RGB(*(int(c) for c in row))
        entries.append(PaletteEntry(label, rgb_to_hex(*rgb), rgb))
    return tuple(entries)


def scale_lightness(lightness: float) -> Tuple[float, ...]:
    """Lightness targets for the 50-950 stops; dark stops are floored so they never collapse to black."""
    dark = tuple(max(lightness - offset, floor) for offset, floor in SCALE_DARK_STEPS)
    return (*SCALE_FIXED_LIGHTNESS, lightness, *dark)


def generate_scale(hue: float, saturation: float, lightness: float,
                   base_rgb: Optional[Tuple[int, int, int]] = None) -> Palette:
    targets = np.array(scale_lightness(lightness), dtype=float)
    return _realize(
        SCALE_LABELS,
        hue,
        np.full(targets.shape, saturation, dtype=float),
        targets,
        base_rgb,
        SCALE_LABELS.index(SCALE_BASE_LABEL),
    )


def generate_tints(hue: float, saturation: float, lightness: float,
                   base_rgb: Optional[Tuple[int, int, int]] = None) -> Palette:
    mix = np.array(TINT_MIXES, dtype=float) / 100
    return _realize(
        [f"{m}%" for m in TINT_MIXES],
        hue,
        saturation * (1 - mix),
        lightness + (100 - lightness) * mix,
        base_rgb,
        TINT_MIXES.index(0),
    )


def generate_shades(hue: float, saturation: float, lightness: float,
                    base_rgb: Optional[Tuple[int, int, int]] = None) -> Palette:
    mix = np.array(SHADE_MIXES, dtype=float) / 100
    return _realize(
        [f"{m}%" for m in SHADE_MIXES],
        hue,
        np.full(mix.shape, saturation, dtype=float),
        lightness * (1 - mix),
        base_rgb,
        SHADE_MIXES.index(0),
    )


def generate_tones(hue: float, saturation: float, lightness: float,
                   base_rgb: Optional[Tuple[int, int, int]] = None) -> Palette:
    mix = np.array(TONE_MIXES, dtype=float) / 100
    return _realize(
        [f"{m}%" for m in TONE_MIXES],
        hue,
        saturation * (1 - mix),
        np.full(mix.shape, lightness, dtype=float),
        base_rgb,
        TONE_MIXES.index(0),
    )


def generate_palettes(hue: float, saturation: float, lightness: float,
                      base_rgb: Optional[Tuple[int, int, int]] = None) -> Palettes:
    """
    Build all four ramps for an HSL base (hue in degrees, saturation and lightness in percent).

    Args:
        base_rgb: the base color as displayed. When given, the stops that are
            the base itself (scale 500 and every 0% mix) reuse it verbatim, so
            they match the base hex even where the HSL path rounds a channel
            that sits on x.5 the other way.

    Returns:
        Palettes(scale, tints, shades, tones), each an ordered tuple of PaletteEntry.
    """
    return Palettes(
        scale=generate_scale(hue, saturation, lightness, base_rgb),
        tints=generate_tints(hue, saturation, lightness, base_rgb),
        shades=generate_shades(hue, saturation, lightness, base_rgb),
        tones=generate_tones(hue, saturation, lightness, base_rgb),
    )
