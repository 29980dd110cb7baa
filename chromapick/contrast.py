"""
Alpha compositing and WCAG 2.x contrast.

The picker judges contrast on what is actually seen: the background is first
flattened over white (it may itself be translucent), then the picked color is
flattened over that result, and only then are the two relative luminances
compared.
"""
from __future__ import annotations
import warnings
from enum import Enum
from typing import NamedTuple, Tuple

from .codec.errors import ColorInputWarning, InvalidColorInput
from .codec.css_hsl import parse_hsl
from .codec.css_rgb import parse_rgb
from .codec.hex import parse_hex
from .colors.color import Color
from .colors.parsed import ParsedColor
from .types.color_types import RGB
from .utils.num_utils import clamp, clamp_channel

WHITE = RGB(255, 255, 255)
BLACK = RGB(0, 0, 0)

LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)
LUMINANCE_THRESHOLD = 0.03928

# CSS Level 2 keywords plus a few the picker's users reach for most
NAMED_COLORS = {
    "black": (RGB(0, 0, 0), 1.0),
    "silver": (RGB(192, 192, 192), 1.0),
    "gray": (RGB(128, 128, 128), 1.0),
    "grey": (RGB(128, 128, 128), 1.0),
    "white": (RGB(255, 255, 255), 1.0),
    "maroon": (RGB(128, 0, 0), 1.0),
    "red": (RGB(255, 0, 0), 1.0),
    "purple": (RGB(128, 0, 128), 1.0),
    "fuchsia": (RGB(255, 0, 255), 1.0),
    "magenta": (RGB(255, 0, 255), 1.0),
    "green": (RGB(0, 128, 0), 1.0),
    "lime": (RGB(0, 255, 0), 1.0),
    "olive": (RGB(128, 128, 0), 1.0),
    "yellow": (RGB(255, 255, 0), 1.0),
    "navy": (RGB(0, 0, 128), 1.0),
    "blue": (RGB(0, 0, 255), 1.0),
    "teal": (RGB(0, 128, 128), 1.0),
    "aqua": (RGB(0, 255, 255), 1.0),
    "cyan": (RGB(0, 255, 255), 1.0),
    "orange": (RGB(255, 165, 0), 1.0),
    "rebeccapurple": (RGB(102, 51, 153), 1.0),
    "transparent": (RGB(0, 0, 0), 0.0),
}


class WCAGLevel(str, Enum):
    AAA = "AAA"
    AA = "AA"
    AA_LARGE = "AA Large"
    FAIL = "Fail"

    @property
    def description(self) -> str:
        return wcag_descriptions[self]

    @property
    def passes(self) -> bool:
        return self is not WCAGLevel.FAIL


wcag_descriptions = {
    WCAGLevel.AAA: "AAA (Normal & Large)",
    WCAGLevel.AA: "AA (Normal)",
    WCAGLevel.AA_LARGE: "AA (Large Text Only)",
    WCAGLevel.FAIL: "Fails WCAG",
}

# Inclusive lower bounds, checked in order
WCAG_THRESHOLDS = (
    (7.0, WCAGLevel.AAA),
    (4.5, WCAGLevel.AA),
    (3.0, WCAGLevel.AA_LARGE),
)


class ContrastResult(NamedTuple):
    ratio: float
    level: WCAGLevel
    foreground: RGB
    background: RGB

    @property
    def ratio_text(self) -> str:
        return format_ratio(self.ratio)


def composite(fg: Tuple[int, int, int], fg_alpha: float, bg: Tuple[int, int, int]) -> RGB:
    """
    Flatten ``fg`` at opacity ``fg_alpha`` (clamped to [0, 1]) over an opaque ``bg``.
    """
    a = clamp(fg_alpha, 0.0, 1.0)
    return RGB(*(clamp_channel(a * f + (1 - a) * b) for f, b in zip(fg, bg)))


def _decode(channel: int) -> float:
    c = channel / 255
    if c <= LUMINANCE_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def luminance(rgb: Tuple[int, int, int]) -> float:
    """WCAG relative luminance of an sRGB color, in [0, 1]."""
    return sum(w * _decode(c) for w, c in zip(LUMINANCE_WEIGHTS, rgb))


def contrast_ratio(rgb_a: Tuple[int, int, int], rgb_b: Tuple[int, int, int]) -> float:
    """Contrast ratio in [1, 21]; argument order does not matter."""
    lum_a = luminance(rgb_a)
    lum_b = luminance(rgb_b)
    lighter = max(lum_a, lum_b)
    darker = min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def wcag_level(ratio: float) -> WCAGLevel:
    for threshold, level in WCAG_THRESHOLDS:
        if ratio >= threshold:
            return level
    return WCAGLevel.FAIL


def format_ratio(ratio: float) -> str:
    return f"{ratio:.2f}:1"


def _parse_background_text(text: str) -> ParsedColor:
    key = text.strip().lower()
    if key in NAMED_COLORS:
        rgb, alpha = NAMED_COLORS[key]
        return ParsedColor(rgb=rgb, alpha=alpha, alpha_explicit=alpha < 1)
    if key.startswith("rgb"):
        return parse_rgb(key)
    if key.startswith("hsl"):
        return parse_hsl(key)
    return parse_hex(key)


def parse_background(text: str) -> Tuple[RGB, float]:
    """
    Resolve background text (hex, rgb(), hsl() or a color keyword) to RGB and alpha.

    Unresolvable text falls back to opaque white with a ``ColorInputWarning``.
    """
    try:
        parsed = _parse_background_text(text)
    except InvalidColorInput as exc:
        warnings.warn(
            f"Background color {text!r} could not be parsed ({exc.reason}); using white.",
            ColorInputWarning,
            stacklevel=2,
        )
        return WHITE, 1.0
    return parsed.rgb, parsed.alpha


def compute_contrast(color: Color, background: str | Tuple[int, int, int] = "#FFFFFF") -> ContrastResult:
    """
    Contrast of ``color`` (with its alpha) against a background.

    Args:
        color: the picked color
        background: background text, or an opaque RGB triple

    Returns:
        ContrastResult with the ratio, its WCAG level and the two flattened colors.
    """
    if isinstance(background, str):
        bg_rgb, bg_alpha = parse_background(background)
    else:
        bg_rgb, bg_alpha = RGB(*background), 1.0

    flat_bg = composite(bg_rgb, bg_alpha, WHITE)
    flat_fg = composite(color.rgb, color.unit_alpha, flat_bg)
    ratio = contrast_ratio(flat_fg, flat_bg)
    return ContrastResult(ratio, wcag_level(ratio), flat_fg, flat_bg)
