import math

from ..colors.parsed import ParsedColor
from ..conversions import hsl_to_rgb, hsl_to_hsv
from ..types.format_type import Notation
from ..utils.num_utils import normalize_hue
from .errors import InvalidColorInput
from .tokens import split_components, parse_number, parse_percentage, parse_alpha

HSL_FUNCTIONS = ("hsl", "hsla")

# Multipliers from each angle unit to degrees
HUE_UNITS = {
    None: 1.0,
    "deg": 1.0,
    "rad": 180 / math.pi,
    "grad": 0.9,
    "turn": 360.0,
}


def parse_hue(token: str) -> float:
    """Parse a hue angle (bare, deg, rad, grad or turn) into degrees in [0, 360)."""
    value, unit = parse_number(token)
    if unit not in HUE_UNITS:
        raise ValueError(f"unexpected unit {unit!r} in hue {token!r}")
    return normalize_hue(value * HUE_UNITS[unit])


def parse_hsl(text: str) -> ParsedColor:
    """
    Parse ``hsl()``/``hsla()`` text or a bare ``h, s%, l%`` body.

    The result carries the exact HSV equivalent and the hue as written so an
    achromatic input can still set the hue.
    """
    try:
        tokens, alpha_token = split_components(text, HSL_FUNCTIONS)
        h = parse_hue(tokens[0])
        s = parse_percentage(tokens[1])
        l = parse_percentage(tokens[2])
        alpha = 1.0 if alpha_token is None else parse_alpha(alpha_token)
    except ValueError as exc:
        raise InvalidColorInput(Notation.HSL, text, str(exc)) from exc

    return ParsedColor(
        rgb=hsl_to_rgb(h, s, l),
        alpha=alpha,
        alpha_explicit=alpha_token is not None,
        hsv=hsl_to_hsv(h, s, l),
        hue=h,
    )
