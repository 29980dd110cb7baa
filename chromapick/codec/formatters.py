from typing import NamedTuple, Sequence

from ..colors.color import Color
from ..conversions import rgb_to_lab, rgb_to_lch, rgb_to_oklch
from ..types.format_type import ALPHA_DECIMALS, Notation, channel_decimals
from ..utils.num_utils import round_half_up
from .hex import rgb_to_hex


class FormattedColor(NamedTuple):
    """Text shown in a notation's field and text placed on the clipboard."""
    display: str
    copy: str


def fixed(value: float, places: int) -> str:
    """Fixed-point text; a value that rounds to zero never carries a minus sign."""
    text = f"{value:.{places}f}"
    if float(text) == 0:
        return f"{0:.{places}f}"
    return text


def alpha_text(color: Color) -> str:
    return fixed(color.unit_alpha, ALPHA_DECIMALS)


def _channels(values: Sequence[float], notation: Notation) -> list[str]:
    return [fixed(v, p) for v, p in zip(values, channel_decimals[notation])]


def _css_function(name: str, channels: Sequence[str], color: Color) -> str:
    body = " ".join(channels)
    if color.is_opaque:
        return f"{name}({body})"
    return f"{name}({body} / {alpha_text(color)})"


def format_hex(color: Color) -> FormattedColor:
    value = rgb_to_hex(*color.rgb)
    if color.is_opaque:
        return FormattedColor(value, value)
    return FormattedColor(value, f"{value}{round_half_up(color.unit_alpha * 255):02X}")


def format_rgb(color: Color) -> FormattedColor:
    r, g, b = color.rgb
    display = f"{r}, {g}, {b}"
    if color.is_opaque:
        return FormattedColor(display, f"rgb({display})")
    return FormattedColor(display, f"rgba({display}, {alpha_text(color)})")


def hsl_integers(color: Color) -> tuple[int, int, int]:
    """HSL view rounded for display; a hue that rounds up to 360 reads as 0."""
    h, s, l = color.hsl
    return round_half_up(h) % 360, round_half_up(s), round_half_up(l)


def format_hsl(color: Color) -> FormattedColor:
    h, s, l = hsl_integers(color)
    display = f"{h}, {s}%, {l}%"
    if color.is_opaque:
        return FormattedColor(display, f"hsl({display})")
    return FormattedColor(display, f"hsla({display}, {alpha_text(color)})")


def format_display_p3(color: Color) -> FormattedColor:
    channels = _channels([c / 255 for c in color.rgb], Notation.DISPLAY_P3)
    return FormattedColor(", ".join(channels), _css_function("color", ["display-p3", *channels], color))


def format_lab(color: Color) -> FormattedColor:
    channels = _channels(rgb_to_lab(*color.rgb), Notation.LAB)
    return FormattedColor(", ".join(channels), _css_function("lab", channels, color))


def format_lch(color: Color) -> FormattedColor:
    channels = _channels(rgb_to_lch(*color.rgb), Notation.LCH)
    return FormattedColor(", ".join(channels), _css_function("lch", channels, color))


def format_oklch(color: Color) -> FormattedColor:
    channels = _channels(rgb_to_oklch(*color.rgb), Notation.OKLCH)
    return FormattedColor(", ".join(channels), _css_function("oklch", channels, color))
