from typing import Callable, Dict, NamedTuple, Optional

from ..colors.color import Color
from ..colors.parsed import ParsedColor
from ..types.format_type import Notation, to_notation
from .css_hsl import parse_hsl
from .css_rgb import parse_rgb
from .errors import InvalidColorInput
from .formatters import (
    FormattedColor,
    format_hex,
    format_rgb,
    format_hsl,
    format_display_p3,
    format_lab,
    format_lch,
    format_oklch,
)
from .hex import parse_hex


class NotationCodec(NamedTuple):
    parser: Optional[Callable[[str], ParsedColor]]
    formatter: Callable[[Color], FormattedColor]


NOTATION_CODECS: Dict[Notation, NotationCodec] = {
    Notation.HEX: NotationCodec(parse_hex, format_hex),
    Notation.RGB: NotationCodec(parse_rgb, format_rgb),
    Notation.HSL: NotationCodec(parse_hsl, format_hsl),
    Notation.DISPLAY_P3: NotationCodec(None, format_display_p3),
    Notation.LAB: NotationCodec(None, format_lab),
    Notation.LCH: NotationCodec(None, format_lch),
    Notation.OKLCH: NotationCodec(None, format_oklch),
}


def parse(notation: Notation | str, text: str) -> ParsedColor:
    """
    Parse ``text`` in an editable notation (hex, rgb or hsl).

    Raises:
        InvalidColorInput: malformed text, or a display-only notation
    """
    notation = to_notation(notation)
    parser = NOTATION_CODECS[notation].parser
    if parser is None:
        raise InvalidColorInput(notation, text, f"{notation.label} is display-only")
    return parser(text)


def try_parse(notation: Notation | str, text: str) -> Optional[ParsedColor]:
    """Like :func:`parse` but returns None for invalid text."""
    try:
        return parse(notation, text)
    except InvalidColorInput:
        return None


def format_color(notation: Notation | str, color: Color) -> FormattedColor:
    return NOTATION_CODECS[to_notation(notation)].formatter(color)


def format_all(color: Color) -> Dict[Notation, FormattedColor]:
    """Display and copy text for every notation, in declaration order."""
    return {notation: codec.formatter(color) for notation, codec in NOTATION_CODECS.items()}
