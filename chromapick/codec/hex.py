import re

from ..colors.parsed import ParsedColor
from ..types.color_types import RGB
from ..types.format_type import Notation
from .errors import InvalidColorInput

HEX_RE = re.compile(r"^#?([0-9a-f]+)$", re.IGNORECASE)
HEX_LENGTHS = (3, 4, 6, 8)


def parse_hex(text: str) -> ParsedColor:
    """
    Parse ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA`` (``#`` optional).

    Shorthand digits are duplicated (``#0F8`` -> ``#00FF88``). A trailing alpha
    byte marks the alpha as explicit. The 4-digit form is CSS ``#RGBA``: its
    last digit is an alpha nibble (``#0F88`` -> ``#00FF8888``) and is explicit
    as well; only 3 and 6 digits leave alpha implicit.
    """
    match = HEX_RE.match(text.strip())
    if not match:
        raise InvalidColorInput(Notation.HEX, text, "expected hexadecimal digits")

    digits = match.group(1)
    if len(digits) not in HEX_LENGTHS:
        raise InvalidColorInput(Notation.HEX, text, f"expected 3, 4, 6 or 8 digits, got {len(digits)}")

    if len(digits) <= 4:
        digits = "".join(d * 2 for d in digits)

    channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    rgb = RGB(*channels[:3])
    if len(channels) == 4:
        return ParsedColor(rgb=rgb, alpha=channels[3] / 255, alpha_explicit=True)
    return ParsedColor(rgb=rgb)


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{r:02X}{g:02X}{b:02X}"
