from ..colors.parsed import ParsedColor
from ..types.color_types import RGB
from ..types.format_type import Notation
from ..utils.num_utils import clamp_channel
from .errors import InvalidColorInput
from .tokens import split_components, parse_number, parse_alpha

RGB_FUNCTIONS = ("rgb", "rgba")


def _parse_channel(token: str) -> int:
    value, unit = parse_number(token)
    if unit == "%":
        value = value / 100 * 255
    elif unit is not None:
        raise ValueError(f"unexpected unit {unit!r} in {token!r}")
    return clamp_channel(value)


def parse_rgb(text: str) -> ParsedColor:
    """
    Parse ``rgb()``/``rgba()`` text or a bare ``r, g, b`` body.

    Channels are numbers or percentages of 255, rounded and clamped. Alpha may
    be a fourth token or follow a ``/``.
    """
    try:
        tokens, alpha_token = split_components(text, RGB_FUNCTIONS)
        rgb = RGB(*(_parse_channel(t) for t in tokens))
        if alpha_token is None:
            return ParsedColor(rgb=rgb)
        return ParsedColor(rgb=rgb, alpha=parse_alpha(alpha_token), alpha_explicit=True)
    except ValueError as exc:
        raise InvalidColorInput(Notation.RGB, text, str(exc)) from exc
