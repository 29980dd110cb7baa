from __future__ import annotations
from typing import Dict, NamedTuple, Optional

from .codec.errors import InvalidColorInput
from .codec.formatters import FormattedColor
from .codec.notations import format_all, format_color, parse
from .colors.color import Color
from .colors.parsed import ParsedColor
from .conversions import rgb_to_hsv
from .contrast import ContrastResult, compute_contrast
from .interaction import alpha_at, hue_at, saturation_value_at
from .palettes import Palettes, generate_palettes
from .types.color_types import RGB, HSLTuple
from .types.format_type import Notation, to_notation
from .utils.default import value_or_default

DEFAULT_COLOR = Color.from_hsl(180, 100, 50)
DEFAULT_BACKGROUND = "#FFFFFF"


class CommitResult(NamedTuple):
    """
    Outcome of committing edited text.

    ``color`` is the session color after the attempt: the new color on
    success, the unchanged previous color on failure.
    """
    ok: bool
    color: Color
    error: Optional[InvalidColorInput] = None


class ColorSession:
    """
    Owner of the canonical color for one interactive picker.

    Holds the current :class:`Color`, the background used for contrast and the
    notation currently being edited. All updates go through this object; it is
    single-writer and must not be re-entered concurrently.
    """

    def __init__(self, color: Optional[Color] = None, background: str = DEFAULT_BACKGROUND) -> None:
        self._color = value_or_default(color, DEFAULT_COLOR)
        self.background = background
        self._active_edit: Optional[Notation] = None

    # ------------------ STATE ------------------
    @property
    def color(self) -> Color:
        return self._color

    @property
    def rgb(self) -> RGB:
        return self._color.rgb

    @property
    def hsl(self) -> HSLTuple:
        return self._color.hsl

    @property
    def active_edit(self) -> Optional[Notation]:
        """Notation whose text field the user is typing into, if any."""
        return self._active_edit

    # ------------------ SETTERS ------------------
    def set_hue(self, hue: float) -> Color:
        self._color = self._color.with_hue(hue)
        return self._color

    def set_saturation(self, saturation: float) -> Color:
        self._color = self._color.with_saturation(saturation)
        return self._color

    def set_value(self, value: float) -> Color:
        self._color = self._color.with_value(value)
        return self._color

    def set_alpha(self, alpha: float) -> Color:
        self._color = self._color.with_alpha(alpha)
        return self._color

    # ------------------ TEXT ------------------
    def begin_edit(self, notation: Notation | str) -> None:
        self._active_edit = to_notation(notation)

    def end_edit(self) -> str:
        """
        Leave the active field and return the display text it should show.

        After a rejected commit this is the last valid value, so the field
        reverts instead of keeping the invalid text.
        """
        notation = value_or_default(self._active_edit, Notation.HEX)
        self._active_edit = None
        return self.format(notation).display

    def commit_text(self, notation: Notation | str, text: str, fallback_hue: Optional[float] = None) -> CommitResult:
        """
        Parse ``text`` and, if valid, make it the session color.

        Alpha is replaced only when the text carried one. For achromatic
        results the hue comes from the text itself (hsl), then from
        ``fallback_hue``, and otherwise stays what it was.
        Invalid text never changes the color and never raises.
        """
        try:
            parsed = parse(notation, text)
        except InvalidColorInput as exc:
            return CommitResult(False, self._color, exc)

        self._color = self._apply(parsed, fallback_hue)
        return CommitResult(True, self._color)

    def _apply(self, parsed: ParsedColor, fallback_hue: Optional[float]) -> Color:
        if parsed.hsv is not None:
            h, s, v = parsed.hsv
        else:
            h, s, v = rgb_to_hsv(*parsed.rgb)

        if s == 0 or v == 0:
            h = value_or_default(parsed.hue, value_or_default(fallback_hue, self._color.hue))

        alpha = parsed.alpha_percent if parsed.alpha_explicit else self._color.alpha
        return Color(h, s, v, alpha)

    def format(self, notation: Notation | str) -> FormattedColor:
        return format_color(notation, self._color)

    def formats(self) -> Dict[Notation, FormattedColor]:
        return format_all(self._color)

    # ------------------ DERIVED ------------------
    def contrast(self, background: Optional[str] = None) -> ContrastResult:
        return compute_contrast(self._color, value_or_default(background, self.background))

    def palettes(self) -> Palettes:
        return generate_palettes(*self._color.hsl, base_rgb=self._color.rgb)

    # ------------------ POINTER ------------------
    def pick_saturation_value(self, x: float, y: float, width: float, height: float) -> Color:
        saturation, value = saturation_value_at(x, y, width, height)
        self._color = self._color.with_saturation_value(saturation, value)
        return self._color

    def pick_hue(self, x: float, width: float) -> Color:
        return self.set_hue(hue_at(x, width))

    def pick_alpha(self, y: float, track_size: float, handle_size: float = 0.0) -> Color:
        return self.set_alpha(alpha_at(y, track_size, handle_size))
