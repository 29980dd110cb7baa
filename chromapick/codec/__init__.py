"""
chromapick Text Codec
=====================

Parsing and formatting for the seven notations the picker shows.

Editable notations (parse + format):
    - hex: ``#RGB``, ``#RGBA``, ``#RRGGBB``, ``#RRGGBBAA``, ``#`` optional
    - rgb: ``rgb(10, 20, 30)``, ``rgba(10, 20, 30, 0.5)``, ``rgb(10 20 30 / 50%)``,
      channel percentages, or a bare ``10, 20, 30``
    - hsl: ``hsl(120, 50%, 40%)``, ``hsl(0.5turn 50% 40% / .3)``, ``hsl(2rad ...)``

Display-only notations (format):
    - display-p3, lab, lch, oklch

Parsers raise :class:`InvalidColorInput` (a ``ValueError``); ``try_parse``
returns None instead. Formatting returns a :class:`FormattedColor` whose
``copy`` text carries an alpha suffix only when the color is translucent.

>>> from chromapick.codec import parse, format_color
>>> from chromapick.colors import Color
>>> parse("rgb", "10, 20, 30, 0.5").alpha_explicit
True
>>> format_color("hex", Color.from_hsl(180, 100, 50)).display
'#00FFFF'
"""

from .errors import InvalidColorInput, ColorInputWarning
from .formatters import FormattedColor
from .hex import parse_hex, rgb_to_hex
from .css_rgb import parse_rgb
from .css_hsl import parse_hsl, parse_hue
from .notations import NOTATION_CODECS, NotationCodec, parse, try_parse, format_color, format_all

__all__ = [
    'InvalidColorInput',
    'ColorInputWarning',
    'FormattedColor',
    'parse_hex',
    'rgb_to_hex',
    'parse_rgb',
    'parse_hsl',
    'parse_hue',
    'NOTATION_CODECS',
    'NotationCodec',
    'parse',
    'try_parse',
    'format_color',
    'format_all',
]
