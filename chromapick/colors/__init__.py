"""
chromapick Color Types
======================

Immutable value types shared by every subsystem.

- ``Color``: the canonical picker state (hue, saturation, value, alpha), stored
  in HSV and normalized on construction. RGB and HSL views are recomputed on
  every access so repeated edits never drift.
- ``ParsedColor``: what a text parser produced, including whether the text
  carried an alpha channel at all.

>>> from chromapick.colors import Color
>>> cyan = Color.from_hsl(180, 100, 50)
>>> cyan.rgb
RGB(r=0, g=255, b=255)
>>> cyan.with_alpha(50).unit_alpha
0.5
"""

from .color import Color
from .parsed import ParsedColor
from ..types.color_types import RGB

__all__ = ['Color', 'ParsedColor', 'RGB']
