from __future__ import annotations
from typing import Optional, Self, Tuple

from ..conversions import hsv_to_rgb, rgb_to_hsv, hsv_to_hsl, hsl_to_hsv
from ..types.color_types import RGB, HSLTuple, HSVTuple
from ..utils.num_utils import clamp_percent, normalize_hue


class Color:
    """
    Canonical picker state: hue, saturation, value and alpha.

    Hue is kept in [0, 360), the other channels in [0, 100]. Instances are
    immutable; the ``with_*`` methods return new colors. Out-of-range inputs
    are normalized (hue) or clamped (everything else) rather than rejected.
    """
    __slots__ = ('_hue', '_saturation', '_value', '_alpha', '_is_frozen')  # prevents adding new attributes → immutability

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, hue: float = 0.0, saturation: float = 0.0, value: float = 0.0, alpha: float = 100.0) -> None:
        self._hue = normalize_hue(hue)
        self._saturation = clamp_percent(saturation)
        self._value = clamp_percent(value)
        self._alpha = clamp_percent(alpha)

        # freeze instance; no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ CONSTRUCTORS ------------------
    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, alpha: float = 100.0, hue: Optional[float] = None) -> Self:
        """
        Build a color from integer RGB.

        Args:
            hue: hue to keep when the RGB is achromatic (hue undefined)
        """
        h, s, v = rgb_to_hsv(r, g, b)
        if s == 0 and hue is not None:
            h = hue
        return cls(h, s, v, alpha)

    @classmethod
    def from_hsl(cls, hue: float, saturation: float, lightness: float, alpha: float = 100.0) -> Self:
        h, s, v = hsl_to_hsv(hue, saturation, lightness)
        return cls(h, s, v, alpha)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def hue(self) -> float:
        return self._hue

    @property
    def saturation(self) -> float:
        return self._saturation

    @property
    def value(self) -> float:
        return self._value

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def unit_alpha(self) -> float:
        """Alpha as a fraction in [0, 1]."""
        return self._alpha / 100

    @property
    def is_opaque(self) -> bool:
        return self._alpha >= 100

    @property
    def is_achromatic(self) -> bool:
        return self._saturation == 0 or self._value == 0

    @property
    def hsv(self) -> HSVTuple:
        return self._hue, self._saturation, self._value

    @property
    def rgb(self) -> RGB:
        """Integer RGB, always recomputed from the canonical HSV."""
        return hsv_to_rgb(self._hue, self._saturation, self._value)

    @property
    def hsl(self) -> HSLTuple:
        """HSL computed directly from HSV (no RGB rounding)."""
        return hsv_to_hsl(self._hue, self._saturation, self._value)

    # ------------------ DERIVED INSTANCES ------------------
    def with_hue(self, hue: float) -> Self:
        return self.__class__(hue, self._saturation, self._value, self._alpha)

    def with_saturation(self, saturation: float) -> Self:
        return self.__class__(self._hue, saturation, self._value, self._alpha)

    def with_value(self, value: float) -> Self:
        return self.__class__(self._hue, self._saturation, value, self._alpha)

    def with_alpha(self, alpha: float) -> Self:
        return self.__class__(self._hue, self._saturation, self._value, alpha)

    def with_saturation_value(self, saturation: float, value: float) -> Self:
        return self.__class__(self._hue, saturation, value, self._alpha)

    # ------------------ DUNDER ------------------
    def _key(self) -> Tuple[float, float, float, float]:
        return self._hue, self._saturation, self._value, self._alpha

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(hue={self._hue!r}, saturation={self._saturation!r}, "
            f"value={self._value!r}, alpha={self._alpha!r})"
        )
