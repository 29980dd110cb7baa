from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from ..types.color_types import RGB, HSVTuple


@dataclass(frozen=True)
class ParsedColor:
    """
    Result of parsing one text notation.

    ``alpha_explicit`` is False when the text carried no alpha channel and
    ``alpha`` merely defaulted to opaque; callers must not overwrite a
    separately tracked alpha in that case.
    """
    rgb: RGB
    alpha: float = 1.0
    alpha_explicit: bool = False
    hsv: Optional[HSVTuple] = None
    hue: Optional[float] = None

    @property
    def alpha_percent(self) -> float:
        return self.alpha * 100
