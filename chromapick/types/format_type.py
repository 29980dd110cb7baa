# No dependencies
from enum import Enum


class Notation(str, Enum):
    HEX = "hex"
    RGB = "rgb"
    HSL = "hsl"
    DISPLAY_P3 = "display-p3"
    LAB = "lab"
    LCH = "lch"
    OKLCH = "oklch"

    @property
    def is_editable(self) -> bool:
        return self in editable_notations

    @property
    def label(self) -> str:
        return notation_labels[self]


editable_notations = frozenset({Notation.HEX, Notation.RGB, Notation.HSL})

notation_labels = {
    Notation.HEX: "Hex",
    Notation.RGB: "RGB",
    Notation.HSL: "HSL",
    Notation.DISPLAY_P3: "Display P3",
    Notation.LAB: "LAB",
    Notation.LCH: "LCH",
    Notation.OKLCH: "OKLCH",
}

# Decimal places per channel for the display-only notations
channel_decimals = {
    Notation.DISPLAY_P3: (3, 3, 3),
    Notation.LAB: (2, 2, 2),
    Notation.LCH: (2, 2, 2),
    Notation.OKLCH: (3, 3, 2),
}

ALPHA_DECIMALS = 2


def to_notation(value: "Notation | str") -> Notation:
    """Resolve a notation from the enum, its value (``"display-p3"``) or its label (``"Display P3"``)."""
    if isinstance(value, Notation):
        return value
    key = str(value).strip().lower()
    for notation in Notation:
        if key == notation.value or key == notation_labels[notation].lower():
            return notation
    raise ValueError(f"Unknown notation: {value!r}")
