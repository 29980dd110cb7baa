from __future__ import annotations
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..types.format_type import Notation


class InvalidColorInput(ValueError):
    """Text could not be parsed in its declared notation."""

    def __init__(self, notation: "Notation | str | None", text: str, reason: str = "") -> None:
        self.notation = notation
        self.text = text
        self.reason = reason
        name = getattr(notation, "value", notation)
        message = f"Invalid {name} color {text!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class ColorInputWarning(UserWarning):
    """A color input was replaced by a fallback instead of being rejected."""
