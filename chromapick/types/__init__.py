from .color_types import RGB, ColorSpace, is_in_gamut
from .format_type import Notation, editable_notations, channel_decimals, to_notation

__all__ = ["RGB", "ColorSpace", "is_in_gamut", "Notation", "editable_notations", "channel_decimals", "to_notation"]
