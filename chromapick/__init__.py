"""chromapick: color model, conversion and contrast engine for interactive color pickers."""

from .colors import Color, ParsedColor, RGB
from .conversions import (
    hsv_to_rgb,
    rgb_to_hsv,
    hsl_to_rgb,
    rgb_to_hsl,
    hsv_to_hsl,
    hsl_to_hsv,
    rgb_to_xyz,
    xyz_to_lab,
    lab_to_lch,
    rgb_to_oklch,
    is_in_gamut,
    convert,
)
from .types.format_type import Notation
from .codec import (
    InvalidColorInput,
    ColorInputWarning,
    FormattedColor,
    parse,
    try_parse,
    format_color,
    format_all,
)
from .contrast import (
    WCAGLevel,
    ContrastResult,
    composite,
    luminance,
    contrast_ratio,
    wcag_level,
    compute_contrast,
    parse_background,
)
from .palettes import PaletteEntry, Palettes, generate_palettes
from .interaction import (
    saturation_value_at,
    hue_at,
    alpha_at,
    alpha_handle_position,
    hue_handle_position,
    saturation_value_handle_position,
)
from .session import ColorSession, CommitResult

__version__ = "1.0.0"

__all__ = [
    # color types
    "Color",
    "ParsedColor",
    "RGB",
    # conversions
    "hsv_to_rgb",
    "rgb_to_hsv",
    "hsl_to_rgb",
    "rgb_to_hsl",
    "hsv_to_hsl",
    "hsl_to_hsv",
    "rgb_to_xyz",
    "xyz_to_lab",
    "lab_to_lch",
    "rgb_to_oklch",
    "is_in_gamut",
    "convert",
    # text codec
    "Notation",
    "InvalidColorInput",
    "ColorInputWarning",
    "FormattedColor",
    "parse",
    "try_parse",
    "format_color",
    "format_all",
    # contrast
    "WCAGLevel",
    "ContrastResult",
    "composite",
    "luminance",
    "contrast_ratio",
    "wcag_level",
    "compute_contrast",
    "parse_background",
    # palettes
    "PaletteEntry",
    "Palettes",
    "generate_palettes",
    # interaction
    "saturation_value_at",
    "hue_at",
    "alpha_at",
    "alpha_handle_position",
    "hue_handle_position",
    "saturation_value_handle_position",
    # session
    "ColorSession",
    "CommitResult",
    "__version__",
]
