from .num_utils import clamp, clamp_percent, clamp_channel, normalize_hue, round_half_up, HUE_360
from .default import value_or_default

__all__ = [
    "clamp",
    "clamp_percent",
    "clamp_channel",
    "normalize_hue",
    "round_half_up",
    "value_or_default",
    "HUE_360",
]
