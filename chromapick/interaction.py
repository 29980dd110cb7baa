"""
Pointer geometry <-> channel values.

The UI shell captures pointer events and measures its widgets; these pure
functions turn an offset inside a widget into channel values (and back into
handle positions, in percent of the widget). Offsets outside the widget are
clamped, so a drag that leaves the widget pins the channel at its limit.
"""
from typing import Tuple

from .utils.num_utils import clamp, clamp_percent

HUE_MAX = 360.0


def _check_extent(name: str, size: float) -> None:
    if size <= 0:
        raise ValueError(f"{name} must be positive, got {size}")


def saturation_value_at(x: float, y: float, width: float, height: float) -> Tuple[float, float]:
    """
    Map an offset inside the saturation/value rectangle to (saturation, value).

    Saturation grows left to right, value grows bottom to top.
    """
    _check_extent("width", width)
    _check_extent("height", height)
    saturation = clamp_percent(x / width * 100)
    value = clamp_percent(100 - y / height * 100)
    return saturation, value


def hue_at(x: float, width: float) -> float:
    """Map an offset along the hue track to degrees in [0, 360]."""
    _check_extent("width", width)
    return clamp(x / width * HUE_MAX, 0.0, HUE_MAX)


def _handle_percent(handle_size: float, track_size: float) -> float:
    _check_extent("track_size", track_size)
    return clamp_percent(handle_size / track_size * 100)


def alpha_handle_position(alpha: float, handle_size: float, track_size: float) -> float:
    """
    Position (percent of the track, top = 0) of the alpha handle's centre.

    The handle only travels ``100 - handle%`` of the track so its centre never
    sits on the track's edges, while alpha still spans [0, 100]. Alpha 100 is
    at the top.
    """
    handle_percent = _handle_percent(handle_size, track_size)
    travel_percent = 100 - handle_percent
    return handle_percent / 2 + (1 - clamp_percent(alpha) / 100) * travel_percent


def alpha_at(y: float, track_size: float, handle_size: float = 0.0) -> float:
    """
    Map an offset along the alpha track to alpha in [0, 100].

    Inverse of :func:`alpha_handle_position`; with no handle this is
    ``100 - y / track_size * 100``.
    """
    handle_percent = _handle_percent(handle_size, track_size)
    travel_percent = 100 - handle_percent
    position = y / track_size * 100
    if travel_percent <= 0:
        return 100.0 if position <= handle_percent / 2 else 0.0
    return clamp_percent(100 * (1 - (position - handle_percent / 2) / travel_percent))


def hue_handle_position(hue: float) -> float:
    """Position of the hue handle in percent of the track."""
    return clamp(hue, 0.0, HUE_MAX) / HUE_MAX * 100


def saturation_value_handle_position(saturation: float, value: float) -> Tuple[float, float]:
    """(left %, top %) of the saturation/value marker."""
    return clamp_percent(saturation), 100 - clamp_percent(value)
