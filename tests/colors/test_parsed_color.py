from chromapick.colors import ParsedColor, RGB
import dataclasses
import pytest


def test_defaults_to_implicit_opaque():
    parsed = ParsedColor(rgb=RGB(1, 2, 3))
    assert parsed.alpha == 1.0
    assert not parsed.alpha_explicit
    assert parsed.alpha_percent == 100.0
    assert parsed.hsv is None
    assert parsed.hue is None


def test_alpha_percent():
    assert ParsedColor(rgb=RGB(0, 0, 0), alpha=0.25, alpha_explicit=True).alpha_percent == 25.0


def test_frozen():
    parsed = ParsedColor(rgb=RGB(0, 0, 0))
    with pytest.raises(dataclasses.FrozenInstanceError):
        parsed.alpha = 0.5
