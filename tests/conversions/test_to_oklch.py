from chromapick.conversions.to_oklch import rgb_to_oklab, rgb_to_oklch, np_rgb_to_oklch
from chromapick.samples import samples_rgb_oklch
import numpy as np
import pytest


def test_rgb_to_oklch():
    for rgb, (l_exp, c_exp, h_exp) in samples_rgb_oklch.items():
        l, c, h = rgb_to_oklch(*rgb)

        assert abs(l - l_exp) < 1e-3
        assert abs(c - c_exp) < 1e-3
        assert abs(h - h_exp) < 0.1


def test_rgb_to_oklab_white_and_black():
    l, a, b = rgb_to_oklab(255, 255, 255)
    assert l == pytest.approx(1.0, abs=1e-4)
    assert abs(a) < 1e-4
    assert abs(b) < 1e-4

    assert rgb_to_oklab(0, 0, 0) == pytest.approx((0.0, 0.0, 0.0))


def test_rgb_to_oklch_decodes_gamma():
    # mid gray sits near L = 0.6 in linear-light OKLab, not near 0.5
    l, c, _ = rgb_to_oklch(128, 128, 128)
    assert 0.59 < l < 0.61
    assert c < 1e-4


def test_rgb_to_oklch_hue_in_range():
    for rgb in [(255, 0, 128), (0, 0, 255), (10, 20, 30)]:
        _, _, h = rgb_to_oklch(*rgb)
        assert 0 <= h < 360


def test_rgb_to_oklch_numpy():
    rgb = np.array(list(samples_rgb_oklch.keys()))
    expected = np.array([rgb_to_oklch(*row) for row in rgb])
    assert np.allclose(np_rgb_to_oklch(rgb), expected, atol=1e-9)
