from chromapick.conversions.to_rgb import hsv_to_rgb, hsl_to_rgb, np_hsv_to_rgb, np_hsl_to_rgb, hsv_to_unit_rgb
from chromapick.samples import samples_rgb_hsv, samples_hsl_rgb
from chromapick.types.color_types import RGB
import numpy as np


def test_hsv_to_rgb():
    for (r_exp, g_exp, b_exp), (h, s, v) in samples_rgb_hsv.items():
        r, g, b = hsv_to_rgb(h, s, v)

        assert abs(r - r_exp) <= 1
        assert abs(g - g_exp) <= 1
        assert abs(b - b_exp) <= 1


def test_hsv_to_rgb_returns_integer_rgb():
    rgb = hsv_to_rgb(180, 100, 100)
    assert isinstance(rgb, RGB)
    assert rgb == (0, 255, 255)
    assert all(isinstance(c, int) for c in rgb)


def test_hsv_to_rgb_rounds_half_up():
    # 0.5 * 255 = 127.5
    assert hsv_to_rgb(180, 100, 50) == (0, 128, 128)


def test_hsv_to_rgb_hue_wraparound():
    for h in [0, 7.5, 15, 60, 90.25, 180, 270, 359]:
        for s, v in [(100, 100), (50, 75), (20, 30), (0, 60)]:
            assert hsv_to_rgb(h, s, v) == hsv_to_rgb(h + 360, s, v)
            assert hsv_to_rgb(h, s, v) == hsv_to_rgb(h - 360, s, v)


def test_hsv_to_rgb_clamps_out_of_range_channels():
    assert hsv_to_rgb(0, 150, 150) == (255, 0, 0)
    assert hsv_to_rgb(0, 100, -20) == (0, 0, 0)


def test_hsv_to_unit_rgb_primaries():
    assert hsv_to_unit_rgb(0, 100, 100) == (1.0, 0.0, 0.0)
    assert hsv_to_unit_rgb(120, 100, 100) == (0.0, 1.0, 0.0)
    assert hsv_to_unit_rgb(240, 100, 100) == (0.0, 0.0, 1.0)


def test_hsl_to_rgb():
    for (h, s, l), expected in samples_hsl_rgb.items():
        assert hsl_to_rgb(h, s, l) == expected


def test_hsl_to_rgb_hue_wraparound():
    for h in [0, 30, 150, 210, 330]:
        assert hsl_to_rgb(h, 80, 40) == hsl_to_rgb(h + 720, 80, 40)


def test_hsv_to_rgb_numpy_matches_scalar():
    hues = np.arange(0, 360, 7.5)
    sats = np.array([0, 25, 50, 100])
    vals = np.array([0, 33, 50, 100])
    h, s, v = np.meshgrid(hues, sats, vals, indexing="ij")
    result = np_hsv_to_rgb(h, s, v)
    assert result.shape == h.shape + (3,)
    for idx in np.ndindex(h.shape):
        assert tuple(result[idx]) == hsv_to_rgb(h[idx], s[idx], v[idx])


def test_hsl_to_rgb_numpy():
    the_matrix = np.array(list(samples_hsl_rgb.keys()))
    expected = np.array(list(samples_hsl_rgb.values()))
    result = np_hsl_to_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.array_equal(result, expected)


def test_hsl_to_rgb_numpy_broadcasts_scalar_hue():
    result = np_hsl_to_rgb(180, np.array([100.0, 0.0]), np.array([50.0, 50.0]))
    assert result.tolist() == [[0, 255, 255], [128, 128, 128]]
