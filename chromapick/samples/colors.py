# Reference values shared by the test-suite.
# RGB are 0-255 integers; hue in degrees; other cylinder channels in percent.

samples_rgb_hsv = {
    (255, 0, 0): (0.0, 100.0, 100.0),
    (0, 255, 0): (120.0, 100.0, 100.0),
    (0, 0, 255): (240.0, 100.0, 100.0),
    (255, 255, 0): (60.0, 100.0, 100.0),
    (0, 255, 255): (180.0, 100.0, 100.0),
    (255, 0, 255): (300.0, 100.0, 100.0),
    (255, 128, 0): (30.1176, 100.0, 100.0),
    (0, 128, 128): (180.0, 100.0, 50.1961),
    (51, 102, 153): (210.0, 66.6667, 60.0),
    (255, 255, 255): (0.0, 0.0, 100.0),
    (128, 128, 128): (0.0, 0.0, 50.1961),
    (0, 0, 0): (0.0, 0.0, 0.0),
}

samples_rgb_hsl = {
    (255, 0, 0): (0.0, 100.0, 50.0),
    (0, 255, 0): (120.0, 100.0, 50.0),
    (0, 0, 255): (240.0, 100.0, 50.0),
    (0, 255, 255): (180.0, 100.0, 50.0),
    (255, 128, 0): (30.1176, 100.0, 50.0),
    (51, 102, 153): (210.0, 50.0, 40.0),
    (64, 191, 64): (120.0, 49.8039, 50.0),
    (255, 255, 255): (0.0, 0.0, 100.0),
    (128, 128, 128): (0.0, 0.0, 50.1961),
    (0, 0, 0): (0.0, 0.0, 0.0),
}

samples_hsl_rgb = {
    (0.0, 100.0, 50.0): (255, 0, 0),
    (120.0, 50.0, 50.0): (64, 191, 64),
    (180.0, 100.0, 50.0): (0, 255, 255),
    (210.0, 50.0, 40.0): (51, 102, 153),
    (300.0, 100.0, 25.0): (128, 0, 128),
    (45.0, 0.0, 50.0): (128, 128, 128),
    (180.0, 100.0, 98.0): (245, 255, 255),
}

# (L, a, b) and (L, C, h) for CIE LAB/LCH under D65
samples_rgb_lab = {
    (255, 255, 255): (100.0, 0.0, 0.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 0, 0): (53.2408, 80.0925, 67.2032),
    (0, 255, 0): (87.7347, -86.1827, 83.1793),
    (0, 0, 255): (32.2970, 79.1875, -107.8602),
}

samples_rgb_lch = {
    (255, 0, 0): (53.2408, 104.5518, 39.9990),
    (0, 0, 255): (32.2970, 133.8076, 306.2849),
}

# (L, C, h) for OKLCH
samples_rgb_oklch = {
    (255, 0, 0): (0.62796, 0.25768, 29.2339),
    (0, 255, 0): (0.86644, 0.29483, 142.4953),
    (0, 0, 255): (0.45201, 0.31321, 264.0520),
}

HEX_CYAN = "#00FFFF"
HEX_WHITE = "#FFFFFF"
HEX_BLACK = "#000000"

__all__ = [
    "samples_rgb_hsv",
    "samples_rgb_hsl",
    "samples_hsl_rgb",
    "samples_rgb_lab",
    "samples_rgb_lch",
    "samples_rgb_oklch",
    "HEX_CYAN",
    "HEX_WHITE",
    "HEX_BLACK",
]
