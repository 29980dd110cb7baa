from chromapick.utils import clamp, clamp_percent, clamp_channel, normalize_hue, round_half_up, value_or_default


def test_clamp_returns_plain_float():
    assert clamp(5, 0, 10) == 5.0
    assert type(clamp(5, 0, 10)) is float
    assert clamp(-1, 0, 10) == 0.0
    assert clamp(11, 0, 10) == 10.0


def test_clamp_percent():
    assert clamp_percent(150) == 100.0
    assert clamp_percent(-0.5) == 0.0
    assert clamp_percent(42.5) == 42.5


def test_normalize_hue():
    assert normalize_hue(0) == 0.0
    assert normalize_hue(360) == 0.0
    assert normalize_hue(-30) == 330.0
    assert normalize_hue(725.5) == 5.5


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(1.5) == 2
    assert round_half_up(2.5) == 3
    assert round_half_up(2.4999) == 2
    assert round_half_up(127.5) == 128


def test_clamp_channel():
    assert clamp_channel(127.5) == 128
    assert clamp_channel(300) == 255
    assert clamp_channel(-4) == 0
    assert type(clamp_channel(12.2)) is int


def test_value_or_default():
    assert value_or_default(None, 3) == 3
    assert value_or_default(0, 3) == 0
