from chromapick.interaction import (
    saturation_value_at, hue_at, alpha_at, alpha_handle_position,
    hue_handle_position, saturation_value_handle_position,
)
import pytest


def test_saturation_value_corners():
    assert saturation_value_at(0, 0, 200, 100) == (0.0, 100.0)
    assert saturation_value_at(200, 100, 200, 100) == (100.0, 0.0)
    assert saturation_value_at(50, 25, 200, 100) == (25.0, 75.0)


def test_saturation_value_clamps_outside_offsets():
    assert saturation_value_at(-10, 150, 200, 100) == (0.0, 0.0)
    assert saturation_value_at(300, -20, 200, 100) == (100.0, 100.0)


def test_hue_at():
    assert hue_at(0, 300) == 0.0
    assert hue_at(150, 300) == 180.0
    assert hue_at(300, 300) == 360.0
    assert hue_at(400, 300) == 360.0
    assert hue_at(-5, 300) == 0.0


@pytest.mark.parametrize("call", [
    lambda: saturation_value_at(1, 1, 0, 100),
    lambda: saturation_value_at(1, 1, 100, -1),
    lambda: hue_at(1, 0),
    lambda: alpha_at(1, 0),
    lambda: alpha_handle_position(50, 10, 0),
])
def test_zero_size_geometry_is_rejected(call):
    with pytest.raises(ValueError):
        call()


def test_alpha_handle_position_without_handle():
    assert alpha_handle_position(100, 0, 200) == 0.0
    assert alpha_handle_position(0, 0, 200) == 100.0


def test_alpha_handle_position_keeps_handle_inside_track():
    assert alpha_handle_position(100, 20, 200) == 5.0
    assert alpha_handle_position(0, 20, 200) == 95.0
    assert alpha_handle_position(50, 20, 200) == 50.0


def test_alpha_at():
    assert alpha_at(50, 200) == pytest.approx(75.0)
    assert alpha_at(10, 200, 20) == pytest.approx(100.0)
    assert alpha_at(100, 200, 20) == pytest.approx(50.0)
    assert alpha_at(190, 200, 20) == pytest.approx(0.0)
    assert alpha_at(-40, 200, 20) == pytest.approx(100.0)
    assert alpha_at(400, 200, 20) == pytest.approx(0.0)


def test_alpha_at_inverts_handle_position():
    for alpha in (0, 12.5, 40, 77, 100):
        position = alpha_handle_position(alpha, 20, 200)
        assert alpha_at(position / 100 * 200, 200, 20) == pytest.approx(alpha)


def test_alpha_handle_filling_the_track():
    assert alpha_at(50, 200, 200) == 100.0
    assert alpha_at(150, 200, 200) == 0.0


def test_handle_positions():
    assert hue_handle_position(180) == 50.0
    assert hue_handle_position(400) == 100.0
    assert saturation_value_handle_position(30, 80) == (30.0, 20.0)
