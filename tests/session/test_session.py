from chromapick.codec import InvalidColorInput
from chromapick.colors import Color, RGB
from chromapick.contrast import WCAGLevel
from chromapick.session import ColorSession, DEFAULT_COLOR
from chromapick.types import Notation
import pytest


def test_default_state(session, cyan):
    assert session.color == cyan == DEFAULT_COLOR
    assert session.rgb == RGB(0, 255, 255)
    assert session.background == "#FFFFFF"
    assert session.active_edit is None


def test_setters_clamp_and_normalize(session):
    assert session.set_hue(-120).hue == 240.0
    assert session.set_saturation(140).saturation == 100.0
    assert session.set_value(-3).value == 0.0
    assert session.set_alpha(55).alpha == 55.0
    assert session.color == Color(240, 100, 0, 55)


def test_setting_saturation_to_zero_keeps_hue(session):
    session.set_saturation(0)
    assert session.rgb == RGB(255, 255, 255)
    assert session.color.hue == 180.0
    session.set_saturation(100)
    assert session.rgb == RGB(0, 255, 255)


def test_commit_hex(session):
    result = session.commit_text("hex", "#FF0000")
    assert result.ok
    assert result.error is None
    assert result.color is session.color
    assert session.rgb == RGB(255, 0, 0)


def test_commit_invalid_leaves_color_untouched(session, cyan):
    result = session.commit_text("hex", "zzz")
    assert not result.ok
    assert isinstance(result.error, InvalidColorInput)
    assert result.color == cyan
    assert session.color == cyan


def test_commit_display_only_notation_is_rejected(session, cyan):
    result = session.commit_text(Notation.LAB, "50 20 10")
    assert not result.ok
    assert session.color == cyan


def test_commit_without_alpha_keeps_alpha(session):
    session.set_alpha(40)
    session.commit_text("rgb", "255, 0, 0")
    assert session.color.alpha == 40.0

    session.commit_text("hex", "#FF000080")
    assert session.color.alpha == pytest.approx(128 / 255 * 100)

    session.commit_text("rgb", "rgb(0 0 255 / 0.25)")
    assert session.color.alpha == 25.0


def test_commit_achromatic_keeps_previous_hue(session):
    session.commit_text("hex", "#808080")
    assert session.rgb == RGB(128, 128, 128)
    assert session.color.hue == 180.0

    session.commit_text("rgb", "0, 0, 0")
    assert session.color.hue == 180.0


def test_commit_achromatic_uses_fallback_hue(session):
    session.commit_text("hex", "#FFFFFF", fallback_hue=42)
    assert session.color.hue == 42.0


def test_commit_achromatic_hsl_uses_written_hue(session):
    session.commit_text("hsl", "hsl(300, 0%, 40%)", fallback_hue=42)
    assert session.color.hue == 300.0
    assert session.color.saturation == 0.0
    assert session.color.value == pytest.approx(40.0)


def test_commit_hsl_is_exact(session):
    session.commit_text("hsl", "hsl(210, 50%, 40%)")
    h, s, l = session.hsl
    assert h == pytest.approx(210.0)
    assert s == pytest.approx(50.0)
    assert l == pytest.approx(40.0)
    assert session.rgb == RGB(51, 102, 153)


def test_end_edit_reverts_to_last_valid_value(session):
    session.begin_edit("rgb")
    assert session.active_edit is Notation.RGB
    assert not session.commit_text("rgb", "10, 20").ok
    assert session.end_edit() == "0, 255, 255"
    assert session.active_edit is None


def test_end_edit_without_active_field(session):
    assert session.end_edit() == "#00FFFF"


def test_begin_edit_rejects_unknown_notation(session):
    with pytest.raises(ValueError):
        session.begin_edit("cmyk")


def test_format_and_formats(session):
    assert session.format("hex").display == "#00FFFF"
    session.set_alpha(50)
    formats = session.formats()
    assert formats[Notation.RGB].copy == "rgba(0, 255, 255, 0.50)"
    assert formats[Notation.HEX].copy == "#00FFFF80"
    assert len(formats) == 7


def test_contrast_uses_session_background(session):
    assert session.contrast().level is WCAGLevel.FAIL
    session.background = "#000000"
    assert session.contrast().level is WCAGLevel.AAA
    assert session.contrast("white").level is WCAGLevel.FAIL


def test_palettes_follow_color(session):
    assert session.palettes().scale[5].hex == "#00FFFF"
    session.set_hue(0)
    assert session.palettes().scale[5].hex == "#FF0000"


def test_pointer_updates(session):
    session.pick_saturation_value(0, 0, 100, 100)
    assert session.rgb == RGB(255, 255, 255)
    assert session.color.hue == 180.0

    session.pick_saturation_value(100, 0, 100, 100)
    session.pick_hue(150, 300)
    assert session.color.hue == 180.0
    session.pick_hue(300, 300)
    assert session.rgb == RGB(255, 0, 0)

    session.pick_alpha(50, 200)
    assert session.color.alpha == 75.0


def test_pointer_updates_are_idempotent(session):
    first = session.pick_saturation_value(30, 40, 120, 80)
    second = session.pick_saturation_value(30, 40, 120, 80)
    assert first == second


def test_session_with_initial_color():
    session = ColorSession(Color(0, 100, 100, 20), background="black")
    assert session.rgb == RGB(255, 0, 0)
    assert session.contrast().background == RGB(0, 0, 0)


def test_palette_base_stops_match_base_hex():
    from chromapick.codec import format_color
    from chromapick.conversions import hsl_to_rgb

    colors = [Color(0, 50, 60)]
    for h in range(0, 360, 20):
        for s in range(0, 101, 10):
            for v in range(0, 101, 10):
                colors.append(Color(h, s, v))

    for color in colors:
        base_hex = format_color("hex", color).display
        palettes = ColorSession(color).palettes()

        assert palettes.tints[-1].hex == base_hex
        assert palettes.scale[5].hex == base_hex
        assert palettes.shades[0].hex == base_hex
        assert palettes.tones[0].hex == base_hex

        h, s, _ = color.hsl
        assert palettes.shades[-1].rgb == hsl_to_rgb(h, s, 0)


def test_palette_base_stops_for_half_channel_color():
    session = ColorSession(Color(0, 50, 60))
    assert session.format("hex").display == "#994D4D"
    palettes = session.palettes()
    assert palettes.tints[-1].hex == "#994D4D"
    assert palettes.scale[5].hex == "#994D4D"
