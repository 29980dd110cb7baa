from chromapick.codec import parse_hex, rgb_to_hex, InvalidColorInput
import pytest


def test_parse_six_digits():
    parsed = parse_hex("#00FFFF")
    assert parsed.rgb == (0, 255, 255)
    assert parsed.alpha == 1.0
    assert not parsed.alpha_explicit


def test_parse_shorthand_duplicates_digits():
    assert parse_hex("#0F8").rgb == (0, 255, 136)
    assert parse_hex("0f8").rgb == (0, 255, 136)
    assert parse_hex("  #abc ").rgb == (170, 187, 204)


def test_parse_alpha_digits_are_explicit():
    four = parse_hex("#0F88")
    assert four.rgb == (0, 255, 136)
    assert four.alpha == pytest.approx(136 / 255)
    assert four.alpha_explicit

    eight = parse_hex("#00FFFF80")
    assert eight.rgb == (0, 255, 255)
    assert eight.alpha == pytest.approx(128 / 255)
    assert eight.alpha_explicit

    assert parse_hex("#000000FF").alpha == 1.0
    assert parse_hex("#000000FF").alpha_explicit


def test_parse_is_case_insensitive():
    assert parse_hex("#aBcDeF").rgb == parse_hex("#ABCDEF").rgb == (171, 205, 239)


@pytest.mark.parametrize("text", ["", "#", "#12345", "#1234567", "#GGG", "##123", "#12 34 56", "rgb(0,0,0)"])
def test_parse_rejects(text):
    with pytest.raises(InvalidColorInput) as info:
        parse_hex(text)
    assert info.value.notation == "hex"
    assert info.value.text == text


def test_rgb_to_hex_is_uppercase_and_padded():
    assert rgb_to_hex(0, 255, 255) == "#00FFFF"
    assert rgb_to_hex(1, 2, 171) == "#0102AB"


def test_only_alpha_forms_are_explicit():
    assert not parse_hex("#0F8").alpha_explicit
    assert not parse_hex("#00FF88").alpha_explicit
    # #RGBA: the fourth digit is an alpha nibble
    four = parse_hex("#0F8C")
    assert four.alpha_explicit
    assert four.alpha == pytest.approx(0xCC / 255)
