import itertools

import pytest

from color_logic import (HSLColor, HarmonyScheme, InvalidColorFormat, RGBColor, UnknownScheme,
                         angle_to_hue, generate_scheme, hex_to_hsl, hsl_to_hex, hue_to_point,
                         is_partial_hex, parse_hex, relative_luminance, rgb_to_hsl_string,
                         rgb_to_rgb_string, round_half_up)

CENTER = 175
RADIUS = 175


def hue_distance(a, b):
    d = abs(a - b) % 360
    return min(d, 360 - d)


# --- Parsing ---

def test_parse_hex():
    assert parse_hex("#FF8000") == RGBColor(255, 128, 0)
    assert parse_hex("#ff8000") == (255, 128, 0)
    assert parse_hex("  #00ff00 ") == (0, 255, 0)


def test_parse_hex_shorthand():
    assert parse_hex("#abc") == (170, 187, 204)


@pytest.mark.parametrize("text", ["ff0000", "#ff00", "#gg0000", "", "#ff00001", "red", None, 0xff0000])
def test_parse_hex_rejects_malformed(text):
    with pytest.raises(InvalidColorFormat) as exc:
        parse_hex(text)
    assert exc.value.text == text
    assert isinstance(exc.value, ValueError)


@pytest.mark.parametrize("text", ["", "  ", "#", " #00f", "#3a86f", "#abc"])
def test_partial_hex(text):
    assert is_partial_hex(text)


@pytest.mark.parametrize("text", ["#3a86ff", " #00ff00", "#00ff00 ", "#zz", "00ff00", "#3a8 "])
def test_not_partial_hex(text):
    assert not is_partial_hex(text)


def test_rgb_hex_is_lowercase_and_padded():
    assert RGBColor(10, 0, 171).hex == "#0a00ab"


# --- hex -> HSL ---

def test_gray_is_achromatic():
    assert hex_to_hsl("#808080") == HSLColor(0, 0, 50)


def test_primaries():
    assert hex_to_hsl("#ff0000") == (0, 100, 50)
    assert hex_to_hsl("#00ff00") == (120, 100, 50)
    assert hex_to_hsl("#0000ff") == (240, 100, 50)


def test_black_white_and_case():
    assert hex_to_hsl("#000000") == (0, 0, 0)
    assert hex_to_hsl("#FFFFFF") == (0, 0, 100)
    assert hex_to_hsl("#FF00ff") == (300, 100, 50)


def test_hex_to_hsl_rejects_malformed():
    with pytest.raises(InvalidColorFormat):
        hex_to_hsl("#12345z")


def test_hsl_components_in_range():
    steps = range(0, 256, 17)
    for r, g, b in itertools.product(steps, steps, steps):
        h, s, l = hex_to_hsl(RGBColor(r, g, b).hex)
        assert 0 <= h < 360
        assert 0 <= s <= 100
        assert 0 <= l <= 100
        assert all(isinstance(v, int) for v in (h, s, l))


# --- HSL -> hex ---

def test_hsl_to_hex_primaries():
    assert hsl_to_hex(0, 100, 50) == "#ff0000"
    assert hsl_to_hex(120, 100, 50) == "#00ff00"
    assert hsl_to_hex(240, 100, 50) == "#0000ff"
    assert hsl_to_hex(0, 0, 50) == "#808080"


def test_hsl_to_hex_rounds_half_up():
    # green channel lands exactly on 127.5
    assert hsl_to_hex(30, 100, 50) == "#ff8000"


def test_hsl_to_hex_lowercase():
    assert hsl_to_hex(200, 50, 50) == "#4095bf"


def test_hsl_to_hex_wraps_hue():
    assert hsl_to_hex(360, 100, 50) == "#ff0000"
    assert hsl_to_hex(-120, 100, 50) == hsl_to_hex(240, 100, 50)
    assert hsl_to_hex(420, 100, 50) == hsl_to_hex(60, 100, 50)


def test_round_trip_within_one():
    for h, s, l in itertools.product(range(0, 360, 7), (80, 90, 100), (40, 50, 60)):
        back = hex_to_hsl(hsl_to_hex(h, s, l))
        assert hue_distance(back.h, h) <= 1, (h, s, l, back)
        assert abs(back.s - s) <= 1, (h, s, l, back)
        assert abs(back.l - l) <= 1, (h, s, l, back)


def test_hex_round_trip_primaries():
    for hex_value in ("#ff0000", "#00ff00", "#0000ff", "#ffff00", "#00ffff", "#ff00ff", "#808080"):
        assert hsl_to_hex(*hex_to_hsl(hex_value)) == hex_value


def test_code_strings():
    assert rgb_to_rgb_string(RGBColor(255, 0, 0)) == "rgb(255, 0, 0)"
    assert rgb_to_hsl_string(RGBColor(255, 0, 0)) == "hsl(0, 100%, 50%)"


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2


# --- Schemes ---

def test_complementary():
    base = HSLColor(200, 50, 50)
    assert generate_scheme(base, HarmonyScheme.COMPLEMENTARY) == (base, HSLColor(20, 50, 50))


def test_analogous_order():
    base = HSLColor(10, 60, 40)
    assert generate_scheme(base, "analogous") == (HSLColor(340, 60, 40), base, HSLColor(40, 60, 40))


def test_triadic_spacing():
    palette = generate_scheme(HSLColor(300, 70, 45), HarmonyScheme.TRIADIC)
    assert [c.h for c in palette] == [300, 60, 180]
    for a, b in itertools.combinations(palette, 2):
        assert (a.h - b.h) % 360 in (120, 240)
    assert all((c.s, c.l) == (70, 45) for c in palette)


def test_tetradic():
    palette = generate_scheme(HSLColor(45, 30, 70), HarmonyScheme.TETRADIC)
    assert [c.h for c in palette] == [45, 135, 225, 315]


def test_monochromatic():
    palette = generate_scheme(HSLColor(123, 77, 10), HarmonyScheme.MONOCHROMATIC)
    assert len(palette) == 5
    assert {(c.h, c.s) for c in palette} == {(123, 77)}
    assert [c.l for c in palette] == [20, 35, 50, 65, 80]


def test_scheme_accepts_string_values():
    base = HSLColor(0, 100, 50)
    assert generate_scheme(base, "Triadic") == generate_scheme(base, HarmonyScheme.TRIADIC)


def test_scheme_normalizes_base_hue():
    palette = generate_scheme(HSLColor(370, 50, 50), "complementary")
    assert [c.h for c in palette] == [10, 190]


def test_unknown_scheme_fails_fast():
    with pytest.raises(UnknownScheme) as exc:
        generate_scheme(HSLColor(0, 100, 50), "pentadic")
    assert exc.value.scheme == "pentadic"


def test_scheme_labels():
    assert [s.label for s in HarmonyScheme] == [
        "Monochromatic", "Complementary", "Analogous", "Triadic", "Tetradic"]


# --- Wheel geometry ---

def test_angle_on_rim():
    assert angle_to_hue(CENTER + RADIUS, CENTER, CENTER, CENTER, RADIUS) == 0
    assert angle_to_hue(CENTER, CENTER + RADIUS, CENTER, CENTER, RADIUS) == 90
    assert angle_to_hue(CENTER - RADIUS, CENTER, CENTER, CENTER, RADIUS) == 180
    assert angle_to_hue(CENTER, CENTER - RADIUS, CENTER, CENTER, RADIUS) == 270


def test_angle_outside_circle():
    assert angle_to_hue(CENTER + RADIUS + 1, CENTER, CENTER, CENTER, RADIUS) is None
    assert angle_to_hue(0, 0, CENTER, CENTER, RADIUS) is None


def test_angle_wraps_to_zero():
    assert angle_to_hue(CENTER + 100, CENTER - 0.5, CENTER, CENTER, RADIUS) == 0


def test_hue_to_point():
    x, y = hue_to_point(90, CENTER, CENTER, 165)
    assert x == pytest.approx(CENTER)
    assert y == pytest.approx(CENTER + 165)
    assert angle_to_hue(*hue_to_point(217, CENTER, CENTER, 100), CENTER, CENTER, RADIUS) == 217


def test_relative_luminance():
    assert relative_luminance(RGBColor(255, 255, 255)) == pytest.approx(1.0)
    assert relative_luminance(RGBColor(0, 0, 0)) == 0.0
    assert relative_luminance(RGBColor(255, 255, 0)) == pytest.approx(0.9278, abs=1e-4)
    assert relative_luminance(RGBColor(0, 0, 255)) == pytest.approx(0.0722)
