"""Tests for the notation parsers."""

import pytest

from colorcast.core.colors import CMYKColor, HexColor, HSLColor, RGBColor
from colorcast.core.errors import ParseError
from colorcast.shared import parser


class TestParseHex:
    def test_full_form(self):
        assert parser.parse_hex("#FF0000") == HexColor("ff0000", 1.0)

    def test_hash_is_optional(self):
        assert parser.parse_hex("00ff00") == HexColor("00ff00")

    def test_reduced_expands(self):
        assert parser.parse_hex("#fff") == parser.parse_hex("#ffffff")

    def test_alpha_forms(self):
        assert parser.parse_hex("#ff000080") == HexColor("ff0000", 128 / 255)
        assert parser.parse_hex("#f008") == HexColor("ff0000", 136 / 255)

    def test_transparent(self):
        color = parser.parse_hex("Transparent")
        assert color.to_rgb() == RGBColor(0, 0, 0, 0.0)

    @pytest.mark.parametrize("text", ["#12345", "#ggg", "##fff", "#", "fffffff", "#ff 000", "red"])
    def test_invalid(self, text):
        with pytest.raises(ParseError) as exc:
            parser.parse_hex(text)
        assert exc.value.notation == "hex"


class TestParseRgb:
    def test_wrapper_is_transparent(self):
        assert parser.parse_rgb("rgb(255, 0, 0)") == parser.parse_rgb("255,0,0")

    def test_whitespace_layout(self):
        assert parser.parse_rgb("255 0 0") == RGBColor(255, 0, 0, 1.0)

    def test_case_insensitive_wrapper(self):
        assert parser.parse_rgb("RGB(1, 2, 3)") == RGBColor(1, 2, 3)

    def test_alpha(self):
        assert parser.parse_rgb("rgba(255, 0, 0, 0.5)").a == 0.5
        assert parser.parse_rgb("rgb(255 0 0 / 25%)").a == 0.25

    def test_bare_percent_alpha_is_rejected(self):
        with pytest.raises(ParseError):
            parser.parse_rgb("255 0 0 50%")

    def test_rgba_without_alpha(self):
        assert parser.parse_rgb("rgba(1, 2, 3)") == RGBColor(1, 2, 3, 1.0)

    @pytest.mark.parametrize("text", [
        "rgb(255,256,0)",
        "rgb(255, 0)",
        "rgb(1, 2, 3, 4, 5)",
        "rgb(-1, 0, 0)",
        "rgb(1.5, 0, 0)",
        "rgb(0, 0, 0, 1.5)",
        "rgb(a, b, c)",
        "rgb(\u0663, 0, 0)",
        "rgb(1,,2)",
        "hsl(1, 2, 3)",
        "cmyk(1, 2, 3)",
        "not a color",
    ])
    def test_invalid(self, text):
        with pytest.raises(ParseError):
            parser.parse_rgb(text)


class TestParseHsl:
    def test_wrapped(self):
        assert parser.parse_hsl("hsl(0, 100%, 50%)") == HSLColor(0, 100.0, 50.0, 1.0)

    def test_hue_takes_leading_digits(self):
        assert parser.parse_hsl("hsl(120deg, 50%, 25%)").h == 120
        assert parser.parse_hsl("240° 50% 25%").h == 240

    def test_percent_sign_optional(self):
        assert parser.parse_hsl("0, 100, 50") == parser.parse_hsl("0, 100%, 50%")

    def test_fractional_percentages(self):
        assert parser.parse_hsl("hsl(10, 12.5%, 33.3%)") == HSLColor(10, 12.5, 33.3)

    def test_hue_upper_bound_is_valid(self):
        assert parser.parse_hsl("hsl(360, 0%, 0%)").h == 360

    def test_alpha(self):
        assert parser.parse_hsl("hsla(0, 100%, 50%, 0.25)").a == 0.25

    def test_bare_percent_alpha_is_rejected(self):
        with pytest.raises(ParseError):
            parser.parse_hsl("0 100% 100% 0%")

    @pytest.mark.parametrize("text", [
        "hsl(361, 0%, 0%)",
        "hsl(0, 101%, 50%)",
        "hsl(0, 50%, 100.5%)",
        "hsl(deg, 50%, 50%)",
        "hsl(0, 50%)",
        "hsl(0, -5%, 50%)",
        "rgb(0, 50, 50)",
    ])
    def test_invalid(self, text):
        with pytest.raises(ParseError):
            parser.parse_hsl(text)


class TestParseCmyk:
    def test_converts_to_red(self):
        assert parser.parse_cmyk("cmyk(0,100,100,0)").to_rgb() == RGBColor(255, 0, 0)

    def test_percent_signs(self):
        assert parser.parse_cmyk("0% 100% 100% 0%") == CMYKColor(0, 100, 100, 0)

    @pytest.mark.parametrize("text", [
        "cmyk(0, 101, 0, 0)",
        "cmyk(0, 0, 0)",
        "0 0 0 0 0",
        "cmyk(0.5, 0, 0, 0)",
        "rgb(0, 0, 0, 0)",
    ])
    def test_invalid(self, text):
        with pytest.raises(ParseError):
            parser.parse_cmyk(text)


class TestMatches:
    def test_predicates(self):
        assert parser.is_hex_string("#abc")
        assert not parser.is_hex_string("rgb(1, 2, 3)")
        assert parser.is_rgb_string("1 2 3")
        assert parser.is_hsl_string("hsl(1, 2%, 3%)")
        assert parser.is_cmyk_string("cmyk(1, 2, 3, 4)")

    def test_matches_by_name(self):
        assert parser.matches("cmyk", "1, 2, 3, 4")
        assert not parser.matches("hsl", "nope")
