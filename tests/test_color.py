"""
Tests for color.py
"""

import pytest

from color import BLACK, WHITE, Color, ColorParseError


class TestFromHex:
    def test_rgb(self):
        assert Color.from_hex("#1E93FF") == Color(30, 147, 255, 255)

    def test_rgba(self):
        assert Color.from_hex("#F93C3180") == Color(249, 60, 49, 128)

    def test_without_hash(self):
        assert Color.from_hex("000000") == BLACK

    def test_lowercase(self):
        assert Color.from_hex("#ffffff") == WHITE

    @pytest.mark.parametrize("code", ["#FFF", "#FFFFF", "#FFFFFFF", ""])
    def test_invalid_length(self, code):
        with pytest.raises(ColorParseError, match="6 or 8 characters"):
            Color.from_hex(code)

    def test_invalid_digit_names_channel(self):
        with pytest.raises(ColorParseError, match="for G"):
            Color.from_hex("#00ZZ00")

    @pytest.mark.parametrize(
        "code, channel",
        [("# f0000", "R"), ("#ff 000", "G"), ("١٢٣٤٥٦", "R"), ("#0000+f", "B")],
    )
    def test_rejects_non_ascii_hex_digits(self, code, channel):
        with pytest.raises(ColorParseError, match=f"for {channel}"):
            Color.from_hex(code)

    def test_parse_error_is_value_error(self):
        with pytest.raises(ValueError):
            Color.from_hex("#nothex")

    def test_hex_roundtrip(self):
        assert Color.from_hex(Color(1, 2, 3, 4).hex()) == Color(1, 2, 3, 4)
        assert WHITE.hex() == "#FFFFFFFF"


class TestArithmetic:
    def test_blend_extremes(self):
        red = Color(255, 0, 0)
        assert red.blend(WHITE, 0) == red
        assert red.blend(WHITE, 255) == WHITE

    def test_blend_half(self):
        assert BLACK.blend(WHITE, 128) == Color(128, 128, 128, 255)

    @pytest.mark.parametrize("opacity", [-1, 256, 300])
    def test_blend_opacity_out_of_range(self, opacity):
        with pytest.raises(ValueError, match="opacity"):
            BLACK.blend(WHITE, opacity)

    def test_check_accepts_bytes(self):
        assert WHITE.check() is WHITE

    @pytest.mark.parametrize(
        "color, channel",
        [
            (Color(300, 0, 0), "red"),
            (Color(0, -1, 0), "green"),
            (Color(0, 0, 0, 256), "alpha"),
        ],
    )
    def test_check_rejects_out_of_range_channels(self, color, channel):
        with pytest.raises(ValueError, match=channel):
            color.check()

    def test_grayscale(self):
        assert Color(255, 0, 0, 7).grayscale() == Color(76, 76, 76, 7)
        assert WHITE.grayscale() == WHITE

    def test_random_is_opaque_and_seeded(self):
        color = Color.random(5)
        assert color.alpha == 255
        assert all(0 <= channel <= 255 for channel in color)
        assert Color.random(5) == color
