"""Tests for the colors module."""

import itertools

import pytest
from colormix_solver.colors.color import RGB, CMYK, ColorSpace
from colormix_solver.colors.codec import (
    decode_hex,
    encode_hex,
    rgb_to_cmyk,
    cmyk_to_rgb,
    hex_to_cmyk,
    cmyk_to_hex,
    format_color,
)
from colormix_solver.errors import InvalidFormatError

# Coarse grid over the RGB cube, edges included
GRID = [0, 1, 17, 64, 127, 128, 200, 254, 255]


class TestHexCodec:
    """Tests for hex encoding and decoding."""

    def test_decode(self):
        assert decode_hex("#123456") == RGB(0x12, 0x34, 0x56)

    def test_decode_uppercase(self):
        assert decode_hex("#FFa0B1") == RGB(255, 160, 177)

    def test_encode_lowercase(self):
        assert encode_hex(255, 160, 177) == "#ffa0b1"

    def test_encode_rounds_and_clamps(self):
        assert encode_hex(127.5, -10, 300.2) == "#8000ff"
        assert encode_hex(0.49, 254.6, 12.5) == "#00ff0d"

    def test_encode_length(self):
        assert len(encode_hex(0, 0, 0)) == 7

    def test_round_trip(self):
        for r, g, b in itertools.product(GRID, repeat=3):
            rgb = RGB(r, g, b)
            assert decode_hex(rgb.to_hex()) == rgb

    @pytest.mark.parametrize("code", ["123456", "#12345", "#1234567", "#12345g", "", "red"])
    def test_invalid_format(self, code):
        with pytest.raises(InvalidFormatError):
            decode_hex(code)

    def test_invalid_type(self):
        with pytest.raises(InvalidFormatError):
            decode_hex(0x123456)

    def test_invalid_format_is_value_error(self):
        with pytest.raises(ValueError):
            decode_hex("#zzzzzz")


class TestCmyk:
    """Tests for RGB/CMYK conversion."""

    def test_black_is_canonical(self):
        assert rgb_to_cmyk(RGB(0, 0, 0)) == CMYK(0.0, 0.0, 0.0, 100.0)

    def test_white(self):
        assert rgb_to_cmyk(RGB(255, 255, 255)) == CMYK(0.0, 0.0, 0.0, 0.0)

    def test_primaries(self):
        assert rgb_to_cmyk(RGB(255, 0, 0)) == CMYK(0.0, 100.0, 100.0, 0.0)
        assert cmyk_to_rgb(CMYK(100, 0, 100, 0)) == RGB(0, 255, 0)

    def test_key_100_is_black(self):
        assert cmyk_to_rgb(CMYK(30, 60, 90, 100)) == RGB(0, 0, 0)

    def test_inverse_within_one(self):
        for r, g, b in itertools.product(GRID, repeat=3):
            back = cmyk_to_rgb(rgb_to_cmyk(RGB(r, g, b)))
            assert abs(back.r - r) <= 1
            assert abs(back.g - g) <= 1
            assert abs(back.b - b) <= 1

    def test_components_in_range(self):
        for r, g, b in itertools.product(GRID, repeat=3):
            cmyk = rgb_to_cmyk(RGB(r, g, b))
            assert all(0.0 <= v <= 100.0 for v in cmyk.as_tuple())

    def test_hex_helpers(self):
        assert hex_to_cmyk("#000000") == CMYK(0.0, 0.0, 0.0, 100.0)
        assert cmyk_to_hex(hex_to_cmyk("#123456")) == "#123456"


class TestFormatColor:
    """Tests for display formatting."""

    def test_rgb_is_hex(self):
        assert format_color("#ABCDEF") == "#abcdef"

    def test_cmyk(self):
        assert format_color("#ff0000", ColorSpace.CMYK) == (
            "C: 0.00%, M: 100.00%, Y: 100.00%, K: 0.00%"
        )

    def test_from_flag(self):
        assert ColorSpace.from_flag(True) == ColorSpace.CMYK
        assert ColorSpace.from_flag(False) == ColorSpace.RGB
