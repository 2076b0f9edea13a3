"""Unit tests for softraster.rendering.color.

Covers channel extraction, packing, the "over" compositor, set_pixel and
normalize_color() parsing of user-facing color literals.
"""

from __future__ import annotations

import pytest

from softraster.rendering import Framebuffer
from softraster.rendering.color import (
    NAMED_COLORS,
    blend_channel,
    blend_colors,
    channel,
    get_a,
    get_b,
    get_g,
    get_r,
    normalize_color,
    pack,
    set_pixel,
    to_hex,
)

RED = 0xFF0000FF
BLUE = 0x000080FF
BLEND = 0x7F0080FF
BLACK = 0x000000FF

# ======================================================================
# Channel extraction and packing
# ======================================================================


class TestChannels:
    """get_r/get_g/get_b/get_a read the RRGGBBAA byte layout."""

    def test_get_r(self) -> None:
        assert get_r(RED) == 0xFF
        assert get_r(BLUE) == 0x00
        assert get_r(BLEND) == 0x7F
        assert get_r(BLACK) == 0x00

    def test_get_g(self) -> None:
        assert get_g(0x00FF0080) == 0xFF
        assert get_g(0x7F8000FF) == 0x80
        assert get_g(RED) == 0x00

    def test_get_b(self) -> None:
        assert get_b(BLUE) == 0x80
        assert get_b(BLEND) == 0x80
        assert get_b(RED) == 0x00

    def test_get_a(self) -> None:
        assert get_a(RED) == 0xFF
        assert get_a(0x00FF0080) == 0x80
        assert get_a(0x0000FF40) == 0x40
        assert get_a(0x12345600) == 0x00

    def test_channel_by_name(self) -> None:
        color = 0x12345678
        assert channel(color, "r") == 0x12
        assert channel(color, "green") == 0x34
        assert channel(color, "B") == 0x56
        assert channel(color, "alpha") == 0x78

    def test_channel_unknown_name_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown channel"):
            channel(RED, "hue")

    def test_pack(self) -> None:
        assert pack(0xFF, 0x00, 0x00, 0xFF) == RED
        assert pack(0x12, 0x34, 0x56, 0x78) == 0x12345678

    def test_pack_truncates_to_eight_bits(self) -> None:
        assert pack(0x1FF, 0, 0, 0x100) == 0xFF000000

    def test_accepts_numpy_scalars(self) -> None:
        fb = Framebuffer(1, 1, [0xAABBCCDD])
        value = fb.pixels[0]
        assert (get_r(value), get_g(value), get_b(value), get_a(value)) == (
            0xAA,
            0xBB,
            0xCC,
            0xDD,
        )


# ======================================================================
# Compositing
# ======================================================================


class TestBlendChannel:
    """blend_channel() uses truncating division in 0-255 space."""

    def test_opaque_takes_foreground(self) -> None:
        assert blend_channel(200, 17, 255) == 200

    def test_transparent_keeps_background(self) -> None:
        assert blend_channel(200, 17, 0) == 17

    def test_half_alpha_full_foreground(self) -> None:
        assert blend_channel(255, 0, 0x80) == 0x80

    def test_half_alpha_full_background(self) -> None:
        assert blend_channel(0, 255, 0x80) == 0x7F

    def test_quarter_alpha(self) -> None:
        assert blend_channel(255, 0, 0x40) == 0x40


class TestBlendColors:
    """blend_colors() composites fg over bg and always returns opaque."""

    def test_half_green_over_red(self) -> None:
        assert blend_colors(0x00FF0080, RED) == 0x7F8000FF

    def test_half_blue_over_red(self) -> None:
        assert blend_colors(0x0000FF80, RED) == BLEND

    def test_opaque_foreground_replaces_background(self) -> None:
        for fg in (RED, 0x123456FF, 0xFFFFFFFF):
            for bg in (BLACK, 0xABCDEF00, 0x80808080):
                assert blend_colors(fg, bg) == fg

    def test_transparent_foreground_keeps_background_channels(self) -> None:
        for bg in (BLACK, 0xABCDEF00, 0x80808080):
            result = blend_colors(0xFFFFFF00, bg)
            assert result == (bg & 0xFFFFFF00) | 0xFF

    def test_result_is_opaque(self) -> None:
        assert get_a(blend_colors(0x11223340, 0x44556600)) == 0xFF


class TestSetPixel:
    """set_pixel() blends onto the existing pixel at a flat index."""

    def test_blends_with_existing(self) -> None:
        fb = Framebuffer(2, 1, [RED, BLACK])
        set_pixel(fb, 0, 0x0000FF80)
        assert fb.pixel_at(0, 0) == BLEND
        assert fb.pixel_at(1, 0) == BLACK

    def test_color_is_always_foreground(self) -> None:
        fb = Framebuffer(1, 1, [0x0000FF80])
        set_pixel(fb, 0, RED)
        assert fb.pixel_at(0, 0) == RED


# ======================================================================
# Color literals
# ======================================================================


class TestNormalizeColor:
    """normalize_color() accepts ints, tuples, hex strings and names."""

    def test_packed_int_passthrough(self) -> None:
        assert normalize_color(0x7F0080FF) == 0x7F0080FF

    def test_packed_int_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="0-0xFFFFFFFF"):
            normalize_color(0x1_0000_0000)

    def test_negative_int(self) -> None:
        with pytest.raises(ValueError):
            normalize_color(-1)

    def test_rgb_tuple_is_opaque(self) -> None:
        assert normalize_color((255, 0, 0)) == RED

    def test_rgba_tuple(self) -> None:
        assert normalize_color((0, 0, 255, 128)) == 0x0000FF80

    def test_tuple_wrong_length(self) -> None:
        with pytest.raises(ValueError, match="3 or 4 elements"):
            normalize_color((255, 0))

    def test_tuple_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="0-255"):
            normalize_color((256, 0, 0))

    def test_tuple_float_not_allowed(self) -> None:
        with pytest.raises(ValueError, match="ints"):
            normalize_color((1.0, 0, 0))

    def test_hex6_is_opaque(self) -> None:
        assert normalize_color("#FF0000") == RED

    def test_hex8_keeps_alpha(self) -> None:
        assert normalize_color("#00ff0080") == 0x00FF0080

    def test_hex3_shorthand(self) -> None:
        assert normalize_color("#abc") == 0xAABBCCFF

    def test_named_color_case_and_whitespace(self) -> None:
        assert normalize_color("  Navy ") == 0x000080FF

    def test_unknown_string(self) -> None:
        with pytest.raises(ValueError, match="Unrecognized color"):
            normalize_color("not-a-color")

    def test_list_raises(self) -> None:
        with pytest.raises(TypeError, match="int, tuple or str"):
            normalize_color([255, 0, 0])  # type: ignore[arg-type]

    def test_bool_raises(self) -> None:
        with pytest.raises(TypeError):
            normalize_color(True)

    def test_to_hex(self) -> None:
        assert to_hex(BLEND) == "#7f0080ff"


class TestNamedColorsDict:
    """Validate the NAMED_COLORS dictionary itself."""

    def test_at_least_20_colors(self) -> None:
        assert len(NAMED_COLORS) >= 20

    def test_all_values_are_opaque(self) -> None:
        for name, value in NAMED_COLORS.items():
            assert get_a(value) == 0xFF, f"NAMED_COLORS[{name!r}] is not opaque"
