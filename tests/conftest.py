"""
Shared pytest fixtures for softraster tests.

Provides:
- small_fb: 8x6 opaque-black framebuffer
- large_fb: 24x20 opaque-black framebuffer
- pattern_fb: 4x4 source framebuffer whose pixels encode their coordinates
- assert_picture: compare a framebuffer against an ASCII picture
"""

from __future__ import annotations

import pytest

from softraster.rendering import Framebuffer

SMALL_W = 8
SMALL_H = 6
LARGE_W = 24
LARGE_H = 20
PATTERN_SIZE = 4

BLACK = 0x000000FF


def pattern_color(x: int, y: int) -> int:
    """Color stored at ``(x, y)`` of ``pattern_fb``; alpha doubles as a tag."""
    return 0x10203000 | (y * PATTERN_SIZE + x + 1)


@pytest.fixture
def small_fb() -> Framebuffer:
    return Framebuffer(SMALL_W, SMALL_H)


@pytest.fixture
def large_fb() -> Framebuffer:
    return Framebuffer(LARGE_W, LARGE_H)


@pytest.fixture
def pattern_fb() -> Framebuffer:
    pixels = [
        pattern_color(x, y)
        for y in range(PATTERN_SIZE)
        for x in range(PATTERN_SIZE)
    ]
    return Framebuffer(PATTERN_SIZE, PATTERN_SIZE, pixels)


def _check_picture(fb: Framebuffer, colors: dict[str, int], rows: list[str]) -> None:
    assert len(rows) == fb.height, "Picture height does not match framebuffer"
    for y, row in enumerate(rows):
        assert len(row) == fb.width, f"Picture row {y} has the wrong width"
        for x, ch in enumerate(row):
            expected = colors[ch]
            actual = fb.pixel_at(x, y)
            assert actual == expected, (
                f"pixel ({x}, {y}): expected {expected:#010x}, got {actual:#010x}"
            )


@pytest.fixture
def assert_picture():
    """Return a checker: ``assert_picture(fb, {'x': color, ...}, rows)``."""
    return _check_picture


@pytest.fixture(name="pattern_color")
def pattern_color_fixture():
    """Expose ``pattern_color`` so tests can compute expected blit output."""
    return pattern_color
