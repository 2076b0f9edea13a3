"""Coordinate helpers shared by the draw calls."""

from __future__ import annotations

import typing

if typing.TYPE_CHECKING:
    from .types import Framebuffer


def in_bounds(framebuffer: Framebuffer, x: int, y: int) -> bool:
    """Return whether ``(x, y)`` addresses a pixel of *framebuffer*.

    This is the only gate for single-pixel access; ``compute_index`` and
    ``set_pixel`` trust their callers.
    """
    return 0 <= x < framebuffer.width and 0 <= y < framebuffer.height


def clamp(value: int, lo: int, hi: int) -> int:
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def compute_index(framebuffer: Framebuffer, x: int, y: int) -> int:
    """Row-major offset of ``(x, y)``.  Out-of-range input gives a garbage index."""
    return y * framebuffer.width + x


def square(x: int) -> int:
    return x * x


def squared_distance(x1: int, y1: int, x2: int, y2: int) -> int:
    return square(x1 - x2) + square(y1 - y2)
