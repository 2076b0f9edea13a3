"""Software rasterizer over in-memory RGBA framebuffers."""

from __future__ import annotations

from .color import (
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
from .geometry import clamp, compute_index, in_bounds, square, squared_distance
from .raster import draw_circle, draw_pixel, draw_rect, draw_sprite, draw_tile
from .surface import Surface
from .types import Framebuffer, Region

__all__ = [
    "Framebuffer",
    "NAMED_COLORS",
    "Region",
    "Surface",
    "blend_channel",
    "blend_colors",
    "channel",
    "clamp",
    "compute_index",
    "draw_circle",
    "draw_pixel",
    "draw_rect",
    "draw_sprite",
    "draw_tile",
    "get_a",
    "get_b",
    "get_g",
    "get_r",
    "in_bounds",
    "normalize_color",
    "pack",
    "set_pixel",
    "square",
    "squared_distance",
    "to_hex",
]
