"""Rasterization of primitives into a ``Framebuffer``.

Every draw call clips silently: pixels outside the destination are skipped,
and nothing here raises for out-of-range geometry.  Rectangles and circles
are drawn wherever they overlap the framebuffer.  Tile and sprite blits are
stricter about their *source*: unless the whole crop region lies inside
the source framebuffer, the blit is skipped entirely.

Tiles are copied verbatim (alpha included); sprites are alpha-composited
onto whatever is already in the destination.
"""

from __future__ import annotations

import logging

from .color import set_pixel
from .geometry import clamp, compute_index, in_bounds, square, squared_distance
from .types import Framebuffer, Region

logger = logging.getLogger(__name__)


def draw_pixel(framebuffer: Framebuffer, x: int, y: int, color: int) -> None:
    """Blend *color* onto ``(x, y)``; no-op when the point is off the buffer."""
    if not in_bounds(framebuffer, x, y):
        return
    set_pixel(framebuffer, compute_index(framebuffer, x, y), color)


def draw_rect(framebuffer: Framebuffer, region: Region, color: int) -> None:
    """Blend *color* over the part of *region* that overlaps the framebuffer."""
    min_x = clamp(region.x, 0, framebuffer.width)
    max_x = clamp(region.x + region.width, 0, framebuffer.width)
    min_y = clamp(region.y, 0, framebuffer.height)
    max_y = clamp(region.y + region.height, 0, framebuffer.height)

    for px in range(min_x, max_x):
        for py in range(min_y, max_y):
            draw_pixel(framebuffer, px, py, color)


def draw_circle(framebuffer: Framebuffer, x: int, y: int, r: int, color: int) -> None:
    """Fill the closed disk of radius *r* centred on ``(x, y)``.

    A pixel is inside when its squared distance to the centre is at most
    ``r * r``, so boundary pixels are painted.  The whole framebuffer is
    scanned; a negative radius paints nothing.
    """
    if r < 0:
        return
    radius_sq = square(r)
    for py in range(framebuffer.height):
        for px in range(framebuffer.width):
            if squared_distance(px, py, x, y) <= radius_sq:
                draw_pixel(framebuffer, px, py, color)


def _source_region_valid(source: Framebuffer, region: Region) -> bool:
    # Both corners are tested with in_bounds, so the far corner
    # (x + width, y + height) must itself address a source pixel.
    return in_bounds(source, region.x, region.y) and in_bounds(
        source, region.right, region.bottom
    )


def _blit_span(
    framebuffer: Framebuffer, x: int, y: int, region: Region
) -> tuple[range, range]:
    """Column and row offsets into *region* that land inside the destination.

    Width and height are clamped to the space remaining right of / below the
    destination origin.  A negative origin skips the columns or rows that
    would fall before the left or top edge.
    """
    width = clamp(region.width, 0, framebuffer.width - x)
    height = clamp(region.height, 0, framebuffer.height - y)
    return range(max(0, -x), width), range(max(0, -y), height)


def draw_tile(
    framebuffer: Framebuffer, x: int, y: int, source: Framebuffer, region: Region
) -> None:
    """Copy *region* of *source* to ``(x, y)`` without blending."""
    if not _source_region_valid(source, region):
        logger.debug(
            "Skipping tile: region %s is not inside %r", region, source
        )
        return

    columns, rows = _blit_span(framebuffer, x, y, region)
    src_pixels = source.pixels
    dst_pixels = framebuffer.pixels
    for col in columns:
        for row in rows:
            src_index = compute_index(source, region.x + col, region.y + row)
            dst_index = compute_index(framebuffer, x + col, y + row)
            dst_pixels[dst_index] = src_pixels[src_index]


def draw_sprite(
    framebuffer: Framebuffer, x: int, y: int, source: Framebuffer, region: Region
) -> None:
    """Alpha-composite *region* of *source* onto the framebuffer at ``(x, y)``."""
    if not _source_region_valid(source, region):
        logger.debug(
            "Skipping sprite: region %s is not inside %r", region, source
        )
        return

    columns, rows = _blit_span(framebuffer, x, y, region)
    src_pixels = source.pixels
    for col in columns:
        for row in rows:
            src_index = compute_index(source, region.x + col, region.y + row)
            draw_pixel(framebuffer, x + col, y + row, src_pixels[src_index])
