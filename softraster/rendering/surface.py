"""PyGame-inspired imperative drawing surface.

The ``Surface`` class is the user-facing wrapper around a ``Framebuffer``.
Draw methods take keyword arguments and accept colors in any format
``normalize_color`` understands, then forward to the raster functions,
which do the actual clipping and blending.
"""

from __future__ import annotations

import logging

import numpy as np

from softraster.configurations.configuration_constants import DefaultColors

from . import raster
from .color import ColorLike, normalize_color
from .geometry import in_bounds
from .types import Framebuffer, Region

logger = logging.getLogger(__name__)


def _as_region(region: Region | tuple[int, int, int, int]) -> Region:
    if isinstance(region, Region):
        return region
    if isinstance(region, tuple) and len(region) == 4:
        return Region(*region)
    raise TypeError(
        f"region must be a Region or an (x, y, w, h) tuple, got {region!r}"
    )


def _as_framebuffer(source: Surface | Framebuffer) -> Framebuffer:
    if isinstance(source, Surface):
        return source.framebuffer
    if isinstance(source, Framebuffer):
        return source
    raise TypeError(
        f"source must be a Surface or Framebuffer, got {type(source).__name__}"
    )


class Surface:
    """Owns a framebuffer and exposes keyword-only draw methods.

    :param width: Width of the drawing area in pixels.
    :param height: Height of the drawing area in pixels.
    :param background: Initial fill color.  Defaults to opaque black.
    :param framebuffer: Wrap an existing framebuffer instead of allocating
        one.  *width*, *height* and *background* are ignored in that case.
    """

    def __init__(
        self,
        width: int = 0,
        height: int = 0,
        *,
        background: ColorLike = DefaultColors.Background,
        framebuffer: Framebuffer | None = None,
    ) -> None:
        if framebuffer is None:
            framebuffer = Framebuffer.filled(width, height, normalize_color(background))
        self.framebuffer = framebuffer
        logger.debug("Created surface over %r", framebuffer)

    @classmethod
    def from_array(cls, array: np.ndarray) -> Surface:
        """Wrap an ``(height, width, 4)`` uint8 RGBA array, e.g. a decoded image."""
        return cls(framebuffer=Framebuffer.from_rgba_array(array))

    @property
    def width(self) -> int:
        return self.framebuffer.width

    @property
    def height(self) -> int:
        return self.framebuffer.height

    # ------------------------------------------------------------------
    # Draw methods (all keyword-only after self)
    # ------------------------------------------------------------------

    def pixel(self, *, x: int, y: int, color: ColorLike = "white") -> None:
        """Blend a single pixel."""
        raster.draw_pixel(self.framebuffer, x, y, normalize_color(color))

    def rect(
        self,
        *,
        x: int,
        y: int,
        w: int,
        h: int,
        color: ColorLike = "white",
    ) -> None:
        """Fill a rectangle (top-left origin)."""
        raster.draw_rect(self.framebuffer, Region(x, y, w, h), normalize_color(color))

    def circle(
        self,
        *,
        x: int,
        y: int,
        radius: int,
        color: ColorLike = "white",
    ) -> None:
        """Fill a circle (center-origin), boundary pixels included."""
        raster.draw_circle(self.framebuffer, x, y, radius, normalize_color(color))

    def tile(
        self,
        *,
        x: int,
        y: int,
        source: Surface | Framebuffer,
        region: Region | tuple[int, int, int, int],
    ) -> None:
        """Copy *region* of *source* verbatim to ``(x, y)``."""
        raster.draw_tile(
            self.framebuffer, x, y, _as_framebuffer(source), _as_region(region)
        )

    def sprite(
        self,
        *,
        x: int,
        y: int,
        source: Surface | Framebuffer,
        region: Region | tuple[int, int, int, int],
    ) -> None:
        """Alpha-blend *region* of *source* onto ``(x, y)``."""
        raster.draw_sprite(
            self.framebuffer, x, y, _as_framebuffer(source), _as_region(region)
        )

    # ------------------------------------------------------------------
    # Whole-surface operations
    # ------------------------------------------------------------------

    def clear(self, color: ColorLike | None = None) -> None:
        """Overwrite every pixel with *color* (opaque black by default).

        Unlike the draw methods this does not blend.
        """
        packed = DefaultColors.Background if color is None else normalize_color(color)
        self.framebuffer.pixels[:] = packed
        logger.debug("Cleared %r to %#010x", self.framebuffer, packed)

    def get_at(self, x: int, y: int) -> int | None:
        """Return the packed color at ``(x, y)``, or ``None`` off the surface."""
        if not in_bounds(self.framebuffer, x, y):
            return None
        return self.framebuffer.pixel_at(x, y)

    def to_array(self) -> np.ndarray:
        """Return the pixels as an ``(height, width, 4)`` uint8 RGBA array."""
        return self.framebuffer.to_rgba_array()
