"""Data structures for the rasterizer.

Framebuffer is the mutable pixel grid every draw call writes into.
Region is the transient rectangle descriptor used both as a paint area and
as a source crop for tile and sprite blits.
"""

from __future__ import annotations

import dataclasses

import numpy as np

from softraster.configurations.configuration_constants import (
    ChannelShift,
    DefaultColors,
    PixelLimits,
)

PIXEL_DTYPE = np.uint32


@dataclasses.dataclass(frozen=True)
class Region:
    """Immutable rectangle: top-left corner plus extent.

    ``x`` and ``y`` may be negative; ``width`` and ``height`` are expected
    to be non-negative but are not validated, since draw calls treat any
    empty extent as "paint nothing".
    """

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


class Framebuffer:
    """A ``width`` x ``height`` grid of packed ``RRGGBBAA`` pixels.

    Pixels live in a flat, row-major ``numpy.uint32`` array of exactly
    ``width * height`` elements.  Draw calls mutate the array in place and
    never resize it.

    :param width: Number of columns.
    :param height: Number of rows.
    :param pixels: Optional existing buffer to wrap.  When omitted the
        buffer is allocated and filled with opaque black.
    :raises ValueError: If a dimension is negative or *pixels* has the
        wrong length.
    """

    def __init__(self, width: int, height: int, pixels=None) -> None:
        if width < 0 or height < 0:
            raise ValueError(
                f"Framebuffer dimensions must be non-negative, got {width}x{height}"
            )
        if pixels is None:
            pixels = np.full(width * height, DefaultColors.Background, dtype=PIXEL_DTYPE)
        else:
            pixels = np.asarray(pixels, dtype=PIXEL_DTYPE).reshape(-1)
            if pixels.shape[0] != width * height:
                raise ValueError(
                    f"Pixel buffer must hold {width * height} elements, got {pixels.shape[0]}"
                )
        self.width = width
        self.height = height
        self.pixels = pixels

    @classmethod
    def filled(cls, width: int, height: int, color: int) -> Framebuffer:
        """Allocate a framebuffer with every pixel set to *color*."""
        return cls(width, height, np.full(width * height, color, dtype=PIXEL_DTYPE))

    @classmethod
    def from_rgba_array(cls, array) -> Framebuffer:
        """Pack an ``(height, width, 4)`` uint8 RGBA array into a framebuffer.

        This is the layout image decoders hand back, so any decoded image can
        be wrapped without going through a file format here.

        :raises ValueError: If *array* is not three-dimensional with four
            channels.
        """
        array = np.asarray(array)
        if array.ndim != 3 or array.shape[2] != 4:
            raise ValueError(
                f"Expected an (height, width, 4) RGBA array, got shape {array.shape}"
            )
        height, width = array.shape[:2]
        channels = array.astype(PIXEL_DTYPE) & PixelLimits.ChannelMask
        packed = (
            (channels[..., 0] << ChannelShift.Red)
            | (channels[..., 1] << ChannelShift.Green)
            | (channels[..., 2] << ChannelShift.Blue)
            | channels[..., 3]
        )
        return cls(width, height, packed.reshape(-1))

    def to_rgba_array(self) -> np.ndarray:
        """Unpack into an ``(height, width, 4)`` uint8 RGBA array."""
        grid = self.pixels.reshape(self.height, self.width)
        mask = PixelLimits.ChannelMask
        return np.stack(
            [
                (grid >> ChannelShift.Red) & mask,
                (grid >> ChannelShift.Green) & mask,
                (grid >> ChannelShift.Blue) & mask,
                grid & mask,
            ],
            axis=-1,
        ).astype(np.uint8)

    def pixel_at(self, x: int, y: int) -> int:
        """Return the packed color at ``(x, y)``; coordinates are not validated."""
        return int(self.pixels[y * self.width + x])

    def copy(self) -> Framebuffer:
        return Framebuffer(self.width, self.height, self.pixels.copy())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Framebuffer):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.pixels, other.pixels)
        )

    __hash__ = None

    def __repr__(self) -> str:
        return f"Framebuffer(width={self.width}, height={self.height})"
