"""Packed-color codec and alpha compositing.

Colors are 32-bit ints laid out as ``RRGGBBAA``: red in the highest byte,
alpha in the lowest.  This is the layout every framebuffer pixel uses and
the one external image codecs must populate.

User-facing code may also pass colors in the friendlier formats accepted
by ``normalize_color``:
  - Packed ints: ``0xFF0000FF``
  - RGB or RGBA tuples: ``(255, 0, 0)`` / ``(255, 0, 0, 128)``
  - Hex strings: ``'#FF0000'``, shorthand ``'#F00'`` or ``'#FF000080'``
  - Named strings: ``'red'``
"""

from __future__ import annotations

import re
import typing

from softraster.configurations.configuration_constants import (
    ChannelShift,
    PixelLimits,
)

if typing.TYPE_CHECKING:
    from .types import Framebuffer

ColorLike = typing.Union[int, tuple, str]

# ~20 common CSS named colors, all fully opaque.
NAMED_COLORS: dict[str, int] = {
    "red": 0xFF0000FF,
    "green": 0x008000FF,
    "blue": 0x0000FFFF,
    "white": 0xFFFFFFFF,
    "black": 0x000000FF,
    "yellow": 0xFFFF00FF,
    "cyan": 0x00FFFFFF,
    "magenta": 0xFF00FFFF,
    "orange": 0xFFA500FF,
    "purple": 0x800080FF,
    "pink": 0xFFC0CBFF,
    "brown": 0xA52A2AFF,
    "gray": 0x808080FF,
    "grey": 0x808080FF,
    "lime": 0x00FF00FF,
    "navy": 0x000080FF,
    "teal": 0x008080FF,
    "maroon": 0x800000FF,
    "olive": 0x808000FF,
    "aqua": 0x00FFFFFF,
}

_HEX8_RE = re.compile(r"^#[0-9a-f]{8}$")
_HEX6_RE = re.compile(r"^#[0-9a-f]{6}$")
_HEX3_RE = re.compile(r"^#[0-9a-f]{3}$")

_CHANNEL_NAMES = {
    "r": ChannelShift.Red,
    "red": ChannelShift.Red,
    "g": ChannelShift.Green,
    "green": ChannelShift.Green,
    "b": ChannelShift.Blue,
    "blue": ChannelShift.Blue,
    "a": ChannelShift.Alpha,
    "alpha": ChannelShift.Alpha,
}


# ----------------------------------------------------------------------
# Channel extraction
# ----------------------------------------------------------------------


def get_r(color: int) -> int:
    return (int(color) >> ChannelShift.Red) & PixelLimits.ChannelMask


def get_g(color: int) -> int:
    return (int(color) >> ChannelShift.Green) & PixelLimits.ChannelMask


def get_b(color: int) -> int:
    return (int(color) >> ChannelShift.Blue) & PixelLimits.ChannelMask


def get_a(color: int) -> int:
    return int(color) & PixelLimits.ChannelMask


def channel(color: int, which: str) -> int:
    """Extract a single channel by name (``'r'``, ``'green'``, ``'a'``, ...).

    :raises ValueError: If *which* does not name a channel.
    """
    try:
        shift = _CHANNEL_NAMES[which.lower()]
    except KeyError:
        raise ValueError(f"Unknown channel {which!r}") from None
    return (int(color) >> shift) & PixelLimits.ChannelMask


def pack(r: int, g: int, b: int, a: int) -> int:
    """Combine four 8-bit channels into one packed ``RRGGBBAA`` color."""
    mask = PixelLimits.ChannelMask
    return (
        ((r & mask) << ChannelShift.Red)
        | ((g & mask) << ChannelShift.Green)
        | ((b & mask) << ChannelShift.Blue)
        | (a & mask)
    )


# ----------------------------------------------------------------------
# Compositing
# ----------------------------------------------------------------------


def blend_channel(fg: int, bg: int, alpha: int) -> int:
    """Blend one channel with the "over" operator in 0-255 space.

    Uses truncating integer division, so a half-opaque (0x80) full-intensity
    foreground over zero yields 0x80 and the background share yields 0x7F.
    """
    opaque = PixelLimits.Opaque
    return (alpha * fg + (opaque - alpha) * bg) // opaque


def blend_colors(fg: int, bg: int) -> int:
    """Composite *fg* over *bg* using *fg*'s alpha.

    The result is always fully opaque; framebuffers only ever hold
    composited pixels.
    """
    alpha = get_a(fg)
    return pack(
        blend_channel(get_r(fg), get_r(bg), alpha),
        blend_channel(get_g(fg), get_g(bg), alpha),
        blend_channel(get_b(fg), get_b(bg), alpha),
        PixelLimits.Opaque,
    )


def set_pixel(framebuffer: Framebuffer, index: int, color: int) -> None:
    """Blend *color* onto the pixel at *index*.

    *index* is not validated; callers go through ``in_bounds`` first.
    """
    pixels = framebuffer.pixels
    pixels[index] = blend_colors(color, pixels[index])


# ----------------------------------------------------------------------
# Color literals
# ----------------------------------------------------------------------


def normalize_color(color: ColorLike) -> int:
    """Normalize a color value to a packed ``RRGGBBAA`` int.

    :param color: A packed int, an ``(r, g, b)`` or ``(r, g, b, a)`` tuple
        of ints 0-255, a hex string ``'#rrggbbaa'``, ``'#rrggbb'`` or
        ``'#rgb'``, or a CSS named color string.
    :returns: Packed color; alpha defaults to fully opaque when omitted.
    :raises TypeError: If *color* is not an int, tuple or str.
    :raises ValueError: If the value cannot be interpreted as a valid color.
    """
    # bool is an int subclass but never a meaningful color.
    if isinstance(color, bool):
        raise TypeError("color must be an int, tuple or str, got bool")

    if isinstance(color, int):
        if not 0 <= color <= PixelLimits.PackedMax:
            raise ValueError(
                f"Packed color must be 0-0xFFFFFFFF, got {color:#x}"
            )
        return color

    if isinstance(color, tuple):
        if len(color) not in (3, 4):
            raise ValueError(
                f"Color tuple must have 3 or 4 elements, got {len(color)}"
            )
        if not all(isinstance(c, int) and not isinstance(c, bool) for c in color):
            raise ValueError(
                f"Color tuple elements must be ints, got {tuple(type(c).__name__ for c in color)}"
            )
        if not all(0 <= c <= 255 for c in color):
            raise ValueError(f"Color values must be 0-255, got {color}")
        if len(color) == 3:
            color = (*color, PixelLimits.Opaque)
        return pack(*color)

    if isinstance(color, str):
        lower = color.lower().strip()

        if lower in NAMED_COLORS:
            return NAMED_COLORS[lower]

        if _HEX8_RE.match(lower):
            return int(lower[1:], 16)

        if _HEX6_RE.match(lower):
            return (int(lower[1:], 16) << 8) | PixelLimits.Opaque

        # Expand #rgb shorthand.
        if _HEX3_RE.match(lower):
            r_ch, g_ch, b_ch = lower[1], lower[2], lower[3]
            return normalize_color(f"#{r_ch}{r_ch}{g_ch}{g_ch}{b_ch}{b_ch}")

        raise ValueError(f"Unrecognized color string: {color!r}")

    raise TypeError(
        f"color must be an int, tuple or str, got {type(color).__name__}"
    )


def to_hex(color: int) -> str:
    """Format a packed color as a lowercase ``#rrggbbaa`` string."""
    return f"#{int(color):08x}"
