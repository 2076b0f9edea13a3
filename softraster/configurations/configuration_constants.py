from __future__ import annotations

import dataclasses


@dataclasses.dataclass(frozen=True)
class ChannelShift:
    """Bit offset of each channel inside a packed ``RRGGBBAA`` color."""

    Red = 24
    Green = 16
    Blue = 8
    Alpha = 0


@dataclasses.dataclass(frozen=True)
class PixelLimits:
    ChannelMask = 0xFF
    Opaque = 255
    Transparent = 0
    PackedMax = 0xFFFFFFFF


@dataclasses.dataclass(frozen=True)
class DefaultColors:
    Background = 0x000000FF
