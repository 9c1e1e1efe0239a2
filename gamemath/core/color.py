# gamemath/core/color.py
"""
Color - four float channels, normalized to 0.0-1.0.

The range is not enforced: lerp with t outside [0, 1] or hand-built
colors can go past either end.
"""

from __future__ import annotations
import string
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .scalar import clamp, lerp


def _byte(value: int, shift: int) -> float:
    """Extract one 8-bit channel and normalize it."""
    return ((value >> shift) & 0xFF) / 255.0


@dataclass(frozen=True)
class Color:
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @staticmethod
    def from_hex_rgba(hex: int) -> Color:
        """0xRRGGBBAA -> Color."""
        return Color(
            r=_byte(hex, 24),
            g=_byte(hex, 16),
            b=_byte(hex, 8),
            a=_byte(hex, 0),
        )

    @staticmethod
    def from_hex_rgb(hex: int) -> Color:
        """0xRRGGBB -> opaque Color."""
        return Color(
            r=_byte(hex, 16),
            g=_byte(hex, 8),
            b=_byte(hex, 0),
            a=1.0,
        )

    @staticmethod
    def from_hex_string(hex_str: str) -> Color:
        """Parse #RGB, #RGBA, #RRGGBB or #RRGGBBAA (leading # optional)."""
        h = hex_str.strip().lstrip("#")
        # int(..., 16) alone would also take signs, 0x prefixes and underscores
        if not h or any(c not in string.hexdigits for c in h):
            raise ValueError(f"Invalid hex color: {hex_str}")
        if len(h) == 3:
            r, g, b = (int(c, 16) / 15 for c in h)
            return Color(r, g, b, 1.0)
        elif len(h) == 4:
            r, g, b, a = (int(c, 16) / 15 for c in h)
            return Color(r, g, b, a)
        elif len(h) == 6:
            return Color.from_hex_rgb(int(h, 16))
        elif len(h) == 8:
            return Color.from_hex_rgba(int(h, 16))
        raise ValueError(f"Invalid hex color: {hex_str}")

    @staticmethod
    def lerp(a: Color, b: Color, t: float) -> Color:
        return Color(
            r=lerp(a.r, b.r, t),
            g=lerp(a.g, b.g, t),
            b=lerp(a.b, b.b, t),
            a=lerp(a.a, b.a, t),
        )

    def to_hex_rgba(self) -> int:
        """Pack back into 0xRRGGBBAA, clamping each channel to [0, 1]."""
        packed = 0
        for channel in (self.r, self.g, self.b, self.a):
            packed = (packed << 8) | int(round(clamp(channel, 0.0, 1.0) * 255.0))
        return packed

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def to_array(self) -> np.ndarray:
        """float32 RGBA array, ready for a shader uniform."""
        return np.array(self.to_tuple(), dtype=np.float32)


Color.WHITE = Color(1.0, 1.0, 1.0, 1.0)
Color.BLACK = Color(0.0, 0.0, 0.0, 1.0)
Color.RED = Color(1.0, 0.0, 0.0, 1.0)
Color.GREEN = Color(0.0, 1.0, 0.0, 1.0)
Color.BLUE = Color(0.0, 0.0, 1.0, 1.0)
Color.TRANSPARENT = Color(1.0, 1.0, 1.0, 0.0)
