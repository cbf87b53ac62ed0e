"""Color mixing utilities.

Small helpers that shift a ``#rrggbb`` color toward black or white by a
fractional amount. Used by the contrast repair loops and gradient derivation.

Public API:
    to_hex(r, g, b) -> str
    darken_hex(color, amount) -> str
    lighten_hex(color, amount) -> str

Notes:
    - Channels are rounded half-up (2.5 -> 3), not with Python's banker's
      rounding, so a given step sequence always lands on the same bytes.
    - An unparseable color is returned unchanged.
    - Output is lowercase ``#rrggbb``.
"""

from __future__ import annotations

import math

from .contrast import hex_to_rgb

__all__ = [
    "to_hex",
    "darken_hex",
    "lighten_hex",
]


def _clamp_byte(v: int) -> int:
    return 0 if v < 0 else 255 if v > 255 else v


def _round_half_up(v: float) -> int:
    return int(math.floor(v + 0.5))


def to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB components to a lowercase hex string, clamping to 0-255."""
    return f"#{_clamp_byte(r):02x}{_clamp_byte(g):02x}{_clamp_byte(b):02x}"


def darken_hex(color: str, amount: float) -> str:
    """Move each channel toward 0 by ``amount`` (0..1) of its current value."""
    rgb = hex_to_rgb(color)
    if rgb is None:
        return color
    r, g, b = (max(0, _round_half_up(c * (1 - amount))) for c in rgb)
    return to_hex(r, g, b)


def lighten_hex(color: str, amount: float) -> str:
    """Move each channel toward 255 by ``amount`` (0..1) of the remaining distance."""
    rgb = hex_to_rgb(color)
    if rgb is None:
        return color
    r, g, b = (min(255, _round_half_up(c + (255 - c) * amount)) for c in rgb)
    return to_hex(r, g, b)
