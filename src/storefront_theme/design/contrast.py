"""Contrast utilities for validating palette accessibility.

Implements WCAG 2.x relative luminance and contrast ratio calculations.

Public API:
- hex_to_rgb(color: str) -> tuple[int, int, int] | None
- relative_luminance(r: int, g: int, b: int) -> float
- contrast_ratio(a: str, b: str) -> float
- validate_palette(palette: Palette) -> ValidationReport

These functions never raise on a malformed color: ``hex_to_rgb`` returns
``None`` and ``contrast_ratio`` falls back to ``1.0`` (no distinguishable
contrast), so a bad color simply fails validation.
"""

from __future__ import annotations

import string
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from storefront_theme import settings

from .palette import Palette

__all__ = [
    "ValidationReport",
    "contrast_ratio",
    "hex_to_rgb",
    "relative_luminance",
    "validate_palette",
]

RGB = Tuple[int, int, int]

_HEX_DIGITS = frozenset(string.hexdigits)


def hex_to_rgb(color: str) -> Optional[RGB]:
    """Parse ``#RRGGBB`` (or ``RRGGBB``) into channels, ``None`` if not a color."""
    if not isinstance(color, str):
        return None
    cleaned = color[1:] if color.startswith("#") else color
    if len(cleaned) != 6 or not _HEX_DIGITS.issuperset(cleaned):
        return None
    num = int(cleaned, 16)
    return (num >> 16) & 255, (num >> 8) & 255, num & 255


def _linear_channel(c: float) -> float:
    s = c / 255.0
    if s <= 0.03928:
        return s / 12.92
    return ((s + 0.055) / 1.055) ** 2.4


def relative_luminance(r: int, g: int, b: int) -> float:
    r_l = _linear_channel(r)
    g_l = _linear_channel(g)
    b_l = _linear_channel(b)
    # Rec. 709 coefficients used by WCAG
    return 0.2126 * r_l + 0.7152 * g_l + 0.0722 * b_l


def contrast_ratio(a: str, b: str) -> float:
    c1 = hex_to_rgb(a)
    c2 = hex_to_rgb(b)
    if c1 is None or c2 is None:
        return 1.0
    l1 = relative_luminance(*c1)
    l2 = relative_luminance(*c2)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


@dataclass(frozen=True)
class ValidationReport:
    """Per-role contrast results against the palette background.

    Attributes
    ----------
    text_passes / accent_passes / primary_passes : bool
        Whether each foreground role meets its threshold.
    text_ratio / accent_ratio / primary_ratio : float
        Raw contrast ratios (1.0 .. 21.0).
    """

    text_passes: bool
    accent_passes: bool
    primary_passes: bool
    text_ratio: float
    accent_ratio: float
    primary_ratio: float

    @property
    def all_pass(self) -> bool:
        return self.text_passes and self.accent_passes and self.primary_passes

    def failures(self) -> list[str]:
        """Role names that fail their threshold, in text/accent/primary order."""
        out: list[str] = []
        if not self.text_passes:
            out.append("text")
        if not self.accent_passes:
            out.append("accent")
        if not self.primary_passes:
            out.append("primary")
        return out

    def to_dict(self) -> Dict[str, object]:
        return {
            "textPasses": self.text_passes,
            "accentPasses": self.accent_passes,
            "primaryPasses": self.primary_passes,
            "textRatio": self.text_ratio,
            "accentRatio": self.accent_ratio,
            "primaryRatio": self.primary_ratio,
        }


def validate_palette(
    palette: Palette,
    *,
    text_threshold: float = settings.TEXT_CONTRAST_THRESHOLD,
    large_threshold: float = settings.LARGE_CONTRAST_THRESHOLD,
) -> ValidationReport:
    """Check text, accent and primary colors against the background.

    Parameters
    ----------
    palette : Palette
        Candidate palette.
    text_threshold : float
        Minimum ratio for body text (WCAG AA 4.5:1).
    large_threshold : float
        Minimum ratio for accent and primary, which are only used at large
        sizes (WCAG AA large text / graphical objects 3:1).
    """
    bg = palette.background_color
    text_ratio = contrast_ratio(palette.text_color, bg)
    accent_ratio = contrast_ratio(palette.accent_color, bg)
    primary_ratio = contrast_ratio(palette.primary_color, bg)
    return ValidationReport(
        text_passes=text_ratio >= text_threshold,
        accent_passes=accent_ratio >= large_threshold,
        primary_passes=primary_ratio >= large_threshold,
        text_ratio=text_ratio,
        accent_ratio=accent_ratio,
        primary_ratio=primary_ratio,
    )
