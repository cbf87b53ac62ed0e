"""Design pipeline for generated landing pages and marketing images.

Turns a candidate palette into the persisted ``design`` object:

1. Pick a candidate (vision suggestion, storefront colors, or defaults).
2. Validate it; repair only if a role fails, in the direction chosen by the
   caller's ``is_dark_theme`` flag.
3. Derive the gradient from the (repaired) primary color.
4. Mark ``contrast_validated``. The flag means the pipeline ran, not that
   every role passes; a still-failing palette is logged as a warning.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Union

from storefront_theme import settings
from storefront_theme.design.contrast import ValidationReport, validate_palette
from storefront_theme.design.contrast_repair import DEFAULT_POLICY, RepairPolicy, adjust_for_theme
from storefront_theme.design.gradients import Gradient, generate_gradient
from storefront_theme.design.palette import Palette

from .suggestion_parser import parse_suggested_palette

__all__ = [
    "DesignRecord",
    "DEFAULT_PALETTE",
    "build_design",
    "default_design",
    "finalize_design",
    "resolve_candidate",
]

_logger = logging.getLogger(__name__)

DEFAULT_PALETTE = Palette(
    primary_color=settings.DEFAULT_PRIMARY_COLOR,
    accent_color=settings.DEFAULT_ACCENT_COLOR,
    background_color=settings.FALLBACK_BACKGROUND_COLOR,
    text_color=settings.FALLBACK_TEXT_COLOR,
)


@dataclass(frozen=True)
class DesignRecord:
    """Palette plus derived values, as stored alongside generated content.

    Attributes
    ----------
    palette : Palette
        Final (possibly repaired) colors.
    gradient : Gradient
        Background gradient derived from ``palette.primary_color``.
    contrast_validated : bool
        True once validation/repair has run on ``palette``.
    is_dark_theme : bool
        Repair direction that was applied.
    report : ValidationReport | None
        Validation of the final palette, for diagnostics. Not persisted.
    """

    palette: Palette
    gradient: Gradient
    contrast_validated: bool
    is_dark_theme: bool
    report: Optional[ValidationReport] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = dict(self.palette.to_dict())
        out.update(self.gradient.to_dict())
        out["contrastValidated"] = self.contrast_validated
        out["isDarkTheme"] = self.is_dark_theme
        return out


def resolve_candidate(
    suggested: Optional[Palette],
    storefront_colors: Optional[Mapping[str, str]] = None,
) -> Palette:
    """Choose the palette to validate.

    A vision suggestion wins. Without one, the storefront's own primary and
    accent colors are used over the fallback background and text colors.
    Without either, the default palette is returned.
    """
    if suggested is not None:
        return suggested
    if storefront_colors:
        primary = storefront_colors.get("primaryColor") or storefront_colors.get("primary_color")
        accent = storefront_colors.get("accentColor") or storefront_colors.get("accent_color")
        if primary and accent:
            return Palette(
                primary_color=primary,
                accent_color=accent,
                background_color=settings.FALLBACK_BACKGROUND_COLOR,
                text_color=settings.FALLBACK_TEXT_COLOR,
            )
        _logger.info("Storefront colors incomplete, using default palette")
    return DEFAULT_PALETTE


def finalize_design(
    candidate: Palette,
    *,
    is_dark_theme: bool = False,
    policy: Optional[RepairPolicy] = None,
) -> DesignRecord:
    policy = policy or DEFAULT_POLICY
    report = validate_palette(
        candidate,
        text_threshold=policy.text_threshold,
        large_threshold=policy.large_threshold,
    )
    palette = candidate
    if not report.all_pass:
        _logger.info(
            "Repairing palette (%s theme), failing roles: %s",
            "dark" if is_dark_theme else "light",
            ", ".join(report.failures()),
        )
        palette = adjust_for_theme(candidate, is_dark_theme, policy)
        report = validate_palette(
            palette,
            text_threshold=policy.text_threshold,
            large_threshold=policy.large_threshold,
        )
        if not report.all_pass:
            _logger.warning(
                "Palette still below contrast thresholds after repair: %s (bg=%s)",
                ", ".join(report.failures()),
                palette.background_color,
            )
    return DesignRecord(
        palette=palette,
        gradient=generate_gradient(palette.primary_color),
        contrast_validated=True,
        is_dark_theme=is_dark_theme,
        report=report,
    )


def default_design() -> DesignRecord:
    """Static design used when no vision palette is available for a marketing image."""
    return DesignRecord(
        palette=DEFAULT_PALETTE,
        gradient=Gradient(settings.DEFAULT_PRIMARY_COLOR, settings.DEFAULT_GRADIENT_TO),
        contrast_validated=False,
        is_dark_theme=False,
    )


def build_design(
    reply: Union[str, Mapping[str, Any], None],
    *,
    is_dark_theme: bool = False,
    storefront_colors: Optional[Mapping[str, str]] = None,
    policy: Optional[RepairPolicy] = None,
) -> DesignRecord:
    """Parse a vision reply and run it through ``finalize_design``."""
    candidate = resolve_candidate(parse_suggested_palette(reply), storefront_colors)
    return finalize_design(candidate, is_dark_theme=is_dark_theme, policy=policy)
