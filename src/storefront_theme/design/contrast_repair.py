"""Iterative contrast repair for four-role palettes.

Each foreground role (text, accent, primary) is shifted independently against
the untouched background until it meets its threshold or the attempt budget
runs out:

 - Light theme (``adjust_for_contrast``): darken toward black. Only roles that
   fail the initial validation are touched.
 - Dark theme (``adjust_for_dark_theme``): lighten toward white. Every role
   enters the loop, whose condition is the ratio check itself, so passing
   roles come out unchanged.

Which direction to use is decided by the caller (``is_dark_theme``); the
background luminance is never inspected here.

An exhausted budget is not an error: the last color reached is kept, even if
it still fails. ``repair_palette`` returns a ``RepairResult`` that records the
per-role outcome so callers can detect this.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Mapping, Optional

from storefront_theme import settings

from .color_mixing import darken_hex, lighten_hex
from .contrast import contrast_ratio, validate_palette
from .palette import ROLES, Palette

__all__ = [
    "RepairPolicy",
    "RoleRepair",
    "RepairResult",
    "DEFAULT_POLICY",
    "adjust_for_contrast",
    "adjust_for_dark_theme",
    "adjust_for_theme",
    "repair_palette",
]

_logger = logging.getLogger(__name__)

Shift = Callable[[str, float], str]


@dataclass(frozen=True)
class RepairPolicy:
    """Thresholds, step sizes and attempt cap used by the repair loops."""

    text_threshold: float = settings.TEXT_CONTRAST_THRESHOLD
    large_threshold: float = settings.LARGE_CONTRAST_THRESHOLD
    text_step: float = settings.TEXT_REPAIR_STEP
    accent_step: float = settings.ACCENT_REPAIR_STEP
    primary_step: float = settings.PRIMARY_REPAIR_STEP
    max_attempts: int = settings.MAX_REPAIR_ATTEMPTS

    def threshold_for(self, role: str) -> float:
        return self.text_threshold if role == "text" else self.large_threshold

    def step_for(self, role: str) -> float:
        return {
            "text": self.text_step,
            "accent": self.accent_step,
            "primary": self.primary_step,
        }[role]


DEFAULT_POLICY = RepairPolicy()


@dataclass(frozen=True)
class RoleRepair:
    role: str
    original: str
    adjusted: str
    attempts: int
    ratio: float
    threshold: float

    @property
    def changed(self) -> bool:
        return self.adjusted != self.original

    @property
    def succeeded(self) -> bool:
        return self.ratio >= self.threshold


@dataclass(frozen=True)
class RepairResult:
    palette: Palette
    roles: Mapping[str, RoleRepair]

    @property
    def succeeded(self) -> bool:
        return all(r.succeeded for r in self.roles.values())

    def failed_roles(self) -> list[str]:
        return [name for name, r in self.roles.items() if not r.succeeded]


def _repair_role(
    role: str,
    original: str,
    background: str,
    shift: Shift,
    policy: RepairPolicy,
) -> RoleRepair:
    threshold = policy.threshold_for(role)
    step = policy.step_for(role)
    color = original
    attempts = 0
    ratio = contrast_ratio(color, background)
    while ratio < threshold and attempts < policy.max_attempts:
        color = shift(color, step)
        attempts += 1
        ratio = contrast_ratio(color, background)
    return RoleRepair(role, original, color, attempts, ratio, threshold)


def _repair(
    palette: Palette,
    shift: Shift,
    policy: RepairPolicy,
    *,
    only_failing: bool,
) -> RepairResult:
    background = palette.background_color
    skip: set[str] = set()
    if only_failing:
        report = validate_palette(
            palette,
            text_threshold=policy.text_threshold,
            large_threshold=policy.large_threshold,
        )
        skip = set(ROLES) - set(report.failures())
    changes: Dict[str, str] = {}
    roles: Dict[str, RoleRepair] = {}
    for role in ROLES:
        original = palette.color_for(role)
        if role in skip:
            roles[role] = RoleRepair(
                role,
                original,
                original,
                0,
                contrast_ratio(original, background),
                policy.threshold_for(role),
            )
            continue
        outcome = _repair_role(role, original, background, shift, policy)
        roles[role] = outcome
        if outcome.changed:
            changes[f"{role}_color"] = outcome.adjusted
            _logger.debug(
                "Repaired %s %s -> %s in %d step(s), ratio %.2f",
                role,
                original,
                outcome.adjusted,
                outcome.attempts,
                outcome.ratio,
            )
        if not outcome.succeeded:
            _logger.debug(
                "Repair budget exhausted for %s on %s: ratio %.2f < %s",
                role,
                background,
                outcome.ratio,
                outcome.threshold,
            )
    return RepairResult(palette.replace(**changes), roles)


def adjust_for_contrast(palette: Palette, policy: Optional[RepairPolicy] = None) -> Palette:
    """Darken failing foreground roles against a (presumed light) background."""
    return _repair(palette, darken_hex, policy or DEFAULT_POLICY, only_failing=True).palette


def adjust_for_dark_theme(palette: Palette, policy: Optional[RepairPolicy] = None) -> Palette:
    """Lighten foreground roles against a (presumed dark) background."""
    return _repair(palette, lighten_hex, policy or DEFAULT_POLICY, only_failing=False).palette


def adjust_for_theme(
    palette: Palette, is_dark_theme: bool, policy: Optional[RepairPolicy] = None
) -> Palette:
    if is_dark_theme:
        return adjust_for_dark_theme(palette, policy)
    return adjust_for_contrast(palette, policy)


def repair_palette(
    palette: Palette, *, is_dark_theme: bool, policy: Optional[RepairPolicy] = None
) -> RepairResult:
    """Same repair as ``adjust_for_theme`` but keeps the per-role outcome."""
    if is_dark_theme:
        return _repair(palette, lighten_hex, policy or DEFAULT_POLICY, only_failing=False)
    return _repair(palette, darken_hex, policy or DEFAULT_POLICY, only_failing=True)
