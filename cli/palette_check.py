"""Palette contrast check CLI.

Validates a four-color palette against WCAG AA thresholds, runs the contrast
repair (light or dark theme) and prints the before/after report.

Input is either the four colors as flags or a saved vision model reply
containing a ``suggestedPalette`` object.

Exit codes:
 - 0: final palette passes every threshold
 - 1: at least one role still fails after repair
 - 2: unusable input (missing colors, unreadable or unparseable reply)

Example:
  python cli/palette_check.py --primary "#cccccc" --accent "#dddddd" \
      --background "#ffffff" --text "#eeeeee"
  python cli/palette_check.py --suggestion reply.txt --dark --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional

from storefront_theme import settings
from storefront_theme.design.contrast import ValidationReport, validate_palette
from storefront_theme.design.palette import Palette
from storefront_theme.services.palette_pipeline import finalize_design
from storefront_theme.services.suggestion_parser import parse_suggested_palette

_ROLE_FLAGS = ("primary", "accent", "background", "text")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Check and repair storefront palette contrast")
    for role in _ROLE_FLAGS:
        p.add_argument(f"--{role}", help=f"{role.capitalize()} color (#RRGGBB)")
    p.add_argument(
        "--suggestion",
        metavar="FILE",
        help="File holding a raw vision model reply with a suggestedPalette object",
    )
    p.add_argument("--dark", action="store_true", help="Repair for a dark background (lighten)")
    p.add_argument("--json", action="store_true", help="Emit JSON instead of human-readable text")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return p.parse_args(argv)


def _load_palette(args: argparse.Namespace) -> Optional[Palette]:
    if args.suggestion:
        try:
            with open(args.suggestion, encoding="utf-8") as fh:
                reply = fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            print(f"Cannot read suggestion file: {exc}", file=sys.stderr)
            return None
        palette = parse_suggested_palette(reply)
        if palette is None:
            print(f"No suggestedPalette found in {args.suggestion}", file=sys.stderr)
        return palette
    missing = [role for role in _ROLE_FLAGS if not getattr(args, role)]
    if missing:
        print(f"Missing colors: {', '.join('--' + m for m in missing)}", file=sys.stderr)
        return None
    return Palette.from_mapping({role: getattr(args, role) for role in _ROLE_FLAGS})


def _print_report(title: str, palette: Palette, report: ValidationReport) -> None:
    print(f"{title}:")
    text_min = settings.TEXT_CONTRAST_THRESHOLD
    large_min = settings.LARGE_CONTRAST_THRESHOLD
    rows = (
        ("text", palette.text_color, report.text_ratio, report.text_passes, text_min),
        ("accent", palette.accent_color, report.accent_ratio, report.accent_passes, large_min),
        ("primary", palette.primary_color, report.primary_ratio, report.primary_passes, large_min),
    )
    for role, color, ratio, ok, threshold in rows:
        marker = "[contrast-pass]" if ok else "[contrast-fail]"
        print(
            f"  {marker} {role}: {color} on {palette.background_color} "
            f"ratio={ratio:.2f} (min {threshold})"
        )


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.LOG_LEVEL,
        format="%(levelname)s %(name)s: %(message)s",
    )
    palette = _load_palette(args)
    if palette is None:
        return 2
    before = validate_palette(palette)
    design = finalize_design(palette, is_dark_theme=args.dark)
    after = design.report or validate_palette(design.palette)
    if args.json:
        payload = {
            "before": before.to_dict(),
            "after": after.to_dict(),
            "design": design.to_dict(),
        }
        print(json.dumps(payload, indent=2))
    else:
        _print_report("Before", palette, before)
        _print_report("After", design.palette, after)
        print(
            f"Gradient: {design.gradient.gradient_from} -> {design.gradient.gradient_to}"
        )
        print("Status: " + ("PASS" if after.all_pass else "FAIL"))
    return 0 if after.all_pass else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
