"""Tests for the landing-page design pipeline."""

from __future__ import annotations

import logging

from storefront_theme.design import Palette
from storefront_theme.design.contrast import validate_palette
from storefront_theme.services.palette_pipeline import (
    DEFAULT_PALETTE,
    build_design,
    default_design,
    finalize_design,
    resolve_candidate,
)

READABLE = Palette("#0054a6", "#b45309", "#ffffff", "#1a1a1a")


def test_finalize_skips_repair_when_valid():
    design = finalize_design(READABLE)
    assert design.palette == READABLE
    assert design.contrast_validated is True
    assert design.gradient.gradient_from == READABLE.primary_color
    assert design.report is not None and design.report.all_pass


def test_finalize_repairs_and_derives_gradient_from_repaired_primary():
    candidate = Palette("#cccccc", "#dddddd", "#ffffff", "#eeeeee")
    design = finalize_design(candidate)
    assert design.palette.text_color == "#696969"
    assert design.gradient.gradient_from == design.palette.primary_color == "#8b8b8b"
    assert validate_palette(design.palette).all_pass


def test_finalize_dark_theme_flag_selects_lightening():
    candidate = Palette("#555555", "#444444", "#121212", "#333333")
    design = finalize_design(candidate, is_dark_theme=True)
    assert design.is_dark_theme is True
    assert design.report.all_pass
    assert design.palette.background_color == "#121212"


def test_contrast_validated_set_even_when_repair_falls_short(caplog):
    candidate = Palette("#000000", "#000000", "#777777", "#777777")
    with caplog.at_level(logging.WARNING, logger="storefront_theme.services.palette_pipeline"):
        design = finalize_design(candidate)
    assert design.contrast_validated is True
    assert design.report.failures() == ["text"]
    assert any("still below" in r.getMessage() for r in caplog.records)


def test_design_record_to_dict():
    data = finalize_design(READABLE, is_dark_theme=False).to_dict()
    assert data == {
        "primaryColor": "#0054a6",
        "accentColor": "#b45309",
        "backgroundColor": "#ffffff",
        "textColor": "#1a1a1a",
        "gradientFrom": "#0054a6",
        "gradientTo": data["gradientTo"],
        "contrastValidated": True,
        "isDarkTheme": False,
    }
    assert data["gradientTo"] != "#0054a6"


def test_resolve_candidate_order():
    assert resolve_candidate(READABLE, {"primaryColor": "#111111", "accentColor": "#222222"}) is READABLE
    from_store = resolve_candidate(None, {"primaryColor": "#111111", "accentColor": "#222222"})
    assert from_store == Palette("#111111", "#222222", "#f9fafb", "#1a1a1a")
    assert resolve_candidate(None, {"primaryColor": "#111111"}) == DEFAULT_PALETTE
    assert resolve_candidate(None) == DEFAULT_PALETTE


def test_default_design_is_static():
    data = default_design().to_dict()
    assert data["primaryColor"] == "#0054A6"
    assert data["gradientTo"] == "#3d8ed7"
    assert data["contrastValidated"] is False


def test_build_design_from_vision_reply():
    reply = '```json\n{"suggestedPalette": {"primary": "#cccccc", "accent": "#dddddd", "background": "#ffffff", "text": "#eeeeee"}}\n```'
    design = build_design(reply)
    assert design.palette.text_color == "#696969"
    assert design.contrast_validated


def test_build_design_falls_back_to_storefront_colors():
    design = build_design("not json", storefront_colors={"primaryColor": "#0054a6", "accentColor": "#b45309"})
    assert design.palette == Palette("#0054a6", "#b45309", "#f9fafb", "#1a1a1a")
