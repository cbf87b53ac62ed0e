"""Property-based tests for the contrast math.

Random colors must always respect the WCAG formula's bounds and the
symmetry of the contrast ratio.
"""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from storefront_theme.design.color_mixing import darken_hex, lighten_hex
from storefront_theme.design.contrast import contrast_ratio, hex_to_rgb, relative_luminance

channels = st.integers(min_value=0, max_value=255)
hex_colors = st.integers(min_value=0, max_value=0xFFFFFF).map(lambda n: f"#{n:06x}")
amounts = st.floats(min_value=0.0, max_value=1.0, allow_nan=False)


def _lum(color: str) -> float:
    return relative_luminance(*hex_to_rgb(color))


@given(channels, channels, channels)
def test_luminance_within_unit_range(r, g, b):
    assert 0.0 <= relative_luminance(r, g, b) <= 1.0 + 1e-12


@given(hex_colors, hex_colors)
def test_contrast_symmetric_and_bounded(a, b):
    ratio = contrast_ratio(a, b)
    assert ratio == contrast_ratio(b, a)
    assert 1.0 <= ratio <= 21.0 + 1e-9


@given(hex_colors)
def test_contrast_identity(a):
    assert contrast_ratio(a, a) == 1.0


@given(hex_colors)
def test_hex_roundtrip_through_zero_shift(a):
    assert darken_hex(a, 0.0) == a
    assert lighten_hex(a, 0.0) == a


@given(hex_colors, amounts)
def test_darken_never_brightens(a, amount):
    assert _lum(darken_hex(a, amount)) <= _lum(a)


@given(hex_colors, amounts)
def test_lighten_never_darkens(a, amount):
    assert _lum(lighten_hex(a, amount)) >= _lum(a)
