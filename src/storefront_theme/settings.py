"""Global configuration and constants for palette contrast handling."""

from __future__ import annotations

import os
from typing import Final

# WCAG AA thresholds
TEXT_CONTRAST_THRESHOLD: Final = 4.5
LARGE_CONTRAST_THRESHOLD: Final = 3.0  # accent / primary (buttons, headings)

# Repair steps are fractions toward black (light theme) or white (dark theme)
TEXT_REPAIR_STEP: Final = 0.15
ACCENT_REPAIR_STEP: Final = 0.12
PRIMARY_REPAIR_STEP: Final = 0.12
MAX_REPAIR_ATTEMPTS: Final = 10

GRADIENT_LIGHTEN_AMOUNT: Final = 0.35

# Used when no vision palette is available
FALLBACK_BACKGROUND_COLOR: Final = "#f9fafb"
FALLBACK_TEXT_COLOR: Final = "#1a1a1a"
DEFAULT_PRIMARY_COLOR: Final = "#0054A6"
DEFAULT_ACCENT_COLOR: Final = "#F7941D"
DEFAULT_GRADIENT_TO: Final = "#3d8ed7"

LOG_LEVEL: Final = os.environ.get("STOREFRONT_THEME_LOG_LEVEL", "WARNING")
