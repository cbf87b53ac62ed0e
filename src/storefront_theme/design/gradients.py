"""Two-stop gradient derivation for storefront and landing-page backgrounds.

The gradient is decorative: it starts at the (already repaired) primary color
and ends at a lightened copy of it. No contrast check is performed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from storefront_theme import settings

from .color_mixing import lighten_hex

__all__ = ["Gradient", "generate_gradient"]


@dataclass(frozen=True)
class Gradient:
    gradient_from: str  # #rrggbb
    gradient_to: str  # #rrggbb

    def to_dict(self) -> Dict[str, str]:
        return {"gradientFrom": self.gradient_from, "gradientTo": self.gradient_to}


def generate_gradient(
    primary_color: str, amount: float = settings.GRADIENT_LIGHTEN_AMOUNT
) -> Gradient:
    return Gradient(gradient_from=primary_color, gradient_to=lighten_hex(primary_color, amount))
