"""Four-role palette value type.

A ``Palette`` is created per generation request (from a vision suggestion,
storefront colors or defaults), validated/repaired and handed to rendering.
Instances are frozen; every transformation returns a new palette.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace as _replace
from typing import Any, Dict, Mapping

__all__ = ["Palette", "PaletteValidationError", "ROLES"]

# Role order used for iteration, reports and repair
ROLES = ("text", "accent", "primary")

_KEY_ALIASES: Dict[str, tuple[str, ...]] = {
    "primary_color": ("primaryColor", "primary_color", "primary"),
    "accent_color": ("accentColor", "accent_color", "accent"),
    "background_color": ("backgroundColor", "background_color", "background"),
    "text_color": ("textColor", "text_color", "text"),
}


class PaletteValidationError(ValueError):
    """Raised when a mapping cannot be turned into a palette."""


@dataclass(frozen=True)
class Palette:
    primary_color: str
    accent_color: str
    background_color: str
    text_color: str

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "Palette":
        """Build a palette from camelCase, snake_case or short vision keys.

        Only the presence and type of each role is checked. Color contents
        are left to the contrast functions, which degrade gracefully.
        """
        if not isinstance(mapping, Mapping):
            raise PaletteValidationError(f"Palette must be a mapping, got {type(mapping).__name__}")
        values: Dict[str, str] = {}
        for attr, aliases in _KEY_ALIASES.items():
            for key in aliases:
                if mapping.get(key) is not None:
                    value = mapping[key]
                    break
            else:
                raise PaletteValidationError(f"Palette missing role '{aliases[0]}'")
            if not isinstance(value, str):
                raise PaletteValidationError(
                    f"Palette role '{aliases[0]}' must be a string, got {type(value).__name__}"
                )
            values[attr] = value.strip()
        return cls(**values)

    def color_for(self, role: str) -> str:
        return getattr(self, f"{role}_color")

    def replace(self, **changes: str) -> "Palette":
        return _replace(self, **changes)

    def to_dict(self) -> Dict[str, str]:
        return {_KEY_ALIASES[f.name][0]: getattr(self, f.name) for f in fields(self)}
