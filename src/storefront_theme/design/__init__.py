"""Design package.

Pure color math for storefront palettes: WCAG contrast checks, contrast
repair and gradient derivation. Nothing here performs I/O.
"""

from .palette import Palette, PaletteValidationError, ROLES  # noqa: F401
from .contrast import (  # noqa: F401
    ValidationReport,
    contrast_ratio,
    hex_to_rgb,
    relative_luminance,
    validate_palette,
)
from .color_mixing import darken_hex, lighten_hex, to_hex  # noqa: F401
from .contrast_repair import (  # noqa: F401
    DEFAULT_POLICY,
    RepairPolicy,
    RepairResult,
    RoleRepair,
    adjust_for_contrast,
    adjust_for_dark_theme,
    adjust_for_theme,
    repair_palette,
)
from .gradients import Gradient, generate_gradient  # noqa: F401
