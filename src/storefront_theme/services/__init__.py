"""Services package: generation pipeline glue around the design package."""

from .suggestion_parser import extract_json, parse_suggested_palette  # noqa: F401
from .palette_pipeline import (  # noqa: F401
    DEFAULT_PALETTE,
    DesignRecord,
    build_design,
    default_design,
    finalize_design,
    resolve_candidate,
)
