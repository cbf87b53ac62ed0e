"""Parse palette suggestions out of vision model replies.

Vision replies are asked to be plain JSON but routinely arrive wrapped in a
fenced code block or with prose around the object. ``extract_json`` trims the
text down to the outermost ``{...}``; ``parse_suggested_palette`` reads the
``suggestedPalette`` object::

    {"suggestedPalette": {"primary": "#..", "accent": "#..",
                          "background": "#..", "text": "#.."}}

Failures are logged and reported as ``None`` so the caller can fall back to
storefront colors.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Mapping, Optional, Union

from storefront_theme.design.palette import Palette, PaletteValidationError

__all__ = ["extract_json", "parse_suggested_palette"]

_logger = logging.getLogger(__name__)

_FENCED_BLOCK = re.compile(r"```(?:json)?\s*([\s\S]*?)```")


def extract_json(text: str) -> str:
    cleaned = text.strip()
    match = _FENCED_BLOCK.search(cleaned)
    if match:
        cleaned = match.group(1).strip()
    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start != -1 and end != -1 and end > start:
        cleaned = cleaned[start : end + 1]
    return cleaned


def parse_suggested_palette(reply: Union[str, Mapping[str, Any], None]) -> Optional[Palette]:
    """Return the suggested palette from a vision reply, or ``None``.

    ``reply`` may be the raw model text or an already decoded mapping.
    """
    if reply is None:
        return None
    if isinstance(reply, str):
        try:
            payload = json.loads(extract_json(reply))
        except (json.JSONDecodeError, RecursionError) as exc:
            _logger.warning("Vision reply is not valid JSON: %s", exc)
            return None
    else:
        payload = reply
    if not isinstance(payload, Mapping):
        _logger.warning("Vision reply is not a JSON object")
        return None
    suggested = payload.get("suggestedPalette")
    if not suggested:
        _logger.info("Vision reply has no suggestedPalette")
        return None
    try:
        return Palette.from_mapping(suggested)
    except PaletteValidationError as exc:
        _logger.warning("Ignoring suggested palette: %s", exc)
        return None
