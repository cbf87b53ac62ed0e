import logging

from storefront_theme.design import Palette
from storefront_theme.services.suggestion_parser import extract_json, parse_suggested_palette

REPLY = """Here is the analysis:
```json
{
  "productCategory": "shoes",
  "suggestedPalette": {
    "primary": "#7a1f1f",
    "accent": "#e07a10",
    "background": "#fafafa",
    "text": "#1c1c1c"
  }
}
```
Hope this helps."""


def test_extract_json_strips_fence():
    assert extract_json(REPLY).startswith("{")
    assert extract_json(REPLY).endswith("}")


def test_extract_json_trims_prose_without_fence():
    assert extract_json('Sure! {"a": {"b": 1}} done') == '{"a": {"b": 1}}'


def test_extract_json_passthrough():
    assert extract_json("  no json here ") == "no json here"


def test_parse_suggested_palette_from_text():
    palette = parse_suggested_palette(REPLY)
    assert palette == Palette("#7a1f1f", "#e07a10", "#fafafa", "#1c1c1c")


def test_parse_suggested_palette_from_mapping():
    payload = {"suggestedPalette": {"primary": "#1", "accent": "#2", "background": "#3", "text": "#4"}}
    assert parse_suggested_palette(payload) == Palette("#1", "#2", "#3", "#4")


def test_parse_invalid_json_logs_warning(caplog):
    with caplog.at_level(logging.WARNING, logger="storefront_theme.services.suggestion_parser"):
        assert parse_suggested_palette("the model refused {oops") is None
    assert any("not valid JSON" in r.getMessage() for r in caplog.records)


def test_parse_missing_or_incomplete_palette():
    assert parse_suggested_palette(None) is None
    assert parse_suggested_palette('{"productCategory": "bags"}') is None
    assert parse_suggested_palette('{"suggestedPalette": {"primary": "#111111"}}') is None
    assert parse_suggested_palette("[1, 2]") is None


def test_parse_deeply_nested_reply_logs_warning(caplog):
    reply = "[" * 100000 + "]" * 100000
    with caplog.at_level(logging.WARNING, logger="storefront_theme.services.suggestion_parser"):
        assert parse_suggested_palette(reply) is None
    assert any("not valid JSON" in r.getMessage() for r in caplog.records)
