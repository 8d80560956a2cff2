"""Upstream payload parser tests."""

import json

import pytest

from core.errors import PayloadParseError
from synthesis import Region, parse_layout_payload


@pytest.mark.unit
def test_parse_bare_array():
    """A bare JSON array is a list of matches."""
    payload = json.dumps([
        {"component": "ui.hero", "props": {"title": "Hi"}, "confidence": 0.9, "term": "hero"},
        {"component": "ui.card", "props": {}, "confidence": 0.5, "term": "карточка"},
    ])
    parsed = parse_layout_payload(payload)

    assert [m.component_id for m in parsed.matches] == ["ui.hero", "ui.card"]
    assert parsed.matches[0].properties == {"title": "Hi"}
    assert parsed.matches[1].source_term == "карточка"
    assert parsed.matches[1].region == Region.MAIN
    assert parsed.template is None
    assert parsed.skipped == []


@pytest.mark.unit
def test_parse_fenced_payload():
    """Markdown fences around the JSON are tolerated."""
    text = '```json\n[{"component": "ui.text", "confidence": 1, "term": "текст"}]\n```'
    parsed = parse_layout_payload(text)
    assert len(parsed.matches) == 1


@pytest.mark.unit
def test_parse_sections(sections_payload):
    """Section membership becomes the region; template is kept."""
    parsed = parse_layout_payload(sections_payload)

    assert parsed.template == "hero-main-footer"
    assert parsed.count == 6
    regions = [(m.component_id, m.region) for m in parsed.matches]
    assert regions == [
        ("ui.hero", Region.HERO),
        ("ui.navbar", Region.HERO),
        ("ui.text", Region.MAIN),
        ("ui.button", Region.MAIN),
        ("ui.form", Region.MAIN),
        ("ui.footer", Region.FOOTER),
    ]


@pytest.mark.unit
def test_parse_matches_when_sections_empty():
    """With empty sections the flat matches list is used."""
    payload = {
        "layout": {"template": "one-column", "sections": {"hero": [], "main": []}, "count": 1},
        "matches": [{"component": "ui.section", "confidence": 0.7, "term": "section", "section": "main"}],
    }
    parsed = parse_layout_payload(payload)
    assert parsed.template == "one-column"
    assert [m.component_id for m in parsed.matches] == ["ui.section"]


@pytest.mark.unit
def test_region_key_accepted():
    parsed = parse_layout_payload([{"component": "ui.footer", "region": "footer"}])
    assert parsed.matches[0].region == Region.FOOTER


@pytest.mark.unit
def test_unknown_region_defaults_to_main():
    parsed = parse_layout_payload([{"component": "ui.text", "section": "sidebar"}])
    assert parsed.matches[0].region == Region.MAIN


@pytest.mark.unit
def test_malformed_entries_skipped():
    """Bad entries are reported; good ones survive."""
    parsed = parse_layout_payload([
        "oops",
        {"props": {}},
        {"component": "ui.card", "confidence": 5},
        {"component": "ui.card", "confidence": 0.3},
    ])

    assert [m.component_id for m in parsed.matches] == ["ui.card"]
    assert [s.index for s in parsed.skipped] == [0, 1, 2]
    assert "confidence" in parsed.skipped[2].reason


@pytest.mark.unit
def test_match_type_kept():
    parsed = parse_layout_payload([{"component": "ui.text", "match_type": "template"}])
    assert parsed.matches[0].match_type == "template"


@pytest.mark.unit
def test_section_not_a_list():
    parsed = parse_layout_payload({"layout": {"sections": {"hero": "ui.hero", "main": [{"component": "ui.text"}]}}})
    assert len(parsed.matches) == 1
    assert parsed.skipped[0].section == "hero"


@pytest.mark.unit
@pytest.mark.parametrize("payload", ["not json at all", '"just a string"', "42"])
def test_not_json_raises(payload):
    with pytest.raises(PayloadParseError):
        parse_layout_payload(payload)


@pytest.mark.unit
def test_unknown_shape_raises():
    with pytest.raises(PayloadParseError):
        parse_layout_payload({"something": "else"})
