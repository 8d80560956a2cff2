"""JSON extraction tests."""

import pytest

from core.json import JSONParseError, extract_json, safe_json_dumps


@pytest.mark.unit
def test_extract_bare_object():
    assert extract_json('{"matches": []}') == {"matches": []}


@pytest.mark.unit
def test_extract_bare_array():
    assert extract_json('[{"component": "ui.text"}]') == [{"component": "ui.text"}]


@pytest.mark.unit
def test_extract_from_markdown_fence():
    text = 'Here is the mapping:\n```json\n{"layout": {"template": "one-column"}}\n```\nDone.'
    assert extract_json(text) == {"layout": {"template": "one-column"}}


@pytest.mark.unit
def test_extract_with_surrounding_prose():
    assert extract_json('result: [1, 2, 3] (end)') == [1, 2, 3]


@pytest.mark.unit
def test_object_containing_array_is_object():
    assert extract_json('{"matches": [{"component": "ui.card"}]}') == {"matches": [{"component": "ui.card"}]}


@pytest.mark.unit
def test_repair_trailing_comma():
    assert extract_json('{"matches": [],}') == {"matches": []}


@pytest.mark.unit
def test_no_repair_raises():
    with pytest.raises(JSONParseError) as exc_info:
        extract_json('{"matches": [],}', repair=False)
    assert exc_info.value.original is not None


@pytest.mark.unit
@pytest.mark.parametrize("text", ["", "plain text", "42", '"string"'])
def test_no_json(text):
    with pytest.raises(JSONParseError):
        extract_json(text)


@pytest.mark.unit
def test_safe_json_dumps():
    assert safe_json_dumps({"a": 1}) == '{"a":1}'
    assert safe_json_dumps({"a": 1}, indent=2) == '{\n  "a": 1\n}'
    assert "Привет" in safe_json_dumps({"text": "Привет"}, indent=2)
