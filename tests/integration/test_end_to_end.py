"""End-to-end tests: payload in, rendered page out."""

import json

import pytest

from core import safe_json_dumps
from main import main
from page_engine import BlockState, page_model_to_matches
from synthesis import Bucket


pytestmark = pytest.mark.integration


@pytest.fixture
def payload_file(tmp_path, sections_payload):
    path = tmp_path / "payload.json"
    path.write_text(safe_json_dumps(sections_payload), encoding="utf-8")
    return path


def test_payload_to_rendered_page(di_container, sections_payload):
    """Synthesize, adapt and render a sectioned mapping response."""
    from handlers import LayoutHandler

    handler = di_container.get(LayoutHandler)
    layout, result = handler.generate_page(safe_json_dumps(sections_payload))

    navbar, hero, text, button, form, footer = layout.elements
    assert (navbar.section, navbar.x, navbar.y, navbar.width) == (Bucket.HEADER, 0, 0, 1200)
    assert hero.y == navbar.bottom + 20
    assert (text.x, button.x, form.x) == (20, 413, 806)
    assert text.y == button.y == form.y == hero.bottom + 20
    assert footer.y == max(text.bottom, button.bottom, form.bottom) + 20

    assert [b.layout.row for b in layout.page.blocks] == [1, 2, 3, 3, 3, 4]
    assert [b.layout.col_start for b in layout.page.blocks[2:5]] == [1, 5, 9]
    assert all(u.state == BlockState.RENDERED for u in result.units)
    assert "Order now" in result.units[3].node.text()


def test_edited_page_resynthesizes(synthesizer, di_container, sections_payload):
    """A page model converts back to matches that lay out identically."""
    from handlers import LayoutHandler

    layout = di_container.get(LayoutHandler).synthesize(safe_json_dumps(sections_payload))
    again = synthesizer.synthesize(page_model_to_matches(layout.page))
    assert [(e.x, e.y, e.width, e.height) for e in again] == [
        (e.x, e.y, e.width, e.height) for e in layout.elements
    ]


def test_cli_synthesize_and_render(payload_file, capsys):
    exit_code = main(["synthesize", str(payload_file), "--title", "Bakery", "--render"])
    output = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert output["page"]["metadata"]["title"] == "Bakery"
    assert len(output["page"]["blocks"]) == 6
    assert "colStart" in output["page"]["blocks"][0]["layout"]
    assert output["render"]["rendered"] == 6
    assert output["warnings"] == []


def test_cli_render_page(tmp_path, page_dict, capsys):
    page_dict["blocks"].append({"id": "b4", "component": "ui.nope"})
    path = tmp_path / "page.json"
    path.write_text(json.dumps(page_dict), encoding="utf-8")

    exit_code = main(["render", str(path), "--parallel"])
    output = json.loads(capsys.readouterr().out)

    assert exit_code == 0
    assert output["summary"]["not_found"] == 1
    assert output["diagnostics"]["b4"]["errors"][0]["kind"] == "ComponentNotFound"


def test_cli_reports_malformed_page(tmp_path, capsys):
    path = tmp_path / "page.json"
    path.write_text('{"blocks": [{"props": {}}]}', encoding="utf-8")

    exit_code = main(["render", str(path)])
    output = json.loads(capsys.readouterr().out)

    assert exit_code == 1
    assert output["type"] == "MalformedPageModelError"
