"""Page model adapter and block operation tests."""

import pytest
from returns.pipeline import is_successful

from core.errors import LayoutEditError
from page_engine import (
    BlockLayout,
    MatchType,
    RenderHost,
    add_block,
    clone_block,
    create_block,
    create_empty_page,
    elements_to_page_model,
    grid_cell_to_pixels,
    move_block,
    page_model_to_matches,
    pixels_to_grid_cell,
    remove_block,
    resize_block,
    update_block,
    validate_page_model,
)
from page_engine.adapters import assign_rows
from synthesis import MatchedComponent, Region


# ============================================================================
# Pixel <-> Grid
# ============================================================================

@pytest.mark.unit
@pytest.mark.parametrize(
    "x, width, expected",
    [
        (0, 1200, (1, 12)),
        (20, 373, (1, 4)),
        (413, 373, (5, 4)),
        (806, 373, (9, 4)),
        (50, 100, (2, 1)),
        (1190, 300, (12, 1)),
        (0, 10, (1, 1)),
    ],
)
def test_pixels_to_grid_cell(x, width, expected):
    assert tuple(pixels_to_grid_cell(x, width)) == expected


@pytest.mark.unit
def test_grid_cell_to_pixels():
    assert grid_cell_to_pixels(5, 4) == (400, 400)
    assert grid_cell_to_pixels(1, 12) == (0, 1200)


@pytest.mark.unit
def test_grid_cell_other_canvas():
    cell = pixels_to_grid_cell(480, 240, canvas_width=960, columns=12)
    assert tuple(cell) == (7, 3)


# ============================================================================
# Elements -> Page Model
# ============================================================================

@pytest.fixture
def elements(synthesizer, make_match):
    return synthesizer.synthesize([
        make_match("ui.hero", Region.HERO, props={"title": "Fresh bread"}, term="hero"),
        make_match("ui.card"),
        make_match("ui.card"),
        make_match("ui.card"),
        make_match("ui.footer", Region.FOOTER),
    ])


@pytest.mark.unit
def test_assign_rows(elements):
    rows = assign_rows(elements)
    assert [rows[e.y] for e in elements] == [1, 2, 2, 2, 3]


@pytest.mark.unit
def test_elements_to_page_model(elements):
    page = elements_to_page_model(elements, title="Bakery", template="hero-main-footer")

    assert page.id.startswith("page_")
    assert page.metadata.title == "Bakery"
    assert page.metadata.template == "hero-main-footer"
    assert [b.component for b in page.blocks] == [e.component for e in elements]
    assert len({b.id for b in page.blocks}) == len(page.blocks)

    hero, card1, card2, card3, footer = page.blocks
    assert (hero.layout.col_start, hero.layout.col_span, hero.layout.row) == (1, 12, 1)
    assert [(c.layout.col_start, c.layout.row) for c in (card1, card2, card3)] == [(1, 2), (5, 2), (9, 2)]
    assert footer.layout.row == 3


@pytest.mark.unit
def test_block_metadata_from_element(elements):
    page = elements_to_page_model(elements)
    hero = page.blocks[0]

    assert hero.metadata.match_type == MatchType.AI_GENERATED
    assert hero.metadata.confidence == 0.9
    assert hero.metadata.source_term == "hero"
    assert hero.metadata.region == "hero"
    assert hero.metadata.using_defaults is False
    assert hero.props["title"] == "Fresh bread"
    assert page.blocks[1].metadata.using_defaults is True
    assert page.blocks[1].props["content"]


@pytest.mark.unit
def test_adapted_page_renders(elements, registry):
    page = elements_to_page_model(elements)
    result = RenderHost(registry).render(page)
    assert result.errors == []
    assert "Fresh bread" in result.units[0].node.text()


@pytest.mark.unit
def test_empty_elements():
    page = elements_to_page_model([])
    assert page.blocks == []


@pytest.mark.unit
def test_matches_round_trip_geometry(elements, synthesizer):
    page = elements_to_page_model(elements)
    matches = page_model_to_matches(page)

    assert all(isinstance(m, MatchedComponent) for m in matches)
    assert matches[0].region == Region.HERO
    assert matches[0].match_type == "ai-generated"

    again = synthesizer.synthesize(matches)
    geometry = [(e.component, e.x, e.y, e.width, e.height) for e in elements]
    assert [(e.component, e.x, e.y, e.width, e.height) for e in again] == geometry
    assert [e.content for e in again] == [e.content for e in elements]


# ============================================================================
# Block Operations
# ============================================================================

@pytest.fixture
def page():
    base = create_empty_page()
    base = add_block(base, create_block("ui.heading", {"text": "Title"}))
    return add_block(base, create_block("ui.text", {"text": "Body"}, BlockLayout(col_start=1, col_span=6, row=2)))


@pytest.mark.unit
def test_create_empty_page():
    page = create_empty_page()
    assert page.blocks == []
    assert page.metadata.template == "hero-main-footer"
    assert page.metadata.created_at == page.metadata.updated_at
    assert is_successful(validate_page_model(page.model_dump(by_alias=True)))


@pytest.mark.unit
def test_create_block_is_manual():
    block = create_block("ui.button")
    assert block.id.startswith("block_")
    assert block.metadata.match_type == MatchType.MANUAL
    assert (block.layout.col_start, block.layout.col_span, block.layout.row) == (1, 12, 1)


@pytest.mark.unit
def test_add_block_at_index(page):
    inserted = add_block(page, create_block("ui.divider"), index=0)
    assert [b.component for b in inserted.blocks] == ["ui.divider", "ui.heading", "ui.text"]
    assert len(page.blocks) == 2


@pytest.mark.unit
def test_clone_block(page):
    original = page.blocks[0]
    copy = clone_block(original)
    assert copy.id != original.id
    assert copy.props == original.props
    assert copy.props is not original.props


@pytest.mark.unit
def test_update_block(page):
    target = page.blocks[1]
    updated = update_block(page, target.id, props={"text": "Changed"})
    assert updated.blocks[1].props == {"text": "Changed"}
    assert updated.blocks[1].id == target.id
    assert page.blocks[1].props == {"text": "Body"}


@pytest.mark.unit
def test_update_block_rejects_id_change(page):
    with pytest.raises(LayoutEditError):
        update_block(page, page.blocks[0].id, id="other")


@pytest.mark.unit
def test_update_block_rejects_invalid_value(page):
    with pytest.raises(LayoutEditError):
        update_block(page, page.blocks[0].id, component="")


@pytest.mark.unit
def test_move_block_clamps_span(page):
    target = page.blocks[1]
    moved = move_block(page, target.id, col_start=10, row=4)
    layout = moved.blocks[1].layout
    assert (layout.col_start, layout.col_span, layout.row) == (10, 3, 4)


@pytest.mark.unit
def test_resize_block_clamps(page):
    target = page.blocks[1]
    resized = resize_block(page, target.id, col_span=40)
    assert resized.blocks[1].layout.col_span == 12
    assert resize_block(page, target.id, col_span=0).blocks[1].layout.col_span == 1


@pytest.mark.unit
def test_remove_block(page):
    remaining = remove_block(page, page.blocks[0].id)
    assert [b.component for b in remaining.blocks] == ["ui.text"]


@pytest.mark.unit
def test_unknown_block(page):
    with pytest.raises(LayoutEditError) as exc_info:
        remove_block(page, "block_missing")
    assert exc_info.value.element_id == "block_missing"
    with pytest.raises(LayoutEditError):
        move_block(page, "block_missing", col_start=1)
