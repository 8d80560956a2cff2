"""
Page Model Adapters
Conversion between pixel layouts, grid page models and upstream matches,
plus block operations on page models
"""

import math
from datetime import datetime, timezone
from typing import Any, NamedTuple, Sequence

from pydantic import ValidationError as PydanticValidationError

from core.errors import LayoutEditError
from core.id import new_block_id, new_page_id
from core.logging_config import get_logger
from core.validate import validate_page_model
from synthesis.models import MatchedComponent, PositionedElement, Region

from .types import Block, BlockLayout, BlockMetadata, MatchType, PageMetadata, PageModel

logger = get_logger(__name__)

DEFAULT_TEMPLATE = "hero-main-footer"
PAGE_COLUMNS = 12
CONTENT_KEYS = ("text", "title", "content")


class GridCell(NamedTuple):
    col_start: int
    col_span: int


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


# ============================================================================
# Pixel <-> Grid
# ============================================================================


def pixels_to_grid_cell(
    x: int, width: int, canvas_width: int = 1200, columns: int = PAGE_COLUMNS
) -> GridCell:
    """
    Snap a pixel span to the page grid.

    The column unit is ``canvas_width / columns``. The start snaps to the
    nearest column boundary (halves round up), the span to the nearest whole
    number of columns with a minimum of one; both are clamped so the cell
    stays inside the grid.

    Args:
        x: Left edge in pixels
        width: Width in pixels
        canvas_width: Canvas width in pixels
        columns: Number of grid columns

    Returns:
        1-based start column and span
    """
    unit = canvas_width / columns
    col_start = _round_half_up(x / unit) + 1
    col_start = min(max(col_start, 1), columns)
    col_span = max(1, _round_half_up(width / unit))
    col_span = min(col_span, columns - col_start + 1)
    return GridCell(col_start, col_span)


def grid_cell_to_pixels(
    col_start: int, col_span: int, canvas_width: int = 1200, columns: int = PAGE_COLUMNS
) -> tuple[int, int]:
    """Left edge and width in pixels of a grid cell."""
    unit = canvas_width / columns
    return _round_half_up((col_start - 1) * unit), _round_half_up(col_span * unit)


def assign_rows(elements: Sequence[PositionedElement]) -> dict[int, int]:
    """Map each distinct y to its 1-based row, ascending."""
    return {y: row for row, y in enumerate(sorted({e.y for e in elements}), start=1)}


# ============================================================================
# Elements <-> Page Model <-> Matches
# ============================================================================


def element_to_block(
    element: PositionedElement, row: int, canvas_width: int = 1200, columns: int = PAGE_COLUMNS
) -> Block:
    """Convert one positioned element into a block on the given row."""
    cell = pixels_to_grid_cell(element.x, element.width, canvas_width, columns)

    props = dict(element.props)
    using_defaults = all(props.get(key) in (None, "") for key in CONTENT_KEYS)
    if element.content and props.get("content") in (None, ""):
        props["content"] = element.content

    return Block(
        id=new_block_id(),
        component=element.component,
        props=props,
        layout=BlockLayout(col_start=cell.col_start, col_span=cell.col_span, row=row),
        metadata=BlockMetadata(
            confidence=element.confidence,
            match_type=MatchType.AI_GENERATED,
            source="synthesis",
            using_defaults=using_defaults,
            source_term=element.source_term or None,
            region=element.section.value,
        ),
    )


def elements_to_page_model(
    elements: Sequence[PositionedElement],
    title: str = "Generated page",
    description: str = "",
    template: str | None = None,
    canvas_width: int = 1200,
    columns: int = PAGE_COLUMNS,
) -> PageModel:
    """
    Adapt a synthesized pixel layout into a grid page model.

    Rows are the distinct element y values in ascending order; block order
    follows element order.
    """
    rows = assign_rows(elements)
    blocks = [element_to_block(e, rows[e.y], canvas_width, columns) for e in elements]
    now = _now()
    model = PageModel(
        id=new_page_id(),
        blocks=blocks,
        metadata=PageMetadata(
            title=title,
            description=description,
            created_at=now,
            updated_at=now,
            template=template,
        ),
    )
    logger.debug("elements_adapted", elements=len(elements), rows=len(rows), page_id=model.id)
    return model


def page_model_to_matches(page_model: PageModel) -> list[MatchedComponent]:
    """Turn blocks back into matches, e.g. to re-synthesize an edited page."""
    regions = {region.value for region in Region}
    matches = []
    for block in page_model.blocks:
        meta = block.metadata
        matches.append(
            MatchedComponent(
                component_id=block.component,
                properties=dict(block.props),
                confidence=meta.confidence if meta.confidence is not None else 1.0,
                source_term=meta.source_term or "",
                region=meta.region if meta.region in regions else Region.MAIN,
                match_type=meta.match_type.value,
            )
        )
    return matches


# ============================================================================
# Block Operations
# ============================================================================


def create_block(
    component: str,
    props: dict[str, Any] | None = None,
    layout: BlockLayout | None = None,
    metadata: BlockMetadata | None = None,
) -> Block:
    """Create a manually added block."""
    return Block(
        id=new_block_id(),
        component=component,
        props=dict(props or {}),
        layout=layout or BlockLayout(),
        metadata=metadata or BlockMetadata(match_type=MatchType.MANUAL),
    )


def clone_block(block: Block) -> Block:
    """Copy a block under a fresh id, marked as manual."""
    return block.model_copy(
        update={
            "id": new_block_id(),
            "props": dict(block.props),
            "metadata": block.metadata.model_copy(update={"match_type": MatchType.MANUAL}),
        },
        deep=True,
    )


def _index_of(page_model: PageModel, block_id: str) -> int:
    for index, block in enumerate(page_model.blocks):
        if block.id == block_id:
            return index
    raise LayoutEditError(f"Unknown block: {block_id}", block_id)


def _with_blocks(page_model: PageModel, blocks: list[Block]) -> PageModel:
    metadata = page_model.metadata.model_copy(update={"updated_at": _now()})
    return page_model.model_copy(update={"blocks": blocks, "metadata": metadata})


def add_block(page_model: PageModel, block: Block, index: int | None = None) -> PageModel:
    """Insert a block (appended by default)."""
    blocks = list(page_model.blocks)
    blocks.insert(len(blocks) if index is None else index, block)
    return _with_blocks(page_model, blocks)


def update_block(page_model: PageModel, block_id: str, **updates: Any) -> PageModel:
    """
    Replace fields of a block.

    Raises:
        LayoutEditError: Unknown block id, id change or invalid value
    """
    if "id" in updates:
        raise LayoutEditError("Block id cannot be changed", block_id)
    index = _index_of(page_model, block_id)
    current = page_model.blocks[index]
    try:
        updated = Block.model_validate({**current.model_dump(), **updates})
    except PydanticValidationError as e:
        raise LayoutEditError(f"Invalid update of {block_id}: {e.error_count()} error(s)", block_id) from e
    blocks = list(page_model.blocks)
    blocks[index] = updated
    return _with_blocks(page_model, blocks)


def remove_block(page_model: PageModel, block_id: str) -> PageModel:
    """Remove a block."""
    index = _index_of(page_model, block_id)
    blocks = [b for i, b in enumerate(page_model.blocks) if i != index]
    return _with_blocks(page_model, blocks)


def move_block(
    page_model: PageModel,
    block_id: str,
    col_start: int,
    row: int | None = None,
    columns: int = PAGE_COLUMNS,
) -> PageModel:
    """Move a block to a new grid cell, keeping its span inside the grid."""
    index = _index_of(page_model, block_id)
    layout = page_model.blocks[index].layout
    col_start = min(max(col_start, 1), columns)
    col_span = min(layout.col_span, columns - col_start + 1)
    new_layout = BlockLayout(col_start=col_start, col_span=col_span, row=max(1, row or layout.row))
    return update_block(page_model, block_id, layout=new_layout)


def resize_block(page_model: PageModel, block_id: str, col_span: int, columns: int = PAGE_COLUMNS) -> PageModel:
    """Change a block's span, clamped to the columns left of its start."""
    index = _index_of(page_model, block_id)
    layout = page_model.blocks[index].layout
    col_span = min(max(col_span, 1), columns - layout.col_start + 1)
    return update_block(page_model, block_id, layout=layout.model_copy(update={"col_span": col_span}))


def create_empty_page(
    title: str = "New page",
    description: str = "Page created in the builder",
    template: str = DEFAULT_TEMPLATE,
) -> PageModel:
    """Create a page with no blocks."""
    now = _now()
    return PageModel(
        id=new_page_id(),
        metadata=PageMetadata(
            title=title,
            description=description,
            created_at=now,
            updated_at=now,
            template=template,
        ),
    )


__all__ = [
    "GridCell",
    "pixels_to_grid_cell",
    "grid_cell_to_pixels",
    "assign_rows",
    "element_to_block",
    "elements_to_page_model",
    "page_model_to_matches",
    "create_block",
    "clone_block",
    "add_block",
    "update_block",
    "remove_block",
    "move_block",
    "resize_block",
    "create_empty_page",
    "validate_page_model",
]
