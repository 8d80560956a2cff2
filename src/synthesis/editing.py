"""
Element Editing
Explicit edit operations on a synthesized layout

Every operation returns a new list and leaves the input untouched. Edits that
would make two elements overlap are rejected.
"""

from typing import Any, Sequence

from pydantic import ValidationError as PydanticValidationError

from core.errors import LayoutEditError
from core.logging_config import get_logger

from .classifier import classify
from .models import Placement, PositionedElement

logger = get_logger(__name__)

GEOMETRY_FIELDS = frozenset({"x", "y", "width", "height"})
READ_ONLY_FIELDS = frozenset({"id", "component", "visual_kind", "section"})


def _find(elements: Sequence[PositionedElement], element_id: str) -> int:
    for index, element in enumerate(elements):
        if element.id == element_id:
            return index
    raise LayoutEditError(f"Unknown element: {element_id}", element_id)


def _check_overlap(elements: Sequence[PositionedElement], index: int, candidate: PositionedElement) -> None:
    for other_index, other in enumerate(elements):
        if other_index != index and candidate.overlaps(other):
            raise LayoutEditError(
                f"Element {candidate.id} would overlap {other.id}",
                candidate.id,
            )


def update_element(
    elements: Sequence[PositionedElement],
    element_id: str,
    canvas_width: int = 1200,
    **changes: Any,
) -> list[PositionedElement]:
    """
    Apply field changes to one element.

    Args:
        elements: Current layout
        element_id: Element to change
        canvas_width: Width full-bleed elements keep spanning
        **changes: Field values (content, props, style, x, y, ...)

    Returns:
        New layout with the element replaced

    Raises:
        LayoutEditError: Unknown id, read-only field, invalid value, locked
            element moved or resized, or resulting overlap
    """
    index = _find(elements, element_id)
    current = elements[index]

    forbidden = READ_ONLY_FIELDS.intersection(changes)
    if forbidden:
        raise LayoutEditError(f"Read-only fields: {', '.join(sorted(forbidden))}", element_id)

    moves = GEOMETRY_FIELDS.intersection(changes)
    if moves and current.locked and changes.get("locked", True):
        raise LayoutEditError(f"Element {element_id} is locked", element_id)

    data = {**current.model_dump(), **changes}
    if classify(current.visual_kind) == Placement.FULL_BLEED:
        data["x"] = 0
        data["width"] = canvas_width

    try:
        updated = PositionedElement.model_validate(data)
    except PydanticValidationError as e:
        raise LayoutEditError(f"Invalid edit of {element_id}: {e.error_count()} error(s)", element_id) from e

    if moves:
        _check_overlap(elements, index, updated)

    logger.debug("element_updated", element_id=element_id, fields=sorted(changes))
    result = list(elements)
    result[index] = updated
    return result


def move_element(
    elements: Sequence[PositionedElement], element_id: str, x: int, y: int, canvas_width: int = 1200
) -> list[PositionedElement]:
    """Move an element to a new top-left corner."""
    return update_element(elements, element_id, canvas_width=canvas_width, x=x, y=y)


def resize_element(
    elements: Sequence[PositionedElement],
    element_id: str,
    width: int,
    height: int,
    canvas_width: int = 1200,
) -> list[PositionedElement]:
    """Resize an element; full-bleed elements only change height."""
    return update_element(elements, element_id, canvas_width=canvas_width, width=width, height=height)


def remove_element(elements: Sequence[PositionedElement], element_id: str) -> list[PositionedElement]:
    """Remove an element from the layout."""
    index = _find(elements, element_id)
    logger.debug("element_removed", element_id=element_id)
    return [element for i, element in enumerate(elements) if i != index]
