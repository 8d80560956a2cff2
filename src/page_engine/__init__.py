"""
Page Engine
Grid page models rendered through a component registry
"""

from .types import (
    Block,
    BlockLayout,
    BlockMetadata,
    BlockState,
    InvalidTransition,
    MatchType,
    Node,
    PageMetadata,
    PageModel,
    PageSettings,
    RenderDiagnostic,
    RenderError,
    RenderErrorKind,
    RenderedUnit,
    RenderResult,
    h,
)
from .registry import ComponentRegistry, Constructor, create_default_registry, register_component
from .boundary import RenderFailure, isolate
from .host import RenderHost
from .adapters import (
    GridCell,
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

__all__ = [
    "Block",
    "BlockLayout",
    "BlockMetadata",
    "BlockState",
    "InvalidTransition",
    "MatchType",
    "Node",
    "PageMetadata",
    "PageModel",
    "PageSettings",
    "RenderDiagnostic",
    "RenderError",
    "RenderErrorKind",
    "RenderedUnit",
    "RenderResult",
    "h",
    "ComponentRegistry",
    "Constructor",
    "create_default_registry",
    "register_component",
    "RenderFailure",
    "isolate",
    "RenderHost",
    "GridCell",
    "add_block",
    "clone_block",
    "create_block",
    "create_empty_page",
    "elements_to_page_model",
    "grid_cell_to_pixels",
    "move_block",
    "page_model_to_matches",
    "pixels_to_grid_cell",
    "remove_block",
    "resize_block",
    "update_block",
    "validate_page_model",
]
