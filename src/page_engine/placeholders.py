"""Placeholder nodes shown in place of blocks that could not render."""

from .types import Node, h


def missing_component(block_id: str, component: str) -> Node:
    """Visible marker for a block whose component is not registered."""
    return h(
        "div",
        {"class": "placeholder missing-component", "data-block-id": block_id, "role": "alert"},
        h("h3", {}, "Component not registered"),
        h("p", {}, component),
    )


def render_error(block_id: str, component: str, message: str) -> Node:
    """Inline error box for a block whose constructor failed."""
    return h(
        "div",
        {"class": "placeholder render-error", "data-block-id": block_id, "role": "alert"},
        h("h3", {}, "Component render error"),
        h("p", {}, f"Component: {component}"),
        h("p", {}, f"Block ID: {block_id}"),
        h("pre", {}, message or "Unknown error"),
    )
