"""
Page Engine Types
Grid page model, renderable nodes and render diagnostics
"""

from enum import Enum
from typing import Any, Iterator, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Model serialized with camelCase field names on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ============================================================================
# Page Model
# ============================================================================


class MatchType(str, Enum):
    """How a block came to be on the page."""

    AI_GENERATED = "ai-generated"
    MANUAL = "manual"
    TEMPLATE = "template"


class BlockLayout(CamelModel):
    """Placement of a block on the 12-column page grid."""

    col_start: int = Field(default=1, ge=1, le=12)
    col_span: int = Field(default=12, ge=1, le=12)
    row: int = Field(default=1, ge=1)


class BlockMetadata(CamelModel):
    """Match provenance carried alongside a block."""

    confidence: float | None = Field(default=None, ge=0.0, le=1.0)
    match_type: MatchType = MatchType.MANUAL
    source: str | None = None
    using_defaults: bool = False
    source_term: str | None = None
    region: str | None = None


class Block(CamelModel):
    """One component instance on a page."""

    id: str = Field(..., min_length=1)
    component: str = Field(..., min_length=1)
    props: dict[str, Any] = Field(default_factory=dict)
    layout: BlockLayout = Field(default_factory=BlockLayout)
    metadata: BlockMetadata = Field(default_factory=BlockMetadata)


class PageMetadata(CamelModel):
    """Descriptive page fields."""

    title: str = "New page"
    description: str = ""
    version: str = "1.0.0"
    created_at: str | None = None
    updated_at: str | None = None
    template: str | None = None


class PageSettings(CamelModel):
    """Presentation settings."""

    theme: str = "default"
    responsive: bool = True


class PageModel(CamelModel):
    """Ordered list of blocks plus page metadata."""

    id: str | None = None
    blocks: list[Block] = Field(default_factory=list)
    metadata: PageMetadata = Field(default_factory=PageMetadata)
    settings: PageSettings = Field(default_factory=PageSettings)

    def get_block(self, block_id: str) -> Block | None:
        for block in self.blocks:
            if block.id == block_id:
                return block
        return None


# ============================================================================
# Renderable Nodes
# ============================================================================


class Node(BaseModel):
    """Toolkit-independent element tree produced by component constructors."""

    tag: str
    attrs: dict[str, Any] = Field(default_factory=dict)
    children: list[Union["Node", str]] = Field(default_factory=list)

    def walk(self) -> Iterator["Node"]:
        """Depth-first iteration over this node and its descendants."""
        yield self
        for child in self.children:
            if isinstance(child, Node):
                yield from child.walk()

    def text(self) -> str:
        """Concatenated text content, space separated."""
        parts: list[str] = []
        for child in self.children:
            if isinstance(child, Node):
                inner = child.text()
                if inner:
                    parts.append(inner)
            elif child:
                parts.append(child)
        return " ".join(parts)


def h(tag: str, attrs: dict[str, Any] | None = None, *children: Any) -> Node:
    """
    Build a node.

    ``None`` and ``False`` children are dropped, lists are flattened and
    other non-node values are converted to text.
    """
    flat: list[Node | str] = []
    for child in children:
        if child is None or child is False:
            continue
        if isinstance(child, (list, tuple)):
            flat.extend(c if isinstance(c, Node) else str(c) for c in child if c is not None)
        elif isinstance(child, Node):
            flat.append(child)
        else:
            flat.append(str(child))
    return Node(tag=tag, attrs=attrs or {}, children=flat)


# ============================================================================
# Render State & Diagnostics
# ============================================================================


class BlockState(str, Enum):
    """Per-block render lifecycle."""

    PENDING = "pending"
    RESOLVING = "resolving"
    RESOLVED = "resolved"
    NOT_FOUND = "not_found"
    CONSTRUCTING = "constructing"
    RENDERED = "rendered"
    FAILED = "failed"


ALLOWED_TRANSITIONS: dict[BlockState, frozenset[BlockState]] = {
    BlockState.PENDING: frozenset({BlockState.RESOLVING}),
    BlockState.RESOLVING: frozenset({BlockState.RESOLVED, BlockState.NOT_FOUND}),
    BlockState.RESOLVED: frozenset({BlockState.CONSTRUCTING}),
    BlockState.CONSTRUCTING: frozenset({BlockState.RENDERED, BlockState.FAILED}),
    BlockState.NOT_FOUND: frozenset(),
    BlockState.RENDERED: frozenset(),
    BlockState.FAILED: frozenset(),
}

TERMINAL_STATES = frozenset({BlockState.RENDERED, BlockState.FAILED, BlockState.NOT_FOUND})


class InvalidTransition(RuntimeError):
    """Block state machine was driven through an illegal edge."""

    def __init__(self, current: BlockState, target: BlockState) -> None:
        super().__init__(f"Illegal block state transition {current.value} -> {target.value}")
        self.current = current
        self.target = target


class RenderErrorKind(str, Enum):
    COMPONENT_NOT_FOUND = "ComponentNotFound"
    RENDER_FAILURE = "RenderFailure"


class RenderError(BaseModel):
    """A problem rendering one block."""

    kind: RenderErrorKind
    block_id: str
    component: str
    message: str
    exception_type: str | None = None
    traceback: str | None = Field(default=None, exclude=True, repr=False)


class RenderDiagnostic(BaseModel):
    """Per-block render report, replaced on every pass."""

    block_id: str
    component_name: str
    render_duration_ms: float = 0.0
    errors: list[RenderError] = Field(default_factory=list)
    confidence: float | None = None
    props: dict[str, Any] = Field(default_factory=dict)


class RenderedUnit(BaseModel):
    """Output of one block: the node tree or a placeholder."""

    block_id: str
    component: str
    state: BlockState
    node: Node
    placeholder: bool = False


class RenderResult(BaseModel):
    """Outcome of a render pass: one unit per block, in block order."""

    units: list[RenderedUnit] = Field(default_factory=list)
    diagnostics: dict[str, RenderDiagnostic] = Field(default_factory=dict)
    duration_ms: float = 0.0

    @property
    def errors(self) -> list[RenderError]:
        return [error for diag in self.diagnostics.values() for error in diag.errors]

    def summary(self) -> dict[str, Any]:
        """Debug totals of the pass."""
        states = [unit.state for unit in self.units]
        errors_by_kind: dict[str, int] = {kind.value: 0 for kind in RenderErrorKind}
        for error in self.errors:
            errors_by_kind[error.kind.value] += 1

        slowest = max(self.diagnostics.values(), key=lambda d: d.render_duration_ms, default=None)
        return {
            "total_blocks": len(self.units),
            "rendered": states.count(BlockState.RENDERED),
            "failed": states.count(BlockState.FAILED),
            "not_found": states.count(BlockState.NOT_FOUND),
            "error_count": len(self.errors),
            "errors_by_kind": errors_by_kind,
            "total_render_ms": round(sum(d.render_duration_ms for d in self.diagnostics.values()), 3),
            "pass_duration_ms": round(self.duration_ms, 3),
            "slowest_block": slowest.block_id if slowest else None,
        }
