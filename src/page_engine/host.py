"""
Render Host
Renders page model blocks through the registry with per-block fault isolation
"""

import time
import traceback
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from pydantic import ValidationError as PydanticValidationError
from returns.pipeline import is_successful

from core.errors import MalformedPageModelError
from core.logging_config import LogContext, get_logger
from core.validate import PageModelIssue, check_page_model
from monitoring import metrics_collector, trace_operation

from .boundary import isolate
from .placeholders import missing_component, render_error
from .registry import ComponentRegistry
from .types import (
    ALLOWED_TRANSITIONS,
    Block,
    BlockState,
    InvalidTransition,
    Node,
    PageModel,
    RenderDiagnostic,
    RenderError,
    RenderErrorKind,
    RenderedUnit,
    RenderResult,
)

logger = get_logger(__name__)


class BlockRun:
    """State machine of one block within a render pass."""

    def __init__(self, block: Block) -> None:
        self.block = block
        self.state = BlockState.PENDING

    def advance(self, target: BlockState) -> None:
        if target not in ALLOWED_TRANSITIONS[self.state]:
            raise InvalidTransition(self.state, target)
        self.state = target


class RenderHost:
    """
    Converts page model blocks into rendered units.

    A block whose component is unknown, or whose constructor raises, is
    replaced by a placeholder and reported in the diagnostics; the rest of
    the page renders normally. The only exception ``render`` raises is
    MalformedPageModelError, before any block is touched.
    """

    def __init__(self, registry: ComponentRegistry, max_workers: int = 1) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        self.registry = registry
        self.max_workers = max_workers
        self.diagnostics: dict[str, RenderDiagnostic] = {}

    def render(self, page_model: PageModel | dict[str, Any]) -> RenderResult:
        """
        Render every block of a page model.

        Args:
            page_model: Page model or its decoded JSON form

        Returns:
            One unit per block in block order, plus diagnostics keyed by
            block id

        Raises:
            MalformedPageModelError: A block lacks id or component, or the
                model is not structurally a page model
        """
        model = self.validate(page_model)
        start = time.perf_counter()

        with LogContext(page_id=model.id or "-"), trace_operation("render_pass", blocks=len(model.blocks)):
            if self.max_workers > 1 and len(model.blocks) > 1:
                slots = self._render_parallel(model.blocks)
            else:
                slots = [self._render_block(block) for block in model.blocks]

        units = [unit for unit, _ in slots]
        diagnostics = {diag.block_id: diag for _, diag in slots}
        self.diagnostics = diagnostics

        result = RenderResult(
            units=units,
            diagnostics=diagnostics,
            duration_ms=(time.perf_counter() - start) * 1000,
        )
        status = "degraded" if result.errors else "success"
        metrics_collector.record_render_pass(status)
        logger.info(
            "render_complete",
            page_id=model.id,
            blocks=len(units),
            errors=len(result.errors),
            duration_ms=round(result.duration_ms, 3),
        )
        return result

    def validate(self, page_model: PageModel | dict[str, Any]) -> PageModel:
        """Check page model structure, collecting every issue before raising."""
        raw = page_model.model_dump(by_alias=True) if isinstance(page_model, PageModel) else page_model
        issues = check_page_model(raw)
        if issues:
            logger.error("malformed_page_model", issues=[str(i) for i in issues])
            raise MalformedPageModelError(issues)

        if isinstance(page_model, PageModel):
            return page_model

        try:
            return PageModel.model_validate(raw)
        except PydanticValidationError as e:
            issues = [_issue_from_pydantic(err) for err in e.errors()]
            logger.error("malformed_page_model", issues=[str(i) for i in issues])
            raise MalformedPageModelError(issues) from e

    def _render_parallel(self, blocks: list[Block]) -> list[tuple[RenderedUnit, RenderDiagnostic]]:
        """Render blocks on a thread pool; each block owns its result slot."""
        slots: list[tuple[RenderedUnit, RenderDiagnostic] | None] = [None] * len(blocks)

        def run(index: int) -> None:
            slots[index] = self._render_block(blocks[index])

        with ThreadPoolExecutor(max_workers=min(self.max_workers, len(blocks))) as executor:
            futures = [executor.submit(run, index) for index in range(len(blocks))]
            for future in futures:
                future.result()

        return [slot for slot in slots if slot is not None]

    def _render_block(self, block: Block) -> tuple[RenderedUnit, RenderDiagnostic]:
        """Resolve and construct one block; never raises for component faults."""
        run = BlockRun(block)
        start = time.perf_counter()
        errors: list[RenderError] = []
        placeholder = False

        run.advance(BlockState.RESOLVING)
        constructor = self.registry.resolve(block.component)

        if constructor is None:
            run.advance(BlockState.NOT_FOUND)
            node: Node = missing_component(block.id, block.component)
            placeholder = True
            errors.append(
                RenderError(
                    kind=RenderErrorKind.COMPONENT_NOT_FOUND,
                    block_id=block.id,
                    component=block.component,
                    message=f"Component not registered: {block.component}",
                )
            )
            logger.warning("component_not_found", block_id=block.id, component=block.component)
            metrics_collector.record_error("component_not_found", "render_host")
        else:
            run.advance(BlockState.RESOLVED)
            run.advance(BlockState.CONSTRUCTING)
            props = dict(block.props)
            result = isolate(lambda: constructor(props))

            if is_successful(result):
                run.advance(BlockState.RENDERED)
                node = result.unwrap()
            else:
                failure = result.failure()
                run.advance(BlockState.FAILED)
                node = render_error(block.id, block.component, failure.message)
                placeholder = True
                errors.append(
                    RenderError(
                        kind=RenderErrorKind.RENDER_FAILURE,
                        block_id=block.id,
                        component=block.component,
                        message=failure.message,
                        exception_type=failure.exception_type,
                        traceback=_format_traceback(failure.exception),
                    )
                )
                logger.warning(
                    "component_render_failed",
                    block_id=block.id,
                    component=block.component,
                    error=failure.message,
                    exception_type=failure.exception_type,
                )
                metrics_collector.record_error("render_failure", "render_host")

        duration = time.perf_counter() - start
        metrics_collector.record_block(run.state.value, duration)

        unit = RenderedUnit(
            block_id=block.id,
            component=block.component,
            state=run.state,
            node=node,
            placeholder=placeholder,
        )
        diagnostic = RenderDiagnostic(
            block_id=block.id,
            component_name=block.component,
            render_duration_ms=duration * 1000,
            errors=errors,
            confidence=block.metadata.confidence,
            props=dict(block.props),
        )
        return unit, diagnostic


def _format_traceback(exception: BaseException | None) -> str | None:
    if exception is None:
        return None
    return "".join(traceback.format_exception(type(exception), exception, exception.__traceback__))


def _issue_from_pydantic(err: Any) -> PageModelIssue:
    """Map a pydantic error location such as ('blocks', 2, 'layout') to an issue."""
    loc = list(err.get("loc", ()))
    index = None
    if len(loc) >= 2 and loc[0] == "blocks" and isinstance(loc[1], int):
        index = loc[1]
        loc = loc[2:]
    field = ".".join(str(part) for part in loc) or None
    return PageModelIssue(err.get("msg", "invalid value"), field=field, index=index)
