"""Layout Handler."""

import time
from typing import Any

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from core import (
    LayoutRequest,
    RenderRequest,
    Settings,
    ValidationError,
    PayloadParseError,
    get_logger,
    LogContext,
    new_request_id,
    validate_payload_limits,
)
from core.json import JSONParseError, extract_json
from monitoring import metrics_collector, trace_operation
from page_engine import PageModel, RenderHost, RenderResult, elements_to_page_model
from synthesis import LayoutSynthesizer, PositionedElement, SynthesisWarning, parse_layout_payload
from synthesis.parser import SkippedEntry


logger = get_logger(__name__)


class LayoutResponse(BaseModel):
    """Synthesized layout and its page model."""

    request_id: str
    page: PageModel
    elements: list[PositionedElement] = Field(default_factory=list)
    warnings: list[SynthesisWarning] = Field(default_factory=list)
    skipped: list[dict[str, Any]] = Field(default_factory=list)
    template: str | None = None


class LayoutHandler:
    """Handles layout synthesis and render requests."""

    def __init__(self, synthesizer: LayoutSynthesizer, host: RenderHost, settings: Settings) -> None:
        self.synthesizer = synthesizer
        self.host = host
        self.settings = settings

    def synthesize(self, payload: str, title: str | None = None, description: str | None = None) -> LayoutResponse:
        """Parse an upstream payload and lay it out as a page model."""
        start_time = time.time()
        request_id = new_request_id()

        try:
            try:
                validated = LayoutRequest(payload=payload, title=title, description=description)
            except PydanticValidationError as e:
                raise ValidationError(f"Invalid layout request: {e.error_count()} error(s)") from e

            with LogContext(request_id=request_id), trace_operation("layout_request"):
                try:
                    decoded = extract_json(validated.payload, repair=True)
                except JSONParseError as e:
                    raise PayloadParseError(f"Invalid payload JSON: {e}", e) from e

                validate_payload_limits(
                    validated.payload,
                    decoded,
                    max_size=self.settings.max_payload_size,
                    max_depth=self.settings.max_payload_depth,
                )
                parsed = parse_layout_payload(decoded)
                result = self.synthesizer.synthesize_with_report(parsed.matches)

                page = elements_to_page_model(
                    result.elements,
                    title=validated.title or _default_title(parsed.template),
                    description=validated.description or "",
                    template=parsed.template,
                    canvas_width=self.synthesizer.config.canvas_width,
                    columns=self.settings.page_columns,
                )

            logger.info(
                "layout_request_complete",
                request_id=request_id,
                blocks=len(page.blocks),
                warnings=len(result.warnings),
                skipped=len(parsed.skipped),
            )
            return LayoutResponse(
                request_id=request_id,
                page=page,
                elements=result.elements,
                warnings=result.warnings,
                skipped=[_skipped_dict(entry) for entry in parsed.skipped],
                template=parsed.template,
            )

        except ValidationError as e:
            metrics_collector.record_synthesis("validation_error", time.time() - start_time)
            logger.error("validation", request_id=request_id, error=str(e))
            raise
        except PayloadParseError as e:
            metrics_collector.record_synthesis("parse_error", time.time() - start_time)
            logger.error("payload", request_id=request_id, error=str(e))
            raise
        except Exception as e:
            metrics_collector.record_synthesis("error", time.time() - start_time)
            metrics_collector.record_error("synthesis_error", "layout_handler")
            logger.error("synthesis", request_id=request_id, error=str(e))
            raise

    def render(self, page: dict[str, Any] | PageModel, parallel: bool = False) -> RenderResult:
        """Render a page model (hand-authored or synthesized)."""
        raw = page.model_dump(by_alias=True) if isinstance(page, PageModel) else page
        try:
            validated = RenderRequest(page=raw, parallel=parallel)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid render request: {e.error_count()} error(s)") from e

        host = self.host
        if validated.parallel and host.max_workers == 1:
            host = RenderHost(self.host.registry, max_workers=max(2, self.settings.render_workers))

        with LogContext(request_id=new_request_id()):
            return host.render(validated.page)

    def generate_page(self, payload: str, title: str | None = None) -> tuple[LayoutResponse, RenderResult]:
        """Synthesize a payload and render the resulting page in one go."""
        layout = self.synthesize(payload, title=title)
        return layout, self.host.render(layout.page)


def _default_title(template: str | None) -> str:
    return f"Page from {template}" if template else "Generated page"


def _skipped_dict(entry: SkippedEntry) -> dict[str, Any]:
    return {"index": entry.index, "reason": entry.reason, "section": entry.section}
