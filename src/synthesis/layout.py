"""
Layout Synthesis
Turns matched components into a non-overlapping pixel layout
"""

import time
from typing import Iterable

from catalog import ElementCatalog, ElementTemplate
from core.id import new_element_id
from core.logging_config import get_logger
from monitoring import metrics_collector, trace_operation

from .classifier import bucket_for, classify
from .content import synthesize_content
from .models import (
    BUCKET_ORDER,
    Bucket,
    LayoutConfig,
    MatchedComponent,
    Placement,
    PositionedElement,
    SynthesisResult,
    SynthesisWarning,
    WarningKind,
)

logger = get_logger(__name__)

Resolved = tuple[MatchedComponent, ElementTemplate]


class LayoutSynthesizer:
    """
    Places resolved components on the canvas.

    Header, hero and footer elements stack vertically at full canvas width;
    main content is packed row by row into a fixed column grid. Buckets are
    always laid out header, hero, main, footer. The same input order yields
    the same geometry on every run.
    """

    def __init__(self, catalog: ElementCatalog, config: LayoutConfig | None = None) -> None:
        self.catalog = catalog
        self.config = config or LayoutConfig()

    def synthesize(self, matches: Iterable[MatchedComponent]) -> list[PositionedElement]:
        """Place matches and return only the elements."""
        return self.synthesize_with_report(matches).elements

    def synthesize_with_report(self, matches: Iterable[MatchedComponent]) -> SynthesisResult:
        """
        Place matches and report recoverable problems.

        Unknown component ids are dropped with a CatalogMiss warning;
        elements overflowing their section bounds are shortened with an
        OverflowClamp warning. Never raises for per-element problems.

        Args:
            matches: Upstream matches in input order

        Returns:
            Positioned elements in bucket order plus warnings
        """
        start_time = time.time()
        match_list = list(matches)
        result = SynthesisResult()

        with trace_operation("layout_synthesis", matches=len(match_list)):
            buckets = self._bucket(match_list, result)

            cursor = 0
            for bucket in BUCKET_ORDER:
                items = buckets[bucket]
                if not items:
                    continue
                if bucket == Bucket.MAIN:
                    cursor = self._pack_grid(items, cursor, result)
                else:
                    cursor = self._place_sequential(bucket, items, cursor, result)

            for element in result.elements:
                metrics_collector.record_element_placed(element.section.value)
            for warning in result.warnings:
                metrics_collector.record_synthesis_warning(warning.kind.value)

        metrics_collector.record_synthesis("success", time.time() - start_time)
        logger.info(
            "layout_synthesized",
            matches=len(match_list),
            elements=len(result.elements),
            warnings=len(result.warnings),
            height=cursor,
        )
        return result

    def _bucket(self, matches: list[MatchedComponent], result: SynthesisResult) -> dict[Bucket, list[Resolved]]:
        """Resolve templates and group matches by placement bucket."""
        buckets: dict[Bucket, list[Resolved]] = {bucket: [] for bucket in BUCKET_ORDER}

        for index, match in enumerate(matches):
            template = self.catalog.resolve(match.component_id)
            if template is None:
                logger.warning("catalog_miss", component=match.component_id, index=index)
                result.warnings.append(
                    SynthesisWarning(
                        kind=WarningKind.CATALOG_MISS,
                        component=match.component_id,
                        message=f"Unknown component id: {match.component_id}",
                        index=index,
                    )
                )
                continue

            if classify(template.visual_kind) == Placement.FULL_BLEED:
                bucket = bucket_for(template.visual_kind)
            else:
                bucket = Bucket.MAIN
            buckets[bucket].append((match, template))

        return buckets

    def _place_sequential(
        self, bucket: Bucket, items: list[Resolved], cursor: int, result: SynthesisResult
    ) -> int:
        """Stack elements at full canvas width; return the next free y."""
        for index, (match, template) in enumerate(items):
            height = self._clamp(bucket, match, cursor, template.default_height, result)
            element = self._build(bucket, index, match, template, 0, cursor, self.config.canvas_width, height)
            result.elements.append(element)
            cursor += height + self.config.gap

        return cursor

    def _pack_grid(self, items: list[Resolved], cursor: int, result: SynthesisResult) -> int:
        """Pack elements into grid rows; return the next free y."""
        config = self.config
        right_limit = config.canvas_width - config.margin
        column = 0
        row_height = 0

        for index, (match, template) in enumerate(items):
            width = min(template.default_width, config.column_width)

            if column > 0 and (
                column >= config.columns or config.column_x(column) + width > right_limit
            ):
                cursor += row_height + config.gap
                column = 0
                row_height = 0

            height = self._clamp(Bucket.MAIN, match, cursor, template.default_height, result)
            x = config.column_x(column)
            element = self._build(Bucket.MAIN, index, match, template, x, cursor, width, height)
            result.elements.append(element)

            row_height = max(row_height, height)
            column += 1

        if column > 0:
            cursor += row_height + config.gap
        return cursor

    def _clamp(
        self, bucket: Bucket, match: MatchedComponent, y: int, height: int, result: SynthesisResult
    ) -> int:
        """Shorten an element that would run past its section's bottom; never grow it."""
        bounds = self.config.section_bounds.get(bucket)
        if bounds is None or y + height <= bounds.bottom:
            return height

        clamped = min(height, max(self.config.min_clamped_height, bounds.bottom - y))
        logger.warning(
            "overflow_clamp",
            component=match.component_id,
            bucket=bucket.value,
            height=height,
            clamped=clamped,
        )
        result.warnings.append(
            SynthesisWarning(
                kind=WarningKind.OVERFLOW_CLAMP,
                component=match.component_id,
                message=(
                    f"Height {height} clamped to {clamped} to fit section {bucket.value}"
                    if clamped < height
                    else f"Height {height} overflows section {bucket.value} but is below the clamp minimum"
                ),
            )
        )
        return clamped

    def _build(
        self,
        bucket: Bucket,
        index: int,
        match: MatchedComponent,
        template: ElementTemplate,
        x: int,
        y: int,
        width: int,
        height: int,
    ) -> PositionedElement:
        content = synthesize_content(match.properties, match.source_term) or template.default_content
        return PositionedElement(
            id=new_element_id(match.component_id, bucket.value, index),
            component=match.component_id,
            visual_kind=template.visual_kind,
            category=template.category,
            name=template.name or match.component_id,
            icon=template.icon,
            content=content,
            section=bucket,
            x=x,
            y=y,
            width=width,
            height=height,
            props={**template.default_props, **match.properties},
            style=dict(template.default_style),
            confidence=match.confidence,
            source_term=match.source_term,
        )
