"""
Layout Synthesis
Matched components to positioned elements
"""

from .models import (
    BUCKET_ORDER,
    Bucket,
    LayoutConfig,
    MatchedComponent,
    Placement,
    PositionedElement,
    Region,
    SectionBounds,
    SynthesisResult,
    SynthesisWarning,
    WarningKind,
)
from .content import synthesize_content
from .classifier import classify, bucket_for
from .layout import LayoutSynthesizer
from .parser import ParsedPayload, SkippedEntry, parse_layout_payload
from .templates import PageTemplate, TemplateLibrary, all_templates, get_template_info
from .editing import move_element, remove_element, resize_element, update_element

__all__ = [
    "BUCKET_ORDER",
    "Bucket",
    "LayoutConfig",
    "MatchedComponent",
    "Placement",
    "PositionedElement",
    "Region",
    "SectionBounds",
    "SynthesisResult",
    "SynthesisWarning",
    "WarningKind",
    "synthesize_content",
    "classify",
    "bucket_for",
    "LayoutSynthesizer",
    "ParsedPayload",
    "SkippedEntry",
    "parse_layout_payload",
    "PageTemplate",
    "TemplateLibrary",
    "all_templates",
    "get_template_info",
    "move_element",
    "remove_element",
    "resize_element",
    "update_element",
]
