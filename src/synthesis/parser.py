"""Upstream Payload Parser - matcher output to MatchedComponent list."""

from dataclasses import dataclass, field
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from core.errors import PayloadParseError
from core.json import JSONParseError, extract_json
from core.logging_config import get_logger

from .models import MatchedComponent, Region

logger = get_logger(__name__)

_REGION_VALUES = {region.value for region in Region}


@dataclass
class SkippedEntry:
    """Payload entry that could not be turned into a match."""

    index: int
    reason: str
    section: str | None = None


@dataclass
class ParsedPayload:
    """Result of parsing an upstream payload."""

    matches: list[MatchedComponent] = field(default_factory=list)
    template: str | None = None
    count: int | None = None
    skipped: list[SkippedEntry] = field(default_factory=list)


def parse_layout_payload(payload: str | list[Any] | dict[str, Any]) -> ParsedPayload:
    """
    Parse matcher output into matched components.

    Accepts a bare array of matches or the mapping response
    ``{layout: {template, sections: {hero, main, footer}, count}, matches}``.
    When sections are present, each entry's section becomes its region and
    the flat ``matches`` list is ignored. Malformed entries are skipped and
    reported; they never abort the parse.

    Args:
        payload: JSON text (markdown fences allowed) or decoded JSON

    Returns:
        Parsed matches, template name and skipped entries

    Raises:
        PayloadParseError: If the payload is not JSON or has no known shape
    """
    if isinstance(payload, str):
        try:
            payload = extract_json(payload, repair=True)
        except JSONParseError as e:
            logger.error("payload_parse_failed", error=str(e))
            raise PayloadParseError(f"Invalid payload JSON: {e}", e) from e

    if isinstance(payload, list):
        result = ParsedPayload()
        _collect(payload, None, result)
        logger.info("payload_parsed", shape="array", matches=len(result.matches), skipped=len(result.skipped))
        return result

    if not isinstance(payload, dict):
        raise PayloadParseError(f"Expected array or object, got {type(payload).__name__}")

    layout = payload.get("layout")
    matches = payload.get("matches")
    if not isinstance(layout, dict) and not isinstance(matches, list):
        raise PayloadParseError("Payload has neither 'layout' nor 'matches'")

    result = ParsedPayload()
    sections: Any = None
    if isinstance(layout, dict):
        template = layout.get("template")
        result.template = template if isinstance(template, str) and template else None
        count = layout.get("count")
        result.count = count if isinstance(count, int) else None
        sections = layout.get("sections")

    if isinstance(sections, dict) and any(sections.values()):
        for section, entries in sections.items():
            if not isinstance(entries, list):
                result.skipped.append(SkippedEntry(index=-1, reason="section is not a list", section=section))
                continue
            _collect(entries, section, result)
    elif isinstance(matches, list):
        _collect(matches, None, result)

    logger.info(
        "payload_parsed",
        shape="object",
        template=result.template,
        matches=len(result.matches),
        skipped=len(result.skipped),
    )
    return result


def _collect(entries: list[Any], section: str | None, result: ParsedPayload) -> None:
    """Validate entries and append matches or skip records."""
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            _skip(result, index, f"expected object, got {type(entry).__name__}", section)
            continue

        data = dict(entry)
        if "region" in data and "section" not in data:
            data["section"] = data.pop("region")
        if section is not None:
            data["section"] = section
        # Unknown regions fall back to main
        if data.get("section") not in _REGION_VALUES:
            data.pop("section", None)

        try:
            result.matches.append(MatchedComponent.model_validate(data))
        except PydanticValidationError as e:
            reason = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            _skip(result, index, reason, section)


def _skip(result: ParsedPayload, index: int, reason: str, section: str | None) -> None:
    logger.warning("payload_entry_skipped", index=index, section=section, reason=reason)
    result.skipped.append(SkippedEntry(index=index, reason=reason, section=section))
