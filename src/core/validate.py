"""Input validation with strong typing."""

from dataclasses import dataclass
from typing import Any
from returns.result import Result, Success, Failure

from pydantic import BaseModel, Field, field_validator, ConfigDict

from .errors import ValidationError
from .json import JSONParseError, validate_json_size, validate_json_depth


# Validation limits
MAX_PAYLOAD_SIZE = 512 * 1024  # 512KB
MAX_JSON_DEPTH = 20
MAX_TITLE_LENGTH = 200

REQUIRED_BLOCK_FIELDS = ("id", "component")


@dataclass(frozen=True)
class PageModelIssue:
    """One structural problem in a page model (for Result pattern)."""

    message: str
    field: str | None = None
    index: int | None = None
    block_id: str | None = None

    def __str__(self) -> str:
        where = f"block[{self.index}]" if self.index is not None else "page"
        if self.field:
            where = f"{where}.{self.field}"
        return f"{where}: {self.message}"


class RequestValidator(BaseModel):
    """Base validator with strict configuration."""

    model_config = ConfigDict(
        strict=True, validate_assignment=True, extra="forbid", frozen=True  # Immutable by default
    )


class LayoutRequest(RequestValidator):
    """Validated layout synthesis request."""

    payload: str = Field(min_length=1, max_length=MAX_PAYLOAD_SIZE)
    title: str | None = Field(default=None, max_length=MAX_TITLE_LENGTH)
    description: str | None = Field(default=None)

    @field_validator("payload")
    @classmethod
    def validate_payload(cls, v: str) -> str:
        """Ensure payload is non-empty after stripping."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("Payload cannot be empty")
        return stripped


class RenderRequest(RequestValidator):
    """Validated render request."""

    page: dict[str, Any]
    parallel: bool = False


def validate_payload_limits(
    text: str,
    parsed: Any,
    max_size: int = MAX_PAYLOAD_SIZE,
    max_depth: int = MAX_JSON_DEPTH,
) -> None:
    """
    Validate size and nesting depth of an upstream payload.

    Raises:
        ValidationError: If a limit is exceeded
    """
    try:
        validate_json_size(text, max_size, "Layout payload")
        validate_json_depth(parsed, max_depth)
    except JSONParseError as e:
        raise ValidationError(str(e)) from e


def check_page_model(raw: Any) -> list[PageModelIssue]:
    """
    Collect every structural problem of a raw page model.

    A page model must be a mapping with a ``blocks`` list whose entries each
    carry a non-empty string ``id`` and ``component``; block ids are unique
    within the page.

    Args:
        raw: Page model as decoded from JSON

    Returns:
        All issues found (empty when the model is structurally sound)
    """
    if not isinstance(raw, dict):
        return [PageModelIssue(f"expected an object, got {type(raw).__name__}")]

    blocks = raw.get("blocks")
    if blocks is None:
        return [PageModelIssue("missing required field", field="blocks")]
    if not isinstance(blocks, list):
        return [PageModelIssue("must be a list", field="blocks")]

    issues: list[PageModelIssue] = []
    seen_ids: set[str] = set()
    for index, block in enumerate(blocks):
        if not isinstance(block, dict):
            issues.append(PageModelIssue("block must be an object", index=index))
            continue

        block_id = block.get("id")
        for name in REQUIRED_BLOCK_FIELDS:
            value = block.get(name)
            if value is None:
                issues.append(PageModelIssue("missing required field", field=name, index=index,
                                             block_id=block_id if isinstance(block_id, str) else None))
            elif not isinstance(value, str) or not value.strip():
                issues.append(PageModelIssue("must be a non-empty string", field=name, index=index,
                                             block_id=block_id if isinstance(block_id, str) else None))

        if isinstance(block_id, str) and block_id.strip():
            if block_id in seen_ids:
                issues.append(PageModelIssue("duplicate block id", field="id", index=index, block_id=block_id))
            seen_ids.add(block_id)

    return issues


def validate_page_model(raw: Any) -> Result[None, list[PageModelIssue]]:
    """
    Validate page model structure (Result pattern version).

    Args:
        raw: Page model as decoded from JSON

    Returns:
        Success, or Failure carrying every issue found
    """
    issues = check_page_model(raw)
    if issues:
        return Failure(issues)
    return Success(None)
