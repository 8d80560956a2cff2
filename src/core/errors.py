"""Exception hierarchy for the layout service.

Per-element and per-block problems are reported as data (synthesis warnings,
render diagnostics). Only the conditions below surface as exceptions.
"""

from typing import Any


class LayoutServiceError(Exception):
    """Base class for layout service errors."""

    pass


class ValidationError(LayoutServiceError):
    """Request validation failed."""

    pass


class PayloadParseError(LayoutServiceError):
    """Upstream match payload could not be parsed."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


class LayoutEditError(LayoutServiceError):
    """An element edit was rejected."""

    def __init__(self, message: str, element_id: str | None = None) -> None:
        super().__init__(message)
        self.element_id = element_id


class MalformedPageModelError(LayoutServiceError):
    """Page model failed structural validation; nothing was rendered.

    Attributes:
        issues: Every problem found, one entry per offending field
    """

    def __init__(self, issues: list[Any]) -> None:
        self.issues = list(issues)
        summary = "; ".join(str(issue) for issue in self.issues[:5])
        more = f" (+{len(self.issues) - 5} more)" if len(self.issues) > 5 else ""
        super().__init__(f"Malformed page model: {summary}{more}")

    @property
    def block_indexes(self) -> list[int]:
        """Indexes of offending blocks, in order, without duplicates."""
        seen: list[int] = []
        for issue in self.issues:
            index = getattr(issue, "index", None)
            if index is not None and index not in seen:
                seen.append(index)
        return seen
