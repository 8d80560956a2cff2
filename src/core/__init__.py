"""Core utilities and infrastructure."""

from .config import Settings, get_settings
from .errors import (
    LayoutServiceError,
    ValidationError,
    PayloadParseError,
    LayoutEditError,
    MalformedPageModelError,
)
from .validate import (
    PageModelIssue,
    LayoutRequest,
    RenderRequest,
    check_page_model,
    validate_page_model,
    validate_payload_limits,
)
from .logging_config import configure_logging, configure_from_settings, get_logger, LogContext
from .json import (
    extract_json,
    safe_json_dumps,
    JSONParseError,
    validate_json_size,
    validate_json_depth,
)
from .id import (
    new_element_id,
    new_block_id,
    new_page_id,
    new_request_id,
    is_valid,
    strip_token,
)


def create_container(settings=None):
    """Create dependency injection container (lazy import to avoid circular deps)."""
    from .container import create_container as _create_container

    return _create_container(settings)


__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "LayoutServiceError",
    "ValidationError",
    "PayloadParseError",
    "LayoutEditError",
    "MalformedPageModelError",
    # Validation
    "PageModelIssue",
    "LayoutRequest",
    "RenderRequest",
    "check_page_model",
    "validate_page_model",
    "validate_payload_limits",
    # Logging
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "LogContext",
    # JSON
    "extract_json",
    "safe_json_dumps",
    "JSONParseError",
    "validate_json_size",
    "validate_json_depth",
    # IDs
    "new_element_id",
    "new_block_id",
    "new_page_id",
    "new_request_id",
    "is_valid",
    "strip_token",
    # DI
    "create_container",
]
