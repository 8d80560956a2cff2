"""ID Generation System.

ULID-based identifiers for the layout service.

- Elements: ``{component}-{bucket}-{index}-{ULID}``. The component, bucket and
  index make the id readable in logs; the ULID is the uniqueness token, so two
  synthesis runs over the same input differ only in that suffix.
- Blocks, pages and requests: ``{prefix}_{ULID}``.
"""

from datetime import datetime
from typing import NewType
from ulid import ULID

# ============================================================================
# Type-Safe ID Wrappers
# ============================================================================

ElementID = NewType("ElementID", str)
"""Positioned element identifier (unique per synthesis run)"""

BlockID = NewType("BlockID", str)
"""Page model block identifier"""

PageID = NewType("PageID", str)
"""Page model identifier"""

RequestID = NewType("RequestID", str)
"""Layout/render request identifier"""

# ============================================================================
# ID Prefixes
# ============================================================================


class Prefix:
    """ID prefix constants."""

    BLOCK = "block"
    PAGE = "page"
    REQUEST = "req"


ULID_LENGTH = 26


# ============================================================================
# ULID Generator
# ============================================================================


class Generator:
    """ULID generator.

    The leading 48 bits are a millisecond timestamp, so ids sort by creation
    time to millisecond precision.
    """

    def generate(self) -> str:
        """Generate a new ULID."""
        return str(ULID())

    def generate_with_prefix(self, prefix: str) -> str:
        """Generate ULID with type prefix."""
        return f"{prefix}_{self.generate()}"

    def timestamp(self, id_str: str) -> int:
        """Extract timestamp (milliseconds) from an id ending in a ULID."""
        try:
            ulid = ULID.from_str(_ulid_part(id_str))
            return int(ulid.timestamp * 1000)
        except (ValueError, IndexError):
            return 0


# Singleton instance
_generator = Generator()


def _ulid_part(id_str: str) -> str:
    """Return the trailing ULID of a prefixed or element id."""
    # Crockford base32 has neither separator.
    cut = max(id_str.rfind("_"), id_str.rfind("-"))
    return id_str[cut + 1:]


# ============================================================================
# Typed ID Generators
# ============================================================================


def new_element_id(component: str, bucket: str, index: int) -> ElementID:
    """Generate a positioned element id.

    Args:
        component: Source component id (e.g. ``ui.card``)
        bucket: Placement bucket the element was packed in
        index: Position of the element within its bucket

    Returns:
        Element id such as ``ui.card-main-0-01J9...``
    """
    return ElementID(f"{component}-{bucket}-{index}-{_generator.generate()}")


def new_block_id() -> BlockID:
    """Generate new block ID."""
    return BlockID(_generator.generate_with_prefix(Prefix.BLOCK))


def new_page_id() -> PageID:
    """Generate new page ID."""
    return PageID(_generator.generate_with_prefix(Prefix.PAGE))


def new_request_id() -> RequestID:
    """Generate new request ID."""
    return RequestID(_generator.generate_with_prefix(Prefix.REQUEST))


# ============================================================================
# Validation and Parsing
# ============================================================================


def is_valid(id_str: str) -> bool:
    """Check if string is (or ends in) a valid ULID.

    Args:
        id_str: ID string to validate

    Returns:
        True if the trailing ULID part parses
    """
    try:
        ulid_part = _ulid_part(id_str)
        if len(ulid_part) != ULID_LENGTH:
            return False
        ULID.from_str(ulid_part)
        return True
    except (ValueError, IndexError):
        return False


def extract_timestamp(id_str: str) -> datetime | None:
    """Extract creation time from an id.

    Args:
        id_str: Prefixed, element or raw ULID string

    Returns:
        Datetime object or None if invalid
    """
    timestamp_ms = _generator.timestamp(id_str)
    return datetime.fromtimestamp(timestamp_ms / 1000.0) if timestamp_ms > 0 else None


def extract_prefix(id_str: str) -> str | None:
    """Extract prefix from prefixed ID.

    Args:
        id_str: Prefixed ID string

    Returns:
        Prefix string or None if no prefix
    """
    parts = id_str.split("_")
    return parts[0] if len(parts) == 2 else None


def strip_token(element_id: str) -> str:
    """Drop the uniqueness token from an element id.

    Two runs over the same input yield equal stripped ids.
    """
    return element_id.rsplit("-", 1)[0]


def generate_raw() -> str:
    """Generate ULID without prefix (for internal use)."""
    return _generator.generate()


def is_block_id(id_str: str) -> bool:
    """Check if ID is a block ID."""
    return id_str.startswith(f"{Prefix.BLOCK}_") and is_valid(id_str)


def is_page_id(id_str: str) -> bool:
    """Check if ID is a page ID."""
    return id_str.startswith(f"{Prefix.PAGE}_") and is_valid(id_str)


__all__ = [
    "ElementID",
    "BlockID",
    "PageID",
    "RequestID",
    "Prefix",
    "new_element_id",
    "new_block_id",
    "new_page_id",
    "new_request_id",
    "is_valid",
    "extract_timestamp",
    "extract_prefix",
    "strip_token",
    "generate_raw",
    "is_block_id",
    "is_page_id",
]
