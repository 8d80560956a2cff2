"""Synthesis data models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from catalog.models import ElementCategory


class Region(str, Enum):
    """Coarse page region tagged on a match by the upstream pipeline."""

    HEADER = "header"
    HERO = "hero"
    MAIN = "main"
    FOOTER = "footer"


class Bucket(str, Enum):
    """Placement bucket an element is packed into."""

    HEADER = "header"
    HERO = "hero"
    MAIN = "main"
    FOOTER = "footer"


# Buckets are always laid out top to bottom in this order
BUCKET_ORDER: tuple[Bucket, ...] = (Bucket.HEADER, Bucket.HERO, Bucket.MAIN, Bucket.FOOTER)


class Placement(str, Enum):
    """Placement strategy for a visual kind."""

    FULL_BLEED = "full_bleed"
    GRID_PACKED = "grid_packed"


class MatchedComponent(BaseModel):
    """One upstream match: a component id with its confidence and origin."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    component_id: str = Field(..., min_length=1, alias="component")
    properties: dict[str, Any] = Field(default_factory=dict, alias="props")
    confidence: float = Field(default=1.0, ge=0.0, le=1.0)
    source_term: str = Field(default="", alias="term")
    region: Region = Field(default=Region.MAIN, alias="section")
    match_type: str | None = None


class PositionedElement(BaseModel):
    """Resolved element with absolute pixel geometry."""

    model_config = ConfigDict(validate_assignment=True)

    id: str
    component: str
    visual_kind: str
    category: ElementCategory
    name: str = ""
    icon: str = ""
    content: str = ""
    section: Bucket
    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    z_index: int = 1
    opacity: float = Field(default=1.0, ge=0.0, le=1.0)
    locked: bool = False
    visible: bool = True
    props: dict[str, Any] = Field(default_factory=dict)
    style: dict[str, Any] = Field(default_factory=dict)
    confidence: float | None = Field(default=None, ge=0.0, le=1.0)
    source_term: str = ""

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def overlaps(self, other: "PositionedElement") -> bool:
        """Check whether two rectangles intersect (touching edges do not)."""
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )


class WarningKind(str, Enum):
    """Recoverable synthesis problems."""

    CATALOG_MISS = "CatalogMiss"
    OVERFLOW_CLAMP = "OverflowClamp"


class SynthesisWarning(BaseModel):
    """A per-element problem that did not stop synthesis."""

    model_config = ConfigDict(frozen=True)

    kind: WarningKind
    component: str
    message: str
    index: int | None = None
    element_id: str | None = None


class SynthesisResult(BaseModel):
    """Elements plus the warnings recorded while placing them."""

    elements: list[PositionedElement] = Field(default_factory=list)
    warnings: list[SynthesisWarning] = Field(default_factory=list)

    def warnings_of(self, kind: WarningKind) -> list[SynthesisWarning]:
        return [w for w in self.warnings if w.kind == kind]


class SectionBounds(BaseModel):
    """Vertical extent a bucket must stay within."""

    model_config = ConfigDict(frozen=True)

    top: int = Field(default=0, ge=0)
    height: int = Field(..., gt=0)

    @property
    def bottom(self) -> int:
        return self.top + self.height


class LayoutConfig(BaseModel):
    """Geometry used by the layout synthesizer."""

    model_config = ConfigDict(frozen=True)

    canvas_width: int = Field(default=1200, gt=0)
    gap: int = Field(default=20, ge=0)
    columns: int = Field(default=3, gt=0)
    margin: int = Field(default=20, ge=0)
    min_clamped_height: int = Field(default=50, gt=0)
    section_bounds: dict[Bucket, SectionBounds] = Field(default_factory=dict)

    @property
    def total_gutters(self) -> int:
        return 2 * self.margin + (self.columns - 1) * self.gap

    @property
    def column_width(self) -> int:
        return max(1, (self.canvas_width - self.total_gutters) // self.columns)

    def column_x(self, column: int) -> int:
        """Left edge of a grid column."""
        return self.margin + column * (self.column_width + self.gap)

    @classmethod
    def from_settings(cls, settings: Any = None, **overrides: Any) -> "LayoutConfig":
        """
        Build a layout configuration from application settings.

        Args:
            settings: Settings instance (defaults to the cached settings)
            **overrides: Fields to set explicitly, e.g. ``section_bounds``
        """
        if settings is None:
            from core.config import get_settings

            settings = get_settings()

        values: dict[str, Any] = {
            "canvas_width": settings.canvas_width,
            "gap": settings.element_gap,
            "columns": settings.grid_columns,
            "margin": settings.grid_margin,
            "min_clamped_height": settings.min_clamped_height,
        }
        values.update(overrides)
        return cls(**values)
