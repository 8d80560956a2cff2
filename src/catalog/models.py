"""Catalog data models."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ElementCategory(str, Enum):
    """Element categories for organization and fallback."""

    BASIC = "basic"
    FORMS = "forms"
    NAVIGATION = "navigation"
    MEDIA = "media"
    CONTENT = "content"
    LAYOUT = "layout"
    DATA = "data"
    FEEDBACK = "feedback"


class ElementTemplate(BaseModel):
    """Static visual definition of a component id.

    Loaded once at process start and shared by every match that references
    the same component id; never mutated.
    """

    model_config = ConfigDict(frozen=True)

    component_id: str = Field(..., min_length=1, description="Catalog key (e.g. ui.hero)")
    visual_kind: str = Field(..., min_length=1, description="Visual element kind (hero, card, ...)")
    category: ElementCategory
    name: str = ""
    description: str = ""
    icon: str = ""
    default_width: int = Field(..., gt=0)
    default_height: int = Field(..., gt=0)
    default_content: str = ""
    default_props: dict[str, Any] = Field(default_factory=dict)
    default_style: dict[str, Any] = Field(default_factory=dict)
