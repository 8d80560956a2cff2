"""
Element Catalog
Maps opaque component ids to visual element templates
"""

from typing import Any, Iterable, Iterator, Mapping

from core.logging_config import get_logger

from .library import BUILTIN_TEMPLATES, CATEGORY_DEFAULTS
from .models import ElementCategory, ElementTemplate

logger = get_logger(__name__)

# Short keys accepted by ``extend`` for partial entries
FIELD_ALIASES = {
    "kind": "visual_kind",
    "width": "default_width",
    "height": "default_height",
    "content": "default_content",
    "props": "default_props",
    "style": "default_style",
}


class ElementCatalog:
    """
    Read-only lookup from component id to element template.

    Built once at startup and shared between requests. ``extend`` returns a
    new catalog; an existing instance never changes.
    """

    def __init__(self, templates: Iterable[ElementTemplate] | None = None) -> None:
        source = BUILTIN_TEMPLATES if templates is None else templates
        self._templates: dict[str, ElementTemplate] = {t.component_id: t for t in source}
        logger.debug("catalog_loaded", templates=len(self._templates))

    def resolve(self, component_id: str) -> ElementTemplate | None:
        """
        Resolve a component id to its template.

        Args:
            component_id: Catalog key such as ``ui.hero``

        Returns:
            Template, or None when the id is unknown
        """
        return self._templates.get(component_id)

    def default_for(self, category: ElementCategory | str) -> ElementTemplate:
        """Get the generic template of a category."""
        return CATEGORY_DEFAULTS[ElementCategory(category)]

    def extend(self, entries: Mapping[str, ElementTemplate | Mapping[str, Any]]) -> "ElementCatalog":
        """
        Create a new catalog with additional or replaced entries.

        Partial entries are completed from their category's default template,
        e.g. ``{"ui.banner": {"category": "media", "width": 320}}``.

        Args:
            entries: Component id to template or partial template fields

        Returns:
            New catalog; this one is left untouched
        """
        merged = dict(self._templates)
        for component_id, entry in entries.items():
            if isinstance(entry, ElementTemplate):
                template = entry
            else:
                template = self._complete(component_id, entry)
            merged[component_id] = template

        logger.info("catalog_extended", added=len(entries), total=len(merged))
        return ElementCatalog(merged.values())

    def _complete(self, component_id: str, partial: Mapping[str, Any]) -> ElementTemplate:
        """Fill missing fields of a partial entry from its category default."""
        fields = {FIELD_ALIASES.get(key, key): value for key, value in partial.items()}
        category = ElementCategory(fields.get("category", ElementCategory.BASIC))
        base = self.default_for(category).model_dump()
        base.update(fields)
        base["component_id"] = component_id
        base["category"] = category
        return ElementTemplate.model_validate(base)

    def by_category(self, category: ElementCategory | str) -> list[ElementTemplate]:
        """List templates of one category, in catalog order."""
        wanted = ElementCategory(category)
        return [t for t in self._templates.values() if t.category == wanted]

    def search(self, query: str) -> list[ElementTemplate]:
        """Case-insensitive substring search over name, description and kind."""
        needle = query.lower().strip()
        if not needle:
            return []
        return [
            t for t in self._templates.values()
            if needle in t.name.lower()
            or needle in t.description.lower()
            or needle in t.visual_kind.lower()
        ]

    def ids(self) -> list[str]:
        """All known component ids."""
        return list(self._templates)

    def __contains__(self, component_id: object) -> bool:
        return component_id in self._templates

    def __len__(self) -> int:
        return len(self._templates)

    def __iter__(self) -> Iterator[ElementTemplate]:
        return iter(self._templates.values())
