"""
Page Templates
Layout templates reported by the upstream matcher
"""

from pydantic import BaseModel, Field


class PageTemplate(BaseModel):
    """Page template definition.

    ``sections`` is the component list the matcher suggests per region. It is
    advisory: placement is decided by each component's visual kind.
    """

    id: str
    name: str
    priority: int
    triggers: list[str] = Field(default_factory=list)
    sections: dict[str, list[str]] = Field(default_factory=dict)


class TemplateLibrary:
    """Library of page templates"""

    TEMPLATES = {
        "ecommerce-landing": PageTemplate(
            id="ecommerce-landing",
            name="E-commerce Landing",
            priority=1,
            triggers=[
                "online store", "catalog", "products", "cart", "product", "sale", "shop", "ecommerce",
                "интернет-магазин", "каталог", "товары", "корзина", "товар", "продажа", "магазин",
            ],
            sections={
                "hero": ["ui.hero", "ui.search"],
                "main": ["ui.productGrid", "ui.filters", "ui.cta"],
                "footer": ["ui.footer"],
            },
        ),
        "hero-main-footer": PageTemplate(
            id="hero-main-footer",
            name="Hero Main Footer",
            priority=2,
            triggers=[
                "menu", "navigation", "navbar", "header", "site", "page",
                "меню", "навигация", "шапка", "сайт", "страница",
            ],
            sections={
                "hero": ["ui.hero", "ui.navbar"],
                "main": ["ui.text", "ui.button", "ui.form"],
                "footer": ["ui.footer"],
            },
        ),
        "cards-landing": PageTemplate(
            id="cards-landing",
            name="Cards Landing",
            priority=3,
            triggers=[
                "portfolio", "case studies", "our work", "gallery", "projects", "works",
                "портфолио", "кейсы", "наши работы", "галерея", "проекты", "работы",
            ],
            sections={
                "hero": ["ui.hero"],
                "main": ["ui.cards", "ui.text"],
                "footer": ["ui.footer"],
            },
        ),
        "one-column": PageTemplate(
            id="one-column",
            name="One Column",
            priority=4,
            triggers=[
                "landing", "promo", "single page", "sectioned page",
                "лендинг", "промо", "одностраничный", "страница секциями",
            ],
            sections={
                "hero": ["ui.hero"],
                "main": ["ui.section", "ui.text", "ui.button"],
                "footer": ["ui.footer"],
            },
        ),
    }

    @classmethod
    def get(cls, template_id: str) -> PageTemplate | None:
        """Get template by ID"""
        return cls.TEMPLATES.get(template_id)

    @classmethod
    def list_all(cls) -> list[PageTemplate]:
        """List all templates, highest priority (lowest number) first"""
        return sorted(cls.TEMPLATES.values(), key=lambda t: t.priority)

    @classmethod
    def select(cls, text: str) -> PageTemplate | None:
        """
        Pick the highest-priority template whose trigger occurs in text.

        Args:
            text: Free text describing the page

        Returns:
            Matching template or None
        """
        text_lower = text.lower()
        for template in cls.list_all():
            if any(trigger in text_lower for trigger in template.triggers):
                return template
        return None


def get_template_info(template_id: str) -> PageTemplate | None:
    """Look up a page template by id."""
    return TemplateLibrary.get(template_id)


def all_templates() -> list[PageTemplate]:
    """All page templates ordered by priority."""
    return TemplateLibrary.list_all()
