"""
Content Synthesis
Derives the display text of an element from its match
"""

from typing import Any, Mapping

# Property keys checked in order before falling back to the term
CONTENT_KEYS = ("text", "title", "content")

# Exact (case-sensitive) source term to default phrase
TERM_PHRASES: dict[str, str] = {
    "заголовок": "Page heading",
    "текст": "Describe your product or service",
    "кнопка": "Learn more",
    "форма": "Contact form",
    "карточка": "Product card",
    "изображение": "Image",
    "поиск": "Search products",
    "навигация": "Home | About | Services | Contact",
    "подвал": "© Your company. All rights reserved.",
    "heading": "Page heading",
    "text": "Describe your product or service",
    "button": "Learn more",
    "form": "Contact form",
    "card": "Product card",
    "image": "Image",
    "search": "Search products",
    "navigation": "Home | About | Services | Contact",
    "footer": "© Your company. All rights reserved.",
}


def synthesize_content(properties: Mapping[str, Any], source_term: str) -> str:
    """
    Pick the display text for an element.

    ``text``, ``title`` and ``content`` properties win in that order, then the
    phrase for the source term, then the term itself. Only ``None`` and empty
    strings are skipped; ``0`` or ``False`` count as explicit content.

    Args:
        properties: Match properties
        source_term: Term the upstream matcher recognised

    Returns:
        Display text (possibly empty when the term is empty)
    """
    for key in CONTENT_KEYS:
        value = properties.get(key)
        if value is not None and value != "":
            return value if isinstance(value, str) else str(value)

    return TERM_PHRASES.get(source_term, source_term)
