"""
Element Catalog
Visual templates for matched component ids
"""

from .models import ElementCategory, ElementTemplate
from .library import BUILTIN_TEMPLATES, CATEGORY_DEFAULTS
from .catalog import ElementCatalog

__all__ = [
    "ElementCategory",
    "ElementTemplate",
    "ElementCatalog",
    "BUILTIN_TEMPLATES",
    "CATEGORY_DEFAULTS",
]
