"""Pytest configuration and fixtures."""

import os

import pytest

from core import configure_logging, create_container
from core.config import Settings
from catalog import ElementCatalog
from synthesis import LayoutConfig, LayoutSynthesizer, MatchedComponent, Region
from page_engine import ComponentRegistry, RenderHost, create_default_registry


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_configure(config):
    """Configure pytest with environment variables."""
    os.environ["LAYOUT_LOG_LEVEL"] = "DEBUG"
    os.environ["LAYOUT_RENDER_WORKERS"] = "1"
    configure_logging(level="WARNING")


# ============================================================================
# Core Fixtures
# ============================================================================

@pytest.fixture
def settings():
    """Test settings (not cached, so env overrides apply)."""
    return Settings()


@pytest.fixture
def di_container(settings):
    """Dependency injection container for testing."""
    return create_container(settings)


# ============================================================================
# Synthesis Fixtures
# ============================================================================

@pytest.fixture
def catalog():
    """Built-in element catalog."""
    return ElementCatalog()


@pytest.fixture
def layout_config():
    """Default layout geometry."""
    return LayoutConfig()


@pytest.fixture
def synthesizer(catalog, layout_config):
    """Layout synthesizer over the built-in catalog."""
    return LayoutSynthesizer(catalog, layout_config)


@pytest.fixture
def make_match():
    """Factory for matched components."""

    def _make(component, region=Region.MAIN, props=None, confidence=0.9, term=""):
        return MatchedComponent(
            component_id=component,
            properties=props or {},
            confidence=confidence,
            source_term=term,
            region=region,
        )

    return _make


# ============================================================================
# Page Engine Fixtures
# ============================================================================

@pytest.fixture
def registry():
    """Fresh registry with the built-in components."""
    return create_default_registry()


@pytest.fixture
def empty_registry():
    """Registry with nothing registered."""
    return ComponentRegistry()


@pytest.fixture
def host(registry):
    """Sequential render host."""
    return RenderHost(registry)


@pytest.fixture
def page_dict():
    """Hand-authored page model in wire format."""
    return {
        "id": "page_test",
        "blocks": [
            {
                "id": "b1",
                "component": "ui.heading",
                "props": {"text": "Welcome", "level": 1},
                "layout": {"colStart": 1, "colSpan": 12, "row": 1},
                "metadata": {"confidence": 0.95, "matchType": "ai-generated"},
            },
            {
                "id": "b2",
                "component": "ui.paragraph",
                "props": {"text": "Hello there"},
                "layout": {"colStart": 1, "colSpan": 6, "row": 2},
            },
            {
                "id": "b3",
                "component": "ui.button",
                "props": {"text": "Go"},
                "layout": {"colStart": 7, "colSpan": 6, "row": 2},
            },
        ],
        "metadata": {"title": "Test page", "description": "Fixture"},
    }


# ============================================================================
# Payload Fixtures
# ============================================================================

@pytest.fixture
def sections_payload():
    """Mapping response with a template and section groups."""
    return {
        "layout": {
            "template": "hero-main-footer",
            "sections": {
                "hero": [
                    {"component": "ui.hero", "props": {"title": "Fresh bakery"}, "confidence": 0.92, "term": "hero"},
                    {"component": "ui.navbar", "props": {}, "confidence": 0.8, "term": "навигация"},
                ],
                "main": [
                    {"component": "ui.text", "props": {}, "confidence": 0.85, "term": "текст"},
                    {"component": "ui.button", "props": {"text": "Order now"}, "confidence": 0.9, "term": "кнопка"},
                    {"component": "ui.form", "props": {}, "confidence": 0.7, "term": "форма"},
                ],
                "footer": [
                    {"component": "ui.footer", "props": {}, "confidence": 0.88, "term": "подвал"},
                ],
            },
            "count": 6,
        },
        "matches": [],
    }
