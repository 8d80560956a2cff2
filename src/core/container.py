"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from catalog import ElementCatalog
from synthesis import LayoutConfig, LayoutSynthesizer
from page_engine import ComponentRegistry, RenderHost, create_default_registry
from handlers.layout import LayoutHandler

from .config import Settings, get_settings


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        """Provide application settings."""
        return self.settings

    @singleton
    @provider
    def provide_catalog(self) -> ElementCatalog:
        """Provide element catalog singleton."""
        return ElementCatalog()

    @singleton
    @provider
    def provide_layout_config(self, settings: Settings) -> LayoutConfig:
        """Provide synthesizer geometry."""
        return LayoutConfig.from_settings(settings)

    @singleton
    @provider
    def provide_synthesizer(self, catalog: ElementCatalog, config: LayoutConfig) -> LayoutSynthesizer:
        """Provide layout synthesizer."""
        return LayoutSynthesizer(catalog, config)

    @singleton
    @provider
    def provide_registry(self) -> ComponentRegistry:
        """Provide component registry with built-in components."""
        return create_default_registry()

    @singleton
    @provider
    def provide_render_host(self, registry: ComponentRegistry, settings: Settings) -> RenderHost:
        """Provide render host."""
        return RenderHost(registry, max_workers=settings.render_workers)

    @singleton
    @provider
    def provide_layout_handler(
        self, synthesizer: LayoutSynthesizer, host: RenderHost, settings: Settings
    ) -> LayoutHandler:
        """Provide layout handler with all dependencies."""
        return LayoutHandler(synthesizer, host, settings)


def create_container(settings: Settings | None = None) -> Injector:
    """Create configured injector."""
    return Injector([CoreModule(settings)])
