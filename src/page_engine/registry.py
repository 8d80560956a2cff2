"""
Component Registry
Name-keyed lookup of renderable component constructors
"""

import threading
from types import MappingProxyType
from typing import Any, Callable, Mapping

from core.logging_config import get_logger
from monitoring import metrics_collector

from .components import BUILTIN_COMPONENTS
from .types import Node

logger = get_logger(__name__)

Constructor = Callable[[dict[str, Any]], Node]


class ComponentRegistry:
    """
    Registry of component constructors keyed by name.

    Writes copy the current mapping, apply the change and swap the new
    read-only mapping in under a lock. Readers take the current reference
    without locking, so a concurrent ``resolve`` sees either the old or the
    new mapping, never a partial update.
    """

    def __init__(self, components: Mapping[str, Constructor] | None = None) -> None:
        self._lock = threading.Lock()
        self._components: Mapping[str, Constructor] = MappingProxyType({})
        if components:
            self.register_many(components)

    def register(self, name: str, constructor: Constructor) -> None:
        """
        Register a constructor under a name. Last write wins.

        Args:
            name: Component name used by page model blocks
            constructor: Callable taking block props and returning a Node

        Raises:
            ValueError: Empty name
            TypeError: Constructor is not callable
        """
        self.register_many({name: constructor})

    def register_many(self, components: Mapping[str, Constructor]) -> None:
        """Register several constructors in one atomic swap."""
        for name, constructor in components.items():
            if not isinstance(name, str) or not name.strip():
                raise ValueError(f"Invalid component name: {name!r}")
            if not callable(constructor):
                raise TypeError(f"Constructor for {name} is not callable")

        with self._lock:
            updated = dict(self._components)
            updated.update(components)
            self._components = MappingProxyType(updated)
            size = len(updated)

        metrics_collector.set_registry_size(size)
        logger.debug("components_registered", names=sorted(components), total=size)

    def unregister(self, name: str) -> bool:
        """
        Remove a component.

        Returns:
            True if it was registered
        """
        with self._lock:
            if name not in self._components:
                return False
            updated = dict(self._components)
            del updated[name]
            self._components = MappingProxyType(updated)
            size = len(updated)

        metrics_collector.set_registry_size(size)
        logger.debug("component_unregistered", name=name, total=size)
        return True

    def resolve(self, name: str) -> Constructor | None:
        """Get the constructor for a name, or None."""
        return self._components.get(name)

    def has(self, name: str) -> bool:
        return name in self._components

    def list(self) -> frozenset[str]:
        """Names registered at the time of the call."""
        return frozenset(self._components)

    def snapshot(self) -> Mapping[str, Constructor]:
        """Current read-only mapping."""
        return self._components

    def __contains__(self, name: object) -> bool:
        return name in self._components

    def __len__(self) -> int:
        return len(self._components)


def register_component(registry: ComponentRegistry, name: str, constructor: Constructor) -> None:
    """Register a constructor on an explicit registry."""
    registry.register(name, constructor)


def create_default_registry() -> ComponentRegistry:
    """Create a registry holding the built-in components and upstream aliases."""
    registry = ComponentRegistry(BUILTIN_COMPONENTS)
    logger.info("default_registry_created", components=len(registry))
    return registry
