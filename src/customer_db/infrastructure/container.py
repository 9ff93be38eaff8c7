"""Component registry used to wire one batch run."""

from __future__ import annotations

from typing import Any, Callable, TypeVar

T = TypeVar("T")

Factory = Callable[["Container"], Any]


class Container:
    """
    Lazily builds and caches the components of a run.

    Each key (usually a class or port Protocol) maps either to a ready
    instance or to a factory called with the container on first resolve().
    A resolved factory result is cached, so the CustomerDatabase and
    anything else asking for the same key share one object.
    """

    def __init__(self) -> None:
        self._factories: dict[Any, Factory] = {}
        self._instances: dict[Any, Any] = {}

    def register_singleton(self, key: Any, instance: Any) -> None:
        """Register a ready-made instance."""
        self._factories.pop(key, None)
        self._instances[key] = instance

    def register_factory(self, key: Any, factory: Factory) -> None:
        """
        Register a factory for lazy construction.

        Any instance already cached under the key is dropped.
        """
        self._instances.pop(key, None)
        self._factories[key] = factory

    def override(self, key: Any, instance: Any) -> None:
        """
        Replace a registration with a fixed instance.

        Must be called before anything depending on the key is resolved;
        components already built keep the object they were given.

        Raises:
            KeyError: If nothing is registered under the key
        """
        if not self.has(key):
            raise KeyError(f"Cannot override unregistered component {key!r}")
        self.register_singleton(key, instance)

    def resolve(self, key: type[T]) -> T:
        """
        Return the component registered under key.

        Raises:
            KeyError: If nothing is registered under the key
        """
        if key in self._instances:
            return self._instances[key]

        factory = self._factories.get(key)
        if factory is None:
            raise KeyError(f"No registration found for {key!r}")

        instance = factory(self)
        self._instances[key] = instance
        return instance

    def has(self, key: Any) -> bool:
        return key in self._instances or key in self._factories

    def clear(self) -> None:
        """Drop every registration and cached instance."""
        self._factories.clear()
        self._instances.clear()
