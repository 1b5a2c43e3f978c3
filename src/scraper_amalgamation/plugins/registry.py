"""Named class registries, and the source registry built on top of them.

:class:`PluginRegistry` maps names to classes that subclass a common base.
:class:`SourceRegistry` specialises it for :class:`DataItemSource` types,
keyed by each type's stable ``type_identifier``, and adds :meth:`resolve`,
which turns a persisted identifier back into a fresh instance.

Example
-------
>>> registry = create_default_registry(load_entrypoints=False)
>>> source = registry.resolve(DEFAULT_SOURCE_IDENTIFIER)
>>> source.disabled
False
"""
from __future__ import annotations

import importlib.metadata
import logging
from typing import Callable, Generic, TypeVar

from scraper_amalgamation.errors import UnresolvableIdentifierError
from scraper_amalgamation.sources.base import (
    DEFAULT_SOURCE_IDENTIFIER,
    DataItemSource,
    DefaultDataItemSource,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

SOURCE_ENTRY_POINT_GROUP: str = "scraper_amalgamation.sources"


class PluginNotFoundError(KeyError):
    """Raised when a plugin name is not present in a registry."""

    def __init__(self, plugin_name: str, registry_name: str) -> None:
        self.plugin_name = plugin_name
        self.registry_name = registry_name
        super().__init__(f"Plugin {plugin_name!r} not found in registry {registry_name!r}")


class PluginAlreadyRegisteredError(ValueError):
    """Raised when a plugin name is registered twice in one registry."""

    def __init__(self, plugin_name: str, registry_name: str) -> None:
        self.plugin_name = plugin_name
        self.registry_name = registry_name
        super().__init__(
            f"Plugin {plugin_name!r} is already registered in registry {registry_name!r}"
        )


class PluginRegistry(Generic[T]):
    """A named registry of classes deriving from ``base_class``.

    Parameters
    ----------
    base_class:
        Every registered class must be a subclass of this type.
    registry_name:
        Human-readable name used in errors and logs.
    """

    def __init__(self, base_class: type[T], registry_name: str) -> None:
        self._base_class = base_class
        self._registry_name = registry_name
        self._plugins: dict[str, type[T]] = {}

    @property
    def registry_name(self) -> str:
        return self._registry_name

    def register(self, name: str) -> Callable[[type[T]], type[T]]:
        """Return a class decorator registering the class under ``name``."""

        def decorator(cls: type[T]) -> type[T]:
            self.register_class(name, cls)
            return cls

        return decorator

    def register_class(self, name: str, cls: type[T]) -> None:
        """Register ``cls`` under ``name``.

        Raises
        ------
        TypeError
            If ``cls`` is not a subclass of the registry's base class.
        PluginAlreadyRegisteredError
            If ``name`` is already taken.
        """
        if not (isinstance(cls, type) and issubclass(cls, self._base_class)):
            raise TypeError(
                f"{cls!r} is not a subclass of {self._base_class.__name__}; "
                f"cannot register it in {self._registry_name!r}"
            )
        if name in self._plugins:
            raise PluginAlreadyRegisteredError(name, self._registry_name)
        self._plugins[name] = cls
        logger.debug("Registered %s as %r in %s", cls.__name__, name, self._registry_name)

    def deregister(self, name: str) -> None:
        if name not in self._plugins:
            raise PluginNotFoundError(name, self._registry_name)
        del self._plugins[name]

    def get(self, name: str) -> type[T]:
        try:
            return self._plugins[name]
        except KeyError:
            raise PluginNotFoundError(name, self._registry_name) from None

    def list_plugins(self) -> list[str]:
        """Return the registered names in alphabetical order."""
        return sorted(self._plugins)

    def load_entrypoints(self, group: str) -> None:
        """Register every class advertised under the entry-point ``group``.

        Names that are already registered are left alone.  Entry points that
        fail to import, or that do not point at a suitable class, are logged
        and skipped.
        """
        for entry_point in importlib.metadata.entry_points(group=group):
            if entry_point.name in self._plugins:
                logger.debug(
                    "Entry point %r already registered in %s; skipping",
                    entry_point.name,
                    self._registry_name,
                )
                continue
            try:
                cls = entry_point.load()
            except Exception:
                logger.warning(
                    "Failed to load entry point %r from group %r",
                    entry_point.name,
                    group,
                    exc_info=True,
                )
                continue
            try:
                self.register_class(entry_point.name, cls)
            except (TypeError, PluginAlreadyRegisteredError) as exc:
                logger.warning("Skipping entry point %r: %s", entry_point.name, exc)

    def __contains__(self, name: object) -> bool:
        return name in self._plugins

    def __len__(self) -> int:
        return len(self._plugins)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(name={self._registry_name!r}, "
            f"base={self._base_class.__name__}, plugins={self.list_plugins()!r})"
        )


class SourceRegistry(PluginRegistry[DataItemSource]):
    """Registry of source types keyed by their ``type_identifier``.

    The default source is registered on construction and stays registered
    for the registry's whole lifetime, so its identifier always resolves.
    """

    def __init__(self, registry_name: str = "sources") -> None:
        super().__init__(DataItemSource, registry_name)
        self.register_source(DefaultDataItemSource)

    def register_source(self, cls: type[DataItemSource]) -> type[DataItemSource]:
        """Register ``cls`` under its own ``type_identifier``.

        Returns the class unchanged so this can be used as a decorator.
        """
        if not (isinstance(cls, type) and issubclass(cls, DataItemSource)):
            raise TypeError(f"{cls!r} is not a DataItemSource subclass")
        self.register_class(cls.type_identifier, cls)
        return cls

    def deregister(self, name: str) -> None:
        if name == DEFAULT_SOURCE_IDENTIFIER:
            raise ValueError("The default source cannot be deregistered")
        super().deregister(name)

    def load_entrypoints(self, group: str = SOURCE_ENTRY_POINT_GROUP) -> None:
        """Register sources advertised under ``group``.

        Sources are stored under their ``type_identifier`` rather than the
        entry-point name, since that is what the preferences document holds.
        """
        for entry_point in importlib.metadata.entry_points(group=group):
            try:
                cls = entry_point.load()
            except Exception:
                logger.warning(
                    "Failed to load source entry point %r from group %r",
                    entry_point.name,
                    group,
                    exc_info=True,
                )
                continue
            if not (isinstance(cls, type) and issubclass(cls, DataItemSource)):
                logger.warning(
                    "Skipping entry point %r: %r is not a DataItemSource subclass",
                    entry_point.name,
                    cls,
                )
                continue
            if cls.type_identifier in self:
                logger.debug("Source %r already registered; skipping", cls.type_identifier)
                continue
            self.register_source(cls)

    def resolve(self, identifier: str) -> DataItemSource:
        """Return a new, enabled instance of the source named ``identifier``.

        Raises
        ------
        UnresolvableIdentifierError
            If the identifier is unknown or the type cannot be constructed.
        """
        try:
            cls = self.get(identifier)
        except PluginNotFoundError as exc:
            raise UnresolvableIdentifierError(
                identifier, self.registry_name, "unknown source type"
            ) from exc
        try:
            return cls()
        except Exception as exc:
            raise UnresolvableIdentifierError(
                identifier, self.registry_name, f"construction failed: {exc}"
            ) from exc


def create_default_registry(
    load_entrypoints: bool = True,
    group: str = SOURCE_ENTRY_POINT_GROUP,
) -> SourceRegistry:
    """Build the registry used at application startup.

    Parameters
    ----------
    load_entrypoints:
        When ``True``, sources installed by other distributions under
        ``group`` are registered as well.
    group:
        Entry-point group to scan.
    """
    registry = SourceRegistry()
    if load_entrypoints:
        registry.load_entrypoints(group)
    logger.info("Source registry ready with %d source type(s)", len(registry))
    return registry
