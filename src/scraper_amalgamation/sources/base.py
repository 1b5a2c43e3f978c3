"""Base type for the sources whose values get amalgamated.

A source is any plugin that can supply metadata field values (a site
scraper, a local file reader, ...).  This package only cares about two
things: a stable ``type_identifier`` used to persist the source, and the
per-instance ``disabled`` flag.

Subclasses that do not declare ``type_identifier`` are identified by their
fully qualified class name.

Example
-------
>>> class ExampleSource(DataItemSource):
...     type_identifier = "example"
>>> source = ExampleSource()
>>> source.set_disabled(True)
>>> source.create_instance_of_same_type().disabled
False
"""
from __future__ import annotations

from typing import ClassVar

DEFAULT_SOURCE_IDENTIFIER: str = "scraper_amalgamation.sources.DefaultDataItemSource"


class DataItemSource:
    """A pluggable metadata source that may take part in an ordering.

    Subclasses must be constructible without arguments so that a persisted
    identifier can always be turned back into a default-state instance.
    """

    type_identifier: ClassVar[str] = ""
    display_name: ClassVar[str] = ""

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if not cls.__dict__.get("type_identifier"):
            cls.type_identifier = f"{cls.__module__}.{cls.__qualname__}"
        if not cls.__dict__.get("display_name"):
            cls.display_name = cls.__name__

    def __init__(self) -> None:
        self._disabled: bool = False

    @property
    def disabled(self) -> bool:
        return self._disabled

    @disabled.setter
    def disabled(self, value: bool) -> None:
        self._disabled = bool(value)

    def is_disabled(self) -> bool:
        return self._disabled

    def set_disabled(self, value: bool) -> None:
        self.disabled = value

    def create_instance_of_same_type(self) -> DataItemSource:
        """Return a fresh, enabled instance of this source's concrete type."""
        return type(self)()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataItemSource):
            return NotImplemented
        return (
            self.type_identifier == other.type_identifier
            and self._disabled == other._disabled
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(disabled={self._disabled})"

    def __str__(self) -> str:
        return self.display_name


class DefaultDataItemSource(DataItemSource):
    """Stand-in source used when an ordering would otherwise be empty.

    It represents "whatever value the item already has" and is always
    resolvable.
    """

    type_identifier: ClassVar[str] = DEFAULT_SOURCE_IDENTIFIER
    display_name: ClassVar[str] = "Default"


# Shared prototype.  Orderings always receive copies from
# ``create_instance_of_same_type`` so instances are never shared.
DEFAULT_DATA_ITEM_SOURCE: DefaultDataItemSource = DefaultDataItemSource()
