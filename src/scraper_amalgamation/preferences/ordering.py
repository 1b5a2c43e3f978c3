"""A single precedence list of sources.

Position 0 has the highest precedence.  Each source carries its own
``disabled`` flag; disabled sources keep their position so re-enabling one
restores the previous order.

An ordering may be empty in memory.  Substituting the one-item default
ordering is the persistence layer's job on load, not the constructor's.

Example
-------
>>> ordering = OrderingPreference.default()
>>> len(ordering)
1
>>> ordering.is_disabled(0)
False
"""
from __future__ import annotations

from typing import Iterable, Iterator

from scraper_amalgamation.sources.base import DEFAULT_DATA_ITEM_SOURCE, DataItemSource


class OrderingPreference:
    """An ordered sequence of sources, each enabled or disabled.

    Parameters
    ----------
    sources:
        Sources in precedence order.  The ordering owns them from here on.
    """

    def __init__(self, sources: Iterable[DataItemSource]) -> None:
        if sources is None:
            raise TypeError("sources must not be None")
        self._sources: list[DataItemSource] = list(sources)

    @classmethod
    def default(cls) -> OrderingPreference:
        """Return the fallback ordering: one enabled default source."""
        return cls([DEFAULT_DATA_ITEM_SOURCE.create_instance_of_same_type()])

    @property
    def order(self) -> list[DataItemSource]:
        """The sources in precedence order (a shallow copy)."""
        return list(self._sources)

    def identifiers(self) -> list[str]:
        return [source.type_identifier for source in self._sources]

    def enabled_sources(self) -> list[DataItemSource]:
        """Sources that take part in amalgamation, highest precedence first."""
        return [source for source in self._sources if not source.disabled]

    def is_disabled(self, index: int) -> bool:
        return self._sources[index].disabled

    def set_disabled(self, index: int, disabled: bool) -> None:
        self._sources[index].set_disabled(disabled)

    def move(self, index: int, new_index: int) -> None:
        """Move the source at ``index`` so it ends up at ``new_index``."""
        size = len(self._sources)
        if not -size <= index < size or not -size <= new_index < size:
            raise IndexError(f"Position out of range for ordering of length {size}")
        source = self._sources.pop(index)
        self._sources.insert(new_index % size, source)

    def is_empty(self) -> bool:
        return not self._sources

    def __len__(self) -> int:
        return len(self._sources)

    def __iter__(self) -> Iterator[DataItemSource]:
        return iter(list(self._sources))

    def __getitem__(self, index: int) -> DataItemSource:
        return self._sources[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderingPreference):
            return NotImplemented
        return self._sources == other._sources

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        entries = ", ".join(
            f"{source.type_identifier}{' (disabled)' if source.disabled else ''}"
            for source in self._sources
        )
        return f"OrderingPreference([{entries}])"
