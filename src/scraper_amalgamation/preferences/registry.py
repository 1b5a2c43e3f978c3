"""Top-level mapping from scraper group to its preferences.

A :class:`PreferenceRegistry` is ordinary mutable state with no locking.
The host application creates it (empty, or from a load), hands it to the
UI and the amalgamation engine, and saves it explicitly.
"""
from __future__ import annotations

from typing import Iterator

from scraper_amalgamation.model.groups import ScraperGroupName
from scraper_amalgamation.preferences.group import GroupPreference
from scraper_amalgamation.preferences.ordering import OrderingPreference


class PreferenceRegistry:
    """Preferences for every configured scraper group."""

    def __init__(self) -> None:
        self._groups: dict[ScraperGroupName, GroupPreference] = {}

    def get(self, group: ScraperGroupName) -> GroupPreference | None:
        return self._groups.get(group)

    def put(self, group: ScraperGroupName, preference: GroupPreference) -> None:
        """Store ``preference`` for ``group``, replacing any previous entry."""
        group = ScraperGroupName(group)
        if preference.group is not group:
            raise ValueError(
                f"Preference for {preference.group.value} cannot be stored under {group.value}"
            )
        self._groups[group] = preference

    def get_or_create(self, group: ScraperGroupName) -> GroupPreference:
        """Return the preference for ``group``, creating a default one on first use."""
        group = ScraperGroupName(group)
        preference = self._groups.get(group)
        if preference is None:
            preference = GroupPreference(group)
            self._groups[group] = preference
        return preference

    def remove(self, group: ScraperGroupName) -> None:
        self._groups.pop(group, None)

    def ordering_for(self, group: ScraperGroupName, field_name: str) -> OrderingPreference | None:
        """Return the effective ordering for one field, or ``None`` if the group is unset."""
        preference = self._groups.get(group)
        if preference is None:
            return None
        return preference.ordering_for_field(field_name)

    def items(self) -> list[tuple[ScraperGroupName, GroupPreference]]:
        """Entries in group declaration order."""
        return [(group, self._groups[group]) for group in ScraperGroupName if group in self._groups]

    def __contains__(self, group: object) -> bool:
        return group in self._groups

    def __len__(self) -> int:
        return len(self._groups)

    def __iter__(self) -> Iterator[ScraperGroupName]:
        return iter([group for group, _ in self.items()])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PreferenceRegistry):
            return NotImplemented
        return self._groups == other._groups

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PreferenceRegistry(groups={[group.value for group in self]!r})"
