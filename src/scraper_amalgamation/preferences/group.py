"""Preferences for one scraper group: an overall order plus field overrides."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from scraper_amalgamation.errors import UnknownFieldError
from scraper_amalgamation.model.groups import ScraperGroupName
from scraper_amalgamation.preferences.ordering import OrderingPreference


class GroupPreference:
    """The overall ordering of a group and its per-field overrides.

    Parameters
    ----------
    group:
        The group these preferences belong to.
    overall:
        Ordering used for every field without an override.  Defaults to
        :meth:`OrderingPreference.default`.

    Example
    -------
    >>> pref = GroupPreference(ScraperGroupName.DEFAULT_SCRAPER_GROUP)
    >>> pref.ordering_for_field("title") is pref.overall
    True
    """

    def __init__(
        self,
        group: ScraperGroupName,
        overall: OrderingPreference | None = None,
    ) -> None:
        self._group = group
        self._overall = overall if overall is not None else OrderingPreference.default()
        self._overrides: dict[str, OrderingPreference] = {}

    @property
    def group(self) -> ScraperGroupName:
        return self._group

    @property
    def overall(self) -> OrderingPreference:
        return self._overall

    def get_overall(self) -> OrderingPreference:
        return self._overall

    def set_overall(self, ordering: OrderingPreference) -> None:
        if ordering is None:
            raise TypeError("The overall ordering cannot be None")
        self._overall = ordering

    def get_override(self, field_name: str) -> OrderingPreference | None:
        """Return the override for ``field_name``, or ``None`` to use the overall order."""
        return self._overrides.get(field_name)

    def set_override(self, field_name: str, ordering: OrderingPreference) -> None:
        """Set the ordering used for ``field_name`` only.

        Raises
        ------
        UnknownFieldError
            If ``field_name`` is not a field of this group.
        """
        if field_name not in self._group.fields:
            raise UnknownFieldError(field_name, self._group.value)
        self._overrides[field_name] = ordering

    def remove_override(self, field_name: str) -> None:
        self._overrides.pop(field_name, None)

    @property
    def custom_orderings(self) -> Mapping[str, OrderingPreference]:
        """Read-only view of the field overrides."""
        return MappingProxyType(self._overrides)

    def ordering_for_field(self, field_name: str) -> OrderingPreference:
        """Return the ordering the amalgamation engine should use for ``field_name``."""
        return self._overrides.get(field_name, self._overall)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GroupPreference):
            return NotImplemented
        return (
            self._group is other._group
            and self._overall == other._overall
            and self._overrides == other._overrides
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return (
            f"GroupPreference(group={self._group.value}, overall={self._overall!r}, "
            f"overrides={sorted(self._overrides)!r})"
        )
