"""Tests for OrderingPreference, GroupPreference and PreferenceRegistry."""
from __future__ import annotations

import pytest

from scraper_amalgamation.errors import UnknownFieldError
from scraper_amalgamation.model.groups import ScraperGroupName
from scraper_amalgamation.preferences.group import GroupPreference
from scraper_amalgamation.preferences.ordering import OrderingPreference
from scraper_amalgamation.preferences.registry import PreferenceRegistry
from scraper_amalgamation.sources.base import (
    DEFAULT_SOURCE_IDENTIFIER,
    DataItemSource,
    DefaultDataItemSource,
)

DEFAULT_GROUP = ScraperGroupName.DEFAULT_SCRAPER_GROUP
DVD_GROUP = ScraperGroupName.AMERICAN_ADULT_DVD_SCRAPER_GROUP


class SourceA(DataItemSource):
    type_identifier = "A"


class SourceB(DataItemSource):
    type_identifier = "B"


class SourceC(DataItemSource):
    type_identifier = "C"


def _ordering(*identifiers: str) -> OrderingPreference:
    classes = {"A": SourceA, "B": SourceB, "C": SourceC}
    return OrderingPreference([classes[i]() for i in identifiers])


# ---------------------------------------------------------------------------
# OrderingPreference
# ---------------------------------------------------------------------------


class TestOrderingPreference:
    def test_default_is_single_enabled_default_source(self) -> None:
        ordering = OrderingPreference.default()
        assert len(ordering) == 1
        assert isinstance(ordering[0], DefaultDataItemSource)
        assert ordering.is_disabled(0) is False

    def test_default_instances_not_shared(self) -> None:
        assert OrderingPreference.default()[0] is not OrderingPreference.default()[0]

    def test_empty_ordering_allowed_in_memory(self) -> None:
        ordering = OrderingPreference([])
        assert ordering.is_empty()
        assert len(ordering) == 0

    def test_none_sources_rejected(self) -> None:
        with pytest.raises(TypeError):
            OrderingPreference(None)  # type: ignore[arg-type]

    def test_order_preserved(self) -> None:
        assert _ordering("C", "A", "B").identifiers() == ["C", "A", "B"]

    def test_order_is_a_copy(self) -> None:
        ordering = _ordering("A", "B")
        ordering.order.clear()
        assert len(ordering) == 2

    def test_set_disabled_by_position(self) -> None:
        ordering = _ordering("A", "B")
        ordering.set_disabled(1, True)
        assert ordering.is_disabled(1) is True
        assert ordering.is_disabled(0) is False

    def test_set_disabled_bad_position_raises(self) -> None:
        with pytest.raises(IndexError):
            _ordering("A").set_disabled(3, True)

    def test_enabled_sources_skip_disabled(self) -> None:
        ordering = _ordering("A", "B", "C")
        ordering.set_disabled(1, True)
        assert [s.type_identifier for s in ordering.enabled_sources()] == ["A", "C"]

    def test_move(self) -> None:
        ordering = _ordering("A", "B", "C")
        ordering.move(2, 0)
        assert ordering.identifiers() == ["C", "A", "B"]

    def test_move_out_of_range_raises(self) -> None:
        with pytest.raises(IndexError):
            _ordering("A", "B").move(0, 5)

    def test_equality_includes_flags(self) -> None:
        first = _ordering("A", "B")
        second = _ordering("A", "B")
        assert first == second
        second.set_disabled(0, True)
        assert first != second

    def test_repr_marks_disabled(self) -> None:
        ordering = _ordering("A")
        ordering.set_disabled(0, True)
        assert "A (disabled)" in repr(ordering)


# ---------------------------------------------------------------------------
# GroupPreference
# ---------------------------------------------------------------------------


class TestGroupPreference:
    def test_overall_defaults(self) -> None:
        pref = GroupPreference(DEFAULT_GROUP)
        assert pref.get_overall() == OrderingPreference.default()
        assert pref.get_overall()[0].type_identifier == DEFAULT_SOURCE_IDENTIFIER

    def test_override_absent_by_default(self) -> None:
        assert GroupPreference(DEFAULT_GROUP).get_override("title") is None

    def test_set_override_known_field(self) -> None:
        pref = GroupPreference(DEFAULT_GROUP, _ordering("A"))
        override = _ordering("B", "A")
        pref.set_override("title", override)
        assert pref.get_override("title") is override
        assert pref.ordering_for_field("title") is override
        assert pref.ordering_for_field("plot") is pref.overall

    def test_set_override_unknown_field_raises(self) -> None:
        pref = GroupPreference(DEFAULT_GROUP)
        with pytest.raises(UnknownFieldError) as exc_info:
            pref.set_override("no_such_field", _ordering("A"))
        assert exc_info.value.field_name == "no_such_field"
        assert exc_info.value.group == "DEFAULT_SCRAPER_GROUP"
        assert pref.custom_orderings == {}

    def test_remove_override(self) -> None:
        pref = GroupPreference(DEFAULT_GROUP)
        pref.set_override("title", _ordering("A"))
        pref.remove_override("title")
        pref.remove_override("title")
        assert pref.get_override("title") is None

    def test_custom_orderings_read_only(self) -> None:
        pref = GroupPreference(DEFAULT_GROUP)
        pref.set_override("title", _ordering("A"))
        with pytest.raises(TypeError):
            pref.custom_orderings["plot"] = _ordering("B")  # type: ignore[index]

    def test_set_overall(self) -> None:
        pref = GroupPreference(DEFAULT_GROUP)
        pref.set_overall(_ordering("A", "B"))
        assert pref.overall.identifiers() == ["A", "B"]

    def test_set_overall_none_rejected(self) -> None:
        with pytest.raises(TypeError):
            GroupPreference(DEFAULT_GROUP).set_overall(None)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# PreferenceRegistry
# ---------------------------------------------------------------------------


class TestPreferenceRegistry:
    def test_empty(self) -> None:
        registry = PreferenceRegistry()
        assert len(registry) == 0
        assert registry.get(DEFAULT_GROUP) is None
        assert registry.ordering_for(DEFAULT_GROUP, "title") is None

    def test_put_and_get(self) -> None:
        registry = PreferenceRegistry()
        pref = GroupPreference(DVD_GROUP)
        registry.put(DVD_GROUP, pref)
        assert registry.get(DVD_GROUP) is pref
        assert DVD_GROUP in registry

    def test_put_replaces(self) -> None:
        registry = PreferenceRegistry()
        registry.put(DVD_GROUP, GroupPreference(DVD_GROUP))
        replacement = GroupPreference(DVD_GROUP, _ordering("A"))
        registry.put(DVD_GROUP, replacement)
        assert len(registry) == 1
        assert registry.get(DVD_GROUP) is replacement

    def test_put_mismatched_group_raises(self) -> None:
        with pytest.raises(ValueError):
            PreferenceRegistry().put(DVD_GROUP, GroupPreference(DEFAULT_GROUP))

    def test_put_accepts_group_name_string(self) -> None:
        registry = PreferenceRegistry()
        pref = GroupPreference(DEFAULT_GROUP)
        registry.put("DEFAULT_SCRAPER_GROUP", pref)  # type: ignore[arg-type]
        assert registry.get(DEFAULT_GROUP) is pref
        assert list(registry) == [DEFAULT_GROUP]

    def test_put_unknown_group_string_raises(self) -> None:
        with pytest.raises(ValueError):
            PreferenceRegistry().put("NOT_A_GROUP", GroupPreference(DEFAULT_GROUP))  # type: ignore[arg-type]

    def test_get_or_create_accepts_group_name_string(self) -> None:
        registry = PreferenceRegistry()
        created = registry.get_or_create("JAV_CENSORED_SCRAPER_GROUP")  # type: ignore[arg-type]
        assert created.group is ScraperGroupName.JAV_CENSORED_SCRAPER_GROUP
        assert registry.get_or_create(ScraperGroupName.JAV_CENSORED_SCRAPER_GROUP) is created

    def test_get_or_create(self) -> None:
        registry = PreferenceRegistry()
        created = registry.get_or_create(DEFAULT_GROUP)
        assert registry.get_or_create(DEFAULT_GROUP) is created
        assert created.overall == OrderingPreference.default()

    def test_remove(self) -> None:
        registry = PreferenceRegistry()
        registry.get_or_create(DEFAULT_GROUP)
        registry.remove(DEFAULT_GROUP)
        registry.remove(DEFAULT_GROUP)
        assert DEFAULT_GROUP not in registry

    def test_ordering_for_uses_override(self) -> None:
        registry = PreferenceRegistry()
        pref = registry.get_or_create(DEFAULT_GROUP)
        pref.set_override("title", _ordering("C"))
        assert registry.ordering_for(DEFAULT_GROUP, "title").identifiers() == ["C"]  # type: ignore[union-attr]
        assert registry.ordering_for(DEFAULT_GROUP, "plot") is pref.overall

    def test_iteration_in_declaration_order(self) -> None:
        registry = PreferenceRegistry()
        registry.get_or_create(ScraperGroupName.JAV_CENSORED_SCRAPER_GROUP)
        registry.get_or_create(DEFAULT_GROUP)
        assert list(registry) == [DEFAULT_GROUP, ScraperGroupName.JAV_CENSORED_SCRAPER_GROUP]

    def test_equality(self) -> None:
        first = PreferenceRegistry()
        second = PreferenceRegistry()
        first.get_or_create(DEFAULT_GROUP).set_override("title", _ordering("A"))
        assert first != second
        second.get_or_create(DEFAULT_GROUP).set_override("title", _ordering("A"))
        assert first == second
