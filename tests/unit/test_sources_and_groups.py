"""Tests for DataItemSource and ScraperGroupName."""
from __future__ import annotations

import pytest

from scraper_amalgamation.model.groups import MOVIE_FIELDS, ScraperGroupName
from scraper_amalgamation.sources.base import (
    DEFAULT_DATA_ITEM_SOURCE,
    DEFAULT_SOURCE_IDENTIFIER,
    DataItemSource,
    DefaultDataItemSource,
)


class UndeclaredSource(DataItemSource):
    pass


class DeclaredSource(DataItemSource):
    type_identifier = "declared"
    display_name = "Declared Site"


# ---------------------------------------------------------------------------
# DataItemSource
# ---------------------------------------------------------------------------


class TestDataItemSource:
    def test_identifier_defaults_to_qualified_name(self) -> None:
        assert UndeclaredSource.type_identifier == f"{__name__}.UndeclaredSource"

    def test_declared_identifier_kept(self) -> None:
        assert DeclaredSource.type_identifier == "declared"
        assert DeclaredSource.display_name == "Declared Site"

    def test_display_name_defaults_to_class_name(self) -> None:
        assert UndeclaredSource.display_name == "UndeclaredSource"
        assert str(UndeclaredSource()) == "UndeclaredSource"

    def test_new_source_is_enabled(self) -> None:
        assert DeclaredSource().disabled is False

    def test_set_disabled(self) -> None:
        source = DeclaredSource()
        source.set_disabled(True)
        assert source.is_disabled() is True
        assert source.disabled is True

    def test_create_instance_of_same_type_is_fresh(self) -> None:
        source = DeclaredSource()
        source.disabled = True
        copy = source.create_instance_of_same_type()
        assert type(copy) is DeclaredSource
        assert copy is not source
        assert copy.disabled is False

    def test_equality_uses_identifier_and_flag(self) -> None:
        assert DeclaredSource() == DeclaredSource()
        disabled = DeclaredSource()
        disabled.disabled = True
        assert DeclaredSource() != disabled
        assert DeclaredSource() != UndeclaredSource()

    def test_repr_mentions_flag(self) -> None:
        assert "disabled=False" in repr(DeclaredSource())


class TestDefaultSource:
    def test_reserved_identifier(self) -> None:
        assert DefaultDataItemSource.type_identifier == DEFAULT_SOURCE_IDENTIFIER

    def test_prototype_type(self) -> None:
        assert isinstance(DEFAULT_DATA_ITEM_SOURCE, DefaultDataItemSource)


# ---------------------------------------------------------------------------
# ScraperGroupName
# ---------------------------------------------------------------------------


class TestScraperGroupName:
    def test_values_equal_names(self) -> None:
        for member in ScraperGroupName:
            assert member.value == member.name

    def test_parse_known(self) -> None:
        assert ScraperGroupName.parse("DEFAULT_SCRAPER_GROUP") is ScraperGroupName.DEFAULT_SCRAPER_GROUP

    def test_parse_unknown_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown scraper group"):
            ScraperGroupName.parse("NOT_A_GROUP")

    def test_fields_are_movie_fields(self) -> None:
        assert ScraperGroupName.JAV_CENSORED_SCRAPER_GROUP.fields == MOVIE_FIELDS
        assert "title" in MOVIE_FIELDS

    def test_str_is_value(self) -> None:
        assert str(ScraperGroupName.DEFAULT_SCRAPER_GROUP) == "DEFAULT_SCRAPER_GROUP"
