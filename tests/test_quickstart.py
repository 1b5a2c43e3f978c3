"""Test that the 3-line quickstart API works for scraper-amalgamation."""
from __future__ import annotations

from pathlib import Path


def test_quickstart_import(tmp_path: Path) -> None:
    from scraper_amalgamation import AmalgamationSettings

    settings = AmalgamationSettings(tmp_path)
    assert settings is not None


def test_quickstart_load_without_saved_preferences(tmp_path: Path) -> None:
    from scraper_amalgamation import AmalgamationSettings

    settings = AmalgamationSettings(tmp_path)
    assert settings.load() is False


def test_quickstart_ordering_for(tmp_path: Path) -> None:
    from scraper_amalgamation import AmalgamationSettings, OrderingPreference, ScraperGroupName

    settings = AmalgamationSettings(tmp_path)
    ordering = settings.ordering_for(ScraperGroupName.DEFAULT_SCRAPER_GROUP, "title")
    assert ordering == OrderingPreference.default()


def test_quickstart_version() -> None:
    import scraper_amalgamation

    assert scraper_amalgamation.__version__ == "0.1.0"
