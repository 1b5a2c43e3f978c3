"""In-memory amalgamation preference model."""
from __future__ import annotations

from scraper_amalgamation.preferences.group import GroupPreference
from scraper_amalgamation.preferences.ordering import OrderingPreference
from scraper_amalgamation.preferences.registry import PreferenceRegistry

__all__ = ["GroupPreference", "OrderingPreference", "PreferenceRegistry"]
