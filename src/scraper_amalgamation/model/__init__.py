"""Closed group set and the field schema the groups recognise."""
from __future__ import annotations

from scraper_amalgamation.model.groups import MOVIE_FIELDS, SCHEMA_VERSION, ScraperGroupName

__all__ = ["MOVIE_FIELDS", "SCHEMA_VERSION", "ScraperGroupName"]
