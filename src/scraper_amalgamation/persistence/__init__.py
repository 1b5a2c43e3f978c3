"""Reading and writing the amalgamation preferences document."""
from __future__ import annotations

from scraper_amalgamation.persistence.adapter import (
    SETTINGS_FILE_NAME,
    PreferencesPersistence,
    settings_path,
)

__all__ = ["SETTINGS_FILE_NAME", "PreferencesPersistence", "settings_path"]
