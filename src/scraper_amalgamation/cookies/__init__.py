"""Per-host cookie storage shared by scraping sources."""
from __future__ import annotations

from scraper_amalgamation.cookies.jar import CookieJar

__all__ = ["CookieJar"]
