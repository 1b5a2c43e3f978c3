"""Scraper group names and the movie field schema.

Groups form a closed set: a persisted group key that is not a member of
:class:`ScraperGroupName` cannot be loaded.  Field names, on the other hand,
drift between releases, so they are validated against :data:`MOVIE_FIELDS`
only when an override is set programmatically.
"""
from __future__ import annotations

from enum import Enum

# Bump when fields are renamed or removed.
SCHEMA_VERSION: str = "2"

MOVIE_FIELDS: frozenset[str] = frozenset(
    [
        "title",
        "original_title",
        "sort_title",
        "set",
        "year",
        "release_date",
        "rating",
        "trailer",
        "genres",
        "tags",
        "actors",
        "directors",
        "plot",
        "outline",
        "studio",
        "mpaa",
        "runtime",
        "id",
        "posters",
        "fanart",
        "extra_fanart",
    ]
)


class ScraperGroupName(str, Enum):
    """Named groups of related sources that share one precedence order."""

    DEFAULT_SCRAPER_GROUP = "DEFAULT_SCRAPER_GROUP"
    AMERICAN_ADULT_DVD_SCRAPER_GROUP = "AMERICAN_ADULT_DVD_SCRAPER_GROUP"
    JAV_CENSORED_SCRAPER_GROUP = "JAV_CENSORED_SCRAPER_GROUP"
    JAV_UNCENSORED_SCRAPER_GROUP = "JAV_UNCENSORED_SCRAPER_GROUP"

    @classmethod
    def parse(cls, text: str) -> ScraperGroupName:
        """Return the member whose persisted name is ``text``.

        Raises
        ------
        ValueError
            If ``text`` names no member.
        """
        try:
            return cls(text)
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise ValueError(f"Unknown scraper group {text!r}. Valid: {valid}") from None

    @property
    def fields(self) -> frozenset[str]:
        """Field names that may carry an override in this group."""
        return MOVIE_FIELDS

    def __str__(self) -> str:
        return self.value
