"""Amalgamation source plugin types."""
from __future__ import annotations

from scraper_amalgamation.sources.base import (
    DEFAULT_DATA_ITEM_SOURCE,
    DEFAULT_SOURCE_IDENTIFIER,
    DataItemSource,
    DefaultDataItemSource,
)

__all__ = [
    "DEFAULT_DATA_ITEM_SOURCE",
    "DEFAULT_SOURCE_IDENTIFIER",
    "DataItemSource",
    "DefaultDataItemSource",
]
