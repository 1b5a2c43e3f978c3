"""scraper-amalgamation — source precedence preferences for metadata amalgamation.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import scraper_amalgamation as amalg
>>> amalg.__version__
'0.1.0'
>>> sources = amalg.create_default_registry(load_entrypoints=False)
>>> persistence = amalg.PreferencesPersistence(sources)
>>> persistence.load_from_dict({}) is None
True
"""
from __future__ import annotations

__version__: str = "0.1.0"

from scraper_amalgamation.convenience import AmalgamationSettings

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
from scraper_amalgamation.errors import (
    AmalgamationError,
    CorruptDocumentError,
    UnknownFieldError,
    UnresolvableIdentifierError,
)

# ---------------------------------------------------------------------------
# Sources and registry
# ---------------------------------------------------------------------------
from scraper_amalgamation.sources.base import (
    DEFAULT_DATA_ITEM_SOURCE,
    DEFAULT_SOURCE_IDENTIFIER,
    DataItemSource,
    DefaultDataItemSource,
)
from scraper_amalgamation.plugins.registry import (
    PluginAlreadyRegisteredError,
    PluginNotFoundError,
    PluginRegistry,
    SourceRegistry,
    create_default_registry,
)

# ---------------------------------------------------------------------------
# Preferences
# ---------------------------------------------------------------------------
from scraper_amalgamation.model.groups import MOVIE_FIELDS, ScraperGroupName
from scraper_amalgamation.preferences.ordering import OrderingPreference
from scraper_amalgamation.preferences.group import GroupPreference
from scraper_amalgamation.preferences.registry import PreferenceRegistry

# ---------------------------------------------------------------------------
# Persistence and configuration
# ---------------------------------------------------------------------------
from scraper_amalgamation.persistence.adapter import (
    SETTINGS_FILE_NAME,
    PreferencesPersistence,
    settings_path,
)
from scraper_amalgamation.config import AmalgamationConfig, ConfigLoader

# ---------------------------------------------------------------------------
# Cookies
# ---------------------------------------------------------------------------
from scraper_amalgamation.cookies.jar import CookieJar

__all__ = [
    "__version__",
    "AmalgamationSettings",
    # Errors
    "AmalgamationError",
    "CorruptDocumentError",
    "UnknownFieldError",
    "UnresolvableIdentifierError",
    # Sources and registry
    "DEFAULT_DATA_ITEM_SOURCE",
    "DEFAULT_SOURCE_IDENTIFIER",
    "DataItemSource",
    "DefaultDataItemSource",
    "PluginAlreadyRegisteredError",
    "PluginNotFoundError",
    "PluginRegistry",
    "SourceRegistry",
    "create_default_registry",
    # Preferences
    "GroupPreference",
    "MOVIE_FIELDS",
    "OrderingPreference",
    "PreferenceRegistry",
    "ScraperGroupName",
    # Persistence and configuration
    "AmalgamationConfig",
    "ConfigLoader",
    "PreferencesPersistence",
    "SETTINGS_FILE_NAME",
    "settings_path",
    # Cookies
    "CookieJar",
]
