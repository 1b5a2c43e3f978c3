"""Convenience API for scraper-amalgamation — 3-line quickstart.

Example
-------
::

    from scraper_amalgamation import AmalgamationSettings
    settings = AmalgamationSettings("~/.moviescraper")
    settings.load()
    print(settings.ordering_for(ScraperGroupName.DEFAULT_SCRAPER_GROUP, "title"))

"""
from __future__ import annotations

import logging
from pathlib import Path

from scraper_amalgamation.config import AmalgamationConfig
from scraper_amalgamation.model.groups import ScraperGroupName
from scraper_amalgamation.persistence.adapter import PreferencesPersistence
from scraper_amalgamation.plugins.registry import SourceRegistry, create_default_registry
from scraper_amalgamation.preferences.ordering import OrderingPreference
from scraper_amalgamation.preferences.registry import PreferenceRegistry

logger = logging.getLogger(__name__)


class AmalgamationSettings:
    """Owns the preferences of one settings directory.

    Wraps a source registry, the persistence adapter and the in-memory
    preference registry.  Nothing is saved implicitly; call :meth:`save`.

    Parameters
    ----------
    base_dir:
        Directory holding the preferences document.  Ignored when
        ``config`` is supplied.
    config:
        Optional full configuration.
    sources:
        Optional pre-built source registry (for testing, or for hosts that
        register their sources by hand).
    """

    def __init__(
        self,
        base_dir: str | Path = ".",
        config: AmalgamationConfig | None = None,
        sources: SourceRegistry | None = None,
    ) -> None:
        if config is None:
            config = AmalgamationConfig(settings_dir=Path(base_dir).expanduser())
        self._config = config
        self._sources = sources or create_default_registry(
            load_entrypoints=config.load_entrypoints,
            group=config.entry_point_group,
        )
        self._persistence = PreferencesPersistence(self._sources)
        self._preferences = PreferenceRegistry()

    @property
    def path(self) -> Path:
        return self._config.settings_path

    @property
    def sources(self) -> SourceRegistry:
        return self._sources

    @property
    def preferences(self) -> PreferenceRegistry:
        return self._preferences

    def load(self) -> bool:
        """Replace the in-memory preferences with the saved ones.

        Returns
        -------
        bool
            ``True`` when a document was found.  When nothing has been saved
            yet the preferences are reset to an empty registry.
        """
        loaded = self._persistence.load(self.path)
        if loaded is None:
            logger.info("No saved amalgamation preferences at %s", self.path)
            self._preferences = PreferenceRegistry()
            return False
        self._preferences = loaded
        return True

    def save(self) -> None:
        self._persistence.save(self._preferences, self.path)

    def ordering_for(self, group: ScraperGroupName, field_name: str) -> OrderingPreference:
        """Return the effective ordering, falling back to the default ordering."""
        ordering = self._preferences.ordering_for(group, field_name)
        return ordering if ordering is not None else OrderingPreference.default()

    def __repr__(self) -> str:
        return f"AmalgamationSettings(path={str(self.path)!r}, groups={len(self._preferences)})"
