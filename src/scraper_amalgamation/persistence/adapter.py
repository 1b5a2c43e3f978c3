"""JSON persistence for amalgamation preferences.

:class:`PreferencesPersistence` converts a :class:`PreferenceRegistry` to
and from the ``AmalgamationSettings.json`` document.  Source identifiers
are resolved through a :class:`SourceRegistry`.

Load is all-or-nothing: an unknown group, an unresolvable source or a
malformed document aborts with :class:`CorruptDocumentError` and no
partial registry.  The single exception is a ``customOrderings`` key that
names a field the group no longer has; that override is dropped so that
documents survive field renames and removals.

Example
-------
>>> persistence = PreferencesPersistence(create_default_registry(load_entrypoints=False))
>>> prefs = persistence.load(settings_path(Path("~/.moviescraper").expanduser()))
>>> prefs is None  # nothing saved yet
True
"""
from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from scraper_amalgamation.errors import (
    CorruptDocumentError,
    UnknownFieldError,
    UnresolvableIdentifierError,
)
from scraper_amalgamation.model.groups import ScraperGroupName
from scraper_amalgamation.persistence.schema import (
    PREFERENCES_DOCUMENT_ADAPTER,
    GroupPreferenceDocument,
    OrderEntryDocument,
    OrderingDocument,
    PreferencesDocument,
)
from scraper_amalgamation.plugins.registry import SourceRegistry
from scraper_amalgamation.preferences.group import GroupPreference
from scraper_amalgamation.preferences.ordering import OrderingPreference
from scraper_amalgamation.preferences.registry import PreferenceRegistry

logger = logging.getLogger(__name__)

SETTINGS_FILE_NAME: str = "AmalgamationSettings.json"

_JSON_INDENT: int = 2


def settings_path(base_dir: str | Path, file_name: str = SETTINGS_FILE_NAME) -> Path:
    """Return the location of the preferences document inside ``base_dir``."""
    return Path(base_dir) / file_name


class PreferencesPersistence:
    """Loads and saves preference registries.

    The adapter holds no state of its own beyond the source registry, so
    one instance can serve any number of independent load/save calls.

    Parameters
    ----------
    sources:
        Registry used to turn persisted identifiers back into sources.
    """

    def __init__(self, sources: SourceRegistry) -> None:
        self._sources = sources

    @property
    def sources(self) -> SourceRegistry:
        return self._sources

    # ------------------------------------------------------------------
    # Load
    # ------------------------------------------------------------------

    def load(self, path: str | Path) -> PreferenceRegistry | None:
        """Load preferences from the document at ``path``.

        Returns
        -------
        PreferenceRegistry | None
            ``None`` when the file does not exist or holds an empty object.

        Raises
        ------
        CorruptDocumentError
            If the document cannot be parsed or references an unknown group
            or an unresolvable source.
        OSError
            For I/O failures other than a missing file.
        """
        path = Path(path)
        try:
            with path.open("r", encoding="utf-8-sig") as fh:
                text = fh.read()
        except FileNotFoundError:
            logger.debug("No amalgamation preferences at %s", path)
            return None
        except UnicodeDecodeError as exc:
            raise CorruptDocumentError(f"Invalid UTF-8: {exc}", str(path)) from exc

        return self.load_from_string(text, document_path=str(path))

    def load_from_string(
        self,
        text: str,
        document_path: str | None = None,
    ) -> PreferenceRegistry | None:
        """Load preferences from JSON text.  See :meth:`load`."""
        if not text.strip():
            return None
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as exc:
            raise CorruptDocumentError(f"Invalid JSON: {exc}", document_path) from exc
        return self.load_from_dict(raw, document_path=document_path)

    def load_from_dict(
        self,
        raw: object,
        document_path: str | None = None,
    ) -> PreferenceRegistry | None:
        """Build a registry from an already-parsed document.

        Parameters
        ----------
        raw:
            The decoded JSON value; ``None`` and ``{}`` mean "nothing saved".
        document_path:
            Optional source identifier used in error messages.
        """
        if raw is None:
            return None
        if not isinstance(raw, dict):
            raise CorruptDocumentError(
                f"Preferences document must be a JSON object, got {type(raw).__name__}",
                document_path,
            )
        if not raw:
            return None

        try:
            document: PreferencesDocument = PREFERENCES_DOCUMENT_ADAPTER.validate_python(raw)
        except ValidationError as exc:
            raise CorruptDocumentError(
                f"Preferences document is malformed: {exc}", document_path
            ) from exc

        registry = PreferenceRegistry()
        for key, group_document in document.items():
            try:
                group = ScraperGroupName.parse(key)
            except ValueError as exc:
                raise CorruptDocumentError(str(exc), document_path) from exc
            registry.put(group, self._group_from_document(group, group_document, document_path))

        logger.info(
            "Loaded amalgamation preferences for %d group(s) from %s",
            len(registry),
            document_path or "<dict>",
        )
        return registry

    def _group_from_document(
        self,
        group: ScraperGroupName,
        document: GroupPreferenceDocument,
        document_path: str | None,
    ) -> GroupPreference:
        if document.scraper_group_name is not None and document.scraper_group_name != group.value:
            logger.warning(
                "Group entry %s declares scraperGroupName %r; using the key",
                group.value,
                document.scraper_group_name,
            )

        preference = GroupPreference(
            group, self._ordering_from_document(document.overall_ordering, document_path)
        )
        for field_name, ordering_document in (document.custom_orderings or {}).items():
            ordering = self._ordering_from_document(ordering_document, document_path)
            try:
                preference.set_override(field_name, ordering)
            except UnknownFieldError:
                logger.info(
                    "Dropping override for unknown field %r in group %s",
                    field_name,
                    group.value,
                )
        return preference

    def _ordering_from_document(
        self,
        document: OrderingDocument | None,
        document_path: str | None,
    ) -> OrderingPreference:
        if document is None or not document.order:
            return OrderingPreference.default()
        sources = []
        for entry in document.order:
            try:
                source = self._sources.resolve(entry.class_name)
            except UnresolvableIdentifierError as exc:
                raise CorruptDocumentError(str(exc), document_path) from exc
            source.set_disabled(entry.disabled)
            sources.append(source)
        return OrderingPreference(sources)

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    def save(self, registry: PreferenceRegistry, path: str | Path) -> None:
        """Write ``registry`` to ``path`` as pretty-printed UTF-8 JSON.

        The target file is truncated and rewritten in place; parent
        directories are created when missing.
        """
        path = Path(path)
        text = self.dumps(registry)
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as fh:
            fh.write(text)
        logger.info(
            "Saved amalgamation preferences for %d group(s) to %s", len(registry), path
        )

    def dumps(self, registry: PreferenceRegistry) -> str:
        return json.dumps(self.to_dict(registry), indent=_JSON_INDENT, ensure_ascii=False) + "\n"

    def to_dict(self, registry: PreferenceRegistry) -> dict[str, object]:
        """Return the JSON-ready document for ``registry``."""
        document: dict[str, object] = {}
        for group, preference in registry.items():
            group_document = GroupPreferenceDocument(
                scraper_group_name=group.value,
                overall_ordering=_ordering_to_document(preference.overall),
                custom_orderings={
                    field_name: _ordering_to_document(ordering)
                    for field_name, ordering in sorted(preference.custom_orderings.items())
                }
                or None,
            )
            document[group.value] = group_document.model_dump(by_alias=True, exclude_none=True)
        return document


def _ordering_to_document(ordering: OrderingPreference) -> OrderingDocument:
    return OrderingDocument(
        order=[
            OrderEntryDocument(class_name=source.type_identifier, disabled=source.disabled)
            for source in ordering
        ]
    )
