"""Error taxonomy for amalgamation preference handling.

Three error kinds are distinguished:

- :class:`UnresolvableIdentifierError` — a persisted source identifier no
  longer maps to a constructible source type.
- :class:`CorruptDocumentError` — the preferences document cannot be turned
  into a registry (malformed JSON, unknown group, unresolvable source).
- :class:`UnknownFieldError` — a programmatic override targets a field the
  group does not recognise.

I/O failures are not wrapped; ``OSError`` reaches the caller unchanged.
"""
from __future__ import annotations


class AmalgamationError(Exception):
    """Base class for every error raised by this package."""


class UnresolvableIdentifierError(AmalgamationError, LookupError):
    """Raised when a source type identifier cannot be turned into an instance.

    Attributes
    ----------
    identifier:
        The identifier that failed to resolve.
    registry_name:
        Name of the registry that was consulted.
    """

    def __init__(self, identifier: str, registry_name: str, reason: str | None = None) -> None:
        self.identifier = identifier
        self.registry_name = registry_name
        message = f"Cannot resolve source {identifier!r} in registry {registry_name!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class CorruptDocumentError(AmalgamationError, ValueError):
    """Raised when a preferences document is malformed or unloadable.

    Attributes
    ----------
    document_path:
        The path of the offending document, or ``None`` for in-memory input.
    """

    def __init__(self, message: str, document_path: str | None = None) -> None:
        self.document_path = document_path
        prefix = f"[{document_path}] " if document_path else ""
        super().__init__(f"{prefix}{message}")


class UnknownFieldError(AmalgamationError, KeyError):
    """Raised when an override is set for a field the group does not know."""

    def __init__(self, field_name: str, group: str) -> None:
        self.field_name = field_name
        self.group = group
        super().__init__(f"Unknown field {field_name!r} for scraper group {group!r}")

    def __str__(self) -> str:
        return str(self.args[0])
