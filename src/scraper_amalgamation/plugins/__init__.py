"""Plugin subsystem for scraper-amalgamation.

The registry module provides the decorator-based registration surface.
Third-party sources register via this system using
``importlib.metadata`` entry-points under the
"scraper_amalgamation.sources" group.

Example
-------
Declare a source in pyproject.toml:

.. code-block:: toml

    [project.entry-points."scraper_amalgamation.sources"]
    my_source = "my_package.sources:MySource"
"""
from __future__ import annotations

from scraper_amalgamation.plugins.registry import (
    PluginAlreadyRegisteredError,
    PluginNotFoundError,
    PluginRegistry,
    SourceRegistry,
    create_default_registry,
)

__all__ = [
    "PluginAlreadyRegisteredError",
    "PluginNotFoundError",
    "PluginRegistry",
    "SourceRegistry",
    "create_default_registry",
]
