#!/usr/bin/env python3
"""Example: Quickstart — scraper-amalgamation

Minimal working example: register a source, set a group's ordering and a
per-field override, save the preferences and load them back.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install scraper-amalgamation
"""
from __future__ import annotations

import tempfile
from pathlib import Path

import scraper_amalgamation as amalg


class Data18Source(amalg.DataItemSource):
    type_identifier = "example.Data18Source"
    display_name = "Data18"


def main() -> None:
    print(f"scraper-amalgamation version: {amalg.__version__}")

    # Step 1: Register the sources the host application knows about
    sources = amalg.create_default_registry(load_entrypoints=False)
    sources.register_source(Data18Source)

    with tempfile.TemporaryDirectory() as base_dir:
        settings = amalg.AmalgamationSettings(Path(base_dir), sources=sources)
        print(f"Preferences found: {settings.load()}")

        # Step 2: Data18 first for every field, default source disabled
        default_source = amalg.DefaultDataItemSource()
        default_source.set_disabled(True)
        group = settings.preferences.get_or_create(amalg.ScraperGroupName.AMERICAN_ADULT_DVD_SCRAPER_GROUP)
        group.set_overall(amalg.OrderingPreference([Data18Source(), default_source]))

        # Step 3: The existing title wins over scraped ones
        group.set_override("title", amalg.OrderingPreference.default())

        # Step 4: Save and load back
        settings.save()
        print(settings.path.read_text(encoding="utf-8"))
        settings.load()
        for field_name in ("title", "plot"):
            ordering = settings.ordering_for(group.group, field_name)
            print(f"{field_name:>6}: {[str(s) for s in ordering.enabled_sources()]}")


if __name__ == "__main__":
    main()
