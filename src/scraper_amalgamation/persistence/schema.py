"""Pydantic v2 models describing the persisted preferences document.

The document is a JSON object keyed by scraper group name::

    {
      "DEFAULT_SCRAPER_GROUP": {
        "scraperGroupName": "DEFAULT_SCRAPER_GROUP",
        "overallOrdering": {
          "order": [{"className": "...", "disabled": false}]
        },
        "customOrderings": {
          "title": {"order": [...]}
        }
      }
    }

Unknown keys are allowed at every level so that documents written by a
newer release still load.
"""
from __future__ import annotations

from pydantic import BaseModel, Field, StrictBool, TypeAdapter


class OrderEntryDocument(BaseModel):
    """One ``{className, disabled}`` entry of an ordering."""

    model_config = {"extra": "allow", "populate_by_name": True}

    class_name: str = Field(alias="className", min_length=1)
    disabled: StrictBool = Field(default=False)


class OrderingDocument(BaseModel):
    """A persisted ordering.  A missing or empty ``order`` means "use the default"."""

    model_config = {"extra": "allow"}

    order: list[OrderEntryDocument] | None = Field(default=None)


class GroupPreferenceDocument(BaseModel):
    """The persisted preferences of one scraper group."""

    model_config = {"extra": "allow", "populate_by_name": True}

    scraper_group_name: str | None = Field(default=None, alias="scraperGroupName")
    overall_ordering: OrderingDocument | None = Field(default=None, alias="overallOrdering")
    custom_orderings: dict[str, OrderingDocument | None] | None = Field(
        default=None, alias="customOrderings"
    )


PreferencesDocument = dict[str, GroupPreferenceDocument]

PREFERENCES_DOCUMENT_ADAPTER: TypeAdapter[PreferencesDocument] = TypeAdapter(PreferencesDocument)
