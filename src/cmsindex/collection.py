"""Collection lookup and collection scoped entry queries."""

import logging
from dataclasses import dataclass
from typing import List, Optional

from .config import Collection, CollectionFilter, FileDefinition
from .consts import DEFAULT_LOCALE_KEY
from .entry import get_property_value
from .i18n import I18nConfig, resolve_collection_i18n
from .models import Entry
from .schema import FieldDefinition
from .state import AppContext

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResolvedCollection:
    """A collection definition together with its resolved i18n configuration.

    ``definition`` is None when no collection matched; every attribute except
    ``i18n`` then reads as None.
    """

    definition: Optional[Collection]
    i18n: I18nConfig

    @property
    def name(self) -> str | None:
        return self.definition.name if self.definition else None

    @property
    def fields(self) -> List[FieldDefinition] | None:
        return self.definition.fields if self.definition else None

    @property
    def files(self) -> List[FileDefinition] | None:
        return self.definition.files if self.definition else None

    @property
    def filter(self) -> CollectionFilter | None:
        return self.definition.filter if self.definition else None


def get_collection(ctx: AppContext, name: str) -> ResolvedCollection:
    """Get a collection by name, first match wins."""
    collection = next((c for c in ctx.config.collections if c.name == name), None)
    if collection is None:
        logger.debug(f"Collection not found: {name}")

    return ResolvedCollection(
        definition=collection,
        i18n=resolve_collection_i18n(ctx.config, collection),
    )


def get_file(ctx: AppContext, collection_name: str, file_name: str) -> Entry | None:
    """Get the entry of a file collection's file."""
    return next(
        (
            entry
            for entry in ctx.all_entries
            if entry.collection_name == collection_name and entry.file_name == file_name
        ),
        None,
    )


def get_entries_by_collection(ctx: AppContext, collection_name: str) -> List[Entry]:
    """Get the entries of a collection, applying the collection filter if any.

    The filter is evaluated against the default locale's content. Entries keep
    their loading order.
    """
    collection = get_collection(ctx, collection_name)
    if collection.definition is None:
        return []

    entry_filter = collection.filter
    locale = collection.i18n.default_locale or DEFAULT_LOCALE_KEY

    return [
        entry
        for entry in ctx.all_entries
        if entry.collection_name == collection_name
        and (
            entry_filter is None
            or get_property_value(entry, locale, entry_filter.field) == entry_filter.value
        )
    ]
