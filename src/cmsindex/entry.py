"""Reading values out of a loaded entry."""

from typing import Any

from .consts import SLUG_PROPERTY
from .models import Entry
from .utils import flatten


def get_property_value(entry: Entry, locale: str, key: str) -> Any:
    """Get an entry's value for a field in one locale.

    Args:
        entry: Entry to read
        locale: Locale code, or ``"default"`` for a collection without i18n
        key: Field name or key path, e.g. ``author.name``; ``slug`` reads the
            entry slug

    Returns:
        The stored value, or None when the locale or key is missing
    """
    if key == SLUG_PROPERTY and entry.slug is not None:
        return entry.slug

    localized = entry.locales.get(locale)
    if localized is None:
        return None

    if key in localized.content:
        return localized.content[key]

    return flatten(localized.content).get(key)
