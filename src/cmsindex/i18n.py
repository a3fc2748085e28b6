"""Effective i18n configuration of a collection.

Site wide settings apply to a collection that opts in with ``i18n = true``;
a collection that carries its own settings object uses those instead.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from .config import Collection, I18nSettings, SiteConfig
from .enums import I18nStructure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class I18nConfig:
    """Resolved i18n configuration.

    ``locales`` is empty and ``default_locale`` is None whenever
    ``has_locales`` is False.
    """

    structure: I18nStructure = I18nStructure.SINGLE_FILE
    has_locales: bool = False
    locales: tuple[str, ...] = field(default_factory=tuple)
    default_locale: Optional[str] = None


def resolve_collection_i18n(
    config: SiteConfig | None, collection: Collection | None
) -> I18nConfig:
    """Derive the i18n configuration for a collection.

    Args:
        config: Site configuration, None when not loaded yet
        collection: Collection definition, None for an unknown collection

    Returns:
        I18nConfig for the collection

    Examples:
        A default locale missing from ``locales`` falls back to the first one::

            locales = ["en", "fr"], default_locale = "de"  ->  default_locale = "en"
    """
    settings: I18nSettings | None = None
    site_i18n = config.i18n if config is not None else None
    collection_i18n = collection.i18n if collection is not None else None

    if collection_i18n is True and isinstance(site_i18n, I18nSettings):
        settings = site_i18n

    if isinstance(collection_i18n, I18nSettings):
        settings = collection_i18n

    if settings is None:
        return I18nConfig()

    locales = tuple(settings.locales)
    if not locales:
        return I18nConfig(structure=settings.structure)

    default_locale = settings.default_locale
    if default_locale not in locales:
        if default_locale:
            logger.debug(
                f"Default locale '{default_locale}' is not one of {list(locales)}, "
                f"using '{locales[0]}'"
            )
        default_locale = locales[0]

    return I18nConfig(
        structure=settings.structure,
        has_locales=True,
        locales=locales,
        default_locale=default_locale,
    )
