"""Find the entries that reference a media asset."""

import asyncio
import logging
from typing import Any, List, Optional, Protocol

from .config import SiteConfig
from .consts import ABSOLUTE_URL_PREFIXES
from .fields import get_field_list, resolve_field
from .models import Entry
from .state import AppContext
from .utils import flatten, strip_site_url

logger = logging.getLogger(__name__)


class MediaURLResolver(Protocol):
    """Resolves a stored media value of ``entry`` to its URL.

    A None result means the value matches no asset.
    """

    async def resolve(self, value: Any, entry: Entry) -> str | None: ...


class PublicFolderResolver:
    """Resolve stored media values to the URL path they are served from.

    Absolute URLs and root relative paths are used as they are; other values
    are relative to the collection's public folder, or the site's.
    """

    def __init__(self, config: SiteConfig):
        self.config = config

    def _public_folder(self, collection_name: str) -> str:
        collection = next(
            (c for c in self.config.collections if c.name == collection_name), None
        )
        if collection is not None and collection.public_folder is not None:
            return collection.public_folder
        if self.config.public_folder is not None:
            return self.config.public_folder
        if self.config.media_folder:
            return f"/{self.config.media_folder.strip('/')}"
        return ""

    async def resolve(self, value: Any, entry: Entry) -> str | None:
        if not isinstance(value, str) or not value:
            return None

        if value.startswith(ABSOLUTE_URL_PREFIXES) or value.startswith("/"):
            return value

        folder = self._public_folder(entry.collection_name).rstrip("/")
        return f"{folder}/{value}"


async def get_entries_by_asset_url(
    ctx: AppContext,
    url: str,
    resolver: Optional[MediaURLResolver] = None,
    *,
    concurrency: Optional[int] = None,
    timeout: Optional[float] = None,
) -> List[Entry]:
    """Get the entries that use the given asset.

    Every media or file field value of every locale of every entry is
    resolved concurrently and compared with ``url`` minus the site URL.

    Args:
        ctx: Application context
        url: Absolute or site relative asset URL
        resolver: Media URL resolver, defaults to :class:`PublicFolderResolver`
        concurrency: Max resolutions in flight, 0 for no limit; defaults to
            ``asset_scan_concurrency`` from the site configuration
        timeout: Seconds to wait for the whole scan

    Returns:
        Matching entries, once each, in loading order

    Raises:
        asyncio.TimeoutError: If the scan takes longer than ``timeout``
        SchemaContractError: If an entry's file name does not fit its collection
    """
    path = strip_site_url(url, ctx.config.site_url)
    if resolver is None:
        resolver = PublicFolderResolver(ctx.config)
    if concurrency is None:
        concurrency = ctx.config.asset_scan_concurrency
    semaphore = asyncio.Semaphore(concurrency) if concurrency > 0 else None
    entries = list(ctx.all_entries)

    async def resolve(value: Any, entry: Entry) -> str | None:
        if semaphore is None:
            return await resolver.resolve(value, entry)
        async with semaphore:
            return await resolver.resolve(value, entry)

    async def matches(value: Any, entry: Entry) -> bool:
        try:
            return await resolve(value, entry) == path
        except Exception as e:
            logger.warning(f"Failed to resolve media value {value!r} of {entry.label()}: {e}")
            return False

    candidates = []
    for index, entry in enumerate(entries):
        fields = get_field_list(ctx, entry.collection_name, entry.file_name)
        if fields is None:
            continue

        for localized in entry.locales.values():
            value_map = flatten(localized.content)
            for key_path, value in value_map.items():
                field = resolve_field(fields, key_path, value_map)
                if field is None or not field.is_media:
                    continue
                candidates.append((index, value, entry))

    logger.debug(f"Checking {len(candidates)} media values against {path}")
    gathered = asyncio.gather(*(matches(value, entry) for _, value, entry in candidates))
    if timeout is not None:
        results = await asyncio.wait_for(gathered, timeout)
    else:
        results = await gathered

    matched = {index for (index, _, _), result in zip(candidates, results) if result}
    found = [entry for index, entry in enumerate(entries) if index in matched]
    logger.info(f"Found {len(found)} entries using {path}")
    return found
