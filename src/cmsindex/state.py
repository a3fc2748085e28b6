"""Application state shared by the content lookups."""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from .config import Collection, SiteConfig
from .models import ContentPath, Entry

logger = logging.getLogger(__name__)


@dataclass
class AppContext:
    """Loaded site configuration and content.

    Empty until the loading phase calls :meth:`load`; lookups only read it.
    """

    config: SiteConfig = field(default_factory=SiteConfig)
    data_loaded: bool = False
    all_content_paths: List[ContentPath] = field(default_factory=list)
    all_entries: List[Entry] = field(default_factory=list)
    selected_collection: Optional[Collection] = None
    selected_entries: List[Entry] = field(default_factory=list)

    def load(
        self,
        entries: Iterable[Entry],
        content_paths: Iterable[ContentPath] = (),
    ) -> None:
        """Install the loaded entries and mark the data as ready."""
        self.all_entries = list(entries)
        self.all_content_paths = list(content_paths)
        self.data_loaded = True
        logger.info(
            f"Loaded {len(self.all_entries)} entries from "
            f"{len(self.all_content_paths)} content paths"
        )
