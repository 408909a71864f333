import logging

from wiki_degrees.capabilities.link_lookup import ILinkLookup
from wiki_degrees.utils.wiki_helpers import DEFAULT_LANGUAGE, filter_content_links, normalize_page_title
from .models import ResolveResult

logger = logging.getLogger(__name__)

DEFAULT_NEIGHBOR_CAP = 50


class NeighborResolver:
    """
    Turns a link lookup into a page's capped, filtered neighbor list.

    A lookup failure never escapes ``resolve``; it comes back as
    ``ok=False`` with no neighbors.
    """

    def __init__(self, lookup: ILinkLookup, neighbor_cap: int = DEFAULT_NEIGHBOR_CAP,
                 language: str = DEFAULT_LANGUAGE):
        if neighbor_cap < 1:
            raise ValueError(f"neighbor_cap must be positive, got {neighbor_cap}")
        self.lookup = lookup
        self.neighbor_cap = neighbor_cap
        self.language = language

    async def resolve(self, page_title: str) -> ResolveResult:
        """
        Resolve the outbound neighbors of a page.

        Raw links are normalized, anchor and non-content namespace links are
        dropped, duplicates removed in first-seen order, and the result is cut
        to ``neighbor_cap`` entries.
        """
        try:
            raw_links = await self.lookup.get_outgoing_links(page_title, limit=self.neighbor_cap)
        except Exception as e:
            logger.warning(f"Link lookup failed for '{page_title}': {e}")
            return ResolveResult(neighbors=[], ok=False, error_message=str(e))

        normalized = (normalize_page_title(link, self.language) for link in raw_links)
        neighbors = filter_content_links(normalized, limit=self.neighbor_cap)
        logger.debug(f"Resolved '{page_title}': {len(raw_links)} raw links, {len(neighbors)} kept")
        return ResolveResult(neighbors=neighbors, ok=True)
