"""
Link Lookup Capability Interface

Defines the single thing the traversal needs from a content service: the
outbound links of one page. How they are fetched (live API, fixture graph,
database dump) is up to the implementation.
"""

from abc import ABC, abstractmethod
from typing import List, Optional


class ILinkLookup(ABC):
    """
    Outbound link lookup capability.

    Implementations raise on failure; callers decide how a failed lookup is
    reported.
    """

    @abstractmethod
    async def get_outgoing_links(self, page_title: str, limit: Optional[int] = None) -> List[str]:
        """
        Fetch the outbound links of a page.

        Args:
            page_title: Normalized title of the page to look up
            limit: Hint that the caller keeps only this many distinct content
                links, so fetching may stop once that many have arrived

        Returns:
            Raw link titles in the order the service returned them
        """
        pass
