"""
DegreeSolver - breadth-first search for the degree of separation between a
start page and a fixed target page.

The page graph is never materialized. Each page's neighbors are revealed on
demand through a NeighborResolver, so memory is bounded by the queue and the
visited set.
"""

import asyncio
import time
import logging
from collections import deque
from typing import Deque, List, Optional, Set

from wiki_degrees.config import SolverConfig
from wiki_degrees.exceptions import InvalidPageTitleException
from wiki_degrees.utils.wiki_helpers import DEFAULT_LANGUAGE, normalize_page_title, strip_fragment, validate_page_title
from .models import FrontierEntry, ResolveResult, SeparationResult
from .resolver import NeighborResolver

logger = logging.getLogger(__name__)


class DegreeSolver:
    """Finds how many link hops separate a start page from the target page."""

    def __init__(self, resolver: NeighborResolver, target_page: str = "Kevin Bacon",
                 max_concurrency: int = 1, language: str = DEFAULT_LANGUAGE):
        """
        Initialize the solver.

        Args:
            resolver: Source of each page's neighbors.
            target_page: The page every search looks for. Normalized once here.
            max_concurrency: How many pages of one BFS level may be resolved at
                once. 1 keeps requests strictly serial.
            language: Wiki language used when normalizing URLs.
        """
        if max_concurrency < 1:
            raise ValueError(f"max_concurrency must be positive, got {max_concurrency}")
        self.resolver = resolver
        self.language = language
        self.target_page = normalize_page_title(target_page, language)
        validate_page_title(self.target_page)
        self.max_concurrency = max_concurrency

    @classmethod
    def from_config(cls, resolver: NeighborResolver, config: SolverConfig) -> "DegreeSolver":
        return cls(
            resolver,
            target_page=config.target_page,
            max_concurrency=config.max_concurrency,
            language=config.language,
        )

    def normalize_start(self, start: str) -> str:
        """Normalize a user-supplied title or URL, rejecting anything empty.

        A "#section" part is dropped, so a link to a section of a page starts
        from the page itself.
        """
        title = strip_fragment(normalize_page_title(start, self.language)) if isinstance(start, str) else start
        try:
            validate_page_title(title)
        except ValueError:
            raise InvalidPageTitleException(f'Invalid start page "{start}": page title must be a non-empty string.')
        return title

    async def find_distance(self, start: str) -> SeparationResult:
        """
        Find the degree of separation from ``start`` to the target page.

        Entries are dequeued in FIFO order one level at a time. The target
        check runs before the visited check, and a page is expanded at most
        once per call. All pages surviving a level are resolved (up to
        ``max_concurrency`` at a time) before any of their neighbors are
        enqueued, so the first time the target reaches the front of the queue
        its distance is minimal.

        Raises:
            InvalidPageTitleException: If ``start`` is empty after normalization.

        Returns:
            SeparationResult whose ``degree`` is None when the target is unreachable.
        """
        start_time = time.time()
        start_title = self.normalize_start(start)
        logger.info(f"Finding degree of separation from '{start_title}' to '{self.target_page}'")

        queue: Deque[FrontierEntry] = deque([FrontierEntry(start_title, 0)])
        visited: Set[str] = set()
        failed_lookups = 0
        degree: Optional[int] = None

        while queue:
            level_distance = queue[0].distance
            to_expand: List[str] = []

            while queue and queue[0].distance == level_distance:
                entry = queue.popleft()
                if entry.title == self.target_page:
                    degree = entry.distance
                    break
                if entry.title in visited:
                    continue
                visited.add(entry.title)
                to_expand.append(entry.title)

            if degree is not None:
                break
            if not to_expand:
                continue

            logger.info(f"Level {level_distance}: expanding {len(to_expand)} pages "
                        f"({len(visited)} visited so far)")
            results = await self._resolve_level(to_expand)

            for title, result in zip(to_expand, results):
                if not result.ok:
                    failed_lookups += 1
                for neighbor in result.neighbors:
                    if neighbor not in visited:
                        queue.append(FrontierEntry(neighbor, level_distance + 1))

        elapsed_ms = (time.time() - start_time) * 1000
        if degree is None:
            logger.info(f"'{self.target_page}' not reachable from '{start_title}' "
                        f"after expanding {len(visited)} pages in {elapsed_ms:.0f}ms")
        else:
            logger.info(f"Found '{self.target_page}' at degree {degree} "
                        f"after expanding {len(visited)} pages in {elapsed_ms:.0f}ms")

        return SeparationResult(
            start_page=start_title,
            target_page=self.target_page,
            degree=degree,
            pages_expanded=len(visited),
            failed_lookups=failed_lookups,
            computation_time_ms=elapsed_ms,
        )

    async def _resolve_level(self, titles: List[str]) -> List[ResolveResult]:
        """Resolve every page of one level; results keep the order of ``titles``."""
        if self.max_concurrency == 1:
            return [await self.resolver.resolve(title) for title in titles]

        semaphore = asyncio.Semaphore(self.max_concurrency)

        async def resolve_one(title: str) -> ResolveResult:
            async with semaphore:
                return await self.resolver.resolve(title)

        return list(await asyncio.gather(*(resolve_one(title) for title in titles)))
