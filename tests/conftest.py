"""
Pytest configuration and shared fixtures for wiki_degrees tests.
"""

import pytest
import logging
from typing import Dict, Iterable, List, Optional

from wiki_degrees.capabilities.link_lookup import ILinkLookup
from wiki_degrees.exceptions import WikiServiceUnavailableException
from wiki_degrees.solver import DegreeSolver, NeighborResolver

# Configure logging for tests
logging.basicConfig(level=logging.INFO)

TARGET = "Kevin Bacon"


class GraphLinkLookup(ILinkLookup):
    """In-memory link lookup over a fixed adjacency dict.

    Pages missing from the graph have no links; pages in ``failing`` raise.
    """

    def __init__(self, graph: Dict[str, List[str]], failing: Iterable[str] = ()):
        self.graph = graph
        self.failing = set(failing)
        self.calls: List[str] = []
        self.limits: List[Optional[int]] = []

    async def get_outgoing_links(self, page_title: str, limit: Optional[int] = None) -> List[str]:
        self.calls.append(page_title)
        self.limits.append(limit)
        if page_title in self.failing:
            raise WikiServiceUnavailableException(f"Simulated failure for '{page_title}'")
        return list(self.graph.get(page_title, []))


@pytest.fixture
def make_lookup():
    """Factory for GraphLinkLookup instances."""
    def _make(graph: Dict[str, List[str]], failing: Iterable[str] = ()) -> GraphLinkLookup:
        return GraphLinkLookup(graph, failing)
    return _make


@pytest.fixture
def make_solver(make_lookup):
    """Factory returning (solver, lookup) over an in-memory graph."""
    def _make(
        graph: Dict[str, List[str]],
        failing: Iterable[str] = (),
        neighbor_cap: int = 50,
        max_concurrency: int = 1,
        target_page: str = TARGET,
    ):
        lookup = make_lookup(graph, failing)
        resolver = NeighborResolver(lookup, neighbor_cap=neighbor_cap)
        solver = DegreeSolver(resolver, target_page=target_page, max_concurrency=max_concurrency)
        return solver, lookup
    return _make
