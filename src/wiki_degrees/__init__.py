"""
wiki_degrees - Core Library

Computes the degree of separation between a Wikipedia page and a fixed
target page by breadth-first search over links fetched on demand.
"""

from .config import SolverConfig
from .solver import DegreeSolver, NeighborResolver, SeparationResult

__all__ = ['SolverConfig', 'DegreeSolver', 'NeighborResolver', 'SeparationResult']
