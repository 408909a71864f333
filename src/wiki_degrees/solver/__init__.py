# Degrees-of-separation solver over a lazily revealed link graph

from .solver import DegreeSolver
from .resolver import NeighborResolver, DEFAULT_NEIGHBOR_CAP
from .models import FrontierEntry, ResolveResult, SeparationResult

__all__ = [
    "DegreeSolver",
    "NeighborResolver",
    "DEFAULT_NEIGHBOR_CAP",
    "FrontierEntry",
    "ResolveResult",
    "SeparationResult",
]
