"""
Solver models for degrees-of-separation searches.
"""

from dataclasses import dataclass, field
from pydantic import BaseModel, Field
from typing import List, Optional


@dataclass(frozen=True)
class FrontierEntry:
    """A page waiting in the BFS queue, with its hop count from the start page."""
    title: str
    distance: int


@dataclass
class ResolveResult:
    """Result of resolving a page's neighbors."""
    neighbors: List[str] = field(default_factory=list)
    ok: bool = True
    error_message: Optional[str] = None


class SeparationResult(BaseModel):
    """Outcome of a single degrees-of-separation search."""
    start_page: str = Field(..., description="Normalized starting page title")
    target_page: str = Field(..., description="Page the search was looking for")
    degree: Optional[int] = Field(None, ge=0, description="Minimum hops from start to target, None if unreachable")
    pages_expanded: int = Field(0, ge=0, description="Pages whose links were looked up")
    failed_lookups: int = Field(0, ge=0, description="Lookups that failed and counted as zero links")
    computation_time_ms: float = Field(0.0, description="Wall time of the search in milliseconds")

    @property
    def is_reachable(self) -> bool:
        return self.degree is not None
