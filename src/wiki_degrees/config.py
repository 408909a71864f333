import os
from pydantic import BaseModel, Field

from wiki_degrees.utils.wiki_helpers import site_prefix

DEFAULT_USER_AGENT = "wiki-degrees/0.1 (degrees-of-separation crawler; python-httpx)"


class SolverConfig(BaseModel):
    """Configuration for a degrees-of-separation run."""

    # Wikipedia settings
    language: str = Field("en", min_length=1, description="Wikipedia language edition to crawl")
    target_page: str = Field("Kevin Bacon", min_length=1, description="Fixed page every search looks for")

    # Traversal settings
    neighbor_cap: int = Field(50, ge=1, description="Maximum neighbors kept per page after filtering")
    max_concurrency: int = Field(1, ge=1, description="Lookups allowed in flight within one BFS level")

    # HTTP settings
    request_timeout: float = Field(10.0, gt=0, description="Per-request timeout in seconds")
    user_agent: str = Field(DEFAULT_USER_AGENT, description="User-Agent sent to the Wikipedia API")

    # Logging settings
    log_level: str = "WARNING"
    use_rich_logging: bool = True

    @property
    def api_url(self) -> str:
        return f"https://{self.language}.wikipedia.org/w/api.php"

    @property
    def site_prefix(self) -> str:
        return site_prefix(self.language)

    @classmethod
    def from_env(cls) -> "SolverConfig":
        """Create config from environment variables."""
        return cls(
            language=os.getenv("WIKI_DEGREES_LANGUAGE", "en"),
            target_page=os.getenv("WIKI_DEGREES_TARGET", "Kevin Bacon"),
            neighbor_cap=int(os.getenv("WIKI_DEGREES_NEIGHBOR_CAP", "50")),
            max_concurrency=int(os.getenv("WIKI_DEGREES_MAX_CONCURRENCY", "1")),
            request_timeout=float(os.getenv("WIKI_DEGREES_TIMEOUT", "10.0")),
            user_agent=os.getenv("WIKI_DEGREES_USER_AGENT", DEFAULT_USER_AGENT),
            log_level=os.getenv("WIKI_DEGREES_LOG_LEVEL", "WARNING"),
            use_rich_logging=os.getenv("WIKI_DEGREES_RICH_LOGS", "true").lower() == "true",
        )
