import asyncio
import logging
from typing import Optional

import typer

from wiki_degrees.config import SolverConfig
from wiki_degrees.exceptions import WikiDegreesException
from wiki_degrees.logging_config import setup_logging
from wiki_degrees.solver import DegreeSolver, NeighborResolver, SeparationResult
from wiki_degrees.utils.wiki_helpers import page_url
from wiki_degrees.wikipedia import LiveWikiService


app = typer.Typer(add_completion=False)


@app.command()
def main(
    start: Optional[str] = typer.Argument(
        None,
        help="Title or URL of the Wikipedia page to start from. Prompted for when omitted.",
    ),
):
    """
    Find the degree of separation between a Wikipedia page and the target page.
    """
    config = SolverConfig.from_env()
    setup_logging(level=config.log_level, use_rich=config.use_rich_logging)
    logger = logging.getLogger(__name__)

    if start is None:
        start = typer.prompt("Enter the Wikipedia page URL or title to start from")

    solver = build_solver(config)
    try:
        start_title = solver.normalize_start(start)
    except WikiDegreesException as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Finding the degree of separation from {start_title} to {solver.target_page}...")
    logger.info(f"Start page: {page_url(start_title, config.language)}")
    result = asyncio.run(solver.find_distance(start_title))
    logger.info(f"Expanded {result.pages_expanded} pages, {result.failed_lookups} lookups failed, "
                f"{result.computation_time_ms:.0f}ms")
    typer.echo(format_result(result))


def build_solver(config: SolverConfig) -> DegreeSolver:
    """Wire the live Wikipedia lookup, resolver and solver from a config."""
    service = LiveWikiService.from_config(config)
    resolver = NeighborResolver(service, neighbor_cap=config.neighbor_cap, language=config.language)
    return DegreeSolver.from_config(resolver, config)


def format_result(result: SeparationResult) -> str:
    if result.is_reachable:
        return f"Degree of separation: {result.degree}"
    return f"{result.target_page}'s page is not reachable from the given page."


if __name__ == "__main__":
    app()
