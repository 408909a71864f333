"""
Logging configuration for wiki_degrees.

Logs go to stderr so the CLI result on stdout stays clean. The requested level
applies to the ``wiki_degrees`` loggers only; everything else stays at WARNING
or above, so a DEBUG crawl shows every dequeue without per-request noise
from the HTTP stack.
"""

import logging
import sys
from rich.logging import RichHandler
from rich.console import Console

PACKAGE_LOGGER = "wiki_degrees"
PLAIN_FORMAT = "[%(asctime)s] %(levelname)-7s %(name)s: %(message)s"


def setup_logging(level: str = "INFO", use_rich: bool = True) -> None:
    """
    Configure logging for a crawl.

    Args:
        level: Log level for wiki_degrees (DEBUG, INFO, WARNING, ERROR)
        use_rich: Render with Rich instead of the plain PLAIN_FORMAT lines
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
    root_logger.setLevel(max(numeric_level, logging.WARNING))

    handler = _rich_handler() if use_rich else _plain_handler()
    handler.setLevel(numeric_level)
    root_logger.addHandler(handler)

    logging.getLogger(PACKAGE_LOGGER).setLevel(numeric_level)

    logging.getLogger(__name__).debug(f"Logging configured: level={level}, rich={use_rich}")


def _rich_handler() -> logging.Handler:
    handler = RichHandler(
        console=Console(file=sys.stderr),
        show_time=True,
        show_level=True,
        show_path=False,
        rich_tracebacks=True,
        markup=False,  # Page titles may contain [brackets]
        log_time_format="[%H:%M:%S]",
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    return handler


def _plain_handler() -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt="%H:%M:%S"))
    return handler
