"""Runner module for the Newsroom reader.

This module wires together settings, the fetch workflow and console
rendering.
"""

import logging
import sys

from newsroom.agent.render import render_results
from newsroom.agent.workflow import run_workflow
from newsroom.config.settings import ConfigurationError, load_settings
from newsroom.engines.sources import NewsSource


# Exit codes
EXIT_SUCCESS = 0
EXIT_CONFIG_ERROR = 1
EXIT_FETCH_ERROR = 2


def _setup_logging(verbose: bool = False) -> None:
    """Configure logging for the application.

    Logs go to stderr so they never interleave with rendered news on stdout.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise WARNING.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def run(
    source: NewsSource | None = None,
    max_page: int | None = None,
    verbose: bool = False,
) -> int:
    """Fetch and print news.

    Args:
        source: Single source to fetch; None fetches every source
        max_page: Items per source; None uses the configured default
        verbose: If True, enable verbose/debug logging.

    Returns:
        Exit code:
        - 0: Every source fetched
        - 1: Configuration error
        - 2: At least one source failed (the others are still printed)
    """
    _setup_logging(verbose)
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(validate=True)
        logger.debug("Configuration loaded successfully")
    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    result = run_workflow(settings, source=source, limit=max_page)
    render_results(result.results)

    if result.success:
        return EXIT_SUCCESS
    return EXIT_FETCH_ERROR
