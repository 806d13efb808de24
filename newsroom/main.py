#!/usr/bin/env python3
"""Main entry point for the Newsroom reader.

This module provides the CLI interface for printing the top items of the
catalogued news sources.

Usage:
    python -m newsroom.main                  # All sources, 10 items each
    python -m newsroom.main hackernews       # A single source
    python -m newsroom.main wsj -m 5         # A single source, 5 items
    python -m newsroom.main -v               # Verbose logging
"""

import argparse
import sys

from newsroom.agent.runner import run
from newsroom.engines.errors import UnrecognizedSourceError
from newsroom.engines.sources import NewsSource


def _source_arg(value: str) -> NewsSource:
    """Convert a command line token to a NewsSource for argparse."""
    try:
        return NewsSource.parse(value)
    except UnrecognizedSourceError as e:
        choices = ", ".join(NewsSource.tokens())
        raise argparse.ArgumentTypeError(f"{e} (choose from {choices})") from e


def _positive_int(value: str) -> int:
    """Convert a command line value to a positive integer for argparse."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from e
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(args: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments.

    Args:
        args: Command line arguments. If None, uses sys.argv.

    Returns:
        Parsed arguments namespace.
    """
    parser = argparse.ArgumentParser(
        prog="newsroom",
        description="Newsroom - top stories from tech news sites in your terminal",
    )

    parser.add_argument(
        "source",
        nargs="?",
        type=_source_arg,
        default=None,
        help=f"Source to fetch, one of: {', '.join(NewsSource.tokens())} (default: all)",
    )

    parser.add_argument(
        "-m", "--max-page",
        type=_positive_int,
        default=None,
        help="Maximum number of items per source (default: MAX_PAGE or 10)",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging output",
    )

    return parser.parse_args(args)


def main(args: list[str] | None = None) -> int:
    """Main entry point for the Newsroom reader.

    Args:
        args: Command line arguments. If None, uses sys.argv.

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parsed = parse_args(args)
    return run(source=parsed.source, max_page=parsed.max_page, verbose=parsed.verbose)


if __name__ == "__main__":
    sys.exit(main())
