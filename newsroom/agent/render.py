"""Console rendering of fetch results."""

import sys
from typing import TextIO

from newsroom.agent.workflow import FetchResult


def format_result(result: FetchResult) -> list[str]:
    """Format one source's result as output lines.

    The source label comes first, then the numbered items or a failure
    notice, then a blank separator line.
    """
    lines = [result.source.label]
    if result.ok:
        lines.extend(f"{i}. {item}" for i, item in enumerate(result.items, start=1))
    else:
        lines.append(f"Could not fetch news: {result.error}")
    lines.append("")
    return lines


def render_results(results: list[FetchResult], stream: TextIO | None = None) -> None:
    """Write every result to the stream (stdout by default) in order."""
    out = stream if stream is not None else sys.stdout
    for result in results:
        for line in format_result(result):
            print(line, file=out)
