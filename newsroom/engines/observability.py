"""Run metrics and summary logging for news fetch runs.

This module provides data structures and functions for tracking how many
items each source produced, which sources failed, and how long a run took.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime


logger = logging.getLogger(__name__)


@dataclass
class RunMetrics:
    """Metrics collected during a fetch run.

    Attributes:
        fetched_count_by_source: Count of items fetched per source label
        failed_sources: Labels of sources whose fetch failed, in order
        errors: Error messages encountered during the run
        run_timestamp: Timestamp when the run started
        elapsed_seconds: Wall-clock duration of the fan-out
    """
    fetched_count_by_source: dict[str, int] = field(default_factory=dict)
    failed_sources: list[str] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)
    run_timestamp: datetime = field(default_factory=datetime.now)
    elapsed_seconds: float = 0.0

    @property
    def total_items(self) -> int:
        return sum(self.fetched_count_by_source.values())

    @property
    def success(self) -> bool:
        return not self.failed_sources


def create_run_metrics(
    fetched_count_by_source: dict[str, int] | None = None,
    failed_sources: list[str] | None = None,
    errors: list[str] | None = None,
    run_timestamp: datetime | None = None,
    elapsed_seconds: float = 0.0,
) -> RunMetrics:
    """Create a RunMetrics instance with proper defaults for optional fields.

    Example:
        >>> metrics = create_run_metrics(
        ...     fetched_count_by_source={"HACKER NEWS": 10, "TECHMEME": 0},
        ...     failed_sources=["TECHMEME"],
        ...     errors=["TECHMEME: connection refused"],
        ... )
        >>> metrics.total_items
        10
    """
    return RunMetrics(
        fetched_count_by_source=fetched_count_by_source or {},
        failed_sources=failed_sources or [],
        errors=errors or [],
        run_timestamp=run_timestamp or datetime.now(),
        elapsed_seconds=elapsed_seconds,
    )


def log_run_summary(metrics: RunMetrics) -> None:
    """Log a one-line summary plus one line per failed source."""
    logger.info(
        f"Fetched {metrics.total_items} items from "
        f"{len(metrics.fetched_count_by_source)} sources "
        f"({len(metrics.failed_sources)} failed) in {metrics.elapsed_seconds:.2f}s"
    )
    for error in metrics.errors:
        logger.warning(f"  - {error}")
