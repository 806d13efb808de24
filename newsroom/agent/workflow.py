"""Workflow orchestrator for fetching news from several sources at once.

Each source is fetched on its own worker thread. Results are joined in the
order the sources were requested, whatever order the fetches finish in.
"""

import concurrent.futures
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime

from newsroom.config.settings import Settings
from newsroom.engines.extractor import NewsExtractor
from newsroom.engines.news_item import NewsItem
from newsroom.engines.observability import (
    RunMetrics,
    create_run_metrics,
    log_run_summary,
)
from newsroom.engines.source_fetcher import SourceFetcher
from newsroom.engines.sources import NewsSource


logger = logging.getLogger(__name__)


@dataclass
class FetchResult:
    """Outcome of fetching a single source.

    Attributes:
        source: The source that was fetched
        items: Items in page order; empty when the fetch failed
        error: The exception that aborted the fetch, or None on success
    """
    source: NewsSource
    items: list[NewsItem] = field(default_factory=list)
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class WorkflowResult:
    """Result of a workflow execution.

    Attributes:
        results: One FetchResult per requested source, in request order
        metrics: Run metrics collected during execution
    """
    results: list[FetchResult]
    metrics: RunMetrics

    @property
    def success(self) -> bool:
        return all(result.ok for result in self.results)


def _fetch_one(fetcher: SourceFetcher, source: NewsSource, limit: int) -> FetchResult:
    """Fetch a single source, capturing any failure in the result."""
    try:
        logger.debug(f"Fetching {source.label}...")
        items = fetcher.fetch(source, limit)
    except Exception as e:
        logger.error(f"Failed to fetch from {source.label}: {e}")
        return FetchResult(source=source, error=e)
    return FetchResult(source=source, items=items)


def fetch_sources(
    fetcher: SourceFetcher,
    sources: list[NewsSource],
    limit: int,
    max_workers: int = 0,
) -> list[FetchResult]:
    """Fetch every source concurrently and join results in input order.

    A failing or slow source never affects another source's result.

    Args:
        fetcher: Fetcher used for every source
        sources: Sources to fetch
        limit: Maximum items to fetch per source
        max_workers: Upper bound on worker threads; 0 means one per source

    Returns:
        One FetchResult per source, positioned as in `sources`
    """
    if not sources:
        return []

    workers = len(sources)
    if max_workers > 0:
        workers = min(workers, max_workers)

    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(_fetch_one, fetcher, source, limit)
            for source in sources
        ]
        return [future.result() for future in futures]


def _collect_metrics(
    results: list[FetchResult],
    run_timestamp: datetime,
    elapsed_seconds: float,
) -> RunMetrics:
    counts: dict[str, int] = {}
    failed: list[str] = []
    errors: list[str] = []
    for result in results:
        counts[result.source.label] = len(result.items)
        if not result.ok:
            failed.append(result.source.label)
            errors.append(f"{result.source.label}: {result.error}")

    return create_run_metrics(
        fetched_count_by_source=counts,
        failed_sources=failed,
        errors=errors,
        run_timestamp=run_timestamp,
        elapsed_seconds=elapsed_seconds,
    )


def run_workflow(
    settings: Settings,
    source: NewsSource | None = None,
    limit: int | None = None,
    fetcher: SourceFetcher | None = None,
) -> WorkflowResult:
    """Fetch one source, or every catalogued source, and collect metrics.

    Args:
        settings: Configuration settings
        source: Single source to fetch; None fetches all sources
        limit: Items per source; None uses settings.max_page
        fetcher: Fetcher to use; defaults to a NewsExtractor

    Returns:
        WorkflowResult with per-source results and run metrics
    """
    sources = [source] if source is not None else NewsSource.all()
    limit = limit if limit is not None else settings.max_page
    fetcher = fetcher if fetcher is not None else NewsExtractor(settings)

    run_timestamp = datetime.now()
    started = time.monotonic()

    logger.info(f"Fetching {len(sources)} sources, up to {limit} items each")
    results = fetch_sources(fetcher, sources, limit, settings.max_workers)

    metrics = _collect_metrics(results, run_timestamp, time.monotonic() - started)
    log_run_summary(metrics)

    return WorkflowResult(results=results, metrics=metrics)
