"""Property-based tests for run metrics.

Feature: newsroom
"""

import logging
from datetime import datetime

from hypothesis import given, settings, strategies as st

from newsroom.engines.observability import (
    RunMetrics,
    create_run_metrics,
    log_run_summary,
)
from newsroom.engines.sources import NewsSource


label_strategy = st.sampled_from([source.label for source in NewsSource])


# Feature: newsroom, Property: Metrics Completeness
class TestMetricsCompleteness:
    """Property tests for metrics completeness."""

    @given(
        counts=st.dictionaries(
            keys=label_strategy,
            values=st.integers(min_value=0, max_value=100),
            max_size=5,
        ),
        elapsed=st.floats(min_value=0.0, max_value=600.0, allow_nan=False),
    )
    @settings(max_examples=100)
    def test_total_items_is_sum_of_counts(self, counts: dict[str, int], elapsed: float):
        metrics = create_run_metrics(fetched_count_by_source=counts, elapsed_seconds=elapsed)

        assert metrics.total_items == sum(counts.values())
        assert metrics.elapsed_seconds == elapsed

    @given(failed=st.lists(label_strategy, max_size=5, unique=True))
    @settings(max_examples=50)
    def test_success_iff_no_failed_sources(self, failed: list[str]):
        metrics = create_run_metrics(failed_sources=failed)

        assert metrics.success == (not failed)

    def test_defaults(self):
        metrics = create_run_metrics()

        assert isinstance(metrics, RunMetrics)
        assert metrics.fetched_count_by_source == {}
        assert metrics.failed_sources == []
        assert metrics.errors == []
        assert isinstance(metrics.run_timestamp, datetime)
        assert metrics.total_items == 0
        assert metrics.success

    def test_explicit_timestamp_is_kept(self):
        timestamp = datetime(2024, 1, 15, 10, 30)

        assert create_run_metrics(run_timestamp=timestamp).run_timestamp == timestamp


class TestRunSummaryLogging:

    def test_summary_and_errors_are_logged(self, caplog):
        metrics = create_run_metrics(
            fetched_count_by_source={"HACKER NEWS": 10, "TECHMEME": 0},
            failed_sources=["TECHMEME"],
            errors=["TECHMEME: connection refused"],
            elapsed_seconds=1.5,
        )

        with caplog.at_level(logging.INFO, logger="newsroom.engines.observability"):
            log_run_summary(metrics)

        assert "Fetched 10 items from 2 sources (1 failed) in 1.50s" in caplog.text
        assert "TECHMEME: connection refused" in caplog.text
