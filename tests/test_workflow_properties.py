"""Property-based tests for the fetch workflow.

Feature: newsroom
Tests source isolation and order preservation of the concurrent fan-out.
"""

import threading
import time
from unittest.mock import MagicMock, patch

import requests
from hypothesis import given, settings, strategies as st

from newsroom.agent.workflow import FetchResult, fetch_sources, run_workflow
from newsroom.config.settings import Settings
from newsroom.engines.errors import TransportError
from newsroom.engines.extractor import NewsExtractor
from newsroom.engines.news_item import NewsItem
from newsroom.engines.sources import NewsSource


class MockFetcher:
    """Mock fetcher with per-source items, failures and delays."""

    def __init__(
        self,
        items: dict[NewsSource, list[NewsItem]] | None = None,
        failures: dict[NewsSource, Exception] | None = None,
        delays: dict[NewsSource, float] | None = None,
    ):
        self._items = items or {}
        self._failures = failures or {}
        self._delays = delays or {}
        self.calls: list[tuple[NewsSource, int]] = []
        self._lock = threading.Lock()

    def fetch(self, source: NewsSource, limit: int) -> list[NewsItem]:
        with self._lock:
            self.calls.append((source, limit))
        time.sleep(self._delays.get(source, 0.0))
        if source in self._failures:
            raise self._failures[source]
        return self._items.get(source, [])[:limit]


def _items(source: NewsSource, count: int) -> list[NewsItem]:
    return [NewsItem(f"{source.token} story {i}") for i in range(count)]


# Feature: newsroom, Property: Source Fetch Isolation
class TestSourceFetchIsolation:
    """For any subset of failing sources, the other sources SHALL still succeed."""

    @given(
        failing=st.sets(st.sampled_from(NewsSource.all())),
        count=st.integers(min_value=0, max_value=15),
        limit=st.integers(min_value=1, max_value=20),
    )
    @settings(max_examples=50, deadline=None)
    def test_failures_do_not_affect_other_sources(self, failing, count, limit):
        items = {source: _items(source, count) for source in NewsSource.all()}
        failures = {source: RuntimeError(f"{source.token} down") for source in failing}
        fetcher = MockFetcher(items=items, failures=failures)

        results = fetch_sources(fetcher, NewsSource.all(), limit)

        assert [result.source for result in results] == NewsSource.all()
        for result in results:
            if result.source in failing:
                assert not result.ok
                assert result.items == []
                assert str(result.error) == f"{result.source.token} down"
            else:
                assert result.ok
                assert result.items == items[result.source][:limit]

    def test_unreachable_source_does_not_poison_reachable_one(self):
        """A transport failure SHALL be reported beside another source's success."""
        feed = _rss_response()

        def fake_get(url, **kwargs):
            if url == NewsSource.HACKER_NEWS.url:
                raise requests.ConnectionError("Name or service not known")
            return feed

        extractor = NewsExtractor(Settings())
        with patch("newsroom.engines.extractor.requests.get", side_effect=fake_get):
            results = fetch_sources(
                extractor, [NewsSource.HACKER_NEWS, NewsSource.TECHMEME], 10
            )

        assert isinstance(results[0].error, TransportError)
        assert results[1].ok
        assert results[1].items == [NewsItem("Reachable")]


def _rss_response() -> MagicMock:
    response = MagicMock()
    response.content = (
        b'<?xml version="1.0"?><rss version="2.0"><channel><title>t</title>'
        b"<item><title>Reachable</title></item></channel></rss>"
    )
    return response


class TestFanOut:
    """Unit tests for concurrency and ordering of the fan-out."""

    def test_results_follow_input_order_not_completion_order(self):
        sources = NewsSource.all()
        # Earlier sources finish last
        delays = {source: 0.05 * (len(sources) - i) for i, source in enumerate(sources)}
        fetcher = MockFetcher(
            items={source: _items(source, 1) for source in sources},
            delays=delays,
        )

        results = fetch_sources(fetcher, sources, 5)

        assert [result.source for result in results] == sources
        assert [result.items[0].title for result in results] == [
            f"{source.token} story 0" for source in sources
        ]

    def test_all_sources_run_concurrently(self):
        """Every source SHALL get its own worker by default."""
        sources = NewsSource.all()
        barrier = threading.Barrier(len(sources), timeout=5)

        class BarrierFetcher:
            def fetch(self, source, limit):
                barrier.wait()
                return [NewsItem(source.label)]

        results = fetch_sources(BarrierFetcher(), sources, 10)

        assert all(result.ok for result in results)

    def test_max_workers_bounds_concurrency(self):
        active = 0
        peak = 0
        lock = threading.Lock()

        class CountingFetcher:
            def fetch(self, source, limit):
                nonlocal active, peak
                with lock:
                    active += 1
                    peak = max(peak, active)
                time.sleep(0.02)
                with lock:
                    active -= 1
                return []

        results = fetch_sources(CountingFetcher(), NewsSource.all(), 10, max_workers=2)

        assert len(results) == len(NewsSource.all())
        assert peak <= 2

    def test_empty_source_list(self):
        fetcher = MockFetcher()

        assert fetch_sources(fetcher, [], 10) == []
        assert fetcher.calls == []

    def test_limit_passed_to_every_fetch(self):
        fetcher = MockFetcher()

        fetch_sources(fetcher, NewsSource.all(), 7)

        assert sorted(limit for _, limit in fetcher.calls) == [7] * len(NewsSource.all())


class TestRunWorkflow:
    """Unit tests for the top-level workflow."""

    def test_fetches_all_sources_by_default(self):
        fetcher = MockFetcher(items={s: _items(s, 3) for s in NewsSource.all()})

        result = run_workflow(Settings(), fetcher=fetcher)

        assert [r.source for r in result.results] == NewsSource.all()
        assert result.success
        assert result.metrics.total_items == 3 * len(NewsSource.all())

    def test_single_source(self):
        fetcher = MockFetcher(items={NewsSource.WSJ: _items(NewsSource.WSJ, 4)})

        result = run_workflow(Settings(), source=NewsSource.WSJ, fetcher=fetcher)

        assert [r.source for r in result.results] == [NewsSource.WSJ]
        assert fetcher.calls == [(NewsSource.WSJ, 10)]

    def test_limit_defaults_to_settings_max_page(self):
        fetcher = MockFetcher()

        run_workflow(Settings(max_page=4), source=NewsSource.TECHMEME, fetcher=fetcher)

        assert fetcher.calls == [(NewsSource.TECHMEME, 4)]

    def test_explicit_limit_overrides_settings(self):
        fetcher = MockFetcher()

        run_workflow(Settings(max_page=4), source=NewsSource.TECHMEME, limit=2, fetcher=fetcher)

        assert fetcher.calls == [(NewsSource.TECHMEME, 2)]

    def test_failures_are_recorded_in_metrics(self):
        fetcher = MockFetcher(
            items={NewsSource.HACKER_NEWS: _items(NewsSource.HACKER_NEWS, 2)},
            failures={NewsSource.WSJ: RuntimeError("boom")},
        )

        result = run_workflow(Settings(), fetcher=fetcher)

        assert not result.success
        assert result.metrics.failed_sources == ["WALL STREET JOURNAL"]
        assert result.metrics.errors == ["WALL STREET JOURNAL: boom"]
        assert result.metrics.fetched_count_by_source["HACKER NEWS"] == 2
        assert result.metrics.fetched_count_by_source["WALL STREET JOURNAL"] == 0


class TestFetchResult:

    def test_ok_reflects_error(self):
        assert FetchResult(source=NewsSource.WSJ).ok
        assert not FetchResult(source=NewsSource.WSJ, error=RuntimeError("x")).ok
