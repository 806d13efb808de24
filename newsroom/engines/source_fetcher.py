"""Source fetcher protocol for news extraction."""

from typing import Protocol, runtime_checkable

from newsroom.engines.news_item import NewsItem
from newsroom.engines.sources import NewsSource


@runtime_checkable
class SourceFetcher(Protocol):
    """Protocol defining the interface for news fetchers.

    The workflow depends only on this interface, so any object that can
    turn a source and a limit into news items can be fanned out.
    """

    def fetch(self, source: NewsSource, limit: int) -> list[NewsItem]:
        """Fetch items from a source up to the specified limit.

        Args:
            source: The news source to fetch
            limit: Maximum number of items to fetch

        Returns:
            List of NewsItem objects, at most `limit` items

        Raises:
            May raise exceptions on network or parsing errors,
            which should be handled by the caller.
        """
        ...
