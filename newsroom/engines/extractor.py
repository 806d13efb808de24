"""News extractor for fetching top items from HTML pages and RSS feeds."""

import io
import logging
from typing import Any

import feedparser
import requests
from bs4 import BeautifulSoup

from newsroom.config.settings import Settings
from newsroom.engines.errors import (
    FeedParseError,
    MissingTitleError,
    TransportError,
)
from newsroom.engines.news_item import NewsItem
from newsroom.engines.sources import FeedQuery, HtmlQuery, NewsSource


logger = logging.getLogger(__name__)


# Bozo conditions feedparser reports for well-formed documents
BENIGN_FEED_WARNINGS = (
    feedparser.CharacterEncodingOverride,
    feedparser.NonXMLContentType,
)


class NewsExtractor:
    """Extractor for the top items of every catalogued news source.

    Issues exactly one GET per fetch and parses the body with the strategy
    matching the source's query: CSS selection over tolerant HTML, or
    entry mapping over a syndication feed. There is no retry.

    Attributes:
        settings: Configuration settings for the extractor
    """

    def __init__(self, settings: Settings):
        """Initialize the extractor.

        Args:
            settings: Configuration settings including timeout and user agent
        """
        self.settings = settings

    def fetch(self, source: NewsSource, limit: int) -> list[NewsItem]:
        """Fetch the top items of a source up to the specified limit.

        Args:
            source: The news source to fetch
            limit: Maximum number of items to return, at least 1

        Returns:
            List of NewsItem objects in page order, at most `limit` items

        Raises:
            ValueError: If limit is less than 1
            TransportError: On network or HTTP errors
            FeedParseError: If a feed source returns an unparseable document
            MissingTitleError: If a strict feed source has an untitled entry
        """
        if limit < 1:
            raise ValueError(f"limit must be at least 1, got {limit}")

        query = source.query
        try:
            if isinstance(query, HtmlQuery):
                items = self._fetch_html(source, query, limit)
            elif isinstance(query, FeedQuery):
                items = self._fetch_feed(source, query, limit)
            else:
                raise TypeError(f"Unsupported query for {source.label}: {query!r}")
        except Exception as e:
            logger.error(f"Fetch failed for {source.label}: {e}")
            raise

        logger.info(f"Fetched {len(items)} items from {source.label}")
        return items

    def _fetch_html(
        self, source: NewsSource, query: HtmlQuery, limit: int
    ) -> list[NewsItem]:
        """Fetch items by scraping an HTML page.

        Args:
            source: Source whose page is scraped
            query: Selectors and filtering rules for the page
            limit: Maximum number of items to return

        Returns:
            List of NewsItem objects parsed from HTML
        """
        content = self._fetch_text(source.url)
        soup = BeautifulSoup(content, "lxml")

        elements = soup.select(query.items)
        if query.limit_before_filter:
            elements = elements[:limit]

        items: list[NewsItem] = []
        for element in elements:
            item = self._parse_html_item(element, query)
            if item is None:
                logger.debug(f"Skipping incomplete {source.label} element")
                continue
            if query.collapse_adjacent and items and items[-1] == item:
                continue
            items.append(item)

        return items[:limit]

    def _parse_html_item(self, element: Any, query: HtmlQuery) -> NewsItem | None:
        """Parse a single HTML element into a NewsItem.

        Args:
            element: BeautifulSoup element matched by the item selector
            query: Field selectors for the element

        Returns:
            NewsItem or None if a required field is empty
        """
        title = _extract_text(element, query.title)
        if not title:
            return None

        description = None
        if query.description is not None:
            description = _extract_text(element, query.description) or None
            if description is None and query.description_required:
                return None

        return NewsItem(title=title, description=description)

    def _fetch_feed(
        self, source: NewsSource, query: FeedQuery, limit: int
    ) -> list[NewsItem]:
        """Fetch items from an RSS or Atom feed.

        Args:
            source: Source whose feed is read
            query: Entry mapping rules for the feed
            limit: Maximum number of items to return

        Returns:
            List of NewsItem objects parsed from the feed
        """
        content = self._fetch_bytes(source.url)
        feed = feedparser.parse(
            io.BytesIO(content),
            sanitize_html=False,
            resolve_relative_uris=False,
        )

        if feed.bozo and not isinstance(feed.get("bozo_exception"), BENIGN_FEED_WARNINGS):
            raise FeedParseError(source.url, str(feed.get("bozo_exception")))

        if not feed.entries and not feed.get("version"):
            raise FeedParseError(source.url, "unrecognized document format")

        items: list[NewsItem] = []
        if query.skip_untitled:
            for entry in feed.entries:
                item = self._parse_feed_entry(entry, query)
                if item is not None:
                    items.append(item)
            return items[:limit]

        for position, entry in enumerate(feed.entries[:limit]):
            item = self._parse_feed_entry(entry, query)
            if item is None:
                raise MissingTitleError(source.label, position)
            items.append(item)
        return items

    def _parse_feed_entry(self, entry: Any, query: FeedQuery) -> NewsItem | None:
        """Parse a single feed entry into a NewsItem.

        Returns:
            NewsItem or None if the entry has no title
        """
        title = entry.get("title")
        if not title or not title.strip():
            return None

        description = entry.get("description") if query.keep_description else None
        return NewsItem(title=title, description=description)

    def _fetch_text(self, url: str) -> str:
        """Fetch a URL and return the decoded response body."""
        return self._get(url).text

    def _fetch_bytes(self, url: str) -> bytes:
        """Fetch a URL and return the raw response body."""
        return self._get(url).content

    def _get(self, url: str) -> requests.Response:
        """Issue a single GET request with the body fully read.

        Args:
            url: URL to fetch

        Returns:
            Response with its content loaded

        Raises:
            TransportError: On network errors, error status codes or an
                unreadable body
        """
        headers = {
            "User-Agent": self.settings.user_agent,
            "Accept": "text/html, application/rss+xml, application/xml",
        }

        try:
            response = requests.get(
                url,
                headers=headers,
                timeout=self.settings.request_timeout_seconds,
            )
            response.raise_for_status()
            # Load the body so read errors surface here
            response.content
        except requests.RequestException as e:
            raise TransportError(url, str(e)) from e

        return response


def _extract_text(element: Any, selector: str) -> str:
    """Return the trimmed text of the first match of selector in element.

    Every text fragment is stripped before the fragments are joined. An
    empty selector reads the element's own text.
    """
    if not selector:
        return element.get_text(strip=True)

    field = element.select_one(selector)
    if field is None:
        return ""
    return field.get_text(strip=True)
