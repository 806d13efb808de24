"""Catalog of supported news sources and their extraction queries.

Each source carries its endpoint and the query used to pull items out of
the response as plain immutable data. The selectors are contracts against
third-party markup and need updating when a site changes its layout.
"""

from dataclasses import dataclass
from enum import Enum

from newsroom.engines.errors import UnrecognizedSourceError


@dataclass(frozen=True)
class HtmlQuery:
    """CSS selectors for scraping items out of an HTML page.

    Attributes:
        items: Selector matching one element per listed item
        title: Selector for the title inside an item; empty means the
            item element's own text is the title
        description: Selector for the description inside an item, or None
            when the source has no description
        description_required: Drop items whose description is empty
        collapse_adjacent: Collapse consecutive equal items into one
        limit_before_filter: Apply the limit to matched elements before
            items are mapped and filtered, rather than to the survivors
    """
    items: str
    title: str = ""
    description: str | None = None
    description_required: bool = False
    collapse_adjacent: bool = False
    limit_before_filter: bool = True


@dataclass(frozen=True)
class FeedQuery:
    """Rules for mapping syndication feed entries to news items.

    Attributes:
        skip_untitled: Drop entries without a title; when False an untitled
            entry aborts the fetch
        keep_description: Carry the entry description over to the item
    """
    skip_untitled: bool = True
    keep_description: bool = False


@dataclass(frozen=True)
class SourceDefinition:
    label: str
    url: str
    query: HtmlQuery | FeedQuery


class NewsSource(Enum):
    """Supported news sources, valued by their command-line token.

    Declaration order is the output order when every source is fetched.
    """
    HACKER_NEWS = "hackernews"
    PRODUCT_HUNT = "producthunt"
    TECHMEME = "techmeme"
    WSJ = "wsj"
    GITHUB_TRENDING = "github-trending"

    @classmethod
    def parse(cls, token: str) -> "NewsSource":
        """Resolve a token to its source.

        Matching is exact: no trimming and no case folding.

        Raises:
            UnrecognizedSourceError: If the token names no known source
        """
        for source in cls:
            if source.value == token:
                return source
        raise UnrecognizedSourceError(token)

    @classmethod
    def all(cls) -> list["NewsSource"]:
        """Return every source in declaration order."""
        return list(cls)

    @classmethod
    def tokens(cls) -> list[str]:
        return [source.value for source in cls]

    @property
    def token(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return _DEFINITIONS[self].label

    @property
    def url(self) -> str:
        return _DEFINITIONS[self].url

    @property
    def query(self) -> HtmlQuery | FeedQuery:
        return _DEFINITIONS[self].query

    def __str__(self) -> str:
        return self.label


_DEFINITIONS: dict[NewsSource, SourceDefinition] = {
    NewsSource.HACKER_NEWS: SourceDefinition(
        label="HACKER NEWS",
        url="https://news.ycombinator.com/",
        query=HtmlQuery(items=".titleline > a"),
    ),
    NewsSource.PRODUCT_HUNT: SourceDefinition(
        label="PRODUCT HUNT",
        url="https://www.producthunt.com/",
        query=HtmlQuery(
            items=(
                'div[class^="styles_container"]:nth-child(2) '
                'div[class^="styles_content"]'
            ),
            title="h3 a[data-test]",
            description="p a",
            description_required=True,
            # The page repeats a card right after itself
            collapse_adjacent=True,
            limit_before_filter=False,
        ),
    ),
    NewsSource.TECHMEME: SourceDefinition(
        label="TECHMEME",
        url="https://www.techmeme.com/feed.xml",
        query=FeedQuery(skip_untitled=True, keep_description=False),
    ),
    NewsSource.WSJ: SourceDefinition(
        label="WALL STREET JOURNAL",
        url="https://feeds.a.dj.com/rss/RSSWSJD.xml",
        query=FeedQuery(skip_untitled=False, keep_description=True),
    ),
    NewsSource.GITHUB_TRENDING: SourceDefinition(
        label="GITHUB TRENDING",
        url="https://github.com/trending",
        query=HtmlQuery(items="article.Box-row", title="h2, h1", description="p"),
    ),
}
