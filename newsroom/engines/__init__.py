"""Engines module - news source catalog and extraction components."""

from newsroom.engines.errors import (
    FeedParseError,
    MissingTitleError,
    NewsroomError,
    TransportError,
    UnrecognizedSourceError,
)
from newsroom.engines.extractor import NewsExtractor
from newsroom.engines.news_item import NewsItem
from newsroom.engines.sources import FeedQuery, HtmlQuery, NewsSource

__all__ = [
    # Catalog
    "NewsSource",
    "HtmlQuery",
    "FeedQuery",
    # Extraction
    "NewsExtractor",
    "NewsItem",
    # Exceptions
    "NewsroomError",
    "TransportError",
    "FeedParseError",
    "UnrecognizedSourceError",
    "MissingTitleError",
]
