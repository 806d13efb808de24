"""News item data model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NewsItem:
    """A single entry extracted from a news source listing.

    Equality is structural, so two items with the same title and
    description compare equal regardless of where they came from.

    Attributes:
        title: Headline text, never empty
        description: Secondary text (tagline, summary) if the source has one
    """
    title: str
    description: str | None = None

    def __str__(self) -> str:
        if self.description is not None:
            return f"{self.title} - {self.description}"
        return self.title
