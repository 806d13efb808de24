"""Exceptions raised while resolving and extracting news sources."""


class NewsroomError(Exception):
    """Base class for all news extraction errors."""


class TransportError(NewsroomError):
    """Raised when a source endpoint cannot be fetched.

    Covers DNS failures, refused or reset connections, timeouts, non-success
    HTTP status codes and response bodies that cannot be decoded. The
    underlying ``requests`` exception is kept as ``__cause__``.

    Attributes:
        url: The endpoint that failed
    """

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Failed to fetch {url}: {message}")


class FeedParseError(NewsroomError):
    """Raised when a response body cannot be parsed as a syndication feed.

    Attributes:
        url: The feed endpoint
    """

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Invalid RSS/Atom feed at {url}: {message}")


class UnrecognizedSourceError(NewsroomError):
    """Raised when a token does not name a known news source.

    Attributes:
        token: The token exactly as given
    """

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unrecognized news source: {token!r}")


class MissingTitleError(NewsroomError):
    """Raised when a feed entry that must carry a title has none.

    Only sources whose feeds guarantee a title on every entry raise this;
    the whole fetch for that source is aborted.

    Attributes:
        source_label: Display label of the source
        position: Zero-based position of the entry in the feed
    """

    def __init__(self, source_label: str, position: int):
        self.source_label = source_label
        self.position = position
        super().__init__(
            f"{source_label} feed entry #{position} has no title"
        )
