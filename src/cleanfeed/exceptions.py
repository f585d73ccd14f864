"""Custom exceptions for CleanFeed.

Provides a structured exception hierarchy for transport, decoding and
feed loading failures.
"""

from cleanfeed.feature.feed_loader import RemoteFeedLoaderError


class CleanFeedError(Exception):
    """Base exception class for all CleanFeed errors."""

    pass


class TransportError(CleanFeedError):
    """Raised by an HTTP client when the request could not be completed.

    Covers every connectivity problem (DNS, refused connection, timeout,
    TLS, malformed URL). Callers do not distinguish between causes.

    Attributes:
        url: The URL that was being fetched.
    """

    def __init__(self, url: str, message: str):
        self.url = url
        super().__init__(f"Failed to fetch {url}: {message}")


class DecodingError(CleanFeedError):
    """Raised when a payload does not decode into a remote feed."""

    pass


class FeedLoadError(CleanFeedError):
    """Base class for failures surfaced by a feed loader.

    Attributes:
        reason: The classified failure kind.
    """

    reason: RemoteFeedLoaderError


class ConnectivityError(FeedLoadError):
    """Raised when the transport failed to deliver a response."""

    reason = RemoteFeedLoaderError.CONNECTIVITY


class InvalidDataError(FeedLoadError):
    """Raised when a response has a non-200 status or an undecodable body."""

    reason = RemoteFeedLoaderError.INVALID_DATA
