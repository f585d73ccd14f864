"""Feed feature package."""

from cleanfeed.feature.feed_item import FeedItem
from cleanfeed.feature.feed_loader import (
    Failure,
    FeedLoader,
    LoadFeedResult,
    RemoteFeedLoaderError,
    Success,
)

__all__ = [
    "FeedItem",
    "FeedLoader",
    "LoadFeedResult",
    "Success",
    "Failure",
    "RemoteFeedLoaderError",
]
