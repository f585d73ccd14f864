"""Abstract feed loader interface using Protocol."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol

from cleanfeed.feature.feed_item import FeedItem


class RemoteFeedLoaderError(str, Enum):
    """Failure kinds a remote feed loader can deliver."""

    CONNECTIVITY = "connectivity"
    INVALID_DATA = "invalid_data"


@dataclass(frozen=True)
class Success:
    """A completed load carrying every item, in source order."""

    items: list[FeedItem]


@dataclass(frozen=True)
class Failure:
    """A completed load that produced no items."""

    error: RemoteFeedLoaderError


LoadFeedResult = Success | Failure


class FeedLoader(Protocol):
    """Feed loading abstraction protocol.

    Reason: Callers depend only on "load the feed", never on where the
    items come from.
    """

    def load(self, completion: Callable[[LoadFeedResult], None]) -> Any:
        """Start loading the feed.

        Args:
            completion: Called exactly once with the outcome.
        """
        ...
