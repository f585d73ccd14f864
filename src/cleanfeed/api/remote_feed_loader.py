"""Remote feed loader implementation.

Fetches the feed through an injected HTTPClient, classifies the response
and delivers the outcome to a completion callback.
"""

import asyncio
import weakref
from collections.abc import Callable

from cleanfeed.api.feed_items_mapper import FeedItemsMapper
from cleanfeed.api.http_client import HTTPClient
from cleanfeed.exceptions import ConnectivityError, InvalidDataError
from cleanfeed.feature.feed_item import FeedItem
from cleanfeed.feature.feed_loader import (
    Failure,
    LoadFeedResult,
    RemoteFeedLoaderError,
    Success,
)

__all__ = ["RemoteFeedLoader", "RemoteFeedLoaderError"]

# asyncio only keeps weak references to tasks
_pending_loads: set[asyncio.Task] = set()


class RemoteFeedLoader:
    """Loads feed items from a remote URL.

    Each call to load() issues exactly one request; the loader keeps no
    state between calls, so any number of loads may run concurrently.
    """

    def __init__(self, url: str, client: HTTPClient):
        """Initialize remote feed loader.

        Args:
            url: Feed endpoint URL.
            client: Transport used to fetch the feed.
        """
        self._url = url
        self._client = client

    @property
    def url(self) -> str:
        """Feed endpoint URL."""
        return self._url

    def load(self, completion: Callable[[LoadFeedResult], None]) -> asyncio.Task:
        """Start loading the feed in the running event loop.

        Must be called from a coroutine running in an event loop.
        The completion is called exactly once with Success or Failure,
        unless the loader has been garbage-collected by the time the
        transport resolves, in which case nothing is delivered.

        Args:
            completion: Receives the LoadFeedResult.

        Returns:
            The task running the load.

        Raises:
            RuntimeError: When no event loop is running.
        """
        task = asyncio.get_running_loop().create_task(
            _deliver(weakref.ref(self), self._url, self._client, completion)
        )
        _pending_loads.add(task)
        task.add_done_callback(_pending_loads.discard)
        return task

    async def load_feed(self) -> list[FeedItem]:
        """Load the feed and return its items.

        Returns:
            Feed items in source order.

        Raises:
            ConnectivityError: When the transport failed.
            InvalidDataError: When the response cannot be trusted.
        """
        result = await _fetch(self._url, self._client)
        if isinstance(result, Success):
            return result.items
        if result.error is RemoteFeedLoaderError.CONNECTIVITY:
            raise ConnectivityError(f"Could not reach {self._url}")
        raise InvalidDataError(f"Invalid feed data from {self._url}")


async def _fetch(url: str, client: HTTPClient) -> LoadFeedResult:
    try:
        response = await client.get(url)
    except Exception:
        # Every transport failure is a connectivity failure, whatever the cause
        return Failure(RemoteFeedLoaderError.CONNECTIVITY)

    try:
        items = FeedItemsMapper.map(response.data, response.status_code)
    except InvalidDataError:
        return Failure(RemoteFeedLoaderError.INVALID_DATA)
    return Success(items)


async def _deliver(
    loader_ref: "weakref.ref[RemoteFeedLoader]",
    url: str,
    client: HTTPClient,
    completion: Callable[[LoadFeedResult], None],
) -> None:
    result = await _fetch(url, client)
    if loader_ref() is None:
        return
    completion(result)
