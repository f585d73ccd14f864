"""Remote feed API package."""

from cleanfeed.api.feed_items_mapper import FeedItemsMapper
from cleanfeed.api.http_client import HTTPClient, HTTPClientResponse
from cleanfeed.api.httpx_client import HttpxHTTPClient
from cleanfeed.api.remote_feed_item import (
    RemoteFeed,
    RemoteFeedItem,
    decode_remote_feed,
    encode_remote_feed,
)
from cleanfeed.api.remote_feed_loader import RemoteFeedLoader, RemoteFeedLoaderError

__all__ = [
    "HTTPClient",
    "HTTPClientResponse",
    "HttpxHTTPClient",
    "RemoteFeed",
    "RemoteFeedItem",
    "decode_remote_feed",
    "encode_remote_feed",
    "FeedItemsMapper",
    "RemoteFeedLoader",
    "RemoteFeedLoaderError",
]
