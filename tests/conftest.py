"""Test configuration and fixtures."""

import asyncio
import json
from uuid import UUID, uuid4

import pytest

from cleanfeed.api.http_client import HTTPClientResponse
from cleanfeed.api.remote_feed_loader import RemoteFeedLoader
from cleanfeed.exceptions import TransportError
from cleanfeed.feature.feed_item import FeedItem

ANY_URL = "https://a-given-url.com"


class HTTPClientSpy:
    """HTTPClient double that records requests and resolves them on demand."""

    def __init__(self):
        self.messages: list[tuple[str, asyncio.Future]] = []

    @property
    def requested_urls(self) -> list[str]:
        return [url for url, _ in self.messages]

    async def get(self, url: str) -> HTTPClientResponse:
        future = asyncio.get_running_loop().create_future()
        self.messages.append((url, future))
        return await future

    def complete_with_error(self, error: Exception | None = None, index: int = 0) -> None:
        url, future = self.messages[index]
        future.set_exception(error or TransportError(url, "offline"))

    def complete(self, status_code: int, data: bytes = b"", index: int = 0) -> None:
        _, future = self.messages[index]
        future.set_result(HTTPClientResponse(data=data, status_code=status_code))


def make_item(
    id: UUID | None = None,
    description: str | None = None,
    location: str | None = None,
    image_url: str = "https://a-url.com",
) -> tuple[FeedItem, dict]:
    """Build a FeedItem and its wire JSON object."""
    item = FeedItem(
        id=id or uuid4(),
        description=description,
        location=location,
        image_url=image_url,
    )
    json_item = {
        "id": str(item.id),
        "description": description,
        "location": location,
        "image": image_url,
    }
    return item, {key: value for key, value in json_item.items() if value is not None}


def make_items_json(items: list[dict]) -> bytes:
    return json.dumps({"items": items}).encode("utf-8")


@pytest.fixture
def client():
    """Transport spy."""
    return HTTPClientSpy()


@pytest.fixture
def sut(client):
    """Loader under test, wired to the transport spy."""
    return RemoteFeedLoader(url=ANY_URL, client=client)


@pytest.fixture
def sample_feed():
    """Two items with a mix of present and absent optional fields."""
    item1 = make_item(
        id=UUID("73A7F70C-75DA-4C2E-B5A3-EED40DC53AA6"),
        image_url="https://url-1.com",
    )
    item2 = make_item(
        id=UUID("BA298A85-6275-48D3-8315-9C8F7C1CD109"),
        description="a description",
        location="a location",
        image_url="https://url-2.com",
    )
    return [item1, item2]
