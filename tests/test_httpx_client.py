"""Tests for the httpx-backed HTTPClient."""

import httpx
import pytest

from cleanfeed.api.http_client import HTTPClientResponse
from cleanfeed.api.httpx_client import HttpxHTTPClient
from cleanfeed.api.remote_feed_loader import RemoteFeedLoader
from cleanfeed.exceptions import InvalidDataError, TransportError
from cleanfeed.utils.http_client import create_http_client
from tests.conftest import ANY_URL, make_items_json


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


async def test_get_requests_the_given_url():
    requested = []

    def handler(request: httpx.Request) -> httpx.Response:
        requested.append((request.method, str(request.url)))
        return httpx.Response(200)

    async with mock_client(handler) as http:
        await HttpxHTTPClient(client=http).get("https://a-url.com/feed")

    assert requested == [("GET", "https://a-url.com/feed")]


@pytest.mark.parametrize("status_code", [200, 404, 500])
async def test_get_returns_body_and_status_code_without_raising(status_code):
    async with mock_client(lambda request: httpx.Response(status_code, content=b"body")) as http:
        response = await HttpxHTTPClient(client=http).get(ANY_URL)

    assert response == HTTPClientResponse(data=b"body", status_code=status_code)


@pytest.mark.parametrize(
    "error_type",
    [httpx.ConnectError, httpx.ReadTimeout, httpx.ConnectTimeout, httpx.RemoteProtocolError],
)
async def test_get_raises_transport_error_on_request_failure(error_type):
    def handler(request: httpx.Request) -> httpx.Response:
        raise error_type("boom", request=request)

    async with mock_client(handler) as http:
        with pytest.raises(TransportError) as exc_info:
            await HttpxHTTPClient(client=http).get(ANY_URL)

    assert exc_info.value.url == ANY_URL
    assert isinstance(exc_info.value.__cause__, error_type)


async def test_aclose_leaves_injected_client_open():
    http = mock_client(lambda request: httpx.Response(200))

    async with HttpxHTTPClient(client=http):
        pass

    assert not http.is_closed
    await http.aclose()


async def test_aclose_closes_owned_client():
    client = HttpxHTTPClient(timeout=5)

    await client.aclose()

    assert client._client.is_closed


async def test_create_http_client_sends_user_agent():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.headers["User-Agent"])
        return httpx.Response(200)

    transport = httpx.MockTransport(handler)
    async with create_http_client(user_agent="CleanFeed/test", transport=transport) as http:
        await http.get(ANY_URL)

    assert seen == ["CleanFeed/test"]


async def test_remote_feed_loader_over_httpx_loads_items(sample_feed):
    body = make_items_json([json_item for _, json_item in sample_feed])

    async with mock_client(lambda request: httpx.Response(200, content=body)) as http:
        loader = RemoteFeedLoader(url=ANY_URL, client=HttpxHTTPClient(client=http))
        items = await loader.load_feed()

    assert items == [item for item, _ in sample_feed]


async def test_remote_feed_loader_over_httpx_rejects_server_error():
    async with mock_client(lambda request: httpx.Response(500, json={"items": []})) as http:
        loader = RemoteFeedLoader(url=ANY_URL, client=HttpxHTTPClient(client=http))

        with pytest.raises(InvalidDataError):
            await loader.load_feed()
