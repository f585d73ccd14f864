"""HTTPClient implementation backed by httpx."""

import httpx
import structlog

from cleanfeed.api.http_client import HTTPClientResponse
from cleanfeed.exceptions import TransportError
from cleanfeed.utils.http_client import create_http_client

logger = structlog.get_logger()


class HttpxHTTPClient:
    """Production transport for remote feed loaders.

    Status codes are passed through untouched; only failures to obtain a
    response at all are raised, as TransportError.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        timeout: int = 30,
        user_agent: str = "CleanFeed/1.0",
        follow_redirects: bool = True,
    ):
        """Initialize httpx transport.

        Args:
            client: Existing AsyncClient to use. Its lifecycle stays with
                the caller.
            timeout: Request timeout in seconds, when building a client.
            user_agent: User-Agent header, when building a client.
            follow_redirects: Whether to follow redirects, when building a client.
        """
        self._owns_client = client is None
        self._client = client or create_http_client(
            timeout=timeout,
            user_agent=user_agent,
            follow_redirects=follow_redirects,
        )

    async def get(self, url: str) -> HTTPClientResponse:
        """Fetch url and return its body and status code.

        Raises:
            TransportError: On timeout, connection failure or invalid URL.
        """
        logger.debug("Fetching feed", url=url)

        try:
            response = await self._client.get(url)
        except httpx.TimeoutException as e:
            logger.warning("Feed request timed out", url=url, error=str(e))
            raise TransportError(url, f"Request timed out: {e}") from e
        except (httpx.RequestError, httpx.InvalidURL) as e:
            logger.warning("Feed request failed", url=url, error=str(e))
            raise TransportError(url, f"Request failed: {e}") from e

        logger.debug("Feed response received", url=url, status_code=response.status_code)
        return HTTPClientResponse(data=response.content, status_code=response.status_code)

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxHTTPClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
