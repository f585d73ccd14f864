"""Abstract HTTP client interface using Protocol."""

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class HTTPClientResponse:
    """Raw bytes and status code returned by a transport."""

    data: bytes
    status_code: int


class HTTPClient(Protocol):
    """Transport capability consumed by remote loaders.

    Reason: The loader only needs "fetch bytes and a status code for a URL";
    keeping it a one-method Protocol lets tests and production plug in
    different transports.
    """

    async def get(self, url: str) -> HTTPClientResponse:
        """Fetch the resource at url.

        Implementations must be safe to call concurrently and must not
        raise on non-2xx status codes.

        Args:
            url: Absolute URL to fetch.

        Returns:
            HTTPClientResponse with the body and status code.

        Raises:
            TransportError: When the request could not be completed.
        """
        ...
