"""Wire representation of the remote feed.

The remote service returns a document with a single ``items`` list. Each
object carries a mandatory ``id`` and ``image`` and optional
``description`` and ``location``.
"""

from uuid import UUID

from pydantic import AnyUrl, BaseModel, Field

from cleanfeed.exceptions import DecodingError


class RemoteFeedItem(BaseModel):
    """A feed item exactly as transmitted by the remote service."""

    model_config = {"frozen": True}

    id: UUID
    description: str | None = None
    location: str | None = None
    image: AnyUrl


class RemoteFeed(BaseModel):
    """Root of the wire payload."""

    items: list[RemoteFeedItem] = Field(...)


def decode_remote_feed(data: bytes) -> RemoteFeed:
    """Decode a raw payload into a RemoteFeed.

    Decoding is all-or-nothing: one bad item fails the whole payload.

    Args:
        data: Raw response body.

    Returns:
        The decoded feed. An empty ``items`` list is valid.

    Raises:
        DecodingError: When the body is not JSON, has the wrong shape, or
            any item lacks a valid id or image.
    """
    try:
        return RemoteFeed.model_validate_json(data)
    except ValueError as e:
        # pydantic.ValidationError subclasses ValueError
        raise DecodingError(f"Invalid feed payload: {e}") from e


def encode_remote_feed(items: list[RemoteFeedItem]) -> bytes:
    """Encode items into the wire payload, omitting absent optional fields."""
    return RemoteFeed(items=items).model_dump_json(exclude_none=True).encode("utf-8")
