"""Mapping between HTTP responses, the wire format and FeedItem."""

from cleanfeed.api.remote_feed_item import (
    RemoteFeedItem,
    decode_remote_feed,
    encode_remote_feed,
)
from cleanfeed.exceptions import DecodingError, InvalidDataError
from cleanfeed.feature.feed_item import FeedItem


class FeedItemsMapper:
    """Turns a raw response into domain items.

    Only a 200 response with a decodable body yields items; anything else
    is invalid data.
    """

    OK_200 = 200

    @classmethod
    def map(cls, data: bytes, status_code: int) -> list[FeedItem]:
        """Validate a response and map its items.

        Args:
            data: Raw response body.
            status_code: HTTP status code of the response.

        Returns:
            Feed items in payload order.

        Raises:
            InvalidDataError: When the status is not 200 or the body does
                not decode.
        """
        if status_code != cls.OK_200:
            raise InvalidDataError(f"Unexpected status code {status_code}")

        try:
            feed = decode_remote_feed(data)
        except DecodingError as e:
            raise InvalidDataError(str(e)) from e

        return [cls.to_feed_item(item) for item in feed.items]

    @staticmethod
    def to_feed_item(item: RemoteFeedItem) -> FeedItem:
        return FeedItem(
            id=item.id,
            description=item.description,
            location=item.location,
            image_url=item.image,
        )

    @staticmethod
    def to_remote_item(item: FeedItem) -> RemoteFeedItem:
        return RemoteFeedItem(
            id=item.id,
            description=item.description,
            location=item.location,
            image=item.image_url,
        )

    @classmethod
    def encode(cls, items: list[FeedItem]) -> bytes:
        """Encode domain items into a wire payload."""
        return encode_remote_feed([cls.to_remote_item(item) for item in items])
