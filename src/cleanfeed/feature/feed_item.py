"""Feed item domain model."""

from uuid import UUID

from pydantic import AnyUrl, BaseModel, Field


class FeedItem(BaseModel):
    """A single item of the feed as seen by the rest of the application.

    Two items are equal when all four fields are equal; absent optional
    fields compare equal to each other.
    """

    model_config = {"frozen": True}

    id: UUID = Field(..., description="Globally unique item identifier")
    description: str | None = Field(default=None, description="Item description")
    location: str | None = Field(default=None, description="Where the image was taken")
    image_url: AnyUrl = Field(..., description="Image reference")
