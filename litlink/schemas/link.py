"""Link schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LinkCreate(BaseModel):
    """Create a new link."""

    title: str = Field(..., min_length=1, max_length=255)
    url: str = Field(..., min_length=1, max_length=2048)


class LinkResponse(BaseModel):
    """Link as listed on the owner's dashboard and public page."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    url: str


class LinkCreatedResponse(LinkResponse):
    """Full row returned after creating a link."""

    user_id: int
    created_at: datetime
