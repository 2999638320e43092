"""Public page schemas."""

from pydantic import BaseModel, ConfigDict

from litlink.schemas.link import LinkResponse


class PublicProfile(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None
    quotes: str | None
    profile_image_url: str | None


class PublicPageResponse(BaseModel):
    """Everything a visitor needs to render a user's link page."""

    profile: PublicProfile
    links: list[LinkResponse]
