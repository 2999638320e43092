"""Profile schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ProfileResponse(BaseModel):
    """Display fields of the authenticated user."""

    model_config = ConfigDict(from_attributes=True)

    name: str | None
    quotes: str | None
    profile_image_url: str | None


class ProfileUpdate(BaseModel):
    """Update the display fields, optionally replacing the avatar.

    ``image_base64`` carries the image inline (raw base64 or a data URI).
    When it is omitted or empty the stored image URL is kept.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(None, max_length=255)
    quotes: str | None = Field(None, max_length=2000)
    image_base64: str | None = Field(None, alias="imageBase64")


class ProfileUpdateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = "Profile updated successfully"
    image_url: str | None = Field(None, alias="imageUrl")
