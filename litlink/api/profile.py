"""Profile API endpoints for the authenticated user."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from litlink.api.dependencies import get_current_identity, get_image_uploader
from litlink.config import Settings, get_settings
from litlink.database import get_db
from litlink.schemas.auth import TokenIdentity
from litlink.schemas.profile import ProfileResponse, ProfileUpdate, ProfileUpdateResponse
from litlink.services.image_upload import ImageUploader, ImageUploadError
from litlink.services.profile import get_profile, update_profile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/user", tags=["profile"])


@router.get("/profile", response_model=ProfileResponse)
async def read_profile(
    identity: Annotated[TokenIdentity, Depends(get_current_identity)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get the profile fields of the logged-in user."""
    try:
        user = get_profile(db, identity.id)
    except SQLAlchemyError as e:
        logger.error(f"Fetching profile of user {identity.id} failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch profile",
        ) from None

    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user


@router.put("/profile", response_model=ProfileUpdateResponse)
async def write_profile(
    profile_data: ProfileUpdate,
    identity: Annotated[TokenIdentity, Depends(get_current_identity)],
    db: Annotated[Session, Depends(get_db)],
    uploader: Annotated[ImageUploader, Depends(get_image_uploader)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Update name and quotes, uploading a new profile image if one is sent."""
    try:
        user = await update_profile(
            db,
            uploader,
            folder=settings.imagekit_folder,
            user_id=identity.id,
            name=profile_data.name,
            quotes=profile_data.quotes,
            image_base64=profile_data.image_base64,
        )
    except (ImageUploadError, SQLAlchemyError) as e:
        db.rollback()
        logger.error(f"Updating profile of user {identity.id} failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update profile",
        ) from None

    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    return ProfileUpdateResponse(image_url=user.profile_image_url)
