"""Public link page endpoint. No authentication."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from litlink.api.links import get_user_links
from litlink.database import get_db
from litlink.models.user import User
from litlink.schemas.link import LinkResponse
from litlink.schemas.public import PublicPageResponse, PublicProfile

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/u", tags=["public"])


@router.get("/{username}", response_model=PublicPageResponse)
async def get_public_page(
    username: str,
    db: Annotated[Session, Depends(get_db)],
):
    """Get a user's public profile and links by username."""
    try:
        user = db.query(User).filter(User.username == username).first()
        links = get_user_links(db, user.id) if user else []
    except SQLAlchemyError as e:
        logger.error(f"Fetching public page of '{username}' failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Server error while fetching public profile",
        ) from None

    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")

    return PublicPageResponse(
        profile=PublicProfile.model_validate(user),
        links=[LinkResponse.model_validate(link) for link in links],
    )
