"""Link API endpoints for the authenticated user."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from litlink.api.dependencies import get_current_identity
from litlink.database import get_db
from litlink.models.link import Link
from litlink.schemas.auth import MessageResponse, TokenIdentity
from litlink.schemas.link import LinkCreate, LinkCreatedResponse, LinkResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/links", tags=["links"])


def get_user_links(db: Session, user_id: int) -> list[Link]:
    """Get all links of a user, newest first."""
    return db.query(Link).filter(Link.user_id == user_id).order_by(Link.id.desc()).all()


@router.get("", response_model=list[LinkResponse])
async def get_links(
    identity: Annotated[TokenIdentity, Depends(get_current_identity)],
    db: Annotated[Session, Depends(get_db)],
):
    """Get all links owned by the current user."""
    try:
        return get_user_links(db, identity.id)
    except SQLAlchemyError as e:
        logger.error(f"Fetching links of user {identity.id} failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch links",
        ) from None


@router.post("", response_model=LinkCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_link(
    link_data: LinkCreate,
    identity: Annotated[TokenIdentity, Depends(get_current_identity)],
    db: Annotated[Session, Depends(get_db)],
):
    """Create a new link owned by the current user."""
    link = Link(user_id=identity.id, title=link_data.title, url=link_data.url)
    try:
        db.add(link)
        db.commit()
        db.refresh(link)
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Creating link for user {identity.id} failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create link",
        ) from None
    return link


@router.delete("/{link_id}", response_model=MessageResponse)
async def delete_link(
    link_id: int,
    identity: Annotated[TokenIdentity, Depends(get_current_identity)],
    db: Annotated[Session, Depends(get_db)],
):
    """Delete one of the current user's links.

    Ids that do not exist or belong to someone else are ignored and get the
    same response.
    """
    try:
        db.query(Link).filter(Link.id == link_id, Link.user_id == identity.id).delete(
            synchronize_session=False
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Deleting link {link_id} of user {identity.id} failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete link",
        ) from None
    return MessageResponse(message="Link deleted successfully")
