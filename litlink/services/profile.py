"""Profile read/write for the authenticated user."""

import logging
import time

from sqlalchemy.orm import Session

from litlink.models.user import User
from litlink.services.image_upload import ImageUploader

logger = logging.getLogger(__name__)


def get_profile(db: Session, user_id: int) -> User | None:
    """Get the user row holding the profile fields."""
    return db.query(User).filter(User.id == user_id).first()


def profile_image_file_name(user_id: int) -> str:
    """Build a unique file name for a freshly uploaded avatar."""
    return f"profile_{user_id}_{int(time.time() * 1000)}.jpg"


async def update_profile(
    db: Session,
    uploader: ImageUploader,
    folder: str,
    user_id: int,
    name: str | None,
    quotes: str | None,
    image_base64: str | None = None,
) -> User | None:
    """Persist name, quotes and the profile image URL in one update.

    With an image the upload result becomes the new URL. Without one the
    stored URL is read back and written unchanged. The read and the write
    are separate statements, so a concurrent update of the same user can
    interleave between them.

    Raises ImageUploadError if the upload fails; nothing is saved then.
    Returns None if the user does not exist.
    """
    user = get_profile(db, user_id)
    if not user:
        return None

    if image_base64:
        image_url = await uploader.upload(
            file=image_base64,
            file_name=profile_image_file_name(user_id),
            folder=folder,
        )
    else:
        image_url = user.profile_image_url

    db.query(User).filter(User.id == user_id).update(
        {
            User.name: name,
            User.quotes: quotes,
            User.profile_image_url: image_url,
        },
        synchronize_session="fetch",
    )
    db.commit()
    db.refresh(user)
    logger.info(f"Updated profile for user {user_id}")
    return user
