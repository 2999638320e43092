"""FastAPI dependencies for authentication and collaborators."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from litlink.config import Settings, get_settings
from litlink.schemas.auth import TokenIdentity
from litlink.services.auth import decode_access_token
from litlink.services.image_upload import ImageUploader

# Missing credentials are reported by get_current_identity, not by HTTPBearer
security = HTTPBearer(auto_error=False)


def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenIdentity:
    """Get the identity of the caller from the bearer token.

    A missing token is a 401; a token that fails verification is a 403.
    The identity comes from the token alone, the database is not consulted.
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access Denied. No token provided.",
            headers={"WWW-Authenticate": "Bearer"},
        )

    identity = decode_access_token(settings, credentials.credentials)
    if identity is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token.",
        )

    return identity


def get_image_uploader(
    settings: Annotated[Settings, Depends(get_settings)],
) -> ImageUploader:
    """Get image uploader instance."""
    return ImageUploader(settings)
