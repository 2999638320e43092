"""Authentication API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from litlink.config import Settings, get_settings
from litlink.database import get_db
from litlink.schemas.auth import (
    LoginResponse,
    MessageResponse,
    PasswordRecover,
    RegisterResponse,
    UserLogin,
    UserRegister,
    UserSummary,
)
from litlink.services.auth import (
    create_access_token,
    create_user,
    get_user_by_identifier,
    recover_password,
    verify_password,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: UserRegister,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    if user_data.password != user_data.confirm_password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Passwords do not match",
        )

    try:
        user = create_user(
            db,
            username=user_data.username,
            email=user_data.email,
            password=user_data.password,
            birthday=user_data.birthday,
        )
    except SQLAlchemyError as e:
        # Which column collided is deliberately not reported
        logger.warning(f"Registration rejected for username '{user_data.username}': {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Registration failed. Username or email might already exist.",
        ) from None

    return RegisterResponse(user=UserSummary.model_validate(user))


@router.post("/login", response_model=LoginResponse)
async def login(
    credentials: UserLogin,
    db: Annotated[Session, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Login with a username or email and a password."""
    try:
        user = get_user_by_identifier(db, credentials.identifier)
    except SQLAlchemyError as e:
        logger.error(f"Login lookup failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Login failed due to server error.",
        ) from None

    if not user:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User not found")

    if not verify_password(credentials.password, user.password_hash):
        logger.info(f"Invalid password for user {user.id}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid password")

    return LoginResponse(token=create_access_token(settings, user.id, user.username))


@router.post("/recover", response_model=MessageResponse)
async def recover(
    recovery: PasswordRecover,
    db: Annotated[Session, Depends(get_db)],
):
    """Reset a password by proving the account's birthday."""
    try:
        user = recover_password(
            db, recovery.identifier, recovery.birthday, recovery.new_password
        )
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Password recovery failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Recovery failed due to server error.",
        ) from None

    if not user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid credentials or birthday",
        )

    return MessageResponse(message="Password updated successfully")
