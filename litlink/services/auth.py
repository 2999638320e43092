"""Authentication service for JWT and password handling."""

import logging
from datetime import UTC, date, datetime, timedelta

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError
from sqlalchemy import or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from litlink.config import Settings
from litlink.models.user import User
from litlink.schemas.auth import TokenIdentity

logger = logging.getLogger(__name__)

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)


def create_access_token(settings: Settings, user_id: int, username: str) -> str:
    """Create a JWT access token that expires after the configured window."""
    expire = datetime.now(UTC) + timedelta(minutes=settings.jwt_expiration_minutes)
    to_encode = {
        "id": user_id,
        "username": username,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(settings: Settings, token: str) -> TokenIdentity | None:
    """Verify a JWT token and return the identity it carries.

    Returns None when the signature does not match, the token has expired,
    or the payload does not hold an ``id``/``username`` pair.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None

    try:
        return TokenIdentity.model_validate(payload)
    except ValidationError:
        return None


def get_user_by_identifier(db: Session, identifier: str) -> User | None:
    """Get a user whose username or email equals the identifier."""
    return (
        db.query(User)
        .filter(or_(User.username == identifier, User.email == identifier))
        .first()
    )


def create_user(
    db: Session, username: str, email: str, password: str, birthday: date
) -> User:
    """Create a new user.

    Raises IntegrityError (a SQLAlchemyError) when the username or email is
    already taken; the session is rolled back before re-raising.
    """
    user = User(
        username=username,
        email=email,
        password_hash=get_password_hash(password),
        birthday=birthday,
    )
    db.add(user)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(user)
    logger.info(f"Registered user {user.id} ({user.username})")
    return user


def recover_password(
    db: Session, identifier: str, birthday: date, new_password: str
) -> User | None:
    """Reset the password of the user matching both identifier and birthday.

    Returns None without telling which of the two did not match. Tokens
    issued before the reset stay valid until they expire.
    """
    user = (
        db.query(User)
        .filter(
            or_(User.username == identifier, User.email == identifier),
            User.birthday == birthday,
        )
        .first()
    )
    if not user:
        return None

    user.password_hash = get_password_hash(new_password)
    db.commit()
    logger.info(f"Password reset for user {user.id}")
    return user
