"""Pydantic schemas for API requests and responses."""

from litlink.schemas.auth import (
    LoginResponse,
    MessageResponse,
    PasswordRecover,
    RegisterResponse,
    TokenIdentity,
    UserLogin,
    UserRegister,
    UserSummary,
)
from litlink.schemas.link import LinkCreate, LinkCreatedResponse, LinkResponse
from litlink.schemas.profile import ProfileResponse, ProfileUpdate, ProfileUpdateResponse
from litlink.schemas.public import PublicPageResponse, PublicProfile

__all__ = [
    "UserRegister",
    "UserLogin",
    "PasswordRecover",
    "UserSummary",
    "RegisterResponse",
    "LoginResponse",
    "TokenIdentity",
    "MessageResponse",
    "ProfileResponse",
    "ProfileUpdate",
    "ProfileUpdateResponse",
    "LinkCreate",
    "LinkResponse",
    "LinkCreatedResponse",
    "PublicProfile",
    "PublicPageResponse",
]
