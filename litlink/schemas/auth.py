"""Authentication schemas."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.networks import validate_email


class UserRegister(BaseModel):
    """User registration request."""

    model_config = ConfigDict(populate_by_name=True)

    username: str = Field(..., min_length=1, max_length=50)
    email: str = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)
    confirm_password: str = Field(..., alias="confirmPassword", max_length=128)
    birthday: date

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        """Reject malformed addresses but store the email exactly as typed.

        Login and recovery match the identifier by plain equality, so the
        normalized form returned by the validator is discarded.
        """
        validate_email(value)
        return value


class UserLogin(BaseModel):
    """Login request. The identifier is either a username or an email."""

    identifier: str = Field(..., max_length=255)
    password: str = Field(..., max_length=128)


class PasswordRecover(BaseModel):
    """Password recovery request using the birthday as the shared secret."""

    model_config = ConfigDict(populate_by_name=True)

    identifier: str = Field(..., max_length=255)
    birthday: date
    new_password: str = Field(..., alias="newPassword", min_length=1, max_length=128)


class UserSummary(BaseModel):
    """Public-safe user information returned after registration."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str


class RegisterResponse(BaseModel):
    message: str = "User registered successfully"
    user: UserSummary


class LoginResponse(BaseModel):
    """JWT token response."""

    token: str
    message: str = "Login successful"


class TokenIdentity(BaseModel):
    """Identity carried inside a verified access token."""

    id: int
    username: str


class MessageResponse(BaseModel):
    message: str
