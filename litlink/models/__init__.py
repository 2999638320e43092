"""SQLAlchemy models."""

from litlink.models.link import Link
from litlink.models.user import User

__all__ = [
    "User",
    "Link",
]
