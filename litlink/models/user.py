"""User model."""

from sqlalchemy import Column, Date, Integer, String, Text
from sqlalchemy.orm import relationship

from litlink.database import Base
from litlink.models.mixins import TimestampMixin


class User(Base, TimestampMixin):
    """Account owner of a public link page."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    birthday = Column(Date, nullable=False)  # doubles as the password recovery secret

    # Public profile
    name = Column(String(255), nullable=True)
    quotes = Column(Text, nullable=True)
    profile_image_url = Column(String(1024), nullable=True)

    # Relationships
    links = relationship(
        "Link", back_populates="owner", cascade="all, delete-orphan", order_by="Link.id.desc()"
    )
