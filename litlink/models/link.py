"""Link model."""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from litlink.database import Base
from litlink.models.mixins import TimestampMixin


class Link(Base, TimestampMixin):
    """A single titled URL shown on its owner's public page."""

    __tablename__ = "links"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    title = Column(String(255), nullable=False)
    url = Column(String(2048), nullable=False)

    # Relationships
    owner = relationship("User", back_populates="links")
