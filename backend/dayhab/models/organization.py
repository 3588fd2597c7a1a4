"""Organization model — the providers that operate day habilitation programs."""

from sqlalchemy import Column, String, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import relationship

from dayhab.models.base import Base, TimestampMixin, UUIDMixin


class Organization(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "organizations"

    name = Column(String(255), unique=True, nullable=False, index=True)
    description = Column(Text)

    # Contact
    phone = Column(String(50))
    email = Column(String(255))
    website = Column(String(500))

    # Service category labels, e.g. "Life Skills Training"
    services = Column(ARRAY(String), default=list)

    # Relationships
    locations = relationship("Location", back_populates="organization", cascade="all, delete-orphan")
