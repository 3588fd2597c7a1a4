"""Caregiver profile — one per account, created at registration."""

from sqlalchemy import Column, String, ForeignKey
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from dayhab.models.base import Base, TimestampMixin


class Profile(TimestampMixin, Base):
    __tablename__ = "profiles"

    # Shares its primary key with the account
    id = Column(UUID(as_uuid=True), ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    email = Column(String(255))
    full_name = Column(String(255), default="")

    # Relationships
    user = relationship("User", back_populates="profile")
    favorites = relationship("Favorite", back_populates="profile", cascade="all, delete-orphan", passive_deletes=True)
    reviews = relationship("Review", back_populates="profile", cascade="all, delete-orphan", passive_deletes=True)
