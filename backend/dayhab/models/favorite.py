"""Favorite model — caregiver bookmarks with private notes and visit tracking."""

from sqlalchemy import Column, Boolean, Date, Text, ForeignKey, UniqueConstraint
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from dayhab.models.base import Base, TimestampMixin, UUIDMixin


class Favorite(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "favorites"

    user_id = Column(UUID(as_uuid=True), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    location_id = Column(UUID(as_uuid=True), ForeignKey("locations.id", ondelete="CASCADE"), nullable=False, index=True)
    notes = Column(Text)
    visited = Column(Boolean, default=False, nullable=False)
    visit_date = Column(Date)  # derived from visited, see favorite_service.save_visit_state

    # Relationships
    profile = relationship("Profile", back_populates="favorites")
    location = relationship("Location", back_populates="favorites")

    __table_args__ = (
        UniqueConstraint("user_id", "location_id", name="uq_favorites_user_location"),
    )
