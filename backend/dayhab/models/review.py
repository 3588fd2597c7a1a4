"""Review model — a caregiver's rating and narrative about a location."""

from sqlalchemy import (
    Column, String, Text, Integer, Boolean, ForeignKey, UniqueConstraint, CheckConstraint, Index,
)
from sqlalchemy.dialects.postgresql import UUID, JSONB, ARRAY
from sqlalchemy.orm import relationship

from dayhab.models.base import Base, TimestampMixin, UUIDMixin


class Review(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "reviews"

    user_id = Column(UUID(as_uuid=True), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    location_id = Column(UUID(as_uuid=True), ForeignKey("locations.id", ondelete="CASCADE"), nullable=False, index=True)
    organization_id = Column(UUID(as_uuid=True), ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False)

    rating = Column(Integer, nullable=False)
    title = Column(String(255), nullable=False)
    review_text = Column(Text, nullable=False)

    # Sub-ratings keyed by category (dignity, activities, safety), each 1-5
    program_ratings = Column(JSONB, server_default="{}", nullable=False, default=dict)
    verified_visit = Column(Boolean, default=False, nullable=False)

    # Submission form choices
    review_type = Column(String(20))  # general, safety, staff, program, facilities, other
    action_taken = Column(String(20))  # reported, discussed, consulted, other
    visibility = Column(String(10), default="public", nullable=False)  # public, private

    # Moderation
    sanitized_text = Column(Text)
    tags = Column(ARRAY(String), default=list)
    flagged = Column(Boolean, default=False, nullable=False)
    status = Column(String(20), default="published", nullable=False, index=True)  # published, pending, private

    # Relationships
    profile = relationship("Profile", back_populates="reviews")
    location = relationship("Location", back_populates="reviews")
    helpfulness_votes = relationship(
        "ReviewHelpfulness", back_populates="review", cascade="all, delete-orphan", passive_deletes=True,
    )

    __table_args__ = (
        UniqueConstraint("user_id", "location_id", name="uq_reviews_user_location"),
        CheckConstraint("rating >= 1 AND rating <= 5", name="ck_reviews_rating_range"),
        Index("idx_reviews_location_status", "location_id", "status"),
    )
