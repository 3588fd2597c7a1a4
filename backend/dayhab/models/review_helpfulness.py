"""Review helpfulness vote — one per (review, caregiver)."""

from sqlalchemy import Column, Boolean, DateTime, ForeignKey, UniqueConstraint, func
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship

from dayhab.models.base import Base, UUIDMixin


class ReviewHelpfulness(UUIDMixin, Base):
    __tablename__ = "review_helpfulness"

    review_id = Column(UUID(as_uuid=True), ForeignKey("reviews.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(UUID(as_uuid=True), ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False)
    is_helpful = Column(Boolean, default=True, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    review = relationship("Review", back_populates="helpfulness_votes")

    __table_args__ = (
        UniqueConstraint("review_id", "user_id", name="uq_review_helpfulness_review_user"),
    )
