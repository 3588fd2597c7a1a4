"""Add reviews, helpfulness votes and the location_ratings view.

Revision ID: 002
Revises: 001
Create Date: 2025-10-20
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # 1. reviews
    op.create_table(
        "reviews",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", UUID(as_uuid=True), sa.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False),
        sa.Column("location_id", UUID(as_uuid=True), sa.ForeignKey("locations.id", ondelete="CASCADE"), nullable=False),
        sa.Column("organization_id", UUID(as_uuid=True), sa.ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False),
        sa.Column("rating", sa.Integer, nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("review_text", sa.Text, nullable=False),
        sa.Column("verified_visit", sa.Boolean, server_default=sa.text("false"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("user_id", "location_id", name="uq_reviews_user_location"),
        sa.CheckConstraint("rating >= 1 AND rating <= 5", name="ck_reviews_rating_range"),
    )
    op.create_index("ix_reviews_user_id", "reviews", ["user_id"])
    op.create_index("ix_reviews_location_id", "reviews", ["location_id"])

    # 2. review_helpfulness
    op.create_table(
        "review_helpfulness",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("review_id", UUID(as_uuid=True), sa.ForeignKey("reviews.id", ondelete="CASCADE"), nullable=False),
        sa.Column("user_id", UUID(as_uuid=True), sa.ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False),
        sa.Column("is_helpful", sa.Boolean, server_default=sa.text("true"), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("review_id", "user_id", name="uq_review_helpfulness_review_user"),
    )
    op.create_index("ix_review_helpfulness_review_id", "review_helpfulness", ["review_id"])

    # 3. location_ratings — same numbers as services.rating_aggregator
    op.execute(
        """
        CREATE OR REPLACE VIEW location_ratings AS
        SELECT
            location_id,
            COUNT(*) AS review_count,
            ROUND(AVG(rating)::numeric, 1) AS average_rating
        FROM reviews
        GROUP BY location_id
        """
    )


def downgrade() -> None:
    op.execute("DROP VIEW IF EXISTS location_ratings")
    op.drop_table("review_helpfulness")
    op.drop_table("reviews")
