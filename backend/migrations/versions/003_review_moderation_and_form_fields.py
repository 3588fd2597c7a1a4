"""Add program ratings, moderation and submission form columns to reviews.

Also adds the unique constraints on organization name and location address.

Revision ID: 003
Revises: 002
Create Date: 2025-10-29
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB, ARRAY

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Program sub-ratings
    op.add_column("reviews", sa.Column("program_ratings", JSONB, server_default=sa.text("'{}'::jsonb"), nullable=False))

    # Submission form choices
    op.add_column("reviews", sa.Column("review_type", sa.String(20)))
    op.add_column("reviews", sa.Column("action_taken", sa.String(20)))
    op.add_column("reviews", sa.Column("visibility", sa.String(10), server_default="public", nullable=False))

    # Moderation
    op.add_column("reviews", sa.Column("sanitized_text", sa.Text))
    op.add_column("reviews", sa.Column("tags", ARRAY(sa.String), server_default=sa.text("ARRAY[]::text[]")))
    op.add_column("reviews", sa.Column("flagged", sa.Boolean, server_default=sa.text("false"), nullable=False))
    op.add_column("reviews", sa.Column("status", sa.String(20), server_default="published", nullable=False))
    op.create_index("ix_reviews_status", "reviews", ["status"])
    op.create_index("idx_reviews_location_status", "reviews", ["location_id", "status"])

    # Uniqueness
    op.create_unique_constraint("uq_organizations_name", "organizations", ["name"])
    op.create_unique_constraint(
        "locations_org_address_city_zip_unique",
        "locations",
        ["organization_id", "address", "city", "zip_code"],
    )


def downgrade() -> None:
    op.drop_constraint("locations_org_address_city_zip_unique", "locations", type_="unique")
    op.drop_constraint("uq_organizations_name", "organizations", type_="unique")
    op.drop_index("idx_reviews_location_status", table_name="reviews")
    op.drop_index("ix_reviews_status", table_name="reviews")
    for column in (
        "status", "flagged", "tags", "sanitized_text",
        "visibility", "action_taken", "review_type", "program_ratings",
    ):
        op.drop_column("reviews", column)
