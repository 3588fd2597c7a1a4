"""Review helpfulness votes."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from dayhab.models.review_helpfulness import ReviewHelpfulness
from dayhab.services.errors import RemoteCallError

logger = logging.getLogger(__name__)


async def load_votes(db: AsyncSession, review_ids: list[UUID]) -> list[ReviewHelpfulness]:
    if not review_ids:
        return []
    result = await db.execute(
        select(ReviewHelpfulness).where(ReviewHelpfulness.review_id.in_(review_ids))
    )
    return list(result.scalars().all())


async def toggle_helpful(db: AsyncSession, viewer_id: UUID, review_id: UUID) -> bool:
    """Remove the viewer's vote if present, otherwise add one. Returns the new state.

    Authors may vote on their own reviews.
    """
    try:
        result = await db.execute(
            select(ReviewHelpfulness).where(
                ReviewHelpfulness.review_id == review_id,
                ReviewHelpfulness.user_id == viewer_id,
            )
        )
        existing = result.scalar_one_or_none()
        if existing:
            await db.delete(existing)
            await db.flush()
            return False

        db.add(ReviewHelpfulness(review_id=review_id, user_id=viewer_id, is_helpful=True))
        await db.flush()
        return True
    except SQLAlchemyError:
        logger.exception("Error voting on review %s", review_id)
        await db.rollback()
        raise RemoteCallError("Failed to record your vote.")
