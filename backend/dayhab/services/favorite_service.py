"""Favorites — toggle membership and track notes and visits."""

import logging
from datetime import date
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from dayhab.models.favorite import Favorite
from dayhab.models.location import Location
from dayhab.services.errors import RemoteCallError

logger = logging.getLogger(__name__)


async def get_favorite(db: AsyncSession, viewer_id: UUID, location_id: UUID) -> Favorite | None:
    result = await db.execute(
        select(Favorite).where(Favorite.user_id == viewer_id, Favorite.location_id == location_id)
    )
    return result.scalar_one_or_none()


async def list_favorites(db: AsyncSession, viewer_id: UUID) -> list[Favorite]:
    """The viewer's favorites with location and organization, newest first."""
    try:
        result = await db.execute(
            select(Favorite)
            .where(Favorite.user_id == viewer_id)
            .options(selectinload(Favorite.location).selectinload(Location.organization))
            .order_by(Favorite.created_at.desc())
        )
        return list(result.scalars().all())
    except SQLAlchemyError:
        logger.exception("Error fetching favorites for %s", viewer_id)
        raise RemoteCallError("Failed to load your favorites.")


async def toggle_favorite(db: AsyncSession, viewer_id: UUID, location_id: UUID) -> bool:
    """Delete the favorite if it exists, otherwise create it.

    Returns the new membership state. Two racing inserts are settled by the
    (user_id, location_id) unique constraint; the loser gets RemoteCallError.
    """
    try:
        existing = await get_favorite(db, viewer_id, location_id)
        if existing:
            await db.delete(existing)
            await db.flush()
            logger.info("Removed favorite %s for %s", location_id, viewer_id)
            return False

        db.add(Favorite(user_id=viewer_id, location_id=location_id, visited=False))
        await db.flush()
        logger.info("Added favorite %s for %s", location_id, viewer_id)
        return True
    except SQLAlchemyError:
        logger.exception("Error toggling favorite %s for %s", location_id, viewer_id)
        await db.rollback()
        raise RemoteCallError("Failed to update favorites.")


def visit_date_for(favorite: Favorite, visited: bool, today: date) -> date | None:
    """Visit date follows the visited flag.

    Set to today when the favorite becomes visited, kept while it stays
    visited, cleared otherwise.
    """
    if not visited:
        return None
    if favorite.visited and favorite.visit_date:
        return favorite.visit_date
    return today


async def save_visit_state(
    db: AsyncSession,
    favorite: Favorite,
    notes: str | None,
    visited: bool,
    today: date | None = None,
) -> Favorite:
    """Update notes, visited and the derived visit date in one write."""
    notes = (notes or "").strip()
    favorite.visit_date = visit_date_for(favorite, visited, today or date.today())
    favorite.notes = notes if notes else None
    favorite.visited = visited
    try:
        await db.flush()
    except SQLAlchemyError:
        logger.exception("Error saving notes on favorite %s", favorite.id)
        await db.rollback()
        raise RemoteCallError("Failed to save notes.")
    return favorite
