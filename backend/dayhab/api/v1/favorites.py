"""Favorites endpoints — dashboard, toggle, notes and visit tracking."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from dayhab.models.base import get_db
from dayhab.models.user import User
from dayhab.dependencies.auth import require_user_api, check_csrf
from dayhab.schemas.favorite import (
    FavoriteRead,
    FavoritesOverview,
    FavoriteToggleResult,
    VisitStateRead,
    VisitStateUpdate,
)
from dayhab.api.v1.locations import get_location_or_404
from dayhab.services.favorite_service import get_favorite, list_favorites, save_visit_state, toggle_favorite
from dayhab.services.membership import partition_visited

router = APIRouter(prefix="/favorites", tags=["favorites"])


@router.get("", response_model=FavoritesOverview)
async def my_favorites(
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    """All favorites with the visited / to-visit split."""
    favorites = [FavoriteRead.model_validate(fav) for fav in await list_favorites(db, user.id)]
    visited, to_visit = partition_visited(favorites)
    return FavoritesOverview(favorites=favorites, visited=visited, to_visit=to_visit)


@router.post("/{location_id}/toggle", response_model=FavoriteToggleResult, dependencies=[Depends(check_csrf)])
async def toggle(
    location_id: UUID,
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    """Save or unsave a location."""
    await get_location_or_404(db, location_id)
    state = await toggle_favorite(db, user.id, location_id)
    return FavoriteToggleResult(location_id=location_id, is_favorited=state)


@router.put("/{location_id}", response_model=VisitStateRead, dependencies=[Depends(check_csrf)])
async def update_visit_state(
    location_id: UUID,
    body: VisitStateUpdate,
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    """Update notes and visited flag on a saved location."""
    favorite = await get_favorite(db, user.id, location_id)
    if not favorite:
        raise HTTPException(status_code=404, detail="Location not saved")
    return await save_visit_state(db, favorite, body.notes, body.visited)
