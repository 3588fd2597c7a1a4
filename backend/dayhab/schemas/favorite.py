"""Pydantic schemas for Favorite model."""

from datetime import date, datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from dayhab.schemas.location import LocationRead


class FavoriteRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    location_id: UUID
    notes: str | None = None
    visited: bool = False
    visit_date: date | None = None
    created_at: datetime | None = None
    location: LocationRead


class FavoritesOverview(BaseModel):
    """Dashboard tabs: all favorites plus the visited / to-visit split."""

    favorites: list[FavoriteRead]
    visited: list[FavoriteRead]
    to_visit: list[FavoriteRead]


class FavoriteToggleResult(BaseModel):
    location_id: UUID
    is_favorited: bool


class VisitStateUpdate(BaseModel):
    notes: str | None = None
    visited: bool = False


class VisitStateRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    notes: str | None = None
    visited: bool
    visit_date: date | None = None
