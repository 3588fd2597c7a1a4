"""Pydantic schemas for Location model."""

from datetime import date
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from dayhab.schemas.organization import OrganizationRead, OrganizationSummary


class RatingRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    average_rating: float
    review_count: int


class LocationBase(BaseModel):
    name: str | None = None
    address: str
    city: str
    county: str
    state: str | None = "NY"
    zip_code: str | None = None
    schedule: str | None = None
    accessibility_features: list[str] | None = None


class LocationRead(LocationBase):
    """Location with its organization summary, as listed in the directory."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    organization_id: UUID
    organization: OrganizationSummary


class LocationListItem(LocationRead):
    """Directory entry with rating and the viewer's favorite state."""

    rating: RatingRead | None = None
    is_favorited: bool = False


class FavoriteState(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    notes: str | None = None
    visited: bool = False
    visit_date: date | None = None


class LocationDetail(LocationBase):
    """Single location page: full organization, coordinates, rating, favorite."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    organization_id: UUID
    latitude: Decimal | None = None
    longitude: Decimal | None = None
    organization: OrganizationRead
    full_address: str
    rating: RatingRead | None = None
    favorite: FavoriteState | None = None
