"""Location directory endpoints — search, county filter, detail page."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from dayhab.models.base import get_db
from dayhab.models.favorite import Favorite
from dayhab.models.location import Location
from dayhab.models.review import Review
from dayhab.models.user import User
from dayhab.dependencies.auth import get_current_user
from dayhab.schemas.location import (
    FavoriteState,
    LocationDetail,
    LocationListItem,
    LocationRead,
    RatingRead,
)
from dayhab.schemas.organization import OrganizationRead
from dayhab.services.errors import RemoteCallError
from dayhab.services.favorite_service import get_favorite
from dayhab.services.membership import is_favorited
from dayhab.services.rating_aggregator import RatingAggregate, aggregate_ratings, get_rating
from dayhab.services.search_filter import ALL_COUNTIES, COUNTY_OPTIONS, filter_locations

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/locations", tags=["locations"])


async def load_ratings(db: AsyncSession, location_ids: list[UUID] | None = None) -> dict[UUID, RatingAggregate]:
    """Rating aggregates from live review rows; locations without reviews have no entry."""
    query = select(Review.location_id, Review.rating)
    if location_ids is not None:
        query = query.where(Review.location_id.in_(location_ids))
    try:
        result = await db.execute(query)
    except SQLAlchemyError:
        logger.exception("Error fetching ratings")
        raise RemoteCallError("Failed to load programs. Please try again.")
    return aggregate_ratings(result.all())


def _rating_read(aggregate: RatingAggregate | None) -> RatingRead | None:
    return RatingRead.model_validate(aggregate) if aggregate else None


def full_address(location: Location) -> str:
    return f"{location.address}, {location.city}, {location.state or 'NY'} {location.zip_code or ''}".strip()


async def get_location_or_404(db: AsyncSession, location_id: UUID) -> Location:
    result = await db.execute(
        select(Location)
        .where(Location.id == location_id)
        .options(selectinload(Location.organization))
    )
    location = result.scalar_one_or_none()
    if not location:
        raise HTTPException(status_code=404, detail="Location not found")
    return location


@router.get("", response_model=list[LocationListItem])
async def list_locations(
    db: AsyncSession = Depends(get_db),
    user: User | None = Depends(get_current_user),
    search: str | None = Query(None, description="Organization name, city, county or service"),
    county: str = Query(ALL_COUNTIES, description="County name, or 'All Counties'"),
):
    """Directory listing, ordered by city, filtered by search text and county."""
    try:
        result = await db.execute(
            select(Location)
            .options(selectinload(Location.organization))
            .order_by(Location.city)
        )
        locations = result.scalars().all()
    except SQLAlchemyError:
        logger.exception("Error fetching locations")
        raise RemoteCallError("Failed to load programs. Please try again.")

    visible = filter_locations(locations, search, county)
    ratings = await load_ratings(db, [loc.id for loc in visible]) if visible else {}

    favorites = []
    if user:
        fav_result = await db.execute(select(Favorite.location_id).where(Favorite.user_id == user.id))
        favorites = fav_result.all()

    return [
        LocationListItem(
            **LocationRead.model_validate(loc).model_dump(),
            rating=_rating_read(get_rating(ratings, loc.id)),
            is_favorited=is_favorited(favorites, loc.id),
        )
        for loc in visible
    ]


@router.get("/counties", response_model=list[str])
async def list_counties():
    """County selector options, 'All Counties' first."""
    return COUNTY_OPTIONS


@router.get("/{location_id}", response_model=LocationDetail)
async def get_location(
    location_id: UUID,
    db: AsyncSession = Depends(get_db),
    user: User | None = Depends(get_current_user),
):
    """Location detail with organization contact info, rating and the viewer's favorite."""
    location = await get_location_or_404(db, location_id)
    ratings = await load_ratings(db, [location.id])

    favorite = None
    if user:
        favorite = await get_favorite(db, user.id, location.id)

    return LocationDetail(
        id=location.id,
        organization_id=location.organization_id,
        name=location.name,
        address=location.address,
        city=location.city,
        county=location.county,
        state=location.state,
        zip_code=location.zip_code,
        latitude=location.latitude,
        longitude=location.longitude,
        schedule=location.schedule,
        accessibility_features=location.accessibility_features,
        organization=OrganizationRead.model_validate(location.organization),
        full_address=full_address(location),
        rating=_rating_read(get_rating(ratings, location.id)),
        favorite=FavoriteState.model_validate(favorite) if favorite else None,
    )
