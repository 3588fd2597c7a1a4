"""Organization API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from dayhab.models.base import get_db
from dayhab.models.organization import Organization
from dayhab.models.location import Location
from dayhab.schemas.organization import OrganizationRead
from dayhab.schemas.location import LocationRead

router = APIRouter(prefix="/organizations", tags=["organizations"])


def _escape_ilike(value: str) -> str:
    """Escape % and _ characters for use in ILIKE patterns."""
    return value.replace("%", r"\%").replace("_", r"\_")


@router.get("", response_model=list[OrganizationRead])
async def list_organizations(
    db: AsyncSession = Depends(get_db),
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=100),
    search: str | None = Query(None, min_length=2, description="Search by name"),
):
    """List organizations, optionally filtered by name."""
    query = select(Organization)
    if search:
        query = query.where(Organization.name.ilike(f"%{_escape_ilike(search)}%"))

    query = query.order_by(Organization.name).offset(skip).limit(limit)
    result = await db.execute(query)
    return result.scalars().all()


@router.get("/{org_id}", response_model=OrganizationRead)
async def get_organization(
    org_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get a single organization by ID."""
    result = await db.execute(select(Organization).where(Organization.id == org_id))
    org = result.scalar_one_or_none()
    if not org:
        raise HTTPException(status_code=404, detail="Organization not found")
    return org


@router.get("/{org_id}/locations", response_model=list[LocationRead])
async def get_organization_locations(
    org_id: UUID,
    db: AsyncSession = Depends(get_db),
):
    """Get the locations an organization operates."""
    org_result = await db.execute(select(Organization.id).where(Organization.id == org_id))
    if not org_result.scalar_one_or_none():
        raise HTTPException(status_code=404, detail="Organization not found")

    result = await db.execute(
        select(Location)
        .where(Location.organization_id == org_id)
        .options(selectinload(Location.organization))
        .order_by(Location.city)
    )
    return result.scalars().all()
