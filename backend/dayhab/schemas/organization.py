"""Pydantic schemas for Organization model."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class OrganizationBase(BaseModel):
    """Base fields for organization."""

    name: str
    description: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    services: list[str] | None = None


class OrganizationRead(OrganizationBase):
    """Full organization output."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    created_at: datetime
    updated_at: datetime


class OrganizationSummary(BaseModel):
    """Organization fields embedded in location listings."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    services: list[str] | None = None
