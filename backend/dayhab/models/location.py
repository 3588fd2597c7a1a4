"""Location model — a physical site operated by an organization."""

from sqlalchemy import Column, String, Text, Numeric, ForeignKey, UniqueConstraint, Index
from sqlalchemy.dialects.postgresql import UUID, ARRAY
from sqlalchemy.orm import relationship

from dayhab.models.base import Base, TimestampMixin, UUIDMixin


class Location(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "locations"

    organization_id = Column(
        UUID(as_uuid=True), ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True,
    )
    name = Column(String(255))

    # Address
    address = Column(String(255), nullable=False)
    city = Column(String(100), nullable=False)
    county = Column(String(100), nullable=False, index=True)
    state = Column(String(2), default="NY")
    zip_code = Column(String(10))

    # Geocoding
    latitude = Column(Numeric(10, 8))
    longitude = Column(Numeric(11, 8))

    schedule = Column(Text)  # e.g. "Monday-Friday, 9 AM - 3 PM"
    accessibility_features = Column(ARRAY(String), default=list)

    # Relationships
    organization = relationship("Organization", back_populates="locations")
    favorites = relationship("Favorite", back_populates="location", cascade="all, delete-orphan", passive_deletes=True)
    reviews = relationship("Review", back_populates="location", cascade="all, delete-orphan", passive_deletes=True)

    __table_args__ = (
        UniqueConstraint(
            "organization_id", "address", "city", "zip_code",
            name="locations_org_address_city_zip_unique",
        ),
        Index("idx_locations_city", "city"),
    )
