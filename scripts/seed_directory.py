"""Seed sample day habilitation organizations and their locations.

Skips organizations (by name) and locations (by address) that already exist,
so it is safe to run repeatedly.

Usage:
    python -m scripts.seed_directory
"""

import asyncio
import logging

from sqlalchemy import select

from dayhab.models import Base, Location, Organization
from dayhab.models.base import AsyncSessionLocal, engine

logger = logging.getLogger(__name__)

SAMPLE_ORGANIZATIONS = [
    {
        "name": "Hope Day Habilitation Center",
        "description": "Providing quality day programs focusing on life skills, social engagement, and community integration",
        "phone": "(555) 123-4567",
        "email": "info@hopedayhab.org",
        "services": ["Life Skills Training", "Social Activities", "Community Outings", "Arts & Crafts"],
        "locations": [
            {
                "name": "Hope Day Habilitation Center - Main Location",
                "address": "123 Main Street",
                "city": "Buffalo",
                "county": "Erie",
                "zip_code": "14201",
                "latitude": 42.8864,
                "longitude": -78.8784,
                "schedule": "Monday-Friday, 9 AM - 3 PM",
                "accessibility_features": [
                    "Wheelchair Accessible", "Elevator", "Accessible Parking", "Sensory-Friendly Spaces",
                ],
            },
        ],
    },
    {
        "name": "Bright Futures Day Program",
        "description": "Empowering individuals through personalized day habilitation services",
        "phone": "(555) 234-5678",
        "email": "contact@brightfutures.org",
        "services": ["Vocational Training", "Health & Wellness", "Recreation", "Technology Skills"],
        "locations": [
            {
                "name": "Bright Futures Day Program - North Campus",
                "address": "456 North Avenue",
                "city": "Rochester",
                "county": "Monroe",
                "zip_code": "14606",
                "latitude": 43.1566,
                "longitude": -77.6088,
                "schedule": "Monday-Friday, 8:30 AM - 3:30 PM",
                "accessibility_features": ["Wheelchair Accessible", "Accessible Restrooms", "Ramps"],
            },
        ],
    },
    {
        "name": "Community Connect Day Services",
        "description": "Building connections and fostering independence through innovative programs",
        "phone": "(555) 345-6789",
        "email": "hello@communityconnect.org",
        "services": ["Job Coaching", "Independent Living Skills", "Social Integration", "Physical Activities"],
        "locations": [
            {
                "name": "Community Connect Day Services - Downtown Center",
                "address": "789 Center Street",
                "city": "Syracuse",
                "county": "Onondaga",
                "zip_code": "13202",
                "latitude": 43.0481,
                "longitude": -76.1474,
                "schedule": "Monday-Friday, 9 AM - 4 PM",
                "accessibility_features": [
                    "Wheelchair Accessible", "Ground Floor Access", "Wide Doorways", "Accessible Parking",
                ],
            },
        ],
    },
]


async def seed():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    orgs_created = 0
    locations_created = 0

    async with AsyncSessionLocal() as db:
        try:
            for org_data in SAMPLE_ORGANIZATIONS:
                fields = {k: v for k, v in org_data.items() if k != "locations"}
                result = await db.execute(select(Organization).where(Organization.name == fields["name"]))
                org = result.scalar_one_or_none()
                if not org:
                    org = Organization(**fields)
                    db.add(org)
                    await db.flush()
                    orgs_created += 1
                    logger.info("Created org: %s", org.name)

                for loc_data in org_data["locations"]:
                    result = await db.execute(
                        select(Location).where(
                            Location.organization_id == org.id,
                            Location.address == loc_data["address"],
                            Location.city == loc_data["city"],
                        )
                    )
                    if result.scalar_one_or_none():
                        continue
                    db.add(Location(organization_id=org.id, state="NY", **loc_data))
                    locations_created += 1

            await db.commit()
            logger.info("Done: %d orgs created, %d locations created", orgs_created, locations_created)
        except Exception:
            await db.rollback()
            logger.exception("Seeding failed")
            raise

    await engine.dispose()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(seed())
