"""API v1 router aggregation."""

from fastapi import APIRouter

from dayhab.api.v1.auth import router as auth_router
from dayhab.api.v1.organizations import router as organizations_router
from dayhab.api.v1.locations import router as locations_router
from dayhab.api.v1.favorites import router as favorites_router
from dayhab.api.v1.reviews import router as reviews_router

router = APIRouter(prefix="/api/v1")

router.include_router(auth_router)
router.include_router(organizations_router)
router.include_router(locations_router)
router.include_router(favorites_router)
router.include_router(reviews_router)
