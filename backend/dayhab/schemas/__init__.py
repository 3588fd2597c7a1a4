"""Pydantic schemas package."""

from dayhab.schemas.organization import (
    OrganizationBase,
    OrganizationRead,
    OrganizationSummary,
)
from dayhab.schemas.location import (
    RatingRead,
    LocationBase,
    LocationRead,
    LocationListItem,
    LocationDetail,
    FavoriteState,
)
from dayhab.schemas.favorite import (
    FavoriteRead,
    FavoritesOverview,
    FavoriteToggleResult,
    VisitStateUpdate,
    VisitStateRead,
)
from dayhab.schemas.review import (
    ReviewDraft,
    ReviewRead,
    ReviewWithVotes,
    HelpfulToggleResult,
    ReviewFormSchema,
)
from dayhab.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    ProfileRead,
    CsrfTokenRead,
)

__all__ = [
    # Organization
    "OrganizationBase",
    "OrganizationRead",
    "OrganizationSummary",
    # Location
    "RatingRead",
    "LocationBase",
    "LocationRead",
    "LocationListItem",
    "LocationDetail",
    "FavoriteState",
    # Favorite
    "FavoriteRead",
    "FavoritesOverview",
    "FavoriteToggleResult",
    "VisitStateUpdate",
    "VisitStateRead",
    # Review
    "ReviewDraft",
    "ReviewRead",
    "ReviewWithVotes",
    "HelpfulToggleResult",
    "ReviewFormSchema",
    # Auth
    "RegisterRequest",
    "LoginRequest",
    "ProfileRead",
    "CsrfTokenRead",
]
