"""ORM models; importing this package registers every table on Base.metadata."""

from dayhab.models.base import Base
from dayhab.models.organization import Organization
from dayhab.models.location import Location
from dayhab.models.user import User
from dayhab.models.profile import Profile
from dayhab.models.favorite import Favorite
from dayhab.models.review import Review
from dayhab.models.review_helpfulness import ReviewHelpfulness

__all__ = [
    "Base",
    "Organization",
    "Location",
    "User",
    "Profile",
    "Favorite",
    "Review",
    "ReviewHelpfulness",
]
