"""Pydantic schemas for reviews and the review submission form."""

from datetime import datetime
from enum import Enum
from typing import Any, Final
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class ReviewType(str, Enum):
    GENERAL = "general"
    SAFETY = "safety"
    STAFF = "staff"
    PROGRAM = "program"
    FACILITIES = "facilities"
    OTHER = "other"


class ActionTaken(str, Enum):
    REPORTED = "reported"
    DISCUSSED = "discussed"
    CONSULTED = "consulted"
    OTHER = "other"


class Visibility(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"


REVIEW_TYPE_LABELS: Final[dict[ReviewType, str]] = {
    ReviewType.GENERAL: "General Feedback / Experience",
    ReviewType.SAFETY: "Safety Concern",
    ReviewType.STAFF: "Staff / Communication",
    ReviewType.PROGRAM: "Program Quality",
    ReviewType.FACILITIES: "Environment / Facilities",
    ReviewType.OTHER: "Other",
}

ACTION_LABELS: Final[dict[ActionTaken, str]] = {
    ActionTaken.REPORTED: "Reported to oversight agency",
    ActionTaken.DISCUSSED: "Discussed with program staff",
    ActionTaken.CONSULTED: "Consulted a healthcare professional",
    ActionTaken.OTHER: "Other",
}

VISIBILITY_LABELS: Final[dict[Visibility, str]] = {
    Visibility.PUBLIC: "Public (visible after moderation)",
    Visibility.PRIVATE: "Private (for moderators only)",
}

CONTEXT_TAGS: Final[list[str]] = [
    "Safety",
    "Staff Behavior",
    "Facilities",
    "Communication",
    "Activities",
]

PROGRAM_RATING_CATEGORIES: Final[dict[str, str]] = {
    "dignity": "Dignity & Respect",
    "activities": "Activities & Engagement",
    "safety": "Safety & Well-being",
}


class ReviewDraft(BaseModel):
    """Everything the submission form collects.

    Any partial draft is representable; submit-time checks live in
    services.review_wizard.
    """

    review_type: ReviewType | None = None
    title: str = ""
    narrative: str = ""
    rating: int | None = None
    program_ratings: dict[str, int | None] = Field(default_factory=dict)
    action_taken: ActionTaken | None = None
    context_tags: list[str] = Field(default_factory=list)
    visibility: Visibility = Visibility.PUBLIC
    existing_review_id: UUID | None = None


class ReviewRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    location_id: UUID
    organization_id: UUID
    rating: int
    title: str
    review_text: str
    program_ratings: dict[str, Any] = Field(default_factory=dict)
    verified_visit: bool = False
    review_type: str | None = None
    action_taken: str | None = None
    visibility: str = "public"
    tags: list[str] | None = None
    flagged: bool = False
    status: str = "published"
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ReviewWithVotes(ReviewRead):
    """Review card: helpful-vote count and whether the viewer voted."""

    helpful_count: int = 0
    user_has_voted: bool = False
    is_own: bool = False


class HelpfulToggleResult(BaseModel):
    review_id: UUID
    user_has_voted: bool
    helpful_count: int


class FormOption(BaseModel):
    id: str
    label: str
    warning: bool = False


class FormStep(BaseModel):
    step: str
    label: str
    optional: bool = False


class ReviewFormSchema(BaseModel):
    """Options and step layout for rendering the submission form."""

    steps: list[FormStep]
    review_types: list[FormOption]
    actions_taken: list[FormOption]
    context_tags: list[str]
    program_rating_categories: list[FormOption]
    visibility: list[FormOption]
    max_narrative_chars: int
    max_title_chars: int
