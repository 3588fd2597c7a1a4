"""Review submission wizard.

A draft is collected across independent sections and validated as a whole
when submitted. Sections, in display order:

1. Review type
2. Describe your experience
3. Program ratings (only for "general" reviews)
4. Actions taken
5. Context tags
6. Visibility

then submit. Submission writes exactly one row: a new review, or the
caregiver's existing review for the location updated in place.

Usage:
    wizard = ReviewWizard(viewer_id, location)
    wizard.update(review_type="general", narrative="...", rating=4)
    review = await wizard.submit(db)
"""

import logging
from enum import Enum
from typing import Any, Callable, Final
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from dayhab.models.favorite import Favorite
from dayhab.models.review import Review
from dayhab.schemas.review import (
    ACTION_LABELS,
    CONTEXT_TAGS,
    PROGRAM_RATING_CATEGORIES,
    REVIEW_TYPE_LABELS,
    VISIBILITY_LABELS,
    ActionTaken,
    ReviewDraft,
    ReviewType,
    Visibility,
)
from dayhab.services.errors import RemoteCallError, ReviewNotFoundError, ReviewValidationError
from dayhab.services.moderation import moderate

logger = logging.getLogger(__name__)

MAX_NARRATIVE_CHARS: Final[int] = 2000
MAX_TITLE_CHARS: Final[int] = 255
MIN_RATING: Final[int] = 1
MAX_RATING: Final[int] = 5


class WizardStep(str, Enum):
    TYPE_SELECTION = "type_selection"
    NARRATIVE = "narrative"
    STRUCTURED_RATINGS = "structured_ratings"
    ACTIONS_TAKEN = "actions_taken"
    CONTEXT_TAGS = "context_tags"
    VISIBILITY = "visibility"
    SUBMIT = "submit"


STEP_TITLES: Final[dict[WizardStep, str]] = {
    WizardStep.TYPE_SELECTION: "Review Type",
    WizardStep.NARRATIVE: "Describe Your Experience",
    WizardStep.STRUCTURED_RATINGS: "Program Ratings",
    WizardStep.ACTIONS_TAKEN: "Actions Taken",
    WizardStep.CONTEXT_TAGS: "Optional Context Tags",
    WizardStep.VISIBILITY: "Review Visibility",
    WizardStep.SUBMIT: "Submit",
}

OPTIONAL_STEPS: Final[frozenset[WizardStep]] = frozenset({
    WizardStep.STRUCTURED_RATINGS,
    WizardStep.ACTIONS_TAKEN,
    WizardStep.CONTEXT_TAGS,
})


def active_steps(review_type: ReviewType | None) -> list[WizardStep]:
    """Steps shown for a review type; program ratings only apply to general feedback."""
    return [
        step for step in WizardStep
        if step != WizardStep.STRUCTURED_RATINGS or review_type == ReviewType.GENERAL
    ]


def _rated(program_ratings: dict[str, int | None]) -> dict[str, int]:
    # 0 and None both mean "not rated"
    return {key: value for key, value in program_ratings.items() if value}


def validation_errors(draft: ReviewDraft, editing: bool = False) -> list[ReviewValidationError]:
    """Every failed precondition, in the order they are reported."""
    errors = []
    narrative = draft.narrative.strip()

    if draft.review_type is None:
        errors.append(ReviewValidationError("type_missing", "Please select a review type."))
    if not narrative:
        errors.append(ReviewValidationError("narrative_missing", "Please describe your experience."))
    elif len(narrative) > MAX_NARRATIVE_CHARS:
        errors.append(ReviewValidationError(
            "narrative_too_long",
            f"Please keep your description under {MAX_NARRATIVE_CHARS} characters.",
        ))
    if len(draft.title.strip()) > MAX_TITLE_CHARS:
        errors.append(ReviewValidationError(
            "title_too_long",
            f"Please keep your title under {MAX_TITLE_CHARS} characters.",
        ))
    if not draft.rating:
        errors.append(ReviewValidationError("rating_missing", "Please select a star rating."))
    elif not MIN_RATING <= draft.rating <= MAX_RATING:
        errors.append(ReviewValidationError("rating_out_of_range", "Ratings must be between 1 and 5 stars."))

    if draft.review_type == ReviewType.GENERAL:
        for key, value in _rated(draft.program_ratings).items():
            if key not in PROGRAM_RATING_CATEGORIES:
                errors.append(ReviewValidationError("sub_rating_unknown", f"Unknown rating category: {key}."))
            elif not MIN_RATING <= value <= MAX_RATING:
                errors.append(ReviewValidationError(
                    "sub_rating_out_of_range",
                    f"{PROGRAM_RATING_CATEGORIES[key]} must be between 1 and 5 stars.",
                ))

    unknown_tags = [tag for tag in draft.context_tags if tag not in CONTEXT_TAGS]
    if unknown_tags:
        errors.append(ReviewValidationError("unknown_tag", f"Unknown tag: {unknown_tags[0]}."))

    if editing and draft.existing_review_id is None:
        errors.append(ReviewValidationError("existing_review_missing", "No review selected to edit."))

    return errors


def validate_draft(draft: ReviewDraft, editing: bool = False) -> None:
    """Raise the first failed precondition."""
    errors = validation_errors(draft, editing)
    if errors:
        raise errors[0]


def review_fields(draft: ReviewDraft, verified_visit: bool) -> dict[str, Any]:
    """Column values for a validated draft."""
    review_type = ReviewType(draft.review_type)
    visibility = Visibility(draft.visibility)
    narrative = draft.narrative.strip()
    program_ratings = _rated(draft.program_ratings) if review_type == ReviewType.GENERAL else {}

    return {
        "rating": draft.rating,
        "title": draft.title.strip() or REVIEW_TYPE_LABELS[review_type],
        "review_text": narrative,
        "program_ratings": program_ratings,
        "review_type": review_type.value,
        "action_taken": ActionTaken(draft.action_taken).value if draft.action_taken else None,
        "visibility": visibility.value,
        "verified_visit": verified_visit,
        **moderate(review_type.value, narrative, draft.context_tags, visibility.value),
    }


def draft_from_review(review: Review) -> ReviewDraft:
    """Pre-fill the form for editing an existing review."""
    return ReviewDraft(
        review_type=review.review_type or ReviewType.GENERAL,
        title=review.title or "",
        narrative=review.review_text or "",
        rating=review.rating,
        program_ratings=dict(review.program_ratings or {}),
        action_taken=review.action_taken,
        context_tags=list(review.tags or []),
        visibility=review.visibility or Visibility.PUBLIC,
        existing_review_id=review.id,
    )


def form_options() -> dict[str, Any]:
    """Choices and full step layout for rendering the form."""
    steps = active_steps(ReviewType.GENERAL)
    return {
        "steps": [
            {"step": step.value, "label": STEP_TITLES[step], "optional": step in OPTIONAL_STEPS}
            for step in steps
        ],
        "review_types": [
            {"id": kind.value, "label": label, "warning": kind == ReviewType.SAFETY}
            for kind, label in REVIEW_TYPE_LABELS.items()
        ],
        "actions_taken": [{"id": action.value, "label": label} for action, label in ACTION_LABELS.items()],
        "context_tags": list(CONTEXT_TAGS),
        "program_rating_categories": [
            {"id": key, "label": label} for key, label in PROGRAM_RATING_CATEGORIES.items()
        ],
        "visibility": [{"id": vis.value, "label": label} for vis, label in VISIBILITY_LABELS.items()],
        "max_narrative_chars": MAX_NARRATIVE_CHARS,
        "max_title_chars": MAX_TITLE_CHARS,
    }


class ReviewWizard:
    """Holds one caregiver's review draft for one location.

    ``location`` needs ``id`` and ``organization_id``. ``on_submitted`` is
    called with the saved review after a successful write; the wizard does
    not reload anything itself.
    """

    def __init__(
        self,
        viewer_id: UUID,
        location: Any,
        draft: ReviewDraft | None = None,
        editing: bool = False,
        on_submitted: Callable[[Review], None] | None = None,
    ):
        self.viewer_id = viewer_id
        self.location_id = location.id
        self.organization_id = location.organization_id
        self.draft = draft or ReviewDraft()
        self.editing = editing
        self.on_submitted = on_submitted
        self.submitting = False

    @classmethod
    def for_existing(cls, viewer_id: UUID, location: Any, review: Review, **kwargs) -> "ReviewWizard":
        return cls(viewer_id, location, draft=draft_from_review(review), editing=True, **kwargs)

    # --- Editing ---

    def update(self, **fields) -> ReviewDraft:
        """Replace draft fields, re-validating their types."""
        self.draft = ReviewDraft.model_validate({**self.draft.model_dump(), **fields})
        return self.draft

    def set_program_rating(self, category: str, value: int | None) -> None:
        ratings = dict(self.draft.program_ratings)
        ratings[category] = value
        self.update(program_ratings=ratings)

    def toggle_tag(self, tag: str) -> None:
        tags = list(self.draft.context_tags)
        if tag in tags:
            tags.remove(tag)
        else:
            tags.append(tag)
        self.update(context_tags=tags)

    def cancel(self) -> None:
        self.draft = ReviewDraft()

    # --- Layout ---

    def steps(self) -> list[WizardStep]:
        return active_steps(self.draft.review_type)

    def step_label(self, step: WizardStep) -> str:
        """Label like "Step 2 of 6"; the submit step is not counted."""
        sections = [s for s in self.steps() if s != WizardStep.SUBMIT]
        return f"Step {sections.index(step) + 1} of {len(sections)}"

    def remaining_chars(self) -> int:
        return MAX_NARRATIVE_CHARS - len(self.draft.narrative.strip())

    def errors(self) -> list[ReviewValidationError]:
        return validation_errors(self.draft, self.editing)

    # --- Submission ---

    async def _has_visited(self, db: AsyncSession) -> bool:
        result = await db.execute(
            select(Favorite).where(
                Favorite.user_id == self.viewer_id,
                Favorite.location_id == self.location_id,
            )
        )
        favorite = result.scalar_one_or_none()
        return bool(favorite and favorite.visited)

    async def submit(self, db: AsyncSession) -> Review:
        """Validate the draft, then insert or update the caregiver's review.

        Raises ReviewValidationError before any database call, ReviewNotFoundError
        when editing a review that is gone, and RemoteCallError when the
        database fails. The draft is kept on every failure.
        """
        validate_draft(self.draft, self.editing)

        self.submitting = True
        try:
            result = await db.execute(
                select(Review).where(
                    Review.user_id == self.viewer_id,
                    Review.location_id == self.location_id,
                )
            )
            review = result.scalar_one_or_none()
            replacing = review is not None
            if self.editing and (review is None or review.id != self.draft.existing_review_id):
                raise ReviewNotFoundError(str(self.draft.existing_review_id))

            fields = review_fields(self.draft, await self._has_visited(db))
            if review is None:
                review = Review(
                    user_id=self.viewer_id,
                    location_id=self.location_id,
                    organization_id=self.organization_id,
                    **fields,
                )
                db.add(review)
            else:
                for key, value in fields.items():
                    setattr(review, key, value)
            await db.flush()
            # Load server-side timestamps
            await db.refresh(review)
        except SQLAlchemyError:
            logger.exception("Error submitting review for location %s", self.location_id)
            await db.rollback()
            raise RemoteCallError("Failed to submit review. Please try again.")
        finally:
            self.submitting = False

        logger.info(
            "Review %s %s for location %s (status=%s)",
            review.id, "updated" if replacing else "saved", self.location_id, review.status,
        )
        if not self.editing:
            self.draft = ReviewDraft()
        if self.on_submitted:
            self.on_submitted(review)
        return review
