"""Review endpoints — listing, submission form, edit, delete, helpful votes."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from dayhab.models.base import get_db
from dayhab.models.review import Review
from dayhab.models.user import User
from dayhab.dependencies.auth import get_current_user, require_user_api, check_csrf
from dayhab.schemas.review import (
    HelpfulToggleResult,
    ReviewDraft,
    ReviewFormSchema,
    ReviewRead,
    ReviewWithVotes,
)
from dayhab.api.v1.locations import get_location_or_404
from dayhab.services.errors import RemoteCallError
from dayhab.services.helpfulness_service import load_votes, toggle_helpful
from dayhab.services.membership import has_voted, helpful_counts
from dayhab.services.moderation import is_visible_to
from dayhab.services.review_wizard import ReviewWizard, form_options

logger = logging.getLogger(__name__)

router = APIRouter(tags=["reviews"])


@router.get("/reviews/form", response_model=ReviewFormSchema)
async def review_form():
    """Step layout and choices for the review submission form."""
    return form_options()


@router.get("/locations/{location_id}/reviews", response_model=list[ReviewWithVotes])
async def list_reviews(
    location_id: UUID,
    db: AsyncSession = Depends(get_db),
    user: User | None = Depends(get_current_user),
):
    """Reviews for a location, newest first, with helpful counts."""
    await get_location_or_404(db, location_id)
    viewer_id = user.id if user else None

    try:
        result = await db.execute(
            select(Review)
            .where(Review.location_id == location_id)
            .order_by(Review.created_at.desc())
        )
        reviews = [r for r in result.scalars().all() if is_visible_to(r, viewer_id)]
        votes = await load_votes(db, [r.id for r in reviews])
    except SQLAlchemyError:
        logger.exception("Error fetching reviews for %s", location_id)
        raise RemoteCallError("Failed to load reviews. Please try again.")

    counts = helpful_counts(votes)
    return [
        ReviewWithVotes(
            **ReviewRead.model_validate(review).model_dump(),
            helpful_count=counts.get(review.id, 0),
            user_has_voted=has_voted(votes, review.id, viewer_id),
            is_own=review.user_id == viewer_id,
        )
        for review in reviews
    ]


@router.post(
    "/locations/{location_id}/reviews",
    response_model=ReviewRead,
    status_code=201,
    dependencies=[Depends(check_csrf)],
)
async def submit_review(
    location_id: UUID,
    draft: ReviewDraft,
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    """Submit a review; replaces the caregiver's earlier review of this location."""
    location = await get_location_or_404(db, location_id)
    wizard = ReviewWizard(user.id, location, draft=draft)
    return await wizard.submit(db)


@router.put(
    "/locations/{location_id}/reviews",
    response_model=ReviewRead,
    dependencies=[Depends(check_csrf)],
)
async def edit_review(
    location_id: UUID,
    draft: ReviewDraft,
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    """Edit the caregiver's existing review; ``existing_review_id`` is required."""
    location = await get_location_or_404(db, location_id)
    wizard = ReviewWizard(user.id, location, draft=draft, editing=True)
    return await wizard.submit(db)


async def _get_review_or_404(db: AsyncSession, review_id: UUID) -> Review:
    result = await db.execute(select(Review).where(Review.id == review_id))
    review = result.scalar_one_or_none()
    if not review:
        raise HTTPException(status_code=404, detail="Review not found")
    return review


@router.delete("/reviews/{review_id}", status_code=204, dependencies=[Depends(check_csrf)])
async def delete_review(
    review_id: UUID,
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    """Delete one of the caregiver's own reviews."""
    review = await _get_review_or_404(db, review_id)
    if review.user_id != user.id:
        raise HTTPException(status_code=404, detail="Review not found")

    try:
        await db.delete(review)
        await db.flush()
    except SQLAlchemyError:
        logger.exception("Error deleting review %s", review_id)
        await db.rollback()
        raise RemoteCallError("Failed to delete review.")
    return Response(status_code=204)


@router.post("/reviews/{review_id}/helpful", response_model=HelpfulToggleResult, dependencies=[Depends(check_csrf)])
async def vote_helpful(
    review_id: UUID,
    user: User = Depends(require_user_api),
    db: AsyncSession = Depends(get_db),
):
    """Toggle the caregiver's helpful vote on a review."""
    await _get_review_or_404(db, review_id)
    state = await toggle_helpful(db, user.id, review_id)
    votes = await load_votes(db, [review_id])
    return HelpfulToggleResult(
        review_id=review_id,
        user_has_voted=state,
        helpful_count=helpful_counts(votes).get(review_id, 0),
    )
