"""Membership lookups over the viewer's favorites and helpfulness votes.

The lists involved hold at most a few hundred rows per viewer, so these
are plain linear scans.
"""

from collections import Counter
from typing import Any, Iterable, Sequence
from uuid import UUID


def _get(obj: Any, key: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)


def is_favorited(favorites: Iterable[Any], location_id: UUID) -> bool:
    return any(_get(fav, "location_id") == location_id for fav in favorites)


def has_voted(votes: Iterable[Any], review_id: UUID, viewer_id: UUID | None) -> bool:
    """True when ``viewer_id`` has a helpful vote on ``review_id``."""
    if viewer_id is None:
        return False
    return any(
        _get(vote, "review_id") == review_id and _get(vote, "user_id") == viewer_id
        for vote in votes
    )


def helpful_counts(votes: Iterable[Any]) -> dict[UUID, int]:
    """Count helpful votes per review."""
    return dict(Counter(
        _get(vote, "review_id") for vote in votes
        if _get(vote, "is_helpful") is not False
    ))


def partition_visited(favorites: Sequence[Any]) -> tuple[list[Any], list[Any]]:
    """Split favorites into (visited, to_visit), keeping order."""
    visited = [fav for fav in favorites if _get(fav, "visited")]
    to_visit = [fav for fav in favorites if not _get(fav, "visited")]
    return visited, to_visit
