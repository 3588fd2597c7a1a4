"""Tests for favorite and vote membership lookups."""

import uuid
from types import SimpleNamespace

from dayhab.services.membership import has_voted, helpful_counts, is_favorited, partition_visited


def test_is_favorited():
    loc_a, loc_b = uuid.uuid4(), uuid.uuid4()
    favorites = [{"location_id": loc_a}]
    assert is_favorited(favorites, loc_a)
    assert not is_favorited(favorites, loc_b)
    assert not is_favorited([], loc_a)


def test_has_voted_requires_same_viewer_and_review():
    viewer, other = uuid.uuid4(), uuid.uuid4()
    review_a, review_b = uuid.uuid4(), uuid.uuid4()
    votes = [SimpleNamespace(review_id=review_a, user_id=viewer, is_helpful=True)]

    assert has_voted(votes, review_a, viewer)
    assert not has_voted(votes, review_b, viewer)
    assert not has_voted(votes, review_a, other)


def test_has_voted_anonymous_viewer():
    review = uuid.uuid4()
    votes = [{"review_id": review, "user_id": uuid.uuid4()}]
    assert not has_voted(votes, review, None)


def test_helpful_counts():
    a, b = uuid.uuid4(), uuid.uuid4()
    votes = [
        {"review_id": a, "is_helpful": True},
        {"review_id": a, "is_helpful": True},
        {"review_id": b, "is_helpful": True},
        {"review_id": b, "is_helpful": False},
    ]
    assert helpful_counts(votes) == {a: 2, b: 1}


def test_partition_visited_keeps_order():
    favorites = [
        {"id": 1, "visited": True},
        {"id": 2, "visited": False},
        {"id": 3, "visited": True},
    ]
    visited, to_visit = partition_visited(favorites)
    assert [f["id"] for f in visited] == [1, 3]
    assert [f["id"] for f in to_visit] == [2]
