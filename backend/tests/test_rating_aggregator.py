"""Tests for per-location rating aggregates."""

import uuid
from decimal import Decimal
from types import SimpleNamespace

import pytest

from dayhab.services.rating_aggregator import aggregate_ratings, get_rating, round_half_up


def _reviews(location_id, ratings):
    return [{"location_id": location_id, "rating": r} for r in ratings]


def test_average_and_count():
    loc = uuid.uuid4()
    aggregates = aggregate_ratings(_reviews(loc, [4, 5, 3]))
    assert aggregates[loc].average_rating == 4.0
    assert aggregates[loc].review_count == 3


def test_empty_input():
    assert aggregate_ratings([]) == {}


def test_location_without_reviews_has_no_entry():
    reviewed, unreviewed = uuid.uuid4(), uuid.uuid4()
    aggregates = aggregate_ratings(_reviews(reviewed, [5]))
    assert unreviewed not in aggregates
    assert get_rating(aggregates, unreviewed) is None


@pytest.mark.parametrize("ratings, expected", [
    ([4, 4, 4, 5], 4.3),   # 4.25 rounds up
    ([1, 1, 2], 1.3),
    ([2, 2, 1], 1.7),
    ([4, 5], 4.5),
    ([1], 1.0),
    ([5, 5, 5, 5, 4, 4, 4, 4], 4.5),
])
def test_rounding_half_up(ratings, expected):
    loc = uuid.uuid4()
    assert aggregate_ratings(_reviews(loc, ratings))[loc].average_rating == expected


def test_groups_by_location():
    a, b = uuid.uuid4(), uuid.uuid4()
    rows = _reviews(a, [5, 3]) + _reviews(b, [2]) + _reviews(a, [4])
    aggregates = aggregate_ratings(rows)
    assert aggregates[a].review_count == 3
    assert aggregates[a].average_rating == 4.0
    assert aggregates[b].review_count == 1
    assert aggregates[b].average_rating == 2.0


def test_accepts_attribute_rows():
    loc = uuid.uuid4()
    rows = [SimpleNamespace(location_id=loc, rating=r) for r in (3, 4)]
    assert get_rating(aggregate_ratings(rows), loc).average_rating == 3.5


def test_round_half_up_matches_numeric_round():
    assert round_half_up(Decimal("2.45")) == 2.5
    assert round_half_up(Decimal("2.449")) == 2.4
