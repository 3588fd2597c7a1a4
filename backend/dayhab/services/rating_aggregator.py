"""Per-location rating aggregates computed from review rows.

Mirrors the ``location_ratings`` view: count of reviews and the mean
rating rounded to one decimal. Locations without reviews get no entry.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Iterable
from uuid import UUID


@dataclass(frozen=True)
class RatingAggregate:
    location_id: UUID
    average_rating: float
    review_count: int


def _get(row: Any, key: str) -> Any:
    if isinstance(row, dict):
        return row[key]
    return getattr(row, key)


def round_half_up(value: Decimal, places: int = 1) -> float:
    """Round like Postgres ROUND(numeric, n): halves go away from zero."""
    quantum = Decimal(1).scaleb(-places)
    return float(value.quantize(quantum, rounding=ROUND_HALF_UP))


def aggregate_ratings(reviews: Iterable[Any]) -> dict[UUID, RatingAggregate]:
    """Group review rows by ``location_id`` and average their ``rating``.

    Rows may be ORM objects, SQLAlchemy result rows or dicts.
    """
    totals: dict[UUID, list[int]] = {}
    for review in reviews:
        location_id = _get(review, "location_id")
        bucket = totals.setdefault(location_id, [0, 0])
        bucket[0] += int(_get(review, "rating"))
        bucket[1] += 1

    return {
        location_id: RatingAggregate(
            location_id=location_id,
            average_rating=round_half_up(Decimal(total) / Decimal(count)),
            review_count=count,
        )
        for location_id, (total, count) in totals.items()
    }


def get_rating(aggregates: dict[UUID, RatingAggregate], location_id: UUID) -> RatingAggregate | None:
    return aggregates.get(location_id)
