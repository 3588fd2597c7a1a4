"""Search and county filtering for the program directory.

Locations are filtered in memory after loading, the same way for the list
page and the dashboard:

    from dayhab.services.search_filter import filter_locations

    visible = filter_locations(locations, query="erie", county="All Counties")

Each entry needs ``city``, ``county`` and an ``organization`` carrying
``name`` and ``services``; ORM rows and plain dicts are both accepted.
"""

import re
from typing import Any, Final, Iterable, TypeVar

T = TypeVar("T")

ALL_COUNTIES: Final[str] = "All Counties"

NY_COUNTIES: Final[list[str]] = [
    "Albany", "Allegany", "Bronx", "Broome", "Cattaraugus", "Cayuga", "Chautauqua",
    "Chemung", "Chenango", "Clinton", "Columbia", "Cortland", "Delaware", "Dutchess",
    "Erie", "Essex", "Franklin", "Fulton", "Genesee", "Greene", "Hamilton", "Herkimer",
    "Jefferson", "Kings", "Lewis", "Livingston", "Madison", "Monroe", "Montgomery",
    "Nassau", "New York", "Niagara", "Oneida", "Onondaga", "Ontario", "Orange",
    "Orleans", "Oswego", "Otsego", "Putnam", "Queens", "Rensselaer", "Richmond",
    "Rockland", "Saratoga", "Schenectady", "Schoharie", "Schuyler", "Seneca",
    "St. Lawrence", "Steuben", "Suffolk", "Sullivan", "Tioga", "Tompkins", "Ulster",
    "Warren", "Washington", "Wayne", "Westchester", "Wyoming", "Yates",
]

# Options for the county selector, sentinel first
COUNTY_OPTIONS: Final[list[str]] = [ALL_COUNTIES, *NY_COUNTIES]

_COUNTY_SUFFIX = re.compile(r"\s+county$")


def _get(obj: Any, key: str) -> Any:
    if isinstance(obj, dict):
        return obj.get(key)
    return getattr(obj, key, None)


def normalize_county(name: str | None) -> str:
    """Normalize a county name for comparison.

    Trims, lower-cases and drops a trailing "county", so "Erie County",
    " erie " and "ERIE" all compare equal. Idempotent.
    """
    value = (name or "").strip().lower()
    while True:
        stripped = _COUNTY_SUFFIX.sub("", value).strip()
        if stripped == value:
            return value
        value = stripped


def matches_search(location: Any, query: str | None) -> bool:
    """Case-insensitive substring match on org name, city, county or any service."""
    if not query:
        return True
    needle = query.lower()

    org = _get(location, "organization")
    org_name = _get(org, "name") if org is not None else None
    services = (_get(org, "services") if org is not None else None) or []

    fields = [org_name, _get(location, "city"), _get(location, "county")]
    if any(field and needle in field.lower() for field in fields):
        return True
    return any(service and needle in service.lower() for service in services)


def matches_county(location: Any, county: str | None) -> bool:
    """County equality after normalization; the sentinel (or nothing) matches all."""
    if not county or county == ALL_COUNTIES:
        return True
    return normalize_county(_get(location, "county")) == normalize_county(county)


def filter_locations(locations: Iterable[T], query: str | None = "", county: str | None = ALL_COUNTIES) -> list[T]:
    """Return the locations matching both the search text and the county, in input order."""
    return [
        location for location in locations
        if matches_search(location, query) and matches_county(location, county)
    ]
