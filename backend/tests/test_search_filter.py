"""Tests for directory search and county filtering."""

from types import SimpleNamespace

import pytest

from dayhab.services.search_filter import (
    ALL_COUNTIES,
    COUNTY_OPTIONS,
    filter_locations,
    matches_county,
    matches_search,
    normalize_county,
)


def _loc(org_name, city, county, services=None):
    return {
        "city": city,
        "county": county,
        "organization": {"name": org_name, "services": services},
    }


@pytest.fixture()
def locations():
    return [
        _loc("Hope Day Habilitation Center", "Buffalo", "Erie", ["Life Skills Training", "Arts & Crafts"]),
        _loc("Bright Futures Day Program", "Rochester", "Monroe County", ["Vocational Training"]),
        _loc("Community Connect Day Services", "Syracuse", "Onondaga", None),
        _loc("Lakeside Supports", "Lackawanna", "Erie County", ["Job Coaching"]),
    ]


class TestNormalizeCounty:
    @pytest.mark.parametrize("raw", ["Erie County", "erie", " ERIE ", "Erie   county", "erie county county"])
    def test_variants_normalize_to_same_value(self, raw):
        assert normalize_county(raw) == "erie"

    @pytest.mark.parametrize("raw", [
        "Erie County", "St. Lawrence County", "New York", " Monroe county ", "", None, "County", "erie county county",
    ])
    def test_idempotent(self, raw):
        once = normalize_county(raw)
        assert normalize_county(once) == once

    def test_erie_county_equals_erie(self):
        assert normalize_county("Erie County") == normalize_county("erie")

    def test_county_word_inside_name_is_kept(self):
        assert normalize_county("Countyville") == "countyville"

    def test_none_is_empty(self):
        assert normalize_county(None) == ""


class TestMatchesSearch:
    def test_empty_query_matches(self, locations):
        assert all(matches_search(loc, "") for loc in locations)
        assert all(matches_search(loc, None) for loc in locations)

    def test_org_name_case_insensitive(self, locations):
        assert matches_search(locations[0], "hope DAY")

    def test_city(self, locations):
        assert matches_search(locations[1], "roch")

    def test_county(self, locations):
        assert matches_search(locations[2], "onon")

    def test_service(self, locations):
        assert matches_search(locations[0], "crafts")

    def test_missing_services_do_not_match(self, locations):
        assert not matches_search(locations[2], "training")

    def test_works_with_attribute_objects(self):
        loc = SimpleNamespace(
            city="Albany", county="Albany",
            organization=SimpleNamespace(name="Capital Day Program", services=["Recreation"]),
        )
        assert matches_search(loc, "recreation")
        assert not matches_search(loc, "buffalo")


class TestMatchesCounty:
    def test_sentinel_matches_everything(self, locations):
        assert all(matches_county(loc, ALL_COUNTIES) for loc in locations)

    def test_no_selection_matches_everything(self, locations):
        assert all(matches_county(loc, None) for loc in locations)
        assert all(matches_county(loc, "") for loc in locations)

    def test_suffix_on_record(self, locations):
        assert matches_county(locations[1], "Monroe")

    def test_suffix_on_filter(self, locations):
        assert matches_county(locations[0], "Erie County")

    def test_exact_equality_not_substring(self, locations):
        assert not matches_county(locations[0], "Eri")


class TestFilterLocations:
    def test_empty_query_all_counties_returns_input(self, locations):
        assert filter_locations(locations, "", ALL_COUNTIES) == locations

    @pytest.mark.parametrize("query", ["day", "TRAINING", "erie", "syr", "zzz", "a"])
    def test_matches_subsequence_definition(self, locations, query):
        q = query.lower()
        expected = [
            loc for loc in locations
            if q in loc["organization"]["name"].lower()
            or q in loc["city"].lower()
            or q in loc["county"].lower()
            or any(q in s.lower() for s in (loc["organization"]["services"] or []))
        ]
        assert filter_locations(locations, query, ALL_COUNTIES) == expected

    def test_both_predicates_apply(self, locations):
        result = filter_locations(locations, "coaching", "Erie")
        assert [loc["city"] for loc in result] == ["Lackawanna"]

    def test_county_only(self, locations):
        result = filter_locations(locations, "", "Erie")
        assert [loc["city"] for loc in result] == ["Buffalo", "Lackawanna"]

    def test_no_matches(self, locations):
        assert filter_locations(locations, "day", "Yates") == []

    def test_empty_input(self):
        assert filter_locations([], "anything", "Erie") == []

    def test_does_not_mutate_input(self, locations):
        before = list(locations)
        filter_locations(locations, "hope", "Erie")
        assert locations == before


def test_county_options_start_with_sentinel():
    assert COUNTY_OPTIONS[0] == ALL_COUNTIES
    assert "St. Lawrence" in COUNTY_OPTIONS
    assert len(COUNTY_OPTIONS) == 63
