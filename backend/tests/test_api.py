"""HTTP-level tests against the FastAPI app with an in-memory session."""

import uuid

import pytest
from fastapi.testclient import TestClient

from dayhab.main import app
from dayhab.models import Location, Organization, Review
from dayhab.models.base import get_db
from tests.conftest import FakeSession


def _location(org, city, county):
    loc = Location(
        id=uuid.uuid4(),
        organization_id=org.id,
        name=f"{org.name} - {city}",
        address="1 Main Street",
        city=city,
        county=county,
        state="NY",
        zip_code="14201",
    )
    loc.organization = org
    return loc


@pytest.fixture()
def directory():
    hope = Organization(id=uuid.uuid4(), name="Hope Day Habilitation Center", services=["Life Skills Training"])
    bright = Organization(id=uuid.uuid4(), name="Bright Futures Day Program", services=["Recreation"])
    buffalo = _location(hope, "Buffalo", "Erie")
    lackawanna = _location(hope, "Lackawanna", "Erie County")
    rochester = _location(bright, "Rochester", "Monroe")
    reviews = [
        Review(id=uuid.uuid4(), user_id=uuid.uuid4(), location_id=buffalo.id, rating=5),
        Review(id=uuid.uuid4(), user_id=uuid.uuid4(), location_id=buffalo.id, rating=4),
    ]
    rows = [hope, bright, buffalo, lackawanna, rochester, *reviews]
    return FakeSession(rows), {"buffalo": buffalo, "lackawanna": lackawanna, "rochester": rochester}


@pytest.fixture()
def serve():
    """Build a client whose requests all use the given session."""
    def _serve(db):
        async def override_get_db():
            yield db

        app.dependency_overrides[get_db] = override_get_db
        return TestClient(app)

    yield _serve
    app.dependency_overrides.clear()


@pytest.fixture()
def client(directory, serve):
    db, _ = directory
    return serve(db)


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_review_form_layout(client):
    response = client.get("/api/v1/reviews/form")
    assert response.status_code == 200
    body = response.json()
    assert len(body["steps"]) == 7
    assert body["steps"][0]["step"] == "type_selection"
    assert body["max_narrative_chars"] == 2000
    assert body["max_title_chars"] == 255


def test_counties(client):
    counties = client.get("/api/v1/locations/counties").json()
    assert counties[0] == "All Counties"
    assert len(counties) == 63
    assert "St. Lawrence" in counties


def test_list_filtered_by_county(client, directory):
    _, locations = directory
    response = client.get("/api/v1/locations", params={"county": "Erie"})
    assert response.status_code == 200
    items = {item["city"]: item for item in response.json()}
    assert set(items) == {"Buffalo", "Lackawanna"}

    buffalo = items["Buffalo"]
    assert buffalo["rating"] == {"average_rating": 4.5, "review_count": 2}
    assert buffalo["is_favorited"] is False
    assert buffalo["organization"]["name"] == "Hope Day Habilitation Center"
    assert items["Lackawanna"]["rating"] is None


def test_list_search_matches_service(client):
    response = client.get("/api/v1/locations", params={"search": "recreation"})
    assert [item["city"] for item in response.json()] == ["Rochester"]


def test_missing_location(client):
    response = client.get(f"/api/v1/locations/{uuid.uuid4()}")
    assert response.status_code == 404


def test_mutation_requires_csrf(client, directory):
    _, locations = directory
    response = client.post(f"/api/v1/favorites/{locations['buffalo'].id}/toggle")
    assert response.status_code == 403


def test_mutation_requires_login(client, directory):
    _, locations = directory
    token = client.get("/api/v1/auth/csrf").json()["csrf_token"]
    response = client.post(
        f"/api/v1/favorites/{locations['buffalo'].id}/toggle",
        headers={"X-CSRF-Token": token},
    )
    assert response.status_code == 401


def _selects_ratings(stmt):
    return "rating" in [desc["name"] for desc in stmt.column_descriptions]


def test_unreachable_database_on_detail(serve):
    response = serve(FakeSession(fail_on="execute")).get(f"/api/v1/locations/{uuid.uuid4()}")
    assert response.status_code == 503
    assert response.json()["detail"] == "Something went wrong. Please try again."


def test_rating_lookup_failure_is_not_shown_as_unrated(serve, directory):
    db, _ = directory
    failing = FakeSession(db.rows, fail_if=_selects_ratings)

    response = serve(failing).get("/api/v1/locations", params={"search": "Buffalo"})

    assert response.status_code == 503
    assert response.json()["detail"] == "Failed to load programs. Please try again."


def test_rating_lookup_failure_on_detail(serve, directory):
    db, locations = directory
    failing = FakeSession(db.rows, fail_if=_selects_ratings)

    response = serve(failing).get(f"/api/v1/locations/{locations['buffalo'].id}")

    assert response.status_code == 503
