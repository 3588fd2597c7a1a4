"""Tests for derived moderation fields."""

import uuid
from types import SimpleNamespace

from dayhab.services.moderation import derive_status, is_visible_to, moderate, sanitize_text


def test_sanitize_strips_markup_and_whitespace():
    raw = "<p>Great   staff &amp; <b>activities</b></p>\n\n\x07Thanks"
    assert sanitize_text(raw) == "Great staff & activities Thanks"


def test_sanitize_empty():
    assert sanitize_text(None) == ""
    assert sanitize_text("   ") == ""


def test_derive_status():
    assert derive_status("public", False) == "published"
    assert derive_status("public", True) == "pending"
    assert derive_status("private", False) == "private"
    assert derive_status("private", True) == "private"


def test_safety_reviews_are_flagged():
    fields = moderate("safety", "Door left unlocked", ["Safety", "Safety"], "public")
    assert fields["flagged"] is True
    assert fields["status"] == "pending"
    assert fields["tags"] == ["Safety"]


def test_general_reviews_publish():
    fields = moderate("general", "Lovely program", [], "public")
    assert fields == {"sanitized_text": "Lovely program", "tags": [], "flagged": False, "status": "published"}


def test_visibility_to_viewer():
    author, other = uuid.uuid4(), uuid.uuid4()
    pending = SimpleNamespace(status="pending", user_id=author)
    published = SimpleNamespace(status="published", user_id=author)

    assert is_visible_to(published, None)
    assert is_visible_to(pending, author)
    assert not is_visible_to(pending, other)
    assert not is_visible_to(pending, None)
