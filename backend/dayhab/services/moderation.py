"""Moderation fields derived from a submitted review.

Usage:
    from dayhab.services.moderation import moderate

    fields = moderate(review_type="safety", text=raw, tags=["Safety"], visibility="public")
    # {"sanitized_text": ..., "tags": [...], "flagged": True, "status": "pending"}
"""

import html
import re
from typing import Any, Final
from uuid import UUID

STATUS_PUBLISHED: Final[str] = "published"
STATUS_PENDING: Final[str] = "pending"
STATUS_PRIVATE: Final[str] = "private"

# Review types that always go to manual review before publishing
SENSITIVE_REVIEW_TYPES: Final[frozenset[str]] = frozenset({"safety"})

_MARKUP = re.compile(r"<[^>]*>")
_CONTROL_CHARS = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")
_WHITESPACE = re.compile(r"\s+")


def sanitize_text(text: str | None) -> str:
    """Plain-text version of a review for search and display in listings."""
    if not text:
        return ""
    cleaned = _MARKUP.sub(" ", text)
    cleaned = html.unescape(cleaned)
    cleaned = _CONTROL_CHARS.sub("", cleaned)
    return _WHITESPACE.sub(" ", cleaned).strip()


def derive_status(visibility: str, flagged: bool) -> str:
    if visibility == "private":
        return STATUS_PRIVATE
    if flagged:
        return STATUS_PENDING
    return STATUS_PUBLISHED


def moderate(review_type: str, text: str, tags: list[str], visibility: str) -> dict[str, Any]:
    flagged = review_type in SENSITIVE_REVIEW_TYPES
    return {
        "sanitized_text": sanitize_text(text),
        "tags": list(dict.fromkeys(tags)),
        "flagged": flagged,
        "status": derive_status(visibility, flagged),
    }


def is_visible_to(review: Any, viewer_id: UUID | None) -> bool:
    """Published reviews are public; authors always see their own."""
    if review.status == STATUS_PUBLISHED:
        return True
    return viewer_id is not None and review.user_id == viewer_id
