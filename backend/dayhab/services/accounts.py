"""Caregiver accounts — bcrypt password hashing and registration."""

import logging
from datetime import datetime, timezone

import bcrypt
from sqlalchemy.ext.asyncio import AsyncSession

from dayhab.models.user import User
from dayhab.models.profile import Profile

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 8


def hash_password(password: str) -> str:
    """Hash a plaintext password using bcrypt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plaintext password against a bcrypt hash."""
    return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))


def registration_error(email: str, full_name: str, password: str, confirm: str) -> str | None:
    """Return the first problem with a registration form, or None."""
    if not email or not full_name or not password:
        return "All fields are required."
    if len(password) < MIN_PASSWORD_LENGTH:
        return f"Password must be at least {MIN_PASSWORD_LENGTH} characters."
    if password != confirm:
        return "Passwords do not match."
    return None


async def register_caregiver(db: AsyncSession, email: str, full_name: str, password: str) -> User:
    """Create the account and its caregiver profile together.

    Flushes so a duplicate email raises IntegrityError for the caller.
    """
    user = User(
        email=email,
        hashed_password=hash_password(password),
        is_active=True,
        last_login_at=datetime.now(timezone.utc),
    )
    db.add(user)
    await db.flush()

    profile = Profile(id=user.id, email=email, full_name=full_name)
    db.add(profile)
    await db.flush()

    logger.info("Registered caregiver %s", user.id)
    return user
