"""Caregiver account endpoints — register, login, logout, current profile."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from dayhab.models.base import get_db
from dayhab.models.profile import Profile
from dayhab.models.user import User
from dayhab.dependencies.auth import check_csrf, ensure_csrf_token, require_user_api
from dayhab.schemas.auth import CsrfTokenRead, LoginRequest, ProfileRead, RegisterRequest
from dayhab.services.accounts import register_caregiver, registration_error, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/csrf", response_model=CsrfTokenRead)
async def csrf_token(request: Request):
    """Token to send back as X-CSRF-Token on every mutating request."""
    return CsrfTokenRead(csrf_token=ensure_csrf_token(request))


@router.post("/register", response_model=ProfileRead, status_code=201, dependencies=[Depends(check_csrf)])
async def register(request: Request, body: RegisterRequest, db: AsyncSession = Depends(get_db)):
    email = body.email.strip().lower()
    full_name = body.full_name.strip()

    error = registration_error(email, full_name, body.password, body.confirm_password)
    if error:
        raise HTTPException(status_code=400, detail=error)

    try:
        user = await register_caregiver(db, email, full_name, body.password)
    except IntegrityError:
        await db.rollback()
        raise HTTPException(status_code=409, detail="Email already registered.")

    request.session["user_id"] = str(user.id)
    return ProfileRead(id=user.id, email=email, full_name=full_name)


@router.post("/login", response_model=ProfileRead, dependencies=[Depends(check_csrf)])
async def login(request: Request, body: LoginRequest, db: AsyncSession = Depends(get_db)):
    email = body.email.strip().lower()

    result = await db.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()

    if not user or not verify_password(body.password, user.hashed_password):
        raise HTTPException(status_code=401, detail="Invalid email or password.")
    if not user.is_active:
        raise HTTPException(status_code=403, detail="This account has been deactivated.")

    request.session["user_id"] = str(user.id)
    user.last_login_at = datetime.now(timezone.utc)
    logger.info("Caregiver %s signed in", user.id)

    return await _profile_for(db, user)


@router.post("/logout", status_code=204, dependencies=[Depends(check_csrf)])
async def logout(request: Request):
    request.session.clear()


@router.get("/me", response_model=ProfileRead)
async def me(user: User = Depends(require_user_api), db: AsyncSession = Depends(get_db)):
    return await _profile_for(db, user)


async def _profile_for(db: AsyncSession, user: User) -> ProfileRead:
    result = await db.execute(select(Profile).where(Profile.id == user.id))
    profile = result.scalar_one_or_none()
    if not profile:
        return ProfileRead(id=user.id, email=user.email, full_name="")
    return ProfileRead.model_validate(profile)
