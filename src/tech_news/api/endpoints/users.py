# src/tech_news/api/endpoints/users.py
"""User account, login and logout endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Response, status

from tech_news.core.settings import settings
from tech_news.schemas.common import AffectedRows
from tech_news.schemas.user import (
    LoginRequest,
    LoginResponse,
    UserCreate,
    UserDetailResponse,
    UserResponse,
    UserUpdate,
)
from tech_news.services import session_service, user_service

from ..dependencies import ContextDep, SessionDep

router = APIRouter(prefix="/users", tags=["users"])
logger = logging.getLogger(__name__)


def _set_session_cookie(response: Response, token: str) -> None:
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.session_max_age_seconds,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )


@router.get("", response_model=list[UserResponse])
async def list_users(db: SessionDep) -> list[UserResponse]:
    """List every user without password hashes."""
    users = await user_service.list_users(db)
    return [UserResponse.model_validate(user) for user in users]


@router.get("/{user_id}", response_model=UserDetailResponse)
async def get_user(user_id: int, db: SessionDep) -> UserDetailResponse:
    """Return one user with their posts, comments and voted posts."""
    user = await user_service.get_user_detail(db, user_id)
    return UserDetailResponse.model_validate(user)


@router.post("", response_model=UserResponse)
async def create_user(payload: UserCreate, response: Response, db: SessionDep) -> UserResponse:
    """Sign up. The new user is logged in straight away."""
    user = await user_service.create_user(db, payload)
    token = await session_service.open_session(db, user.id)
    _set_session_cookie(response, token)
    return UserResponse.model_validate(user)


@router.post("/login", response_model=LoginResponse)
async def login(payload: LoginRequest, response: Response, db: SessionDep) -> LoginResponse:
    """Check credentials and start a session."""
    user = await user_service.authenticate(db, payload.email, payload.password)
    token = await session_service.open_session(db, user.id)
    _set_session_cookie(response, token)
    logger.info("User %s logged in", user.id)
    return LoginResponse(user=UserResponse.model_validate(user), message="You are now logged in!")


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(db: SessionDep, context: ContextDep) -> Response:
    """End the caller's session. Anonymous callers get 401."""
    await session_service.close_session(db, context)
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    response.delete_cookie(settings.session_cookie_name, samesite="lax")
    return response


@router.put("/{user_id}", response_model=AffectedRows)
async def update_user(user_id: int, payload: UserUpdate, db: SessionDep) -> AffectedRows:
    """Partially update a user; a new password is re-hashed."""
    affected = await user_service.update_user(db, user_id, payload)
    return AffectedRows(affected_rows=affected)


@router.delete("/{user_id}", response_model=AffectedRows)
async def delete_user(user_id: int, db: SessionDep) -> AffectedRows:
    """Delete a user and everything they own."""
    affected = await user_service.delete_user(db, user_id)
    return AffectedRows(affected_rows=affected)
