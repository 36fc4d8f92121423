"""User accounts: the validate → hash → persist pipeline and credential checks."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from fastapi.concurrency import run_in_threadpool
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tech_news.core.errors import AuthFailed, NotFound, ValidationError
from tech_news.core.security import check_password, hash_password
from tech_news.models import User
from tech_news.repositories import UserRepository
from tech_news.schemas.user import UserCreate, UserUpdate

__all__ = [
    "authenticate",
    "create_user",
    "delete_user",
    "get_user_detail",
    "list_users",
    "update_user",
]

logger = logging.getLogger(__name__)

USER_NOT_FOUND = "No user found with this id"
EMAIL_TAKEN = "Email address is already registered"


async def list_users(db: AsyncSession) -> Sequence[User]:
    """Return all users."""
    return await UserRepository(db).list_all()


async def get_user_detail(db: AsyncSession, user_id: int) -> User:
    """Return a user with their posts, comments and voted posts.

    Raises:
        NotFound: If no user has ``user_id``.
    """
    user = await UserRepository(db).get_detail(user_id)
    if user is None:
        raise NotFound(USER_NOT_FOUND)
    return user


async def create_user(db: AsyncSession, payload: UserCreate) -> User:
    """Register a new user.

    The payload has already passed schema validation; the password is hashed
    off the event loop and only the hash is written.

    Raises:
        ValidationError: If the email address is already registered.
    """
    repo = UserRepository(db)
    if await repo.email_taken(payload.email):
        raise ValidationError(EMAIL_TAKEN)

    password_hash = await run_in_threadpool(hash_password, payload.password)
    try:
        user = await repo.create(
            username=payload.username,
            email=payload.email,
            password_hash=password_hash,
        )
        await db.commit()
    except IntegrityError as err:
        await db.rollback()
        logger.info("Rejected duplicate registration for %s", payload.email)
        raise ValidationError(EMAIL_TAKEN) from err

    logger.info("Registered user %s", user.id)
    return user


async def update_user(db: AsyncSession, user_id: int, payload: UserUpdate) -> int:
    """Apply a partial update, re-hashing the password when one is supplied.

    Returns:
        Number of affected rows (always 1 on success).

    Raises:
        NotFound: If no user has ``user_id``.
        ValidationError: If the new email belongs to another user.
    """
    repo = UserRepository(db)
    changes = payload.model_dump(exclude_unset=True, exclude_none=True)

    if "email" in changes and await repo.email_taken(changes["email"], exclude_user_id=user_id):
        raise ValidationError(EMAIL_TAKEN)
    if "password" in changes:
        changes["password"] = await run_in_threadpool(hash_password, changes["password"])

    try:
        affected = await repo.update(user_id, changes)
    except IntegrityError as err:
        await db.rollback()
        raise ValidationError(EMAIL_TAKEN) from err
    if affected == 0:
        await db.rollback()
        raise NotFound(USER_NOT_FOUND)

    await db.commit()
    logger.info("Updated user %s (%s)", user_id, ", ".join(sorted(changes)) or "no fields")
    return affected


async def delete_user(db: AsyncSession, user_id: int) -> int:
    """Hard-delete a user; their posts, comments, votes and sessions go with them.

    Raises:
        NotFound: If no user has ``user_id``.
    """
    affected = await UserRepository(db).delete_by_id(user_id)
    if affected == 0:
        await db.rollback()
        raise NotFound(USER_NOT_FOUND)
    await db.commit()
    logger.info("Deleted user %s", user_id)
    return affected


async def authenticate(db: AsyncSession, email: str, password: str) -> User:
    """Return the user owning ``email`` if ``password`` matches.

    Unknown emails and wrong passwords produce the same error so the login
    form cannot be used to discover registered addresses.

    Raises:
        AuthFailed: If the credentials do not match.
    """
    user = await UserRepository(db).get_by_email(email.strip())
    if user is None:
        logger.info("Login failed: unknown email")
        raise AuthFailed()

    if not await run_in_threadpool(check_password, password, user.password):
        logger.info("Login failed: wrong password for user %s", user.id)
        raise AuthFailed()
    return user
