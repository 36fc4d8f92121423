"""Data access helpers for users."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.orm import selectinload

from tech_news.models import Comment, User

from .base import CrudRepository

__all__ = ["UserRepository"]


class UserRepository(CrudRepository[User]):
    """User lookups plus the profile query with posts, comments and votes."""

    model = User

    async def get_by_email(self, email: str) -> User | None:
        """Return the user registered under ``email``, ignoring case."""
        result = await self.session.execute(
            select(User)
            .where(func.lower(User.email) == email.lower())
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    async def get_detail(self, user_id: int) -> User | None:
        """Return a user with posts, comments (and their posts) and voted posts loaded."""
        result = await self.session.execute(
            select(User)
            .where(User.id == user_id)
            .options(
                selectinload(User.posts),
                selectinload(User.comments).selectinload(Comment.post),
                selectinload(User.voted_posts),
            )
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    async def email_taken(self, email: str, exclude_user_id: int | None = None) -> bool:
        """Return True when another user already uses ``email`` in any letter case."""
        stmt = select(User.id).where(func.lower(User.email) == email.lower())
        if exclude_user_id is not None:
            stmt = stmt.where(User.id != exclude_user_id)
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def create(self, *, username: str, email: str, password_hash: str) -> User:
        """Insert a user whose password has already been hashed."""
        return await self.add(User(username=username, email=email, password=password_hash))

    async def update(self, user_id: int, values: Mapping[str, Any]) -> int:
        """Apply already-validated (and already-hashed) field changes."""
        return await self.update_by_id(user_id, values)

