"""Data access helpers for votes."""
from __future__ import annotations

from sqlalchemy import select

from tech_news.models import Vote

from .base import CrudRepository

__all__ = ["VoteRepository"]


class VoteRepository(CrudRepository[Vote]):
    """Votes are inserted by upvoting and otherwise only read or deleted."""

    model = Vote

    async def find(self, user_id: int, post_id: int) -> Vote | None:
        """Return the vote ``user_id`` cast on ``post_id``, if any."""
        result = await self.session.execute(
            select(Vote).where(Vote.user_id == user_id, Vote.post_id == post_id)
        )
        return result.scalars().first()

    async def create(self, *, user_id: int, post_id: int) -> Vote:
        """Insert a vote row."""
        return await self.add(Vote(user_id=user_id, post_id=post_id))
