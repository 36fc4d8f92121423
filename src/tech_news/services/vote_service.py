"""Read and delete access to individual votes. Votes are cast through ``post_service.upvote``."""
from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from tech_news.core.errors import NotFound
from tech_news.models import Vote
from tech_news.repositories import VoteRepository

__all__ = ["delete_vote", "get_vote", "list_votes"]

VOTE_NOT_FOUND = "No vote found with this id"


async def list_votes(db: AsyncSession) -> Sequence[Vote]:
    """Return every vote."""
    return await VoteRepository(db).list_all()


async def get_vote(db: AsyncSession, vote_id: int) -> Vote:
    """Return one vote, or raise NotFound."""
    vote = await VoteRepository(db).get_by_id(vote_id)
    if vote is None:
        raise NotFound(VOTE_NOT_FOUND)
    return vote


async def delete_vote(db: AsyncSession, vote_id: int) -> int:
    """Withdraw a vote; the post's count drops on the next read."""
    affected = await VoteRepository(db).delete_by_id(vote_id)
    if affected == 0:
        await db.rollback()
        raise NotFound(VOTE_NOT_FOUND)
    await db.commit()
    return affected
