"""Data access helpers for working with posts and their vote counts."""
from __future__ import annotations

from typing import Any

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from tech_news.models import Comment, Post, Vote

from .base import CrudRepository

__all__ = ["PostRepository", "count_votes", "vote_count_column"]


def vote_count_column() -> Any:
    """Return the correlated ``COUNT(*)`` of votes for the enclosing post row.

    Selected next to ``Post`` so the count is always read from the vote
    table rather than stored on the post.
    """
    return (
        select(func.count(Vote.id))
        .where(Vote.post_id == Post.id)
        .correlate(Post)
        .scalar_subquery()
        .label("vote_count")
    )


async def count_votes(session: AsyncSession, post_id: int) -> int:
    """Return the number of votes cast on ``post_id``."""
    result = await session.execute(
        select(func.count(Vote.id)).where(Vote.post_id == post_id)
    )
    return int(result.scalar_one())


class PostRepository(CrudRepository[Post]):
    """Post queries that always carry the computed ``vote_count``."""

    model = Post

    def _with_votes(self) -> Select[tuple[Post, int]]:
        return (
            select(Post, vote_count_column())
            .options(
                selectinload(Post.user),
                selectinload(Post.comments).selectinload(Comment.user),
            )
            .execution_options(populate_existing=True)
        )

    async def list_with_votes(self, user_id: int | None = None) -> list[tuple[Post, int]]:
        """Return ``(post, vote_count)`` pairs, newest first.

        Args:
            user_id: Only return posts owned by this user when given.
        """
        stmt = self._with_votes()
        if user_id is not None:
            stmt = stmt.where(Post.user_id == user_id)
        stmt = stmt.order_by(Post.created_at.desc(), Post.id.desc())
        result = await self.session.execute(stmt)
        return [(post, int(count)) for post, count in result.all()]

    async def get_with_votes(self, post_id: int) -> tuple[Post, int] | None:
        """Return a single ``(post, vote_count)`` pair, or None if absent."""
        result = await self.session.execute(self._with_votes().where(Post.id == post_id))
        row = result.first()
        if row is None:
            return None
        post, count = row
        return post, int(count)

    async def exists(self, post_id: int) -> bool:
        """Return True when a post with ``post_id`` is stored."""
        result = await self.session.execute(select(Post.id).where(Post.id == post_id))
        return result.scalar_one_or_none() is not None

    async def create(self, *, title: str, post_url: str, user_id: int) -> Post:
        """Insert a new post and return the persisted ORM instance."""
        return await self.add(Post(title=title, post_url=post_url, user_id=user_id))

    async def update_title(self, post_id: int, title: str) -> int:
        """Change a post's title; return the number of affected rows."""
        return await self.update_by_id(post_id, {"title": title})
