"""Data access helpers for comments."""
from __future__ import annotations

from tech_news.models import Comment

from .base import CrudRepository

__all__ = ["CommentRepository"]


class CommentRepository(CrudRepository[Comment]):
    """Comments are created and deleted, never updated."""

    model = Comment

    async def create(self, *, comment_text: str, post_id: int, user_id: int) -> Comment:
        """Insert a comment and return the persisted ORM instance."""
        return await self.add(Comment(comment_text=comment_text, post_id=post_id, user_id=user_id))
