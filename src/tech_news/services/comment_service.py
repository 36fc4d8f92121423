"""Service-level helpers for comments."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tech_news.core.errors import ConstraintViolation, NotFound
from tech_news.models import Comment
from tech_news.repositories import CommentRepository
from tech_news.schemas.comment import CommentCreate

from .session_service import RequestContext

__all__ = ["create_comment", "delete_comment", "get_comment", "list_comments"]

logger = logging.getLogger(__name__)

COMMENT_NOT_FOUND = "No comment found with this id"


async def list_comments(db: AsyncSession) -> Sequence[Comment]:
    """Return every comment."""
    return await CommentRepository(db).list_all()


async def get_comment(db: AsyncSession, comment_id: int) -> Comment:
    """Return one comment.

    Raises:
        NotFound: If no comment has ``comment_id``.
    """
    comment = await CommentRepository(db).get_by_id(comment_id)
    if comment is None:
        raise NotFound(COMMENT_NOT_FOUND)
    return comment


async def create_comment(
    db: AsyncSession,
    payload: CommentCreate,
    context: RequestContext,
) -> Comment:
    """Add a comment by the logged-in user to ``payload.post_id``.

    Raises:
        AuthRequired: If the request is not logged in.
        ConstraintViolation: If the post does not exist.
    """
    user_id = context.require_user_id()
    try:
        comment = await CommentRepository(db).create(
            comment_text=payload.comment_text,
            post_id=payload.post_id,
            user_id=user_id,
        )
        await db.commit()
    except IntegrityError as err:
        await db.rollback()
        logger.info("Comment rejected: post %s does not exist", payload.post_id)
        raise ConstraintViolation("No post found with this id") from err

    logger.info("User %s commented on post %s", user_id, payload.post_id)
    return comment


async def delete_comment(db: AsyncSession, comment_id: int) -> int:
    """Hard-delete a comment.

    Raises:
        NotFound: If no comment has ``comment_id``.
    """
    affected = await CommentRepository(db).delete_by_id(comment_id)
    if affected == 0:
        await db.rollback()
        raise NotFound(COMMENT_NOT_FOUND)
    await db.commit()
    return affected
