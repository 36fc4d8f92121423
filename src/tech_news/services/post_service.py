"""Service-level helpers for posts, vote counts and upvoting."""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tech_news.core.errors import ConstraintViolation, NotFound, ValidationError
from tech_news.models import Post
from tech_news.repositories import PostRepository, VoteRepository
from tech_news.schemas.post import PostCreate, PostResponse, PostUpdate

from .session_service import RequestContext

__all__ = [
    "create_post",
    "delete_post",
    "get_post",
    "list_posts",
    "to_post_response",
    "update_post",
    "upvote",
]

logger = logging.getLogger(__name__)

POST_NOT_FOUND = "No post found with this id"
ALREADY_VOTED = "You have already upvoted this post"


def to_post_response(post: Post, vote_count: int) -> PostResponse:
    """Convert a Post ORM instance and its vote count to an API schema."""
    return PostResponse.from_row(post, vote_count)


async def list_posts(db: AsyncSession, user_id: int | None = None) -> list[PostResponse]:
    """Return posts newest first with owner, comments and vote counts.

    Args:
        db: Database session
        user_id: Restrict the list to one owner (used by the dashboard)
    """
    rows = await PostRepository(db).list_with_votes(user_id=user_id)
    return [to_post_response(post, count) for post, count in rows]


async def get_post(db: AsyncSession, post_id: int) -> PostResponse:
    """Return a single post in the same shape as ``list_posts``.

    Raises:
        NotFound: If no post has ``post_id``.
    """
    row = await PostRepository(db).get_with_votes(post_id)
    if row is None:
        raise NotFound(POST_NOT_FOUND)
    return to_post_response(*row)


async def create_post(db: AsyncSession, payload: PostCreate, context: RequestContext) -> PostResponse:
    """Create a post owned by the logged-in user.

    The owner is always taken from ``context``, never from the payload.

    Raises:
        AuthRequired: If the request is not logged in.
        ConstraintViolation: If the session's user no longer exists.
    """
    user_id = context.require_user_id()
    repo = PostRepository(db)
    try:
        post = await repo.create(title=payload.title, post_url=payload.post_url, user_id=user_id)
        await db.commit()
    except IntegrityError as err:
        await db.rollback()
        logger.warning("Post rejected: user %s does not exist", user_id)
        raise ConstraintViolation() from err

    logger.info("User %s created post %s", user_id, post.id)
    return await get_post(db, post.id)


async def update_post(db: AsyncSession, post_id: int, payload: PostUpdate) -> int:
    """Change a post's title.

    Raises:
        NotFound: If no post has ``post_id``.
    """
    affected = await PostRepository(db).update_title(post_id, payload.title)
    if affected == 0:
        await db.rollback()
        raise NotFound(POST_NOT_FOUND)
    await db.commit()
    return affected


async def delete_post(db: AsyncSession, post_id: int) -> int:
    """Hard-delete a post together with its comments and votes.

    Raises:
        NotFound: If no post has ``post_id``.
    """
    affected = await PostRepository(db).delete_by_id(post_id)
    if affected == 0:
        await db.rollback()
        raise NotFound(POST_NOT_FOUND)
    await db.commit()
    logger.info("Deleted post %s", post_id)
    return affected


async def upvote(db: AsyncSession, post_id: int, context: RequestContext) -> PostResponse:
    """Record the caller's vote on ``post_id`` and return the post with its new count.

    The insert and the re-read run in one transaction, so the returned
    ``vote_count`` includes the vote just cast.

    Raises:
        AuthRequired: If the request is not logged in.
        ConstraintViolation: If ``post_id`` does not reference a post.
        ValidationError: If the caller already upvoted this post.
    """
    user_id = context.require_user_id()
    posts = PostRepository(db)
    votes = VoteRepository(db)

    if not await posts.exists(post_id):
        raise ConstraintViolation(POST_NOT_FOUND)
    if await votes.find(user_id, post_id) is not None:
        raise ValidationError(ALREADY_VOTED)

    try:
        await votes.create(user_id=user_id, post_id=post_id)
    except IntegrityError as err:
        await db.rollback()
        # Lost a race: either the post vanished or a concurrent vote landed first.
        if not await posts.exists(post_id):
            raise ConstraintViolation(POST_NOT_FOUND) from err
        raise ValidationError(ALREADY_VOTED) from err

    row = await posts.get_with_votes(post_id)
    await db.commit()
    if row is None:  # pragma: no cover - the insert above would have failed
        raise ConstraintViolation(POST_NOT_FOUND)

    logger.info("User %s upvoted post %s", user_id, post_id)
    return to_post_response(*row)
