# src/tech_news/api/endpoints/posts.py
"""Post-related endpoints, including upvoting."""

from fastapi import APIRouter

from tech_news.schemas.common import AffectedRows
from tech_news.schemas.post import PostCreate, PostResponse, PostUpdate
from tech_news.schemas.vote import UpvoteRequest
from tech_news.services import post_service

from ..dependencies import ContextDep, SessionDep

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=list[PostResponse])
async def list_posts(db: SessionDep) -> list[PostResponse]:
    """List posts newest first with author, comments and vote count."""
    return await post_service.list_posts(db)


# Declared before "/{post_id}" so "upvote" is not parsed as an id.
@router.put("/upvote", response_model=PostResponse)
async def upvote_post(payload: UpvoteRequest, db: SessionDep, context: ContextDep) -> PostResponse:
    """Cast the caller's vote and return the post with its new count."""
    return await post_service.upvote(db, payload.post_id, context)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: int, db: SessionDep) -> PostResponse:
    """Return a single post."""
    return await post_service.get_post(db, post_id)


@router.post("", response_model=PostResponse)
async def create_post(payload: PostCreate, db: SessionDep, context: ContextDep) -> PostResponse:
    """Submit a link as the logged-in user."""
    return await post_service.create_post(db, payload, context)


@router.put("/{post_id}", response_model=AffectedRows)
async def update_post(post_id: int, payload: PostUpdate, db: SessionDep) -> AffectedRows:
    """Change a post's title."""
    affected = await post_service.update_post(db, post_id, payload)
    return AffectedRows(affected_rows=affected)


@router.delete("/{post_id}", response_model=AffectedRows)
async def delete_post(post_id: int, db: SessionDep) -> AffectedRows:
    """Delete a post with its comments and votes."""
    affected = await post_service.delete_post(db, post_id)
    return AffectedRows(affected_rows=affected)
