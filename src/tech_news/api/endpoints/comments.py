# src/tech_news/api/endpoints/comments.py
"""Comment endpoints."""

from fastapi import APIRouter

from tech_news.schemas.comment import CommentCreate, CommentResponse
from tech_news.schemas.common import AffectedRows
from tech_news.services import comment_service

from ..dependencies import ContextDep, SessionDep

router = APIRouter(prefix="/comments", tags=["comments"])


@router.get("", response_model=list[CommentResponse])
async def list_comments(db: SessionDep) -> list[CommentResponse]:
    comments = await comment_service.list_comments(db)
    return [CommentResponse.model_validate(comment) for comment in comments]


@router.get("/{comment_id}", response_model=CommentResponse)
async def get_comment(comment_id: int, db: SessionDep) -> CommentResponse:
    comment = await comment_service.get_comment(db, comment_id)
    return CommentResponse.model_validate(comment)


@router.post("", response_model=CommentResponse)
async def create_comment(
    payload: CommentCreate,
    db: SessionDep,
    context: ContextDep,
) -> CommentResponse:
    """Comment on a post as the logged-in user."""
    comment = await comment_service.create_comment(db, payload, context)
    return CommentResponse.model_validate(comment)


@router.delete("/{comment_id}", response_model=AffectedRows)
async def delete_comment(comment_id: int, db: SessionDep) -> AffectedRows:
    affected = await comment_service.delete_comment(db, comment_id)
    return AffectedRows(affected_rows=affected)
