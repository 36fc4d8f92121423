# src/tech_news/schemas/comment.py
"""Comment-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from .common import AuthorRef


class CommentCreate(BaseModel):
    """Schema for creating a comment; the author comes from the session."""

    comment_text: str = Field(..., min_length=1, max_length=1000, description="Comment body")
    post_id: int = Field(..., ge=1, description="ID of the post being commented on")

    model_config = ConfigDict(str_strip_whitespace=True)


class CommentResponse(BaseModel):
    """Schema for comment information returned by the API."""

    id: int
    comment_text: str
    user_id: int
    post_id: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class CommentWithAuthor(CommentResponse):
    """Comment as embedded in a post, carrying the author's username."""

    user: AuthorRef | None = None
