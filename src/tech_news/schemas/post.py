# src/tech_news/schemas/post.py
"""Post-related Pydantic schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, TypeAdapter, field_validator
from pydantic import ValidationError as PydanticValidationError

from .comment import CommentWithAuthor
from .common import AuthorRef

_http_url = TypeAdapter(HttpUrl)


class PostCreate(BaseModel):
    """Schema for submitting a new link; the owner comes from the session."""

    title: str = Field(..., min_length=1, max_length=255, description="Headline shown in the feed")
    post_url: str = Field(..., max_length=2048, description="Absolute http(s) URL")

    model_config = ConfigDict(str_strip_whitespace=True)

    @field_validator("post_url")
    @classmethod
    def validate_post_url(cls, v: str) -> str:
        """Reject anything that is not a syntactically valid http(s) URL.

        The submitted string is stored as-is rather than in pydantic's
        normalised form.
        """
        try:
            _http_url.validate_python(v)
        except PydanticValidationError as err:
            raise ValueError("post_url must be a valid http(s) URL") from err
        return v


class PostUpdate(BaseModel):
    """Schema for editing a post. Only the title can change."""

    title: str = Field(..., min_length=1, max_length=255)

    model_config = ConfigDict(str_strip_whitespace=True)


class PostResponse(BaseModel):
    """Schema for post information returned by the API."""

    id: int
    title: str
    post_url: str
    user_id: int
    created_at: datetime
    vote_count: int = 0
    user: AuthorRef | None = None
    comments: list[CommentWithAuthor] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)

    @classmethod
    def from_row(cls, post: Any, vote_count: int) -> "PostResponse":
        """Build a response from a loaded Post and its computed vote count.

        ``post.user`` and ``post.comments`` (with each comment's user) must
        already be loaded.
        """
        return cls(
            id=post.id,
            title=post.title,
            post_url=post.post_url,
            user_id=post.user_id,
            created_at=post.created_at,
            vote_count=int(vote_count or 0),
            user=AuthorRef.model_validate(post.user) if post.user is not None else None,
            comments=[CommentWithAuthor.model_validate(c) for c in post.comments],
        )


class PostSummary(BaseModel):
    """Minimal post fields embedded in user profiles."""

    id: int
    title: str
    post_url: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
