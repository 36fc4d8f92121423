# src/tech_news/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .comment import CommentCreate, CommentResponse, CommentWithAuthor
from .common import AffectedRows, AuthorRef, MessageResponse
from .post import PostCreate, PostResponse, PostSummary, PostUpdate
from .user import (
    LoginRequest,
    LoginResponse,
    UserCreate,
    UserDetailResponse,
    UserResponse,
    UserUpdate,
)
from .vote import UpvoteRequest, VoteResponse

__all__ = [
    "AffectedRows", "AuthorRef", "MessageResponse",
    "CommentCreate", "CommentResponse", "CommentWithAuthor",
    "LoginRequest", "LoginResponse",
    "PostCreate", "PostResponse", "PostSummary", "PostUpdate",
    "UpvoteRequest", "VoteResponse",
    "UserCreate", "UserDetailResponse", "UserResponse", "UserUpdate",
]
