"""Data access layer: one repository per record type."""

from .comment_repo import CommentRepository
from .post_repo import PostRepository, count_votes, vote_count_column
from .session_repo import SessionRepository
from .user_repo import UserRepository
from .vote_repo import VoteRepository

__all__ = [
    "CommentRepository",
    "PostRepository",
    "SessionRepository",
    "UserRepository",
    "VoteRepository",
    "count_votes",
    "vote_count_column",
]
