# src/tech_news/services/__init__.py
"""Business logic services for the Tech News application."""

from . import comment_service, post_service, session_service, user_service, vote_service
from .session_service import ANONYMOUS, RequestContext

__all__ = [
    "ANONYMOUS",
    "RequestContext",
    "comment_service",
    "post_service",
    "session_service",
    "user_service",
    "vote_service",
]
