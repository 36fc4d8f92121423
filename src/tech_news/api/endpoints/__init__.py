# src/tech_news/api/endpoints/__init__.py
"""API endpoint modules."""

from .comments import router as comments_router
from .pages import router as pages_router
from .posts import router as posts_router
from .users import router as users_router
from .votes import router as votes_router

__all__ = [
    "comments_router",
    "pages_router",
    "posts_router",
    "users_router",
    "votes_router",
]
