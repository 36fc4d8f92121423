# src/tech_news/api/__init__.py
"""HTTP API and page routes."""

from .endpoints import (
    comments_router,
    pages_router,
    posts_router,
    users_router,
    votes_router,
)

__all__ = [
    "comments_router",
    "pages_router",
    "posts_router",
    "users_router",
    "votes_router",
]
