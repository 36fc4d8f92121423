"""Shared API dependencies for database access and the session cookie."""

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from tech_news.core.settings import settings
from tech_news.db.session import get_db
from tech_news.services.session_service import RequestContext, resolve_context

# Type alias for database session dependency
SessionDep = Annotated[AsyncSession, Depends(get_db)]


async def get_request_context(request: Request, db: SessionDep) -> RequestContext:
    """Resolve the caller from the session cookie.

    Args:
        request: Incoming request carrying the cookie
        db: Database session

    Returns:
        The caller's context; anonymous when there is no live session
    """
    token = request.cookies.get(settings.session_cookie_name)
    return await resolve_context(db, token)


# Type alias for the per-request auth context
ContextDep = Annotated[RequestContext, Depends(get_request_context)]
