"""Login sessions stored in the database and the per-request auth context."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from tech_news.core.errors import AuthRequired
from tech_news.core.security import create_session_token, decode_session_token
from tech_news.core.settings import settings
from tech_news.repositories import SessionRepository

__all__ = [
    "ANONYMOUS",
    "RequestContext",
    "close_session",
    "open_session",
    "prune_expired_sessions",
    "resolve_context",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """Who is making the current request, resolved once before the endpoint runs."""

    user_id: int | None = None
    session_id: str | None = None

    @property
    def logged_in(self) -> bool:
        """Return True when the request carries a live session."""
        return self.user_id is not None

    def require_user_id(self) -> int:
        """Return the authenticated user id.

        Raises:
            AuthRequired: If the request has no live session.
        """
        if self.user_id is None:
            raise AuthRequired()
        return self.user_id


ANONYMOUS = RequestContext()


async def resolve_context(db: AsyncSession, token: str | None) -> RequestContext:
    """Turn a session cookie value into a request context.

    Missing, tampered, expired and unknown tokens all yield ``ANONYMOUS``.
    """
    if not token:
        return ANONYMOUS
    sid = decode_session_token(token)
    if sid is None:
        return ANONYMOUS
    web_session = await SessionRepository(db).get_active(sid)
    if web_session is None:
        return ANONYMOUS
    return RequestContext(user_id=web_session.user_id, session_id=web_session.sid)


async def open_session(db: AsyncSession, user_id: int) -> str:
    """Start a session for ``user_id`` and return the signed cookie value.

    Expired sessions are pruned in the same transaction.
    """
    repo = SessionRepository(db)
    pruned = await repo.prune_expired()
    if pruned:
        logger.debug("Pruned %d expired sessions", pruned)
    web_session = await repo.create(
        user_id=user_id,
        max_age_seconds=settings.session_max_age_seconds,
    )
    await db.commit()
    return create_session_token(web_session.sid, web_session.expires_at)


async def close_session(db: AsyncSession, context: RequestContext) -> None:
    """Destroy the session behind ``context``.

    Raises:
        AuthRequired: If the request is not logged in.
    """
    context.require_user_id()
    if context.session_id is not None:
        await SessionRepository(db).delete_sid(context.session_id)
        await db.commit()


async def prune_expired_sessions(db: AsyncSession) -> int:
    """Delete expired sessions; used at start-up."""
    removed = await SessionRepository(db).prune_expired()
    await db.commit()
    return removed
