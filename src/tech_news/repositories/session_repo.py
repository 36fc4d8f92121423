"""Data access helpers for server-side login sessions."""
from __future__ import annotations

import secrets
from datetime import datetime, timedelta

from sqlalchemy import delete, select

from tech_news.db.time import utcnow
from tech_news.models import WebSession

from .base import CrudRepository

__all__ = ["SessionRepository"]


class SessionRepository(CrudRepository[WebSession]):
    """Create, resolve and destroy rows of the ``sessions`` table."""

    model = WebSession

    async def create(self, *, user_id: int, max_age_seconds: int) -> WebSession:
        """Open a session for ``user_id`` that expires after ``max_age_seconds``."""
        now = utcnow()
        return await self.add(
            WebSession(
                sid=secrets.token_urlsafe(32),
                user_id=user_id,
                created_at=now,
                expires_at=now + timedelta(seconds=max_age_seconds),
            )
        )

    async def get_active(self, sid: str, now: datetime | None = None) -> WebSession | None:
        """Return the session ``sid`` unless it has expired."""
        result = await self.session.execute(
            select(WebSession).where(
                WebSession.sid == sid,
                WebSession.expires_at > (now or utcnow()),
            )
        )
        return result.scalars().first()

    async def delete_sid(self, sid: str) -> int:
        """Destroy a session; return the number of rows removed."""
        result = await self.session.execute(delete(WebSession).where(WebSession.sid == sid))
        return int(result.rowcount or 0)

    async def prune_expired(self, now: datetime | None = None) -> int:
        """Delete every expired session; return how many were removed."""
        result = await self.session.execute(
            delete(WebSession).where(WebSession.expires_at <= (now or utcnow()))
        )
        return int(result.rowcount or 0)
