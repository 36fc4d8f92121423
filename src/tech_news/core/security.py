"""Password hashing and session token helpers."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta

import bcrypt
from jose import JWTError, jwt

from tech_news.core.settings import settings


def hash_password(plaintext: str, rounds: int | None = None) -> str:
    """Return a salted bcrypt hash of ``plaintext``.

    Args:
        plaintext: The password exactly as the user submitted it.
        rounds: bcrypt cost factor; defaults to ``settings.bcrypt_rounds``.
    """
    salt = bcrypt.gensalt(rounds=rounds or settings.bcrypt_rounds)
    return bcrypt.hashpw(plaintext.encode("utf-8"), salt).decode("utf-8")


def check_password(plaintext: str, stored_hash: str) -> bool:
    """Verify a candidate password against a stored bcrypt hash.

    Returns:
        True if ``plaintext`` produced ``stored_hash``; False otherwise,
        including when the stored value is not a bcrypt hash.
    """
    try:
        return bcrypt.checkpw(plaintext.encode("utf-8"), stored_hash.encode("utf-8"))
    except ValueError:
        return False


def create_session_token(session_id: str, expires_at: datetime | None = None) -> str:
    """Sign a session id into the value stored in the session cookie."""
    if expires_at is None:
        expires_at = datetime.now(UTC) + timedelta(seconds=settings.session_max_age_seconds)
    to_encode: dict[str, object] = {"sub": session_id, "exp": expires_at}
    encoded: str = jwt.encode(to_encode, settings.secret_key, algorithm=settings.jwt_algorithm)
    return encoded


def decode_session_token(token: str) -> str | None:
    """Return the session id carried by ``token``, or None if it is invalid or expired."""
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None
    subject = payload.get("sub")
    return subject if isinstance(subject, str) else None
