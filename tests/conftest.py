# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import AsyncIterator, Awaitable, Callable
from pathlib import Path
from typing import Any

# Settings are read at import time, so the environment must be ready first.
os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["DB_SYNC_ON_STARTUP"] = "false"

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from tech_news.db.session import Base, build_engine
from tech_news.db.session import get_db as app_get_session
from tech_news.main import app as fastapi_app
from tech_news.models import Post, User
from tech_news.schemas.post import PostCreate
from tech_news.schemas.user import UserCreate
from tech_news.services import RequestContext, post_service, user_service


@pytest_asyncio.fixture()
async def engine(tmp_path: Path) -> AsyncIterator[AsyncEngine]:
    """A fresh SQLite file per test, with foreign keys enforced."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'tech_news.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture()
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


@pytest_asyncio.fixture()
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(
    app: FastAPI,
    session_factory: async_sessionmaker[AsyncSession],
) -> Any:
    """Give each request its own session on the per-test database."""

    async def _get_session_override() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def make_client(app: FastAPI) -> Callable[[], AsyncClient]:
    """Factory for independent clients, each with its own cookie jar."""

    def _make() -> AsyncClient:
        return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")

    return _make


@pytest_asyncio.fixture()
async def client(make_client: Callable[[], AsyncClient]) -> AsyncIterator[AsyncClient]:
    async with make_client() as test_client:
        yield test_client


@pytest.fixture()
def test_user_data() -> dict[str, str]:
    return {"username": "alice", "email": "alice@example.com", "password": "password123"}


@pytest.fixture()
def other_user_data() -> dict[str, str]:
    return {"username": "bob", "email": "bob@example.com", "password": "hunter22"}


@pytest_asyncio.fixture()
async def test_user(db_session: AsyncSession, test_user_data: dict[str, str]) -> User:
    return await user_service.create_user(db_session, UserCreate(**test_user_data))


@pytest_asyncio.fixture()
async def other_user(db_session: AsyncSession, other_user_data: dict[str, str]) -> User:
    return await user_service.create_user(db_session, UserCreate(**other_user_data))


@pytest_asyncio.fixture()
async def test_post(db_session: AsyncSession, test_user: User) -> Post:
    created = await post_service.create_post(
        db_session,
        PostCreate(title="Python 3.14 released", post_url="https://www.python.org/downloads/"),
        RequestContext(user_id=test_user.id),
    )
    post = await db_session.get(Post, created.id)
    assert post is not None
    return post


LoginFn = Callable[[AsyncClient, dict[str, str]], Awaitable[None]]


@pytest.fixture()
def login() -> LoginFn:
    """Log ``client`` in with the given user data; the session cookie stays in its jar."""

    async def _login(client: AsyncClient, user_data: dict[str, str]) -> None:
        response = await client.post(
            "/api/users/login",
            json={"email": user_data["email"], "password": user_data["password"]},
        )
        assert response.status_code == 200, response.text

    return _login


@pytest_asyncio.fixture()
async def auth_client(
    client: AsyncClient,
    test_user: User,
    test_user_data: dict[str, str],
    login: LoginFn,
) -> AsyncClient:
    """``client`` logged in as ``test_user``."""
    await login(client, test_user_data)
    return client
