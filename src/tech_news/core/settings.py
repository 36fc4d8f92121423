"""Application settings and configuration.

This module defines all configuration options for the Tech News application.
Settings are loaded from environment variables with sensible defaults.
"""

from urllib.parse import quote_plus

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ASYNC_DRIVERS = {
    "mysql://": "mysql+aiomysql://",
    "mysql+pymysql://": "mysql+aiomysql://",
    "sqlite://": "sqlite+aiosqlite://",
}

_SYNC_DRIVERS = {
    "mysql+aiomysql://": "mysql+pymysql://",
    "sqlite+aiosqlite://": "sqlite://",
}


def _swap_driver(url: str, mapping: dict[str, str]) -> str:
    for prefix, replacement in mapping.items():
        if url.startswith(prefix):
            return replacement + url[len(prefix):]
    return url


def to_async_url(url: str) -> str:
    """Rewrite a database URL to use the asyncio driver for its backend."""
    return _swap_driver(url, _ASYNC_DRIVERS)


def to_sync_url(url: str) -> str:
    """Rewrite a database URL to use the blocking driver for its backend."""
    return _swap_driver(to_async_url(url), _SYNC_DRIVERS)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Tech News", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3001, alias="PORT")

    # Security and authentication
    secret_key: str = Field(alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    bcrypt_rounds: int = Field(default=10, ge=4, le=31, alias="BCRYPT_ROUNDS")

    # Database-backed login sessions
    session_cookie_name: str = Field(default="tech_news_sid", alias="SESSION_COOKIE_NAME")
    session_max_age_seconds: int = Field(default=60 * 60 * 24, alias="SESSION_MAX_AGE_SECONDS")
    session_cookie_secure: bool = Field(default=False, alias="SESSION_COOKIE_SECURE")

    # CORS settings; the pages are same-origin so only local tooling is allowed
    cors_origins: list[str] = Field(
        default=["http://localhost:3001"],
        alias="CORS_ORIGINS",
    )
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )

    # Database configuration
    database_url: str | None = Field(default=None, alias="DATABASE_URL")
    # Hosted MySQL add-ons hand out a single connection URL.
    jawsdb_url: str | None = Field(default=None, alias="JAWSDB_URL")
    db_name: str = Field(default="tech_news_db", alias="DB_NAME")
    db_user: str = Field(default="root", alias="DB_USER")
    db_password: str = Field(default="", alias="DB_PW")
    db_host: str = Field(default="localhost", alias="DB_HOST")
    db_port: int = Field(default=3306, alias="DB_PORT")
    test_database_url: str | None = Field(default=None, alias="TEST_DATABASE_URL")
    use_testing_database: bool = Field(default=False, alias="USE_TEST_DATABASE")
    db_sync_on_startup: bool = Field(default=True, alias="DB_SYNC_ON_STARTUP")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def effective_database_url(self) -> str:
        """Return the async database URL respecting testing overrides.

        Precedence: the test database (when enabled), ``DATABASE_URL``,
        ``JAWSDB_URL``, then a MySQL URL assembled from the ``DB_*`` parts.
        Plain ``mysql://`` URLs are rewritten to use the aiomysql driver.

        Returns:
            The active SQLAlchemy database URL
        """
        if self.use_testing_database and self.test_database_url:
            url = self.test_database_url
        elif self.database_url:
            url = self.database_url
        elif self.jawsdb_url:
            url = self.jawsdb_url
        else:
            credentials = quote_plus(self.db_user)
            if self.db_password:
                credentials += f":{quote_plus(self.db_password)}"
            url = (
                f"mysql+aiomysql://{credentials}@{self.db_host}:{self.db_port}/{self.db_name}"
            )
        return to_async_url(url)

    @property
    def database_url_sync(self) -> str:
        """Return a sync-compatible database URL for tooling.

        Converts async driver URLs to their blocking counterparts for
        Alembic migrations.
        """
        return to_sync_url(self.effective_database_url)


settings = Settings()  # type: ignore[call-arg]
