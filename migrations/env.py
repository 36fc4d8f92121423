"""Alembic environment for the Tech News tables.

The app talks to MySQL or SQLite through aiomysql/aiosqlite, but Alembic
runs blocking. Whatever URL reaches this file is rewritten to pymysql or
the stdlib sqlite driver before an engine is built.

URL precedence: ``ALEMBIC_URL``, then ``sqlalchemy.url`` as set by
``tech-news-db --migrate``, then the URL the app settings resolve to.
"""
from __future__ import annotations

import os
import sys
from logging.config import fileConfig
from pathlib import Path

from alembic import context
from sqlalchemy import engine_from_config, pool

# Lets a plain `alembic -c migrations/alembic.ini` work from a checkout.
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

import tech_news.models  # noqa: E402,F401  registers users, posts, comments, votes, sessions
from tech_news.core.settings import settings, to_sync_url  # noqa: E402
from tech_news.db.session import Base  # noqa: E402

config = context.config

if config.config_file_name is not None:
    # Keep the app's tech_news.* loggers alive when migrating in-process.
    fileConfig(config.config_file_name, disable_existing_loggers=False)

url = os.getenv("ALEMBIC_URL") or config.get_main_option("sqlalchemy.url") or settings.database_url_sync
config.set_main_option("sqlalchemy.url", to_sync_url(url))

target_metadata = Base.metadata


def include_object(obj, name, type_, reflected, compare_to):
    """Skip the alembic_version table when autogenerating."""
    return not (type_ == "table" and name == "alembic_version")


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=target_metadata,
        include_object=include_object,
        # Report String length changes too, not only added or dropped columns.
        compare_type=True,
        **kwargs,
    )


def run_migrations_offline() -> None:
    """Emit the SQL for the upgrade without connecting."""
    _configure(
        url=config.get_main_option("sqlalchemy.url"),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Connect with the blocking driver and apply the upgrade."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        # SQLite cannot ALTER most columns, so changes go through table copies.
        _configure(connection=connection, render_as_batch=connection.dialect.name == "sqlite")
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
