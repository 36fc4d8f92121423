"""Command-line entry point that provisions the configured database schema."""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy.exc import SQLAlchemyError

from tech_news.core.settings import settings, to_async_url, to_sync_url
from tech_news.db.session import build_engine, sync_schema

PROJECT_ROOT = Path(__file__).resolve().parents[3]
DEFAULT_ALEMBIC_INI = PROJECT_ROOT / "migrations" / "alembic.ini"


def alembic_config(ini_path: Path = DEFAULT_ALEMBIC_INI, url: str | None = None) -> Config:
    """Build an Alembic config pointed at the migrations folder and the sync URL."""
    cfg = Config(str(ini_path))
    cfg.set_main_option("script_location", str(ini_path.parent))
    cfg.set_main_option("sqlalchemy.url", url or settings.database_url_sync)
    return cfg


def run_upgrade_head(ini_path: Path = DEFAULT_ALEMBIC_INI, url: str | None = None) -> None:
    """Apply every migration up to ``head``."""
    command.upgrade(alembic_config(ini_path, url), "head")


async def _sync(url: str, force: bool) -> None:
    engine = build_engine(url)
    try:
        await sync_schema(force=force, bind=engine)
    finally:
        await engine.dispose()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create or reset the Tech News tables")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--force",
        action="store_true",
        help="Drop every table before recreating it. Destroys all data.",
    )
    mode.add_argument(
        "--migrate",
        action="store_true",
        help="Run Alembic migrations to head instead of creating tables from the models.",
    )
    parser.add_argument(
        "--url",
        default=None,
        help="Override database URL (defaults to effective settings URL)",
    )
    parser.add_argument(
        "--alembic-ini",
        type=Path,
        default=DEFAULT_ALEMBIC_INI,
        help="Path to alembic.ini (used with --migrate)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(levelname)s [%(name)s] %(message)s",
    )

    if args.migrate and not args.alembic_ini.is_file():
        # Installed wheels do not carry the migrations folder.
        print(
            f"[sync_db] ERROR: {args.alembic_ini} not found; pass --alembic-ini pointing at "
            "the migrations/alembic.ini of a source checkout",
            file=sys.stderr,
        )
        return 1

    try:
        if args.migrate:
            run_upgrade_head(args.alembic_ini, to_sync_url(args.url) if args.url else None)
            print("[sync_db] migrations applied")
        else:
            url = to_async_url(args.url) if args.url else settings.effective_database_url
            asyncio.run(_sync(url, args.force))
            print("[sync_db] schema synced" + (" (tables recreated)" if args.force else ""))
    except SQLAlchemyError as exc:
        print(f"[sync_db] ERROR: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
