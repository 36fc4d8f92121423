# src/tech_news/db/__init__.py
"""Database configuration and utilities."""

from .session import AsyncSessionLocal, Base, engine, get_db, sync_schema

__all__ = ["get_db", "AsyncSessionLocal", "Base", "engine", "sync_schema"]
