"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class AffectedRows(BaseModel):
    """Result of an update or delete: how many rows the statement touched."""

    affected_rows: int = Field(..., ge=0, description="Number of rows changed")


class MessageResponse(BaseModel):
    """Plain informational or error message."""

    message: str


class AuthorRef(BaseModel):
    """The public part of a user embedded in posts and comments."""

    username: str

    model_config = ConfigDict(from_attributes=True)
