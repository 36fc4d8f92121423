# src/tech_news/models/user.py
"""SQLAlchemy model for registered users."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tech_news.db.session import Base

if TYPE_CHECKING:
    from .comment import Comment
    from .post import Post
    from .vote import Vote


class User(Base):
    """Account that can post links, comment and upvote.

    ``password`` only ever holds a bcrypt hash; the user service hashes the
    submitted plaintext before the row is written.
    """

    __tablename__ = "user"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    posts: Mapped[list[Post]] = relationship(
        "Post",
        back_populates="user",
        passive_deletes=True,
    )
    comments: Mapped[list[Comment]] = relationship(
        "Comment",
        back_populates="user",
        passive_deletes=True,
    )
    votes: Mapped[list[Vote]] = relationship(
        "Vote",
        back_populates="user",
        passive_deletes=True,
    )
    # Many-to-many through the vote table.
    voted_posts: Mapped[list[Post]] = relationship(
        "Post",
        secondary="vote",
        back_populates="voters",
        viewonly=True,
    )
