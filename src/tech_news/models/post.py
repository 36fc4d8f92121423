# src/tech_news/models/post.py
"""SQLAlchemy model for link posts."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tech_news.db.session import Base
from tech_news.db.time import utcnow

if TYPE_CHECKING:
    from .comment import Comment
    from .user import User
    from .vote import Vote


class Post(Base):
    """A titled link submitted by a user.

    The number of upvotes is not stored here; it is computed from the vote
    table whenever posts are read (see ``post_repo.vote_count_column``).
    """

    __tablename__ = "post"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    post_url: Mapped[str] = mapped_column(String(2048), nullable=False)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    # Set once on insert; updates never touch it.
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )

    user: Mapped[User] = relationship("User", back_populates="posts")
    comments: Mapped[list[Comment]] = relationship(
        "Comment",
        back_populates="post",
        passive_deletes=True,
        order_by="Comment.created_at",
    )
    votes: Mapped[list[Vote]] = relationship(
        "Vote",
        back_populates="post",
        passive_deletes=True,
    )
    voters: Mapped[list[User]] = relationship(
        "User",
        secondary="vote",
        back_populates="voted_posts",
        viewonly=True,
    )
