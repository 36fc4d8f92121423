# src/tech_news/models/vote.py
"""Model linking users to the posts they upvoted."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tech_news.db.session import Base

if TYPE_CHECKING:
    from .post import Post
    from .user import User


class Vote(Base):
    """A single upvote.

    Acts as the through table of the User/Post many-to-many relationship
    and is also queried directly to count votes per post.
    """

    __tablename__ = "vote"
    __table_args__ = (
        UniqueConstraint("user_id", "post_id", name="uq_vote_user_post"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("user.id", ondelete="CASCADE"),
        nullable=False,
    )
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user: Mapped[User] = relationship("User", back_populates="votes")
    post: Mapped[Post] = relationship("Post", back_populates="votes")
