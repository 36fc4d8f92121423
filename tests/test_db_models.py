"""Unit tests for the ORM models in tech_news.models.

These check the mapping itself: table names, constraints and cascade rules
that the services rely on.
"""

from sqlalchemy.orm import attributes

from tech_news.db.session import Base
from tech_news.models import Comment, Post, User, Vote, WebSession


def test_table_names() -> None:
    assert User.__tablename__ == "user"
    assert Post.__tablename__ == "post"
    assert Comment.__tablename__ == "comment"
    assert Vote.__tablename__ == "vote"
    assert WebSession.__tablename__ == "sessions"
    assert set(Base.metadata.tables) == {"user", "post", "comment", "vote", "sessions"}


def test_user_email_is_unique() -> None:
    assert User.__table__.c.email.unique is True


def test_vote_is_unique_per_user_and_post() -> None:
    uniques = [
        {col.name for col in constraint.columns}
        for constraint in Vote.__table__.constraints
        if constraint.__class__.__name__ == "UniqueConstraint"
    ]
    assert {"user_id", "post_id"} in uniques


def test_foreign_keys_cascade_on_delete() -> None:
    expected = {
        ("post", "user_id"): "user.id",
        ("comment", "user_id"): "user.id",
        ("comment", "post_id"): "post.id",
        ("vote", "user_id"): "user.id",
        ("vote", "post_id"): "post.id",
        ("sessions", "user_id"): "user.id",
    }
    for (table_name, column_name), target in expected.items():
        column = Base.metadata.tables[table_name].c[column_name]
        (fk,) = column.foreign_keys
        assert fk.target_fullname == target
        assert fk.ondelete == "CASCADE"
        assert column.nullable is False


def test_post_has_no_stored_vote_count() -> None:
    assert "vote_count" not in Post.__table__.c


def test_relationships_are_instrumented_attributes() -> None:
    for attr in (
        User.posts,
        User.comments,
        User.votes,
        User.voted_posts,
        Post.user,
        Post.comments,
        Post.votes,
        Post.voters,
        Comment.user,
        Comment.post,
        Vote.user,
        Vote.post,
    ):
        assert isinstance(attr, attributes.InstrumentedAttribute)
