# src/whycookin/models/post.py
"""SQLAlchemy models for forum posts and comments."""

from __future__ import annotations

import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from whycookin.db.session import Base
from whycookin.db.time import utcnow
from whycookin.models.community import Subcategory
from whycookin.models.user import User


class Post(Base):
    """Forum post with denormalized vote counters.

    ``upvotes`` and ``downvotes`` always match the number of ``post_votes``
    rows for this post with direction 1 and -1. Only the voting service and
    the delete cascade touch them.
    """

    __tablename__ = "posts"
    __table_args__ = (
        CheckConstraint("upvotes >= 0", name="ck_posts_upvotes_non_negative"),
        CheckConstraint("downvotes >= 0", name="ck_posts_downvotes_non_negative"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    subcategory_id: Mapped[int | None] = mapped_column(
        Integer,
        ForeignKey("subcategories.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    upvotes: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    downvotes: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        index=True,
    )

    author: Mapped[User] = relationship(User)
    subcategory: Mapped[Subcategory | None] = relationship(Subcategory)


class Comment(Base):
    """Reply attached to a post; removed together with the post."""

    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    author_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    text: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    author: Mapped[User] = relationship(User)
    post: Mapped[Post] = relationship(Post)
