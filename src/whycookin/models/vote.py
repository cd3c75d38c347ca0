# src/whycookin/models/vote.py
"""Models capturing voting interactions on posts."""

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, SmallInteger
from sqlalchemy.orm import Mapped, mapped_column

from whycookin.db.session import Base

VOTE_UP = 1
VOTE_DOWN = -1


class PostVote(Base):
    """Ledger entry holding one user's current vote on one post.

    A missing row means "no vote"; there is never a zero direction.
    """

    __tablename__ = "post_votes"
    __table_args__ = (
        CheckConstraint("direction IN (1, -1)", name="ck_post_votes_direction"),
        Index("ix_post_votes_post_id", "post_id"),
    )

    # Composite primary key prevents duplicate votes from the same user.
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    )

    # 1 = upvote, -1 = downvote.
    direction: Mapped[int] = mapped_column(SmallInteger, nullable=False)
