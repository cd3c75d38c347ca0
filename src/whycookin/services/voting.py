"""Voting service keeping the vote ledger and post counters in step.

A vote call is one database transaction: the post row is locked, the caller's
ledger entry is inserted or flipped, and the counters are adjusted with SQL
arithmetic. Either all of it commits or none of it does.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from whycookin.core.errors import AppError, NotFoundError, StorageError
from whycookin.models import Post, PostVote
from whycookin.models.vote import VOTE_DOWN, VOTE_UP

logger = logging.getLogger(__name__)


class VoteIntent(Enum):
    """Direction requested by a single vote call."""

    UP = VOTE_UP
    DOWN = VOTE_DOWN


@dataclass(frozen=True)
class VoteOutcome:
    """Result of a vote call; counters are set only when they changed."""

    success: bool
    message: str
    upvotes: int | None = None
    downvotes: int | None = None


_NEW_VOTE_MESSAGES = {VoteIntent.UP: "Upvoted!", VoteIntent.DOWN: "Downvoted!"}
_REPEAT_MESSAGES = {
    VoteIntent.UP: "Already upvoted this post.",
    VoteIntent.DOWN: "Already downvoted this post.",
}
_FLIP_MESSAGES = {
    VoteIntent.UP: "Changed vote to upvote.",
    VoteIntent.DOWN: "Changed vote to downvote.",
}


class VotingService:
    """Apply up/down votes for one database session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def apply_vote(self, user_id: int, post_id: int, intent: VoteIntent) -> VoteOutcome:
        """Record ``user_id``'s vote on ``post_id``.

        Args:
            user_id: The voter.
            post_id: The post being voted on.
            intent: Requested direction.

        Returns:
            The outcome, including whichever counters the vote changed.

        Raises:
            NotFoundError: If the post does not exist.
            StorageError: If the database rejects any part of the unit.
        """
        try:
            try:
                return self._apply(user_id, post_id, intent)
            except IntegrityError:
                # A concurrent call by the same voter inserted the entry first;
                # rerun against the committed ledger.
                self.db.rollback()
                logger.info("Vote by user %s on post %s raced, retrying", user_id, post_id)
                return self._apply(user_id, post_id, intent)
        except AppError:
            self.db.rollback()
            raise
        except SQLAlchemyError as err:
            self.db.rollback()
            logger.exception("Vote by user %s on post %s rolled back", user_id, post_id)
            raise StorageError() from err

    def get_my_vote(self, user_id: int, post_id: int) -> int:
        """Return the caller's current direction on a post, 0 for no vote.

        Raises:
            NotFoundError: If the post does not exist.
        """
        if self.db.get(Post, post_id) is None:
            raise NotFoundError("Post not found")
        vote = self._ledger_entry(user_id, post_id)
        return vote.direction if vote is not None else 0

    def _ledger_entry(self, user_id: int, post_id: int) -> PostVote | None:
        return self.db.query(PostVote).filter(
            PostVote.user_id == user_id,
            PostVote.post_id == post_id,
        ).first()

    def _adjust_counters(self, post_id: int, values: dict[Any, Any]) -> None:
        # Counters change in SQL, never from values read into Python.
        self.db.query(Post).filter(Post.id == post_id).update(values, synchronize_session=False)

    def _apply(self, user_id: int, post_id: int, intent: VoteIntent) -> VoteOutcome:
        post = self.db.query(Post).filter(Post.id == post_id).with_for_update().first()
        if post is None:
            raise NotFoundError("Post not found")

        existing = self._ledger_entry(user_id, post_id)
        incremented = Post.upvotes if intent is VoteIntent.UP else Post.downvotes
        decremented = Post.downvotes if intent is VoteIntent.UP else Post.upvotes

        if existing is None:
            self.db.add(PostVote(user_id=user_id, post_id=post_id, direction=intent.value))
            self.db.flush()
            self._adjust_counters(post_id, {incremented: incremented + 1})
            self.db.commit()
            self.db.refresh(post)
            logger.debug("User %s voted %s on post %s", user_id, intent.name, post_id)
            if intent is VoteIntent.UP:
                return VoteOutcome(True, _NEW_VOTE_MESSAGES[intent], upvotes=post.upvotes)
            return VoteOutcome(True, _NEW_VOTE_MESSAGES[intent], downvotes=post.downvotes)

        if existing.direction == intent.value:
            # Nothing to write; release the row lock.
            self.db.rollback()
            return VoteOutcome(False, _REPEAT_MESSAGES[intent])

        existing.direction = intent.value
        self.db.flush()
        self._adjust_counters(
            post_id,
            {incremented: incremented + 1, decremented: decremented - 1},
        )
        self.db.commit()
        self.db.refresh(post)
        logger.debug("User %s flipped vote to %s on post %s", user_id, intent.name, post_id)
        return VoteOutcome(
            True,
            _FLIP_MESSAGES[intent],
            upvotes=post.upvotes,
            downvotes=post.downvotes,
        )
