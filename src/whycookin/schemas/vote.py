# src/whycookin/schemas/vote.py
"""Vote-related Pydantic schemas."""

from typing import Literal

from pydantic import BaseModel, Field


class VoteResult(BaseModel):
    """Outcome of an upvote or downvote request.

    Only the counters the vote changed are populated; a rejected repeat vote
    carries neither.
    """

    success: bool
    message: str
    upvotes: int | None = None
    downvotes: int | None = None


class MyVoteResponse(BaseModel):
    """The caller's current vote on a post."""

    direction: Literal[-1, 0, 1] = Field(..., description="1 upvote, -1 downvote, 0 no vote")
