# src/whycookin/api/v1/endpoints/votes.py
"""Vote endpoints for forum posts."""

from typing import Annotated

from fastapi import APIRouter, Depends

from whycookin.schemas.vote import MyVoteResponse, VoteResult
from whycookin.services.voting import VoteIntent, VotingService

from ..dependencies import CurrentUserDep, SessionDep

router = APIRouter(prefix="/community/posts", tags=["votes"])


def get_voting_service(db: SessionDep) -> VotingService:
    """Return a voting service bound to the request's session."""
    return VotingService(db)


VotingServiceDep = Annotated[VotingService, Depends(get_voting_service)]


def _to_result(outcome: object) -> VoteResult:
    return VoteResult.model_validate(outcome, from_attributes=True)


@router.post("/{post_id}/upvote", response_model=VoteResult, response_model_exclude_none=True)
async def upvote_post(
    post_id: int,
    current_user: CurrentUserDep,
    voting: VotingServiceDep,
) -> VoteResult:
    """Upvote a post, or switch an existing downvote to an upvote."""
    return _to_result(voting.apply_vote(current_user.id, post_id, VoteIntent.UP))


@router.post("/{post_id}/downvote", response_model=VoteResult, response_model_exclude_none=True)
async def downvote_post(
    post_id: int,
    current_user: CurrentUserDep,
    voting: VotingServiceDep,
) -> VoteResult:
    """Downvote a post, or switch an existing upvote to a downvote."""
    return _to_result(voting.apply_vote(current_user.id, post_id, VoteIntent.DOWN))


@router.get("/{post_id}/my-vote", response_model=MyVoteResponse)
async def get_my_vote(
    post_id: int,
    current_user: CurrentUserDep,
    voting: VotingServiceDep,
) -> MyVoteResponse:
    """Get the caller's current vote on a post."""
    return MyVoteResponse(direction=voting.get_my_vote(current_user.id, post_id))
