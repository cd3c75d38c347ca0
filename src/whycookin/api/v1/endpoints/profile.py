# src/whycookin/api/v1/endpoints/profile.py
"""Self-service profile endpoint."""

from fastapi import APIRouter

from whycookin.models import User
from whycookin.schemas.user import ProfileResponse, ProfileUpdateRequest
from whycookin.services import accounts

from ..dependencies import CurrentUserDep, SessionDep

router = APIRouter(prefix="/profile", tags=["profile"])


@router.post("", response_model=ProfileResponse)
async def update_profile(
    payload: ProfileUpdateRequest,
    current_user: CurrentUserDep,
    db: SessionDep,
) -> User:
    """Replace the caller's profile fields."""
    return accounts.update_profile(db, current_user, payload)
