# src/whycookin/api/v1/endpoints/auth.py
"""Registration and login endpoints."""

from fastapi import APIRouter

from whycookin.core.security import create_access_token
from whycookin.models import User
from whycookin.schemas.user import Credentials, RegisterResponse, TokenResponse, UserSummary
from whycookin.services import accounts

from ..dependencies import SessionDep

router = APIRouter(prefix="/auth", tags=["auth"])


def _issue_token(user: User) -> str:
    return create_access_token(user_id=user.id, username=user.username, role=user.role)


@router.post("/register", response_model=RegisterResponse)
async def register(payload: Credentials, db: SessionDep) -> RegisterResponse:
    """Create an account and sign the caller in immediately.

    New accounts always start with the ``user`` role.
    """
    user = accounts.register_user(db, payload.username, payload.password)
    return RegisterResponse(token=_issue_token(user), user=UserSummary.model_validate(user))


@router.post("/login", response_model=TokenResponse)
async def login(payload: Credentials, db: SessionDep) -> TokenResponse:
    """Exchange a username and password for an access token."""
    user = accounts.authenticate(db, payload.username, payload.password)
    return TokenResponse(token=_issue_token(user))
