# src/whycookin/api/v1/endpoints/users.py
"""User administration endpoints: listing, role changes and soft delete."""

from fastapi import APIRouter

from whycookin.models import User
from whycookin.schemas.user import (
    RoleChangeRequest,
    RoleChangeResponse,
    UserDeleted,
    UserResponse,
    UserSummary,
)
from whycookin.services import accounts
from whycookin.services.authorization import Action, Target, ensure_permitted

from ..dependencies import CurrentUserDep, PrincipalDep, SessionDep

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
async def list_users(_: CurrentUserDep, db: SessionDep) -> list[User]:
    """List every account."""
    return list(accounts.list_users(db))


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, _: CurrentUserDep, db: SessionDep) -> User:
    """Get a specific user by ID."""
    return accounts.get_user_or_404(db, user_id)


@router.put("/{user_id}/role", response_model=RoleChangeResponse)
async def change_role(
    user_id: int,
    payload: RoleChangeRequest,
    principal: PrincipalDep,
    db: SessionDep,
) -> RoleChangeResponse:
    """Set a user's role.

    Admins may set any role. Moderators may only grant ``moderator`` and
    never touch an admin.
    """
    role = accounts.validate_role(payload.role)
    target = accounts.get_user_or_404(db, user_id)
    ensure_permitted(
        principal,
        Action.CHANGE_ROLE,
        Target(current_role=target.role, requested_role=role),
    )
    updated = accounts.set_role(db, target, role)
    return RoleChangeResponse(updated_user=UserSummary.model_validate(updated))


@router.post("/{user_id}/promoteToModerator", response_model=RoleChangeResponse)
async def promote_to_moderator(
    user_id: int,
    principal: PrincipalDep,
    db: SessionDep,
) -> RoleChangeResponse:
    """Make a non-admin user a moderator."""
    target = accounts.get_user_or_404(db, user_id)
    ensure_permitted(principal, Action.PROMOTE_TO_MODERATOR, Target(current_role=target.role))
    updated = accounts.promote_to_moderator(db, target)
    return RoleChangeResponse(updated_user=UserSummary.model_validate(updated))


@router.delete("/{user_id}", response_model=UserDeleted)
async def delete_user(
    user_id: int,
    principal: PrincipalDep,
    db: SessionDep,
) -> UserDeleted:
    """Soft-delete a user, keeping their posts and comments attached."""
    target = accounts.get_user_or_404(db, user_id)
    ensure_permitted(principal, Action.DELETE_USER, Target(current_role=target.role))
    deleted = accounts.soft_delete_user(db, target)
    return UserDeleted(deleted=UserSummary.model_validate(deleted))
