"""Role-based authorization rules for forum and user-administration actions.

Every gated handler asks :func:`ensure_permitted` instead of inspecting roles
itself. The rule table below is the single place where role policy lives;
an action missing from it is denied.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from whycookin.core.errors import ForbiddenError
from whycookin.models.user import ROLE_ADMIN, ROLE_DELETED, ROLE_MODERATOR, User


class Action(str, Enum):
    """Operations that require an authorization decision."""

    CHANGE_ROLE = "change_role"
    PROMOTE_TO_MODERATOR = "promote_to_moderator"
    EDIT_POST = "edit_post"
    DELETE_POST = "delete_post"
    EDIT_COMMENT = "edit_comment"
    DELETE_COMMENT = "delete_comment"
    EDIT_SUBCATEGORY = "edit_subcategory"
    DELETE_SUBCATEGORY = "delete_subcategory"
    DELETE_USER = "delete_user"


@dataclass(frozen=True)
class Principal:
    """The authenticated caller as seen by the rule table."""

    user_id: int
    role: str

    @classmethod
    def from_user(cls, user: User) -> Principal:
        """Build a principal from a loaded user row."""
        return cls(user_id=user.id, role=user.role)

    @property
    def is_staff(self) -> bool:
        return self.role in (ROLE_ADMIN, ROLE_MODERATOR)


@dataclass(frozen=True)
class Target:
    """What the action is applied to.

    ``owner_id`` is the author of a post, comment or subcategory.
    ``current_role`` is the role of a target user before the action and
    ``requested_role`` the role a role change asks for.
    """

    owner_id: int | None = None
    current_role: str | None = None
    requested_role: str | None = None


Rule = Callable[[Principal, Target], bool]


def _owner_or_staff(principal: Principal, target: Target) -> bool:
    return principal.is_staff or (
        target.owner_id is not None and target.owner_id == principal.user_id
    )


def _owner_only(principal: Principal, target: Target) -> bool:
    return target.owner_id is not None and target.owner_id == principal.user_id


def _change_role(principal: Principal, target: Target) -> bool:
    # Soft-deleted accounts stay deleted.
    if target.current_role == ROLE_DELETED:
        return False
    if principal.role == ROLE_ADMIN:
        return True
    if principal.role == ROLE_MODERATOR:
        return target.requested_role == ROLE_MODERATOR and target.current_role != ROLE_ADMIN
    return False


def _staff_on_non_admin(principal: Principal, target: Target) -> bool:
    if principal.role == ROLE_ADMIN:
        return True
    return principal.role == ROLE_MODERATOR and target.current_role != ROLE_ADMIN


def _promote_to_moderator(principal: Principal, target: Target) -> bool:
    # Nobody promotes an admin down to moderator through this shortcut.
    return principal.is_staff and target.current_role not in (ROLE_ADMIN, ROLE_DELETED)


RULES: dict[Action, Rule] = {
    Action.CHANGE_ROLE: _change_role,
    Action.PROMOTE_TO_MODERATOR: _promote_to_moderator,
    Action.EDIT_POST: _owner_or_staff,
    Action.DELETE_POST: _owner_or_staff,
    Action.EDIT_COMMENT: _owner_only,
    Action.DELETE_COMMENT: _owner_or_staff,
    Action.EDIT_SUBCATEGORY: _owner_or_staff,
    Action.DELETE_SUBCATEGORY: _owner_or_staff,
    Action.DELETE_USER: _staff_on_non_admin,
}

DENIAL_MESSAGES: dict[Action, str] = {
    Action.CHANGE_ROLE: "Forbidden: you do not have permission to make this role change",
    Action.PROMOTE_TO_MODERATOR: "Forbidden: only mods or admins can promote non-admin users",
    Action.EDIT_COMMENT: "Forbidden: only the author can edit",
    Action.DELETE_COMMENT: "Forbidden: only author or mod/admin can delete",
    Action.DELETE_USER: "Forbidden: only admin or moderator can delete non-admin users",
}


def is_permitted(principal: Principal, action: Action, target: Target | None = None) -> bool:
    """Return True when ``principal`` may perform ``action`` on ``target``."""
    rule = RULES.get(action)
    if rule is None:
        return False
    return rule(principal, target or Target())


def ensure_permitted(principal: Principal, action: Action, target: Target | None = None) -> None:
    """Raise :class:`ForbiddenError` unless the action is permitted.

    Raises:
        ForbiddenError: If the rule table denies the action.
    """
    if not is_permitted(principal, action, target):
        raise ForbiddenError(DENIAL_MESSAGES.get(action, ForbiddenError.default_message))
