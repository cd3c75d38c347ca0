# tests/services/test_authorization.py
"""Unit tests for the authorization rule table."""

import pytest

from whycookin.core.errors import ForbiddenError
from whycookin.services.authorization import (
    RULES,
    Action,
    Principal,
    Target,
    ensure_permitted,
    is_permitted,
)

USER = Principal(user_id=1, role="user")
OTHER_USER = Principal(user_id=2, role="user")
MODERATOR = Principal(user_id=3, role="moderator")
ADMIN = Principal(user_id=4, role="admin")
DELETED = Principal(user_id=5, role="deleted")


class TestChangeRole:
    """Role-change policy."""

    @pytest.mark.parametrize("requested", ["user", "moderator", "admin"])
    @pytest.mark.parametrize("current", ["user", "moderator", "admin"])
    def test_admin_may_set_any_role(self, current, requested) -> None:
        target = Target(current_role=current, requested_role=requested)
        assert is_permitted(ADMIN, Action.CHANGE_ROLE, target)

    def test_moderator_may_grant_moderator_to_user(self) -> None:
        target = Target(current_role="user", requested_role="moderator")
        assert is_permitted(MODERATOR, Action.CHANGE_ROLE, target)

    @pytest.mark.parametrize("requested", ["user", "admin"])
    def test_moderator_may_only_grant_moderator(self, requested) -> None:
        target = Target(current_role="user", requested_role=requested)
        assert not is_permitted(MODERATOR, Action.CHANGE_ROLE, target)

    def test_moderator_may_not_touch_admin(self) -> None:
        target = Target(current_role="admin", requested_role="moderator")
        assert not is_permitted(MODERATOR, Action.CHANGE_ROLE, target)

    def test_user_may_never_change_roles(self) -> None:
        target = Target(current_role="user", requested_role="user")
        assert not is_permitted(USER, Action.CHANGE_ROLE, target)


class TestOwnership:
    """Owner-or-staff and owner-only rules."""

    @pytest.mark.parametrize(
        "action",
        [
            Action.EDIT_POST,
            Action.DELETE_POST,
            Action.DELETE_COMMENT,
            Action.EDIT_SUBCATEGORY,
            Action.DELETE_SUBCATEGORY,
        ],
    )
    def test_owner_or_staff(self, action) -> None:
        target = Target(owner_id=USER.user_id)
        assert is_permitted(USER, action, target)
        assert is_permitted(MODERATOR, action, target)
        assert is_permitted(ADMIN, action, target)
        assert not is_permitted(OTHER_USER, action, target)

    def test_comment_edit_is_owner_only(self) -> None:
        target = Target(owner_id=USER.user_id)
        assert is_permitted(USER, Action.EDIT_COMMENT, target)
        assert not is_permitted(MODERATOR, Action.EDIT_COMMENT, target)
        assert not is_permitted(ADMIN, Action.EDIT_COMMENT, target)

    def test_unowned_resource_is_staff_only(self) -> None:
        target = Target(owner_id=None)
        assert not is_permitted(USER, Action.EDIT_SUBCATEGORY, target)
        assert is_permitted(MODERATOR, Action.EDIT_SUBCATEGORY, target)


class TestUserAdministration:
    def test_delete_user(self) -> None:
        assert is_permitted(ADMIN, Action.DELETE_USER, Target(current_role="admin"))
        assert is_permitted(MODERATOR, Action.DELETE_USER, Target(current_role="user"))
        assert not is_permitted(MODERATOR, Action.DELETE_USER, Target(current_role="admin"))
        assert not is_permitted(USER, Action.DELETE_USER, Target(current_role="user"))

    def test_promote_to_moderator(self) -> None:
        assert is_permitted(MODERATOR, Action.PROMOTE_TO_MODERATOR, Target(current_role="user"))
        assert not is_permitted(ADMIN, Action.PROMOTE_TO_MODERATOR, Target(current_role="admin"))
        assert not is_permitted(USER, Action.PROMOTE_TO_MODERATOR, Target(current_role="user"))

    @pytest.mark.parametrize("principal", [MODERATOR, ADMIN])
    def test_soft_deleted_accounts_keep_their_role(self, principal) -> None:
        for requested in ("user", "moderator", "admin"):
            target = Target(current_role="deleted", requested_role=requested)
            assert not is_permitted(principal, Action.CHANGE_ROLE, target)
        assert not is_permitted(
            principal, Action.PROMOTE_TO_MODERATOR, Target(current_role="deleted")
        )


def test_deleted_role_is_denied_everything() -> None:
    target = Target(owner_id=DELETED.user_id, current_role="user", requested_role="user")
    for action in (Action.CHANGE_ROLE, Action.DELETE_USER, Action.PROMOTE_TO_MODERATOR):
        assert not is_permitted(DELETED, action, target)


def test_every_action_has_a_rule() -> None:
    assert set(RULES) == set(Action)


def test_unknown_action_is_denied(monkeypatch) -> None:
    monkeypatch.delitem(RULES, Action.EDIT_POST)
    assert not is_permitted(ADMIN, Action.EDIT_POST, Target(owner_id=ADMIN.user_id))


def test_ensure_permitted_raises_forbidden() -> None:
    with pytest.raises(ForbiddenError) as exc_info:
        ensure_permitted(MODERATOR, Action.EDIT_COMMENT, Target(owner_id=USER.user_id))
    assert exc_info.value.status_code == 403
    assert exc_info.value.message == "Forbidden: only the author can edit"
