"""CRUD-style helpers for user accounts, roles and profiles."""
from __future__ import annotations

import logging
from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from whycookin.core import security
from whycookin.core.errors import ConflictError, NotFoundError, ValidationError
from whycookin.models.user import (
    ASSIGNABLE_ROLES,
    DELETED_USERNAME,
    ROLE_DELETED,
    ROLE_MODERATOR,
    ROLE_USER,
    User,
)
from whycookin.schemas.user import ProfileUpdateRequest

__all__ = [
    "get_user",
    "get_user_or_404",
    "list_users",
    "register_user",
    "authenticate",
    "validate_role",
    "set_role",
    "promote_to_moderator",
    "soft_delete_user",
    "update_profile",
]

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> User | None:
    """Return a single user by primary key."""
    return db.get(User, user_id)


def get_user_or_404(db: Session, user_id: int) -> User:
    """Return a user or raise :class:`NotFoundError`."""
    user = get_user(db, user_id)
    if user is None:
        raise NotFoundError("User not found")
    return user


def list_users(db: Session) -> Sequence[User]:
    """Return every account, soft-deleted ones included, ordered by id."""
    return db.query(User).order_by(User.id).all()


def register_user(db: Session, username: str | None, password: str | None) -> User:
    """Create a plain ``user`` account.

    Raises:
        ValidationError: If either credential is missing.
        ConflictError: If the username is taken.
    """
    if not username or not password:
        raise ValidationError("Missing username or password")
    if db.query(User).filter(User.username == username).first() is not None:
        raise ConflictError("Username already taken")

    user = User(username=username, password_hash=security.hash_password(password), role=ROLE_USER)
    db.add(user)
    try:
        db.commit()
    except IntegrityError as err:
        db.rollback()
        raise ConflictError("Username already taken") from err
    db.refresh(user)
    logger.info("Registered user %s", user.id)
    return user


def authenticate(db: Session, username: str | None, password: str | None) -> User:
    """Return the user matching the credentials.

    Raises:
        ValidationError: If a credential is missing or does not match.
    """
    if not username or not password:
        raise ValidationError("Missing username or password")
    user = db.query(User).filter(User.username == username).first()
    if user is None or user.is_deleted or not security.verify_password(user.password_hash, password):
        raise ValidationError("Invalid credentials")
    return user


def validate_role(role: str | None) -> str:
    """Return ``role`` if it can be assigned, else raise :class:`ValidationError`."""
    if role not in ASSIGNABLE_ROLES:
        raise ValidationError("Invalid role")
    return role


def set_role(db: Session, user: User, role: str) -> User:
    """Persist a new role for ``user``."""
    user.role = role
    db.commit()
    db.refresh(user)
    logger.info("User %s now has role %s", user.id, role)
    return user


def promote_to_moderator(db: Session, user: User) -> User:
    """Shortcut for :func:`set_role` with ``moderator``."""
    return set_role(db, user, ROLE_MODERATOR)


def soft_delete_user(db: Session, user: User) -> User:
    """Strip identifying data and credentials while keeping the row.

    The username keeps the id as a suffix so the unique constraint holds for
    any number of deleted accounts.
    """
    user.username = f"{DELETED_USERNAME} #{user.id}"
    user.password_hash = None
    user.role = ROLE_DELETED
    user.first_name = None
    user.last_name = None
    user.gender = None
    user.nationalities = []
    user.ethnicities = []
    user.birthday = None
    user.country_home = None
    user.country_grew_up_in = None
    user.bio = None
    user.visible_to_others = False
    db.commit()
    db.refresh(user)
    logger.info("Soft-deleted user %s", user.id)
    return user


def update_profile(db: Session, user: User, update: ProfileUpdateRequest) -> User:
    """Replace every profile field of ``user`` with the submitted values.

    Empty strings are stored as NULL, missing lists as empty lists and a
    missing visibility flag as True.
    """
    user.first_name = update.first_name or None
    user.last_name = update.last_name or None
    user.gender = update.gender or None
    user.nationalities = list(update.nationalities or [])
    user.ethnicities = list(update.ethnicities or [])
    user.birthday = update.birthday
    user.country_home = update.country_home or None
    user.country_grew_up_in = update.country_grew_up_in or None
    user.bio = update.bio or None
    user.visible_to_others = True if update.visible_to_others is None else update.visible_to_others
    db.commit()
    db.refresh(user)
    return user
