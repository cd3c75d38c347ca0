# src/whycookin/scripts/set_role.py
"""Assign a role to an existing account from the command line.

The first admin cannot be created over the API, since only admins may grant
the admin role. Typical usage::

    python -m whycookin.scripts.set_role alice admin
"""
from __future__ import annotations

import argparse
import sys

from sqlalchemy.orm import Session

from whycookin.core.errors import AppError, NotFoundError
from whycookin.db.session import SessionLocal
from whycookin.models import User
from whycookin.models.user import ASSIGNABLE_ROLES
from whycookin.services import accounts


def assign_role(db: Session, username: str, role: str) -> User:
    """Set ``role`` on the account named ``username``.

    Raises:
        ValidationError: If ``role`` is not assignable.
        NotFoundError: If no live account has that username.
    """
    accounts.validate_role(role)
    user = db.query(User).filter(User.username == username).first()
    if user is None or user.is_deleted:
        raise NotFoundError("User not found")
    return accounts.set_role(db, user, role)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Assign a role to a WhyCookIn account")
    parser.add_argument("username")
    parser.add_argument("role", choices=ASSIGNABLE_ROLES)
    args = parser.parse_args(argv)

    with SessionLocal() as db:
        try:
            user = assign_role(db, args.username, args.role)
        except AppError as exc:
            print(f"[set_role] ERROR: {exc.message}", file=sys.stderr)
            return 1
    print(f"[set_role] {user.username} is now {user.role}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
