"""SQLAlchemy models for user accounts and roles."""

from __future__ import annotations

import datetime

from sqlalchemy import JSON, Boolean, Date, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from whycookin.db.session import Base
from whycookin.db.time import utcnow

ROLE_USER = "user"
ROLE_MODERATOR = "moderator"
ROLE_ADMIN = "admin"
ROLE_DELETED = "deleted"

# Roles that may be assigned through the role-change endpoint.
ASSIGNABLE_ROLES = (ROLE_USER, ROLE_MODERATOR, ROLE_ADMIN)

DELETED_USERNAME = "[DELETED USER]"


class User(Base):
    """Account with credentials, a forum role and an optional public profile.

    Soft-deleted accounts keep their row (so authored posts and comments stay
    attached) but lose their credentials and identifying fields.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(64), unique=True, nullable=False)
    # NULL once the account is soft-deleted.
    password_hash: Mapped[str | None] = mapped_column(Text, nullable=True)
    role: Mapped[str] = mapped_column(String(16), nullable=False, default=ROLE_USER)

    first_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    last_name: Mapped[str | None] = mapped_column(Text, nullable=True)
    gender: Mapped[str | None] = mapped_column(Text, nullable=True)
    nationalities: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    ethnicities: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    birthday: Mapped[datetime.date | None] = mapped_column(Date, nullable=True)
    country_home: Mapped[str | None] = mapped_column(Text, nullable=True)
    country_grew_up_in: Mapped[str | None] = mapped_column(Text, nullable=True)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True)
    visible_to_others: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    created_at: Mapped[datetime.datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    @property
    def is_deleted(self) -> bool:
        """Return True once the account has been soft-deleted."""
        return self.role == ROLE_DELETED
