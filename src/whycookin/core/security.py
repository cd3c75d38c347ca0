"""Password hashing and access-token helpers."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Any

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError
from jose import JWTError, jwt

from whycookin.core.errors import UnauthenticatedError
from whycookin.core.settings import settings

_password_hasher = PasswordHasher()


def hash_password(password: str) -> str:
    """Return an Argon2 digest of ``password``."""
    return _password_hasher.hash(password)


def verify_password(password_hash: str | None, password: str) -> bool:
    """Check ``password`` against a stored digest.

    Soft-deleted users have no digest and can never log in.
    """
    if not password_hash:
        return False
    try:
        return _password_hasher.verify(password_hash, password)
    except (VerificationError, InvalidHashError):
        return False


def create_access_token(*, user_id: int, username: str, role: str) -> str:
    """Create a signed JWT carrying the caller's identity and role.

    Args:
        user_id: Primary key of the authenticated user.
        username: Username at issue time.
        role: Role at issue time.

    Returns:
        The encoded token.
    """
    issued_at = datetime.now(UTC)
    to_encode: dict[str, Any] = {
        "userId": user_id,
        "username": username,
        "role": role,
        "iat": int(issued_at.timestamp()),
        "exp": issued_at + timedelta(minutes=settings.access_token_expire_minutes),
    }
    encoded_jwt: str = jwt.encode(
        to_encode,
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    return encoded_jwt


def decode_access_token(token: str) -> dict[str, Any]:
    """Verify a token's signature and expiry and return its claims.

    Raises:
        UnauthenticatedError: If the token is invalid, expired or lacks ``userId``.
    """
    try:
        payload: dict[str, Any] = jwt.decode(
            token,
            settings.secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError as err:
        raise UnauthenticatedError("Invalid token") from err

    if not isinstance(payload.get("userId"), int):
        raise UnauthenticatedError("Invalid token")
    return payload
