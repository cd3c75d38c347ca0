"""Shared API dependencies for authentication and common functionality."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from whycookin.core.errors import UnauthenticatedError
from whycookin.core.security import decode_access_token
from whycookin.db.session import get_db
from whycookin.models import User
from whycookin.services.authorization import Principal
from whycookin.services.geocoding import KakaoGeocoder, get_geocoder

# HTTP Bearer scheme; missing credentials are reported as 401 below, not 403.
bearer_scheme = HTTPBearer(auto_error=False)

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    db: SessionDep,
) -> User:
    """Get the current authenticated user from the bearer token.

    The role is read from the database rather than the token, so role changes
    and soft deletes take effect immediately.

    Args:
        credentials: HTTP Bearer token credentials, if any were sent
        db: Database session

    Returns:
        User object for the authenticated user

    Raises:
        UnauthenticatedError: If the token is missing or invalid, or the user
            no longer exists or has been deleted
    """
    if credentials is None:
        raise UnauthenticatedError("No token")

    payload = decode_access_token(credentials.credentials)
    user = db.get(User, payload["userId"])
    if user is None or user.is_deleted:
        raise UnauthenticatedError("User not found")
    return user


# Type alias for current user dependency
CurrentUserDep = Annotated[User, Depends(get_current_user)]


def get_principal(user: CurrentUserDep) -> Principal:
    """Return the caller as an authorization principal."""
    return Principal.from_user(user)


PrincipalDep = Annotated[Principal, Depends(get_principal)]


def get_geocoder_dep() -> KakaoGeocoder:
    """Return the shared geocoding client."""
    return get_geocoder()


GeocoderDep = Annotated[KakaoGeocoder, Depends(get_geocoder_dep)]
