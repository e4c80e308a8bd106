"""FastAPI dependencies for database sessions and caller identity."""

from typing import AsyncGenerator, Optional
from uuid import UUID

import jwt
from fastapi import Depends, Header
from jwt import PyJWTError
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.profile import Profile, ProfileRole
from .config import settings
from .database import get_db
from .exceptions import AuthenticationError, AuthorizationError


async def get_current_user(
    authorization: Optional[str] = Header(None, alias="Authorization")
) -> dict:
    """
    Authentication dependency that validates Bearer tokens.

    Tokens are issued by the hosted identity provider; ``sub`` carries the
    staff profile id.

    Args:
        authorization: Authorization header with Bearer token

    Returns:
        dict: Caller information from the validated token

    Raises:
        AuthenticationError: If token is invalid or missing
    """
    if not authorization:
        raise AuthenticationError(detail="Authorization header missing")

    try:
        scheme, token = authorization.split()
    except ValueError:
        raise AuthenticationError(detail="Invalid authorization header format")

    if scheme.lower() != "bearer":
        raise AuthenticationError(detail="Invalid authentication scheme")

    try:
        # exp is verified by PyJWT when present
        payload = jwt.decode(
            token,
            settings.bearer_token_secret,
            algorithms=["HS256"],
            options={"verify_aud": False},
        )
    except PyJWTError as e:
        raise AuthenticationError(detail=f"Token validation failed: {e}")

    subject = payload.get("sub")
    try:
        user_id = UUID(str(subject))
    except ValueError:
        raise AuthenticationError(detail="Invalid token payload")

    return {
        "user_id": user_id,
        "email": payload.get("email"),
    }


async def get_current_profile(
    user: dict = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> Optional[Profile]:
    """Resolve the caller's staff profile, None when no row exists."""
    return await db.get(Profile, user["user_id"])


async def require_admin(
    profile: Optional[Profile] = Depends(get_current_profile),
) -> Profile:
    """
    Authorization dependency for staff administration.

    Raises:
        AuthorizationError: If the caller has no profile or is not an admin
    """
    if profile is None or profile.role != ProfileRole.ADMIN:
        raise AuthorizationError(
            detail="Only administrators can manage staff accounts",
            required_role=ProfileRole.ADMIN.value,
        )
    return profile


CurrentUser = Depends(get_current_user)
CurrentProfile = Depends(get_current_profile)
AdminProfile = Depends(require_admin)
