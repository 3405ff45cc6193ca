"""
Authentication dependencies.
"""
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from oilsync.config import Settings
from oilsync.database import get_db
from oilsync.dependencies import get_app_settings
from oilsync.errors import AuthenticationError, PermissionDeniedError
from oilsync.models.user import User, UserRole
from oilsync.services.users import validate_token

bearer_scheme = HTTPBearer(auto_error=False)


async def get_optional_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> Optional[User]:
    """
    The authenticated user, or None for anonymous requests.

    An invalid token is treated like no token at all.
    """
    if not credentials:
        return None
    user = await validate_token(db, credentials.credentials, settings)
    if user:
        request.state.user_id = user.id
        request.state.session_token = credentials.credentials
    return user


async def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if not user:
        raise AuthenticationError("Authentication required")
    return user


async def require_staff(current_user: User = Depends(get_current_user)) -> User:
    if not current_user.is_staff:
        raise PermissionDeniedError("Staff access required")
    return current_user


async def require_admin(current_user: User = Depends(get_current_user)) -> User:
    if current_user.role != UserRole.ADMIN:
        raise PermissionDeniedError("Admin access required")
    return current_user
