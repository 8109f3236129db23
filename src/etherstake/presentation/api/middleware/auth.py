"""
Authentication dependencies for JWT bearer tokens.
"""

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from etherstake.di.container import DIContainer
from etherstake.di.dependencies import get_container, get_db_session
from etherstake.domain.entities.user import User, UserRole
from etherstake.domain.exceptions import (
    InsufficientRoleError,
    InvalidTokenError,
    MissingTokenError,
)
from etherstake.infrastructure.monitoring.logger import set_user_id

# Missing header is reported as MissingTokenError, not FastAPI's 403
security = HTTPBearer(auto_error=False)


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> User:
    """
    Extract and load current authenticated user from JWT token.

    Args:
        request: Incoming request (user ID is recorded on its state)
        credentials: HTTP Authorization header with Bearer token
        session: Database session from dependency injection
        container: DI container

    Returns:
        User domain entity

    Raises:
        MissingTokenError: No bearer token
        InvalidTokenError: Bad token, or its user no longer exists
        ExpiredTokenError: Token past its expiry
    """
    if credentials is None or not credentials.credentials:
        raise MissingTokenError()

    claims = container.token_service.verify(credentials.credentials)

    user_repo = container.get_user_repository(session)
    user = await user_repo.get_by_id(claims.user_id)

    if not user:
        raise InvalidTokenError()

    request.state.user_id = user.id
    set_user_id(user.id)
    return user


async def require_admin(
    current_user: User = Depends(get_current_user),
) -> User:
    """
    Require the authenticated user to be an admin.

    Role is read from the stored user, so demotions apply immediately.

    Raises:
        InsufficientRoleError: If user is not an admin
    """
    if not current_user.is_admin():
        raise InsufficientRoleError(UserRole.ADMIN.value)
    return current_user
