"""
FastAPI dependency injection.

Provides dependencies for FastAPI routes using the DI container
attached to the running application.
"""

from typing import AsyncGenerator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from etherstake.application.use_cases.admin_update_user import AdminUpdateUser
from etherstake.application.use_cases.cancel_stake import CancelStake
from etherstake.application.use_cases.change_password import ChangePassword
from etherstake.application.use_cases.complete_stake import CompleteStake
from etherstake.application.use_cases.create_stake import CreateStake
from etherstake.application.use_cases.delete_user import DeleteUser
from etherstake.application.use_cases.get_stake import GetStake
from etherstake.application.use_cases.get_staking_stats import GetStakingStats
from etherstake.application.use_cases.get_user import GetUser
from etherstake.application.use_cases.list_all_stakes import ListAllStakes
from etherstake.application.use_cases.list_user_stakes import ListUserStakes
from etherstake.application.use_cases.list_users import ListUsers
from etherstake.application.use_cases.login_user import LoginUser
from etherstake.application.use_cases.register_user import RegisterUser
from etherstake.application.use_cases.update_stake_status import UpdateStakeStatus
from etherstake.application.use_cases.update_user_profile import UpdateUserProfile
from etherstake.di.container import DIContainer

# ================================================================
# Container & Database Dependencies
# ================================================================


def get_container(request: Request) -> DIContainer:
    """Get the DI container owned by the running app."""
    return request.app.state.container


async def get_db_session(
    container: DIContainer = Depends(get_container),
) -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency.

    One session per request; commits on success, rolls back on error.
    """
    async with container.database.session() as session:
        yield session


# ================================================================
# Auth & User Use Case Dependencies
# ================================================================


def get_register_user(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> RegisterUser:
    """Get RegisterUser use case dependency."""
    return RegisterUser(
        user_repository=container.get_user_repository(session),
        password_hasher=container.password_hasher,
        token_service=container.token_service,
    )


def get_login_user(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> LoginUser:
    """Get LoginUser use case dependency."""
    return LoginUser(
        user_repository=container.get_user_repository(session),
        password_hasher=container.password_hasher,
        token_service=container.token_service,
    )


def get_get_user(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> GetUser:
    """Get GetUser use case dependency."""
    return GetUser(user_repository=container.get_user_repository(session))


def get_update_user_profile(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> UpdateUserProfile:
    """Get UpdateUserProfile use case dependency."""
    return UpdateUserProfile(user_repository=container.get_user_repository(session))


def get_change_password(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> ChangePassword:
    """Get ChangePassword use case dependency."""
    return ChangePassword(
        user_repository=container.get_user_repository(session),
        password_hasher=container.password_hasher,
    )


def get_list_users(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> ListUsers:
    """Get ListUsers use case dependency."""
    return ListUsers(user_repository=container.get_user_repository(session))


def get_admin_update_user(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> AdminUpdateUser:
    """Get AdminUpdateUser use case dependency."""
    return AdminUpdateUser(user_repository=container.get_user_repository(session))


def get_delete_user(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> DeleteUser:
    """Get DeleteUser use case dependency."""
    return DeleteUser(user_repository=container.get_user_repository(session))


# ================================================================
# Staking Use Case Dependencies
# ================================================================


def get_create_stake(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> CreateStake:
    """Get CreateStake use case dependency."""
    return CreateStake(
        stake_repository=container.get_stake_repository(session),
        user_repository=container.get_user_repository(session),
        terms=container.staking_terms,
        clock=container.clock,
    )


def get_get_stake(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> GetStake:
    """Get GetStake use case dependency."""
    return GetStake(stake_repository=container.get_stake_repository(session))


def get_list_user_stakes(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> ListUserStakes:
    """Get ListUserStakes use case dependency."""
    return ListUserStakes(stake_repository=container.get_stake_repository(session))


def get_list_all_stakes(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> ListAllStakes:
    """Get ListAllStakes use case dependency."""
    return ListAllStakes(stake_repository=container.get_stake_repository(session))


def get_cancel_stake(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> CancelStake:
    """Get CancelStake use case dependency."""
    return CancelStake(
        stake_repository=container.get_stake_repository(session),
        terms=container.staking_terms,
        clock=container.clock,
    )


def get_complete_stake(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> CompleteStake:
    """Get CompleteStake use case dependency."""
    return CompleteStake(
        stake_repository=container.get_stake_repository(session),
        clock=container.clock,
    )


def get_update_stake_status(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> UpdateStakeStatus:
    """Get UpdateStakeStatus use case dependency."""
    return UpdateStakeStatus(
        stake_repository=container.get_stake_repository(session),
        clock=container.clock,
    )


def get_get_staking_stats(
    session: AsyncSession = Depends(get_db_session),
    container: DIContainer = Depends(get_container),
) -> GetStakingStats:
    """Get GetStakingStats use case dependency."""
    return GetStakingStats(stake_repository=container.get_stake_repository(session))
