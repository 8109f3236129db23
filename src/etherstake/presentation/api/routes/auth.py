"""
Authentication API routes.
"""

from fastapi import APIRouter, Depends, status

from etherstake.application.use_cases.change_password import (
    ChangePassword,
    ChangePasswordCommand,
)
from etherstake.application.use_cases.login_user import LoginUser
from etherstake.application.use_cases.register_user import (
    RegisterUser,
    RegisterUserCommand,
)
from etherstake.application.use_cases.update_user_profile import (
    UpdateUserProfile,
    UpdateUserProfileCommand,
)
from etherstake.di.dependencies import (
    get_change_password,
    get_login_user,
    get_register_user,
    get_update_user_profile,
)
from etherstake.domain.entities.user import User
from etherstake.domain.exceptions import InvalidCredentialsError
from etherstake.infrastructure.monitoring import metrics
from etherstake.presentation.api.middleware.auth import get_current_user
from etherstake.presentation.schemas.auth_schemas import (
    AuthResponse,
    ChangePasswordRequest,
    LoginRequest,
    RegisterRequest,
)
from etherstake.presentation.schemas.common_schemas import MessageResponse
from etherstake.presentation.schemas.user_schemas import (
    UpdateProfileRequest,
    UserResponse,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


# ================================================================
# Register / Login
# ================================================================


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register account",
    description="Create a new account and return an access token",
)
async def register(
    request: RegisterRequest,
    use_case: RegisterUser = Depends(get_register_user),
) -> AuthResponse:
    """
    Register a new user.

    Email must be unused; wallet is optional but must be unused
    and well-formed when given.
    """
    result = await use_case.execute(
        RegisterUserCommand(
            name=request.name,
            email=request.email,
            password=request.password,
            wallet_address=request.wallet_address,
        )
    )

    return AuthResponse(
        user=UserResponse.from_entity(result.user),
        token=result.token,
    )


@router.post(
    "/login",
    response_model=AuthResponse,
    status_code=status.HTTP_200_OK,
    summary="Login",
    description="Exchange email and password for an access token",
)
async def login(
    request: LoginRequest,
    use_case: LoginUser = Depends(get_login_user),
) -> AuthResponse:
    """Login with email and password."""
    try:
        result = await use_case.execute(
            email=request.email,
            password=request.password,
        )
    except InvalidCredentialsError:
        metrics.auth_attempts_total.labels(outcome="failure").inc()
        raise

    metrics.auth_attempts_total.labels(outcome="success").inc()

    return AuthResponse(
        user=UserResponse.from_entity(result.user),
        token=result.token,
    )


# ================================================================
# Own Profile
# ================================================================


@router.get(
    "/me",
    response_model=UserResponse,
    summary="Get own profile",
)
async def get_me(
    current_user: User = Depends(get_current_user),
) -> UserResponse:
    """Return the authenticated user's profile."""
    return UserResponse.from_entity(current_user)


@router.patch(
    "/me",
    response_model=UserResponse,
    summary="Update own profile",
    description="Update name and/or wallet address",
)
async def update_me(
    request: UpdateProfileRequest,
    current_user: User = Depends(get_current_user),
    use_case: UpdateUserProfile = Depends(get_update_user_profile),
) -> UserResponse:
    """Update the authenticated user's profile."""
    user = await use_case.execute(
        UpdateUserProfileCommand(
            user_id=current_user.id,
            name=request.name,
            wallet_address=request.wallet_address,
        )
    )
    return UserResponse.from_entity(user)


@router.patch(
    "/change-password",
    response_model=MessageResponse,
    summary="Change password",
)
async def change_password(
    request: ChangePasswordRequest,
    current_user: User = Depends(get_current_user),
    use_case: ChangePassword = Depends(get_change_password),
) -> MessageResponse:
    """Change the authenticated user's password."""
    await use_case.execute(
        ChangePasswordCommand(
            user_id=current_user.id,
            current_password=request.current_password,
            new_password=request.new_password,
        )
    )
    return MessageResponse(message="Password updated successfully")
