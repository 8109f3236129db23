"""
API request/response schemas.
"""

from etherstake.presentation.schemas.auth_schemas import (
    AuthResponse,
    ChangePasswordRequest,
    LoginRequest,
    RegisterRequest,
)
from etherstake.presentation.schemas.common_schemas import (
    MessageResponse,
    PaginationMeta,
    page_request_params,
)
from etherstake.presentation.schemas.stake_schemas import (
    CreateStakeRequest,
    StakeListResponse,
    StakeResponse,
    StakingStatsResponse,
    UpdateStakeStatusRequest,
)
from etherstake.presentation.schemas.user_schemas import (
    AdminUpdateUserRequest,
    UpdateProfileRequest,
    UserListResponse,
    UserResponse,
)

__all__ = [
    "AdminUpdateUserRequest",
    "AuthResponse",
    "ChangePasswordRequest",
    "CreateStakeRequest",
    "LoginRequest",
    "MessageResponse",
    "PaginationMeta",
    "RegisterRequest",
    "StakeListResponse",
    "StakeResponse",
    "StakingStatsResponse",
    "UpdateProfileRequest",
    "UpdateStakeStatusRequest",
    "UserListResponse",
    "UserResponse",
    "page_request_params",
]
