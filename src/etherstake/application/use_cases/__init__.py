"""Application use cases."""

from etherstake.application.use_cases.admin_update_user import (
    AdminUpdateUser,
    AdminUpdateUserCommand,
)
from etherstake.application.use_cases.authenticate_user import AuthenticateUser
from etherstake.application.use_cases.cancel_stake import CancelStake
from etherstake.application.use_cases.change_password import (
    ChangePassword,
    ChangePasswordCommand,
)
from etherstake.application.use_cases.complete_stake import CompleteStake
from etherstake.application.use_cases.create_stake import (
    CreateStake,
    CreateStakeCommand,
)
from etherstake.application.use_cases.delete_user import DeleteUser
from etherstake.application.use_cases.get_stake import GetStake
from etherstake.application.use_cases.get_staking_stats import GetStakingStats
from etherstake.application.use_cases.get_user import GetUser
from etherstake.application.use_cases.list_all_stakes import ListAllStakes
from etherstake.application.use_cases.list_user_stakes import ListUserStakes
from etherstake.application.use_cases.list_users import ListUsers
from etherstake.application.use_cases.login_user import LoginUser
from etherstake.application.use_cases.register_user import (
    RegisterUser,
    RegisterUserCommand,
)
from etherstake.application.use_cases.update_stake_status import (
    UpdateStakeStatus,
    UpdateStakeStatusCommand,
)
from etherstake.application.use_cases.update_user_profile import (
    UpdateUserProfile,
    UpdateUserProfileCommand,
)

__all__ = [
    "AdminUpdateUser",
    "AdminUpdateUserCommand",
    "AuthenticateUser",
    "CancelStake",
    "ChangePassword",
    "ChangePasswordCommand",
    "CompleteStake",
    "CreateStake",
    "CreateStakeCommand",
    "DeleteUser",
    "GetStake",
    "GetStakingStats",
    "GetUser",
    "ListAllStakes",
    "ListUserStakes",
    "ListUsers",
    "LoginUser",
    "RegisterUser",
    "RegisterUserCommand",
    "UpdateStakeStatus",
    "UpdateStakeStatusCommand",
    "UpdateUserProfile",
    "UpdateUserProfileCommand",
]
