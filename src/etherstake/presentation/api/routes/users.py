"""
User administration API routes.

All endpoints require the admin role.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from etherstake.application.use_cases.admin_update_user import (
    AdminUpdateUser,
    AdminUpdateUserCommand,
)
from etherstake.application.use_cases.delete_user import DeleteUser
from etherstake.application.use_cases.get_user import GetUser
from etherstake.application.use_cases.list_users import ListUsers
from etherstake.di.dependencies import (
    get_admin_update_user,
    get_delete_user,
    get_get_user,
    get_list_users,
)
from etherstake.domain.value_objects.pagination import PageRequest
from etherstake.presentation.api.middleware.auth import require_admin
from etherstake.presentation.schemas.common_schemas import (
    PaginationMeta,
    page_request_params,
)
from etherstake.presentation.schemas.user_schemas import (
    AdminUpdateUserRequest,
    UserListResponse,
    UserResponse,
)

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    dependencies=[Depends(require_admin)],
)


@router.get(
    "",
    response_model=UserListResponse,
    summary="List users",
)
async def list_users(
    page_request: PageRequest = Depends(page_request_params),
    use_case: ListUsers = Depends(get_list_users),
) -> UserListResponse:
    """Paginated users, newest first."""
    page = await use_case.execute(page_request)

    return UserListResponse(
        results=page.results,
        pagination=PaginationMeta.from_page(page),
        users=[UserResponse.from_entity(user) for user in page.items],
    )


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Get user",
)
async def get_user(
    user_id: UUID,
    use_case: GetUser = Depends(get_get_user),
) -> UserResponse:
    """Get one user by ID."""
    user = await use_case.execute(user_id)
    return UserResponse.from_entity(user)


@router.patch(
    "/{user_id}",
    response_model=UserResponse,
    summary="Update user",
    description="Update name, email, role or wallet of any user",
)
async def update_user(
    user_id: UUID,
    request: AdminUpdateUserRequest,
    use_case: AdminUpdateUser = Depends(get_admin_update_user),
) -> UserResponse:
    """Admin update of a user."""
    user = await use_case.execute(
        AdminUpdateUserCommand(
            user_id=user_id,
            name=request.name,
            email=request.email,
            role=request.role,
            wallet_address=request.wallet_address,
        )
    )
    return UserResponse.from_entity(user)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete user",
    description="Delete a user and all of their stakes",
)
async def delete_user(
    user_id: UUID,
    use_case: DeleteUser = Depends(get_delete_user),
) -> Response:
    """Delete a user."""
    await use_case.execute(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
