"""
Staking API routes.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from etherstake.application.use_cases.cancel_stake import CancelStake
from etherstake.application.use_cases.complete_stake import CompleteStake
from etherstake.application.use_cases.create_stake import (
    CreateStake,
    CreateStakeCommand,
)
from etherstake.application.use_cases.get_stake import GetStake
from etherstake.application.use_cases.get_staking_stats import GetStakingStats
from etherstake.application.use_cases.list_all_stakes import ListAllStakes
from etherstake.application.use_cases.list_user_stakes import ListUserStakes
from etherstake.application.use_cases.update_stake_status import (
    UpdateStakeStatus,
    UpdateStakeStatusCommand,
)
from etherstake.di.dependencies import (
    get_cancel_stake,
    get_complete_stake,
    get_create_stake,
    get_get_stake,
    get_get_staking_stats,
    get_list_all_stakes,
    get_list_user_stakes,
    get_update_stake_status,
)
from etherstake.domain.entities.stake import StakeStatus
from etherstake.domain.entities.user import User
from etherstake.domain.value_objects.pagination import Page, PageRequest
from etherstake.infrastructure.monitoring import metrics
from etherstake.presentation.api.middleware.auth import (
    get_current_user,
    require_admin,
)
from etherstake.presentation.schemas.common_schemas import (
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

router = APIRouter(prefix="/staking", tags=["Staking"])


def _stake_list(page: Page) -> StakeListResponse:
    return StakeListResponse(
        results=page.results,
        pagination=PaginationMeta.from_page(page),
        stakes=[StakeResponse.from_entity(stake) for stake in page.items],
    )


# ================================================================
# User Endpoints
# ================================================================


@router.post(
    "",
    response_model=StakeResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create stake",
    description="Lock an amount for a fixed number of days",
)
async def create_stake(
    request: CreateStakeRequest,
    current_user: User = Depends(get_current_user),
    use_case: CreateStake = Depends(get_create_stake),
) -> StakeResponse:
    """
    Open a new stake for the authenticated user.

    The wallet must be the one registered on the account.
    """
    stake = await use_case.execute(
        CreateStakeCommand(
            owner_id=current_user.id,
            amount=request.amount,
            duration_days=request.duration_days,
            wallet_address=request.wallet_address,
            transaction_hash=request.transaction_hash,
        )
    )
    metrics.stake_transitions_total.labels(transition="created").inc()

    return StakeResponse.from_entity(stake)


@router.get(
    "",
    response_model=StakeListResponse,
    summary="List own stakes",
)
async def list_my_stakes(
    page_request: PageRequest = Depends(page_request_params),
    current_user: User = Depends(get_current_user),
    use_case: ListUserStakes = Depends(get_list_user_stakes),
) -> StakeListResponse:
    """Paginated stakes of the authenticated user, newest first."""
    page = await use_case.execute(current_user.id, page_request)
    return _stake_list(page)


# ================================================================
# Admin Endpoints
# ================================================================


@router.get(
    "/admin/all",
    response_model=StakeListResponse,
    summary="List all stakes",
    description="Admin view of all stakes, filterable by status and user",
)
async def list_all_stakes(
    page_request: PageRequest = Depends(page_request_params),
    stake_status: Optional[StakeStatus] = Query(None, alias="status"),
    user_id: Optional[UUID] = Query(None),
    _admin: User = Depends(require_admin),
    use_case: ListAllStakes = Depends(get_list_all_stakes),
) -> StakeListResponse:
    """Paginated stakes across all users."""
    page = await use_case.execute(page_request, status=stake_status, user_id=user_id)
    return _stake_list(page)


@router.get(
    "/admin/stats",
    response_model=StakingStatsResponse,
    summary="Staking totals",
    description="Total active stake and total rewards paid",
)
async def staking_stats(
    _admin: User = Depends(require_admin),
    use_case: GetStakingStats = Depends(get_get_staking_stats),
) -> StakingStatsResponse:
    """Platform-wide aggregates."""
    stats = await use_case.execute()
    return StakingStatsResponse(
        total_active_staked_amount=stats.total_active_staked_amount,
        total_rewards_paid=stats.total_rewards_paid,
        stakes_by_status=stats.stakes_by_status,
        total_stakes=stats.total_stakes,
    )


# ================================================================
# Single Stake Endpoints
# ================================================================


@router.get(
    "/{stake_id}",
    response_model=StakeResponse,
    summary="Get stake",
)
async def get_stake(
    stake_id: UUID,
    current_user: User = Depends(get_current_user),
    use_case: GetStake = Depends(get_get_stake),
) -> StakeResponse:
    """Get a stake owned by the caller (admins may read any)."""
    stake = await use_case.execute(stake_id, current_user)
    return StakeResponse.from_entity(stake)


@router.patch(
    "/{stake_id}/cancel",
    response_model=StakeResponse,
    summary="Cancel stake",
    description="Cancel an active stake; a penalty applies before the end date",
)
async def cancel_stake(
    stake_id: UUID,
    current_user: User = Depends(get_current_user),
    use_case: CancelStake = Depends(get_cancel_stake),
) -> StakeResponse:
    """Cancel the caller's own stake."""
    stake = await use_case.execute(stake_id, caller_id=current_user.id)
    metrics.stake_transitions_total.labels(transition="cancelled").inc()

    return StakeResponse.from_entity(stake)


@router.patch(
    "/{stake_id}/complete",
    response_model=StakeResponse,
    summary="Complete stake",
    description="Complete a stake whose term has elapsed and pay its rewards",
)
async def complete_stake(
    stake_id: UUID,
    current_user: User = Depends(get_current_user),
    use_case: CompleteStake = Depends(get_complete_stake),
) -> StakeResponse:
    """Complete a stake (owner or admin)."""
    stake = await use_case.execute(
        stake_id,
        caller_id=current_user.id,
        is_admin=current_user.is_admin(),
    )
    metrics.stake_transitions_total.labels(transition="completed").inc()

    return StakeResponse.from_entity(stake)


@router.patch(
    "/{stake_id}/status",
    response_model=StakeResponse,
    summary="Override stake status",
    description="Admin correction of status and/or transaction hash",
)
async def update_stake_status(
    stake_id: UUID,
    request: UpdateStakeStatusRequest,
    _admin: User = Depends(require_admin),
    use_case: UpdateStakeStatus = Depends(get_update_stake_status),
) -> StakeResponse:
    """Administrative override; lifecycle rules are not applied."""
    stake = await use_case.execute(
        UpdateStakeStatusCommand(
            stake_id=stake_id,
            status=request.status,
            transaction_hash=request.transaction_hash,
        )
    )
    metrics.stake_transitions_total.labels(transition="overridden").inc()

    return StakeResponse.from_entity(stake)
