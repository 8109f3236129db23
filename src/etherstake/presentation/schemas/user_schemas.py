"""
User API schemas.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from etherstake.domain.entities.user import User, UserRole
from etherstake.presentation.schemas.common_schemas import PaginationMeta


class UserResponse(BaseModel):
    """User response. Never carries the password hash."""

    id: str
    name: str
    email: str
    wallet_address: Optional[str] = None
    role: UserRole
    is_email_verified: bool
    stake_ids: List[str] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserResponse":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            wallet_address=user.wallet_address,
            role=user.role,
            is_email_verified=user.is_email_verified,
            stake_ids=[str(stake_id) for stake_id in user.stake_ids],
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserListResponse(BaseModel):
    """Paginated users."""

    results: int
    pagination: PaginationMeta
    users: List[UserResponse]


class UpdateProfileRequest(BaseModel):
    """Self-service profile update."""

    name: Optional[str] = Field(default=None, max_length=100)
    wallet_address: Optional[str] = Field(
        default=None,
        description="Ethereum address (0x + 40 hex chars)",
    )


class AdminUpdateUserRequest(BaseModel):
    """Admin edit of any account."""

    name: Optional[str] = Field(default=None, max_length=100)
    email: Optional[EmailStr] = None
    role: Optional[UserRole] = None
    wallet_address: Optional[str] = None
