"""
Authentication API schemas.
"""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from etherstake.presentation.schemas.user_schemas import UserResponse


class RegisterRequest(BaseModel):
    """Request to register a new account."""

    name: str = Field(..., max_length=100, description="Display name")
    email: EmailStr
    password: str = Field(..., description="At least 8 characters")
    wallet_address: Optional[str] = Field(
        default=None,
        description="Ethereum address (0x + 40 hex chars)",
    )


class LoginRequest(BaseModel):
    """Request to log in with email and password."""

    email: EmailStr
    password: str


class AuthResponse(BaseModel):
    """Authenticated user plus bearer token."""

    user: UserResponse
    token: str
    token_type: str = "bearer"


class ChangePasswordRequest(BaseModel):
    """Request to change own password."""

    current_password: str
    new_password: str = Field(..., description="At least 8 characters")
