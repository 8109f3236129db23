"""
User entity - Domain model for platform accounts.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional
from uuid import UUID, uuid4

from etherstake.domain.exceptions.base import ValidationError
from etherstake.domain.value_objects.wallet_address import WalletAddress

MIN_PASSWORD_LENGTH = 8


class UserRole(str, Enum):
    """Account roles."""

    USER = "user"
    ADMIN = "admin"


def normalize_email(email: str) -> str:
    """Emails are stored and compared lower-case."""
    return (email or "").strip().lower()


def validate_password(password: str) -> None:
    """Raise ValidationError if a plaintext password is too weak."""
    if not password or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            "password",
            f"must be at least {MIN_PASSWORD_LENGTH} characters",
        )


@dataclass
class User:
    """
    User entity.

    Business rules:
    - Email is unique, stored lower-case
    - Wallet address is optional; unique and 0x-prefixed when present
    - Only the bcrypt hash of the password is held, never the plaintext
    - stake_ids lists the user's stakes, oldest first
    """

    id: UUID = field(default_factory=uuid4)
    name: str = field(default="")
    email: str = field(default="")
    password_hash: str = field(default="")
    wallet_address: Optional[str] = field(default=None)
    role: UserRole = field(default=UserRole.USER)
    is_email_verified: bool = field(default=False)
    stake_ids: List[UUID] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Validate user data after initialization."""
        self.name = (self.name or "").strip()
        if not self.name:
            raise ValidationError("name", "cannot be empty")

        self.email = normalize_email(self.email)
        if "@" not in self.email:
            raise ValidationError("email", "must be a valid email address")

        if not self.password_hash:
            raise ValidationError("password", "hash is required")

        if self.wallet_address:
            WalletAddress(self.wallet_address)
        else:
            self.wallet_address = None

        self.role = UserRole(self.role)

    def is_admin(self) -> bool:
        """Check if user holds the admin role."""
        return self.role == UserRole.ADMIN

    def owns_wallet(self, wallet_address: str) -> bool:
        """Check if a wallet address is the one registered on this account."""
        if not self.wallet_address or not wallet_address:
            return False
        return self.wallet_address.lower() == wallet_address.lower()

    def add_stake(self, stake_id: UUID) -> None:
        """Append a newly opened stake to the user's stake list."""
        if stake_id not in self.stake_ids:
            self.stake_ids.append(stake_id)
        self.updated_at = datetime.now()

    def update_profile(
        self,
        name: Optional[str] = None,
        wallet_address: Optional[str] = None,
    ) -> None:
        """Update self-service profile fields."""
        if name is not None:
            name = name.strip()
            if not name:
                raise ValidationError("name", "cannot be empty")
            self.name = name

        if wallet_address is not None:
            WalletAddress(wallet_address)
            self.wallet_address = wallet_address

        self.updated_at = datetime.now()

    def change_email(self, email: str) -> None:
        email = normalize_email(email)
        if "@" not in email:
            raise ValidationError("email", "must be a valid email address")
        self.email = email
        self.updated_at = datetime.now()

    def change_role(self, role: UserRole) -> None:
        self.role = UserRole(role)
        self.updated_at = datetime.now()

    def set_password_hash(self, password_hash: str) -> None:
        if not password_hash:
            raise ValidationError("password", "hash is required")
        self.password_hash = password_hash
        self.updated_at = datetime.now()

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation (no password hash)."""
        return {
            "id": str(self.id),
            "name": self.name,
            "email": self.email,
            "wallet_address": self.wallet_address,
            "role": self.role.value,
            "is_email_verified": self.is_email_verified,
            "stake_ids": [str(stake_id) for stake_id in self.stake_ids],
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
