"""
Register user use case.
"""

from dataclasses import dataclass
from typing import Optional

from etherstake.application.dto.auth_dto import AuthResult
from etherstake.domain.entities.user import User, UserRole, validate_password
from etherstake.domain.exceptions import DuplicateEntityError
from etherstake.domain.repositories.i_user_repository import IUserRepository
from etherstake.domain.services.i_password_hasher import IPasswordHasher
from etherstake.domain.services.i_token_service import ITokenService
from etherstake.domain.value_objects.wallet_address import WalletAddress
from etherstake.infrastructure.monitoring.logger import get_logger

logger = get_logger(__name__)


@dataclass
class RegisterUserCommand:
    """Command to register a new account."""

    name: str
    email: str
    password: str
    wallet_address: Optional[str] = None


class RegisterUser:
    """
    Register a new user and issue an access token.

    Business rules:
    - Email must be unique (case-insensitive)
    - Wallet address, when given, must be valid and unique
    - Password must be at least 8 characters; only its hash is stored
    - New accounts always get the user role
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
        token_service: ITokenService,
    ):
        """
        Initialize use case with dependencies.

        Args:
            user_repository: Repository for user persistence
            password_hasher: Password hashing service
            token_service: Access token issuer
        """
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def execute(self, command: RegisterUserCommand) -> AuthResult:
        """
        Execute registration.

        Args:
            command: Registration details

        Returns:
            AuthResult with created user and token

        Raises:
            ValidationError: If name, email, password or wallet is invalid
            DuplicateEntityError: If email or wallet already registered
        """
        # 1. Validate input before touching storage
        validate_password(command.password)
        if command.wallet_address:
            WalletAddress(command.wallet_address)

        # 2. Uniqueness checks
        if await self.user_repository.get_by_email(command.email):
            raise DuplicateEntityError("User", f"email {command.email.lower()}")

        if command.wallet_address and await self.user_repository.get_by_wallet(
            command.wallet_address
        ):
            raise DuplicateEntityError(
                "User", f"wallet address {command.wallet_address}"
            )

        # 3. Create and persist
        user = User(
            name=command.name,
            email=command.email,
            password_hash=self.password_hasher.hash(command.password),
            wallet_address=command.wallet_address,
            role=UserRole.USER,
        )
        created_user = await self.user_repository.create(user)

        logger.info("User registered", extra={"user_id": str(created_user.id)})

        return AuthResult(
            user=created_user,
            token=self.token_service.issue(created_user),
        )
