"""
Dependency Injection Container for EtherStake.

Manages all service instances and their dependencies.
"""

from datetime import datetime
from typing import Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from etherstake.config.settings import Settings
from etherstake.domain.repositories.i_stake_repository import IStakeRepository
from etherstake.domain.repositories.i_user_repository import IUserRepository
from etherstake.domain.services.i_password_hasher import IPasswordHasher
from etherstake.domain.services.i_token_service import ITokenService
from etherstake.domain.value_objects.staking_terms import StakingTerms
from etherstake.infrastructure.auth.jwt_handler import JWTHandler
from etherstake.infrastructure.auth.password_hasher import BcryptPasswordHasher
from etherstake.infrastructure.cache.i_cache_client import ICacheClient
from etherstake.infrastructure.cache.redis_cache_client import RedisCacheClient
from etherstake.infrastructure.persistence.database import Database
from etherstake.infrastructure.persistence.repositories.stake_repository import (
    StakeRepository,
)
from etherstake.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)
from etherstake.infrastructure.rate_limiting.rate_limiter import RateLimiter


class DIContainer:
    """
    Dependency Injection Container.

    Built by the application factory and owned by the app lifespan.
    Holds singleton services; repositories are session-scoped and
    created per request.
    """

    def __init__(self, settings: Settings):
        """
        Initialize container with None instances.

        Args:
            settings: Application settings
        """
        self.settings = settings

        # Source of "now" for stake transitions
        self.clock: Callable[[], datetime] = datetime.now

        # Infrastructure
        self._database: Optional[Database] = None
        self._cache_client: Optional[ICacheClient] = None
        self._rate_limiter: Optional[RateLimiter] = None

        # Domain Services
        self._password_hasher: Optional[IPasswordHasher] = None
        self._token_service: Optional[ITokenService] = None
        self._staking_terms: Optional[StakingTerms] = None

    async def initialize(self) -> None:
        """Initialize all services and establish connections."""
        await self.database.connect()

        if self.settings.REDIS_ENABLED:
            await self.cache_client.connect()

    async def shutdown(self) -> None:
        """Cleanup resources and close connections."""
        if self._database:
            await self._database.disconnect()

        if self._cache_client:
            await self._cache_client.disconnect()

    # Infrastructure Getters

    @property
    def database(self) -> Database:
        """Get database instance."""
        if self._database is None:
            self._database = Database(
                database_url=self.settings.DATABASE_URL,
                echo=self.settings.DATABASE_ECHO,
            )
        return self._database

    @property
    def cache_client(self) -> ICacheClient:
        """Get Redis cache client instance."""
        if self._cache_client is None:
            self._cache_client = RedisCacheClient(
                host=self.settings.REDIS_HOST,
                port=self.settings.REDIS_PORT,
                db=self.settings.REDIS_DB,
                password=self.settings.REDIS_PASSWORD or None,
            )
        return self._cache_client

    @property
    def rate_limiter(self) -> Optional[RateLimiter]:
        """Get rate limiter, or None when Redis or rate limiting is off."""
        if not (self.settings.REDIS_ENABLED and self.settings.RATE_LIMIT_ENABLED):
            return None

        if self._rate_limiter is None:
            self._rate_limiter = RateLimiter(
                cache_client=self.cache_client,
                default_requests_per_minute=(
                    self.settings.RATE_LIMIT_REQUESTS_PER_MINUTE
                ),
                default_burst_size=self.settings.RATE_LIMIT_BURST_SIZE,
            )
        return self._rate_limiter

    # Domain Service Getters

    @property
    def password_hasher(self) -> IPasswordHasher:
        """Get password hasher instance."""
        if self._password_hasher is None:
            self._password_hasher = BcryptPasswordHasher(
                rounds=self.settings.BCRYPT_ROUNDS
            )
        return self._password_hasher

    @property
    def token_service(self) -> ITokenService:
        """Get JWT token service instance."""
        if self._token_service is None:
            self._token_service = JWTHandler(
                secret_key=self.settings.JWT_SECRET_KEY,
                algorithm=self.settings.JWT_ALGORITHM,
                expiration_hours=self.settings.JWT_EXPIRATION_HOURS,
            )
        return self._token_service

    @property
    def staking_terms(self) -> StakingTerms:
        """Get configured staking rates."""
        if self._staking_terms is None:
            self._staking_terms = StakingTerms(
                reward_rate=self.settings.STAKING_REWARD_RATE,
                penalty_rate=self.settings.STAKING_PENALTY_RATE,
            )
        return self._staking_terms

    # Repository Factories (session-scoped)

    def get_user_repository(self, session: AsyncSession) -> IUserRepository:
        """
        Create user repository for session.

        Args:
            session: Database session

        Returns:
            User repository instance
        """
        return UserRepository(session)

    def get_stake_repository(self, session: AsyncSession) -> IStakeRepository:
        """
        Create stake repository for session.

        Args:
            session: Database session

        Returns:
            Stake repository instance
        """
        return StakeRepository(session)
