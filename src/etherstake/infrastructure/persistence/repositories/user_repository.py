"""
User repository implementation using SQLAlchemy.
"""

from typing import Optional
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from etherstake.domain.entities.user import User, UserRole, normalize_email
from etherstake.domain.exceptions import DuplicateEntityError, EntityNotFoundError
from etherstake.domain.repositories.i_user_repository import IUserRepository
from etherstake.domain.value_objects.pagination import Page, PageRequest
from etherstake.infrastructure.persistence.models import UserModel


class UserRepository(IUserRepository):
    """
    SQLAlchemy implementation of user repository.

    stake_ids on returned entities come from the stakes relationship,
    so they are read-only here; stakes are written by StakeRepository.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, user: User) -> User:
        """
        Create new user in database.

        Args:
            user: User entity to create

        Returns:
            Created user entity

        Raises:
            DuplicateEntityError: If email or wallet is already registered
        """
        model = UserModel(
            id=user.id,
            name=user.name,
            email=normalize_email(user.email),
            password_hash=user.password_hash,
            wallet_address=user.wallet_address,
            role=user.role.value,
            is_email_verified=user.is_email_verified,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

        self.session.add(model)
        await self._flush()

        return await self._reload(user.id)

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User unique identifier

        Returns:
            User entity if found, None otherwise
        """
        model = await self._fetch_one(UserModel.id == user_id)
        return self._to_entity(model) if model else None

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email (case-insensitive).

        Args:
            email: Email address

        Returns:
            User entity if found, None otherwise
        """
        model = await self._fetch_one(UserModel.email == normalize_email(email))
        return self._to_entity(model) if model else None

    async def get_by_wallet(self, wallet_address: str) -> Optional[User]:
        """
        Get user by wallet address.

        Args:
            wallet_address: Wallet address

        Returns:
            User entity if found, None otherwise
        """
        model = await self._fetch_one(
            func.lower(UserModel.wallet_address) == wallet_address.lower()
        )
        return self._to_entity(model) if model else None

    async def list(self, page_request: PageRequest) -> Page[User]:
        """
        List users, newest first.

        Args:
            page_request: Page number and size

        Returns:
            Page of user entities
        """
        stmt = (
            select(UserModel)
            .options(selectinload(UserModel.stakes))
            .order_by(UserModel.created_at.desc(), UserModel.id.desc())
            .offset(page_request.offset)
            .limit(page_request.limit)
        )
        result = await self.session.execute(stmt)
        models = result.scalars().all()

        return Page(
            items=[self._to_entity(model) for model in models],
            total=await self.count(),
            page=page_request.page,
            limit=page_request.limit,
        )

    async def count(self) -> int:
        """Count all users."""
        stmt = select(func.count()).select_from(UserModel)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def update(self, user: User) -> User:
        """
        Update existing user.

        Args:
            user: User entity with updated data

        Returns:
            Updated user entity

        Raises:
            EntityNotFoundError: If user doesn't exist
            DuplicateEntityError: If new email or wallet is taken
        """
        model = await self._fetch_one(UserModel.id == user.id)

        if not model:
            raise EntityNotFoundError("User", str(user.id))

        # Update fields
        model.name = user.name
        model.email = normalize_email(user.email)
        model.password_hash = user.password_hash
        model.wallet_address = user.wallet_address
        model.role = user.role.value
        model.is_email_verified = user.is_email_verified
        model.updated_at = user.updated_at

        await self._flush()

        return await self._reload(user.id)

    async def delete(self, user_id: UUID) -> bool:
        """
        Delete user by ID together with the user's stakes.

        Args:
            user_id: User unique identifier

        Returns:
            True if deleted, False if not found
        """
        model = await self._fetch_one(UserModel.id == user_id, refresh=True)

        if not model:
            return False

        await self.session.delete(model)
        await self.session.flush()

        return True

    async def _fetch_one(self, *criteria, refresh: bool = False):
        """Fetch a single UserModel with its stakes loaded."""
        stmt = (
            select(UserModel)
            .where(*criteria)
            .options(selectinload(UserModel.stakes))
        )
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def _reload(self, user_id: UUID) -> User:
        model = await self._fetch_one(UserModel.id == user_id, refresh=True)
        return self._to_entity(model)

    async def _flush(self) -> None:
        try:
            await self.session.flush()
        except IntegrityError as e:
            raise DuplicateEntityError("User", "this email or wallet address") from e

    def _to_entity(self, model: UserModel) -> User:
        """
        Convert UserModel to User entity.

        Args:
            model: SQLAlchemy model

        Returns:
            User domain entity
        """
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            wallet_address=model.wallet_address,
            role=UserRole(model.role),
            is_email_verified=model.is_email_verified,
            stake_ids=[stake.id for stake in model.stakes],
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
