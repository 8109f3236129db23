"""
Test fixtures and configuration.

Every test that touches storage gets its own SQLite file under tmp_path,
so no PostgreSQL or Redis instance is needed.
"""

from datetime import datetime
from typing import AsyncGenerator, Awaitable, Callable, Dict

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from etherstake.config.settings import Settings
from etherstake.domain.entities.user import UserRole
from etherstake.infrastructure.persistence.database import Database
from etherstake.main import create_app
from helpers import TEST_PASSWORD, make_email, make_wallet


# ================================================================
# Settings and Database
# ================================================================


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Settings pointing at a throwaway SQLite database."""
    return Settings(
        ENV="test",
        DEBUG=False,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path}/etherstake_test.db",
        JWT_SECRET_KEY="test-secret-key-not-for-production",
        BCRYPT_ROUNDS=10,
        REDIS_ENABLED=False,
        METRICS_ENABLED=True,
        LOG_LEVEL="WARNING",
    )


@pytest_asyncio.fixture
async def database(settings: Settings) -> AsyncGenerator[Database, None]:
    """Connected database with all tables created."""
    db = Database(database_url=settings.DATABASE_URL)
    await db.connect()
    await db.create_tables()

    yield db

    await db.drop_tables()
    await db.disconnect()


@pytest_asyncio.fixture
async def db_session(database: Database) -> AsyncGenerator[AsyncSession, None]:
    """Provide database session for tests."""
    async with database.session() as session:
        yield session


# ================================================================
# Application and HTTP Client
# ================================================================


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    """
    Application with an initialized container.

    ASGITransport does not run the lifespan, so the container is
    started and stopped here.
    """
    application = create_app(settings)
    container = application.state.container
    await container.initialize()
    await container.database.create_tables()

    yield application

    await container.shutdown()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Provide HTTP client for API testing."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def freeze_clock(app: FastAPI) -> Callable[[datetime], None]:
    """Pin the container clock used by stake transitions."""

    def _freeze(moment: datetime) -> None:
        app.state.container.clock = lambda: moment

    return _freeze


@pytest.fixture
def register_user(
    client: AsyncClient,
) -> Callable[..., Awaitable[Dict]]:
    """
    Register an account through the API.

    Returns a coroutine function yielding
    {"token", "user", "email", "password", "wallet"}.
    """

    async def _register(
        name: str = "Test User",
        email: str | None = None,
        password: str = TEST_PASSWORD,
        wallet: str | None = "auto",
    ) -> Dict:
        email = email or make_email()
        if wallet == "auto":
            wallet = make_wallet()

        payload = {"name": name, "email": email, "password": password}
        if wallet:
            payload["wallet_address"] = wallet

        response = await client.post("/api/auth/register", json=payload)
        assert response.status_code == 201, response.text
        body = response.json()
        return {
            "token": body["token"],
            "user": body["user"],
            "email": email,
            "password": password,
            "wallet": wallet,
        }

    return _register


@pytest.fixture
def promote_to_admin(app: FastAPI) -> Callable[[str], Awaitable[None]]:
    """Grant the admin role to a registered account by email."""

    async def _promote(email: str) -> None:
        container = app.state.container
        async with container.database.session() as session:
            user_repo = container.get_user_repository(session)
            user = await user_repo.get_by_email(email)
            user.change_role(UserRole.ADMIN)
            await user_repo.update(user)

    return _promote


@pytest_asyncio.fixture
async def admin(register_user, promote_to_admin) -> Dict:
    """A registered account holding the admin role."""
    account = await register_user(name="Admin User", email=make_email("admin"))
    await promote_to_admin(account["email"])
    return account
