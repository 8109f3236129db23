"""
Database initialization script.

Creates the EtherStake tables and optionally promotes an account to admin.

Usage:
    python scripts/init_database.py
    python scripts/init_database.py --drop
    python scripts/init_database.py --promote-admin alice@example.com
"""

import argparse
import asyncio
import sys

from etherstake.config.settings import get_settings
from etherstake.di.container import DIContainer
from etherstake.domain.entities.user import UserRole
from etherstake.infrastructure.monitoring import get_logger, setup_logging

logger = get_logger("etherstake.scripts.init_database")


async def promote_admin(container: DIContainer, email: str) -> bool:
    """
    Give an existing account the admin role.

    Args:
        container: Initialized DI container
        email: Account email

    Returns:
        True if the account was found and promoted
    """
    async with container.database.session() as session:
        user_repo = container.get_user_repository(session)
        user = await user_repo.get_by_email(email)
        if not user:
            logger.error(f"No user registered with email {email}")
            return False

        user.change_role(UserRole.ADMIN)
        await user_repo.update(user)

    logger.info(f"Promoted {email} to admin")
    return True


async def init_database(drop: bool = False, admin_email: str | None = None) -> int:
    """Create tables (dropping first if asked), then promote an admin."""
    settings = get_settings()
    container = DIContainer(settings)
    await container.initialize()

    try:
        if drop:
            logger.warning("Dropping all tables")
            await container.database.drop_tables()

        await container.database.create_tables()
        logger.info("Database tables ready")

        if admin_email and not await promote_admin(container, admin_email):
            return 1
    finally:
        await container.shutdown()

    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Initialize EtherStake database")
    parser.add_argument(
        "--drop",
        action="store_true",
        help="Drop existing tables before creating them",
    )
    parser.add_argument(
        "--promote-admin",
        metavar="EMAIL",
        default=None,
        help="Grant the admin role to an existing account",
    )
    args = parser.parse_args()

    setup_logging(level=get_settings().LOG_LEVEL, json_logs=False)
    return asyncio.run(init_database(drop=args.drop, admin_email=args.promote_admin))


if __name__ == "__main__":
    sys.exit(main())
