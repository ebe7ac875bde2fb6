"""Database seeding package.

Idempotent seeders that run automatically after `alembic upgrade`. Each
seeder checks for existing rows before inserting, so repeated runs are
safe.
"""

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from folio.core.config import settings
from seeds.account_seeder import seed_demo_accounts
from seeds.instrument_seeder import seed_instruments

logger = structlog.get_logger(__name__)


async def run_all_seeders(session: AsyncSession) -> None:
    """Run all database seeders. Called after Alembic migrations.

    Args:
        session: Async database session.
    """
    logger.info("seeding_started")

    await seed_instruments(session, currency=settings.default_currency)
    await seed_demo_accounts(session, currency=settings.default_currency)

    logger.info("seeding_completed")


__all__ = ["run_all_seeders", "seed_demo_accounts", "seed_instruments"]
