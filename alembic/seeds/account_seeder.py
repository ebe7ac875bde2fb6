"""Demo account seeder.

Accounts get fixed UUIDs so a bearer token can be minted for them locally
(the token 'sub' claim is the account ID). Existing accounts keep their
balances.
"""

from decimal import Decimal
from uuid import UUID

import sqlalchemy as sa
import structlog
from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger(__name__)

DEMO_ACCOUNTS = [
    {
        "id": UUID("00000000-0000-7000-8000-000000000001"),
        "display_name": "admin",
        "wallet_balance": Decimal("1000000.00"),
    },
    {
        "id": UUID("00000000-0000-7000-8000-000000000002"),
        "display_name": "demo",
        "wallet_balance": Decimal("100000.00"),
    },
]

_SELECT_ACCOUNT = sa.text("SELECT 1 FROM accounts WHERE id = :id LIMIT 1").bindparams(
    sa.bindparam("id", type_=sa.Uuid())
)

_INSERT_ACCOUNT = sa.text("""
    INSERT INTO accounts (
        id, wallet_balance, currency, display_name, created_at, updated_at
    )
    VALUES (
        :id, :wallet_balance, :currency, :display_name,
        CURRENT_TIMESTAMP, CURRENT_TIMESTAMP
    )
""").bindparams(
    sa.bindparam("id", type_=sa.Uuid()),
    sa.bindparam("wallet_balance", type_=sa.Numeric(19, 2)),
)


async def seed_demo_accounts(session: AsyncSession, currency: str = "INR") -> None:
    """Seed demo accounts. Idempotent via primary key check.

    Args:
        session: Async database session.
        currency: Wallet currency.
    """
    for account in DEMO_ACCOUNTS:
        result = await session.execute(_SELECT_ACCOUNT, {"id": account["id"]})
        if result.fetchone() is not None:
            logger.debug("account_exists", display_name=account["display_name"])
            continue

        await session.execute(_INSERT_ACCOUNT, {**account, "currency": currency})
        logger.info(
            "account_seeded",
            account_id=str(account["id"]),
            display_name=account["display_name"],
        )
