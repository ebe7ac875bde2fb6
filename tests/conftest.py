"""Shared pytest configuration and fixtures.

Settings are loaded when folio.core.config is first imported, so the
environment defaults below must be in place before any folio import.

Fixtures:
    database: Fresh SQLite database file per test (tables created)
    ledger_store: SqlAlchemyLedgerStore over that database
    seeded_ledger: Ledger with one funded account and two instruments
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./folio-test.db")
os.environ.setdefault(
    "SECRET_KEY", "test-secret-key-for-folio-tests-0123456789abcdef"
)
os.environ.setdefault("LOG_LEVEL", "WARNING")

from dataclasses import dataclass  # noqa: E402
from decimal import Decimal  # noqa: E402
from uuid import UUID  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from folio.domain.entities import Account, Instrument  # noqa: E402
from folio.domain.enums import InstrumentCategory  # noqa: E402
from folio.domain.value_objects import Money  # noqa: E402
from folio.infrastructure.persistence.database import Database  # noqa: E402
from folio.infrastructure.persistence.ledger_store import (  # noqa: E402
    SqlAlchemyLedgerStore,
)
from folio.infrastructure.persistence.models import (  # noqa: E402
    AccountModel,
    InstrumentModel,
)


# =============================================================================
# Test Helpers
# =============================================================================


def inr(amount: str) -> Money:
    """Money in INR from a string amount."""
    return Money(Decimal(amount), "INR")


def make_account(balance: str = "1000.00", account_id: UUID | None = None) -> Account:
    """Create an Account entity with an INR wallet."""
    return Account(id=account_id or uuid7(), wallet_balance=inr(balance))


def make_instrument(
    symbol: str = "TCS",
    price: str = "100.00",
    category: InstrumentCategory = InstrumentCategory.STOCK,
    is_active: bool = True,
) -> Instrument:
    """Create an Instrument entity priced in INR."""
    return Instrument(
        id=uuid7(),
        symbol=symbol,
        name=f"{symbol} Ltd",
        category=category,
        price_per_unit=inr(price),
        is_active=is_active,
    )


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def database(tmp_path):
    """Fresh SQLite database file with all tables created."""
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}")
    await db.create_all()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def ledger_store(database):
    """Ledger store bound to the per-test database."""
    return SqlAlchemyLedgerStore(database)


@dataclass
class SeededLedger:
    """IDs of the rows inserted by the seeded_ledger fixture."""

    database: Database
    store: SqlAlchemyLedgerStore
    account_id: UUID
    instrument_id: UUID
    inactive_instrument_id: UUID


async def insert_account(database: Database, balance: str) -> UUID:
    """Insert an INR account row and return its ID."""
    account_id = uuid7()
    async with database.get_session() as session:
        session.add(
            AccountModel(
                id=account_id,
                wallet_balance=Decimal(balance),
                currency="INR",
            )
        )
    return account_id


async def insert_instrument(
    database: Database,
    symbol: str,
    price: str,
    is_active: bool = True,
) -> UUID:
    """Insert an INR instrument row and return its ID."""
    instrument_id = uuid7()
    async with database.get_session() as session:
        session.add(
            InstrumentModel(
                id=instrument_id,
                symbol=symbol,
                name=f"{symbol} Ltd",
                category=InstrumentCategory.STOCK.value,
                price_per_unit=Decimal(price),
                currency="INR",
                is_active=is_active,
            )
        )
    return instrument_id


@pytest_asyncio.fixture
async def seeded_ledger(database, ledger_store):
    """Account with 1000.00 INR, instrument at 100.00, inactive instrument."""
    return SeededLedger(
        database=database,
        store=ledger_store,
        account_id=await insert_account(database, "1000.00"),
        instrument_id=await insert_instrument(database, "TCS", "100.00"),
        inactive_instrument_id=await insert_instrument(
            database, "DELISTED", "50.00", is_active=False
        ),
    )


@pytest.fixture
def silent_logger():
    """Logger double that records calls (MagicMock with bind returning self)."""
    from unittest.mock import MagicMock

    logger = MagicMock()
    logger.bind.return_value = logger
    return logger
