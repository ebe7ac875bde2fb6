"""SqlAlchemyLedgerStore - LedgerStore on top of Database.transaction().

Each unit is one database transaction on one AsyncSession; the four
repositories handed out share that session, so their writes commit or
roll back together.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from folio.infrastructure.persistence.database import Database
from folio.infrastructure.persistence.repositories import (
    AccountRepository,
    HoldingRepository,
    InstrumentRepository,
    TransactionRepository,
)


@dataclass(frozen=True, slots=True)
class SqlAlchemyLedgerSession:
    """Repositories bound to one open transaction."""

    accounts: AccountRepository
    instruments: InstrumentRepository
    holdings: HoldingRepository
    transactions: TransactionRepository

    @classmethod
    def for_session(cls, session: AsyncSession) -> "SqlAlchemyLedgerSession":
        return cls(
            accounts=AccountRepository(session),
            instruments=InstrumentRepository(session),
            holdings=HoldingRepository(session),
            transactions=TransactionRepository(session),
        )


class SqlAlchemyLedgerStore:
    """LedgerStore adapter.

    Usage:
        store = SqlAlchemyLedgerStore(database)
        async with store.transaction() as ledger:
            account = await ledger.accounts.find_by_id_for_update(account_id)
            ...
    """

    def __init__(self, database: Database) -> None:
        self._database = database

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[SqlAlchemyLedgerSession, None]:
        """Open an atomic unit; commit on exit, roll back on exception."""
        async with self._database.transaction() as session:
            yield SqlAlchemyLedgerSession.for_session(session)
