"""Ledger store protocol: the atomic multi-record unit.

The purchase flow touches three records (account, transaction, holding)
that must change together or not at all. LedgerStore.transaction() opens
one such unit and hands out repositories bound to it.

Contract:
    - Normal exit from the context commits every write of the unit.
    - An exception leaving the context rolls every write back, then
      propagates.
    - Row locks taken inside the unit (find_by_id_for_update, for_update=True)
      are held until commit or rollback. Locks are taken account first,
      then holding.

Usage:
    async with store.transaction() as ledger:
        account = await ledger.accounts.find_by_id_for_update(account_id)
        ...
        await ledger.transactions.add(record)
"""

from contextlib import AbstractAsyncContextManager
from typing import Protocol

from folio.domain.protocols.account_repository import AccountRepository
from folio.domain.protocols.holding_repository import HoldingRepository
from folio.domain.protocols.instrument_repository import InstrumentRepository
from folio.domain.protocols.transaction_repository import TransactionRepository


class LedgerSession(Protocol):
    """Repositories sharing one atomic unit."""

    @property
    def accounts(self) -> AccountRepository: ...

    @property
    def instruments(self) -> InstrumentRepository: ...

    @property
    def holdings(self) -> HoldingRepository: ...

    @property
    def transactions(self) -> TransactionRepository: ...


class LedgerStore(Protocol):
    """Factory for atomic units over the ledger records."""

    def transaction(self) -> AbstractAsyncContextManager[LedgerSession]:
        """Open an atomic unit.

        Returns:
            Async context manager yielding a LedgerSession.
        """
        ...
