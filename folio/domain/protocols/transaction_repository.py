"""Transaction record repository protocol.

Records are append-only: the protocol has add() but no update or delete.
"""

from typing import Protocol
from uuid import UUID

from folio.domain.entities.transaction_record import TransactionRecord
from folio.domain.enums.trade_direction import TradeDirection
from folio.domain.enums.transaction_status import TransactionStatus


class TransactionRepository(Protocol):
    """Protocol for transaction record persistence."""

    async def add(self, record: TransactionRecord) -> None:
        """Insert a new record.

        Args:
            record: Record to insert. Its ID must not exist yet.
        """
        ...

    async def find_by_id(
        self, transaction_id: UUID, account_id: UUID
    ) -> TransactionRecord | None:
        """Find a record owned by an account.

        Args:
            transaction_id: Record identifier.
            account_id: Owning account. Records of other accounts are
                treated as missing.

        Returns:
            Record if found and owned by account_id, None otherwise.
        """
        ...

    async def list_by_account(
        self,
        account_id: UUID,
        *,
        direction: TradeDirection | None = None,
        status: TransactionStatus | None = None,
        instrument_id: UUID | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[TransactionRecord]:
        """List records of an account, newest first.

        Args:
            account_id: Owning account.
            direction: Optional direction filter.
            status: Optional status filter.
            instrument_id: Optional instrument filter.
            limit: Maximum records to return.
            offset: Records to skip.

        Returns:
            Records ordered by created_at descending.
        """
        ...

    async def count_by_account(
        self,
        account_id: UUID,
        *,
        direction: TradeDirection | None = None,
        status: TransactionStatus | None = None,
        instrument_id: UUID | None = None,
    ) -> int:
        """Count records of an account matching the same filters as list."""
        ...
