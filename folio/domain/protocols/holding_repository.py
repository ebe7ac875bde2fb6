"""Holding repository protocol.

(account_id, instrument_id) is unique: the store holds at most one
holding per pair and save() upserts on that key.
"""

from typing import Protocol
from uuid import UUID

from folio.domain.entities.holding import Holding


class HoldingRepository(Protocol):
    """Protocol for holding persistence operations.

    Read methods return domain entities (Holding), not database models.
    """

    async def find_by_account_and_instrument(
        self,
        account_id: UUID,
        instrument_id: UUID,
        *,
        for_update: bool = False,
    ) -> Holding | None:
        """Find the holding for an (account, instrument) pair.

        Args:
            account_id: Owning account.
            instrument_id: Instrument held.
            for_update: Lock the row until the unit ends.

        Returns:
            Holding entity if found, None otherwise.
        """
        ...

    async def list_by_account(self, account_id: UUID) -> list[Holding]:
        """List all holdings of an account with units held.

        Args:
            account_id: Owning account.

        Returns:
            Holdings ordered by first acquisition (oldest first).
        """
        ...

    async def save(self, holding: Holding) -> None:
        """Create or update a holding.

        Args:
            holding: Holding entity to persist.
        """
        ...
