"""Account repository protocol.

Accounts are read freely, but only the purchase flow writes them, and it
always reads through find_by_id_for_update() first so the balance check
and the debit see the same committed row.
"""

from typing import Protocol
from uuid import UUID

from folio.domain.entities.account import Account


class AccountRepository(Protocol):
    """Protocol for account persistence operations."""

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by ID without locking.

        Args:
            account_id: Unique account identifier.

        Returns:
            Account entity if found, None otherwise.
        """
        ...

    async def find_by_id_for_update(self, account_id: UUID) -> Account | None:
        """Find account by ID and lock its row until the unit ends.

        Concurrent callers for the same account block here until the
        holder commits or rolls back, then observe the committed state.

        Args:
            account_id: Unique account identifier.

        Returns:
            Account entity if found, None otherwise.
        """
        ...

    async def save(self, account: Account) -> None:
        """Create or update an account.

        Args:
            account: Account entity to persist.
        """
        ...
