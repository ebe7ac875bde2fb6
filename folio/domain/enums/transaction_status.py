"""Transaction status enum.

Lifecycle of a trade record. The purchase flow writes records directly as
COMPLETED inside the same atomic unit as the wallet debit, so PENDING,
FAILED and CANCELLED are never produced by it; they remain valid values
for stored history and list filters.
"""

from enum import Enum


class TransactionStatus(str, Enum):
    """Status of a recorded trade."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    CANCELLED = "cancelled"

    def is_final(self) -> bool:
        """True for statuses that can never change again."""
        return self in (
            TransactionStatus.COMPLETED,
            TransactionStatus.FAILED,
            TransactionStatus.CANCELLED,
        )
