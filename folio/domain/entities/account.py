"""Account domain entity.

An account is one user's cash wallet. The wallet funds purchases and is
the only balance the system ever debits.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Mutated only by debit() during a purchase
    - Created by registration/seeding, never deleted here

Usage:
    from decimal import Decimal
    from uuid_extensions import uuid7
    from folio.domain.entities import Account
    from folio.domain.value_objects import Money

    account = Account(
        id=uuid7(),
        wallet_balance=Money(Decimal("100000.00"), "INR"),
    )
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from folio.core.result import Failure, Result, Success
from folio.domain.value_objects.money import Money


@dataclass
class Account:
    """User wallet holding tradable cash.

    Invariant:
        wallet_balance is never negative. Construction rejects a negative
        balance with ValueError; debit() refuses with a Failure.

    Attributes:
        id: Unique account identifier.
        wallet_balance: Cash available for purchases.
        display_name: Optional label shown to the user.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    wallet_balance: Money
    display_name: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate account after initialization.

        Raises:
            ValueError: If wallet balance is negative.
        """
        if self.wallet_balance.is_negative():
            raise ValueError("Wallet balance cannot be negative")

    @property
    def currency(self) -> str:
        """ISO 4217 currency of the wallet."""
        return self.wallet_balance.currency

    def can_afford(self, amount: Money) -> bool:
        """Check whether the wallet covers an amount.

        Args:
            amount: Amount to be debited (same currency as the wallet).

        Returns:
            True if wallet_balance >= amount.
        """
        return self.wallet_balance >= amount

    def debit(self, amount: Money) -> Result[Money, str]:
        """Subtract an amount from the wallet.

        Args:
            amount: Positive amount in the wallet currency.

        Returns:
            Success(new_balance): Debit applied.
            Failure(error): Amount not positive, or balance would go negative.

        Side Effects (on success):
            - Updates wallet_balance
            - Updates updated_at timestamp
        """
        if not amount.is_positive():
            return Failure(error="Debit amount must be positive")

        if not self.can_afford(amount):
            return Failure(error="Insufficient wallet balance")

        self.wallet_balance = (self.wallet_balance - amount).quantized()
        self.updated_at = datetime.now(UTC)
        return Success(value=self.wallet_balance)
