"""Transaction record domain entity.

Immutable audit entry for one executed trade. Records are written once
inside the purchase unit and never updated; the repository exposes no
update path.

Usage:
    from folio.domain.entities import TransactionRecord

    record = TransactionRecord.buy(
        account_id=account.id,
        instrument_id=instrument.id,
        units=Decimal("5"),
        unit_price=instrument.price_per_unit,
    )
    record.total_amount  # units x unit_price, rounded to minor units
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from typing import Self
from uuid import UUID

from uuid_extensions import uuid7

from folio.domain.enums.trade_direction import TradeDirection
from folio.domain.enums.transaction_status import TransactionStatus
from folio.domain.value_objects.money import Money


@dataclass(frozen=True, kw_only=True)
class TransactionRecord:
    """Executed trade.

    Attributes:
        id: Time-ordered UUIDv7 identifier.
        account_id: Account that traded.
        instrument_id: Instrument traded.
        direction: BUY or SELL.
        units: Units traded (positive).
        unit_price: Price per unit at execution time.
        total_amount: units x unit_price, rounded to minor units.
        status: Lifecycle status.
        created_at: Execution timestamp.
    """

    id: UUID
    account_id: UUID
    instrument_id: UUID
    direction: TradeDirection
    units: Decimal
    unit_price: Money
    total_amount: Money
    status: TransactionStatus
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate record after initialization.

        Raises:
            ValueError: If units or unit price are not positive.
        """
        if self.units <= 0:
            raise ValueError("Transaction units must be positive")

        if not self.unit_price.is_positive():
            raise ValueError("Transaction unit price must be positive")

    @classmethod
    def buy(
        cls,
        *,
        account_id: UUID,
        instrument_id: UUID,
        units: Decimal,
        unit_price: Money,
    ) -> Self:
        """Create a completed buy record with a fresh UUIDv7.

        Args:
            account_id: Buying account.
            instrument_id: Instrument bought.
            units: Units bought.
            unit_price: Snapshot of the instrument price.

        Returns:
            New TransactionRecord with status COMPLETED.
        """
        return cls(
            id=uuid7(),
            account_id=account_id,
            instrument_id=instrument_id,
            direction=TradeDirection.BUY,
            units=units,
            unit_price=unit_price,
            total_amount=unit_price.times_units(units),
            status=TransactionStatus.COMPLETED,
        )

    def is_buy(self) -> bool:
        """True if this record is a purchase."""
        return self.direction == TradeDirection.BUY
