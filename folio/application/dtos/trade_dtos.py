"""Trade and portfolio DTOs.

Result dataclasses returned by the trade command and query handlers.
Money value objects are flattened to Decimal amounts plus one currency
field so the presentation layer can serialize them directly.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Self
from uuid import UUID

from folio.domain.entities import Holding, Instrument, TransactionRecord


@dataclass(frozen=True, kw_only=True)
class PurchaseResult:
    """Outcome of a completed buy.

    Attributes:
        transaction_id: ID of the recorded transaction.
        new_wallet_balance: Wallet balance after the debit.
        currency: Wallet currency.
        instrument_id: Instrument bought.
        units: Units bought.
        unit_price: Price per unit paid.
        total_amount: Amount debited.
    """

    transaction_id: UUID
    new_wallet_balance: Decimal
    currency: str
    instrument_id: UUID
    units: Decimal
    unit_price: Decimal
    total_amount: Decimal


@dataclass(frozen=True, kw_only=True)
class InstrumentSnapshot:
    """Instrument fields shown next to holdings and transactions."""

    id: UUID
    symbol: str
    name: str
    category: str
    price_per_unit: Decimal

    @classmethod
    def from_entity(cls, instrument: Instrument) -> Self:
        return cls(
            id=instrument.id,
            symbol=instrument.symbol,
            name=instrument.name,
            category=instrument.category.value,
            price_per_unit=instrument.price_per_unit.amount,
        )


@dataclass(frozen=True, kw_only=True)
class TransactionResult:
    """Single transaction for API responses."""

    id: UUID
    instrument: InstrumentSnapshot | None
    direction: str
    units: Decimal
    unit_price: Decimal
    total_amount: Decimal
    currency: str
    status: str
    created_at: datetime

    @classmethod
    def from_entity(
        cls, record: TransactionRecord, instrument: Instrument | None
    ) -> Self:
        """Build from a record and (optionally) its instrument."""
        return cls(
            id=record.id,
            instrument=(
                InstrumentSnapshot.from_entity(instrument) if instrument else None
            ),
            direction=record.direction.value,
            units=record.units,
            unit_price=record.unit_price.amount,
            total_amount=record.total_amount.amount,
            currency=record.total_amount.currency,
            status=record.status.value,
            created_at=record.created_at,
        )


@dataclass(frozen=True, kw_only=True)
class TransactionListResult:
    """One page of transactions.

    Attributes:
        transactions: Transactions on this page, newest first.
        page: 1-based page number.
        limit: Page size.
        total: Total matching transactions.
        pages: Total pages (ceil(total / limit)).
    """

    transactions: list[TransactionResult]
    page: int
    limit: int
    total: int
    pages: int


@dataclass(frozen=True, kw_only=True)
class HoldingResult:
    """Holding valued at the instrument's current price."""

    id: UUID
    instrument: InstrumentSnapshot
    total_units: Decimal
    average_price: Decimal
    total_invested: Decimal
    current_value: Decimal
    returns: Decimal
    return_percentage: Decimal
    currency: str
    first_acquired_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, holding: Holding, instrument: Instrument) -> Self:
        """Value a holding at the instrument's current price."""
        price = instrument.price_per_unit
        return cls(
            id=holding.id,
            instrument=InstrumentSnapshot.from_entity(instrument),
            total_units=holding.total_units,
            average_price=holding.average_price.amount,
            total_invested=holding.total_invested.amount,
            current_value=holding.current_value(price).amount,
            returns=holding.returns(price).amount,
            return_percentage=holding.return_percentage(price),
            currency=holding.total_invested.currency,
            first_acquired_at=holding.first_acquired_at,
            updated_at=holding.updated_at,
        )


@dataclass(frozen=True, kw_only=True)
class PortfolioSummary:
    """Aggregate figures across all holdings plus the wallet.

    Attributes:
        total_invested: Sum of holding cost bases.
        total_current_value: Sum of holding market values.
        total_returns: total_current_value - total_invested.
        return_percentage: total_returns / total_invested x 100 (2 dp, 0 if
            nothing invested).
        wallet_balance: Cash in the wallet.
        total_value: total_current_value + wallet_balance.
        currency: Wallet currency.
    """

    total_invested: Decimal
    total_current_value: Decimal
    total_returns: Decimal
    return_percentage: Decimal
    wallet_balance: Decimal
    total_value: Decimal
    currency: str


@dataclass(frozen=True, kw_only=True)
class PortfolioResult:
    """Holdings, summary and recent activity of one account."""

    holdings: list[HoldingResult]
    summary: PortfolioSummary
    recent_transactions: list[TransactionResult]


@dataclass(frozen=True, kw_only=True)
class HoldingDetailResult:
    """One holding with a page of its transaction history (newest first)."""

    holding: HoldingResult
    transactions: list[TransactionResult]
    page: int
    limit: int
    total: int
    pages: int
