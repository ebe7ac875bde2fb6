"""Holding (position) domain entity.

A user's aggregated position in one instrument. There is at most one
holding per (account, instrument) pair; the first purchase opens it and
every later purchase folds into it.

Cost Basis:
    total_invested is the exact running sum of purchase totals (minor
    units). average_price is derived from it on every change:

        average_price = quantize_price(total_invested / total_units)

    Recomputing from the running sum keeps the average free of
    accumulated rounding drift across many purchases.

Usage:
    from decimal import Decimal
    from folio.domain.entities import Holding
    from folio.domain.value_objects import Money

    holding = Holding.open(
        account_id=account.id,
        instrument_id=instrument.id,
        units=Decimal("5"),
        unit_price=Money(Decimal("100.00"), "INR"),
        total_amount=Money(Decimal("500.00"), "INR"),
    )
    holding.record_purchase(Decimal("3"), Money(Decimal("360.00"), "INR"))
    holding.average_price  # Money(107.5000, INR)
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from typing import Self
from uuid import UUID

from uuid_extensions import uuid7

from folio.domain.value_objects.money import Money, quantize_money


@dataclass
class Holding:
    """Aggregated position in one instrument.

    Attributes:
        id: Unique holding identifier.
        account_id: Owning account.
        instrument_id: Instrument held.
        total_units: Units owned (non-negative, up to 8 decimal places).
        average_price: Weighted average cost per unit (4 decimal places).
        total_invested: Sum of all purchase totals (minor units).
        first_acquired_at: Time of the first purchase. Never changes.
        updated_at: Last modification timestamp.
    """

    # =========================================================================
    # Required Fields
    # =========================================================================

    id: UUID
    account_id: UUID
    instrument_id: UUID
    total_units: Decimal
    average_price: Money
    total_invested: Money

    # =========================================================================
    # Timestamps
    # =========================================================================

    first_acquired_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate holding after initialization.

        Raises:
            ValueError: If units are negative or currencies disagree.
        """
        if self.total_units < 0:
            raise ValueError("Total units cannot be negative")

        if self.total_invested.is_negative():
            raise ValueError("Total invested cannot be negative")

        if self.average_price.currency != self.total_invested.currency:
            raise ValueError(
                f"Average price currency ({self.average_price.currency}) must "
                f"match invested currency ({self.total_invested.currency})"
            )

    # =========================================================================
    # Factory
    # =========================================================================

    @classmethod
    def open(
        cls,
        *,
        account_id: UUID,
        instrument_id: UUID,
        units: Decimal,
        unit_price: Money,
        total_amount: Money,
    ) -> Self:
        """Create the holding for a first purchase.

        The average price of a fresh position is the purchase unit price.

        Args:
            account_id: Owning account.
            instrument_id: Instrument bought.
            units: Units bought (positive).
            unit_price: Price paid per unit.
            total_amount: Purchase total (units x unit_price, minor units).

        Returns:
            New Holding with first_acquired_at set to now.
        """
        now = datetime.now(UTC)
        return cls(
            id=uuid7(),
            account_id=account_id,
            instrument_id=instrument_id,
            total_units=units,
            average_price=unit_price,
            total_invested=total_amount.quantized(),
            first_acquired_at=now,
            updated_at=now,
        )

    # =========================================================================
    # Mutations
    # =========================================================================

    def record_purchase(self, units: Decimal, total_amount: Money) -> None:
        """Fold another purchase into the position.

        Args:
            units: Units bought (positive).
            total_amount: Purchase total in the holding currency.

        Raises:
            ValueError: If units are not positive.
            CurrencyMismatchError: If total_amount is in another currency.

        Side Effects:
            - Adds units and total_amount
            - Recomputes average_price from the new totals
            - Updates updated_at (first_acquired_at is untouched)
        """
        if units <= 0:
            raise ValueError("Purchased units must be positive")

        self.total_invested = self.total_invested + total_amount.quantized()
        self.total_units = self.total_units + units
        self.average_price = self.total_invested.per_unit(self.total_units)
        self.updated_at = datetime.now(UTC)

    # =========================================================================
    # Valuation
    # =========================================================================

    def current_value(self, price_per_unit: Money) -> Money:
        """Market value of the position at a given unit price."""
        return price_per_unit.times_units(self.total_units)

    def returns(self, price_per_unit: Money) -> Money:
        """Unrealized gain (positive) or loss (negative) at a unit price."""
        return self.current_value(price_per_unit) - self.total_invested

    def return_percentage(self, price_per_unit: Money) -> Decimal:
        """Unrealized gain/loss as a percentage of total_invested.

        Returns:
            Percentage rounded to 2 decimal places, 0 if nothing invested.
        """
        if self.total_invested.is_zero():
            return Decimal("0")
        percent = self.returns(price_per_unit).amount / self.total_invested.amount
        return quantize_money(percent * 100)

    def has_position(self) -> bool:
        """True if any units are held."""
        return self.total_units > 0
