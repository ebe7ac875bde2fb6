"""Instrument domain entity.

A tradable product (stock, mutual fund, ETF, bond) with a current unit
price. The buy flow reads instruments but never modifies them; the price
is snapshotted onto the transaction record at execution time.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from folio.domain.enums.instrument_category import InstrumentCategory
from folio.domain.value_objects.money import Money


@dataclass
class Instrument:
    """Tradable product with a current price.

    Attributes:
        id: Unique instrument identifier.
        symbol: Unique ticker-like symbol, stored uppercase (e.g., "TCS").
        name: Display name.
        category: Kind of product.
        price_per_unit: Current price of one unit (positive).
        is_active: Only active instruments can be bought.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.
    """

    id: UUID
    symbol: str
    name: str
    category: InstrumentCategory
    price_per_unit: Money
    is_active: bool = True
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate instrument after initialization.

        Raises:
            ValueError: If symbol or name is empty, or price is not positive.
        """
        if not self.symbol or not self.symbol.strip():
            raise ValueError("Symbol cannot be empty")

        if not self.name or not self.name.strip():
            raise ValueError("Instrument name cannot be empty")

        if not self.price_per_unit.is_positive():
            raise ValueError("Price per unit must be positive")

        self.symbol = self.symbol.strip().upper()

    @property
    def currency(self) -> str:
        """ISO 4217 currency the instrument is priced in."""
        return self.price_per_unit.currency

    def is_tradable(self) -> bool:
        """True if the instrument can currently be bought."""
        return self.is_active
