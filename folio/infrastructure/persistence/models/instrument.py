"""Instrument database model."""

from decimal import Decimal

from sqlalchemy import Boolean, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from folio.infrastructure.persistence.base import BaseMutableModel


class InstrumentModel(BaseMutableModel):
    """Tradable product with its current unit price.

    Category is stored as a lowercase string mapped to InstrumentCategory.
    """

    __tablename__ = "instruments"

    symbol: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        unique=True,
        index=True,
        comment="Unique uppercase symbol (TCS, NIFTY50ETF, etc.)",
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Display name",
    )

    category: Mapped[str] = mapped_column(
        String(32),
        nullable=False,
        index=True,
        comment="Instrument category (stock, mutual_fund, etf, bond)",
    )

    price_per_unit: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=4),
        nullable=False,
        comment="Current price of one unit",
    )

    currency: Mapped[str] = mapped_column(
        String(3),
        nullable=False,
        default="INR",
        comment="ISO 4217 currency code",
    )

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="Only active instruments can be bought",
    )

    def __repr__(self) -> str:
        return f"<InstrumentModel(symbol={self.symbol!r}, price={self.price_per_unit})>"
