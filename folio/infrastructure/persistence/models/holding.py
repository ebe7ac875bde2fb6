"""Holding database model.

Architecture:
    - One row per (account_id, instrument_id), enforced by a unique constraint
    - Units keep 8 decimal places for fractional purchases
    - average_price keeps 4 decimal places, total_invested 2 (minor units)
    - One currency column shared by both money fields
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from folio.infrastructure.persistence.base import BaseMutableModel


class HoldingModel(BaseMutableModel):
    """Aggregated position of one account in one instrument.

    Indexes:
        - ix_holdings_account_id: Portfolio listing
        - uq_holdings_account_instrument: Unique (account_id, instrument_id)
    """

    __tablename__ = "holdings"

    account_id: Mapped[UUID] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to accounts table",
    )

    instrument_id: Mapped[UUID] = mapped_column(
        ForeignKey("instruments.id", ondelete="RESTRICT"),
        nullable=False,
        comment="FK to instruments table",
    )

    total_units: Mapped[Decimal] = mapped_column(
        Numeric(precision=28, scale=8),
        nullable=False,
        comment="Units held",
    )

    average_price: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=4),
        nullable=False,
        comment="Weighted average cost per unit",
    )

    total_invested: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=2),
        nullable=False,
        comment="Sum of purchase totals",
    )

    currency: Mapped[str] = mapped_column(
        String(3),
        nullable=False,
        default="INR",
        comment="ISO 4217 currency code",
    )

    first_acquired_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Time of first purchase (never updated)",
    )

    __table_args__ = (
        UniqueConstraint(
            "account_id",
            "instrument_id",
            name="uq_holdings_account_instrument",
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<HoldingModel(account_id={self.account_id}, "
            f"instrument_id={self.instrument_id}, "
            f"total_units={self.total_units})>"
        )
