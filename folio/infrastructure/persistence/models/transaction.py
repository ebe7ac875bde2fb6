"""Transaction record database model.

Append-only: inherits BaseModel (no updated_at) and the repository never
issues UPDATE or DELETE against this table.
"""

from decimal import Decimal
from uuid import UUID

from sqlalchemy import ForeignKey, Index, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from folio.infrastructure.persistence.base import BaseModel


class TransactionModel(BaseModel):
    """Executed trade.

    Indexes:
        - idx_transactions_account_created: History listing, newest first
        - idx_transactions_account_instrument: Per-holding history
    """

    __tablename__ = "transactions"

    account_id: Mapped[UUID] = mapped_column(
        ForeignKey("accounts.id", ondelete="CASCADE"),
        nullable=False,
        comment="FK to accounts table",
    )

    instrument_id: Mapped[UUID] = mapped_column(
        ForeignKey("instruments.id", ondelete="RESTRICT"),
        nullable=False,
        comment="FK to instruments table",
    )

    direction: Mapped[str] = mapped_column(
        String(8),
        nullable=False,
        comment="Trade direction (buy, sell)",
    )

    units: Mapped[Decimal] = mapped_column(
        Numeric(precision=28, scale=8),
        nullable=False,
        comment="Units traded",
    )

    unit_price: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=4),
        nullable=False,
        comment="Price per unit at execution",
    )

    total_amount: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=2),
        nullable=False,
        comment="units x unit_price in minor units",
    )

    currency: Mapped[str] = mapped_column(
        String(3),
        nullable=False,
        default="INR",
        comment="ISO 4217 currency code",
    )

    status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        index=True,
        comment="Lifecycle status (pending, completed, failed, cancelled)",
    )

    __table_args__ = (
        Index("idx_transactions_account_created", "account_id", "created_at"),
        Index("idx_transactions_account_instrument", "account_id", "instrument_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<TransactionModel(id={self.id}, direction={self.direction!r}, "
            f"units={self.units}, total_amount={self.total_amount})>"
        )
