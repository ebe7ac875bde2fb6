"""Account database model.

One row per user wallet. wallet_balance is kept in minor units
(2 decimal places) and guarded by a CHECK constraint as a last line of
defence against negative balances.
"""

from decimal import Decimal

from sqlalchemy import CheckConstraint, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from folio.infrastructure.persistence.base import BaseMutableModel


class AccountModel(BaseMutableModel):
    """Account model for wallet storage.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when created (from BaseMutableModel)
        updated_at: Timestamp when last updated (from BaseMutableModel)
        wallet_balance: Cash available for purchases
        currency: ISO 4217 currency code
        display_name: Optional label
    """

    __tablename__ = "accounts"

    wallet_balance: Mapped[Decimal] = mapped_column(
        Numeric(precision=19, scale=2),
        nullable=False,
        default=Decimal("0"),
        comment="Cash available for purchases",
    )

    currency: Mapped[str] = mapped_column(
        String(3),
        nullable=False,
        default="INR",
        comment="ISO 4217 currency code",
    )

    display_name: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
        comment="Optional account label",
    )

    __table_args__ = (
        CheckConstraint("wallet_balance >= 0", name="ck_accounts_wallet_non_negative"),
    )

    def __repr__(self) -> str:
        return (
            f"<AccountModel(id={self.id}, "
            f"wallet_balance={self.wallet_balance} {self.currency})>"
        )
