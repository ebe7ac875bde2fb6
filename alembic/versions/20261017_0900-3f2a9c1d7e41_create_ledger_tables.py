"""create_ledger_tables

Revision ID: 3f2a9c1d7e41
Revises:
Create Date: 2026-10-17 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7e41"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps(mutable: bool = True) -> list[sa.Column]:
    columns = [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]
    if mutable:
        columns.append(
            sa.Column(
                "updated_at",
                sa.DateTime(timezone=True),
                server_default=sa.func.now(),
                nullable=False,
            )
        )
    return columns


def upgrade() -> None:
    """Create accounts, instruments, holdings and transactions tables."""
    op.create_table(
        "accounts",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column(
            "wallet_balance",
            sa.Numeric(precision=19, scale=2),
            nullable=False,
            comment="Cash available for purchases",
        ),
        sa.Column(
            "currency",
            sa.String(length=3),
            nullable=False,
            comment="ISO 4217 currency code",
        ),
        sa.Column(
            "display_name",
            sa.String(length=100),
            nullable=True,
            comment="Optional account label",
        ),
        sa.CheckConstraint(
            "wallet_balance >= 0", name="ck_accounts_wallet_non_negative"
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "instruments",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column(
            "symbol",
            sa.String(length=32),
            nullable=False,
            comment="Unique uppercase symbol (TCS, NIFTY50ETF, etc.)",
        ),
        sa.Column("name", sa.String(length=255), nullable=False, comment="Display name"),
        sa.Column(
            "category",
            sa.String(length=32),
            nullable=False,
            comment="Instrument category (stock, mutual_fund, etf, bond)",
        ),
        sa.Column(
            "price_per_unit",
            sa.Numeric(precision=19, scale=4),
            nullable=False,
            comment="Current price of one unit",
        ),
        sa.Column(
            "currency",
            sa.String(length=3),
            nullable=False,
            comment="ISO 4217 currency code",
        ),
        sa.Column(
            "is_active",
            sa.Boolean(),
            nullable=False,
            comment="Only active instruments can be bought",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_instruments_symbol", "instruments", ["symbol"], unique=True)
    op.create_index("ix_instruments_category", "instruments", ["category"])

    op.create_table(
        "holdings",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(),
        sa.Column("account_id", sa.Uuid(), nullable=False, comment="FK to accounts table"),
        sa.Column(
            "instrument_id", sa.Uuid(), nullable=False, comment="FK to instruments table"
        ),
        sa.Column(
            "total_units",
            sa.Numeric(precision=28, scale=8),
            nullable=False,
            comment="Units held",
        ),
        sa.Column(
            "average_price",
            sa.Numeric(precision=19, scale=4),
            nullable=False,
            comment="Weighted average cost per unit",
        ),
        sa.Column(
            "total_invested",
            sa.Numeric(precision=19, scale=2),
            nullable=False,
            comment="Sum of purchase totals",
        ),
        sa.Column(
            "currency",
            sa.String(length=3),
            nullable=False,
            comment="ISO 4217 currency code",
        ),
        sa.Column(
            "first_acquired_at",
            sa.DateTime(timezone=True),
            nullable=False,
            comment="Time of first purchase (never updated)",
        ),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["instrument_id"], ["instruments.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "account_id", "instrument_id", name="uq_holdings_account_instrument"
        ),
    )
    op.create_index("ix_holdings_account_id", "holdings", ["account_id"])

    op.create_table(
        "transactions",
        sa.Column("id", sa.Uuid(), nullable=False),
        *_timestamps(mutable=False),
        sa.Column("account_id", sa.Uuid(), nullable=False, comment="FK to accounts table"),
        sa.Column(
            "instrument_id", sa.Uuid(), nullable=False, comment="FK to instruments table"
        ),
        sa.Column(
            "direction",
            sa.String(length=8),
            nullable=False,
            comment="Trade direction (buy, sell)",
        ),
        sa.Column(
            "units",
            sa.Numeric(precision=28, scale=8),
            nullable=False,
            comment="Units traded",
        ),
        sa.Column(
            "unit_price",
            sa.Numeric(precision=19, scale=4),
            nullable=False,
            comment="Price per unit at execution",
        ),
        sa.Column(
            "total_amount",
            sa.Numeric(precision=19, scale=2),
            nullable=False,
            comment="units x unit_price in minor units",
        ),
        sa.Column(
            "currency",
            sa.String(length=3),
            nullable=False,
            comment="ISO 4217 currency code",
        ),
        sa.Column(
            "status",
            sa.String(length=16),
            nullable=False,
            comment="Lifecycle status (pending, completed, failed, cancelled)",
        ),
        sa.ForeignKeyConstraint(["account_id"], ["accounts.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["instrument_id"], ["instruments.id"], ondelete="RESTRICT"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_transactions_status", "transactions", ["status"])
    op.create_index(
        "idx_transactions_account_created", "transactions", ["account_id", "created_at"]
    )
    op.create_index(
        "idx_transactions_account_instrument",
        "transactions",
        ["account_id", "instrument_id"],
    )


def downgrade() -> None:
    """Drop ledger tables (reverse dependency order)."""
    op.drop_index("idx_transactions_account_instrument", table_name="transactions")
    op.drop_index("idx_transactions_account_created", table_name="transactions")
    op.drop_index("ix_transactions_status", table_name="transactions")
    op.drop_table("transactions")
    op.drop_index("ix_holdings_account_id", table_name="holdings")
    op.drop_table("holdings")
    op.drop_index("ix_instruments_category", table_name="instruments")
    op.drop_index("ix_instruments_symbol", table_name="instruments")
    op.drop_table("instruments")
    op.drop_table("accounts")
