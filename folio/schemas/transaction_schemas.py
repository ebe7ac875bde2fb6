"""Transaction request and response schemas.

Pydantic schemas for the transaction endpoints:
- Request schemas (client → API)
- Response schemas (API → client)
- DTO-to-schema conversion methods

Decimal fields serialize as JSON strings so amounts survive the round trip
without float rounding.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from folio.application.dtos import (
    InstrumentSnapshot,
    PurchaseResult,
    TransactionListResult,
    TransactionResult,
)


# =============================================================================
# Request Schemas
# =============================================================================


class BuyRequest(BaseModel):
    """Request to buy units of an instrument at its current price.

    Attributes:
        instrument_id: Instrument to buy.
        units: Units to buy (fractional allowed). Zero or negative values
            pass through and are rejected by the purchase engine as
            INVALID_QUANTITY (400).
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "instrument_id": "01933b8e-6f0a-7d43-9b1e-4c2a5f6e7d80",
                "units": "5",
            }
        }
    )

    instrument_id: UUID = Field(..., description="Instrument to buy")
    units: Decimal = Field(
        ...,
        allow_inf_nan=False,
        description="Units to buy (fractional allowed, must be positive)",
        examples=["5", "0.5"],
    )


# =============================================================================
# Response Schemas
# =============================================================================


class BuyResponse(BaseModel):
    """Completed purchase.

    Attributes:
        transaction_id: ID of the recorded transaction.
        new_wallet_balance: Wallet balance after the debit.
        currency: Wallet currency.
        instrument_id: Instrument bought.
        units: Units bought.
        unit_price: Price per unit paid.
        total_amount: Amount debited.
    """

    transaction_id: UUID = Field(..., description="Recorded transaction ID")
    new_wallet_balance: Decimal = Field(..., description="Balance after the debit")
    currency: str = Field(..., description="ISO 4217 currency code", examples=["INR"])
    instrument_id: UUID = Field(..., description="Instrument bought")
    units: Decimal = Field(..., description="Units bought")
    unit_price: Decimal = Field(..., description="Price per unit paid")
    total_amount: Decimal = Field(..., description="Amount debited")

    @classmethod
    def from_dto(cls, dto: PurchaseResult) -> "BuyResponse":
        """Convert application DTO to response schema."""
        return cls(
            transaction_id=dto.transaction_id,
            new_wallet_balance=dto.new_wallet_balance,
            currency=dto.currency,
            instrument_id=dto.instrument_id,
            units=dto.units,
            unit_price=dto.unit_price,
            total_amount=dto.total_amount,
        )


class InstrumentSummary(BaseModel):
    """Instrument fields embedded in transaction and holding responses."""

    id: UUID = Field(..., description="Instrument ID")
    symbol: str = Field(..., description="Ticker symbol", examples=["TCS"])
    name: str = Field(
        ..., description="Instrument name", examples=["Tata Consultancy Services"]
    )
    category: str = Field(
        ..., description="Instrument category", examples=["stock", "mutual_fund"]
    )
    price_per_unit: Decimal = Field(..., description="Current price per unit")

    @classmethod
    def from_dto(cls, dto: InstrumentSnapshot) -> "InstrumentSummary":
        return cls(
            id=dto.id,
            symbol=dto.symbol,
            name=dto.name,
            category=dto.category,
            price_per_unit=dto.price_per_unit,
        )


class TransactionResponse(BaseModel):
    """Single transaction response.

    Attributes:
        id: Transaction unique identifier.
        instrument: Instrument traded (null if no longer listed).
        direction: buy or sell.
        units: Units traded.
        unit_price: Price per unit at execution.
        total_amount: Amount moved.
        currency: ISO 4217 currency code.
        status: Transaction status.
        created_at: Execution timestamp.
    """

    id: UUID = Field(..., description="Transaction unique identifier")
    instrument: InstrumentSummary | None = Field(None, description="Instrument traded")
    direction: str = Field(..., description="Trade direction", examples=["buy"])
    units: Decimal = Field(..., description="Units traded")
    unit_price: Decimal = Field(..., description="Price per unit at execution")
    total_amount: Decimal = Field(..., description="Amount moved")
    currency: str = Field(..., description="ISO 4217 currency code", examples=["INR"])
    status: str = Field(..., description="Transaction status", examples=["completed"])
    created_at: datetime = Field(..., description="Execution timestamp")

    @classmethod
    def from_dto(cls, dto: TransactionResult) -> "TransactionResponse":
        """Convert application DTO to response schema.

        Args:
            dto: TransactionResult from handler.

        Returns:
            TransactionResponse for API response.
        """
        return cls(
            id=dto.id,
            instrument=(
                InstrumentSummary.from_dto(dto.instrument) if dto.instrument else None
            ),
            direction=dto.direction,
            units=dto.units,
            unit_price=dto.unit_price,
            total_amount=dto.total_amount,
            currency=dto.currency,
            status=dto.status,
            created_at=dto.created_at,
        )


class PaginationInfo(BaseModel):
    """Pagination metadata for list responses."""

    page: int = Field(..., description="Current page (1-based)", examples=[1])
    limit: int = Field(..., description="Page size", examples=[10])
    total: int = Field(..., description="Total matching items", examples=[42])
    pages: int = Field(..., description="Total pages", examples=[5])


class TransactionListResponse(BaseModel):
    """Transaction list response with pagination.

    Attributes:
        transactions: Transactions on this page, newest first.
        pagination: Page metadata.
    """

    transactions: list[TransactionResponse] = Field(
        ..., description="Transactions, newest first"
    )
    pagination: PaginationInfo = Field(..., description="Pagination metadata")

    @classmethod
    def from_dto(cls, dto: TransactionListResult) -> "TransactionListResponse":
        """Convert application DTO to response schema."""
        return cls(
            transactions=[TransactionResponse.from_dto(t) for t in dto.transactions],
            pagination=PaginationInfo(
                page=dto.page,
                limit=dto.limit,
                total=dto.total,
                pages=dto.pages,
            ),
        )
