"""Portfolio response schemas.

Holdings are valued at each instrument's current price; the summary adds
the wallet balance to give the account's total value.
"""

from datetime import datetime
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, Field

from folio.application.dtos import (
    HoldingDetailResult,
    HoldingResult,
    PortfolioResult,
    PortfolioSummary,
)
from folio.schemas.transaction_schemas import (
    InstrumentSummary,
    PaginationInfo,
    TransactionResponse,
)


class HoldingResponse(BaseModel):
    """Single holding response.

    Attributes:
        id: Holding unique identifier.
        instrument: Instrument held.
        total_units: Units held.
        average_price: Weighted average cost per unit.
        total_invested: Cost basis.
        current_value: total_units x current price.
        returns: current_value - total_invested.
        return_percentage: returns / total_invested x 100.
        currency: ISO 4217 currency code.
        first_acquired_at: First purchase timestamp.
        updated_at: Last change timestamp.
    """

    id: UUID = Field(..., description="Holding unique identifier")
    instrument: InstrumentSummary = Field(..., description="Instrument held")
    total_units: Decimal = Field(..., description="Units held")
    average_price: Decimal = Field(..., description="Weighted average cost per unit")
    total_invested: Decimal = Field(..., description="Cost basis")
    current_value: Decimal = Field(..., description="Value at current price")
    returns: Decimal = Field(..., description="Unrealized gain/loss")
    return_percentage: Decimal = Field(..., description="Unrealized gain/loss percent")
    currency: str = Field(..., description="ISO 4217 currency code", examples=["INR"])
    first_acquired_at: datetime = Field(..., description="First purchase timestamp")
    updated_at: datetime = Field(..., description="Last change timestamp")

    @classmethod
    def from_dto(cls, dto: HoldingResult) -> "HoldingResponse":
        """Convert application DTO to response schema."""
        return cls(
            id=dto.id,
            instrument=InstrumentSummary.from_dto(dto.instrument),
            total_units=dto.total_units,
            average_price=dto.average_price,
            total_invested=dto.total_invested,
            current_value=dto.current_value,
            returns=dto.returns,
            return_percentage=dto.return_percentage,
            currency=dto.currency,
            first_acquired_at=dto.first_acquired_at,
            updated_at=dto.updated_at,
        )


class PortfolioSummaryResponse(BaseModel):
    """Aggregate portfolio figures."""

    total_invested: Decimal = Field(..., description="Sum of cost bases")
    total_current_value: Decimal = Field(..., description="Sum of holding values")
    total_returns: Decimal = Field(..., description="Unrealized gain/loss")
    return_percentage: Decimal = Field(..., description="Gain/loss percent")
    wallet_balance: Decimal = Field(..., description="Cash in the wallet")
    total_value: Decimal = Field(..., description="Holdings value plus wallet")
    currency: str = Field(..., description="ISO 4217 currency code", examples=["INR"])

    @classmethod
    def from_dto(cls, dto: PortfolioSummary) -> "PortfolioSummaryResponse":
        return cls(
            total_invested=dto.total_invested,
            total_current_value=dto.total_current_value,
            total_returns=dto.total_returns,
            return_percentage=dto.return_percentage,
            wallet_balance=dto.wallet_balance,
            total_value=dto.total_value,
            currency=dto.currency,
        )


class PortfolioResponse(BaseModel):
    """Portfolio overview.

    Attributes:
        holdings: Open positions.
        summary: Aggregate figures.
        recent_transactions: Latest transactions, newest first.
    """

    holdings: list[HoldingResponse] = Field(..., description="Open positions")
    summary: PortfolioSummaryResponse = Field(..., description="Aggregate figures")
    recent_transactions: list[TransactionResponse] = Field(
        ..., description="Latest transactions, newest first"
    )

    @classmethod
    def from_dto(cls, dto: PortfolioResult) -> "PortfolioResponse":
        """Convert application DTO to response schema."""
        return cls(
            holdings=[HoldingResponse.from_dto(h) for h in dto.holdings],
            summary=PortfolioSummaryResponse.from_dto(dto.summary),
            recent_transactions=[
                TransactionResponse.from_dto(t) for t in dto.recent_transactions
            ],
        )


class HoldingDetailResponse(BaseModel):
    """One holding with its transaction history."""

    holding: HoldingResponse = Field(..., description="Holding")
    transactions: list[TransactionResponse] = Field(
        ..., description="Transactions in this instrument, newest first"
    )
    pagination: PaginationInfo = Field(..., description="Pagination metadata")

    @classmethod
    def from_dto(cls, dto: HoldingDetailResult) -> "HoldingDetailResponse":
        return cls(
            holding=HoldingResponse.from_dto(dto.holding),
            transactions=[TransactionResponse.from_dto(t) for t in dto.transactions],
            pagination=PaginationInfo(
                page=dto.page, limit=dto.limit, total=dto.total, pages=dto.pages
            ),
        )
