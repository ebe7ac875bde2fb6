"""Data Transfer Objects (DTOs) for application layer.

DTOs are result dataclasses returned by command and query handlers. They
are NOT API schemas (Pydantic models live in folio.schemas).
"""

from folio.application.dtos.trade_dtos import (
    HoldingDetailResult,
    HoldingResult,
    InstrumentSnapshot,
    PortfolioResult,
    PortfolioSummary,
    PurchaseResult,
    TransactionListResult,
    TransactionResult,
)

__all__ = [
    "HoldingDetailResult",
    "HoldingResult",
    "InstrumentSnapshot",
    "PortfolioResult",
    "PortfolioSummary",
    "PurchaseResult",
    "TransactionListResult",
    "TransactionResult",
]
