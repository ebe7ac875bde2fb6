"""Queries (CQRS read side)."""

from folio.application.queries.portfolio_queries import GetHolding, GetPortfolio
from folio.application.queries.transaction_queries import (
    GetTransaction,
    ListTransactions,
)

__all__ = [
    "GetHolding",
    "GetPortfolio",
    "GetTransaction",
    "ListTransactions",
]
