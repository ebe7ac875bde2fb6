"""API v1 routers.

Resources:
    /api/v1/transactions   - Buys and transaction history
    /api/v1/portfolio      - Holdings, valuation and per-holding history

The prefix is applied when the router is mounted in main.py.
"""

from fastapi import APIRouter

from folio.presentation.routers.api.v1 import portfolio, transactions

v1_router = APIRouter()
v1_router.include_router(transactions.router)
v1_router.include_router(portfolio.router)

__all__ = [
    "v1_router",
]
