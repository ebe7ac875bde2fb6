"""Domain errors package.

Usage:
    from folio.domain.errors import InsufficientFundsError, TransactionFailedError
"""

from folio.domain.errors.purchase_error import (
    InsufficientFundsError,
    TransactionFailedError,
)

__all__ = [
    "InsufficientFundsError",
    "TransactionFailedError",
]
