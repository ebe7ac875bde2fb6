"""Purchase error types.

Failures specific to the buy flow that are not plain validation or
not-found errors. Like every DomainError they are returned inside
Failure(...), never raised.

Usage:
    from folio.domain.errors import InsufficientFundsError
    from folio.core.enums import ErrorCode
    from folio.core.result import Failure

    return Failure(error=InsufficientFundsError(
        code=ErrorCode.INSUFFICIENT_BALANCE,
        message="Insufficient wallet balance",
        required=total.amount,
        available=account.wallet_balance.amount,
    ))
"""

from dataclasses import dataclass
from decimal import Decimal

from folio.core.errors import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class InsufficientFundsError(DomainError):
    """Wallet balance does not cover the purchase total.

    Attributes:
        code: ErrorCode.INSUFFICIENT_BALANCE.
        message: Human-readable message.
        required: Total amount the purchase needs.
        available: Wallet balance at the time of the check.
    """

    required: Decimal
    available: Decimal


@dataclass(frozen=True, slots=True, kw_only=True)
class TransactionFailedError(DomainError):
    """The atomic unit could not be committed.

    The cause is logged by the handler; the message stays generic so no
    storage detail reaches API clients. All writes of the unit were rolled
    back.
    """
