"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention and travel inside
DomainError instances returned in Failure results.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Business rule violations (INSUFFICIENT_*)
- Infrastructure failures surfaced to callers (*_FAILED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    INVALID_QUANTITY = "invalid_quantity"
    INVALID_PAGINATION = "invalid_pagination"
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    ACCOUNT_NOT_FOUND = "account_not_found"
    INSTRUMENT_NOT_FOUND = "instrument_not_found"
    HOLDING_NOT_FOUND = "holding_not_found"
    TRANSACTION_NOT_FOUND = "transaction_not_found"

    # Business rule violations
    INSUFFICIENT_BALANCE = "insufficient_balance"

    # Infrastructure failures (details logged, never exposed)
    TRANSACTION_FAILED = "transaction_failed"
