"""Application layer error types.

ApplicationError wraps a DomainError (or stands alone) with a coarse
ApplicationErrorCode the presentation layer maps to an HTTP status.

Exports:
    ApplicationErrorCode: Application-level error code enum
    ApplicationError: Application layer error dataclass
    to_application_error: Map a handler's DomainError to ApplicationError
"""

from dataclasses import dataclass
from enum import Enum

from folio.core.enums import ErrorCode
from folio.core.errors import DomainError


class ApplicationErrorCode(Enum):
    """Application-level error codes."""

    COMMAND_VALIDATION_FAILED = "command_validation_failed"
    QUERY_VALIDATION_FAILED = "query_validation_failed"
    COMMAND_EXECUTION_FAILED = "command_execution_failed"
    QUERY_FAILED = "query_failed"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    BUSINESS_RULE_VIOLATION = "business_rule_violation"


@dataclass(frozen=True, slots=True, kw_only=True)
class ApplicationError:
    """Application layer error.

    Attributes:
        code: Application error code.
        message: Human-readable error message.
        domain_error: Original domain error, if any.
        details: Additional context as key-value pairs.

    Examples:
        >>> error = ApplicationError(
        ...     code=ApplicationErrorCode.NOT_FOUND,
        ...     message="Instrument not found",
        ...     domain_error=not_found_error,
        ... )
    """

    code: ApplicationErrorCode
    message: str
    domain_error: DomainError | None = None
    details: dict[str, str] | None = None


_DOMAIN_TO_APPLICATION: dict[ErrorCode, ApplicationErrorCode] = {
    ErrorCode.INVALID_QUANTITY: ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
    ErrorCode.VALIDATION_FAILED: ApplicationErrorCode.COMMAND_VALIDATION_FAILED,
    ErrorCode.INVALID_PAGINATION: ApplicationErrorCode.QUERY_VALIDATION_FAILED,
    ErrorCode.ACCOUNT_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
    ErrorCode.INSTRUMENT_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
    ErrorCode.HOLDING_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
    ErrorCode.TRANSACTION_NOT_FOUND: ApplicationErrorCode.NOT_FOUND,
    ErrorCode.INSUFFICIENT_BALANCE: ApplicationErrorCode.BUSINESS_RULE_VIOLATION,
    ErrorCode.TRANSACTION_FAILED: ApplicationErrorCode.COMMAND_EXECUTION_FAILED,
}


def to_application_error(error: DomainError) -> ApplicationError:
    """Wrap a DomainError returned by a handler.

    Args:
        error: Domain error from a Failure result.

    Returns:
        ApplicationError carrying the domain error and its message.
        Unmapped codes become COMMAND_EXECUTION_FAILED.
    """
    return ApplicationError(
        code=_DOMAIN_TO_APPLICATION.get(
            error.code, ApplicationErrorCode.COMMAND_EXECUTION_FAILED
        ),
        message=error.message,
        domain_error=error,
        details=error.details,
    )
