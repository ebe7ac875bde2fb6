"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. Every call is an event-style
message plus key-value context; implementations add timestamp, level and
trace correlation.

Security:
    - NEVER log tokens, secret keys or full request bodies
    - Log identifiers (account_id, transaction_id), not personal data

Usage:
    from folio.core.container import get_logger

    logger = get_logger()
    logger.info("purchase_completed", transaction_id=str(record.id))

    # Request-scoped logging
    request_logger = logger.bind(trace_id=trace_id, account_id=str(account_id))
    request_logger.warning("purchase_rejected", reason="insufficient_balance")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports the 5 standard levels and immutable context binding.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message (diagnostics, dev only)."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message (normal operational events)."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message (rejected or degraded operations)."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event name or short message.
            error: Optional exception; implementations add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for failures needing intervention."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger is unchanged.

        Example:
            handler_logger = logger.bind(handler="ExecuteBuyHandler")
            handler_logger.info("purchase_started")  # includes handler=...
        """
        ...
