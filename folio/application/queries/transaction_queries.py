"""Transaction queries for CQRS read operations.

All transaction queries are account-scoped: a record owned by another
account is reported as not found.

Architecture:
- Queries are immutable (frozen dataclasses)
- NO business logic in queries (just data transfer)
- Handlers perform the reads; queries never change state
"""

from dataclasses import dataclass
from uuid import UUID

from folio.domain.enums import TradeDirection, TransactionStatus

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@dataclass(frozen=True, kw_only=True)
class GetTransaction:
    """Query to retrieve one transaction of the requesting account.

    Attributes:
        account_id: Requesting account.
        transaction_id: Transaction unique identifier.
    """

    account_id: UUID
    transaction_id: UUID


@dataclass(frozen=True, kw_only=True)
class ListTransactions:
    """Query to page through an account's transactions, newest first.

    Attributes:
        account_id: Requesting account.
        page: 1-based page number.
        limit: Page size (1..MAX_PAGE_SIZE).
        direction: Optional direction filter (buy, sell).
        status: Optional status filter.

    Example:
        >>> query = ListTransactions(account_id=account_id, page=2, limit=20)
        >>> result = await handler.handle(query)
    """

    account_id: UUID
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE
    direction: TradeDirection | None = None
    status: TransactionStatus | None = None
