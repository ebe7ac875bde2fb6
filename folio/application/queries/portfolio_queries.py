"""Portfolio queries (CQRS read operations).

Pattern:
- Queries are data containers (no logic)
- Handlers fetch, value and return data
- Queries never change state
"""

from dataclasses import dataclass
from uuid import UUID

from folio.application.queries.transaction_queries import DEFAULT_PAGE_SIZE

RECENT_TRANSACTIONS_LIMIT = 5


@dataclass(frozen=True, kw_only=True)
class GetPortfolio:
    """Get holdings, summary figures and recent activity of an account.

    Attributes:
        account_id: Requesting account.
    """

    account_id: UUID


@dataclass(frozen=True, kw_only=True)
class GetHolding:
    """Get one holding with a page of its transaction history.

    Attributes:
        account_id: Requesting account.
        instrument_id: Instrument of the holding.
        page: Page of the history (1-based).
        limit: Transactions per page (1..100).
    """

    account_id: UUID
    instrument_id: UUID
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE
