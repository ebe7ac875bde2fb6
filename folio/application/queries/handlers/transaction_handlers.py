"""Transaction query handlers.

Handlers:
    GetTransactionHandler: One transaction, scoped to the requesting account
    ListTransactionsHandler: Paginated history, newest first

Return DTOs (not domain entities) so the domain never leaks into the
presentation layer. Reads take no locks.
"""

import math

from folio.application.dtos import TransactionListResult, TransactionResult
from folio.application.queries.transaction_queries import (
    MAX_PAGE_SIZE,
    GetTransaction,
    ListTransactions,
)
from folio.core.enums import ErrorCode
from folio.core.errors import DomainError, NotFoundError, ValidationError
from folio.core.result import Failure, Result, Success
from folio.domain.protocols import InstrumentRepository, TransactionRepository


class GetTransactionHandler:
    """Handler for GetTransaction query.

    A transaction owned by another account is reported as not found, so
    callers cannot discover foreign IDs.
    """

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        instrument_repo: InstrumentRepository,
    ) -> None:
        self._transaction_repo = transaction_repo
        self._instrument_repo = instrument_repo

    async def handle(
        self, query: GetTransaction
    ) -> Result[TransactionResult, DomainError]:
        """Handle GetTransaction query.

        Returns:
            Success(TransactionResult): Transaction found.
            Failure(NotFoundError): Missing or owned by another account.
        """
        record = await self._transaction_repo.find_by_id(
            query.transaction_id, query.account_id
        )
        if record is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.TRANSACTION_NOT_FOUND,
                    message="Transaction not found",
                    resource_type="Transaction",
                    resource_id=str(query.transaction_id),
                )
            )

        instrument = await self._instrument_repo.find_by_id(record.instrument_id)
        return Success(value=TransactionResult.from_entity(record, instrument))


class ListTransactionsHandler:
    """Handler for ListTransactions query."""

    def __init__(
        self,
        transaction_repo: TransactionRepository,
        instrument_repo: InstrumentRepository,
    ) -> None:
        self._transaction_repo = transaction_repo
        self._instrument_repo = instrument_repo

    async def handle(
        self, query: ListTransactions
    ) -> Result[TransactionListResult, DomainError]:
        """Handle ListTransactions query.

        Returns:
            Success(TransactionListResult): Requested page (possibly empty).
            Failure(ValidationError): page < 1 or limit outside 1..100.
        """
        pagination_error = validate_pagination(query.page, query.limit)
        if pagination_error is not None:
            return Failure(error=pagination_error)

        total = await self._transaction_repo.count_by_account(
            query.account_id,
            direction=query.direction,
            status=query.status,
        )
        records = await self._transaction_repo.list_by_account(
            query.account_id,
            direction=query.direction,
            status=query.status,
            limit=query.limit,
            offset=(query.page - 1) * query.limit,
        )
        instruments = await self._instrument_repo.find_by_ids(
            [record.instrument_id for record in records]
        )

        return Success(
            value=TransactionListResult(
                transactions=[
                    TransactionResult.from_entity(
                        record, instruments.get(record.instrument_id)
                    )
                    for record in records
                ],
                page=query.page,
                limit=query.limit,
                total=total,
                pages=math.ceil(total / query.limit),
            )
        )


def validate_pagination(page: int, limit: int) -> ValidationError | None:
    """Check a 1-based page number and a page size in 1..MAX_PAGE_SIZE."""
    if page < 1:
        return ValidationError(
            code=ErrorCode.INVALID_PAGINATION,
            message="Page must be >= 1",
            field="page",
        )
    if not 1 <= limit <= MAX_PAGE_SIZE:
        return ValidationError(
            code=ErrorCode.INVALID_PAGINATION,
            message=f"Limit must be between 1 and {MAX_PAGE_SIZE}",
            field="limit",
        )
    return None
