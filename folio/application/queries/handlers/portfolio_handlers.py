"""Portfolio query handlers.

Handlers:
    GetPortfolioHandler: Holdings valued at current prices, summary, recent
        transactions
    GetHoldingHandler: One holding with a page of its transaction history

Valuation uses the instrument's current price_per_unit; percentages are
rounded to 2 decimal places and are 0 when nothing is invested.
"""

import math
from decimal import Decimal

from folio.application.dtos import (
    HoldingDetailResult,
    HoldingResult,
    PortfolioResult,
    PortfolioSummary,
    TransactionResult,
)
from folio.application.queries.handlers.transaction_handlers import (
    validate_pagination,
)
from folio.application.queries.portfolio_queries import (
    RECENT_TRANSACTIONS_LIMIT,
    GetHolding,
    GetPortfolio,
)
from folio.core.enums import ErrorCode
from folio.core.errors import DomainError, NotFoundError
from folio.core.result import Failure, Result, Success
from folio.domain.protocols import (
    AccountRepository,
    HoldingRepository,
    InstrumentRepository,
    TransactionRepository,
)
from folio.domain.value_objects.money import quantize_money


class GetPortfolioHandler:
    """Handler for GetPortfolio query.

    Dependencies (injected via constructor):
        - AccountRepository: Wallet balance
        - HoldingRepository: Positions
        - InstrumentRepository: Current prices
        - TransactionRepository: Recent activity
    """

    def __init__(
        self,
        account_repo: AccountRepository,
        holding_repo: HoldingRepository,
        instrument_repo: InstrumentRepository,
        transaction_repo: TransactionRepository,
    ) -> None:
        self._account_repo = account_repo
        self._holding_repo = holding_repo
        self._instrument_repo = instrument_repo
        self._transaction_repo = transaction_repo

    async def handle(self, query: GetPortfolio) -> Result[PortfolioResult, DomainError]:
        """Handle GetPortfolio query.

        Returns:
            Success(PortfolioResult): Portfolio of the account.
            Failure(NotFoundError): Account does not exist.
        """
        account = await self._account_repo.find_by_id(query.account_id)
        if account is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ACCOUNT_NOT_FOUND,
                    message="Account not found",
                    resource_type="Account",
                    resource_id=str(query.account_id),
                )
            )

        holdings = await self._holding_repo.list_by_account(account.id)
        recent = await self._transaction_repo.list_by_account(
            account.id, limit=RECENT_TRANSACTIONS_LIMIT
        )
        instruments = await self._instrument_repo.find_by_ids(
            [h.instrument_id for h in holdings] + [r.instrument_id for r in recent]
        )

        holding_results = [
            HoldingResult.from_entity(holding, instruments[holding.instrument_id])
            for holding in holdings
        ]

        total_invested = sum(
            (h.total_invested for h in holding_results), Decimal("0")
        )
        total_current_value = sum(
            (h.current_value for h in holding_results), Decimal("0")
        )
        total_returns = total_current_value - total_invested
        wallet_balance = account.wallet_balance.amount

        summary = PortfolioSummary(
            total_invested=total_invested,
            total_current_value=total_current_value,
            total_returns=total_returns,
            return_percentage=_percentage(total_returns, total_invested),
            wallet_balance=wallet_balance,
            total_value=total_current_value + wallet_balance,
            currency=account.currency,
        )

        return Success(
            value=PortfolioResult(
                holdings=holding_results,
                summary=summary,
                recent_transactions=[
                    TransactionResult.from_entity(r, instruments.get(r.instrument_id))
                    for r in recent
                ],
            )
        )


class GetHoldingHandler:
    """Handler for GetHolding query."""

    def __init__(
        self,
        holding_repo: HoldingRepository,
        instrument_repo: InstrumentRepository,
        transaction_repo: TransactionRepository,
    ) -> None:
        self._holding_repo = holding_repo
        self._instrument_repo = instrument_repo
        self._transaction_repo = transaction_repo

    async def handle(self, query: GetHolding) -> Result[HoldingDetailResult, DomainError]:
        """Handle GetHolding query.

        Returns:
            Success(HoldingDetailResult): Holding and one page of its
                transactions, newest first.
            Failure(ValidationError): page < 1 or limit outside 1..100.
            Failure(NotFoundError): No units held in the instrument.
        """
        pagination_error = validate_pagination(query.page, query.limit)
        if pagination_error is not None:
            return Failure(error=pagination_error)

        holding = await self._holding_repo.find_by_account_and_instrument(
            query.account_id, query.instrument_id
        )
        instrument = await self._instrument_repo.find_by_id(query.instrument_id)

        if holding is None or instrument is None or not holding.has_position():
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.HOLDING_NOT_FOUND,
                    message="Holding not found",
                    resource_type="Holding",
                    resource_id=str(query.instrument_id),
                )
            )

        total = await self._transaction_repo.count_by_account(
            query.account_id, instrument_id=query.instrument_id
        )
        records = await self._transaction_repo.list_by_account(
            query.account_id,
            instrument_id=query.instrument_id,
            limit=query.limit,
            offset=(query.page - 1) * query.limit,
        )

        return Success(
            value=HoldingDetailResult(
                holding=HoldingResult.from_entity(holding, instrument),
                transactions=[
                    TransactionResult.from_entity(record, instrument)
                    for record in records
                ],
                page=query.page,
                limit=query.limit,
                total=total,
                pages=math.ceil(total / query.limit),
            )
        )


def _percentage(part: Decimal, whole: Decimal) -> Decimal:
    if whole == 0:
        return Decimal("0")
    return quantize_money(part / whole * 100)
