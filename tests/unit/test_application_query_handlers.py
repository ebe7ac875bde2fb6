"""Unit tests for transaction and portfolio query handlers.

Tests cover:
- GetTransaction: found, not found (including other accounts)
- ListTransactions: pagination math, filters passed through, validation
- GetPortfolio: valuation and summary figures, empty portfolio, no account
- GetHolding: found with a page of history, paging math, not found cases
"""

from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from folio.application.queries import (
    GetHolding,
    GetPortfolio,
    GetTransaction,
    ListTransactions,
)
from folio.application.queries.handlers.portfolio_handlers import (
    GetHoldingHandler,
    GetPortfolioHandler,
)
from folio.application.queries.handlers.transaction_handlers import (
    GetTransactionHandler,
    ListTransactionsHandler,
)
from folio.core.enums import ErrorCode
from folio.core.result import Failure, Success
from folio.domain.entities import Holding, TransactionRecord
from folio.domain.enums import TradeDirection, TransactionStatus
from tests.conftest import inr, make_account, make_instrument


def _record(account_id, instrument, units="5") -> TransactionRecord:
    return TransactionRecord.buy(
        account_id=account_id,
        instrument_id=instrument.id,
        units=Decimal(units),
        unit_price=instrument.price_per_unit,
    )


def _holding(account_id, instrument_id, units="8", invested="800.00") -> Holding:
    holding = Holding.open(
        account_id=account_id,
        instrument_id=instrument_id,
        units=Decimal(units),
        unit_price=inr(invested).per_unit(Decimal(units)),
        total_amount=inr(invested),
    )
    return holding


# ============================================================================
# Transaction Queries
# ============================================================================


@pytest.mark.unit
class TestGetTransactionHandler:
    """Test GetTransactionHandler."""

    async def test_returns_transaction_with_instrument(self):
        account_id = uuid7()
        instrument = make_instrument()
        record = _record(account_id, instrument)
        transaction_repo = AsyncMock()
        transaction_repo.find_by_id.return_value = record
        instrument_repo = AsyncMock()
        instrument_repo.find_by_id.return_value = instrument
        handler = GetTransactionHandler(transaction_repo, instrument_repo)

        result = await handler.handle(
            GetTransaction(account_id=account_id, transaction_id=record.id)
        )

        assert isinstance(result, Success)
        assert result.value.id == record.id
        assert result.value.instrument.symbol == "TCS"
        assert result.value.total_amount == Decimal("500.00")
        assert result.value.direction == "buy"
        transaction_repo.find_by_id.assert_awaited_once_with(record.id, account_id)

    async def test_not_found(self):
        transaction_repo = AsyncMock()
        transaction_repo.find_by_id.return_value = None
        handler = GetTransactionHandler(transaction_repo, AsyncMock())

        result = await handler.handle(
            GetTransaction(account_id=uuid7(), transaction_id=uuid7())
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TRANSACTION_NOT_FOUND


@pytest.mark.unit
class TestListTransactionsHandler:
    """Test ListTransactionsHandler."""

    @pytest.fixture
    def repos(self):
        account_id = uuid7()
        instrument = make_instrument()
        records = [_record(account_id, instrument) for _ in range(3)]
        transaction_repo = AsyncMock()
        transaction_repo.count_by_account.return_value = 23
        transaction_repo.list_by_account.return_value = records
        instrument_repo = AsyncMock()
        instrument_repo.find_by_ids.return_value = {instrument.id: instrument}
        return account_id, transaction_repo, instrument_repo

    async def test_returns_page_with_metadata(self, repos):
        account_id, transaction_repo, instrument_repo = repos
        handler = ListTransactionsHandler(transaction_repo, instrument_repo)

        result = await handler.handle(
            ListTransactions(account_id=account_id, page=3, limit=10)
        )

        assert isinstance(result, Success)
        assert result.value.total == 23
        assert result.value.pages == 3
        assert result.value.page == 3
        assert len(result.value.transactions) == 3
        assert transaction_repo.list_by_account.await_args.kwargs["offset"] == 20

    async def test_passes_filters(self, repos):
        account_id, transaction_repo, instrument_repo = repos
        handler = ListTransactionsHandler(transaction_repo, instrument_repo)

        await handler.handle(
            ListTransactions(
                account_id=account_id,
                direction=TradeDirection.BUY,
                status=TransactionStatus.COMPLETED,
            )
        )

        kwargs = transaction_repo.count_by_account.await_args.kwargs
        assert kwargs["direction"] == TradeDirection.BUY
        assert kwargs["status"] == TransactionStatus.COMPLETED

    async def test_empty_history_has_zero_pages(self):
        transaction_repo = AsyncMock()
        transaction_repo.count_by_account.return_value = 0
        transaction_repo.list_by_account.return_value = []
        instrument_repo = AsyncMock()
        instrument_repo.find_by_ids.return_value = {}
        handler = ListTransactionsHandler(transaction_repo, instrument_repo)

        result = await handler.handle(ListTransactions(account_id=uuid7()))

        assert isinstance(result, Success)
        assert result.value.transactions == []
        assert result.value.pages == 0

    @pytest.mark.parametrize(
        ("page", "limit", "field"),
        [(0, 10, "page"), (1, 0, "limit"), (1, 101, "limit")],
    )
    async def test_invalid_pagination(self, page, limit, field):
        transaction_repo = AsyncMock()
        handler = ListTransactionsHandler(transaction_repo, AsyncMock())

        result = await handler.handle(
            ListTransactions(account_id=uuid7(), page=page, limit=limit)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_PAGINATION
        assert result.error.field == field
        transaction_repo.count_by_account.assert_not_awaited()


# ============================================================================
# Portfolio Queries
# ============================================================================


@pytest.mark.unit
class TestGetPortfolioHandler:
    """Test GetPortfolioHandler."""

    def _handler(self, account, holdings, instruments, recent=None):
        account_repo = AsyncMock()
        account_repo.find_by_id.return_value = account
        holding_repo = AsyncMock()
        holding_repo.list_by_account.return_value = holdings
        instrument_repo = AsyncMock()
        instrument_repo.find_by_ids.return_value = {i.id: i for i in instruments}
        transaction_repo = AsyncMock()
        transaction_repo.list_by_account.return_value = recent or []
        return GetPortfolioHandler(
            account_repo, holding_repo, instrument_repo, transaction_repo
        )

    async def test_values_holdings_at_current_price(self):
        account = make_account("200.00")
        tcs = make_instrument("TCS", "110.00")
        infy = make_instrument("INFY", "40.00")
        holdings = [
            _holding(account.id, tcs.id, "8", "800.00"),
            _holding(account.id, infy.id, "10", "500.00"),
        ]
        handler = self._handler(account, holdings, [tcs, infy])

        result = await handler.handle(GetPortfolio(account_id=account.id))

        assert isinstance(result, Success)
        summary = result.value.summary
        assert summary.total_invested == Decimal("1300.00")
        assert summary.total_current_value == Decimal("1280.00")
        assert summary.total_returns == Decimal("-20.00")
        assert summary.return_percentage == Decimal("-1.54")
        assert summary.wallet_balance == Decimal("200.00")
        assert summary.total_value == Decimal("1480.00")
        assert summary.currency == "INR"

        first = result.value.holdings[0]
        assert first.current_value == Decimal("880.00")
        assert first.returns == Decimal("80.00")
        assert first.return_percentage == Decimal("10.00")

    async def test_empty_portfolio(self):
        account = make_account("1000.00")
        handler = self._handler(account, [], [])

        result = await handler.handle(GetPortfolio(account_id=account.id))

        assert isinstance(result, Success)
        assert result.value.holdings == []
        assert result.value.summary.return_percentage == Decimal("0")
        assert result.value.summary.total_value == Decimal("1000.00")

    async def test_includes_recent_transactions(self):
        account = make_account()
        tcs = make_instrument()
        recent = [_record(account.id, tcs, "1")]
        handler = self._handler(account, [], [tcs], recent=recent)

        result = await handler.handle(GetPortfolio(account_id=account.id))

        assert [t.id for t in result.value.recent_transactions] == [recent[0].id]
        assert result.value.recent_transactions[0].instrument.symbol == "TCS"

    async def test_account_not_found(self):
        handler = self._handler(None, [], [])

        result = await handler.handle(GetPortfolio(account_id=uuid7()))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ACCOUNT_NOT_FOUND


@pytest.mark.unit
class TestGetHoldingHandler:
    """Test GetHoldingHandler."""

    async def test_returns_holding_and_history(self):
        account_id = uuid7()
        tcs = make_instrument("TCS", "100.00")
        holding = _holding(account_id, tcs.id, "5", "500.00")
        records = [_record(account_id, tcs, "5")]
        holding_repo = AsyncMock()
        holding_repo.find_by_account_and_instrument.return_value = holding
        instrument_repo = AsyncMock()
        instrument_repo.find_by_id.return_value = tcs
        transaction_repo = AsyncMock()
        transaction_repo.list_by_account.return_value = records
        transaction_repo.count_by_account.return_value = 1
        handler = GetHoldingHandler(holding_repo, instrument_repo, transaction_repo)

        result = await handler.handle(
            GetHolding(account_id=account_id, instrument_id=tcs.id)
        )

        assert isinstance(result, Success)
        assert result.value.holding.total_units == Decimal("5")
        assert len(result.value.transactions) == 1
        assert (result.value.page, result.value.limit) == (1, 10)
        assert (result.value.total, result.value.pages) == (1, 1)
        kwargs = transaction_repo.list_by_account.await_args.kwargs
        assert kwargs["instrument_id"] == tcs.id
        assert (kwargs["limit"], kwargs["offset"]) == (10, 0)

    async def test_history_is_paged(self):
        account_id = uuid7()
        tcs = make_instrument("TCS", "100.00")
        holding_repo = AsyncMock()
        holding_repo.find_by_account_and_instrument.return_value = _holding(
            account_id, tcs.id, "25", "2500.00"
        )
        instrument_repo = AsyncMock()
        instrument_repo.find_by_id.return_value = tcs
        transaction_repo = AsyncMock()
        transaction_repo.list_by_account.return_value = [
            _record(account_id, tcs, "1") for _ in range(5)
        ]
        transaction_repo.count_by_account.return_value = 25
        handler = GetHoldingHandler(holding_repo, instrument_repo, transaction_repo)

        result = await handler.handle(
            GetHolding(account_id=account_id, instrument_id=tcs.id, page=3, limit=10)
        )

        assert isinstance(result, Success)
        assert result.value.total == 25
        assert result.value.pages == 3
        assert transaction_repo.count_by_account.await_args.kwargs == {
            "instrument_id": tcs.id
        }
        kwargs = transaction_repo.list_by_account.await_args.kwargs
        assert (kwargs["limit"], kwargs["offset"]) == (10, 20)

    @pytest.mark.parametrize(
        ("page", "limit", "field"),
        [(0, 10, "page"), (1, 0, "limit"), (1, 101, "limit")],
    )
    async def test_invalid_pagination(self, page, limit, field):
        holding_repo = AsyncMock()
        handler = GetHoldingHandler(holding_repo, AsyncMock(), AsyncMock())

        result = await handler.handle(
            GetHolding(
                account_id=uuid7(), instrument_id=uuid7(), page=page, limit=limit
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_PAGINATION
        assert result.error.field == field
        holding_repo.find_by_account_and_instrument.assert_not_awaited()

    async def test_no_holding_is_not_found(self):
        holding_repo = AsyncMock()
        holding_repo.find_by_account_and_instrument.return_value = None
        instrument_repo = AsyncMock()
        instrument_repo.find_by_id.return_value = make_instrument()
        handler = GetHoldingHandler(holding_repo, instrument_repo, AsyncMock())

        result = await handler.handle(
            GetHolding(account_id=uuid7(), instrument_id=uuid7())
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.HOLDING_NOT_FOUND
