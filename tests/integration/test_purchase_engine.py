"""Integration tests for purchases against a real SQLite ledger.

Tests cover:
- Buy scenarios end to end (balance, record, holding)
- Weighted-average cost basis across buys, including a rounding case
- Rejections leave every table unchanged
- Faults inside the unit roll back every write
- Concurrent buys on one account never overspend

Architecture:
- ExecuteBuyHandler over SqlAlchemyLedgerStore
- Fresh SQLite database file per test (database fixture)
"""

import asyncio
import random
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from sqlalchemy import select
from uuid_extensions import uuid7

from folio.application.commands import ExecuteBuy
from folio.application.commands.handlers.execute_buy_handler import ExecuteBuyHandler
from folio.core.enums import ErrorCode
from folio.core.result import Failure, Success
from folio.domain.errors import InsufficientFundsError
from folio.domain.value_objects.money import quantize_money, quantize_price
from folio.infrastructure.persistence.models import (
    AccountModel,
    HoldingModel,
    InstrumentModel,
    TransactionModel,
)
from folio.infrastructure.persistence.repositories import (
    AccountRepository,
    HoldingRepository,
    TransactionRepository,
)
from tests.conftest import insert_account, insert_instrument


# =============================================================================
# Test Helpers
# =============================================================================


async def _snapshot(database) -> dict[str, list[dict]]:
    """All rows of all ledger tables, ordered by ID."""
    snapshot = {}
    async with database.get_session() as session:
        for model in (AccountModel, InstrumentModel, HoldingModel, TransactionModel):
            result = await session.execute(select(model).order_by(model.id))
            snapshot[model.__tablename__] = [
                row.to_dict() for row in result.scalars().all()
            ]
    return snapshot


async def _balance(database, account_id) -> Decimal:
    async with database.get_session() as session:
        account = await AccountRepository(session).find_by_id(account_id)
    return account.wallet_balance.amount


async def _holding(database, account_id, instrument_id):
    async with database.get_session() as session:
        return await HoldingRepository(session).find_by_account_and_instrument(
            account_id, instrument_id
        )


async def _transaction_count(database, account_id) -> int:
    async with database.get_session() as session:
        return await TransactionRepository(session).count_by_account(account_id)


@pytest.fixture
def handler(seeded_ledger, silent_logger):
    return ExecuteBuyHandler(ledger_store=seeded_ledger.store, logger=silent_logger)


def _buy(seeded_ledger, units: str, instrument_id=None) -> ExecuteBuy:
    return ExecuteBuy(
        account_id=seeded_ledger.account_id,
        instrument_id=instrument_id or seeded_ledger.instrument_id,
        units=Decimal(units),
    )


# =============================================================================
# Scenarios
# =============================================================================


@pytest.mark.integration
class TestPurchaseScenarios:
    """End-to-end buy scenarios."""

    async def test_first_buy(self, handler, seeded_ledger):
        result = await handler.handle(_buy(seeded_ledger, "5"))

        assert isinstance(result, Success)
        assert result.value.new_wallet_balance == Decimal("500.00")

        db = seeded_ledger.database
        assert await _balance(db, seeded_ledger.account_id) == Decimal("500.00")
        holding = await _holding(
            db, seeded_ledger.account_id, seeded_ledger.instrument_id
        )
        assert holding.total_units == Decimal("5")
        assert holding.average_price.amount == Decimal("100.0000")
        assert holding.total_invested.amount == Decimal("500.00")

        async with db.get_session() as session:
            record = await TransactionRepository(session).find_by_id(
                result.value.transaction_id, seeded_ledger.account_id
            )
        assert record is not None
        assert record.units == Decimal("5")
        assert record.total_amount.amount == Decimal("500.00")

    async def test_second_buy_accumulates(self, handler, seeded_ledger):
        first = await handler.handle(_buy(seeded_ledger, "5"))
        second = await handler.handle(_buy(seeded_ledger, "3"))

        assert isinstance(first, Success)
        assert isinstance(second, Success)
        assert second.value.new_wallet_balance == Decimal("200.00")

        db = seeded_ledger.database
        holding = await _holding(
            db, seeded_ledger.account_id, seeded_ledger.instrument_id
        )
        assert holding.total_units == Decimal("8")
        assert holding.total_invested.amount == Decimal("800.00")
        assert holding.average_price.amount == Decimal("100.0000")
        assert await _transaction_count(db, seeded_ledger.account_id) == 2

    async def test_average_price_after_price_change(self, handler, seeded_ledger):
        db = seeded_ledger.database
        await handler.handle(_buy(seeded_ledger, "1"))

        async with db.get_session() as session:
            model = await session.get(InstrumentModel, seeded_ledger.instrument_id)
            model.price_per_unit = Decimal("100.01")

        await handler.handle(_buy(seeded_ledger, "2"))

        holding = await _holding(
            db, seeded_ledger.account_id, seeded_ledger.instrument_id
        )
        assert holding.total_units == Decimal("3")
        assert holding.total_invested.amount == Decimal("300.02")
        assert holding.average_price.amount == Decimal("100.0067")
        assert await _balance(db, seeded_ledger.account_id) == Decimal("699.98")

    async def test_fractional_units(self, handler, seeded_ledger):
        result = await handler.handle(_buy(seeded_ledger, "0.12345678"))

        assert isinstance(result, Success)
        assert result.value.total_amount == Decimal("12.35")

        holding = await _holding(
            seeded_ledger.database,
            seeded_ledger.account_id,
            seeded_ledger.instrument_id,
        )
        assert holding.total_units == Decimal("0.12345678")

    async def test_spending_entire_balance(self, handler, seeded_ledger):
        result = await handler.handle(_buy(seeded_ledger, "10"))

        assert isinstance(result, Success)
        assert await _balance(
            seeded_ledger.database, seeded_ledger.account_id
        ) == Decimal("0.00")


# =============================================================================
# Rejections
# =============================================================================


@pytest.mark.integration
class TestPurchaseRejections:
    """Rejected purchases leave every table unchanged."""

    async def test_insufficient_funds(self, database, ledger_store, silent_logger):
        account_id = await insert_account(database, "50.00")
        instrument_id = await insert_instrument(database, "TCS", "100.00")
        handler = ExecuteBuyHandler(ledger_store=ledger_store, logger=silent_logger)
        before = await _snapshot(database)

        result = await handler.handle(
            ExecuteBuy(
                account_id=account_id,
                instrument_id=instrument_id,
                units=Decimal("1"),
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, InsufficientFundsError)
        assert await _snapshot(database) == before

    @pytest.mark.parametrize("units", ["0", "-2", "1.123456789"])
    async def test_invalid_units(self, handler, seeded_ledger, units):
        before = await _snapshot(seeded_ledger.database)

        result = await handler.handle(_buy(seeded_ledger, units))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_QUANTITY
        assert await _snapshot(seeded_ledger.database) == before

    async def test_inactive_instrument(self, handler, seeded_ledger):
        before = await _snapshot(seeded_ledger.database)

        result = await handler.handle(
            _buy(seeded_ledger, "1", seeded_ledger.inactive_instrument_id)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INSTRUMENT_NOT_FOUND
        assert await _snapshot(seeded_ledger.database) == before

    async def test_unknown_account(self, seeded_ledger, silent_logger):
        handler = ExecuteBuyHandler(
            ledger_store=seeded_ledger.store, logger=silent_logger
        )

        result = await handler.handle(
            ExecuteBuy(
                account_id=uuid7(),
                instrument_id=seeded_ledger.instrument_id,
                units=Decimal("1"),
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ACCOUNT_NOT_FOUND


# =============================================================================
# Atomicity
# =============================================================================


@pytest.mark.integration
class TestPurchaseAtomicity:
    """A fault at any step rolls back all writes."""

    async def test_failed_transaction_insert_rolls_back_debit(
        self, handler, seeded_ledger, monkeypatch
    ):
        before = await _snapshot(seeded_ledger.database)
        monkeypatch.setattr(
            TransactionRepository,
            "add",
            AsyncMock(side_effect=RuntimeError("insert failed")),
        )

        result = await handler.handle(_buy(seeded_ledger, "5"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TRANSACTION_FAILED
        assert await _snapshot(seeded_ledger.database) == before

    async def test_failed_holding_save_rolls_back_everything(
        self, handler, seeded_ledger, monkeypatch
    ):
        before = await _snapshot(seeded_ledger.database)
        monkeypatch.setattr(
            HoldingRepository,
            "save",
            AsyncMock(side_effect=RuntimeError("holding write failed")),
        )

        result = await handler.handle(_buy(seeded_ledger, "5"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TRANSACTION_FAILED
        assert await _snapshot(seeded_ledger.database) == before

    async def test_store_usable_after_failure(
        self, handler, seeded_ledger, monkeypatch
    ):
        with monkeypatch.context() as patch:
            patch.setattr(
                TransactionRepository,
                "add",
                AsyncMock(side_effect=RuntimeError("insert failed")),
            )
            await handler.handle(_buy(seeded_ledger, "5"))

        result = await handler.handle(_buy(seeded_ledger, "5"))

        assert isinstance(result, Success)
        assert result.value.new_wallet_balance == Decimal("500.00")


# =============================================================================
# Invariants over many purchases
# =============================================================================


@pytest.mark.integration
class TestPurchaseSequenceInvariants:
    """Long seeded runs of random fractional buys across two instruments."""

    PURCHASES = 80

    @pytest.mark.parametrize("seed", [7, 2024])
    async def test_balance_and_cost_basis_never_drift(
        self, handler, seeded_ledger, seed
    ):
        db = seeded_ledger.database
        odd_price_id = await insert_instrument(db, "ODDLOT", "33.33")
        prices = {
            seeded_ledger.instrument_id: Decimal("100.00"),
            odd_price_id: Decimal("33.33"),
        }
        rng = random.Random(seed)

        balance = Decimal("1000.00")
        units_bought = {instrument_id: Decimal("0") for instrument_id in prices}
        invested = {instrument_id: Decimal("0") for instrument_id in prices}
        successes = 0

        for _ in range(self.PURCHASES):
            instrument_id = rng.choice(list(prices))
            units = Decimal(rng.randint(1, 200_000_000)) / Decimal(10**8)

            result = await handler.handle(
                _buy(seeded_ledger, str(units), instrument_id=instrument_id)
            )

            if isinstance(result, Failure):
                assert result.error.code in {
                    ErrorCode.INSUFFICIENT_BALANCE,
                    ErrorCode.INVALID_QUANTITY,
                }
                continue

            successes += 1
            total = result.value.total_amount
            assert total == quantize_money(units * prices[instrument_id])
            balance -= total
            units_bought[instrument_id] += units
            invested[instrument_id] += total

            assert result.value.new_wallet_balance >= 0
            assert result.value.new_wallet_balance == balance

        assert successes > 0
        assert await _balance(db, seeded_ledger.account_id) == balance
        assert balance == Decimal("1000.00") - sum(invested.values())
        assert await _transaction_count(db, seeded_ledger.account_id) == successes

        for instrument_id in prices:
            holding = await _holding(db, seeded_ledger.account_id, instrument_id)
            if units_bought[instrument_id] == 0:
                assert holding is None
                continue
            assert holding.total_units == units_bought[instrument_id]
            assert holding.total_invested.amount == invested[instrument_id]
            assert holding.average_price.amount == quantize_price(
                invested[instrument_id] / units_bought[instrument_id]
            )


# =============================================================================
# Concurrency
# =============================================================================


@pytest.mark.integration
class TestConcurrentPurchases:
    """Concurrent buys on one account are serialized."""

    async def test_concurrent_buys_never_overspend(self, handler, seeded_ledger):
        results = await asyncio.gather(
            *(handler.handle(_buy(seeded_ledger, "4")) for _ in range(3))
        )

        successes = [r for r in results if isinstance(r, Success)]
        failures = [r for r in results if isinstance(r, Failure)]
        assert len(successes) == 2
        assert len(failures) == 1
        assert failures[0].error.code == ErrorCode.INSUFFICIENT_BALANCE

        db = seeded_ledger.database
        assert await _balance(db, seeded_ledger.account_id) == Decimal("200.00")
        holding = await _holding(
            db, seeded_ledger.account_id, seeded_ledger.instrument_id
        )
        assert holding.total_units == Decimal("8")
        assert holding.total_invested.amount == Decimal("800.00")
        assert await _transaction_count(db, seeded_ledger.account_id) == 2

    async def test_concurrent_first_buys_create_one_holding(
        self, handler, seeded_ledger
    ):
        await asyncio.gather(
            *(handler.handle(_buy(seeded_ledger, "1")) for _ in range(4))
        )

        async with seeded_ledger.database.get_session() as session:
            holdings = await HoldingRepository(session).list_by_account(
                seeded_ledger.account_id
            )

        assert len(holdings) == 1
        assert holdings[0].total_units == Decimal("4")
        assert holdings[0].total_invested.amount == Decimal("400.00")
