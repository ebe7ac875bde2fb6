"""End-to-end API tests for the purchase flow.

Real handlers over a per-test SQLite database: the buy goes through the
ledger store, then the portfolio and transaction endpoints read the
committed rows back.
"""

from decimal import Decimal

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from folio.application.commands.handlers.execute_buy_handler import ExecuteBuyHandler
from folio.core.container import (
    get_db_session,
    get_execute_buy_handler,
    get_token_service,
)
from folio.main import app


@pytest_asyncio.fixture
async def api(seeded_ledger, silent_logger):
    """AsyncClient wired to the seeded database, authenticated as its account."""
    database = seeded_ledger.database

    async def _session():
        async with database.get_session() as session:
            yield session

    app.dependency_overrides[get_db_session] = _session
    app.dependency_overrides[get_execute_buy_handler] = lambda: ExecuteBuyHandler(
        ledger_store=seeded_ledger.store, logger=silent_logger
    )

    token = get_token_service().generate_access_token(seeded_ledger.account_id)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"Authorization": f"Bearer {token}"},
    ) as client:
        yield client


@pytest.mark.api
@pytest.mark.integration
class TestPurchaseFlow:
    """Buy, then read the ledger back through the API."""

    async def test_buy_then_portfolio(self, api, seeded_ledger):
        first = await api.post(
            "/api/v1/transactions/buys",
            json={"instrument_id": str(seeded_ledger.instrument_id), "units": "1"},
        )
        second = await api.post(
            "/api/v1/transactions/buys",
            json={"instrument_id": str(seeded_ledger.instrument_id), "units": "2"},
        )

        assert first.status_code == 201
        assert second.status_code == 201
        assert Decimal(second.json()["new_wallet_balance"]) == Decimal("700.00")

        portfolio = (await api.get("/api/v1/portfolio")).json()
        assert len(portfolio["holdings"]) == 1
        holding = portfolio["holdings"][0]
        assert Decimal(holding["total_units"]) == Decimal("3")
        assert Decimal(holding["total_invested"]) == Decimal("300.00")
        assert Decimal(holding["average_price"]) == Decimal("100.00")
        assert Decimal(portfolio["summary"]["wallet_balance"]) == Decimal("700.00")
        assert len(portfolio["recent_transactions"]) == 2

    async def test_transaction_history(self, api, seeded_ledger):
        created = await api.post(
            "/api/v1/transactions/buys",
            json={"instrument_id": str(seeded_ledger.instrument_id), "units": "0.5"},
        )
        transaction_id = created.json()["transaction_id"]

        listing = (await api.get("/api/v1/transactions")).json()
        assert listing["pagination"]["total"] == 1
        assert listing["transactions"][0]["id"] == transaction_id

        detail = await api.get(f"/api/v1/transactions/{transaction_id}")
        assert detail.status_code == 200
        assert Decimal(detail.json()["total_amount"]) == Decimal("50.00")

        holding = await api.get(
            f"/api/v1/portfolio/holdings/{seeded_ledger.instrument_id}"
        )
        assert holding.status_code == 200
        assert len(holding.json()["transactions"]) == 1
        assert holding.json()["pagination"]["total"] == 1

    async def test_rejected_buy_changes_nothing(self, api, seeded_ledger):
        response = await api.post(
            "/api/v1/transactions/buys",
            json={"instrument_id": str(seeded_ledger.instrument_id), "units": "11"},
        )

        assert response.status_code == 400
        assert response.json()["type"].endswith("/errors/insufficient_balance")

        portfolio = (await api.get("/api/v1/portfolio")).json()
        assert portfolio["holdings"] == []
        assert Decimal(portfolio["summary"]["wallet_balance"]) == Decimal("1000.00")

        listing = (await api.get("/api/v1/transactions")).json()
        assert listing["pagination"]["total"] == 0

    async def test_inactive_instrument_is_404(self, api, seeded_ledger):
        response = await api.post(
            "/api/v1/transactions/buys",
            json={
                "instrument_id": str(seeded_ledger.inactive_instrument_id),
                "units": "1",
            },
        )

        assert response.status_code == 404
