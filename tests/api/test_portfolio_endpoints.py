"""API tests for portfolio endpoints.

- GET /api/v1/portfolio
- GET /api/v1/portfolio/holdings/{instrument_id}
"""

from datetime import UTC, datetime
from decimal import Decimal
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from folio.application.dtos import (
    HoldingDetailResult,
    HoldingResult,
    InstrumentSnapshot,
    PortfolioResult,
    PortfolioSummary,
)
from folio.core.container import get_get_holding_handler, get_get_portfolio_handler
from folio.core.enums import ErrorCode
from folio.core.errors import NotFoundError
from folio.core.result import Failure, Success
from folio.main import app

ACQUIRED_AT = datetime(2026, 3, 2, 10, 30, tzinfo=UTC)


def _holding_result(instrument_id=None) -> HoldingResult:
    return HoldingResult(
        id=uuid7(),
        instrument=InstrumentSnapshot(
            id=instrument_id or uuid7(),
            symbol="RELIANCE",
            name="Reliance Industries",
            category="stock",
            price_per_unit=Decimal("110.00"),
        ),
        total_units=Decimal("3"),
        average_price=Decimal("100.0067"),
        total_invested=Decimal("300.02"),
        current_value=Decimal("330.00"),
        returns=Decimal("29.98"),
        return_percentage=Decimal("9.99"),
        currency="INR",
        first_acquired_at=ACQUIRED_AT,
        updated_at=ACQUIRED_AT,
    )


def _handler_returning(result) -> AsyncMock:
    handler = AsyncMock()
    handler.handle.return_value = result
    return handler


@pytest.mark.api
class TestGetPortfolio:
    """Tests for GET /api/v1/portfolio."""

    def test_returns_holdings_and_summary(self, client, auth_headers, account_id):
        handler = _handler_returning(
            Success(
                value=PortfolioResult(
                    holdings=[_holding_result()],
                    summary=PortfolioSummary(
                        total_invested=Decimal("300.02"),
                        total_current_value=Decimal("330.00"),
                        total_returns=Decimal("29.98"),
                        return_percentage=Decimal("9.99"),
                        wallet_balance=Decimal("699.98"),
                        total_value=Decimal("1029.98"),
                        currency="INR",
                    ),
                    recent_transactions=[],
                )
            )
        )
        app.dependency_overrides[get_get_portfolio_handler] = lambda: handler

        response = client.get("/api/v1/portfolio", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert len(data["holdings"]) == 1
        holding = data["holdings"][0]
        assert holding["instrument"]["symbol"] == "RELIANCE"
        assert Decimal(holding["average_price"]) == Decimal("100.0067")
        assert Decimal(holding["total_invested"]) == Decimal("300.02")
        assert Decimal(data["summary"]["wallet_balance"]) == Decimal("699.98")
        assert data["recent_transactions"] == []

        query = handler.handle.call_args.args[0]
        assert query.account_id == account_id

    def test_unknown_account_is_404(self, client, auth_headers):
        handler = _handler_returning(
            Failure(
                error=NotFoundError(
                    code=ErrorCode.ACCOUNT_NOT_FOUND,
                    message="Account not found",
                    resource_type="Account",
                    resource_id="x",
                )
            )
        )
        app.dependency_overrides[get_get_portfolio_handler] = lambda: handler

        response = client.get("/api/v1/portfolio", headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["type"].endswith("/errors/account_not_found")

    def test_requires_authentication(self, client):
        response = client.get("/api/v1/portfolio")

        assert response.status_code == 401


@pytest.mark.api
class TestGetHolding:
    """Tests for GET /api/v1/portfolio/holdings/{instrument_id}."""

    def test_returns_holding_with_transactions(self, client, auth_headers):
        instrument_id = uuid7()
        handler = _handler_returning(
            Success(
                value=HoldingDetailResult(
                    holding=_holding_result(instrument_id),
                    transactions=[],
                    page=2,
                    limit=5,
                    total=7,
                    pages=2,
                )
            )
        )
        app.dependency_overrides[get_get_holding_handler] = lambda: handler

        response = client.get(
            f"/api/v1/portfolio/holdings/{instrument_id}?page=2&limit=5",
            headers=auth_headers,
        )

        assert response.status_code == 200
        data = response.json()
        assert data["holding"]["instrument"]["id"] == str(instrument_id)
        assert data["transactions"] == []
        assert data["pagination"] == {"page": 2, "limit": 5, "total": 7, "pages": 2}
        query = handler.handle.call_args.args[0]
        assert query.instrument_id == instrument_id
        assert (query.page, query.limit) == (2, 5)

    @pytest.mark.parametrize("params", ["page=0", "limit=0", "limit=101"])
    def test_out_of_range_paging_is_422(self, client, auth_headers, params):
        handler = _handler_returning(None)
        app.dependency_overrides[get_get_holding_handler] = lambda: handler

        response = client.get(
            f"/api/v1/portfolio/holdings/{uuid7()}?{params}", headers=auth_headers
        )

        assert response.status_code == 422
        handler.handle.assert_not_called()

    def test_no_position_is_404(self, client, auth_headers):
        handler = _handler_returning(
            Failure(
                error=NotFoundError(
                    code=ErrorCode.HOLDING_NOT_FOUND,
                    message="No holding for this instrument",
                    resource_type="Holding",
                    resource_id="x",
                )
            )
        )
        app.dependency_overrides[get_get_holding_handler] = lambda: handler

        response = client.get(
            f"/api/v1/portfolio/holdings/{uuid7()}", headers=auth_headers
        )

        assert response.status_code == 404
        assert response.json()["type"].endswith("/errors/holding_not_found")
