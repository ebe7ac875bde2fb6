"""Portfolio resource handlers.

Handlers:
    get_portfolio  - Holdings, summary and recent activity
    get_holding    - One holding with a page of its transaction history
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, Request
from fastapi.responses import JSONResponse

from folio.application.errors import to_application_error
from folio.application.queries import GetHolding, GetPortfolio
from folio.application.queries.handlers.portfolio_handlers import (
    GetHoldingHandler,
    GetPortfolioHandler,
)
from folio.application.queries.transaction_queries import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
)
from folio.core.container import get_get_holding_handler, get_get_portfolio_handler
from folio.core.result import Failure
from folio.presentation.api.middleware.auth_dependencies import AuthenticatedUser
from folio.presentation.api.middleware.trace_middleware import get_trace_id
from folio.presentation.routers.api.v1.errors import ErrorResponseBuilder
from folio.schemas.portfolio_schemas import HoldingDetailResponse, PortfolioResponse

router = APIRouter(prefix="/portfolio", tags=["Portfolio"])


@router.get("", response_model=PortfolioResponse, summary="Get portfolio")
async def get_portfolio(
    request: Request,
    current_user: AuthenticatedUser,
    handler: GetPortfolioHandler = Depends(get_get_portfolio_handler),
) -> PortfolioResponse | JSONResponse:
    """Get the caller's holdings valued at current prices.

    GET /api/v1/portfolio → 200 OK

    Returns:
        PortfolioResponse, or RFC 9457 404 if the account does not exist.
    """
    result = await handler.handle(GetPortfolio(account_id=current_user.account_id))

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=to_application_error(result.error),
            request=request,
            trace_id=get_trace_id() or "",
        )

    return PortfolioResponse.from_dto(result.value)


@router.get(
    "/holdings/{instrument_id}",
    response_model=HoldingDetailResponse,
    summary="Get holding",
)
async def get_holding(
    request: Request,
    current_user: AuthenticatedUser,
    instrument_id: Annotated[UUID, Path(description="Instrument UUID")],
    page: Annotated[int, Query(ge=1, description="Page number (1-based)")] = 1,
    limit: Annotated[
        int,
        Query(ge=1, le=MAX_PAGE_SIZE, description="Page size"),
    ] = DEFAULT_PAGE_SIZE,
    handler: GetHoldingHandler = Depends(get_get_holding_handler),
) -> HoldingDetailResponse | JSONResponse:
    """Get the caller's holding in one instrument.

    GET /api/v1/portfolio/holdings/{instrument_id}?page=1&limit=20 → 200 OK
    """
    query = GetHolding(
        account_id=current_user.account_id,
        instrument_id=instrument_id,
        page=page,
        limit=limit,
    )
    result = await handler.handle(query)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=to_application_error(result.error),
            request=request,
            trace_id=get_trace_id() or "",
        )

    return HoldingDetailResponse.from_dto(result.value)
