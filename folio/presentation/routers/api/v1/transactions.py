"""Transactions resource handlers.

Handlers:
    create_buy         - Buy units of an instrument (POST /transactions/buys)
    list_transactions  - Page through the caller's transactions
    get_transaction    - Get one of the caller's transactions

All routes act on the account named by the bearer token.
"""

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, Request, status
from fastapi.responses import JSONResponse

from folio.application.commands import ExecuteBuy
from folio.application.commands.handlers.execute_buy_handler import ExecuteBuyHandler
from folio.application.errors import to_application_error
from folio.application.queries import GetTransaction, ListTransactions
from folio.application.queries.handlers.transaction_handlers import (
    GetTransactionHandler,
    ListTransactionsHandler,
)
from folio.application.queries.transaction_queries import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
)
from folio.core.container import (
    get_execute_buy_handler,
    get_get_transaction_handler,
    get_list_transactions_handler,
)
from folio.core.result import Failure
from folio.domain.enums import TradeDirection, TransactionStatus
from folio.presentation.api.middleware.auth_dependencies import AuthenticatedUser
from folio.presentation.api.middleware.trace_middleware import get_trace_id
from folio.presentation.routers.api.v1.errors import ErrorResponseBuilder
from folio.schemas.transaction_schemas import (
    BuyRequest,
    BuyResponse,
    TransactionListResponse,
    TransactionResponse,
)

router = APIRouter(prefix="/transactions", tags=["Transactions"])


@router.post(
    "/buys",
    status_code=status.HTTP_201_CREATED,
    response_model=BuyResponse,
    summary="Buy units of an instrument",
)
async def create_buy(
    request: Request,
    current_user: AuthenticatedUser,
    body: BuyRequest,
    handler: ExecuteBuyHandler = Depends(get_execute_buy_handler),
) -> BuyResponse | JSONResponse:
    """Buy units of an instrument at its current price.

    POST /api/v1/transactions/buys → 201 Created

    Args:
        request: FastAPI request object.
        current_user: Authenticated account (from JWT).
        body: Instrument and units to buy.
        handler: ExecuteBuy handler (injected).

    Returns:
        BuyResponse with transaction ID and new wallet balance.
        JSONResponse with RFC 9457 error on failure.
    """
    command = ExecuteBuy(
        account_id=current_user.account_id,
        instrument_id=body.instrument_id,
        units=body.units,
    )
    result = await handler.handle(command)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=to_application_error(result.error),
            request=request,
            trace_id=get_trace_id() or "",
        )

    return BuyResponse.from_dto(result.value)


@router.get(
    "",
    response_model=TransactionListResponse,
    summary="List transactions",
)
async def list_transactions(
    request: Request,
    current_user: AuthenticatedUser,
    page: Annotated[int, Query(ge=1, description="Page number (1-based)")] = 1,
    limit: Annotated[
        int,
        Query(ge=1, le=MAX_PAGE_SIZE, description="Page size"),
    ] = DEFAULT_PAGE_SIZE,
    direction: Annotated[
        TradeDirection | None,
        Query(description="Filter by direction (buy, sell)"),
    ] = None,
    status_filter: Annotated[
        TransactionStatus | None,
        Query(alias="status", description="Filter by status"),
    ] = None,
    handler: ListTransactionsHandler = Depends(get_list_transactions_handler),
) -> TransactionListResponse | JSONResponse:
    """List the caller's transactions, newest first.

    GET /api/v1/transactions → 200 OK
    """
    query = ListTransactions(
        account_id=current_user.account_id,
        page=page,
        limit=limit,
        direction=direction,
        status=status_filter,
    )
    result = await handler.handle(query)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=to_application_error(result.error),
            request=request,
            trace_id=get_trace_id() or "",
        )

    return TransactionListResponse.from_dto(result.value)


@router.get(
    "/{transaction_id}",
    response_model=TransactionResponse,
    summary="Get transaction",
)
async def get_transaction(
    request: Request,
    current_user: AuthenticatedUser,
    transaction_id: Annotated[UUID, Path(description="Transaction UUID")],
    handler: GetTransactionHandler = Depends(get_get_transaction_handler),
) -> TransactionResponse | JSONResponse:
    """Get one transaction of the caller.

    GET /api/v1/transactions/{transaction_id} → 200 OK

    Returns:
        TransactionResponse, or RFC 9457 404 if missing or owned by another
        account.
    """
    query = GetTransaction(
        account_id=current_user.account_id,
        transaction_id=transaction_id,
    )
    result = await handler.handle(query)

    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(
            error=to_application_error(result.error),
            request=request,
            trace_id=get_trace_id() or "",
        )

    return TransactionResponse.from_dto(result.value)
