"""Trade handler dependency factories.

- ExecuteBuyHandler: built on the app-scoped ledger store (it opens its
  own atomic unit per call)
- Query handlers: request-scoped, sharing the request's session

Routes receive handlers through FastAPI Depends, so tests replace them with
app.dependency_overrides.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from folio.core.container.infrastructure import (
    get_db_session,
    get_ledger_store,
    get_logger,
)

if TYPE_CHECKING:
    from folio.application.commands.handlers.execute_buy_handler import (
        ExecuteBuyHandler,
    )
    from folio.application.queries.handlers.portfolio_handlers import (
        GetHoldingHandler,
        GetPortfolioHandler,
    )
    from folio.application.queries.handlers.transaction_handlers import (
        GetTransactionHandler,
        ListTransactionsHandler,
    )


# ============================================================================
# Command Handler Factories
# ============================================================================


def get_execute_buy_handler() -> "ExecuteBuyHandler":
    """Get ExecuteBuy command handler.

    Returns:
        ExecuteBuyHandler with the ledger store and logger singletons.
    """
    from folio.application.commands.handlers.execute_buy_handler import (
        ExecuteBuyHandler,
    )

    return ExecuteBuyHandler(
        ledger_store=get_ledger_store(),
        logger=get_logger(),
    )


# ============================================================================
# Query Handler Factories (Request-Scoped)
# ============================================================================


async def get_list_transactions_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "ListTransactionsHandler":
    """Get ListTransactions query handler (request-scoped)."""
    from folio.application.queries.handlers.transaction_handlers import (
        ListTransactionsHandler,
    )
    from folio.infrastructure.persistence.repositories import (
        InstrumentRepository,
        TransactionRepository,
    )

    return ListTransactionsHandler(
        transaction_repo=TransactionRepository(session=session),
        instrument_repo=InstrumentRepository(session=session),
    )


async def get_get_transaction_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetTransactionHandler":
    """Get GetTransaction query handler (request-scoped)."""
    from folio.application.queries.handlers.transaction_handlers import (
        GetTransactionHandler,
    )
    from folio.infrastructure.persistence.repositories import (
        InstrumentRepository,
        TransactionRepository,
    )

    return GetTransactionHandler(
        transaction_repo=TransactionRepository(session=session),
        instrument_repo=InstrumentRepository(session=session),
    )


async def get_get_portfolio_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetPortfolioHandler":
    """Get GetPortfolio query handler (request-scoped)."""
    from folio.application.queries.handlers.portfolio_handlers import (
        GetPortfolioHandler,
    )
    from folio.infrastructure.persistence.repositories import (
        AccountRepository,
        HoldingRepository,
        InstrumentRepository,
        TransactionRepository,
    )

    return GetPortfolioHandler(
        account_repo=AccountRepository(session=session),
        holding_repo=HoldingRepository(session=session),
        instrument_repo=InstrumentRepository(session=session),
        transaction_repo=TransactionRepository(session=session),
    )


async def get_get_holding_handler(
    session: AsyncSession = Depends(get_db_session),
) -> "GetHoldingHandler":
    """Get GetHolding query handler (request-scoped)."""
    from folio.application.queries.handlers.portfolio_handlers import (
        GetHoldingHandler,
    )
    from folio.infrastructure.persistence.repositories import (
        HoldingRepository,
        InstrumentRepository,
        TransactionRepository,
    )

    return GetHoldingHandler(
        holding_repo=HoldingRepository(session=session),
        instrument_repo=InstrumentRepository(session=session),
        transaction_repo=TransactionRepository(session=session),
    )
