"""Container module - Centralized dependency injection.

Re-exports all factory functions:

    from folio.core.container import get_logger, get_execute_buy_handler

Modules:
- infrastructure: Core services (database, ledger store, JWT, logging)
- handlers: Command and query handler factories
"""

# Infrastructure services
from folio.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_ledger_store,
    get_logger,
    get_token_service,
)

# Handlers
from folio.core.container.handlers import (
    get_execute_buy_handler,
    get_get_holding_handler,
    get_get_portfolio_handler,
    get_get_transaction_handler,
    get_list_transactions_handler,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_ledger_store",
    "get_logger",
    "get_token_service",
    # Handlers
    "get_execute_buy_handler",
    "get_get_holding_handler",
    "get_get_portfolio_handler",
    "get_get_transaction_handler",
    "get_list_transactions_handler",
]
