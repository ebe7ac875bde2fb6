"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL / SQLite)
- Ledger store (atomic units over the ledger tables)
- Token validation (JWT)
- Logging (structlog console adapter)

Request-scoped: get_db_session() yields one session per request.
"""

from collections.abc import AsyncGenerator
from functools import lru_cache
from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from folio.core.config import settings
from folio.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from folio.domain.protocols.ledger_store_protocol import LedgerStore
    from folio.domain.protocols.logger_protocol import LoggerProtocol
    from folio.domain.protocols.token_generation_protocol import (
        TokenGenerationProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_ledger_store() -> "LedgerStore":
    """Get ledger store singleton (app-scoped).

    Each call to transaction() on the store opens its own session, so the
    store itself is safe to share across requests.

    Returns:
        SqlAlchemyLedgerStore bound to the application database.
    """
    from folio.infrastructure.persistence.ledger_store import SqlAlchemyLedgerStore

    return SqlAlchemyLedgerStore(get_database())


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton (app-scoped).

    Returns:
        JWTService configured from settings.
    """
    from folio.infrastructure.security import JWTService

    return JWTService(
        secret_key=settings.secret_key,
        expiration_minutes=settings.access_token_expire_minutes,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON lines)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from folio.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


# ============================================================================
# Request-Scoped Dependencies
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success, rolls back on exception, always closes.

    Yields:
        Database session for request duration.
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
