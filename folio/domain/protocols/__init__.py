"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

Usage:
    from folio.domain.protocols import LedgerStore, LoggerProtocol
"""

from folio.domain.protocols.account_repository import AccountRepository
from folio.domain.protocols.holding_repository import HoldingRepository
from folio.domain.protocols.instrument_repository import InstrumentRepository
from folio.domain.protocols.ledger_store_protocol import LedgerSession, LedgerStore
from folio.domain.protocols.logger_protocol import LoggerProtocol
from folio.domain.protocols.token_generation_protocol import TokenGenerationProtocol
from folio.domain.protocols.transaction_repository import TransactionRepository

__all__ = [
    # Service protocols
    "LoggerProtocol",
    "TokenGenerationProtocol",
    # Repository protocols
    "AccountRepository",
    "HoldingRepository",
    "InstrumentRepository",
    "TransactionRepository",
    # Atomic unit
    "LedgerSession",
    "LedgerStore",
]
