"""SQLAlchemy repository adapters."""

from folio.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)
from folio.infrastructure.persistence.repositories.holding_repository import (
    HoldingRepository,
)
from folio.infrastructure.persistence.repositories.instrument_repository import (
    InstrumentRepository,
)
from folio.infrastructure.persistence.repositories.transaction_repository import (
    TransactionRepository,
)

__all__ = [
    "AccountRepository",
    "HoldingRepository",
    "InstrumentRepository",
    "TransactionRepository",
]
