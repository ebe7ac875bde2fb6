"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from folio.domain.entities.account import Account
from folio.domain.entities.holding import Holding
from folio.domain.entities.instrument import Instrument
from folio.domain.entities.transaction_record import TransactionRecord

__all__ = [
    "Account",
    "Holding",
    "Instrument",
    "TransactionRecord",
]
