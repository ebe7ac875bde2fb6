"""Database models.

Importing this package registers every table on BaseModel.metadata
(used by Alembic autogenerate and Database.create_all).
"""

from folio.infrastructure.persistence.base import BaseModel, BaseMutableModel
from folio.infrastructure.persistence.models.account import AccountModel
from folio.infrastructure.persistence.models.holding import HoldingModel
from folio.infrastructure.persistence.models.instrument import InstrumentModel
from folio.infrastructure.persistence.models.transaction import TransactionModel

__all__ = [
    "BaseModel",
    "BaseMutableModel",
    "AccountModel",
    "HoldingModel",
    "InstrumentModel",
    "TransactionModel",
]
