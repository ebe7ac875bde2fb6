"""Domain enums.

Usage:
    from folio.domain.enums import TradeDirection, TransactionStatus
"""

from folio.domain.enums.instrument_category import InstrumentCategory
from folio.domain.enums.trade_direction import TradeDirection
from folio.domain.enums.transaction_status import TransactionStatus

__all__ = [
    "InstrumentCategory",
    "TradeDirection",
    "TransactionStatus",
]
