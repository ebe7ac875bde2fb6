"""Trade direction enum."""

from enum import Enum


class TradeDirection(str, Enum):
    """Side of a trade.

    Only BUY is executed by the purchase flow. SELL exists so recorded
    history and filters can represent both sides.
    """

    BUY = "buy"
    SELL = "sell"
