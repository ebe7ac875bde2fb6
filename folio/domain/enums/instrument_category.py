"""Instrument category enum."""

from enum import Enum


class InstrumentCategory(str, Enum):
    """Kind of tradable product.

    Stored as lowercase string in the database.
    """

    STOCK = "stock"
    MUTUAL_FUND = "mutual_fund"
    ETF = "etf"
    BOND = "bond"
