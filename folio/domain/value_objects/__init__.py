"""Domain value objects.

Usage:
    from folio.domain.value_objects import Money
"""

from folio.domain.value_objects.money import (
    CurrencyMismatchError,
    Money,
    quantize_money,
    quantize_price,
)

__all__ = [
    "CurrencyMismatchError",
    "Money",
    "quantize_money",
    "quantize_price",
]
