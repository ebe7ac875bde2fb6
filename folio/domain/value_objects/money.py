"""Immutable Money value object with Decimal precision.

Prices, balances and cost bases are all Money. Floats never enter the
arithmetic, and every stored amount is quantized with an explicit rounding
rule so repeated recomputation is exactly reproducible.

Rounding rules:
    - Monetary amounts (balances, trade totals, amounts invested) are
      quantized to minor units (2 decimal places), ROUND_HALF_EVEN.
    - Per-unit averages (average cost) keep 4 decimal places, ROUND_HALF_EVEN.
    - Unit quantities allow at most 8 decimal places (fractional units).

Error Handling:
    Arithmetic between different currencies raises CurrencyMismatchError
    (a ValueError subclass), matching Python's convention for
    type-incompatible operations.

Usage:
    from decimal import Decimal
    from folio.domain.value_objects import Money

    balance = Money(Decimal("1000.00"), "INR")
    price = Money(Decimal("100.00"), "INR")
    cost = price.times_units(Decimal("5"))  # Money(500.00, INR)
    remaining = balance - cost              # Money(500.00, INR)
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Self

MONEY_QUANTUM = Decimal("0.01")
"""Minor-unit precision for stored monetary amounts."""

PRICE_QUANTUM = Decimal("0.0001")
"""Precision for derived per-unit prices (weighted average cost)."""

UNITS_MAX_PLACES = 8
"""Maximum decimal places accepted for unit quantities."""


# ISO 4217 currency codes accepted for wallets and instrument prices
VALID_CURRENCIES: frozenset[str] = frozenset(
    {
        "INR",  # Indian Rupee
        "USD",  # US Dollar
        "EUR",  # Euro
        "GBP",  # British Pound
        "JPY",  # Japanese Yen
        "SGD",  # Singapore Dollar
        "AUD",  # Australian Dollar
        "CAD",  # Canadian Dollar
        "CHF",  # Swiss Franc
    }
)


class CurrencyMismatchError(ValueError):
    """Raised when attempting operations on different currencies."""

    def __init__(self, currency1: str, currency2: str) -> None:
        """Initialize currency mismatch error.

        Args:
            currency1: First currency code.
            currency2: Second currency code.
        """
        super().__init__(
            f"Cannot perform operation between {currency1} and {currency2}"
        )
        self.currency1 = currency1
        self.currency2 = currency2


def validate_currency(code: str) -> str:
    """Validate and normalize currency code.

    Args:
        code: Currency code (case-insensitive).

    Returns:
        Uppercase ISO 4217 currency code.

    Raises:
        ValueError: If code is not a supported ISO 4217 currency.
    """
    if not code or not isinstance(code, str):
        raise ValueError("Currency code cannot be empty")

    normalized = code.upper().strip()

    if len(normalized) != 3:
        raise ValueError(f"Currency code must be 3 characters: {code}")

    if normalized not in VALID_CURRENCIES:
        raise ValueError(f"Invalid currency code: {code}")

    return normalized


def quantize_money(amount: Decimal) -> Decimal:
    """Round an amount to minor units (banker's rounding).

    Example:
        >>> quantize_money(Decimal("10.005"))
        Decimal('10.00')
        >>> quantize_money(Decimal("10.015"))
        Decimal('10.02')
    """
    return amount.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_EVEN)


def quantize_price(amount: Decimal) -> Decimal:
    """Round a per-unit price to 4 decimal places (banker's rounding)."""
    return amount.quantize(PRICE_QUANTUM, rounding=ROUND_HALF_EVEN)


def has_valid_unit_precision(units: Decimal) -> bool:
    """Check a unit quantity is finite with at most UNITS_MAX_PLACES decimals.

    Args:
        units: Quantity to check.

    Returns:
        True if the quantity can be stored without rounding.
    """
    if not units.is_finite():
        return False
    exponent = units.normalize().as_tuple().exponent
    return isinstance(exponent, int) and -exponent <= UNITS_MAX_PLACES


@dataclass(frozen=True)
class Money:
    """Immutable monetary value with currency.

    Attributes:
        amount: Decimal value (positive, negative, or zero).
        currency: ISO 4217 currency code (e.g., "INR", "USD").

    Immutability:
        Frozen dataclass; all arithmetic returns new Money instances.

    Currency Safety:
        Operations between different currencies raise CurrencyMismatchError.

    Warning:
        Always build Decimals from strings:
        >>> Money(Decimal("0.1"), "INR")  # Correct
        >>> Money(Decimal(0.1), "INR")    # Wrong - already imprecise!
    """

    amount: Decimal
    currency: str

    def __post_init__(self) -> None:
        """Validate money after initialization.

        Raises:
            ValueError: If amount is not a finite number or currency is invalid.
        """
        if not isinstance(self.amount, Decimal):
            try:
                object.__setattr__(self, "amount", Decimal(str(self.amount)))
            except (InvalidOperation, TypeError) as e:
                raise ValueError(f"Amount must be a valid number: {e}") from e

        if self.amount.is_nan() or self.amount.is_infinite():
            raise ValueError("Amount cannot be NaN or Infinite")

        object.__setattr__(self, "currency", validate_currency(self.currency))

    # -------------------------------------------------------------------------
    # Arithmetic Operations (Same Currency Only)
    # -------------------------------------------------------------------------

    def __add__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: "Money") -> "Money":
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def __neg__(self) -> "Money":
        return Money(-self.amount, self.currency)

    def times_units(self, units: Decimal) -> "Money":
        """Total cost of a number of units at this per-unit price.

        The product is rounded to minor units.

        Args:
            units: Unit quantity (may be fractional).

        Returns:
            New Money rounded with quantize_money.

        Example:
            >>> Money(Decimal("3420.50"), "INR").times_units(Decimal("0.5"))
            Money(amount=Decimal('1710.25'), currency='INR')
        """
        return Money(quantize_money(self.amount * units), self.currency)

    def per_unit(self, units: Decimal) -> "Money":
        """Divide this total across a number of units (e.g., average cost).

        Args:
            units: Unit quantity, must be positive.

        Returns:
            New Money rounded with quantize_price.

        Raises:
            ValueError: If units is not positive.
        """
        if units <= 0:
            raise ValueError("Cannot divide across a non-positive unit count")
        return Money(quantize_price(self.amount / units), self.currency)

    def quantized(self) -> "Money":
        """Return a copy rounded to minor units."""
        return Money(quantize_money(self.amount), self.currency)

    # -------------------------------------------------------------------------
    # Comparison Operations (Same Currency Only)
    # -------------------------------------------------------------------------

    def __lt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount < other.amount

    def __le__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: "Money") -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        self._check_same_currency(other)
        return self.amount >= other.amount

    # -------------------------------------------------------------------------
    # Query Methods
    # -------------------------------------------------------------------------

    def is_positive(self) -> bool:
        """True if amount is greater than zero."""
        return self.amount > 0

    def is_negative(self) -> bool:
        """True if amount is less than zero."""
        return self.amount < 0

    def is_zero(self) -> bool:
        """True if amount equals zero."""
        return self.amount == 0

    # -------------------------------------------------------------------------
    # Factory Methods
    # -------------------------------------------------------------------------

    @classmethod
    def zero(cls, currency: str = "INR") -> Self:
        """Create Money with zero amount.

        Args:
            currency: Currency code (default: INR).

        Returns:
            Money with zero amount in specified currency.
        """
        return cls(Decimal("0"), currency)

    # -------------------------------------------------------------------------
    # String Representations
    # -------------------------------------------------------------------------

    def __repr__(self) -> str:
        return f"Money(amount={self.amount!r}, currency={self.currency!r})"

    def __str__(self) -> str:
        """Formatted string like "1,234.56 INR"."""
        return f"{self.amount:,.2f} {self.currency}"

    def _check_same_currency(self, other: "Money") -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)
