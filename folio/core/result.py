"""Result types for railway-oriented programming.

Handlers return a Result instead of raising for expected failures
(validation, not found, business rule violations). Only truly unexpected
conditions travel as exceptions, and those are converted at the boundary.

Usage:
    def check_units(units: Decimal) -> Result[Decimal, str]:
        if units <= 0:
            return Failure(error="Units must be positive")
        return Success(value=units)

    match check_units(Decimal("2.5")):
        case Success(value=units):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome carrying a value.

    Attributes:
        value: The produced value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome carrying an error.

    Attributes:
        error: The error describing why the operation failed.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
