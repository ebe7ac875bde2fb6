"""Trade commands.

Commands are immutable value objects representing user intent; handlers
execute them and return Result types.
"""

from dataclasses import dataclass
from decimal import Decimal
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ExecuteBuy:
    """Command to buy units of an instrument at its current price.

    Attributes:
        account_id: Buying account (from the access token).
        instrument_id: Instrument to buy.
        units: Units to buy. Positive, at most 8 decimal places.

    Example:
        >>> command = ExecuteBuy(
        ...     account_id=current_user.account_id,
        ...     instrument_id=instrument_id,
        ...     units=Decimal("2.5"),
        ... )
        >>> result = await handler.handle(command)
    """

    account_id: UUID
    instrument_id: UUID
    units: Decimal
