"""Commands (CQRS write side)."""

from folio.application.commands.trade_commands import ExecuteBuy

__all__ = ["ExecuteBuy"]
