"""ExecuteBuy command handler.

Buys units of an instrument for an account at the instrument's current
price. Four writes happen in one atomic unit of the ledger store:

    1. debit the wallet
    2. insert the transaction record
    3. create or update the holding (weighted-average cost basis)
    4. commit

Check order:
    - units (validation, before touching the store)
    - instrument exists and is active
    - account exists (row locked until the unit ends)
    - wallet balance covers units x price

Rejections return Failure with a typed DomainError and leave the store
untouched. Any exception inside the unit rolls every write back; the cause
is logged and the caller gets a generic TransactionFailedError. The handler
never retries.
"""

from decimal import Decimal
from uuid import UUID

from folio.application.commands.trade_commands import ExecuteBuy
from folio.application.dtos import PurchaseResult
from folio.core.enums import ErrorCode
from folio.core.errors import DomainError, NotFoundError, ValidationError
from folio.core.result import Failure, Result, Success
from folio.domain.entities import Holding, TransactionRecord
from folio.domain.errors import InsufficientFundsError, TransactionFailedError
from folio.domain.protocols import LedgerSession, LedgerStore, LoggerProtocol
from folio.domain.value_objects.money import UNITS_MAX_PLACES, has_valid_unit_precision

TRANSACTION_FAILED_MESSAGE = "The purchase could not be completed. No changes were made."


class ExecuteBuyHandler:
    """Handler for ExecuteBuy command.

    Dependencies (injected via constructor):
        - LedgerStore: Atomic unit over accounts, holdings, transactions
        - LoggerProtocol: Structured logging

    Usable without HTTP: nothing here depends on the web layer.
    """

    def __init__(self, ledger_store: LedgerStore, logger: LoggerProtocol) -> None:
        self._ledger_store = ledger_store
        self._logger = logger

    async def handle(self, cmd: ExecuteBuy) -> Result[PurchaseResult, DomainError]:
        """Handle ExecuteBuy command.

        Args:
            cmd: ExecuteBuy command.

        Returns:
            Success(PurchaseResult): Purchase committed.
            Failure(ValidationError): units invalid (INVALID_QUANTITY).
            Failure(NotFoundError): Instrument missing/inactive or account
                missing.
            Failure(InsufficientFundsError): Balance below purchase total.
            Failure(TransactionFailedError): Store failure; nothing changed.
        """
        log = self._logger.bind(
            account_id=str(cmd.account_id),
            instrument_id=str(cmd.instrument_id),
        )
        log.info("purchase_started", units=str(cmd.units))

        units_error = _validate_units(cmd.units)
        if units_error is not None:
            return self._reject(log, units_error)

        try:
            async with self._ledger_store.transaction() as ledger:
                outcome = await self._execute(ledger, cmd)
        except Exception as exc:
            log.error("purchase_failed", error=exc)
            return Failure(
                error=TransactionFailedError(
                    code=ErrorCode.TRANSACTION_FAILED,
                    message=TRANSACTION_FAILED_MESSAGE,
                )
            )

        match outcome:
            case Failure(error=error):
                return self._reject(log, error)
            case Success(value=purchase):
                log.info(
                    "purchase_completed",
                    transaction_id=str(purchase.transaction_id),
                    total_amount=str(purchase.total_amount),
                    new_wallet_balance=str(purchase.new_wallet_balance),
                )
        return outcome

    async def _execute(
        self, ledger: LedgerSession, cmd: ExecuteBuy
    ) -> Result[PurchaseResult, DomainError]:
        """Run the checks and writes inside an open unit.

        Returning a Failure before the first write leaves the unit with
        nothing to commit.
        """
        instrument = await ledger.instruments.find_by_id(cmd.instrument_id)
        if instrument is None or not instrument.is_tradable():
            return Failure(error=_instrument_not_found(cmd.instrument_id))

        account = await ledger.accounts.find_by_id_for_update(cmd.account_id)
        if account is None:
            return Failure(error=_account_not_found(cmd.account_id))

        record = TransactionRecord.buy(
            account_id=account.id,
            instrument_id=instrument.id,
            units=cmd.units,
            unit_price=instrument.price_per_unit,
        )

        if not record.total_amount.is_positive():
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_QUANTITY,
                    message="Purchase amount rounds to zero; buy more units",
                    field="units",
                )
            )

        if not account.can_afford(record.total_amount):
            return Failure(
                error=InsufficientFundsError(
                    code=ErrorCode.INSUFFICIENT_BALANCE,
                    message="Insufficient wallet balance for this purchase",
                    required=record.total_amount.amount,
                    available=account.wallet_balance.amount,
                )
            )

        match account.debit(record.total_amount):
            case Failure(error=reason):
                raise RuntimeError(f"Debit refused after balance check: {reason}")
        await ledger.accounts.save(account)

        await ledger.transactions.add(record)

        holding = await ledger.holdings.find_by_account_and_instrument(
            account.id, instrument.id, for_update=True
        )
        if holding is None:
            holding = Holding.open(
                account_id=account.id,
                instrument_id=instrument.id,
                units=record.units,
                unit_price=record.unit_price,
                total_amount=record.total_amount,
            )
        else:
            holding.record_purchase(record.units, record.total_amount)
        await ledger.holdings.save(holding)

        return Success(
            value=PurchaseResult(
                transaction_id=record.id,
                new_wallet_balance=account.wallet_balance.amount,
                currency=account.currency,
                instrument_id=instrument.id,
                units=record.units,
                unit_price=record.unit_price.amount,
                total_amount=record.total_amount.amount,
            )
        )

    @staticmethod
    def _reject(
        log: LoggerProtocol, error: DomainError
    ) -> Failure[DomainError]:
        log.warning("purchase_rejected", reason=error.code.value)
        return Failure(error=error)


def _validate_units(units: Decimal) -> ValidationError | None:
    if not isinstance(units, Decimal) or not units.is_finite() or units <= 0:
        return ValidationError(
            code=ErrorCode.INVALID_QUANTITY,
            message="Units must be a positive number",
            field="units",
        )
    if not has_valid_unit_precision(units):
        return ValidationError(
            code=ErrorCode.INVALID_QUANTITY,
            message=f"Units allow at most {UNITS_MAX_PLACES} decimal places",
            field="units",
        )
    return None


def _instrument_not_found(instrument_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.INSTRUMENT_NOT_FOUND,
        message="Instrument not found or not available for trading",
        resource_type="Instrument",
        resource_id=str(instrument_id),
    )


def _account_not_found(account_id: UUID) -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.ACCOUNT_NOT_FOUND,
        message="Account not found",
        resource_type="Account",
        resource_id=str(account_id),
    )
