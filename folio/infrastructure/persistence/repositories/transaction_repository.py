"""TransactionRepository - SQLAlchemy implementation of TransactionRepository protocol.

Append-only adapter: add() inserts, everything else reads. There is no
update or delete path.
"""

from typing import Any
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.entities.transaction_record import TransactionRecord
from folio.domain.enums.trade_direction import TradeDirection
from folio.domain.enums.transaction_status import TransactionStatus
from folio.domain.value_objects.money import Money
from folio.infrastructure.persistence.models.transaction import TransactionModel


class TransactionRepository:
    """SQLAlchemy implementation of TransactionRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, record: TransactionRecord) -> None:
        """Insert a new transaction record.

        Args:
            record: Record to insert.

        Raises:
            IntegrityError: If a record with the same ID exists.
        """
        self._session.add(self._to_model(record))
        await self._session.flush()

    async def find_by_id(
        self, transaction_id: UUID, account_id: UUID
    ) -> TransactionRecord | None:
        """Find a record by ID, scoped to its owning account.

        Args:
            transaction_id: Record identifier.
            account_id: Owning account.

        Returns:
            Record if found and owned by account_id, None otherwise.
        """
        stmt = select(TransactionModel).where(
            TransactionModel.id == transaction_id,
            TransactionModel.account_id == account_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def list_by_account(
        self,
        account_id: UUID,
        *,
        direction: TradeDirection | None = None,
        status: TransactionStatus | None = None,
        instrument_id: UUID | None = None,
        limit: int = 10,
        offset: int = 0,
    ) -> list[TransactionRecord]:
        """List records of an account, newest first.

        UUIDv7 ids are time-ordered, so id breaks ties between records
        sharing a timestamp.
        """
        stmt = self._filtered(
            select(TransactionModel), account_id, direction, status, instrument_id
        )
        stmt = (
            stmt.order_by(TransactionModel.created_at.desc(), TransactionModel.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def count_by_account(
        self,
        account_id: UUID,
        *,
        direction: TradeDirection | None = None,
        status: TransactionStatus | None = None,
        instrument_id: UUID | None = None,
    ) -> int:
        """Count records matching the list filters."""
        stmt = self._filtered(
            select(func.count(TransactionModel.id)),
            account_id,
            direction,
            status,
            instrument_id,
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    @staticmethod
    def _filtered(
        stmt: Select[Any],
        account_id: UUID,
        direction: TradeDirection | None,
        status: TransactionStatus | None,
        instrument_id: UUID | None,
    ) -> Select[Any]:
        stmt = stmt.where(TransactionModel.account_id == account_id)
        if direction is not None:
            stmt = stmt.where(TransactionModel.direction == direction.value)
        if status is not None:
            stmt = stmt.where(TransactionModel.status == status.value)
        if instrument_id is not None:
            stmt = stmt.where(TransactionModel.instrument_id == instrument_id)
        return stmt

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: TransactionModel) -> TransactionRecord:
        return TransactionRecord(
            id=model.id,
            account_id=model.account_id,
            instrument_id=model.instrument_id,
            direction=TradeDirection(model.direction),
            units=model.units,
            unit_price=Money(amount=model.unit_price, currency=model.currency),
            total_amount=Money(amount=model.total_amount, currency=model.currency),
            status=TransactionStatus(model.status),
            created_at=model.created_at,
        )

    def _to_model(self, entity: TransactionRecord) -> TransactionModel:
        return TransactionModel(
            id=entity.id,
            account_id=entity.account_id,
            instrument_id=entity.instrument_id,
            direction=entity.direction.value,
            units=entity.units,
            unit_price=entity.unit_price.amount,
            total_amount=entity.total_amount.amount,
            currency=entity.total_amount.currency,
            status=entity.status.value,
            created_at=entity.created_at,
        )
