"""HoldingRepository - SQLAlchemy implementation of HoldingRepository protocol.

Maps between domain Holding entities and HoldingModel rows.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.entities.holding import Holding
from folio.domain.value_objects.money import Money
from folio.infrastructure.persistence.models.holding import HoldingModel


class HoldingRepository:
    """SQLAlchemy implementation of HoldingRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = HoldingRepository(session)
        ...     holdings = await repo.list_by_account(account_id)
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_account_and_instrument(
        self,
        account_id: UUID,
        instrument_id: UUID,
        *,
        for_update: bool = False,
    ) -> Holding | None:
        """Find the holding for an (account, instrument) pair.

        Args:
            account_id: Owning account.
            instrument_id: Instrument held.
            for_update: Lock the row until the transaction ends.

        Returns:
            Holding entity if found, None otherwise.
        """
        stmt = select(HoldingModel).where(
            HoldingModel.account_id == account_id,
            HoldingModel.instrument_id == instrument_id,
        )
        if for_update:
            stmt = stmt.with_for_update().execution_options(populate_existing=True)

        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def list_by_account(self, account_id: UUID) -> list[Holding]:
        """List holdings with units held, oldest acquisition first.

        Args:
            account_id: Owning account.

        Returns:
            List of holdings for the account.
        """
        stmt = (
            select(HoldingModel)
            .where(
                HoldingModel.account_id == account_id,
                HoldingModel.total_units > 0,
            )
            .order_by(HoldingModel.first_acquired_at, HoldingModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def save(self, holding: Holding) -> None:
        """Save a holding (create or update).

        Args:
            holding: Holding entity to save.
        """
        stmt = select(HoldingModel).where(HoldingModel.id == holding.id)
        result = await self._session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            self._session.add(self._to_model(holding))
        else:
            self._update_model(existing, holding)

        await self._session.flush()

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: HoldingModel) -> Holding:
        """Convert database model to domain entity.

        Rebuilds Money values from the shared currency column.
        """
        return Holding(
            id=model.id,
            account_id=model.account_id,
            instrument_id=model.instrument_id,
            total_units=model.total_units,
            average_price=Money(amount=model.average_price, currency=model.currency),
            total_invested=Money(amount=model.total_invested, currency=model.currency),
            first_acquired_at=model.first_acquired_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Holding) -> HoldingModel:
        return HoldingModel(
            id=entity.id,
            account_id=entity.account_id,
            instrument_id=entity.instrument_id,
            total_units=entity.total_units,
            average_price=entity.average_price.amount,
            total_invested=entity.total_invested.amount,
            currency=entity.total_invested.currency,
            first_acquired_at=entity.first_acquired_at,
            updated_at=entity.updated_at,
        )

    def _update_model(self, model: HoldingModel, entity: Holding) -> None:
        """Copy mutable fields onto an existing row.

        first_acquired_at and the identifying keys are left untouched.
        """
        model.total_units = entity.total_units
        model.average_price = entity.average_price.amount
        model.total_invested = entity.total_invested.amount
        model.updated_at = entity.updated_at
