"""InstrumentRepository - SQLAlchemy implementation of InstrumentRepository protocol.

Read-only adapter; instruments are written by seeders and migrations.
"""

from collections.abc import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.entities.instrument import Instrument
from folio.domain.enums.instrument_category import InstrumentCategory
from folio.domain.value_objects.money import Money
from folio.infrastructure.persistence.models.instrument import InstrumentModel


class InstrumentRepository:
    """SQLAlchemy implementation of InstrumentRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, instrument_id: UUID) -> Instrument | None:
        """Find instrument by ID (active or not).

        Args:
            instrument_id: Unique instrument identifier.

        Returns:
            Instrument entity if found, None otherwise.
        """
        stmt = select(InstrumentModel).where(InstrumentModel.id == instrument_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_by_ids(
        self, instrument_ids: Sequence[UUID]
    ) -> dict[UUID, Instrument]:
        """Load several instruments in one query.

        Args:
            instrument_ids: Identifiers to load.

        Returns:
            Mapping of ID to Instrument for the IDs that exist.
        """
        if not instrument_ids:
            return {}

        stmt = select(InstrumentModel).where(
            InstrumentModel.id.in_(set(instrument_ids))
        )
        result = await self._session.execute(stmt)
        return {model.id: self._to_domain(model) for model in result.scalars()}

    def _to_domain(self, model: InstrumentModel) -> Instrument:
        """Convert database model to domain entity.

        Converts the category string to InstrumentCategory and rebuilds the
        price as Money.
        """
        return Instrument(
            id=model.id,
            symbol=model.symbol,
            name=model.name,
            category=InstrumentCategory(model.category),
            price_per_unit=Money(amount=model.price_per_unit, currency=model.currency),
            is_active=model.is_active,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
