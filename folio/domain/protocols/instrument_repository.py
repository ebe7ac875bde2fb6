"""Instrument repository protocol.

Read-only source of current instrument prices. Seeders create instruments;
the application never writes them.
"""

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID

from folio.domain.entities.instrument import Instrument


class InstrumentRepository(Protocol):
    """Protocol for instrument lookups."""

    async def find_by_id(self, instrument_id: UUID) -> Instrument | None:
        """Find instrument by ID.

        Args:
            instrument_id: Unique instrument identifier.

        Returns:
            Instrument entity if found (active or not), None otherwise.
        """
        ...

    async def find_by_ids(
        self, instrument_ids: Sequence[UUID]
    ) -> dict[UUID, Instrument]:
        """Load several instruments at once.

        Args:
            instrument_ids: Identifiers to load. Unknown IDs are skipped.

        Returns:
            Mapping of instrument ID to entity.
        """
        ...
