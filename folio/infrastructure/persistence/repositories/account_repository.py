"""AccountRepository - SQLAlchemy implementation of AccountRepository protocol.

Maps between domain Account entities and AccountModel rows. The wallet
balance and currency columns are rebuilt into a Money value object.
"""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from folio.domain.entities.account import Account
from folio.domain.value_objects.money import Money
from folio.infrastructure.persistence.models.account import AccountModel


class AccountRepository:
    """SQLAlchemy implementation of AccountRepository protocol.

    Does NOT inherit from the protocol (structural typing).

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, account_id: UUID) -> Account | None:
        """Find account by ID.

        Args:
            account_id: Unique account identifier.

        Returns:
            Account entity if found, None otherwise.
        """
        stmt = select(AccountModel).where(AccountModel.id == account_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def find_by_id_for_update(self, account_id: UUID) -> Account | None:
        """Find account by ID with SELECT ... FOR UPDATE.

        The row stays locked until the enclosing transaction ends. SQLite
        ignores FOR UPDATE; there the BEGIN IMMEDIATE write lock applies.

        Args:
            account_id: Unique account identifier.

        Returns:
            Account entity if found, None otherwise.
        """
        stmt = (
            select(AccountModel)
            .where(AccountModel.id == account_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_domain(model)

    async def save(self, account: Account) -> None:
        """Save an account (create or update).

        Args:
            account: Account entity to save.
        """
        stmt = select(AccountModel).where(AccountModel.id == account.id)
        result = await self._session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            self._session.add(self._to_model(account))
        else:
            self._update_model(existing, account)

        await self._session.flush()

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_domain(self, model: AccountModel) -> Account:
        return Account(
            id=model.id,
            wallet_balance=Money(amount=model.wallet_balance, currency=model.currency),
            display_name=model.display_name,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def _to_model(self, entity: Account) -> AccountModel:
        return AccountModel(
            id=entity.id,
            wallet_balance=entity.wallet_balance.amount,
            currency=entity.currency,
            display_name=entity.display_name,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    def _update_model(self, model: AccountModel, entity: Account) -> None:
        model.wallet_balance = entity.wallet_balance.amount
        model.currency = entity.currency
        model.display_name = entity.display_name
        model.updated_at = entity.updated_at
