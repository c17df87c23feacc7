"""SQLAlchemy implementation of TransactionRepositoryPort."""

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from haulbook.application.ports.outbound.transaction_repository_port import (
    TransactionRepositoryPort,
)
from haulbook.domain.entities.transaction import Transaction
from haulbook.domain.value_objects.counterparty_ref import CounterpartyRef
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.mappers.transaction_mapper import (
    TransactionMapper,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.transaction_model import (
    TransactionModel,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.repositories.base_repository import (
    BaseRepository,
)


class PostgresTransactionRepository(
    BaseRepository[TransactionModel, Transaction], TransactionRepositoryPort
):
    """SQLAlchemy implementation of TransactionRepositoryPort."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, TransactionModel, TransactionMapper)

    async def list_referencing(self, ref: CounterpartyRef) -> list[Transaction]:
        """
        List transactions whose from or to reference equals ``ref``.

        Args:
            ref: Counterparty reference to match on either side

        Returns:
            Matching transactions ordered by id
        """
        stmt = (
            select(TransactionModel)
            .where(
                or_(
                    and_(TransactionModel.from_kind == ref.kind, TransactionModel.from_id == ref.id),
                    and_(TransactionModel.to_kind == ref.kind, TransactionModel.to_id == ref.id),
                )
            )
            .order_by(TransactionModel.id)
        )
        result = await self.session.execute(stmt)
        return [self.mapper.to_entity(model) for model in result.scalars().all()]
