"""
SQLAlchemy implementation of PartnerRepositoryPort.

One repository serves all three partner tables; each call is routed to the
table for the requested kind.
"""

from typing import Optional, Sequence

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from haulbook.application.ports.outbound.partner_repository_port import PartnerRepositoryPort
from haulbook.domain.entities.partner import Partner
from haulbook.domain.value_objects.partner_kind import PartnerKind
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.mappers.partner_mapper import (
    PartnerMapper,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.partner_model import (
    PARTNER_MODELS,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.repositories.base_repository import (
    BaseRepository,
)


class PostgresPartnerRepository(PartnerRepositoryPort):
    """SQLAlchemy implementation of PartnerRepositoryPort."""

    def __init__(self, session: AsyncSession):
        """
        Initialize partner repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session
        self._tables = {
            kind: BaseRepository(session, model_class, PartnerMapper)
            for kind, model_class in PARTNER_MODELS.items()
        }

    async def get_by_id(self, kind: PartnerKind, partner_id: int) -> Optional[Partner]:
        return await self._tables[kind].get_by_id(partner_id)

    async def get_for_update(self, kind: PartnerKind, partner_id: int) -> Optional[Partner]:
        return await self._tables[kind].get_for_update(partner_id)

    async def add(self, partner: Partner) -> Partner:
        return await self._tables[partner.kind].add(partner)

    async def delete(self, kind: PartnerKind, partner_id: int) -> bool:
        return await self._tables[kind].delete(partner_id)

    async def exists(self, kind: PartnerKind, partner_id: int) -> bool:
        return await self._tables[kind].exists(partner_id)

    async def mark_balance_stale(self, kind: PartnerKind, partner_ids: Sequence[int]) -> int:
        """
        Flag partners for the external balance job.

        Returns:
            Number of rows flagged
        """
        if not partner_ids:
            return 0

        model_class = PARTNER_MODELS[kind]
        stmt = (
            update(model_class)
            .where(model_class.id.in_(list(partner_ids)))
            .values(balance_stale=True)
        )
        result = await self.session.execute(stmt)
        return result.rowcount
