"""SQLAlchemy implementation of FusionRecordRepositoryPort."""

from datetime import datetime
from typing import Optional

from sqlalchemy import Select, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from haulbook.application.ports.outbound.fusion_record_repository_port import (
    FusionRecordRepositoryPort,
)
from haulbook.domain.entities.fusion_record import FusionRecord
from haulbook.domain.value_objects.partner_kind import PartnerKind
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.mappers.fusion_record_mapper import (
    FusionRecordMapper,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.fusion_record_model import (
    FusionRecordModel,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.repositories.base_repository import (
    BaseRepository,
)


class PostgresFusionRecordRepository(
    BaseRepository[FusionRecordModel, FusionRecord], FusionRecordRepositoryPort
):
    """
    SQLAlchemy implementation of FusionRecordRepositoryPort.

    The ledger is append-only: besides inserts, the only write is the
    conditional flip of ``reverted``.
    """

    def __init__(self, session: AsyncSession):
        super().__init__(session, FusionRecordModel, FusionRecordMapper)

    async def mark_reverted(self, fusion_id: int, reverted_at: datetime) -> bool:
        """
        Flip ``reverted`` to true unless it already is.

        Returns:
            True if this call flipped the flag
        """
        stmt = (
            update(FusionRecordModel)
            .where(
                FusionRecordModel.id == fusion_id,
                FusionRecordModel.reverted.is_(False),
            )
            .values(reverted=True, reverted_at=reverted_at)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        return result.rowcount == 1

    async def list_recent(
        self,
        kind: Optional[PartnerKind] = None,
        performed_by: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> list[FusionRecord]:
        """
        List fusion records, most recent first.

        Returns:
            List of fusion records
        """
        stmt = _filtered(select(FusionRecordModel), kind, performed_by)
        stmt = (
            stmt.order_by(FusionRecordModel.fused_at.desc(), FusionRecordModel.id.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self.mapper.to_entity(model) for model in result.scalars().all()]

    async def count(
        self,
        kind: Optional[PartnerKind] = None,
        performed_by: Optional[str] = None,
    ) -> int:
        stmt = _filtered(select(func.count(FusionRecordModel.id)), kind, performed_by)
        result = await self.session.execute(stmt)
        return result.scalar_one()


def _filtered(stmt: Select, kind: Optional[PartnerKind], performed_by: Optional[str]) -> Select:
    if kind is not None:
        stmt = stmt.where(FusionRecordModel.partner_kind == kind)
    if performed_by is not None:
        stmt = stmt.where(FusionRecordModel.performed_by == performed_by)
    return stmt
