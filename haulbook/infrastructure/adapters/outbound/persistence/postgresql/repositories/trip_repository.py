"""SQLAlchemy implementation of TripRepositoryPort."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from haulbook.application.ports.outbound.trip_repository_port import TripRepositoryPort
from haulbook.domain.entities.trip import Trip
from haulbook.domain.value_objects.fusion_snapshot import TripLinkField
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.mappers.trip_mapper import (
    TripMapper,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.trip_model import (
    TripModel,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.repositories.base_repository import (
    BaseRepository,
)

_LINK_COLUMNS = {
    TripLinkField.SITE: TripModel.site_id,
    TripLinkField.BUYER: TripModel.buyer_id,
    TripLinkField.CONDUCTOR: TripModel.conductor,
}


class PostgresTripRepository(BaseRepository[TripModel, Trip], TripRepositoryPort):
    """SQLAlchemy implementation of TripRepositoryPort."""

    def __init__(self, session: AsyncSession):
        super().__init__(session, TripModel, TripMapper)

    async def list_by_link(self, field: TripLinkField, value: int | str) -> list[Trip]:
        """
        List trips whose attribution column equals ``value``.

        Uses plain ``=``, which is case-sensitive on PostgreSQL and SQLite.

        Returns:
            Trips ordered by id
        """
        column = _LINK_COLUMNS[field]
        stmt = select(TripModel).where(column == value).order_by(TripModel.id)
        result = await self.session.execute(stmt)
        return [self.mapper.to_entity(model) for model in result.scalars().all()]
