"""
Base repository class for common database operations.

Generic CRUD shared by every repository, with entity <-> model conversion
delegated to a mapper.
"""

from typing import Generic, Optional, Sequence, Type, TypeVar

from sqlalchemy import delete, exists, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from haulbook.application.exceptions import NotFoundError
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models.base import Base

TModel = TypeVar("TModel", bound=Base)  # SQLAlchemy model type
TEntity = TypeVar("TEntity")  # Domain entity type


class BaseRepository(Generic[TModel, TEntity]):
    """
    Base repository providing common CRUD operations.

    - add: Insert new entity (explicit ids are kept)
    - get_by_id / get_for_update: Retrieve by id, optionally locking the row
    - get_many: Retrieve the existing rows among a set of ids
    - update: Update existing entity
    - delete: Hard delete
    - exists / count

    Type Parameters:
        TModel: SQLAlchemy model type (e.g., TripModel)
        TEntity: Domain entity type (e.g., Trip)

    Usage:
        class PostgresTripRepository(BaseRepository[TripModel, Trip]):
            def __init__(self, session: AsyncSession):
                super().__init__(session, TripModel, TripMapper)
    """

    def __init__(
        self,
        session: AsyncSession,
        model_class: Type[TModel],
        mapper_class,  # Type is Any to avoid circular imports
    ):
        """
        Initialize base repository.

        Args:
            session: SQLAlchemy async session
            model_class: SQLAlchemy model class
            mapper_class: Mapper class with to_entity() and to_model() methods
        """
        self.session = session
        self.model_class = model_class
        self.mapper = mapper_class

    async def add(self, entity: TEntity) -> TEntity:
        """
        Add a new entity to the database.

        Returns:
            Created entity with generated id and defaults
        """
        model = self.mapper.to_model(entity)
        self.session.add(model)
        await self.session.flush()  # Flush to get generated ID
        await self.session.refresh(model)
        return self.mapper.to_entity(model)

    async def get_by_id(self, entity_id: int) -> Optional[TEntity]:
        """
        Retrieve entity by ID.

        Returns:
            Domain entity if found, None otherwise
        """
        model = await self._get_model(entity_id)
        return self.mapper.to_entity(model) if model is not None else None

    async def get_for_update(self, entity_id: int) -> Optional[TEntity]:
        """
        Retrieve entity by ID with ``SELECT ... FOR UPDATE``.

        The row stays locked until the surrounding transaction ends. Backends
        without row locks (SQLite) ignore the clause. Already-loaded rows are
        refreshed from the database.
        """
        stmt = (
            select(self.model_class)
            .where(self.model_class.id == entity_id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self.mapper.to_entity(model) if model is not None else None

    async def get_many(self, entity_ids: Sequence[int]) -> list[TEntity]:
        """
        Retrieve the entities that exist among ``entity_ids``.

        Returns:
            Entities ordered by id; unknown ids are skipped
        """
        if not entity_ids:
            return []

        stmt = (
            select(self.model_class)
            .where(self.model_class.id.in_(list(entity_ids)))
            .order_by(self.model_class.id)
        )
        result = await self.session.execute(stmt)
        return [self.mapper.to_entity(model) for model in result.scalars().all()]

    async def update(self, entity: TEntity) -> TEntity:
        """
        Update existing entity.

        Raises:
            NotFoundError: If entity doesn't exist
        """
        entity_id = entity.id  # type: ignore  # All entities have id
        existing_model = await self._get_model(entity_id)

        if existing_model is None:
            raise NotFoundError(
                f"{self.model_class.__name__} with id {entity_id} not found",
                resource_type=self.model_class.__name__,
                resource_id=str(entity_id),
            )

        updated_model = self.mapper.to_model(entity, existing_model=existing_model)
        await self.session.flush()
        await self.session.refresh(updated_model)

        return self.mapper.to_entity(updated_model)

    async def delete(self, entity_id: int) -> bool:
        """
        Hard delete entity from database.

        Returns:
            True if a row was deleted, False if none matched
        """
        stmt = delete(self.model_class).where(self.model_class.id == entity_id)
        result = await self.session.execute(stmt)
        return result.rowcount > 0

    async def exists(self, entity_id: int) -> bool:
        """Check if entity exists."""
        stmt = select(exists().where(self.model_class.id == entity_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def count(self) -> int:
        """Count total number of entities."""
        stmt = select(func.count(self.model_class.id))
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def _get_model(self, entity_id: int) -> Optional[TModel]:
        stmt = select(self.model_class).where(self.model_class.id == entity_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
