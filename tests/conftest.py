"""
Pytest configuration and fixtures for Haulbook tests.

This module provides:
- A throwaway SQLite database per test (aiosqlite, foreign keys on)
- Unit of Work factory bound to fresh sessions
- A seeder for partners, transactions and trips
"""

# Set environment variables BEFORE importing anything from haulbook
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./haulbook-test.db")

from datetime import UTC, datetime
from decimal import Decimal
from typing import Any, AsyncGenerator, Callable, Optional

import pytest
import pytest_asyncio
from sqlalchemy import func, select

from haulbook.domain.value_objects.counterparty_ref import CounterpartyRef
from haulbook.domain.value_objects.partner_kind import PartnerKind
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.models import (
    PARTNER_MODELS,
    Base,
    TransactionModel,
    TripModel,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.unit_of_work import (
    PostgresUnitOfWork,
)
from haulbook.infrastructure.config.database import DatabaseConfig


# ============================================================================
# Database Fixtures
# ============================================================================
@pytest_asyncio.fixture
async def db_config(tmp_path) -> AsyncGenerator[DatabaseConfig, None]:
    """
    Create a file-backed SQLite database with all tables.

    NullPool gives every session its own connection, so committed data is
    visible across sessions the same way it is on PostgreSQL.
    """
    config = DatabaseConfig(
        f"sqlite+aiosqlite:///{tmp_path / 'haulbook.db'}",
        use_null_pool=True,
    )
    await config.create_tables()

    yield config

    await config.close()


@pytest_asyncio.fixture
async def uow_factory(
    db_config: DatabaseConfig,
) -> AsyncGenerator[Callable[[], PostgresUnitOfWork], None]:
    """
    Build Units of Work on fresh sessions, one per use case call.

    Mirrors the per-request session used by the API.
    """
    sessions = []

    def factory() -> PostgresUnitOfWork:
        session = db_config.get_session()
        sessions.append(session)
        return PostgresUnitOfWork(session)

    yield factory

    for session in sessions:
        await session.close()


# ============================================================================
# Data Fixtures
# ============================================================================
class Seeder:
    """Inserts and reads rows directly through the models."""

    def __init__(self, db_config: DatabaseConfig):
        self.db_config = db_config

    async def partner(self, kind: PartnerKind, name: str, **fields: Any) -> int:
        fields.setdefault("balance", Decimal("0"))
        return await self._insert(PARTNER_MODELS[kind](name=name, **fields))

    async def transaction(
        self,
        concept: str,
        value: Decimal = Decimal("100.00"),
        from_ref: Optional[CounterpartyRef] = None,
        to_ref: Optional[CounterpartyRef] = None,
    ) -> int:
        return await self._insert(
            TransactionModel(
                value=value,
                concept=concept,
                occurred_at=datetime(2024, 3, 1, 12, 0, tzinfo=UTC),
                from_kind=from_ref.kind if from_ref else None,
                from_id=from_ref.id if from_ref else None,
                to_kind=to_ref.kind if to_ref else None,
                to_id=to_ref.id if to_ref else None,
            )
        )

    async def trip(self, **fields: Any) -> int:
        return await self._insert(TripModel(**fields))

    async def get(self, model_class: type[Base], row_id: int) -> Optional[Any]:
        async with self.db_config.get_session() as session:
            return await session.get(model_class, row_id)

    async def count(self, model_class: type[Base]) -> int:
        async with self.db_config.get_session() as session:
            result = await session.execute(select(func.count(model_class.id)))
            return result.scalar_one()

    async def delete(self, model_class: type[Base], row_id: int) -> None:
        async with self.db_config.get_session() as session:
            await session.delete(await session.get(model_class, row_id))
            await session.commit()

    async def _insert(self, model: Base) -> int:
        async with self.db_config.get_session() as session:
            session.add(model)
            await session.commit()
            return model.id


@pytest.fixture
def seed(db_config: DatabaseConfig) -> Seeder:
    """Seeder bound to the test database."""
    return Seeder(db_config)
