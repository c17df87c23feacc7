"""
SQLAlchemy implementation of the Unit of Work pattern.

Every repository shares one ``AsyncSession``, so a merge or revert is a
single database transaction.
"""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from haulbook.application.exceptions import ConflictingStateError
from haulbook.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.repositories.fusion_record_repository import (
    PostgresFusionRecordRepository,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.repositories.partner_repository import (
    PostgresPartnerRepository,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.repositories.transaction_repository import (
    PostgresTransactionRepository,
)
from haulbook.infrastructure.adapters.outbound.persistence.postgresql.repositories.trip_repository import (
    PostgresTripRepository,
)

logger = logging.getLogger(__name__)


class PostgresUnitOfWork(UnitOfWorkPort):
    """
    Unit of Work over a single SQLAlchemy session.

    Usage:
        async with uow:
            origin = await uow.partners.get_for_update(kind, origin_id)
            ...
            await uow.commit()

        # On exception, automatic rollback occurs

    Integrity violations raised while flushing or committing (a foreign key
    still pointing at a deleted partner, a recreated id already taken) are
    re-raised as ConflictingStateError.

    Attributes:
        partners: Partner repository (all three kinds)
        transactions: Transaction repository
        trips: Trip repository
        fusion_records: Fusion ledger repository
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize Unit of Work with a database session.

        Args:
            session: SQLAlchemy AsyncSession for database operations
        """
        self._session = session

        self.partners = PostgresPartnerRepository(session)
        self.transactions = PostgresTransactionRepository(session)
        self.trips = PostgresTripRepository(session)
        self.fusion_records = PostgresFusionRecordRepository(session)

    async def __aenter__(self) -> "PostgresUnitOfWork":
        """
        Enter async context manager.

        The session begins its transaction lazily on first use.
        """
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit context manager (commit or rollback).

        Raises:
            ConflictingStateError: If the block failed on an integrity violation
        """
        if exc_type is None:
            await self.commit()
            return

        await self.rollback()
        if isinstance(exc_val, IntegrityError):
            raise _conflict(exc_val) from exc_val

    async def commit(self) -> None:
        """
        Commit the current transaction.

        Raises:
            ConflictingStateError: If the database rejected the changes
        """
        try:
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            raise _conflict(e) from e

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        await self._session.rollback()

    async def close(self) -> None:
        """Close the database session."""
        await self._session.close()


def _conflict(error: IntegrityError) -> ConflictingStateError:
    logger.warning(f"Integrity violation, rolling back: {error.orig}")
    return ConflictingStateError(
        "The change conflicts with data modified concurrently",
        current_state=type(error.orig).__name__ if error.orig is not None else None,
    )
