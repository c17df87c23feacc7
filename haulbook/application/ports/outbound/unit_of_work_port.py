"""Unit of Work port interface."""

from typing import Protocol

from haulbook.application.ports.outbound.fusion_record_repository_port import (
    FusionRecordRepositoryPort,
)
from haulbook.application.ports.outbound.partner_repository_port import PartnerRepositoryPort
from haulbook.application.ports.outbound.transaction_repository_port import (
    TransactionRepositoryPort,
)
from haulbook.application.ports.outbound.trip_repository_port import TripRepositoryPort


class UnitOfWorkPort(Protocol):
    """
    Unit of Work interface for managing transactions.

    Every repository shares one database transaction, so a merge or revert
    either lands completely or not at all.

    Usage:
        async with uow:
            origin = await uow.partners.get_for_update(kind, origin_id)
            ...
            await uow.commit()

        # On exception, automatic rollback occurs
    """

    partners: PartnerRepositoryPort
    transactions: TransactionRepositoryPort
    trips: TripRepositoryPort
    fusion_records: FusionRecordRepositoryPort

    async def __aenter__(self) -> "UnitOfWorkPort":
        """Enter async context manager (begin transaction)."""
        ...

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """
        Exit context manager.

        Rolls back if an exception occurred, otherwise commits.
        """
        ...

    async def commit(self) -> None:
        """
        Commit the current transaction.

        Raises:
            ConflictingStateError: If the database rejected the changes
        """
        ...

    async def rollback(self) -> None:
        """Rollback the current transaction."""
        ...
