"""Append-only history of merges and their revert status."""

from datetime import UTC, datetime
from typing import Optional

from haulbook.application.exceptions import AlreadyRevertedError, NotFoundError
from haulbook.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from haulbook.application.services.reference_rewriter import RewriteCounts
from haulbook.domain.entities.fusion_record import FusionRecord
from haulbook.domain.entities.partner import Partner
from haulbook.domain.value_objects.fusion_snapshot import FusionSnapshot
from haulbook.domain.value_objects.partner_kind import PartnerKind


class FusionLedger:
    """
    Owns fusion records.

    Records are appended by merges and flipped to reverted at most once by
    reverts. Nothing here deletes or otherwise edits a record.
    """

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize ledger.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow

    async def record(
        self,
        snapshot: FusionSnapshot,
        destination: Partner,
        counts: RewriteCounts,
        performed_by: Optional[str] = None,
    ) -> FusionRecord:
        """
        Append a record for a merge of the snapshot's origin into ``destination``.

        Args:
            snapshot: Pre-merge snapshot of the origin
            destination: Partner that absorbed the origin
            counts: Rows moved by the forward rewrite
            performed_by: Operator that requested the merge

        Returns:
            Stored fusion record carrying its new id
        """
        record = FusionRecord(
            id=None,
            kind=snapshot.kind,
            origin_id=snapshot.origin_id,
            destination_id=destination.id,
            origin_name=snapshot.origin_name,
            destination_name=destination.name,
            snapshot=snapshot,
            transactions_affected=counts.transactions,
            trips_affected=counts.trips,
            performed_by=performed_by,
            fused_at=datetime.now(UTC),
        )
        return await self.uow.fusion_records.add(record)

    async def get(self, fusion_id: int, for_update: bool = False) -> FusionRecord:
        """
        Load a fusion record.

        Args:
            fusion_id: Fusion record id
            for_update: Lock the row until the unit of work ends

        Raises:
            NotFoundError: If no record has that id
        """
        if for_update:
            record = await self.uow.fusion_records.get_for_update(fusion_id)
        else:
            record = await self.uow.fusion_records.get_by_id(fusion_id)

        if record is None:
            raise NotFoundError(
                message=f"Fusion {fusion_id} not found",
                resource_type="FusionRecord",
                resource_id=str(fusion_id),
            )
        return record

    async def mark_reverted(self, record: FusionRecord) -> FusionRecord:
        """
        Flag a record reverted.

        The flag is flipped with a conditional update, so of two concurrent
        reverts only one can succeed.

        Raises:
            AlreadyRevertedError: If the record is, or just became, reverted
        """
        if record.reverted:
            raise AlreadyRevertedError(record.id)

        reverted_at = datetime.now(UTC)
        if not await self.uow.fusion_records.mark_reverted(record.id, reverted_at):
            raise AlreadyRevertedError(record.id)

        record.mark_reverted(reverted_at)
        return record

    async def history(
        self,
        kind: Optional[PartnerKind] = None,
        performed_by: Optional[str] = None,
        skip: int = 0,
        limit: int = 100,
    ) -> tuple[list[FusionRecord], int]:
        """
        List records, most recent first.

        Returns:
            Tuple of (records for the requested page, total matching count)
        """
        records = await self.uow.fusion_records.list_recent(
            kind=kind, performed_by=performed_by, skip=skip, limit=limit
        )
        total = await self.uow.fusion_records.count(kind=kind, performed_by=performed_by)
        return records, total
