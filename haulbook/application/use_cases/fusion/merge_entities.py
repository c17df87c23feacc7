"""Merge entities use case."""

import logging
from typing import Optional

from haulbook.application.dto.fusion_dto import MergeEntitiesInput, MergeResultOutput
from haulbook.application.exceptions import (
    ConflictingStateError,
    InvalidMergeError,
    NotFoundError,
)
from haulbook.application.ports.outbound.balance_recalculation_port import (
    BalanceRecalculationPort,
)
from haulbook.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from haulbook.application.services.fusion_ledger import FusionLedger
from haulbook.application.services.reference_rewriter import rewriter_for
from haulbook.application.services.snapshot_recorder import SnapshotRecorder
from haulbook.domain.entities.partner import Partner
from haulbook.domain.value_objects.partner_kind import PartnerKind

logger = logging.getLogger(__name__)


class MergeEntitiesUseCase:
    """
    Use case for consolidating one partner into another of the same kind.

    Snapshot, rewrite, origin deletion and ledger entry share one unit of
    work: either all of them land or none do.
    """

    def __init__(
        self,
        uow: UnitOfWorkPort,
        balance_hook: Optional[BalanceRecalculationPort] = None,
    ):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
            balance_hook: Notified after commit so balances get recomputed
        """
        self.uow = uow
        self.balance_hook = balance_hook

    async def execute(self, merge_input: MergeEntitiesInput) -> MergeResultOutput:
        """
        Merge the origin partner into the destination partner.

        Args:
            merge_input: Kind, origin and destination ids

        Returns:
            Fusion id and counts of transferred rows

        Raises:
            InvalidMergeError: If origin and destination are the same partner
            NotFoundError: If either partner does not exist
            ConflictingStateError: If a concurrent change invalidated the merge
        """
        kind = merge_input.kind
        origin_id = merge_input.origin_id
        destination_id = merge_input.destination_id

        if origin_id == destination_id:
            raise InvalidMergeError(
                f"Cannot merge {kind.label.lower()} {origin_id} into itself",
                origin_id=origin_id,
            )

        async with self.uow:
            destination = await self._lock_pair(kind, origin_id, destination_id)

            snapshot = await SnapshotRecorder(self.uow).capture(kind, origin_id)
            counts = await rewriter_for(kind, self.uow).forward(snapshot, destination)

            if not await self.uow.partners.delete(kind, origin_id):
                raise ConflictingStateError(
                    f"{kind.label} {origin_id} disappeared during the merge",
                    operation="merge",
                    current_state="origin deleted",
                )

            record = await FusionLedger(self.uow).record(
                snapshot, destination, counts, performed_by=merge_input.performed_by
            )

            await self.uow.commit()

        logger.info(
            f"Merged {kind.value} {origin_id} ({snapshot.origin_name!r}) into "
            f"{destination_id} ({destination.name!r}): fusion={record.id} "
            f"transactions={counts.transactions} trips={counts.trips}",
            extra={"fusion_id": record.id, "partner_kind": kind.value},
        )

        if self.balance_hook is not None:
            await self.balance_hook.request_recalculation(kind, [destination_id])

        return MergeResultOutput(
            fusion_id=record.id,
            transactions_transferred=counts.transactions,
            trips_transferred=counts.trips,
        )

    async def _lock_pair(
        self, kind: PartnerKind, origin_id: int, destination_id: int
    ) -> Partner:
        """Lock both partner rows in id order and return the destination."""
        locked: dict[int, Partner] = {}
        for partner_id in sorted((origin_id, destination_id)):
            partner = await self.uow.partners.get_for_update(kind, partner_id)
            if partner is None:
                raise NotFoundError(
                    message=f"{kind.label} {partner_id} not found",
                    resource_type=kind.label,
                    resource_id=str(partner_id),
                )
            locked[partner_id] = partner
        return locked[destination_id]
