"""Revert fusion use case."""

import logging
from typing import Optional

from haulbook.application.dto.fusion_dto import RevertResultOutput
from haulbook.application.exceptions import AlreadyRevertedError, ConflictingStateError
from haulbook.application.ports.outbound.balance_recalculation_port import (
    BalanceRecalculationPort,
)
from haulbook.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from haulbook.application.services.fusion_ledger import FusionLedger
from haulbook.application.services.reference_rewriter import rewriter_for
from haulbook.domain.entities.partner import Partner

logger = logging.getLogger(__name__)


class RevertFusionUseCase:
    """
    Use case for undoing a merge.

    The origin partner is recreated under its original id, every recorded
    row is pointed back at it and the ledger entry is flagged reverted, all
    in one unit of work.
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

    async def execute(self, fusion_id: int) -> RevertResultOutput:
        """
        Revert a fusion.

        Args:
            fusion_id: Ledger record of the merge to undo

        Returns:
            Restored partner label and counts of restored rows

        Raises:
            NotFoundError: If the fusion record does not exist
            AlreadyRevertedError: If it was already reverted
            ConflictingStateError: If the origin id is taken again
        """
        async with self.uow:
            ledger = FusionLedger(self.uow)
            record = await ledger.get(fusion_id, for_update=True)
            if record.reverted:
                raise AlreadyRevertedError(fusion_id)

            snapshot = record.snapshot
            kind = record.kind
            if await self.uow.partners.exists(kind, snapshot.origin_id):
                raise ConflictingStateError(
                    f"{kind.label} {snapshot.origin_id} already exists",
                    operation="revert",
                    current_state="origin id in use",
                )

            restored = await self.uow.partners.add(Partner.from_snapshot(kind, snapshot.origin))
            counts = await rewriter_for(kind, self.uow).backward(snapshot)
            await ledger.mark_reverted(record)

            await self.uow.commit()

        logger.info(
            f"Reverted fusion {fusion_id}: restored {restored.display_label!r} "
            f"transactions={counts.transactions} trips={counts.trips}",
            extra={"fusion_id": fusion_id, "partner_kind": kind.value},
        )

        if self.balance_hook is not None:
            await self.balance_hook.request_recalculation(
                kind, [record.origin_id, record.destination_id]
            )

        return RevertResultOutput(
            fusion_id=fusion_id,
            entity_restored=restored.display_label,
            transactions_restored=counts.transactions,
            trips_restored=counts.trips,
        )
