"""List fusion history use case."""

from typing import Optional

from haulbook.application.dto.fusion_dto import FusionHistoryOutput, FusionSummaryOutput
from haulbook.application.ports.outbound.unit_of_work_port import UnitOfWorkPort
from haulbook.application.services.fusion_ledger import FusionLedger
from haulbook.domain.value_objects.partner_kind import PartnerKind


class ListFusionHistoryUseCase:
    """Use case for browsing the fusion ledger."""

    def __init__(self, uow: UnitOfWorkPort):
        """
        Initialize use case.

        Args:
            uow: Unit of Work for managing transactions
        """
        self.uow = uow

    async def execute(
        self,
        kind: Optional[PartnerKind] = None,
        performed_by: Optional[str] = None,
        page: int = 1,
        page_size: int = 20,
    ) -> FusionHistoryOutput:
        """
        List fusions, most recent first.

        Args:
            kind: Only fusions of this partner kind
            performed_by: Only fusions requested by this operator
            page: Page number (1-indexed)
            page_size: Number of items per page

        Returns:
            FusionHistoryOutput with the page and total count
        """
        skip = (page - 1) * page_size

        async with self.uow:
            records, total = await FusionLedger(self.uow).history(
                kind=kind, performed_by=performed_by, skip=skip, limit=page_size
            )

        return FusionHistoryOutput(
            items=[FusionSummaryOutput.from_entity(record) for record in records],
            total=total,
            page=page,
            page_size=page_size,
        )
